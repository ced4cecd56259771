""" The :class:`Client` handles a complete exchange with a Bullfinch worker
    pool: JSON encoding of the request, the addition of a response queue,
    waiting for the response, optional confirmation of each message,
    decoding of the response, and deletion of the response queue.

    If you're expecting large numbers of results you might prefer
    :func:`Client.iterate`, which returns them a batch at a time instead of
    all at once.
"""

import logging

from . import config
from . import stream
from .iterator import Iterator
from .protocol import RequestBuilder
from .transport import SendError, TransportError

logger = logging.getLogger(__name__)


class Results(list):
    """ The list of decoded messages returned by :func:`Client.send`.

        :ivar eof: True if the stream ended with the EOF sentinel; False if
                   it ended because nothing arrived within the timeout, in
                   which case the results may be incomplete.
    """

    eof = False


class Client:
    """ Exchange requests and responses with a Bullfinch worker pool over
        the supplied *transport*, which must implement
        :class:`bullfinch.transport.Transport`.

        The response queue *prefix*, the poll *timeout* in milliseconds,
        and the default iterator *batch_size* all fall back to the values
        in :mod:`bullfinch.config` if not specified. If *confirm* is true
        every message received is acknowledged with the transport.
    """

    def __init__(self, transport, prefix=None, timeout=None, batch_size=None, confirm=False):

        if timeout is None:
            timeout = config.timeout

        if batch_size is None:
            batch_size = config.batch_size

        self.transport = transport
        self.builder = RequestBuilder(prefix)
        self.timeout = int(timeout)
        self.batch_size = int(batch_size)
        self.confirm = confirm


    @property
    def prefix(self):
        return self.builder.prefix


    def _push(self, queue, request, suffix, trace, deadline, expiration):
        """ Put the request on *queue* and return the name of the response
            queue to watch. Raises :class:`SendError` if the request could
            not be queued.
        """

        response_queue, envelope = self.builder.prepare(request, suffix, trace, deadline)

        try:
            sent = self.transport.put(queue, envelope, expiration)
        except TransportError as e:
            raise SendError('send aborted, failed to put request on ' + repr(queue)) from e

        if not sent:
            raise SendError('send aborted, failed to put request on ' + repr(queue))

        return response_queue


    def send(self, queue, request, suffix=None, trace=False, deadline=None, expiration=None):
        """ Send the *request* to the specified *queue* and await a response.
            The *request* should be a dictionary; the *suffix*, if any, will
            be appended to the response queue prefix. This allows you to
            create a unique response queue per request::

                # Response queue will be "response-net-kestrel-foobar"
                items = client.send('test-net-kestrel', request, 'foobar')

            Any messages sent in response (save the EOF message) are returned
            as a :class:`Results` list.

            If *trace* is true a UUID is attached to the request, which the
            workers include in their performance logging. The optional
            *deadline* is a :class:`datetime.datetime` by which the request
            should be processed. The optional *expiration* is the number of
            seconds this request should live in the queue before expiring.

            The response queue is deleted before returning, even if a
            response could not be decoded. Raises :class:`SendError` if the
            request could not be queued.
        """

        response_queue = self._push(queue, request, suffix, trace, deadline, expiration)

        results = Results()

        try:
            while True:
                value = stream.receive(self.transport, response_queue, self.timeout, self.confirm)

                if value is stream.END:
                    results.eof = True
                    break

                if value is stream.EMPTY:
                    break

                results.append(value)
        finally:
            stream.release(self.transport, response_queue)

        if not results.eof:
            logger.debug("no EOF on %s after %d results", response_queue, len(results))

        return results


    def iterate(self, queue, request, suffix=None, batch_size=None, trace=False, deadline=None, expiration=None):
        """ Send the *request* the same way as :func:`send`, but rather than
            waiting for the response, return an :class:`Iterator` that will
            retrieve it at most *batch_size* messages at a time.

            The caller is responsible for calling :func:`Iterator.finished`
            once they are done with the results.
        """

        response_queue = self._push(queue, request, suffix, trace, deadline, expiration)
        return Iterator(self, response_queue, batch_size)


# end of class Client


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
