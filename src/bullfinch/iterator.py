""" Batched consumption of a Bullfinch response stream. An
    :class:`Iterator` is normally obtained from :func:`Client.iterate`
    rather than constructed directly.

    Typical usage::

        with client.iterate('test-net-kestrel', request, suffix='foobar') as results:
            for batch in results:
                for item in batch:
                    ...
"""

import logging

from . import stream

logger = logging.getLogger(__name__)


class Iterator:
    """ A cursor over the response queue *queue*, owned by the *client* that
        issued the request. Results are returned at most *batch_size* at a
        time; if *batch_size* is not specified the client's default is used.

        Once the stream ends, either by receiving the EOF sentinel or by
        waiting out the client timeout with nothing received, the iterator
        is done, and stays done. The two cases can be told apart after the
        fact with :attr:`timed_out`.

        The response queue is only deleted when :func:`finished` is called,
        which the consumer must do once they are through with the stream;
        using the iterator as a context manager takes care of that.

        :ivar timed_out: True if the stream ended without an EOF sentinel.
    """

    def __init__(self, client, queue, batch_size=None):

        if batch_size is None:
            batch_size = client.batch_size

        batch_size = int(batch_size)
        if batch_size < 1:
            raise ValueError('batch_size must be at least 1, not ' + str(batch_size))

        self.client = client
        self.queue = queue
        self.batch_size = batch_size
        self.timed_out = False

        self._done = False
        self._released = None


    def __iter__(self):
        return self


    def __next__(self):

        batch = self.next_batch()

        # A batch can come back empty on the final call, when the sentinel
        # is the first thing received; that's the end of iteration too.

        if not batch:
            raise StopIteration

        return batch


    def __enter__(self):
        return self


    def __exit__(self, *exc):
        self.finished()


    def _set_done(self, timed_out=False):
        if timed_out:
            self.timed_out = True
        self._done = True


    def _receive(self):
        client = self.client
        return stream.receive(client.transport, self.queue, client.timeout, client.confirm)


    def is_done(self):
        """ Return True if the stream is exhausted.
        """

        return self._done


    def get_more(self):
        """ Return the next batch of decoded messages, at most
            :attr:`batch_size` of them. If the batch is full the iterator
            remains active; if the stream ends first, whatever was gathered
            before the end is returned and the iterator is done. Once done,
            every call returns an empty list without touching the transport.
        """

        results = list()

        if self._done:
            return results

        while True:
            value = self._receive()

            if value is stream.END:
                self._set_done()
                break

            if value is stream.EMPTY:
                self._set_done(timed_out=True)
                break

            results.append(value)

            if len(results) >= self.batch_size:
                break

        return results


    def next_batch(self):
        """ Return the next batch, or None if the iterator is already done.
        """

        if self._done:
            return None

        return self.get_more()


    def all(self):
        """ Return every remaining message, disregarding :attr:`batch_size`.
            The iterator is done afterwards no matter how the stream ended.
        """

        results = list()

        if self._done:
            return results

        try:
            while True:
                value = self._receive()

                if value is stream.END:
                    break

                if value is stream.EMPTY:
                    self.timed_out = True
                    break

                results.append(value)
        finally:
            self._set_done()

        return results


    def finished(self):
        """ Release the response queue. Only the first call has any effect;
            later calls return the same result as the first. Returns True if
            the queue was deleted.

            The iterator is done afterwards; polling a deleted queue would
            only bring it back into existence.
        """

        self._done = True

        if self._released is None:
            self._released = stream.release(self.client.transport, self.queue)
        else:
            logger.debug("response queue %s already released", self.queue)

        return self._released


# end of class Iterator


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
