""" Helpers shared by :class:`bullfinch.Client` and
    :class:`bullfinch.Iterator` for consuming a response queue one message
    at a time, and for releasing the queue once consumption is over.
"""

import logging

from .protocol import decode
from .transport import TransportError

logger = logging.getLogger(__name__)


class Marker:
    """ A named placeholder returned by :func:`receive` in lieu of a decoded
        message. A decoded message can be any JSON value, including null,
        so None cannot serve this purpose.
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return '<' + self.name + '>'


EMPTY = Marker('EMPTY')
END = Marker('END')


def receive(transport, queue, timeout, confirm=False):
    """ Wait up to *timeout* milliseconds for the next message on *queue*.
        Returns the decoded message, :data:`END` if the message was the EOF
        sentinel, or :data:`EMPTY` if nothing arrived in time. An empty
        payload is treated the same as no payload at all.

        If *confirm* is true the message is acknowledged with the transport
        before it is decoded, whether or not it turns out to be decodable.
        Decode failures are raised as :class:`bullfinch.DecodeError`.
    """

    raw = transport.get(queue, timeout)

    if raw is None or raw == b'':
        logger.debug("nothing on %s after %d ms", queue, timeout)
        return EMPTY

    if confirm:
        transport.confirm(queue)

    value = decode.decode(raw)

    if decode.is_eof(value):
        logger.debug("end of stream on %s", queue)
        return END

    return value


def release(transport, queue):
    """ Delete the response *queue*. Failure is logged rather than raised;
        the results have already been gathered, and a stray queue on the
        transport is not the caller's problem to handle. Returns True if the
        queue was deleted.
    """

    try:
        deleted = transport.delete(queue)
    except TransportError as e:
        logger.warning("failed to delete response queue %s: %s", queue, e)
        return False

    if not deleted:
        logger.warning("failed to delete response queue %s", queue)
        return False

    return True


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
