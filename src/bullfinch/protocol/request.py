""" Construction of the outgoing request envelope. The envelope is the
    caller's request with a little extra context attached: the name of the
    response queue the workers should write results to, and optionally a
    trace identifier and a processing deadline.
"""

import collections.abc
import datetime
import logging
import uuid

from .. import config
from .. import json
from . import fields

logger = logging.getLogger(__name__)


class RequestBuilder:
    """ Build request envelopes for a given response queue *prefix*. If no
        *prefix* is specified the configured default is used.
    """

    def __init__(self, prefix=None):

        if prefix is None:
            prefix = config.prefix

        self.prefix = prefix


    def queue_name(self, suffix=None):
        """ Return the response queue name for the optional *suffix*. The
            suffix is what keeps concurrent requests from reading each
            other's responses; it is up to the caller to choose one that
            is unique among the requests they have in flight.
        """

        name = self.prefix

        if suffix is not None:
            name += str(suffix)

        return name


    def prepare(self, payload, suffix=None, trace=False, deadline=None):
        """ Return a (queue name, serialized envelope) tuple for the request
            *payload*, which must be a mapping. The *payload* itself is left
            untouched; the extra fields are added to a copy.

            If *trace* is true a freshly generated UUID is attached, which
            the workers carry through their performance logging and into
            the response. A *deadline*, if specified, must be a
            :class:`datetime.datetime` or :class:`datetime.date`; it is
            attached in ISO 8601 form.
        """

        if not isinstance(payload, collections.abc.Mapping):
            raise TypeError('request must be a mapping, not ' + type(payload).__name__)

        envelope = dict(payload)

        name = self.queue_name(suffix)
        envelope[fields.RESPONSE_QUEUE] = name

        if trace:
            envelope[fields.TRACER] = str(uuid.uuid4())

        if deadline is not None:
            if not isinstance(deadline, datetime.date):
                raise TypeError('deadline must be a date or datetime, not ' + type(deadline).__name__)
            envelope[fields.PROCESS_BY] = deadline.isoformat()

        logger.debug("prepared request for response queue %s", name)
        return (name, json.dumps(envelope))


# end of class RequestBuilder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
