""" Python client for Bullfinch. A request is pushed onto a named queue
    on a shared queue service, a pool of Bullfinch workers picks it up, and
    the results are streamed back on a response queue unique to that
    request.

        import bullfinch

        client = bullfinch.connect('172.16.49.130')
        request = {'statement': 'some-query'}
        items = client.send('test-net-kestrel', request, suffix='foobar')
        for item in items:
            ...
"""

# Utility components.

from . import json
from . import config

# Submodules used by multiple other components.

from . import protocol
from . import transport
from . import stream

from .protocol import DecodeError, RequestBuilder
from .transport import SendError, TransportError

# Primary public-facing interfaces.

from .iterator import Iterator
from .client import Client, Results


def connect(host=None, port=None, backend=None, **options):
    """ Open a transport to the queue service at *host* and *port* and
        return a :class:`Client` using it. Any additional keyword arguments
        are passed to the :class:`Client`. The *backend* defaults to the
        one named in :mod:`bullfinch.config`.
    """

    connection = transport.connect(host, port, backend)
    return Client(connection, **options)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
