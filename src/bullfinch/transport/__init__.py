"""Queue transport implementations."""

from .base import (
    Transport,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    SendError,
)

from .. import config


def connect(host=None, port=None, backend=None, **kwargs) -> Transport:
    """Return a new transport for the named *backend*. The default backend
    is taken from the configuration (``BULLFINCH_TRANSPORT``)."""

    if backend is None:
        backend = config.transport

    if backend == "rabbitmq":
        from . import rabbitmq
        return rabbitmq.Transport(host, port, **kwargs)
    elif backend == "memory":
        from . import memory
        return memory.Transport(**kwargs)
    else:
        raise ValueError(f"unknown transport backend: {backend!r}")
