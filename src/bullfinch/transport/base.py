"""Transport interface.

This is the (small) contract that queue transport implementations should
follow. It lives outside :mod:`bullfinch.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


# Transport agnostic exceptions

class TransportError(Exception):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """An operation on the queue service did not complete in time."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class SendError(TransportError):
    """A request could not be put on its queue; the exchange is aborted."""


class Transport(ABC):
    """Minimal contract for a named-queue service."""

    @abstractmethod
    def put(self, queue: str, payload: bytes, expiration: Optional[int] = None) -> bool:
        """Append *payload* to *queue*. *expiration* is in seconds."""

    @abstractmethod
    def get(self, queue: str, timeout: int) -> Optional[bytes]:
        """Return the next payload on *queue*, or None if nothing arrived
        within *timeout* milliseconds."""

    @abstractmethod
    def confirm(self, queue: str) -> bool:
        """Acknowledge the most recent payload received from *queue*."""

    @abstractmethod
    def delete(self, queue: str) -> bool:
        """Remove *queue* and anything still on it."""

    def close(self) -> None:
        """Tear down the underlying connection, if any."""

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()
