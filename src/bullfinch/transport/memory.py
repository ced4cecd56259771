"""In-process queue transport.

Queues are plain :class:`queue.Queue` instances created on first use, the
same way a queue service creates a named queue the first time it is
written to or read from. Useful for tests, and for deployments where the
workers run as threads in the same process as the client.
"""

from __future__ import annotations

import queue as queuemodule
import threading
import time
from typing import Dict, Optional, Tuple

from .base import Transport as BaseTransport


class Transport(BaseTransport):
    """Named queues held in memory. Safe to share between threads."""

    def __init__(self) -> None:
        self._queues: Dict[str, queuemodule.Queue] = {}
        self._lock = threading.Lock()

    def _queue(self, name: str) -> queuemodule.Queue:
        with self._lock:
            q = self._queues.get(name)
            if q is None:
                q = queuemodule.Queue()
                self._queues[name] = q
            return q

    def put(self, queue: str, payload: bytes, expiration: Optional[int] = None) -> bool:
        expires: Optional[float] = None
        if expiration:
            expires = time.monotonic() + expiration

        self._queue(queue).put((expires, payload))
        return True

    def get(self, queue: str, timeout: int) -> Optional[bytes]:
        q = self._queue(queue)
        deadline = time.monotonic() + timeout / 1000.0

        while True:
            remaining = deadline - time.monotonic()
            try:
                if remaining <= 0:
                    entry: Tuple[Optional[float], bytes] = q.get_nowait()
                else:
                    entry = q.get(timeout=remaining)
            except queuemodule.Empty:
                return None

            expires, payload = entry
            if expires is not None and expires < time.monotonic():
                # Expired while waiting on the queue; skip it.
                continue
            return payload

    def confirm(self, queue: str) -> bool:
        # Messages are removed from the queue as they are read.
        return True

    def delete(self, queue: str) -> bool:
        with self._lock:
            self._queues.pop(queue, None)
        return True

    def pending(self, queue: str) -> int:
        """Return the approximate number of payloads waiting on *queue*."""
        with self._lock:
            q = self._queues.get(queue)
        if q is None:
            return 0
        return q.qsize()

    def __contains__(self, queue: str) -> bool:
        with self._lock:
            return queue in self._queues
