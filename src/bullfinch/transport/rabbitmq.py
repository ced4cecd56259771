"""RabbitMQ queue transport.

Named queues map directly onto RabbitMQ queues, addressed through the
default exchange. Queues are declared on first use, so a response queue
comes into existence when either the client or a worker first touches it.
"""

from __future__ import annotations

import threading
import time
from typing import Dict, Optional, Set

import pika
import pika.exceptions

from .. import config
from .base import Transport as BaseTransport
from .base import TransportConnectionError, TransportError


def _broker_params(host: str, port: int) -> pika.ConnectionParameters:
    return pika.ConnectionParameters(
        host=host,
        port=port,
        heartbeat=600,
        blocked_connection_timeout=300,
    )


class Transport(BaseTransport):
    """Put and get payloads on a RabbitMQ broker.

    A :class:`pika.BlockingConnection` must not be used from more than one
    thread at a time; every channel operation here is serialized with a
    lock, so one instance can be shared by several clients.

    With *auto_ack* (the default) a message is acknowledged as soon as it
    is received, and :meth:`confirm` does nothing. Without it, a message
    stays unacknowledged until :meth:`confirm` is called for its queue.
    """

    poll_interval = 0.05

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        auto_ack: bool = True,
        durable: bool = False,
    ):
        self.host = host if host is not None else config.host
        self.port = int(port) if port is not None else config.port
        self.auto_ack = auto_ack
        self.durable = durable

        self._lock = threading.Lock()
        self._declared: Set[str] = set()
        self._tags: Dict[str, int] = {}

        try:
            self._connection = pika.BlockingConnection(
                _broker_params(self.host, self.port)
            )
            self._channel = self._connection.channel()
        except pika.exceptions.AMQPError as e:
            raise TransportConnectionError(
                f"cannot connect to AMQP broker at {self.host}:{self.port}: {e!r}"
            ) from e

    def _declare(self, queue: str) -> None:
        if queue in self._declared:
            return
        self._channel.queue_declare(queue=queue, durable=self.durable)
        self._declared.add(queue)

    def put(self, queue: str, payload: bytes, expiration: Optional[int] = None) -> bool:
        properties = None
        if expiration:
            # RabbitMQ wants the per-message TTL as a string of milliseconds.
            properties = pika.BasicProperties(expiration=str(int(expiration) * 1000))

        with self._lock:
            try:
                self._declare(queue)
                self._channel.basic_publish(
                    exchange="",
                    routing_key=queue,
                    body=payload,
                    properties=properties,
                )
            except pika.exceptions.AMQPError as e:
                raise TransportError(f"put to {queue!r} failed: {e!r}") from e

        return True

    def get(self, queue: str, timeout: int) -> Optional[bytes]:
        deadline = time.monotonic() + timeout / 1000.0

        while True:
            with self._lock:
                try:
                    self._declare(queue)
                    method, _properties, body = self._channel.basic_get(
                        queue=queue, auto_ack=self.auto_ack
                    )
                except pika.exceptions.AMQPError as e:
                    raise TransportError(f"get from {queue!r} failed: {e!r}") from e

                if method is not None:
                    if not self.auto_ack:
                        self._tags[queue] = method.delivery_tag
                    return body

                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return None

                # Sleeping through the connection keeps heartbeats flowing.
                self._connection.sleep(min(self.poll_interval, remaining))

    def confirm(self, queue: str) -> bool:
        with self._lock:
            tag = self._tags.pop(queue, None)
            if tag is None:
                return True
            try:
                self._channel.basic_ack(delivery_tag=tag)
            except pika.exceptions.AMQPError as e:
                raise TransportError(f"confirm on {queue!r} failed: {e!r}") from e
        return True

    def delete(self, queue: str) -> bool:
        with self._lock:
            self._declared.discard(queue)
            self._tags.pop(queue, None)
            try:
                self._channel.queue_delete(queue=queue)
            except pika.exceptions.AMQPError as e:
                raise TransportError(f"delete of {queue!r} failed: {e!r}") from e
        return True

    def close(self) -> None:
        with self._lock:
            if self._connection.is_open:
                self._connection.close()
