"""Queue declaration options and a handle for a declared queue."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class QueueDeclare:
    """Arguments of a queue.declare method."""

    queue: str
    passive: bool
    durable: bool
    exclusive: bool
    auto_delete: bool
    nowait: bool
    arguments: Dict[str, Any]
    ticket: int = 0


@dataclass
class QueueDelete:
    """Arguments of a queue.delete method."""

    queue: str
    if_unused: bool
    if_empty: bool
    nowait: bool
    ticket: int = 0


@dataclass
class QueueDeclareOptions:
    """Options passed to the server when declaring a queue; all false by default."""

    durable: bool = False
    exclusive: bool = False
    auto_delete: bool = False
    arguments: Dict[str, Any] = field(default_factory=dict)

    def to_declare(self, queue: str, passive: bool, nowait: bool) -> QueueDeclare:
        return QueueDeclare(
            queue=queue,
            passive=passive,
            durable=self.durable,
            exclusive=self.exclusive,
            auto_delete=self.auto_delete,
            nowait=nowait,
            arguments=dict(self.arguments),
        )


@dataclass(frozen=True)
class QueueDeleteOptions:
    """Options passed to the server when deleting a queue; all false by default."""

    if_unused: bool = False
    if_empty: bool = False

    def to_delete(self, queue: str, nowait: bool) -> QueueDelete:
        return QueueDelete(queue=queue, if_unused=self.if_unused, if_empty=self.if_empty, nowait=nowait)


class Queue:
    """Handle for a declared queue; operations are carried out by its channel."""

    def __init__(
        self,
        channel: Any,
        name: str,
        message_count: Optional[int] = None,
        consumer_count: Optional[int] = None,
    ) -> None:
        self._channel = channel
        self._name = name
        self._message_count = message_count
        self._consumer_count = consumer_count

    @property
    def name(self) -> str:
        """Queue name; assigned by the server if declared with an empty name."""
        return self._name

    @property
    def declared_message_count(self) -> Optional[int]:
        """Messages in the queue when declared, or None for a nowait declare."""
        return self._message_count

    @property
    def declared_consumer_count(self) -> Optional[int]:
        """Consumers on the queue when declared, or None for a nowait declare."""
        return self._consumer_count

    def get(self, no_ack: bool) -> Any:
        return self._channel.basic_get(self._name, no_ack)

    def consume(self, options: Any) -> Any:
        return self._channel.basic_consume(self._name, options)

    def bind(self, exchange: Any, routing_key: str, arguments: Optional[Dict[str, Any]] = None) -> Any:
        return self._channel.queue_bind(self._name, exchange.name, routing_key, arguments or {})

    def bind_nowait(
        self, exchange: Any, routing_key: str, arguments: Optional[Dict[str, Any]] = None
    ) -> Any:
        return self._channel.queue_bind_nowait(self._name, exchange.name, routing_key, arguments or {})

    def unbind(self, exchange: Any, routing_key: str, arguments: Optional[Dict[str, Any]] = None) -> Any:
        return self._channel.queue_unbind(self._name, exchange.name, routing_key, arguments or {})

    def purge(self) -> int:
        """Purge all messages; returns how many were purged."""
        return self._channel.queue_purge(self._name)

    def purge_nowait(self) -> None:
        self._channel.queue_purge_nowait(self._name)

    def delete(self, options: Optional[QueueDeleteOptions] = None) -> int:
        """Delete the queue; returns how many messages it held."""
        return self._channel.queue_delete(self._name, options or QueueDeleteOptions())

    def delete_nowait(self, options: Optional[QueueDeleteOptions] = None) -> None:
        self._channel.queue_delete_nowait(self._name, options or QueueDeleteOptions())

    def __repr__(self) -> str:
        return f"Queue(name={self._name!r})"