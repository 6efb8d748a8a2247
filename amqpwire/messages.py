"""Messages handed back to clients: returned publishes and get results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Return:
    """An unpublished message returned to the publishing channel."""

    reply_code: int
    reply_text: str
    exchange: str
    routing_key: str
    content: bytes
    properties: Any

    @classmethod
    def from_method(cls, method: Any, content: bytes, properties: Any) -> "Return":
        """Build from a basic.return method plus its collected content."""
        return cls(
            reply_code=method.reply_code,
            reply_text=method.reply_text,
            exchange=method.exchange,
            routing_key=method.routing_key,
            content=bytes(content),
            properties=properties,
        )


@dataclass
class Get:
    """A message delivered in response to a get request."""

    delivery: Any
    message_count: int

    def ack(self, channel: Any) -> Any:
        return self.delivery.ack(channel)

    def ack_multiple(self, channel: Any) -> Any:
        return self.delivery.ack_multiple(channel)

    def nack(self, channel: Any, requeue: bool) -> Any:
        return self.delivery.nack(channel, requeue)

    def nack_multiple(self, channel: Any, requeue: bool) -> Any:
        return self.delivery.nack_multiple(channel, requeue)

    def reject(self, channel: Any, requeue: bool) -> Any:
        return self.delivery.reject(channel, requeue)