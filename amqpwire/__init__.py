"""AMQP 0-9-1 client building blocks: framing, channel ids, heartbeats and content assembly."""

__version__ = "0.1.0"

__all__ = [
    "channel_slots",
    "content",
    "content_collector",
    "errors",
    "frame_buffer",
    "frames",
    "heartbeats",
    "messages",
    "queue",
    "serialize",
]