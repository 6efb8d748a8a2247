"""Exceptions raised while reading, parsing and routing AMQP frames."""

from __future__ import annotations


class AmqpError(Exception):
    """Base class for every error raised by this package."""

    default_message = "AMQP error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class MalformedFrameError(AmqpError):
    """Data received from the server is not a valid AMQP frame."""

    default_message = "received malformed data - expected AMQP frame"


class UnexpectedSocketCloseError(AmqpError):
    """The peer closed the socket while more data was expected."""

    default_message = "underlying socket closed unexpectedly"


class SocketReadError(AmqpError):
    """Reading from the underlying socket failed."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"I/O error reading socket: {error}")


class FrameUnexpectedError(AmqpError):
    """A frame arrived that is not valid in the current protocol state."""

    default_message = "AMQP protocol error - received unexpected frame"


class UnavailableChannelIdError(AmqpError):
    """A requested channel id is out of range or already in use."""

    def __init__(self, channel_id: int) -> None:
        self.channel_id = channel_id
        super().__init__(f"requested channel id ({channel_id}) is unavailable")


class ExhaustedChannelIdsError(AmqpError):
    """Every channel id allowed by the server is in use."""

    default_message = "no more channel ids are available"