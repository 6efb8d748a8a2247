"""Buffers of serialized outgoing frames."""

from __future__ import annotations

from .frames import (
    BodyFrame,
    HeaderFrame,
    HeartbeatFrame,
    MethodFrame,
    encode_frame,
)

PROTOCOL_HEADER = b"AMQP\x00\x00\x09\x01"
_NO_PROPERTIES = b"\x00\x00"


class OutputBuffer:
    """Bytes waiting to be written to the socket; may hold many frames."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(data)

    @classmethod
    def with_protocol_header(cls) -> "OutputBuffer":
        """A buffer that starts with the AMQP 0-9-1 protocol header."""
        return cls(PROTOCOL_HEADER)

    def push_heartbeat(self) -> None:
        self._data += encode_frame(HeartbeatFrame())

    def push_method(self, channel_id: int, class_id: int, method_id: int, arguments: bytes = b"") -> None:
        self._data += encode_frame(MethodFrame(channel_id, class_id, method_id, bytes(arguments)))

    def push_content_header(
        self, channel_id: int, class_id: int, length: int, properties: bytes = _NO_PROPERTIES
    ) -> None:
        self._data += encode_frame(HeaderFrame(channel_id, class_id, length, bytes(properties)))

    def push_content_body(self, channel_id: int, content: bytes) -> None:
        self._data += encode_frame(BodyFrame(channel_id, bytes(content)))

    def drain_into_new_buf(self) -> "OutputBuffer":
        """Move all pending bytes into a new buffer, leaving this one empty."""
        new = OutputBuffer(self._data)
        self._data.clear()
        return new

    def drain_written(self, n: int) -> None:
        """Discard the first ``n`` bytes, which have been written."""
        if n < 0 or n > len(self._data):
            raise ValueError(f"cannot drain {n} bytes from a buffer of {len(self._data)}")
        del self._data[:n]

    def append(self, other: "OutputBuffer") -> None:
        """Move the contents of ``other`` onto the end of this buffer."""
        self._data += other._data
        other._data.clear()

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __getitem__(self, index) -> bytes:
        if isinstance(index, slice):
            return bytes(self._data[index])
        return self._data[index]

    def __repr__(self) -> str:
        return f"OutputBuffer({bytes(self._data)!r})"


class SealableOutputBuffer:
    """An output buffer that silently drops new frames once sealed."""

    __slots__ = ("_buf", "_sealed")

    def __init__(self, buf: OutputBuffer | None = None) -> None:
        self._buf = buf if buf is not None else OutputBuffer()
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def push_heartbeat(self) -> None:
        if not self._sealed:
            self._buf.push_heartbeat()

    def push_method(self, channel_id: int, class_id: int, method_id: int, arguments: bytes = b"") -> None:
        if not self._sealed:
            self._buf.push_method(channel_id, class_id, method_id, arguments)

    def append(self, other: OutputBuffer) -> None:
        if not self._sealed:
            self._buf.append(other)

    def drain_written(self, n: int) -> None:
        self._buf.drain_written(n)

    def clear(self) -> None:
        self._buf.clear()

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return bytes(self._buf)

    def __getitem__(self, index) -> bytes:
        return self._buf[index]