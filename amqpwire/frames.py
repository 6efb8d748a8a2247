"""AMQP 0-9-1 frame model with encoding and parsing."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Optional, Union

from .errors import MalformedFrameError

FRAME_END = 0xCE
FRAME_OVERHEAD = 8
_FRAME_HEADER = struct.Struct(">BHI")
_METHOD_PREFIX = struct.Struct(">HH")
_CONTENT_HEADER_PREFIX = struct.Struct(">HHQ")
_NO_PROPERTIES = b"\x00\x00"


class FrameType(IntEnum):
    METHOD = 1
    HEADER = 2
    BODY = 3
    HEARTBEAT = 8


@dataclass(frozen=True)
class HeartbeatFrame:
    """A heartbeat frame; normally sent on channel 0."""

    channel_id: int = 0
    frame_type: ClassVar[FrameType] = FrameType.HEARTBEAT

    def _payload(self) -> bytes:
        return b""


@dataclass(frozen=True)
class MethodFrame:
    """A method frame; ``arguments`` holds the encoded method arguments."""

    channel_id: int
    class_id: int
    method_id: int
    arguments: bytes = b""
    frame_type: ClassVar[FrameType] = FrameType.METHOD

    def _payload(self) -> bytes:
        return _METHOD_PREFIX.pack(self.class_id, self.method_id) + bytes(self.arguments)


@dataclass(frozen=True)
class HeaderFrame:
    """A content header frame; ``properties`` holds the flags and property list."""

    channel_id: int
    class_id: int
    body_size: int
    properties: bytes = _NO_PROPERTIES
    frame_type: ClassVar[FrameType] = FrameType.HEADER

    def _payload(self) -> bytes:
        prefix = _CONTENT_HEADER_PREFIX.pack(self.class_id, 0, self.body_size)
        return prefix + bytes(self.properties)


@dataclass(frozen=True)
class BodyFrame:
    """A content body frame."""

    channel_id: int
    payload: bytes
    frame_type: ClassVar[FrameType] = FrameType.BODY

    def _payload(self) -> bytes:
        return bytes(self.payload)


Frame = Union[HeartbeatFrame, MethodFrame, HeaderFrame, BodyFrame]


def frame_size(data) -> Optional[int]:
    """Return the full size of the frame at the start of ``data``, or None if unknown yet."""
    if len(data) < _FRAME_HEADER.size:
        return None
    _, _, size = _FRAME_HEADER.unpack_from(data)
    return size + FRAME_OVERHEAD


def encode_frame(frame: Frame) -> bytes:
    """Serialize a frame to its wire form."""
    try:
        payload = frame._payload()
        header = _FRAME_HEADER.pack(frame.frame_type, frame.channel_id, len(payload))
    except struct.error as err:
        raise ValueError(f"cannot encode {frame!r}: {err}") from err
    return header + payload + bytes((FRAME_END,))


def parse_frame(data) -> Frame:
    """Parse exactly one frame occupying all of ``data``."""
    data = bytes(data)
    if len(data) < FRAME_OVERHEAD:
        raise MalformedFrameError()
    type_id, channel_id, size = _FRAME_HEADER.unpack_from(data)
    if size + FRAME_OVERHEAD != len(data) or data[-1] != FRAME_END:
        raise MalformedFrameError()
    try:
        frame_type = FrameType(type_id)
    except ValueError:
        raise MalformedFrameError() from None
    payload = data[_FRAME_HEADER.size:-1]

    if frame_type is FrameType.HEARTBEAT:
        if payload:
            raise MalformedFrameError()
        return HeartbeatFrame(channel_id)
    if frame_type is FrameType.METHOD:
        if len(payload) < _METHOD_PREFIX.size:
            raise MalformedFrameError()
        class_id, method_id = _METHOD_PREFIX.unpack_from(payload)
        return MethodFrame(channel_id, class_id, method_id, payload[_METHOD_PREFIX.size:])
    if frame_type is FrameType.HEADER:
        if len(payload) < _CONTENT_HEADER_PREFIX.size + 2:
            raise MalformedFrameError()
        class_id, _weight, body_size = _CONTENT_HEADER_PREFIX.unpack_from(payload)
        return HeaderFrame(
            channel_id, class_id, body_size, payload[_CONTENT_HEADER_PREFIX.size:]
        )
    return BodyFrame(channel_id, payload)