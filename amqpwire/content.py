"""Splitting outgoing message content into header and body frames."""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterator

from .frames import FRAME_OVERHEAD
from .serialize import OutputBuffer

_log = logging.getLogger(__name__)

_NO_PROPERTIES = b"\x00\x00"


def usable_frame_max(frame_max: int) -> int:
    """Largest body payload per frame for a negotiated ``frame_max`` (0 means no limit)."""
    if frame_max == 0:
        frame_max = sys.maxsize
    if frame_max <= FRAME_OVERHEAD:
        raise ValueError(f"frame_max {frame_max} leaves no room for a payload")
    return frame_max - FRAME_OVERHEAD


def split_content(content: bytes, frame_max: int) -> Iterator[bytes]:
    """Yield consecutive pieces of ``content`` of at most ``frame_max`` bytes."""
    if frame_max <= 0:
        raise ValueError("frame_max must be positive")
    view = memoryview(bytes(content))
    for start in range(0, len(view), frame_max):
        yield bytes(view[start:start + frame_max])


class ContentSender:
    """Sends message content on one channel as a header followed by body frames.

    ``send`` receives one OutputBuffer per frame.
    """

    def __init__(self, channel_id: int, frame_max: int, send: Callable[[OutputBuffer], None]) -> None:
        self.channel_id = channel_id
        self.frame_max = usable_frame_max(frame_max)
        self._send = send
        self._buf = OutputBuffer()

    def send_content(self, content: bytes, class_id: int, properties: bytes = _NO_PROPERTIES) -> None:
        _log.debug(
            "sending content header on channel %d (class_id = %d, len = %d)",
            self.channel_id,
            class_id,
            len(content),
        )
        self._buf.push_content_header(self.channel_id, class_id, len(content), properties)
        self._send(self._buf.drain_into_new_buf())
        for piece in split_content(content, self.frame_max):
            _log.debug("sending content body frame on channel %d (len = %d)", self.channel_id, len(piece))
            self._buf.push_content_body(self.channel_id, piece)
            self._send(self._buf.drain_into_new_buf())