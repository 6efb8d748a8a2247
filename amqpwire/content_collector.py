"""Reassembly of content-bearing methods from method, header and body frames."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .errors import FrameUnexpectedError
from .messages import Return


class ContentKind(Enum):
    DELIVERY = "delivery"
    RETURN = "return"
    GET = "get"


@dataclass
class CollectedContent:
    """A content-bearing method together with its complete body and properties."""

    kind: ContentKind
    channel_id: int
    method: Any
    content: bytes
    properties: Any

    def as_return(self) -> Return:
        """Build a Return from collected basic.return content."""
        if self.kind is not ContentKind.RETURN:
            raise ValueError(f"cannot build a Return from {self.kind.value} content")
        return Return.from_method(self.method, self.content, self.properties)


class ContentCollector:
    """Collects one piece of content at a time on a single channel.

    A start method (deliver, return or get-ok) must be followed by a content
    header and then body frames until the announced size is reached. Any frame
    out of that order raises FrameUnexpectedError and resets the collector.
    """

    def __init__(self, channel_id: int) -> None:
        self.channel_id = channel_id
        self._reset()

    @property
    def in_progress(self) -> bool:
        return self._kind is not None

    def _reset(self) -> None:
        self._kind: Optional[ContentKind] = None
        self._start: Any = None
        self._body_size: Optional[int] = None
        self._properties: Any = None
        self._buf = bytearray()

    def _begin(self, kind: ContentKind, start: Any) -> None:
        if self._kind is not None:
            self._reset()
            raise FrameUnexpectedError()
        self._kind = kind
        self._start = start

    def collect_deliver(self, deliver: Any) -> None:
        self._begin(ContentKind.DELIVERY, deliver)

    def collect_return(self, return_method: Any) -> None:
        self._begin(ContentKind.RETURN, return_method)

    def collect_get(self, get_ok: Any) -> None:
        self._begin(ContentKind.GET, get_ok)

    def _finish(self, content: bytes, properties: Any) -> CollectedContent:
        assert self._kind is not None
        done = CollectedContent(self._kind, self.channel_id, self._start, content, properties)
        self._reset()
        return done

    def collect_header(self, body_size: int, properties: Any) -> Optional[CollectedContent]:
        """Accept a content header; returns the content if it has an empty body."""
        if self._kind is None or self._body_size is not None:
            self._reset()
            raise FrameUnexpectedError()
        if body_size == 0:
            return self._finish(b"", properties)
        self._body_size = body_size
        self._properties = properties
        return None

    def collect_body(self, body: bytes) -> Optional[CollectedContent]:
        """Accept a body frame; returns the content once the body is complete."""
        if self._kind is None or self._body_size is None:
            self._reset()
            raise FrameUnexpectedError()
        self._buf += body
        if len(self._buf) == self._body_size:
            return self._finish(bytes(self._buf), self._properties)
        if len(self._buf) < self._body_size:
            return None
        self._reset()
        raise FrameUnexpectedError()