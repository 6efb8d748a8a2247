"""Accumulate bytes from a non-blocking stream and split them into frames."""

from __future__ import annotations

import logging
from typing import Callable, Generic, Optional, TypeVar

from .errors import SocketReadError, UnexpectedSocketCloseError
from .frames import frame_size, parse_frame

MIN_READ = 4096

_log = logging.getLogger(__name__)

F = TypeVar("F")


class FrameBuffer(Generic[F]):
    """Buffers incoming data and hands each complete frame to a handler.

    ``parse_size`` returns the size of the next frame, or None when not enough
    data is buffered to know it. ``parse_frame`` is called with exactly that
    many bytes.
    """

    def __init__(
        self,
        parse_size: Callable[[bytearray], Optional[int]] = frame_size,
        parse_frame: Callable[[bytes], F] = parse_frame,
    ) -> None:
        self._parse_size = parse_size
        self._parse_frame = parse_frame
        self._buf = bytearray()

    def read_from(self, stream, handler: Callable[[F], None]) -> int:
        """Read until the stream would block, passing each frame to ``handler``.

        Returns the number of bytes read. Raises UnexpectedSocketCloseError on
        end of stream and SocketReadError on other I/O failures.
        """
        bytes_read = 0
        while True:
            size = self._parse_size(self._buf)
            reserve = MIN_READ
            if size is not None:
                if len(self._buf) >= size:
                    frame = self._parse_frame(bytes(self._buf[:size]))
                    handler(frame)
                    del self._buf[:size]
                    continue
                reserve = max(MIN_READ, size)

            try:
                chunk = stream.read(reserve)
            except BlockingIOError:
                return bytes_read
            except OSError as err:
                raise SocketReadError(err) from err
            if chunk is None:
                return bytes_read
            if not chunk:
                raise UnexpectedSocketCloseError()
            _log.debug("read %d bytes", len(chunk))
            self._buf += chunk
            bytes_read += len(chunk)