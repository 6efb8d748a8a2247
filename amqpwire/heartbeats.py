"""Heartbeat timers for detecting idle connections in both directions."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

_log = logging.getLogger(__name__)

MAX_MISSED_SERVER_HEARTBEATS = 2

# Wakeups can be slightly early; count anything this close to expiry as expired.
_FUDGE = 0.005

V = TypeVar("V")


class HeartbeatState(Enum):
    STILL_RUNNING = "still_running"
    EXPIRED = "expired"


class HeartbeatKind(Enum):
    RX = "rx"
    TX = "tx"


@dataclass(eq=False)
class Timeout:
    """A scheduled timeout; pass it to ``Timer.cancel_timeout`` to cancel it."""

    deadline: float
    value: Any
    cancelled: bool = field(default=False, repr=False)


class Timer(Generic[V]):
    """A set of one-shot timeouts, each carrying a value, driven by a clock.

    Times are in seconds. ``clock`` defaults to ``time.monotonic``.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._heap: List[Tuple[float, int, Timeout]] = []
        self._counter = itertools.count()

    def now(self) -> float:
        return self._clock()

    def set_timeout(self, delay: float, value: V) -> Timeout:
        """Schedule ``value`` to be returned by ``poll`` after ``delay`` seconds."""
        if delay < 0:
            raise ValueError("timeout delay cannot be negative")
        timeout = Timeout(self._clock() + delay, value)
        heapq.heappush(self._heap, (timeout.deadline, next(self._counter), timeout))
        return timeout

    def cancel_timeout(self, timeout: Timeout) -> None:
        timeout.cancelled = True

    def next_deadline(self) -> Optional[float]:
        """Clock time of the earliest pending timeout, or None if there is none."""
        self._discard_cancelled()
        return self._heap[0][0] if self._heap else None

    def poll(self) -> Optional[V]:
        """Return the value of the earliest expired timeout, or None."""
        self._discard_cancelled()
        if self._heap and self._heap[0][0] <= self._clock():
            _, _, timeout = heapq.heappop(self._heap)
            timeout.cancelled = True
            return timeout.value
        return None

    def _discard_cancelled(self) -> None:
        while self._heap and self._heap[0][2].cancelled:
            heapq.heappop(self._heap)


class Heartbeat(Generic[V]):
    """Tracks activity in one direction and re-arms its timeout when fired."""

    def __init__(self, value: V, interval: float, timeout: Timeout, clock: Callable[[], float]) -> None:
        self.value = value
        self.interval = interval
        self._timeout = timeout
        self._clock = clock
        self._last = clock()

    @classmethod
    def start(cls, value: V, interval: float, timer: Timer[V]) -> "Heartbeat[V]":
        if interval <= 0:
            raise ValueError("timer interval cannot be 0")
        timeout = timer.set_timeout(interval, value)
        return cls(value, interval, timeout, timer.now)

    def record_activity(self) -> None:
        self._last = self._clock()

    def fire(self, timer: Timer[V]) -> HeartbeatState:
        """Handle the timeout firing and schedule the next one.

        If there was no activity for a full interval, reports EXPIRED and
        re-arms for a full interval; otherwise re-arms for the remaining time.
        """
        timer.cancel_timeout(self._timeout)
        elapsed = self._clock() - self._last
        if self.interval <= elapsed + _FUDGE:
            when, state = self.interval, HeartbeatState.EXPIRED
        else:
            when, state = self.interval - elapsed, HeartbeatState.STILL_RUNNING
        _log.debug(
            "setting new heartbeat timer %r for %.3fs (interval = %.3fs, elapsed = %.3fs)",
            self.value,
            when,
            self.interval,
            elapsed,
        )
        self._timeout = timer.set_timeout(when, self.value)
        return state


class HeartbeatTimers:
    """The receive and send heartbeats of a connection, sharing one timer."""

    def __init__(self, timer: Optional[Timer[HeartbeatKind]] = None) -> None:
        self.timer: Timer[HeartbeatKind] = timer if timer is not None else Timer()
        self._rx: Optional[Heartbeat[HeartbeatKind]] = None
        self._tx: Optional[Heartbeat[HeartbeatKind]] = None

    @property
    def started(self) -> bool:
        return self._rx is not None

    def start(self, interval: float) -> None:
        """Start both heartbeats; the server may miss a couple before we give up."""
        if self.started:
            raise RuntimeError("heartbeat timer started multiple times")
        self._rx = Heartbeat.start(
            HeartbeatKind.RX, MAX_MISSED_SERVER_HEARTBEATS * interval, self.timer
        )
        self._tx = Heartbeat.start(HeartbeatKind.TX, interval, self.timer)

    def record_rx_activity(self) -> None:
        if self._rx is not None:
            self._rx.record_activity()

    def record_tx_activity(self) -> None:
        if self._tx is not None:
            self._tx.record_activity()

    def fire_rx(self) -> HeartbeatState:
        if self._rx is None:
            raise RuntimeError("fire_rx called on empty heartbeats")
        return self._rx.fire(self.timer)

    def fire_tx(self) -> HeartbeatState:
        if self._tx is None:
            raise RuntimeError("fire_tx called on empty heartbeats")
        return self._tx.fire(self.timer)