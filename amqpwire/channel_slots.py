"""Allocation of AMQP channel ids and storage of per-channel state."""

from __future__ import annotations

from typing import Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from .errors import ExhaustedChannelIdsError, UnavailableChannelIdError

T = TypeVar("T")
U = TypeVar("U")


class ChannelSlots(Generic[T]):
    """Maps open channel ids to their state and hands out unused ids.

    Fresh ids are handed out in increasing order; once ``channel_max`` is
    reached, previously freed ids are reused, most recently freed first.
    """

    def __init__(self) -> None:
        self._slots: Dict[int, T] = {}
        # Insertion-ordered set of ids that have been released.
        self._freed: Dict[int, None] = {}
        self._next_channel_id = 1
        self._channel_max = 0

    @property
    def next_channel_id(self) -> int:
        """The next never-allocated id that automatic allocation will try."""
        return self._next_channel_id

    @property
    def channel_max(self) -> int:
        return self._channel_max

    def set_channel_max(self, channel_max: int) -> None:
        """Set the highest usable channel id; only allowed before any channel opens."""
        if self._slots or self._freed:
            raise RuntimeError("channel_max should not be set after channels have been opened")
        self._channel_max = channel_max

    def get(self, channel_id: int) -> Optional[T]:
        return self._slots.get(channel_id)

    def insert(
        self,
        channel_id: Optional[int],
        make_entry: Callable[[int], Tuple[T, U]],
    ) -> U:
        """Reserve ``channel_id`` (or any free id if None) and store a new entry.

        ``make_entry`` is called with the chosen id and returns the entry to
        store together with a result that is passed back to the caller. If it
        raises, nothing is stored.
        """
        if channel_id is None:
            return self._insert_unused(make_entry)
        if channel_id > self._channel_max or channel_id in self._slots:
            raise UnavailableChannelIdError(channel_id)
        return self._store(channel_id, make_entry)

    def remove(self, channel_id: int) -> Optional[T]:
        """Remove and return the entry for ``channel_id``, or None if absent."""
        if channel_id not in self._slots:
            return None
        entry = self._slots.pop(channel_id)
        self._freed[channel_id] = None
        return entry

    def drain(self) -> List[Tuple[int, T]]:
        """Remove every entry, returning them as ``(channel_id, entry)`` pairs."""
        drained = list(self._slots.items())
        for channel_id, _ in drained:
            self._freed[channel_id] = None
        self._slots.clear()
        return drained

    def items(self) -> Iterator[Tuple[int, T]]:
        return iter(list(self._slots.items()))

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, channel_id: object) -> bool:
        return channel_id in self._slots

    def _store(self, channel_id: int, make_entry: Callable[[int], Tuple[T, U]]) -> U:
        entry, result = make_entry(channel_id)
        self._slots[channel_id] = entry
        self._freed.pop(channel_id, None)
        return result

    def _insert_unused(self, make_entry: Callable[[int], Tuple[T, U]]) -> U:
        # Ids chosen explicitly by callers may sit above the ones handed out
        # here, so skip over any that are occupied.
        while self._next_channel_id <= self._channel_max:
            channel_id = self._next_channel_id
            self._next_channel_id += 1
            if channel_id not in self._slots:
                return self._store(channel_id, make_entry)

        if not self._freed:
            raise ExhaustedChannelIdsError()
        channel_id, _ = self._freed.popitem()
        if channel_id in self._slots:
            raise RuntimeError("free channel id cannot be occupied")
        return self._store(channel_id, make_entry)