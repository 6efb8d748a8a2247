import pytest

from amqpwire.channel_slots import ChannelSlots
from amqpwire.errors import ExhaustedChannelIdsError, UnavailableChannelIdError


def ident(channel_id):
    return channel_id, None


def with_channel_max(channel_max):
    cs = ChannelSlots()
    cs.set_channel_max(channel_max)
    return cs


def test_set_channel_max_after_insert_raises():
    cs = with_channel_max(4)
    cs.insert(1, ident)
    with pytest.raises(RuntimeError):
        cs.set_channel_max(4)


def test_set_channel_max_after_insert_and_remove_raises():
    cs = with_channel_max(4)
    cs.insert(1, ident)
    assert cs.remove(1) == 1
    with pytest.raises(RuntimeError):
        cs.set_channel_max(4)


def test_insert_channel_above_max_fails():
    cs = with_channel_max(4)
    with pytest.raises(UnavailableChannelIdError) as info:
        cs.insert(5, ident)
    assert info.value.channel_id == 5


def test_insert_taken_id_fails():
    cs = with_channel_max(4)
    cs.insert(1, ident)
    with pytest.raises(UnavailableChannelIdError) as info:
        cs.insert(1, ident)
    assert info.value.channel_id == 1


def test_insert_finds_never_used_ids():
    cs = with_channel_max(4)
    cs.insert(1, ident)
    cs.insert(2, ident)
    assert cs.next_channel_id == 1

    cs.insert(None, ident)
    assert cs.get(3) == 3
    assert cs.next_channel_id == 4


def test_insert_finds_freed_ids():
    cs = with_channel_max(4)
    for i in range(1, 5):
        cs.insert(i, ident)
    assert cs.remove(2) == 2
    assert cs.get(2) is None
    cs.insert(None, ident)
    assert cs.get(2) == 2


def test_insert_fails_if_all_available_ids_taken():
    cs = with_channel_max(4)
    for i in range(1, 5):
        cs.insert(i, ident)
    with pytest.raises(ExhaustedChannelIdsError):
        cs.insert(None, ident)


def test_insert_returns_result_of_make_entry():
    cs = with_channel_max(4)
    result = cs.insert(None, lambda cid: ("entry", ("handle", cid)))
    assert result == ("handle", 1)
    assert cs.get(1) == "entry"


def test_failed_make_entry_stores_nothing():
    cs = with_channel_max(4)

    def failing(cid):
        raise UnavailableChannelIdError(cid)

    with pytest.raises(UnavailableChannelIdError):
        cs.insert(2, failing)
    assert 2 not in cs
    assert len(cs) == 0


def test_remove_missing_returns_none():
    cs = with_channel_max(4)
    assert cs.remove(3) is None


def test_drain_empties_and_frees_ids():
    cs = with_channel_max(2)
    cs.insert(None, ident)
    cs.insert(None, ident)
    drained = cs.drain()
    assert sorted(drained) == [(1, 1), (2, 2)]
    assert len(cs) == 0
    assert cs.items is not None and list(cs.items()) == []
    reused = {cs.insert(None, lambda cid: (cid, cid)) for _ in range(2)}
    assert reused == {1, 2}


def test_items_lists_entries():
    cs = with_channel_max(4)
    cs.insert(3, ident)
    cs.insert(1, ident)
    assert sorted(cs.items()) == [(1, 1), (3, 3)]