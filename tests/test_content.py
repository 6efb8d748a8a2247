import pytest

from amqpwire.content import ContentSender, split_content, usable_frame_max
from amqpwire.frames import FRAME_OVERHEAD, BodyFrame, HeaderFrame, parse_frame


def test_usable_frame_max_subtracts_overhead():
    assert usable_frame_max(4096) + FRAME_OVERHEAD == 4096


def test_usable_frame_max_zero_is_unlimited():
    assert usable_frame_max(0) > 2**31


def test_usable_frame_max_too_small():
    with pytest.raises(ValueError):
        usable_frame_max(FRAME_OVERHEAD)


@pytest.mark.parametrize("length", [0, 1, 9, 10, 11, 35])
def test_split_content_round_trip(length):
    content = bytes(range(length))
    pieces = list(split_content(content, 10))
    assert b"".join(pieces) == content
    assert all(0 < len(p) <= 10 for p in pieces)
    assert all(len(p) == 10 for p in pieces[:-1])


def test_split_content_rejects_zero():
    with pytest.raises(ValueError):
        list(split_content(b"abc", 0))


def _sent_frames(content, frame_max, properties=b"\x00\x00"):
    sent = []
    sender = ContentSender(5, frame_max, sent.append)
    sender.send_content(content, 60, properties)
    return [bytes(b) for b in sent]


def test_send_content_frames():
    content = bytes(range(50))
    raw = _sent_frames(content, 20)
    frames = [parse_frame(r) for r in raw]
    header, bodies = frames[0], frames[1:]
    assert header == HeaderFrame(5, 60, len(content), b"\x00\x00")
    assert all(isinstance(b, BodyFrame) and b.channel_id == 5 for b in bodies)
    assert b"".join(b.payload for b in bodies) == content
    assert all(len(r) <= 20 for r in raw[1:])


def test_send_empty_content_sends_only_header():
    frames = [parse_frame(r) for r in _sent_frames(b"", 20)]
    assert frames == [HeaderFrame(5, 60, 0, b"\x00\x00")]


def test_send_content_unlimited_frame_max_single_body():
    content = b"x" * 1000
    frames = [parse_frame(r) for r in _sent_frames(content, 0)]
    assert frames[1:] == [BodyFrame(5, content)]