import pytest

from amqpwire.frames import (
    BodyFrame,
    HeaderFrame,
    HeartbeatFrame,
    MethodFrame,
    encode_frame,
    frame_size,
    parse_frame,
)
from amqpwire.serialize import OutputBuffer, SealableOutputBuffer


def split_frames(data):
    frames = []
    while data:
        size = frame_size(data)
        frames.append(parse_frame(data[:size]))
        data = data[size:]
    return frames


def test_protocol_header():
    assert bytes(OutputBuffer.with_protocol_header()) == b"AMQP\x00\x00\x09\x01"


def test_empty_buffer():
    buf = OutputBuffer()
    assert len(buf) == 0
    assert bytes(buf) == b""


def test_push_heartbeat():
    buf = OutputBuffer()
    buf.push_heartbeat()
    assert bytes(buf) == encode_frame(HeartbeatFrame())


def test_push_method_round_trip():
    buf = OutputBuffer()
    buf.push_method(2, 50, 10, b"\x00\x01")
    assert parse_frame(bytes(buf)) == MethodFrame(2, 50, 10, b"\x00\x01")


def test_push_content_header_and_body():
    buf = OutputBuffer()
    buf.push_content_header(1, 60, 3)
    buf.push_content_body(1, b"abc")
    assert split_frames(bytes(buf)) == [HeaderFrame(1, 60, 3), BodyFrame(1, b"abc")]


def test_drain_into_new_buf_moves_contents():
    buf = OutputBuffer()
    buf.push_method(1, 20, 40)
    before = bytes(buf)
    new = buf.drain_into_new_buf()
    assert bytes(new) == before
    assert len(buf) == 0


def test_drain_written_keeps_tail():
    buf = OutputBuffer.with_protocol_header()
    buf.push_heartbeat()
    original = bytes(buf)
    buf.drain_written(3)
    assert bytes(buf) == original[3:]


def test_drain_written_beyond_length_fails():
    buf = OutputBuffer()
    buf.push_heartbeat()
    with pytest.raises(ValueError):
        buf.drain_written(len(buf) + 1)


def test_append_moves_other():
    first = OutputBuffer.with_protocol_header()
    second = OutputBuffer()
    second.push_heartbeat()
    expected = bytes(first) + bytes(second)
    first.append(second)
    assert bytes(first) == expected
    assert len(second) == 0


def test_clear():
    buf = OutputBuffer.with_protocol_header()
    buf.clear()
    assert len(buf) == 0


def test_slicing_returns_bytes():
    buf = OutputBuffer.with_protocol_header()
    assert buf[4:] == bytes(buf)[4:]


def test_sealable_accepts_writes_until_sealed():
    sbuf = SealableOutputBuffer(OutputBuffer())
    sbuf.push_method(0, 10, 50)
    assert sbuf.sealed is False
    written = bytes(sbuf)
    sbuf.seal()
    assert sbuf.sealed is True
    sbuf.push_heartbeat()
    sbuf.push_method(0, 10, 51)
    other = OutputBuffer()
    other.push_heartbeat()
    sbuf.append(other)
    assert bytes(sbuf) == written


def test_sealable_append_before_seal():
    sbuf = SealableOutputBuffer(OutputBuffer.with_protocol_header())
    other = OutputBuffer()
    other.push_heartbeat()
    expected = bytes(sbuf) + bytes(other)
    sbuf.append(other)
    assert bytes(sbuf) == expected


def test_sealed_buffer_can_still_drain():
    sbuf = SealableOutputBuffer(OutputBuffer.with_protocol_header())
    sbuf.seal()
    original = bytes(sbuf)
    sbuf.drain_written(2)
    assert sbuf[0:] == original[2:]
    sbuf.clear()
    assert len(sbuf) == 0