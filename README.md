# amqpwire

Building blocks for an AMQP 0-9-1 client. The package is written in pure
Python and needs no third-party libraries.

## Modules

- `amqpwire.frames` holds the frame types `HeartbeatFrame`, `MethodFrame`,
  `HeaderFrame` and `BodyFrame`, the `FrameType` enum, and three functions:
  - `frame_size(data)` gives the full size of the next frame. It returns
    `None` until the 7-byte header has arrived.
  - `parse_frame(data)` parses exactly one frame. It raises
    `MalformedFrameError` if the frame is bad.
  - `encode_frame(frame)` returns the frame's wire bytes.

  Method arguments and content-header properties are kept as raw bytes.
- `amqpwire.serialize` holds two buffers for outgoing frames:
  - `OutputBuffer` collects serialized frames. `with_protocol_header()`
    makes one that starts with `AMQP\x00\x00\x09\x01`. Its methods are
    `push_heartbeat`, `push_method`, `push_content_header`,
    `push_content_body`, `append`, `drain_into_new_buf`, `drain_written` and
    `clear`. `len()` and `bytes()` work on it.
  - `SealableOutputBuffer` wraps an `OutputBuffer`. After `seal()`, it
    silently ignores any further heartbeats, methods and appends.
- `amqpwire.frame_buffer` has `FrameBuffer`. It reads from a non-blocking
  stream and passes each complete frame to a handler. The size and parse
  functions can be replaced; by default they are `frame_size` and
  `parse_frame`.
- `amqpwire.channel_slots` has `ChannelSlots`. It hands out channel ids from 1
  up to `channel_max`. After that it reuses freed ids, most recently freed
  first. It raises `UnavailableChannelIdError` or `ExhaustedChannelIdsError`
  when it cannot give an id.
- `amqpwire.heartbeats` has the following:
  - `Timer`, a heap of one-shot timeouts. You can inject its clock.
  - `Heartbeat`, which reports `HeartbeatState.EXPIRED` or
    `HeartbeatState.STILL_RUNNING` when fired.
  - `HeartbeatTimers`, which pairs a receive heartbeat and a send heartbeat.
    The receive heartbeat runs for twice the interval.
- `amqpwire.content_collector` has `ContentCollector`. It assembles a deliver,
  return or get-ok method, its content header and its body frames into a
  `CollectedContent`. If a frame arrives out of order, it raises
  `FrameUnexpectedError`.
- `amqpwire.content` holds three items:
  - `usable_frame_max` subtracts the 8 bytes of frame overhead from the
    negotiated size. A size of 0 means no limit.
  - `split_content` cuts a body into pieces.
  - `ContentSender` emits a content header and then body frames for a
    channel.
- `amqpwire.messages` holds two dataclasses:
  - `Return`, for a returned message.
  - `Get`. Its `ack`, `ack_multiple`, `nack`, `nack_multiple` and `reject`
    methods pass the call on to its `delivery`.
- `amqpwire.queue` holds `QueueDeclareOptions` and `QueueDeleteOptions`, which
  build `QueueDeclare` and `QueueDelete` argument records. It also holds
  `Queue`, a handle that passes its operations to a channel object you
  supply.
- `amqpwire.errors` holds `AmqpError` and its subclasses.

## Reading frames

The stream must have a `read(n)` method. That method returns bytes, returns
`b""` at end of stream, and either returns `None` or raises
`BlockingIOError` when it would block.

```python
from amqpwire.frame_buffer import FrameBuffer

buffer = FrameBuffer()
received = []
bytes_read = buffer.read_from(stream, received.append)
```

`read_from` keeps reading until the stream would block, and returns the
number of bytes it read. It raises these errors:

- `UnexpectedSocketCloseError` at end of stream.
- `MalformedFrameError` for a frame that cannot be parsed.
- `SocketReadError` for any other `OSError`.

## Writing frames

```python
from amqpwire.serialize import OutputBuffer

out = OutputBuffer.with_protocol_header()
out.push_heartbeat()
sock.sendall(bytes(out))
out.clear()
```

## What this package does not do

The package does not cover:

- Opening a connection or running an I/O loop.
- The connection handshake (authentication, tuning) and TLS.
- Encoding or decoding the fields of individual methods or content properties.

`Queue` and `Get` do no networking themselves. They call methods such as
`basic_get`, `queue_bind` or `ack` on objects you pass in.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```