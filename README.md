# rtskit

Small, dependency-free building blocks for the client side of a lockstep
real-time strategy game.

## What is inside

- `rtskit.errors`: `InvariantError` and `check(condition, message)`, which
  raises `InvariantError` with the message when the condition is false.
- `rtskit.arena`: `MemoryArena(capacity)`, a bump allocator. `allocate(size)`
  returns a writable `memoryview`; `head()` gives the next offset and
  `free` the bytes left. `checkpoint()` returns an `ArenaCheckpoint`
  (also usable as a context manager); checkpoints nest, and the arena is
  rewound only when the last outstanding one is released.
- `rtskit.bufview`: `BufView`, a cursor over a byte buffer that reads and
  writes raw bytes and little-endian `u8`, `u16`, `i16` and 64-bit memsize
  values; `SeqWriter`, which appends the same kinds of values into fresh
  allocations from a `MemoryArena` and exposes what it wrote as `buffer`.
- `rtskit.int_seq`: `IntSeq(capacity)`, a window of the most recent
  non-negative integers with `std_dev()` (population standard deviation,
  `0.0` when empty).
- `rtskit.vecmath`: `IVec2` (signed 16-bit components that wrap on
  arithmetic), `RVec2` (real components with `+`, `-`, `*`, `/`,
  `magnitude()`, `normalized()`, `clamped()`, `to_ivec2()`), `IRect` and
  `RRect` with `from_corners()`, `IRect.contains()` (max edges exclusive),
  and `clamp_int`.
- `rtskit.byte_ring`: `ByteRingBuffer(capacity)`, a single-producer /
  single-consumer byte ring with `write`, `peek`, `read`, `advance`,
  `reset`, `usage` and `free`. One byte is always kept free, and a write
  must be strictly smaller than `free()`.
- `rtskit.chunk_ring`: `ChunkRingBuffer(chunk_count, storage_size)`, a ring
  holding up to `chunk_count - 1` variable-length chunks, with `write`,
  `peek`, `ref_read`, `copy_read`, `advance` and `unread_count`.
- `rtskit.chunk_list`: `ChunkList(capacity)`, a length-prefixed chunk queue
  with `write`, `allocate`, `read` (returns `None` when empty), `reset`,
  `len()` and iteration.
- `rtskit.coords`: conversions between window, normalised device (NDC), UI
  and world coordinates (`window_to_ndc`, `ndc_to_world`,
  `window_to_world`, `ndc_to_ui`, `window_to_ui`, `ui_to_ndc`,
  `ui_to_world`).
- `rtskit.net_commands`: `NetCommandType`, `SendNetCommand`,
  `serialize_shutdown`, `serialize_send`, `command_type` and `parse_send`.
- `rtskit.net_events`: `NetEventType`, `MessageNetEvent`, the
  `serialize_connection_*` functions, `serialize_message`, `event_type`
  and `parse_message`.

Any misuse that breaks a structure's invariant, such as writing more than a
ring can hold or decoding an unknown command or event type, raises
`rtskit.errors.InvariantError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from rtskit.byte_ring import ByteRingBuffer
from rtskit.vecmath import IVec2, RVec2
from rtskit.net_events import serialize_message, parse_message

ring = ByteRingBuffer(16)
ring.write(b"hey\0")
assert ring.read(4) == b"hey\0"

assert IVec2(2, 4) + IVec2(8, 2) == IVec2(10, 6)
assert RVec2(3.0, 4.0).magnitude() == 5.0

event = serialize_message(b"payload")
assert parse_message(event).message == b"payload"
```

## What it does not do

This is a library of parts, not a playable client. It has no command to
run, no game loop, no simulation, no rendering or window handling, and no
socket code: the net command and event framing only encodes and decodes
bytes, and the game messages carried inside them (start and order lists)
are not defined here.