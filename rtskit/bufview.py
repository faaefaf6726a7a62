"""Cursor-based reading and writing of fixed-width values in byte buffers."""

import struct

from rtskit.errors import check

MEMSIZE = struct.Struct("<Q")
U8 = struct.Struct("<B")
U16 = struct.Struct("<H")
I16 = struct.Struct("<h")


class BufView:
    """A read/write cursor over a fixed byte buffer."""

    def __init__(self, buffer):
        self.buffer = memoryview(buffer)
        self.position = 0

    @property
    def remaining(self):
        """Bytes left between the cursor and the end of the buffer."""
        return len(self.buffer) - self.position

    def write(self, data):
        data = bytes(data)
        check(len(data) <= self.remaining, "write past end of buffer")
        end = self.position + len(data)
        self.buffer[self.position:end] = data
        self.position = end

    def write_memsize(self, value):
        self.write(MEMSIZE.pack(value))

    def write_u8(self, value):
        self.write(U8.pack(value))

    def write_u16(self, value):
        self.write(U16.pack(value))

    def write_i16(self, value):
        self.write(I16.pack(value))

    def read(self, length):
        """Return the next ``length`` bytes and advance the cursor."""
        check(0 <= length <= self.remaining, "read past end of buffer")
        end = self.position + length
        data = bytes(self.buffer[self.position:end])
        self.position = end
        return data

    def _unpack(self, fmt):
        return fmt.unpack(self.read(fmt.size))[0]

    def read_u8(self):
        return self._unpack(U8)

    def read_u16(self):
        return self._unpack(U16)

    def read_i16(self):
        return self._unpack(I16)

    def read_memsize(self):
        return self._unpack(MEMSIZE)


class SeqWriter:
    """Appends values to fresh allocations from a memory arena."""

    def __init__(self, arena):
        self.arena = arena
        self.start = arena.head()
        self.length = 0

    @property
    def buffer(self):
        """Everything written so far."""
        return bytes(self.arena.memory[self.start:self.start + self.length])

    def write(self, data):
        data = bytes(data)
        destination = self.arena.allocate(len(data))
        destination[:] = data
        self.length += len(data)

    def write_memsize(self, value):
        self.write(MEMSIZE.pack(value))

    def write_u8(self, value):
        self.write(U8.pack(value))

    def write_u16(self, value):
        self.write(U16.pack(value))

    def write_i16(self, value):
        self.write(I16.pack(value))