"""A linear list of length-prefixed chunks in a fixed byte store."""

from rtskit.bufview import MEMSIZE
from rtskit.errors import check


class ChunkList:
    """Append chunks, then read them back in order until reset."""

    def __init__(self, capacity):
        check(capacity >= 0, "capacity must not be negative")
        self._buffer = bytearray(capacity)
        self.read_pos = 0
        self.write_pos = 0
        self.count = 0

    @property
    def capacity(self):
        return len(self._buffer)

    def __len__(self):
        return self.count

    def __iter__(self):
        while (chunk := self.read()) is not None:
            yield chunk

    def _reserve(self, length):
        check(
            self.capacity - self.write_pos >= length + MEMSIZE.size,
            "chunk list full",
        )
        MEMSIZE.pack_into(self._buffer, self.write_pos, length)
        start = self.write_pos + MEMSIZE.size
        self.write_pos = start + length
        self.count += 1
        return start

    def write(self, chunk):
        """Append a copy of ``chunk``."""
        data = bytes(chunk)
        start = self._reserve(len(data))
        self._buffer[start:start + len(data)] = data

    def allocate(self, length):
        """Append a chunk of ``length`` bytes and return a writable view of it."""
        start = self._reserve(length)
        return memoryview(self._buffer)[start:start + length]

    def read(self):
        """Return a view of the next unread chunk, or None when none remain."""
        if self.read_pos == self.write_pos:
            return None
        check(self.count != 0, "chunk list count out of sync")
        (length,) = MEMSIZE.unpack_from(self._buffer, self.read_pos)
        start = self.read_pos + MEMSIZE.size
        self.read_pos = start + length
        self.count -= 1
        return memoryview(self._buffer)[start:start + length]

    def reset(self):
        """Forget every chunk."""
        self.read_pos = 0
        self.write_pos = 0
        self.count = 0