"""A single-producer single-consumer ring of variable-length chunks."""

from rtskit.bufview import MEMSIZE
from rtskit.errors import check


class ChunkRingBuffer:
    """Stores up to ``chunk_count - 1`` chunks contiguously in a fixed data area.

    ``storage_size`` is the whole budget: per-chunk bookkeeping takes two
    memsize slots per chunk, and the rest holds chunk data.
    """

    def __init__(self, chunk_count, storage_size):
        check(chunk_count > 0, "chunk count must be positive")
        bookkeeping = MEMSIZE.size * chunk_count * 2
        check(storage_size > bookkeeping, "storage too small for chunk count")
        self.chunk_count = chunk_count
        self._offsets = [0] * chunk_count
        self._sizes = [0] * chunk_count
        self._data = bytearray(storage_size - bookkeeping)
        self._read_index = 0
        self._write_index = 0

    @property
    def data_capacity(self):
        return len(self._data)

    def unread_count(self):
        """Number of chunks written but not yet read."""
        read_index = self._read_index
        write_index = self._write_index
        if write_index >= read_index:
            return write_index - read_index
        return write_index + self.chunk_count - read_index

    def write(self, data):
        """Store ``data`` as one chunk."""
        data = bytes(data)
        write_index = self._write_index
        read_index = self._read_index

        new_write_index = (write_index + 1) % self.chunk_count
        check(new_write_index != read_index, "chunk ring buffer full")

        read_offset = self._offsets[read_index]
        write_offset = self._offsets[write_index]
        if read_offset <= write_offset:
            if len(data) > len(self._data) - write_offset:
                check(len(data) <= read_offset, "chunk ring buffer data area full")
                write_offset = 0
                self._offsets[write_index] = 0
        else:
            check(len(data) <= read_offset - write_offset, "chunk ring buffer data area full")

        self._sizes[write_index] = len(data)
        self._data[write_offset:write_offset + len(data)] = data
        self._offsets[new_write_index] = write_offset + len(data)
        self._write_index = new_write_index

    def peek(self):
        """A read-only view of the oldest unread chunk; empty when none."""
        read_index = self._read_index
        if read_index == self._write_index:
            return memoryview(b"")
        offset = self._offsets[read_index]
        size = self._sizes[read_index]
        return memoryview(self._data)[offset:offset + size].toreadonly()

    def advance(self):
        """Consume the oldest chunk."""
        check(self.unread_count() != 0, "no chunk to advance past")
        self._read_index = (self._read_index + 1) % self.chunk_count

    def ref_read(self):
        """Consume the oldest chunk and return a view of it.

        The view refers to ring storage and is only valid until the writer
        reuses that space.
        """
        chunk = self.peek()
        if len(chunk) != 0:
            self.advance()
        return chunk

    def copy_read(self, capacity):
        """Consume the oldest chunk and return a copy; it must fit ``capacity``."""
        chunk = self.peek()
        if len(chunk) == 0:
            return b""
        check(capacity >= len(chunk), "output too small for chunk")
        data = bytes(chunk)
        self.advance()
        return data