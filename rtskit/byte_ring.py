"""A single-producer single-consumer ring buffer of raw bytes."""

from rtskit.errors import check


class ByteRingBuffer:
    """A circular byte store; one slot is always kept free to tell full from empty."""

    def __init__(self, capacity):
        check(capacity > 0, "ring capacity must be positive")
        self._storage = bytearray(capacity)
        self._read_pos = 0
        self._write_pos = 0

    @property
    def capacity(self):
        return len(self._storage)

    @property
    def read_pos(self):
        return self._read_pos

    @property
    def write_pos(self):
        return self._write_pos

    def usage(self):
        """Number of bytes written but not yet read."""
        read_pos = self._read_pos
        write_pos = self._write_pos
        if read_pos <= write_pos:
            return write_pos - read_pos
        return self.capacity - read_pos + write_pos

    def free(self):
        """Number of bytes that may still be stored."""
        return self.capacity - 1 - self.usage()

    def write(self, data):
        """Append ``data``; it must be strictly smaller than the free space."""
        data = bytes(data)
        check(self.free() > len(data), "byte ring buffer overflow")
        write_pos = self._write_pos
        first = min(len(data), self.capacity - write_pos)
        self._storage[write_pos:write_pos + first] = data[:first]
        rest = len(data) - first
        if rest:
            self._storage[:rest] = data[first:]
        self._write_pos = (write_pos + len(data)) % self.capacity

    def peek(self, size):
        """Return up to ``size`` unread bytes without consuming them."""
        length = min(size, self.usage())
        read_pos = self._read_pos
        first = min(length, self.capacity - read_pos)
        head = bytes(self._storage[read_pos:read_pos + first])
        return head + bytes(self._storage[:length - first])

    def advance(self, length):
        """Consume ``length`` bytes."""
        check(0 <= length <= self.usage(), "advance past written data")
        self._read_pos = (self._read_pos + length) % self.capacity

    def read(self, size):
        """Return and consume up to ``size`` unread bytes."""
        data = self.peek(size)
        self.advance(len(data))
        return data

    def reset(self):
        """Discard everything; not safe while another thread uses the ring."""
        self._write_pos = 0
        self._read_pos = 0