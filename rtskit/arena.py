"""A fixed-capacity bump allocator with nestable checkpoints."""

from rtskit.errors import check


class MemoryArena:
    """Hands out consecutive regions of a fixed-size byte store."""

    def __init__(self, capacity):
        check(capacity >= 0, "arena capacity must not be negative")
        self._storage = bytearray(capacity)
        self.capacity = capacity
        self.length = 0
        self.checkpoint_count = 0

    @property
    def memory(self):
        """A view over the whole backing store."""
        return memoryview(self._storage)

    @property
    def free(self):
        """Number of bytes still available."""
        return self.capacity - self.length

    def head(self):
        """Offset at which the next allocation starts."""
        return self.length

    def allocate(self, size):
        """Reserve ``size`` bytes and return a writable view over them."""
        check(size > 0, "cannot allocate zero bytes")
        check(self.capacity >= self.length + size, "memory arena exhausted")
        start = self.length
        self.length += size
        return memoryview(self._storage)[start:self.length]

    def checkpoint(self):
        """Record the current length; usable as a context manager."""
        self.checkpoint_count += 1
        return ArenaCheckpoint(self, self.length)


class ArenaCheckpoint:
    """A saved arena length, restored once the outermost checkpoint is released."""

    def __init__(self, arena, length):
        self.arena = arena
        self.length = length
        self._released = False

    def release(self):
        """Release the checkpoint, rewinding the arena if no others remain."""
        check(not self._released, "checkpoint already released")
        check(self.length <= self.arena.length, "checkpoint lies beyond arena head")
        self._released = True
        self.arena.checkpoint_count -= 1
        if self.arena.checkpoint_count == 0:
            self.arena.length = self.length

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False