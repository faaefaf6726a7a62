"""Building blocks for a lockstep RTS client: arenas, ring buffers, chunk lists, vector math, coordinates and net framing."""

__version__ = "0.1.0"