"""Integer and real 2D vectors and rectangles."""

import math
from dataclasses import dataclass

from rtskit.errors import check


def clamp_int(n, low, high):
    """Clamp ``n`` into ``[low, high]``; ``high`` wins if the bounds cross."""
    return min(max(n, low), high)


def _to_i16(value):
    value = int(value) & 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


def _round_half_away(value):
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class IVec2:
    """A vector of two signed 16-bit integers; arithmetic wraps."""

    x: int = 0
    y: int = 0

    def __post_init__(self):
        object.__setattr__(self, "x", _to_i16(self.x))
        object.__setattr__(self, "y", _to_i16(self.y))

    def __add__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, IVec2):
            return NotImplemented
        return IVec2(self.x - other.x, self.y - other.y)

    def to_rvec2(self):
        return RVec2(float(self.x), float(self.y))


@dataclass(frozen=True)
class RVec2:
    """A vector of two reals."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if not isinstance(other, RVec2):
            return NotImplemented
        return RVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if isinstance(other, RVec2):
            return RVec2(self.x - other.x, self.y - other.y)
        if isinstance(other, (int, float)):
            return RVec2(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return RVec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, RVec2):
            return RVec2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return RVec2(self.x / other, self.y / other)
        return NotImplemented

    def squared_magnitude(self):
        return self.x * self.x + self.y * self.y

    def magnitude(self):
        return math.sqrt(self.squared_magnitude())

    def normalized(self):
        magnitude = self.magnitude()
        check(magnitude != 0, "cannot normalize a zero vector")
        return self / magnitude

    def clamped(self, max_magnitude):
        """Scale down to ``max_magnitude`` if longer; otherwise unchanged."""
        magnitude = self.magnitude()
        if magnitude > max_magnitude:
            return (self / magnitude) * max_magnitude
        return self

    def to_ivec2(self):
        """Round each component half away from zero."""
        return IVec2(_round_half_away(self.x), _round_half_away(self.y))


@dataclass(frozen=True)
class RRect:
    """An axis-aligned rectangle with real corners."""

    min: RVec2
    max: RVec2

    @classmethod
    def from_corners(cls, a, b):
        return cls(
            RVec2(min(a.x, b.x), min(a.y, b.y)),
            RVec2(max(a.x, b.x), max(a.y, b.y)),
        )


@dataclass(frozen=True)
class IRect:
    """An axis-aligned rectangle with integer corners; max edges are exclusive."""

    min: IVec2
    max: IVec2

    @classmethod
    def from_corners(cls, a, b):
        return cls(
            IVec2(min(a.x, b.x), min(a.y, b.y)),
            IVec2(max(a.x, b.x), max(a.y, b.y)),
        )

    def contains(self, pos):
        return (
            self.min.x <= pos.x < self.max.x
            and self.min.y <= pos.y < self.max.y
        )