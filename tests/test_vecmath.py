import pytest

from rtskit.errors import InvariantError
from rtskit.vecmath import IRect, IVec2, RRect, RVec2, clamp_int


def test_ivec2_addition():
    c = IVec2(2, 4) + IVec2(8, 2)
    assert c.x == 10
    assert c.y == 6


def test_rvec2_addition():
    c = RVec2(2, 4) + RVec2(8, 2)
    assert c.x == pytest.approx(10, abs=0.0001)
    assert c.y == pytest.approx(6, abs=0.0001)


def test_ivec2_subtraction_inverts_addition():
    a, b = IVec2(5, -7), IVec2(3, 11)
    assert (a + b) - b == a


def test_ivec2_wraps_to_16_bits():
    assert IVec2(32767, 0) + IVec2(1, 0) == IVec2(-32768, 0)


@pytest.mark.parametrize(
    "n, low, high, expected",
    [(5, 0, 10, 5), (-3, 0, 10, 0), (42, 0, 10, 10)],
)
def test_clamp_int(n, low, high, expected):
    assert clamp_int(n, low, high) == expected


def test_magnitude_and_normalize():
    v = RVec2(3, 4)
    assert v.squared_magnitude() == pytest.approx(25)
    assert v.magnitude() == pytest.approx(5)
    assert v.normalized().magnitude() == pytest.approx(1)


def test_normalize_zero_raises():
    with pytest.raises(InvariantError):
        RVec2(0, 0).normalized()


def test_clamped():
    v = RVec2(3, 4)
    assert v.clamped(10) == v
    short = v.clamped(2.5)
    assert short.magnitude() == pytest.approx(2.5)
    assert short.x / short.y == pytest.approx(0.75)


def test_scalar_and_vector_ops():
    v = RVec2(4, 8)
    assert v * 0.5 == RVec2(2, 4)
    assert v / 2 == RVec2(2, 4)
    assert v / RVec2(2, 4) == RVec2(2, 2)
    assert v - 1 == RVec2(3, 7)


def test_conversions_round_half_away_from_zero():
    assert RVec2(2.5, -2.5).to_ivec2() == IVec2(3, -3)
    assert RVec2(1.4, -1.4).to_ivec2() == IVec2(1, -1)
    assert IVec2(7, -2).to_rvec2() == RVec2(7.0, -2.0)


def test_rect_from_corners_orders_bounds():
    r = RRect.from_corners(RVec2(5, -1), RVec2(-2, 3))
    assert r.min == RVec2(-2, -1)
    assert r.max == RVec2(5, 3)
    i = IRect.from_corners(IVec2(5, -1), IVec2(-2, 3))
    assert i.min == IVec2(-2, -1)
    assert i.max == IVec2(5, 3)


def test_irect_contains_is_half_open():
    rect = IRect.from_corners(IVec2(0, 0), IVec2(10, 10))
    assert rect.contains(IVec2(0, 0))
    assert rect.contains(IVec2(9, 9))
    assert not rect.contains(IVec2(10, 5))
    assert not rect.contains(IVec2(5, -1))