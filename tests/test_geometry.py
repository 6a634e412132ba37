import pytest

from geometry import angle_to_vertical, elevation_from_horizontal, midpoint
from pose_types import DerivedPoint, Landmark


def test_midpoint_averages_position_only():
    a = Landmark(0.4, 0.5, -0.2, 0.9)
    b = Landmark(0.6, 0.7, 0.4, 0.1)
    mid = midpoint(a, b)
    assert isinstance(mid, DerivedPoint)
    assert mid.x == pytest.approx(0.5)
    assert mid.y == pytest.approx(0.6)
    assert mid.z == pytest.approx(0.1)
    assert not hasattr(mid, "visibility")


def test_midpoint_missing_input():
    a = Landmark(0.4, 0.5, 0.0, 1.0)
    assert midpoint(a, None) is None
    assert midpoint(None, a) is None


def test_angle_to_vertical_straight_up_is_zero():
    a = DerivedPoint(0.5, 0.5)
    b = DerivedPoint(0.5, 0.3)
    assert angle_to_vertical(a, b) == pytest.approx(0.0)


def test_angle_to_vertical_horizontal_and_down():
    a = DerivedPoint(0.5, 0.5)
    assert angle_to_vertical(a, DerivedPoint(0.7, 0.5)) == pytest.approx(90.0)
    assert angle_to_vertical(a, DerivedPoint(0.3, 0.5)) == pytest.approx(90.0)
    assert angle_to_vertical(a, DerivedPoint(0.5, 0.9)) == pytest.approx(180.0)


def test_angle_to_vertical_ignores_z():
    a = Landmark(0.5, 0.5, -3.0, 1.0)
    b = Landmark(0.6, 0.4, 5.0, 1.0)
    assert angle_to_vertical(a, b) == pytest.approx(45.0)


def test_angle_to_vertical_degenerate():
    p = DerivedPoint(0.5, 0.5, 0.0)
    q = DerivedPoint(0.5, 0.5, 0.7)
    assert angle_to_vertical(p, q) is None
    assert angle_to_vertical(None, p) is None


def test_elevation_from_horizontal():
    neck = DerivedPoint(0.5, 0.5)
    assert elevation_from_horizontal(neck, DerivedPoint(0.5, 0.3)) == pytest.approx(90.0)
    assert elevation_from_horizontal(neck, DerivedPoint(0.7, 0.3)) == pytest.approx(45.0)
    assert elevation_from_horizontal(neck, DerivedPoint(0.3, 0.3)) == pytest.approx(135.0)
    # Below the neck still reports an unsigned angle.
    assert elevation_from_horizontal(neck, DerivedPoint(0.7, 0.7)) == pytest.approx(45.0)


def test_elevation_from_horizontal_missing_or_degenerate():
    neck = DerivedPoint(0.5, 0.5)
    assert elevation_from_horizontal(neck, None) is None
    assert elevation_from_horizontal(neck, DerivedPoint(0.5, 0.5)) is None
