import math

import pytest

from fallen_kingdom.core import Rect, distance, normalize


def test_contains_includes_top_left_corner():
    rect = Rect(10.0, 20.0, 32.0, 32.0)
    assert rect.contains(10.0, 20.0) is True


def test_contains_excludes_right_and_bottom_edges():
    rect = Rect(10.0, 20.0, 32.0, 32.0)
    assert rect.contains(42.0, 30.0) is False
    assert rect.contains(30.0, 52.0) is False


def test_contains_outside_left():
    rect = Rect(10.0, 20.0, 32.0, 32.0)
    assert rect.contains(9.9, 30.0) is False


def test_contains_negative_size():
    rect = Rect(10.0, 10.0, -5.0, -5.0)
    assert rect.contains(7.0, 7.0) is True
    assert rect.contains(11.0, 7.0) is False


def test_grown_moves_and_enlarges():
    rect = Rect(100.0, 200.0, 96.0, 96.0)
    bigger = rect.grown(20.0, 20.0, 80.0, 80.0)
    assert bigger.left == rect.left - 20.0
    assert bigger.top == rect.top - 20.0
    assert bigger.width == rect.width + 80.0
    assert bigger.height == rect.height + 80.0
    assert bigger.contains(rect.left - 10.0, rect.top - 10.0)
    assert not rect.contains(rect.left - 10.0, rect.top - 10.0)


def test_grown_does_not_modify_original():
    rect = Rect(1.0, 2.0, 3.0, 4.0)
    rect.grown(1.0, 1.0, 1.0, 1.0)
    assert rect == Rect(1.0, 2.0, 3.0, 4.0)


def test_normalize_zero_vector():
    assert normalize(0.0, 0.0) == (0.0, 0.0)


@pytest.mark.parametrize("vector", [(3.0, 4.0), (-2.0, 7.5), (0.0, -9.0), (1e-3, 1e-3)])
def test_normalize_has_unit_length_and_same_direction(vector):
    x, y = normalize(*vector)
    assert math.isclose(math.hypot(x, y), 1.0)
    assert math.isclose(x * vector[1], y * vector[0], abs_tol=1e-12)
    assert (x >= 0) == (vector[0] >= 0)


def test_distance_pythagorean():
    assert distance((0.0, 0.0), (3.0, 4.0)) == pytest.approx(5.0)


def test_distance_symmetric_and_zero_for_same_point():
    a, b = (12.5, -3.0), (-7.0, 40.0)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, a) == 0.0