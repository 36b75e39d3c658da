import pytest

from hyprutils.bezier import BezierCurve
from hyprutils.vector2d import Vector2D


@pytest.fixture
def default_curve():
    return BezierCurve(Vector2D(0.0, 0.75), Vector2D(0.15, 1.0))


@pytest.fixture
def linear_curve():
    return BezierCurve(Vector2D(1 / 3, 1 / 3), Vector2D(2 / 3, 2 / 3))


def test_end_points_of_parameter(default_curve):
    assert default_curve.x_for_t(0.0) == 0.0
    assert default_curve.y_for_t(0.0) == 0.0
    assert default_curve.x_for_t(1.0) == pytest.approx(1.0)
    assert default_curve.y_for_t(1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("x", [1.0, 1.5, 100.0])
def test_y_for_point_at_or_above_one(default_curve, x):
    assert default_curve.y_for_point(x) == 1.0


@pytest.mark.parametrize("x", [0.0, -0.2, -100.0])
def test_y_for_point_at_or_below_zero(default_curve, x):
    assert default_curve.y_for_point(x) == 0.0


@pytest.mark.parametrize("x", [0.05, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99])
def test_linear_curve_follows_diagonal(linear_curve, x):
    assert linear_curve.y_for_point(x) == pytest.approx(x, abs=1e-6)


@pytest.mark.parametrize("t", [0.1, 0.3, 0.5, 0.7, 0.9])
def test_linear_curve_parameter_on_diagonal(linear_curve, t):
    assert linear_curve.x_for_t(t) == pytest.approx(linear_curve.y_for_t(t))


def test_default_curve_is_monotonic(default_curve):
    xs = [i / 200 for i in range(1, 200)]
    ys = [default_curve.y_for_point(x) for x in xs]
    assert all(a <= b for a, b in zip(ys, ys[1:]))
    assert all(0.0 <= y <= 1.0 for y in ys)


@pytest.mark.parametrize("t", [0.2, 0.4, 0.6, 0.8, 0.9])
def test_lookup_matches_parametric_curve(default_curve, t):
    x = default_curve.x_for_t(t)
    assert default_curve.y_for_point(x) == pytest.approx(default_curve.y_for_t(t), abs=1e-2)


def test_points_include_end_points():
    curve = BezierCurve(Vector2D(0.2, 0.3), Vector2D(0.4, 0.5))
    assert curve.points == (
        Vector2D(0.0, 0.0),
        Vector2D(0.2, 0.3),
        Vector2D(0.4, 0.5),
        Vector2D(1.0, 1.0),
    )


def test_points_are_copies():
    p1 = Vector2D(0.2, 0.3)
    curve = BezierCurve(p1, Vector2D(0.4, 0.5))
    p1.x = 0.9
    assert curve.points[1] == Vector2D(0.2, 0.3)