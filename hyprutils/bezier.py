"""Cubic bezier curves from (0, 0) to (1, 1) with fast lookups by x."""

from __future__ import annotations

import math

from hyprutils.vector2d import Vector2D

BAKED_POINTS = 255
"""Number of points sampled along the curve for lookups by x."""


class BezierCurve:
    """A cubic bezier curve through (0, 0) and (1, 1) with two control points."""

    __slots__ = ("_points", "_baked")

    def __init__(self, p1: Vector2D, p2: Vector2D) -> None:
        self._points = (
            Vector2D(0.0, 0.0),
            Vector2D(p1.x, p1.y),
            Vector2D(p2.x, p2.y),
            Vector2D(1.0, 1.0),
        )
        samples = ((i + 1) / BAKED_POINTS for i in range(BAKED_POINTS))
        self._baked = tuple((self.x_for_t(t), self.y_for_t(t)) for t in samples)

    @property
    def points(self) -> tuple[Vector2D, ...]:
        """The four defining points, end points included."""
        return tuple(Vector2D(p.x, p.y) for p in self._points)

    def x_for_t(self, t: float) -> float:
        """The x coordinate at curve parameter ``t``."""
        _, p1, p2, p3 = self._points
        return 3 * t * (1 - t) * (1 - t) * p1.x + 3 * t * t * (1 - t) * p2.x + t * t * t * p3.x

    def y_for_t(self, t: float) -> float:
        """The y coordinate at curve parameter ``t``."""
        _, p1, p2, p3 = self._points
        return 3 * t * (1 - t) * (1 - t) * p1.y + 3 * t * t * (1 - t) * p2.y + t * t * t * p3.y

    def y_for_point(self, x: float) -> float:
        """The y coordinate of the curve at ``x``, interpolated from the samples."""
        if x >= 1.0:
            return 1.0
        if x <= 0.0:
            return 0.0

        baked = self._baked
        index = 0
        below = True
        step = (BAKED_POINTS + 1) // 2
        while step > 0:
            index += step if below else -step
            below = baked[index][0] < x
            step //= 2

        lower = index - (1 if (not below or index == BAKED_POINTS - 1) else 0)
        lower_x, lower_y = baked[lower]
        upper_x, upper_y = baked[lower + 1]

        span = upper_x - lower_x
        if span == 0:
            return 0.0
        fraction = (x - lower_x) / span
        if not math.isfinite(fraction):
            return 0.0

        return lower_y + (upper_y - lower_y) * fraction

    def __repr__(self) -> str:
        _, p1, p2, _ = self._points
        return f"BezierCurve({p1!r}, {p2!r})"