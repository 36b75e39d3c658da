"""Axis-aligned boxes, their extents and output transforms."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from hyprutils.vector2d import Vector2D

_EPSILON = 1e-9


class Transform(enum.IntEnum):
    """Output transforms: rotations, optionally after a horizontal flip."""

    NORMAL = 0
    ROTATED_90 = 1
    ROTATED_180 = 2
    ROTATED_270 = 3
    FLIPPED = 4
    FLIPPED_90 = 5
    FLIPPED_180 = 6
    FLIPPED_270 = 7


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


@dataclass
class BoxExtents:
    """Margins around a box: top-left and bottom-right."""

    top_left: Vector2D = field(default_factory=Vector2D)
    bottom_right: Vector2D = field(default_factory=Vector2D)

    def __mul__(self, factor: float) -> "BoxExtents":
        return BoxExtents(self.top_left * factor, self.bottom_right * factor)

    def round(self) -> "BoxExtents":
        """Return extents with both corners rounded."""
        return BoxExtents(self.top_left.round(), self.bottom_right.round())

    def add_extents(self, other: "BoxExtents") -> None:
        """Grow these extents to cover ``other`` as well."""
        self.top_left = self.top_left.component_max(other.top_left)
        self.bottom_right = self.bottom_right.component_max(other.bottom_right)


class Box:
    """A 2D box; in-place operations return the box for chaining."""

    def __init__(self, x: float = 0.0, y: float = 0.0, w: float = 0.0, h: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.w = float(w)
        self.h = float(h)
        self.rot = 0.0

    @classmethod
    def from_vectors(cls, pos: Vector2D, size: Vector2D) -> "Box":
        """Build a box from a top-left position and a size."""
        return cls(pos.x, pos.y, size.x, size.y)

    @property
    def width(self) -> float:
        return self.w

    @width.setter
    def width(self, value: float) -> None:
        self.w = float(value)

    @property
    def height(self) -> float:
        return self.h

    @height.setter
    def height(self, value: float) -> None:
        self.h = float(value)

    def scale(self, factor: "float | Vector2D") -> "Box":
        """Scale position and size by a number or per axis by a vector."""
        if isinstance(factor, Vector2D):
            fx, fy = factor.x, factor.y
        else:
            fx = fy = factor
        self.x *= fx
        self.y *= fy
        self.w *= fx
        self.h *= fy
        return self

    def scale_from_center(self, factor: float) -> "Box":
        """Scale the size, keeping the middle in place."""
        old_w, old_h = self.w, self.h
        self.w *= factor
        self.h *= factor
        self.x -= (self.w - old_w) * 0.5
        self.y -= (self.h - old_h) * 0.5
        return self

    def translate(self, vec: Vector2D) -> "Box":
        """Move the box by ``vec``."""
        self.x += vec.x
        self.y += vec.y
        return self

    def round(self) -> "Box":
        """Round the corners to whole numbers, halfway cases away from zero."""
        rounded_pos = Vector2D(self.x, self.y).round()
        rounded_size = Vector2D(self.x + self.w - rounded_pos.x, self.y + self.h - rounded_pos.y).round()
        self.x, self.y = rounded_pos.x, rounded_pos.y
        self.w, self.h = rounded_size.x, rounded_size.y
        return self

    def transform(self, t: Transform, w: float, h: float) -> "Box":
        """Apply output transform ``t`` within an area of ``w`` by ``h``."""
        t = Transform(t)
        tx, ty, tw, th = self.x, self.y, self.w, self.h

        if t % 2 == 0:
            self.w, self.h = tw, th
        else:
            self.w, self.h = th, tw

        if t is Transform.NORMAL:
            self.x, self.y = tx, ty
        elif t is Transform.ROTATED_90:
            self.x, self.y = h - ty - th, tx
        elif t is Transform.ROTATED_180:
            self.x, self.y = w - tx - tw, h - ty - th
        elif t is Transform.ROTATED_270:
            self.x, self.y = ty, w - tx - tw
        elif t is Transform.FLIPPED:
            self.x, self.y = w - tx - tw, ty
        elif t is Transform.FLIPPED_90:
            self.x, self.y = ty, tx
        elif t is Transform.FLIPPED_180:
            self.x, self.y = tx, h - ty - th
        else:
            self.x, self.y = h - ty - th, w - tx - tw
        return self

    def add_extents(self, extents: BoxExtents) -> "Box":
        """Grow the box outward by ``extents``."""
        self.x -= extents.top_left.x
        self.y -= extents.top_left.y
        self.w += extents.top_left.x + extents.bottom_right.x
        self.h += extents.top_left.y + extents.bottom_right.y
        return self

    def expand(self, value: float) -> "Box":
        """Grow every side by ``value``; a collapsed box gets size zero."""
        self.x -= value
        self.y -= value
        self.w += value * 2.0
        self.h += value * 2.0
        if self.w <= _EPSILON or self.h <= _EPSILON:
            self.w = 0.0
            self.h = 0.0
        return self

    def no_negative_size(self) -> "Box":
        """Clamp negative width and height to zero."""
        if self.w < 0:
            self.w = 0.0
        if self.h < 0:
            self.h = 0.0
        return self

    def copy(self) -> "Box":
        """Return an independent copy."""
        duplicate = Box(self.x, self.y, self.w, self.h)
        duplicate.rot = self.rot
        return duplicate

    def intersection(self, other: "Box") -> "Box":
        """Return the overlapping box; size zero when there is none."""
        new_x = max(self.x, other.x)
        new_y = max(self.y, other.y)
        new_bottom = min(self.y + self.h, other.y + other.h)
        new_right = min(self.x + self.w, other.x + other.w)
        new_w = new_right - new_x
        new_h = new_bottom - new_y
        if new_w <= _EPSILON or new_h <= _EPSILON:
            new_w = 0.0
            new_h = 0.0
        return Box(new_x, new_y, new_w, new_h)

    def overlaps(self, other: "Box") -> bool:
        """Whether the boxes touch or overlap."""
        return (
            other.x + other.w >= self.x
            and self.x + self.w >= other.x
            and other.y + other.h >= self.y
            and self.y + self.h >= other.y
        )

    def inside(self, bound: "Box") -> bool:
        """Whether this box lies strictly inside ``bound``."""
        return (
            bound.x < self.x
            and bound.y < self.y
            and self.x + self.w < bound.x + bound.w
            and self.y + self.h < bound.y + bound.h
        )

    def extents_from(self, small: "Box") -> BoxExtents:
        """Margins between this (bigger) box and ``small``."""
        return BoxExtents(
            Vector2D(small.x - self.x, small.y - self.y),
            Vector2D(
                self.w - small.w - (small.x - self.x),
                self.h - small.h - (small.y - self.y),
            ),
        )

    def middle(self) -> Vector2D:
        """Centre point of the box."""
        return Vector2D(self.x + self.w * 0.5, self.y + self.h * 0.5)

    def pos(self) -> Vector2D:
        """Top-left corner."""
        return Vector2D(self.x, self.y)

    def size(self) -> Vector2D:
        """Width and height."""
        return Vector2D(self.w, self.h)

    def extent(self) -> Vector2D:
        """Bottom-right corner."""
        return self.pos() + self.size()

    def closest_point(self, vec: Vector2D) -> Vector2D:
        """The point inside the box closest to ``vec``."""
        if self.contains_point(vec):
            return Vector2D(vec.x, vec.y)

        max_x = self.x + self.w - _EPSILON
        max_y = self.y + self.h - _EPSILON

        nx = _clamp(vec.x, self.x, max_x) if self.x < max_x else self.x
        ny = _clamp(vec.y, self.y, max_y) if self.y < max_y else self.y

        if math.fabs(nx - self.x) < _EPSILON:
            nx = self.x
        elif math.fabs(nx - max_x) < _EPSILON:
            nx = max_x

        if math.fabs(ny - self.y) < _EPSILON:
            ny = self.y
        elif math.fabs(ny - max_y) < _EPSILON:
            ny = max_y

        return Vector2D(nx, ny)

    def contains_point(self, vec: Vector2D) -> bool:
        """Whether ``vec`` lies in the box (right and bottom edges excluded)."""
        return self.x <= vec.x < self.x + self.w and self.y <= vec.y < self.y + self.h

    def empty(self) -> bool:
        """Whether the width or height is practically zero."""
        return math.fabs(self.w) < _EPSILON or math.fabs(self.h) < _EPSILON

    def _round_internal(self) -> "Box":
        floored_x = math.floor(self.x)
        floored_y = math.floor(self.y)
        return Box(
            floored_x,
            floored_y,
            math.floor(self.x + self.w - floored_x),
            math.floor(self.y + self.h - floored_y),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Box):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.w == other.w and self.h == other.h

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Box({self.x!r}, {self.y!r}, {self.w!r}, {self.h!r})"