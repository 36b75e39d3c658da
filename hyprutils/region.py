"""Integer regions made of non-overlapping rectangles, kept in y-x banded form."""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, Optional, Union

from hyprutils.box import Box, Transform
from hyprutils.vector2d import Vector2D

MAX_REGION_SIDE = 10_000_000

_Span = tuple[int, int]
_Band = tuple[int, int, tuple[_Span, ...]]
_Op = Callable[[bool, bool], bool]

_UNION: _Op = operator.or_
_INTERSECT: _Op = operator.and_


def _subtract_op(a: bool, b: bool) -> bool:
    return a and not b


@dataclass(frozen=True)
class Rect:
    """An integer rectangle from (x1, y1) inclusive to (x2, y2) exclusive."""

    x1: int
    y1: int
    x2: int
    y2: int


def _rect_bands(x1: int, y1: int, x2: int, y2: int) -> tuple[_Band, ...]:
    if x1 < x2 and y1 < y2:
        return ((y1, y2, ((x1, x2),)),)
    return ()


def _bands_from_xywh(x: float, y: float, w: float, h: float) -> tuple[_Band, ...]:
    ix, iy = int(x), int(y)
    return _rect_bands(ix, iy, ix + int(w), iy + int(h))


def _spans_at(bands: tuple[_Band, ...], y: int) -> tuple[_Span, ...]:
    for y1, y2, spans in bands:
        if y1 <= y < y2:
            return spans
    return ()


def _covers(spans: tuple[_Span, ...], x: int) -> bool:
    return any(x1 <= x < x2 for x1, x2 in spans)


def _combine_spans(a: tuple[_Span, ...], b: tuple[_Span, ...], op: _Op) -> tuple[_Span, ...]:
    xs = sorted({x for span in (*a, *b) for x in span})
    out: list[_Span] = []
    for lo, hi in zip(xs, xs[1:]):
        if not op(_covers(a, lo), _covers(b, lo)):
            continue
        if out and out[-1][1] == lo:
            out[-1] = (out[-1][0], hi)
        else:
            out.append((lo, hi))
    return tuple(out)


def _combine(a: tuple[_Band, ...], b: tuple[_Band, ...], op: _Op) -> tuple[_Band, ...]:
    ys = sorted({y for band in (*a, *b) for y in band[:2]})
    result: list[_Band] = []
    for lo, hi in zip(ys, ys[1:]):
        spans = _combine_spans(_spans_at(a, lo), _spans_at(b, lo), op)
        if not spans:
            continue
        if result and result[-1][1] == lo and result[-1][2] == spans:
            result[-1] = (result[-1][0], hi, spans)
        else:
            result.append((lo, hi, spans))
    return tuple(result)


_RegionLike = Union["Region", Box, Rect]


class Region:
    """A set of integer pixels; in-place operations return the region for chaining."""

    __slots__ = ("_bands",)

    def __init__(self, box: Optional[_RegionLike] = None) -> None:
        self._bands: tuple[_Band, ...] = _bands_of(box) if box is not None else ()

    @classmethod
    def from_rect(cls, x: float, y: float, w: float, h: float) -> "Region":
        """A region covering one rectangle given by position and size."""
        region = cls()
        region._bands = _bands_from_xywh(x, y, w, h)
        return region

    def clear(self) -> "Region":
        """Make the region empty."""
        self._bands = ()
        return self

    def set(self, other: _RegionLike) -> "Region":
        """Make this region a copy of ``other``."""
        self._bands = _bands_of(other)
        return self

    def add(self, other: _RegionLike) -> "Region":
        """Union with a region, box or rectangle."""
        self._bands = _combine(self._bands, _bands_of(other), _UNION)
        return self

    def add_rect(self, x: float, y: float, w: float, h: float) -> "Region":
        """Union with a rectangle given by position and size."""
        self._bands = _combine(self._bands, _bands_from_xywh(x, y, w, h), _UNION)
        return self

    def subtract(self, other: _RegionLike) -> "Region":
        """Remove the pixels of ``other``."""
        self._bands = _combine(self._bands, _bands_of(other), _subtract_op)
        return self

    def intersect(self, other: _RegionLike) -> "Region":
        """Keep only the pixels shared with ``other``."""
        self._bands = _combine(self._bands, _bands_of(other), _INTERSECT)
        return self

    def intersect_rect(self, x: float, y: float, w: float, h: float) -> "Region":
        """Keep only the pixels inside a rectangle given by position and size."""
        self._bands = _combine(self._bands, _bands_from_xywh(x, y, w, h), _INTERSECT)
        return self

    def translate(self, vec: Vector2D) -> "Region":
        """Move the region by ``vec`` (truncated to whole pixels)."""
        dx, dy = int(vec.x), int(vec.y)
        self._bands = tuple(
            (y1 + dy, y2 + dy, tuple((x1 + dx, x2 + dx) for x1, x2 in spans))
            for y1, y2, spans in self._bands
        )
        return self

    def transform(self, t: Transform, w: float, h: float) -> "Region":
        """Apply output transform ``t`` within an area of ``w`` by ``h``."""
        if Transform(t) is Transform.NORMAL:
            return self
        rects = self.rects()
        self.clear()
        for r in rects:
            self.add(Box(r.x1, r.y1, r.x2 - r.x1, r.y2 - r.y1).transform(t, w, h))
        return self

    def invert(self, box: Union[Box, Rect]) -> "Region":
        """Replace the region with the part of ``box`` it does not cover."""
        if isinstance(box, Box):
            x1, y1 = int(box.x), int(box.y)
            bounds = _rect_bands(x1, y1, int(box.w) + x1, int(box.h) + y1)
        else:
            bounds = _rect_bands(box.x1, box.y1, box.x2, box.y2)
        self._bands = _combine(bounds, self._bands, _subtract_op)
        return self

    def scale(self, factor: Union[Vector2D, float]) -> "Region":
        """Scale every rectangle outward to whole pixels."""
        if isinstance(factor, Vector2D):
            sx, sy = factor.x, factor.y
        else:
            sx = sy = float(factor)
        if sx == 1 and sy == 1:
            return self
        rects = self.rects()
        self.clear()
        for r in rects:
            x1 = math.floor(r.x1 * sx)
            y1 = math.floor(r.y1 * sy)
            x2 = math.ceil(r.x2 * sx)
            y2 = math.ceil(r.y2 * sy)
            self._bands = _combine(self._bands, _rect_bands(x1, y1, x2, y2), _UNION)
        return self

    def expand(self, units: float) -> "Region":
        """Grow every rectangle by ``units`` on each side."""
        rects = self.rects()
        self.clear()
        for r in rects:
            self.add(Box(r.x1 - units, r.y1 - units, r.x2 - r.x1 + units * 2, r.y2 - r.y1 + units * 2))
        return self

    def rationalize(self) -> "Region":
        """Clip the region to a sane maximum size around the origin."""
        return self.intersect(
            Box(-MAX_REGION_SIDE, -MAX_REGION_SIDE, MAX_REGION_SIDE * 2, MAX_REGION_SIDE * 2)
        )

    def extents(self) -> Box:
        """The bounding box of the region; a zero box when empty."""
        if not self._bands:
            return Box(0, 0, 0, 0)
        x1 = min(spans[0][0] for _, _, spans in self._bands)
        x2 = max(spans[-1][1] for _, _, spans in self._bands)
        y1 = self._bands[0][0]
        y2 = self._bands[-1][1]
        return Box(x1, y1, x2 - x1, y2 - y1)

    def contains_point(self, vec: Vector2D) -> bool:
        """Whether the pixel at ``vec`` (truncated) is in the region."""
        x, y = int(vec.x), int(vec.y)
        return _covers(_spans_at(self._bands, y), x)

    def empty(self) -> bool:
        """Whether the region holds no pixels."""
        return not self._bands

    def closest_point(self, vec: Vector2D) -> Vector2D:
        """A point of the region near ``vec``; ``vec`` itself when contained."""
        if self.contains_point(vec):
            return vec

        best_dist = 3.4028234663852886e38
        leader = vec
        for r in self.rects():
            if vec.x >= r.x2:
                x = float(r.x2 - 1)
            elif vec.x < r.x1:
                x = float(r.x1)
            else:
                x = vec.x

            if vec.y >= r.y2:
                y = float(r.y2 - 1)
            elif vec.y < r.y1:
                y = float(r.y1)
            else:
                y = vec.y

            distance = x * x + y * y
            if distance < best_dist:
                best_dist = distance
                leader = Vector2D(x, y)
        return leader

    def copy(self) -> "Region":
        """Return an independent copy."""
        duplicate = Region()
        duplicate._bands = self._bands
        return duplicate

    def rects(self) -> list[Rect]:
        """The rectangles of the region, sorted by band then by x."""
        return [Rect(x1, y1, x2, y2) for y1, y2, spans in self._bands for x1, x2 in spans]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self._bands == other._bands

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Region({self.rects()!r})"


def _bands_of(other: _RegionLike) -> tuple[_Band, ...]:
    if isinstance(other, Region):
        return other._bands
    if isinstance(other, Box):
        return _bands_from_xywh(other.x, other.y, other.w, other.h)
    if isinstance(other, Rect):
        return _rect_bands(other.x1, other.y1, other.x2, other.y2)
    raise TypeError(f"cannot make a region from {type(other).__name__}")