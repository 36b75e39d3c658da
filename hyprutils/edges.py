"""A set of box edges."""

from __future__ import annotations

import enum
from typing import Union


class Edge(enum.IntFlag):
    """Single box edges, combinable as flags."""

    NONE = 0
    TOP = 1
    LEFT = 2
    BOTTOM = 4
    RIGHT = 8


_EdgesLike = Union["Edges", int]


def _value_of(other: object) -> Union[int, None]:
    if isinstance(other, Edges):
        return int(other.edges)
    if isinstance(other, int) and not isinstance(other, bool):
        return int(other) & 0xFF
    return None


class Edges:
    """A mutable set of :class:`Edge` flags."""

    __slots__ = ("edges",)

    def __init__(self, edges: int = Edge.NONE) -> None:
        self.edges = Edge(int(edges) & 0xFF)

    def __eq__(self, other: object) -> bool:
        value = _value_of(other)
        if value is None:
            return NotImplemented
        return int(self.edges) == value

    __hash__ = None  # type: ignore[assignment]

    def __or__(self, other: _EdgesLike) -> "Edges":
        value = _value_of(other)
        if value is None:
            return NotImplemented
        return Edges(int(self.edges) | value)

    def __and__(self, other: _EdgesLike) -> "Edges":
        value = _value_of(other)
        if value is None:
            return NotImplemented
        return Edges(int(self.edges) & value)

    def __xor__(self, other: _EdgesLike) -> "Edges":
        value = _value_of(other)
        if value is None:
            return NotImplemented
        return Edges(int(self.edges) ^ value)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def _has(self, flag: Edge) -> bool:
        return bool(self.edges & flag)

    def _set(self, flag: Edge, state: bool) -> None:
        self.edges = Edge((int(self.edges) & ~int(flag) & 0xFF) | (int(flag) if state else 0))

    @property
    def top(self) -> bool:
        """Whether the set holds the top edge."""
        return self._has(Edge.TOP)

    @top.setter
    def top(self, state: bool) -> None:
        self._set(Edge.TOP, state)

    @property
    def left(self) -> bool:
        """Whether the set holds the left edge."""
        return self._has(Edge.LEFT)

    @left.setter
    def left(self, state: bool) -> None:
        self._set(Edge.LEFT, state)

    @property
    def bottom(self) -> bool:
        """Whether the set holds the bottom edge."""
        return self._has(Edge.BOTTOM)

    @bottom.setter
    def bottom(self, state: bool) -> None:
        self._set(Edge.BOTTOM, state)

    @property
    def right(self) -> bool:
        """Whether the set holds the right edge."""
        return self._has(Edge.RIGHT)

    @right.setter
    def right(self, state: bool) -> None:
        self._set(Edge.RIGHT, state)

    def __repr__(self) -> str:
        return f"Edges({int(self.edges)})"