"""A two-dimensional vector of floats."""

from __future__ import annotations

import math
from typing import Iterator, Union

_Number = Union[int, float]


def _round_half_away(value: float) -> float:
    # Rounds halfway cases away from zero, unlike the built-in round().
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    floored = math.floor(magnitude)
    if magnitude - floored >= 0.5:
        floored += 1
    return math.copysign(float(floored), value)


def _floor(value: float) -> float:
    if not math.isfinite(value):
        return value
    return float(math.floor(value))


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if high < value:
        return high
    return value


def _format_default(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


class Vector2D:
    """A mutable 2D vector with component-wise arithmetic."""

    __slots__ = ("x", "y")

    def __init__(self, x: _Number = 0.0, y: _Number = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def normalize(self) -> float:
        """Divide both components by the larger absolute one and return it.

        Raises ZeroDivisionError for the zero vector.
        """
        largest = abs(self.x) if abs(self.x) > abs(self.y) else abs(self.y)
        self.x /= largest
        self.y /= largest
        return largest

    def floor(self) -> "Vector2D":
        """Return a vector with both components rounded down."""
        return Vector2D(_floor(self.x), _floor(self.y))

    def round(self) -> "Vector2D":
        """Return a vector with both components rounded half away from zero."""
        return Vector2D(_round_half_away(self.x), _round_half_away(self.y))

    def clamp(self, minimum: "Vector2D", maximum: "Vector2D" = None) -> "Vector2D":
        """Clamp component-wise; a maximum below the minimum means no upper bound."""
        if maximum is None:
            maximum = Vector2D(-1, -1)
        high_x = math.inf if maximum.x < minimum.x else maximum.x
        high_y = math.inf if maximum.y < minimum.y else maximum.y
        return Vector2D(_clamp(self.x, minimum.x, high_x), _clamp(self.y, minimum.y, high_y))

    def distance(self, other: "Vector2D") -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt(self.distance_sq(other))

    def distance_sq(self, other: "Vector2D") -> float:
        """Squared Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def size(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def component_max(self, other: "Vector2D") -> "Vector2D":
        """Component-wise maximum of this vector and ``other``."""
        return Vector2D(max(self.x, other.x), max(self.y, other.y))

    def __add__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, other: Union["Vector2D", _Number]) -> "Vector2D":
        if isinstance(other, Vector2D):
            return Vector2D(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: _Number) -> "Vector2D":
        if isinstance(other, (int, float)):
            return Vector2D(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union["Vector2D", _Number]) -> "Vector2D":
        if isinstance(other, Vector2D):
            return Vector2D(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2D(self.x / other, self.y / other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # type: ignore[assignment]

    def __gt__(self, other: "Vector2D") -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x > other.x and self.y > other.y

    def __lt__(self, other: "Vector2D") -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x < other.x and self.y < other.y

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __format__(self, spec: str) -> str:
        """Format with flags ``j`` (JSON array), ``X`` (``WxH``) and a digit precision."""
        as_json = False
        as_x = False
        precision = ""
        for char in spec:
            if char == "j":
                as_json = True
            elif char == "X":
                as_x = True
            elif char.isdigit() and char.isascii():
                precision += char
            else:
                raise ValueError("invalid format specification")

        if precision:
            digits = int(precision)
            x_text = f"{self.x:.{digits}f}"
            y_text = f"{self.y:.{digits}f}"
        else:
            x_text = _format_default(self.x)
            y_text = _format_default(self.y)

        if as_json:
            return f"[{x_text}, {y_text}]"
        if as_x:
            return f"{x_text}x{y_text}"
        return f"[Vector2D: x: {x_text}, y: {y_text}]"

    def __str__(self) -> str:
        return format(self, "")

    def __repr__(self) -> str:
        return f"Vector2D({self.x!r}, {self.y!r})"