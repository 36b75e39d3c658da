"""A row-major 3x3 matrix of single-precision floats for 2D projections."""

from __future__ import annotations

import math
import struct
from typing import Iterable, Optional, Union

from hyprutils.box import Box, Transform
from hyprutils.vector2d import Vector2D


def _f32(value: float) -> float:
    """Round ``value`` to the nearest single-precision float."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_f32(value: float) -> str:
    """Shortest text that reads back as the same single-precision value."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    text = f"{value:.8e}"
    for precision in range(9):
        candidate = f"{value:.{precision}e}"
        if _f32(float(candidate)) == value:
            text = candidate
            break

    mantissa, exponent_text = text.split("e")
    negative = mantissa.startswith("-")
    digits = mantissa.lstrip("-").replace(".", "").rstrip("0") or "0"
    exponent = int(exponent_text)

    scientific = digits[0]
    if len(digits) > 1:
        scientific += "." + digits[1:]
    scientific += f"e{'-' if exponent < 0 else '+'}{abs(exponent):02d}"

    if exponent >= 0:
        if len(digits) <= exponent + 1:
            fixed = digits + "0" * (exponent + 1 - len(digits))
        else:
            fixed = digits[: exponent + 1] + "." + digits[exponent + 1 :]
    else:
        fixed = "0." + "0" * (-exponent - 1) + digits

    chosen = fixed if len(fixed) <= len(scientific) else scientific
    return ("-" if negative else "") + chosen


class Mat3x3:
    """A 3x3 matrix; in-place operations return the matrix for chaining."""

    __slots__ = ("_m",)

    def __init__(self, values: Optional[Iterable[float]] = None) -> None:
        if values is None:
            self._m = [0.0] * 9
            return
        items = [_f32(float(v)) for v in values]
        if len(items) != 9:
            raise ValueError(f"a 3x3 matrix needs 9 values, got {len(items)}")
        self._m = items

    @classmethod
    def identity(cls) -> "Mat3x3":
        """The identity matrix."""
        return cls((1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0))

    @classmethod
    def output_projection(cls, size: Vector2D, transform: Transform) -> "Mat3x3":
        """Projection for an output of ``size`` with the given transform."""
        t = _TRANSFORMS[Transform(transform)]._m
        x = _f32(2.0 / size.x)
        y = _f32(2.0 / size.y)

        mat = cls()
        m = mat._m
        m[0] = _f32(x * t[0])
        m[1] = _f32(x * t[1])
        m[3] = _f32(y * t[3])
        m[4] = _f32(y * t[4])
        m[2] = -math.copysign(1.0, _f32(m[0] + m[1]))
        m[5] = -math.copysign(1.0, _f32(m[3] + m[4]))
        m[8] = 1.0
        return mat

    def values(self) -> tuple[float, ...]:
        """The nine values in row-major order."""
        return tuple(self._m)

    def project_box(self, box: Box, transform: Transform, rot: float = 0.0) -> "Mat3x3":
        """Return this matrix times the projection of ``box`` (rotation in radians, CCW)."""
        mat = Mat3x3.identity()
        box_size = box.size()

        mat.translate(box.pos())

        if rot != 0:
            mat.translate(box_size / 2)
            mat.rotate(rot)
            mat.translate(-box_size / 2)

        mat.scale(box_size)

        if Transform(transform) is not Transform.NORMAL:
            mat.translate(Vector2D(0.5, 0.5))
            mat.transform(transform)
            mat.translate(Vector2D(-0.5, -0.5))

        return self.copy().multiply(mat)

    def transform(self, transform: Transform) -> "Mat3x3":
        """Multiply by the matrix of an output transform."""
        return self.multiply(_TRANSFORMS[Transform(transform)])

    def rotate(self, rot: float) -> "Mat3x3":
        """Multiply by a rotation of ``rot`` radians, counter-clockwise."""
        cos_r = math.cos(rot)
        sin_r = math.sin(rot)
        return self.multiply(Mat3x3((cos_r, -sin_r, 0.0, sin_r, cos_r, 0.0, 0.0, 0.0, 1.0)))

    def scale(self, factor: Union[Vector2D, float]) -> "Mat3x3":
        """Multiply by a scale, uniform for a number or per axis for a vector."""
        if isinstance(factor, Vector2D):
            sx, sy = factor.x, factor.y
        else:
            sx = sy = float(factor)
        return self.multiply(Mat3x3((sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, 1.0)))

    def translate(self, offset: Vector2D) -> "Mat3x3":
        """Multiply by a translation of ``offset``."""
        return self.multiply(Mat3x3((1.0, 0.0, offset.x, 0.0, 1.0, offset.y, 0.0, 0.0, 1.0)))

    def transpose(self) -> "Mat3x3":
        """Swap rows and columns."""
        m = self._m
        self._m = [m[0], m[3], m[6], m[1], m[4], m[7], m[2], m[5], m[8]]
        return self

    def multiply(self, other: "Mat3x3") -> "Mat3x3":
        """Replace this matrix with ``self * other``."""
        a = self._m
        b = other._m
        product = []
        for row in range(3):
            r0, r1, r2 = a[row * 3], a[row * 3 + 1], a[row * 3 + 2]
            for col in range(3):
                partial = _f32(_f32(r0 * b[col]) + _f32(r1 * b[3 + col]))
                product.append(_f32(partial + _f32(r2 * b[6 + col])))
        self._m = product
        return self

    def copy(self) -> "Mat3x3":
        """Return an independent copy."""
        return Mat3x3(self._m)

    def __str__(self) -> str:
        return "[mat3x3: " + ", ".join(_format_f32(v) for v in self._m) + "]"

    def __repr__(self) -> str:
        return f"Mat3x3({self._m!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3x3):
            return NotImplemented
        return self._m == other._m

    __hash__ = None  # type: ignore[assignment]


_TRANSFORMS: dict[Transform, Mat3x3] = {
    Transform.NORMAL: Mat3x3((1, 0, 0, 0, 1, 0, 0, 0, 1)),
    Transform.ROTATED_90: Mat3x3((0, 1, 0, -1, 0, 0, 0, 0, 1)),
    Transform.ROTATED_180: Mat3x3((-1, 0, 0, 0, -1, 0, 0, 0, 1)),
    Transform.ROTATED_270: Mat3x3((0, -1, 0, 1, 0, 0, 0, 0, 1)),
    Transform.FLIPPED: Mat3x3((-1, 0, 0, 0, 1, 0, 0, 0, 1)),
    Transform.FLIPPED_90: Mat3x3((0, 1, 0, 1, 0, 0, 0, 0, 1)),
    Transform.FLIPPED_180: Mat3x3((1, 0, 0, 0, -1, 0, 0, 0, 1)),
    Transform.FLIPPED_270: Mat3x3((0, -1, 0, -1, 0, 0, 0, 0, 1)),
}