"""Row-major 3x3 and 4x4 matrices built on the vector types."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, TypeVar

from octaraster.vectors import Vector2, Vector3, Vector4

_INVERSE_EPSILON = 0.0001

_M = TypeVar("_M", bound="_Matrix")


def det3x3(a: float, b: float, c: float,
           d: float, e: float, f: float,
           g: float, h: float, i: float) -> float:
    """Determinant of the 3x3 matrix given row by row."""
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - g * e)


class _Matrix:
    """Arithmetic shared by square matrices whose rows are vectors."""

    __slots__ = ()
    _SIZE = 0
    _ROW: type = Vector3
    rows: tuple

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        if len(rows) != self._SIZE:
            raise ValueError(f"expected {self._SIZE} rows, got {len(rows)}")
        if not all(isinstance(row, self._ROW) for row in rows):
            raise ValueError(f"rows must be {self._ROW.__name__} instances")
        object.__setattr__(self, "rows", rows)

    def __iter__(self) -> Iterator:
        return iter(self.rows)

    def _row_at(self, index: int):
        if not 0 <= index < self._SIZE:
            return self._ROW()
        return self.rows[index]

    def _column_at(self, index: int):
        if not 0 <= index < self._SIZE:
            return self._ROW()
        return self._ROW(*(row.component(index) for row in self.rows))

    def _element(self, row: int, col: int) -> float:
        if not 0 <= row < self._SIZE:
            raise IndexError(f"row {row} out of range")
        return self.rows[row].component(col)

    def _transposed(self: _M) -> _M:
        return type(self)(tuple(self._column_at(c) for c in range(self._SIZE)))

    def _minor(self, row: int, col: int) -> list[float]:
        return [
            value
            for r, current in enumerate(self.rows) if r != row
            for c, value in enumerate(current) if c != col
        ]

    def _cofactor_matrix(self: _M) -> _M:
        return type(self)(tuple(
            self._ROW(*(
                (-1) ** (r + c) * self._minor_determinant(r, c)  # type: ignore[attr-defined]
                for c in range(self._SIZE)
            ))
            for r in range(self._SIZE)
        ))

    def _adjugate_inverse(self: _M, det: float) -> _M:
        return self._cofactor_matrix()._transposed() * (1.0 / det)

    def __add__(self: _M, other: _M) -> _M:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(tuple(a + b for a, b in zip(self.rows, other.rows)))

    def __sub__(self: _M, other: _M) -> _M:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(tuple(a - b for a, b in zip(self.rows, other.rows)))

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return type(self)(tuple(row * other for row in self.rows))
        if isinstance(other, self._ROW):
            return self._ROW(*(self._ROW.dot(row, other) for row in self.rows))
        if isinstance(other, type(self)):
            columns = [other._column_at(c) for c in range(self._SIZE)]
            return type(self)(tuple(
                self._ROW(*(self._ROW.dot(row, col) for col in columns))
                for row in self.rows
            ))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(a == b for a, b in zip(self.rows, other.rows))

    __hash__ = None  # type: ignore[assignment]


def _identity3() -> tuple[Vector3, Vector3, Vector3]:
    return (Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(0, 0, 1))


def _identity4() -> tuple[Vector4, Vector4, Vector4, Vector4]:
    return (
        Vector4(1, 0, 0, 0),
        Vector4(0, 1, 0, 0),
        Vector4(0, 0, 1, 0),
        Vector4(0, 0, 0, 1),
    )


@dataclass(frozen=True, eq=False)
class Matrix3(_Matrix):
    """A 3x3 matrix; defaults to the identity."""

    rows: tuple[Vector3, Vector3, Vector3] = field(default_factory=_identity3)

    _SIZE = 3
    _ROW = Vector3

    def _minor_determinant(self, row: int, col: int) -> float:
        a, b, c, d = self._minor(row, col)
        return a * d - b * c

    def row(self, index: int) -> Vector3:
        """Row by position; out-of-range positions give the zero vector."""
        return self._row_at(index)

    def column(self, index: int) -> Vector3:
        """Column by position; out-of-range positions give the zero vector."""
        return self._column_at(index)

    def get(self, row: int, col: int) -> float:
        """Element at ``row``, ``col``."""
        return self._element(row, col)

    def determinant(self) -> float:
        return det3x3(*(value for row in self.rows for value in row))

    def transpose(self) -> Matrix3:
        """Matrix with rows and columns exchanged."""
        return self._transposed()

    def cofactors(self) -> Matrix3:
        """Matrix of signed minors."""
        return self._cofactor_matrix()

    def inverse(self) -> Matrix3:
        """Inverse; the identity when the determinant is below a small positive bound."""
        det = self.determinant()
        if det < _INVERSE_EPSILON:
            return Matrix3()
        return self._adjugate_inverse(det)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            result = self * Vector3(other.x, other.y, 1.0)
            return Vector2(result.x, result.y)
        return super().__mul__(other)

    @staticmethod
    def identity() -> Matrix3:
        return Matrix3()

    @staticmethod
    def zero() -> Matrix3:
        return Matrix3((Vector3(), Vector3(), Vector3()))

    @staticmethod
    def translation(x: float, y: float) -> Matrix3:
        """2D homogeneous translation."""
        return Matrix3((Vector3(1, 0, x), Vector3(0, 1, y), Vector3(0, 0, 1)))

    @staticmethod
    def scaling(x: float, y: float) -> Matrix3:
        """2D homogeneous scaling."""
        return Matrix3((Vector3(x, 0, 0), Vector3(0, y, 0), Vector3(0, 0, 1)))

    @staticmethod
    def rotation(angle: float) -> Matrix3:
        """Rotation about the z axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Matrix3((Vector3(c, s, 0), Vector3(-s, c, 0), Vector3(0, 0, 1)))


@dataclass(frozen=True, eq=False)
class Matrix4(_Matrix):
    """A 4x4 matrix; defaults to the identity."""

    rows: tuple[Vector4, Vector4, Vector4, Vector4] = field(default_factory=_identity4)

    _SIZE = 4
    _ROW = Vector4

    def _minor_determinant(self, row: int, col: int) -> float:
        return det3x3(*self._minor(row, col))

    def row(self, index: int) -> Vector4:
        """Row by position; out-of-range positions give the zero vector."""
        return self._row_at(index)

    def column(self, index: int) -> Vector4:
        """Column by position; out-of-range positions give the zero vector."""
        return self._column_at(index)

    def get(self, row: int, col: int) -> float:
        """Element at ``row``, ``col``."""
        return self._element(row, col)

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return sum(
            (-1) ** c * value * self._minor_determinant(0, c)
            for c, value in enumerate(self.rows[0])
        )

    def transpose(self) -> Matrix4:
        """Matrix with rows and columns exchanged."""
        return self._transposed()

    def cofactors(self) -> Matrix4:
        """Matrix of signed minors."""
        return self._cofactor_matrix()

    def inverse(self) -> Matrix4:
        """Inverse; the identity when the determinant is exactly zero."""
        det = self.determinant()
        if det == 0:
            return Matrix4()
        return self._adjugate_inverse(det)

    @staticmethod
    def identity() -> Matrix4:
        return Matrix4()

    @staticmethod
    def zero() -> Matrix4:
        return Matrix4((Vector4(), Vector4(), Vector4(), Vector4()))

    @staticmethod
    def translation(x: float, y: float, z: float) -> Matrix4:
        return Matrix4((
            Vector4(1, 0, 0, x),
            Vector4(0, 1, 0, y),
            Vector4(0, 0, 1, z),
            Vector4(0, 0, 0, 1),
        ))

    @staticmethod
    def translation_to(position: Vector3) -> Matrix4:
        """Translation by the components of ``position``."""
        return Matrix4.translation(position.x, position.y, position.z)

    @staticmethod
    def scaling(x: float, y: float, z: float) -> Matrix4:
        return Matrix4((
            Vector4(x, 0, 0, 0),
            Vector4(0, y, 0, 0),
            Vector4(0, 0, z, 0),
            Vector4(0, 0, 0, 1),
        ))

    @staticmethod
    def rotation_x(angle: float) -> Matrix4:
        c, s = math.cos(angle), math.sin(angle)
        return Matrix4((
            Vector4(1, 0, 0, 0),
            Vector4(0, c, s, 0),
            Vector4(0, -s, c, 0),
            Vector4(0, 0, 0, 1),
        ))

    @staticmethod
    def rotation_y(angle: float) -> Matrix4:
        c, s = math.cos(angle), math.sin(angle)
        return Matrix4((
            Vector4(c, 0, -s, 0),
            Vector4(0, 1, 0, 0),
            Vector4(s, 0, c, 0),
            Vector4(0, 0, 0, 1),
        ))

    @staticmethod
    def rotation_z(angle: float) -> Matrix4:
        c, s = math.cos(angle), math.sin(angle)
        return Matrix4((
            Vector4(c, s, 0, 0),
            Vector4(-s, c, 0, 0),
            Vector4(0, 0, 1, 0),
            Vector4(0, 0, 0, 1),
        ))

    @staticmethod
    def perspective(fov: float, near: float, far: float, aspect: float) -> Matrix4:
        """Perspective projection; ``fov`` is used as an angle in radians."""
        focal = 1.0 / math.tan(fov * 0.5)
        range_inverse = 1.0 / (near - far)
        return Matrix4((
            Vector4(focal / aspect, 0, 0, 0),
            Vector4(0, focal, 0, 0),
            Vector4(0, 0, -far * range_inverse, far * near * range_inverse),
            Vector4(0, 0, -1, 0),
        ))

    @staticmethod
    def orthographic(right: float, left: float, top: float, bottom: float,
                     near: float, far: float) -> Matrix4:
        """Orthographic projection of the given box onto the unit cube."""
        width = right - left
        height = top - bottom
        depth = far - near
        return Matrix4((
            Vector4(2 / width, 0, 0, -(right + left) / width),
            Vector4(0, 2 / height, 0, -(top + bottom) / height),
            Vector4(0, 0, -2 / depth, -(far + near) / depth),
            Vector4(0, 0, 0, 1),
        ))

    @staticmethod
    def look_at(eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """View matrix for a camera at ``eye`` looking at ``target``."""
        forward = (target - eye).normalize()
        right = Vector3.cross(forward, up).normalize()
        new_up = Vector3.cross(right, forward)
        return Matrix4((
            Vector4(right.x, right.y, right.z, -Vector3.dot(right, eye)),
            Vector4(new_up.x, new_up.y, new_up.z, -Vector3.dot(new_up, eye)),
            Vector4(forward.x, forward.y, forward.z, -Vector3.dot(forward, eye)),
            Vector4(0, 0, 0, 1),
        ))