"""Small immutable 2-, 3- and 4-component vectors used by the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Iterator, TypeVar

_EQUALITY_EPSILON = 0.001
_NORMALIZE_EPSILON = 0.00001
_W_EPSILON = 0.0001

_V = TypeVar("_V", bound="_Vector")


class _Vector:
    """Arithmetic shared by every vector size.

    ``_SPATIAL`` is the number of leading components that take part in
    magnitude, approximate equality and the zero test.
    """

    __slots__ = ()
    _SPATIAL = 0

    def __iter__(self) -> Iterator[float]:
        return (getattr(self, f.name) for f in fields(self))

    def _spatial(self) -> tuple[float, ...]:
        return tuple(self)[: self._SPATIAL]

    def __add__(self: _V, other: _V) -> _V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self: _V, other: _V) -> _V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __mul__(self: _V, scalar: float) -> _V:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return type(self)(*(a * scalar for a in self))

    __rmul__ = __mul__

    def __neg__(self: _V) -> _V:
        return self * -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return all(
            abs(a - b) < _EQUALITY_EPSILON
            for a, b in zip(self._spatial(), other._spatial())
        )

    __hash__ = None  # type: ignore[assignment]


def _magnitude(vector: _Vector) -> float:
    return math.sqrt(sum(a * a for a in vector._spatial()))


def _normalize(vector: _V) -> _V:
    length = _magnitude(vector)
    if length < _NORMALIZE_EPSILON:
        return type(vector)()
    return type(vector)(*(a / length for a in vector))


def _is_zero(vector: _Vector) -> bool:
    return all(a == 0 for a in vector._spatial())


def _dot(first: _Vector, second: _Vector) -> float:
    return sum(a * b for a, b in zip(first, second))


def _project(vector: _V, onto: _V) -> _V:
    if _is_zero(onto):
        return onto
    return onto * (_dot(vector, onto) / _dot(onto, onto))


def _reflection(vector: _V, normal: _V) -> _V:
    return vector - normal * (2 * _dot(vector, normal))


def _component(vector: _Vector, index: int) -> float:
    values = tuple(vector)
    return values[index] if 0 <= index < len(values) else 0.0


def _with_component(vector: _V, index: int, value: float) -> _V:
    names = [f.name for f in fields(vector)]
    if not 0 <= index < len(names):
        return replace(vector)
    return replace(vector, **{names[index]: value})


def _distance(first: _V, second: _V) -> float:
    return _magnitude(first - second)


def _angle_between(first: _V, second: _V) -> float:
    cosine = _dot(_normalize(first), _normalize(second))
    return math.acos(max(-1.0, min(1.0, cosine)))


def _lerp(origin: _V, destination: _V, t: float) -> _V:
    return origin + (destination - origin) * t


@dataclass(frozen=True, eq=False)
class Vector2(_Vector):
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    _SPATIAL = 2

    def magnitude(self) -> float:
        """Euclidean length."""
        return _magnitude(self)

    def normalize(self) -> Vector2:
        """Unit-length copy; a near-zero vector normalizes to the zero vector."""
        return _normalize(self)

    def is_zero(self) -> bool:
        """True when both components are exactly zero."""
        return _is_zero(self)

    def project(self, onto: Vector2) -> Vector2:
        """Projection onto ``onto``; a zero ``onto`` is returned as is."""
        return _project(self, onto)

    def reflection(self, normal: Vector2) -> Vector2:
        """Reflection about ``normal``."""
        return _reflection(self, normal)

    @staticmethod
    def dot(first: Vector2, second: Vector2) -> float:
        """Dot product."""
        return _dot(first, second)

    @staticmethod
    def distance(first: Vector2, second: Vector2) -> float:
        """Length of the difference of two vectors."""
        return _distance(first, second)

    @staticmethod
    def angle_between(first: Vector2, second: Vector2) -> float:
        """Angle in radians between two vectors."""
        return _angle_between(first, second)

    @staticmethod
    def lerp(origin: Vector2, destination: Vector2, t: float) -> Vector2:
        """Linear interpolation from ``origin`` towards ``destination``."""
        return _lerp(origin, destination, t)


@dataclass(frozen=True, eq=False)
class Vector3(_Vector):
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _SPATIAL = 3

    def magnitude(self) -> float:
        """Euclidean length."""
        return _magnitude(self)

    def normalize(self) -> Vector3:
        """Unit-length copy; a near-zero vector normalizes to the zero vector."""
        return _normalize(self)

    def is_zero(self) -> bool:
        """True when every component is exactly zero."""
        return _is_zero(self)

    def project(self, onto: Vector3) -> Vector3:
        """Projection onto ``onto``; a zero ``onto`` is returned as is."""
        return _project(self, onto)

    def reflection(self, normal: Vector3) -> Vector3:
        """Reflection about ``normal``."""
        return _reflection(self, normal)

    def component(self, index: int) -> float:
        """Component by position; out-of-range positions read as 0."""
        return _component(self, index)

    def with_component(self, index: int, value: float) -> Vector3:
        """Copy with one component replaced; out-of-range positions are ignored."""
        return _with_component(self, index, value)

    @staticmethod
    def dot(first: Vector3, second: Vector3) -> float:
        """Dot product."""
        return _dot(first, second)

    @staticmethod
    def cross(first: Vector3, second: Vector3) -> Vector3:
        """Cross product as the renderer computes it."""
        x = first.y * second.z - first.z * second.y
        y = first.z * second.x - second.x * first.z
        z = first.x * second.y - first.y * second.x
        return Vector3(x, y, z)

    @staticmethod
    def distance(first: Vector3, second: Vector3) -> float:
        """Length of the difference of two vectors."""
        return _distance(first, second)

    @staticmethod
    def angle_between(first: Vector3, second: Vector3) -> float:
        """Angle in radians between two vectors."""
        return _angle_between(first, second)

    @staticmethod
    def lerp(origin: Vector3, destination: Vector3, t: float) -> Vector3:
        """Linear interpolation from ``origin`` towards ``destination``."""
        return _lerp(origin, destination, t)


@dataclass(frozen=True, eq=False)
class Vector4(_Vector):
    """A four-component vector; ``w`` is ignored by magnitude and equality."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    _SPATIAL = 3

    @staticmethod
    def from_vector3(vector: Vector3) -> Vector4:
        """Point in homogeneous form (``w`` = 1)."""
        return Vector4(vector.x, vector.y, vector.z, 1.0)

    def magnitude(self) -> float:
        """Euclidean length of x, y and z."""
        return _magnitude(self)

    def normalize(self) -> Vector4:
        """All four components divided by the xyz length; near zero gives zero."""
        return _normalize(self)

    def is_zero(self) -> bool:
        """True when x, y and z are exactly zero."""
        return _is_zero(self)

    def project(self, onto: Vector4) -> Vector4:
        """Projection onto ``onto``; a zero ``onto`` is returned as is."""
        return _project(self, onto)

    def reflection(self, normal: Vector4) -> Vector4:
        """Reflection about ``normal``."""
        return _reflection(self, normal)

    def to_vector3(self) -> Vector3:
        """The x, y and z components."""
        return Vector3(self.x, self.y, self.z)

    def to_homogeneous_vector3(self) -> Vector3:
        """x, y and z divided by ``w`` unless ``w`` is zero."""
        if self.w != 0.0:
            return Vector3(self.x / self.w, self.y / self.w, self.z / self.w)
        return Vector3(self.x, self.y, self.z)

    def is_point(self) -> bool:
        return abs(self.w - 1.0) < _W_EPSILON

    def is_direction(self) -> bool:
        return abs(self.w) < _W_EPSILON

    def component(self, index: int) -> float:
        """Component by position; out-of-range positions read as 0."""
        return _component(self, index)

    def with_component(self, index: int, value: float) -> Vector4:
        """Copy with one component replaced; out-of-range positions are ignored."""
        return _with_component(self, index, value)

    @staticmethod
    def dot(first: Vector4, second: Vector4) -> float:
        """Dot product over all four components."""
        return _dot(first, second)

    @staticmethod
    def distance(first: Vector4, second: Vector4) -> float:
        """Length of the difference of two vectors."""
        return _distance(first, second)

    @staticmethod
    def angle_between(first: Vector4, second: Vector4) -> float:
        """Angle in radians between two vectors."""
        return _angle_between(first, second)

    @staticmethod
    def lerp(origin: Vector4, destination: Vector4, t: float) -> Vector4:
        """Linear interpolation from ``origin`` towards ``destination``."""
        return _lerp(origin, destination, t)

    @staticmethod
    def normalize_xyz(vector: Vector4) -> Vector3:
        """Unit-length Vector3 from the x, y and z components."""
        return vector.to_vector3().normalize()