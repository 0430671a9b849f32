"""Vertex generation for regular prisms and grid planes."""

from __future__ import annotations

from octaraster.matrices import Matrix3
from octaraster.vectors import Vector3

PI = 3.14159

_PLANE_RADIUS = 0.5
_PLANE_STEP = 0.1


def _steps(start: float, stop: float, step: float):
    value = start
    while value <= stop:
        yield value
        value += step


def generate_plane_lines() -> list[Vector3]:
    """Endpoint pairs of the grid lines of a unit plane centred on the origin.

    Consecutive entries form one line: first the lines running along x,
    then the lines running along y.
    """
    radius = _PLANE_RADIUS
    lines: list[Vector3] = []
    for y in _steps(-radius, radius, _PLANE_STEP):
        lines.extend((Vector3(-radius, y, 0), Vector3(radius, y, 0)))
    for x in _steps(-radius, radius, _PLANE_STEP):
        lines.extend((Vector3(x, -radius, 0), Vector3(x, radius, 0)))
    return lines


def generate_points(sides: int, size: float, height: float, center: Vector3,
                    is_plane: bool = False) -> list[list[Vector3]]:
    """Vertices of a regular polygon prism around ``center``.

    Returns ``[bottom, top]`` where ``top`` is ``bottom`` raised by
    ``height`` along z. With ``is_plane`` the result is ``[bottom, lines]``
    where ``lines`` are the grid line endpoints of a plane.
    """
    if sides < 1:
        raise ValueError(f"a polygon needs at least one side, got {sides}")
    radius = Vector3(size, 0, 0)
    degree_offset = 45.0 if sides > 3 else 30.4
    angle = (2.0 * PI) / sides
    to_normal = Matrix3.rotation(degree_offset * PI / 180.0)
    bottom = [
        to_normal * Matrix3.rotation(step * angle) * radius + center
        for step in range(sides)
    ]
    if is_plane:
        return [bottom, generate_plane_lines()]
    lift = Vector3(0, 0, height)
    top = [point + lift for point in bottom]
    return [bottom, top]