"""Software renderer that draws wireframes and rasterizes triangles into a pixel buffer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

from octaraster.camera import Camera
from octaraster.matrices import Matrix4
from octaraster.shape import PI, generate_points
from octaraster.vectors import Vector3

FOV = 90.0
NEAR_PLANE = 0.1
FAR_PLANE = 10.0
BARYCENTRIC_EPSILON = 0.0001
OPAQUE = 0xFF
WHITE = 0xFFFFFFFF


class ShapeSides(IntEnum):
    """Side counts of the polygons the scenes know about."""

    TRI = 3
    SQUARE = 4
    PENTAGON = 5
    HEXAGON = 6
    OCTAGON = 7


class RenderLab(IntEnum):
    """The scenes the renderer can build."""

    OCTAGON = 0
    WEEK_TWO_LAB = 1
    WEEK_TWO_OPTIONAL = 2


@dataclass(frozen=True)
class _LabSettings:
    camera_position: Vector3
    width: int
    height: int


_LAB_SETTINGS = {
    RenderLab.OCTAGON: _LabSettings(Vector3(0.0, 70.0, 5.0), 1920, 1080),
    RenderLab.WEEK_TWO_LAB: _LabSettings(Vector3(0.0, -0.8, 0.25), 500, 500),
    RenderLab.WEEK_TWO_OPTIONAL: _LabSettings(Vector3(0.0, -2.0, 2.0), 500, 500),
}


@dataclass
class Actor:
    """An object in the scene: its faces, triangles and placement."""

    vertices: list[list[Vector3]] = field(default_factory=list)
    triangles: list[list[Vector3]] = field(default_factory=list)
    world_matrix: Matrix4 = field(default_factory=Matrix4)
    position: Vector3 = field(default_factory=Vector3)
    rotate: bool = False
    is_plane: bool = False
    rotation_modifier: float = 0.0
    color: int = WHITE


def lerp_blend(front: int, back: int) -> int:
    """Blend ``front`` over ``back`` by the front alpha; the back alpha is kept."""
    front_alpha = ((front >> 24) & 0xFF) / 255.0
    back_alpha = (back >> 24) & 0xFF

    def channel(shift: int) -> int:
        f = (front >> shift) & 0xFF
        b = (back >> shift) & 0xFF
        return int(f * front_alpha + b * (1 - front_alpha))

    return (back_alpha << 24) | (channel(16) << 16) | (channel(8) << 8) | channel(0)


def determine_triangles(actor: Actor) -> None:
    """Append the side triangles of a prism actor, plus both caps for a triangle."""
    if len(actor.vertices) < 2:
        raise ValueError("missing top face from vertex build")
    bottom, top = actor.vertices[0], actor.vertices[1]
    count = len(bottom)
    for i in range(count):
        following = (i + 1) % count
        actor.triangles.append([bottom[i], top[i], top[following]])
    for i in range(count):
        following = (i + 1) % count
        actor.triangles.append([bottom[i], bottom[following], top[following]])
    if count == ShapeSides.TRI:
        actor.triangles.append(list(bottom))
        actor.triangles.append(list(top))


def _sweep(start: float, stop: float, step: float) -> Iterator[float]:
    if step <= 0:
        yield start
        return
    value = start
    while value <= stop:
        yield value
        value += step


class _Projector:
    """Camera and world transform folded into one matrix for fast projection."""

    __slots__ = ("_rows", "_width", "_height")

    def __init__(self, camera: Camera, world_matrix: Matrix4) -> None:
        combined = camera.projection_matrix() * camera.view_matrix() * world_matrix
        self._rows = tuple(tuple(row) for row in combined.rows)
        self._width = camera.screen_width
        self._height = camera.screen_height

    def __call__(self, x: float, y: float, z: float) -> tuple[float, float]:
        r0, r1, _, r3 = self._rows
        px = r0[0] * x + r0[1] * y + r0[2] * z + r0[3]
        py = r1[0] * x + r1[1] * y + r1[2] * z + r1[3]
        w = r3[0] * x + r3[1] * y + r3[2] * z + r3[3]
        if w != 0.0:
            px /= w
            py /= w
        return (px + 1.0) * 0.5 * self._width, (py + 1.0) * 0.5 * self._height


class Renderer:
    """Owns a camera, a scene of actors and a 32-bit ARGB pixel buffer."""

    def __init__(self, lab: RenderLab = RenderLab.WEEK_TWO_OPTIONAL,
                 width: int | None = None, height: int | None = None) -> None:
        self.lab = RenderLab(lab)
        settings = _LAB_SETTINGS[self.lab]
        self.width = settings.width if width is None else width
        self.height = settings.height if height is None else height
        for name, size in (("width", self.width), ("height", self.height)):
            if not 1 <= size <= 0xFFFF:
                raise ValueError(f"{name} must be between 1 and 65535, got {size}")
        self.camera = Camera(settings.camera_position, Vector3(0, 0, 0), Vector3(0, 0, 1),
                             FOV, self.width / self.height, NEAR_PLANE, FAR_PLANE,
                             self.width, self.height)
        self.pixels = [0] * (self.width * self.height)
        self.actors: list[Actor] = []
        self.clear()
        self.build_scene()

    def clear(self) -> None:
        """Set every pixel to transparent black."""
        self.pixels[:] = [0] * len(self.pixels)

    def build_scene(self) -> None:
        """Add the lab's actors to the scene and draw them once."""
        if self.lab is RenderLab.WEEK_TWO_LAB:
            self._build_week_two_lab()
        elif self.lab is RenderLab.WEEK_TWO_OPTIONAL:
            self._build_week_two_optional()
        else:
            self._build_octagon()

    def _build_octagon(self) -> None:
        origin = Vector3(0, 0, 0)
        octagon_center = Vector3(10, 0, 0)
        square_center = Vector3(-20, 0, 0)
        plane = Actor(position=origin,
                      vertices=generate_points(4, 50, 0, origin, True),
                      world_matrix=Matrix4.translation_to(origin))
        octagon = Actor(position=octagon_center,
                        vertices=generate_points(8, 20, 10, octagon_center),
                        world_matrix=Matrix4.translation_to(octagon_center))
        square = Actor(position=square_center,
                       vertices=generate_points(4, 10, 10, square_center),
                       world_matrix=Matrix4.translation_to(square_center),
                       rotation_modifier=0.001, rotate=True)
        self.actors.extend((plane, octagon, square))
        self.render_shapes(self.actors)

    def _build_week_two_lab(self) -> None:
        origin = Vector3(0, 0, 0)
        plane = Actor(position=origin, rotation_modifier=0.0,
                      vertices=generate_points(4, 0.71, 0, origin, True), is_plane=True)
        cube = Actor(position=origin, rotation_modifier=0.001,
                     vertices=generate_points(4, 0.25, 0.5, origin), color=0xFF00FF00)
        octagon_position = Vector3(0, 0, -0.75)
        octagon = Actor(position=octagon_position, rotation_modifier=0.0, color=0xFFFF0000,
                        vertices=generate_points(8, 0.25, 0.5, octagon_position))
        self.actors.extend((plane, cube, octagon))
        self.render_shapes(self.actors)

    def _build_week_two_optional(self) -> None:
        origin = Vector3(0, 0, 0)
        triangle = Actor(position=origin, vertices=generate_points(3, 1, 1, origin))
        determine_triangles(triangle)
        self.actors.append(triangle)
        self.render_shapes(self.actors)
        self.raster_actor(triangle)

    def update_actors(self) -> None:
        """Advance rotating actors by one degree and redraw every wireframe."""
        for actor in self.actors:
            if actor.rotation_modifier:
                actor.rotation_modifier += 1.0
                to_origin = Matrix4.translation_to(actor.position * -1)
                rotation = Matrix4.rotation_z(actor.rotation_modifier * PI / 180.0)
                back = Matrix4.translation_to(actor.position)
                actor.world_matrix = back * rotation * to_origin
            self._take_shape(actor)

    def render_shapes(self, actors: list[Actor]) -> None:
        """Draw the wireframe of each actor."""
        for actor in actors:
            self._take_shape(actor)

    def raster_scene(self) -> None:
        """Rasterize every triangle of every actor in the scene."""
        for actor in self.actors:
            self.raster_actor(actor)

    def raster_actor(self, actor: Actor) -> None:
        """Fill the actor's camera-facing triangles with barycentric colours."""
        projector = _Projector(self.camera, actor.world_matrix)
        for triangle in actor.triangles:
            self._raster_triangle(triangle, projector)

    def _raster_triangle(self, triangle: list[Vector3], projector: _Projector) -> None:
        b, a, c = triangle[0], triangle[1], triangle[2]
        normal = Vector3.cross(c - a, b - a).normalize()
        center = Vector3(a.x + b.x + c.x / 3.0, a.y + b.y + c.y / 3.0, a.z + b.z + c.z / 3.0)
        view = (self.camera.position - center).normalize()
        if Vector3.dot(normal, view) <= 0:
            return
        xs, ys, zs = (a.x, b.x, c.x), (a.y, b.y, c.y), (a.z, b.z, c.z)
        use_z = max(zs) - min(zs) > max(ys) - min(ys)
        low, high = (min(zs), max(zs)) if use_z else (min(ys), max(ys))
        min_x, max_x = min(xs), max(xs)

        basis0 = c - a
        basis1 = b - a
        d00 = Vector3.dot(basis0, basis0)
        d01 = Vector3.dot(basis0, basis1)
        d11 = Vector3.dot(basis1, basis1)
        denominator = d00 * d11 - d01 * d01
        if denominator == 0:
            return
        inverse = 1.0 / denominator
        step_x = (max_x - min_x) / self.width
        step_s = (high - low) / self.height
        b0x, b0y, b0z = basis0.x, basis0.y, basis0.z
        b1x, b1y, b1z = basis1.x, basis1.y, basis1.z

        for x in _sweep(min_x, max_x, step_x):
            for s in _sweep(low, high, step_s):
                px, py, pz = (x, b.y, s) if use_z else (x, s, b.z)
                tx, ty, tz = px - a.x, py - a.y, pz - a.z
                dot02 = b0x * tx + b0y * ty + b0z * tz
                dot12 = b1x * tx + b1y * ty + b1z * tz
                u = (d11 * dot02 - d01 * dot12) * inverse
                v = (d00 * dot12 - d01 * dot02) * inverse
                w = 1 - u - v
                if u >= BARYCENTRIC_EPSILON and v >= BARYCENTRIC_EPSILON and w >= BARYCENTRIC_EPSILON:
                    color = ((OPAQUE << 24) | ((int(u * 0xFF) & 0xFF) << 16)
                             | ((int(v * 0xFF) & 0xFF) << 8) | (int(w * 0xFF) & 0xFF))
                    self._plot(*projector(px, py, pz), color)

    def _take_shape(self, actor: Actor) -> None:
        projector = _Projector(self.camera, actor.world_matrix)
        bottom = actor.vertices[0]
        self._face(bottom, projector, actor.color)
        if actor.is_plane:
            lines = actor.vertices[1]
            for start, end in zip(lines[::2], lines[1::2]):
                self._line(start, end, projector, actor.color)
            return
        top = actor.vertices[1]
        self._face(top, projector, actor.color)
        for lower, upper in zip(bottom, top):
            self._line(lower, upper, projector, actor.color)

    def _face(self, face: list[Vector3], projector: _Projector, color: int) -> None:
        if not face:
            return
        for start, end in zip(face, face[1:]):
            self._line(start, end, projector, color)
        self._line(face[-1], face[0], projector, color)

    def draw_line(self, start: Vector3, end: Vector3, world_matrix: Matrix4, color: int) -> None:
        """Draw a line between two local-space points, one pixel per step."""
        self._line(start, end, _Projector(self.camera, world_matrix), color)

    def _line(self, start: Vector3, end: Vector3, projector: _Projector, color: int) -> None:
        sx, sy = projector(start.x, start.y, start.z)
        ex, ey = projector(end.x, end.y, end.z)
        distance = math.hypot(sx - ex, sy - ey)
        if not math.isfinite(distance):
            return
        if distance == 0:
            self._plot(ex, ey, color)
            return
        increment = 1.0 / distance
        ratio = increment
        while True:
            between = Vector3.lerp(start, end, ratio)
            ratio += increment
            self._plot(*projector(between.x, between.y, between.z), color)
            if between == end or ratio >= 1:
                break

    def draw_point(self, point: Vector3, world_matrix: Matrix4, color: int) -> None:
        """Colour the pixel a local-space point lands on, if it is on screen."""
        screen = self.camera.world_to_screen(point, world_matrix)
        self._plot(screen.x, screen.y, color)

    def _plot(self, screen_x: float, screen_y: float, color: int) -> None:
        if not (math.isfinite(screen_x) and math.isfinite(screen_y)):
            return
        x = math.floor(screen_x + 0.5)
        y = math.floor(screen_y + 0.5)
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def frame(self) -> list[int]:
        """Clear, advance and rasterize the scene; return a copy of the pixels."""
        self.clear()
        self.update_actors()
        self.raster_scene()
        return list(self.pixels)