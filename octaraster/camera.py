"""Perspective camera that maps world-space points to screen pixels."""

from __future__ import annotations

from octaraster.matrices import Matrix4
from octaraster.vectors import Vector2, Vector3, Vector4

_WORLD_UP = Vector3(0, 0, 1)


class Camera:
    """A fixed camera with a look-at view and a perspective projection.

    The ``up`` argument is kept for reference, but the view is always built
    with the world z axis as up. The view and projection matrices are
    computed once, when the camera is created.
    """

    def __init__(self, position: Vector3, target: Vector3, up: Vector3,
                 fov: float, aspect: float, near_plane: float, far_plane: float,
                 width: int, height: int) -> None:
        self.position = position
        self.target = target
        self.requested_up = up
        self.up = _WORLD_UP
        self.fov = fov
        self.aspect = aspect
        self.near_plane = near_plane
        self.far_plane = far_plane
        self.screen_width = width
        self.screen_height = height
        self._view = self.view_matrix()
        self._projection = self.projection_matrix()

    def view_matrix(self) -> Matrix4:
        """Look-at matrix from the camera position towards its target."""
        return Matrix4.look_at(self.position, self.target, self.up)

    def projection_matrix(self) -> Matrix4:
        """Perspective projection from the camera's lens settings."""
        return Matrix4.perspective(self.fov, self.near_plane, self.far_plane, self.aspect)

    def world_to_screen(self, world_position: Vector3, world_matrix: Matrix4) -> Vector2:
        """Pixel coordinates of a point given in an object's local space."""
        combined = self._projection * self._view * world_matrix
        projected = combined * Vector4.from_vector3(world_position)
        x, y = projected.x, projected.y
        if projected.w != 0.0:
            x /= projected.w
            y /= projected.w
        screen_x = (x + 1.0) * 0.5 * self.screen_width
        screen_y = (y + 1.0) * 0.5 * self.screen_height
        return Vector2(screen_x, screen_y)