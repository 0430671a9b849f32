# octaraster

octaraster is a small software rasterizer written in plain Python. It uses
only the standard library. It draws wireframes and shaded triangles into an
in-memory buffer of 32-bit ARGB pixels.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `octaraster.vectors`: `Vector2`, `Vector3` and `Vector4`.
- `octaraster.matrices`: `Matrix3`, `Matrix4` and `det3x3`.
- `octaraster.camera`: `Camera`.
- `octaraster.shape`: `generate_points` and `generate_plane_lines`.
- `octaraster.timer`: `Timer`.
- `octaraster.renderer`: `Renderer`, `Actor`, `RenderLab`, `ShapeSides`,
  `determine_triangles` and `lerp_blend`.
- `octaraster.app`: `RenderLoop` and the `main` function behind the
  `octaraster` command.

## Vectors

The vectors are immutable dataclasses. They support `+`, `-`, unary `-` and
multiplication by a number. They also provide `magnitude`, `normalize`,
`is_zero`, `project` and `reflection`. The static methods are `dot`,
`distance`, `angle_between` and `lerp`.

A few details to know:

- `==` compares components within a tolerance of 0.001. Vectors are not
  hashable.
- `normalize` returns the zero vector when the length is below 0.00001.
- `Vector4` leaves out `w` when it computes `magnitude`, `is_zero` and
  equality. `Vector4.normalize` divides all four components by the length
  of x, y and z.
- `Vector3.cross` computes the x and z components of the cross product.
  Its y component is always 0.
- `Vector3` and `Vector4` have `component(index)`, which reads 0 for an
  index out of range. They also have `with_component(index, value)`, which
  returns a copy and ignores an index out of range.
- `Vector4.from_vector3`, `to_vector3`, `to_homogeneous_vector3`,
  `is_point`, `is_direction` and `normalize_xyz` convert between points and
  directions.

```python
from octaraster.vectors import Vector3

a = Vector3(1, 0, 0)
b = Vector3(0, 1, 0)
angle = Vector3.angle_between(a, b)
midpoint = Vector3.lerp(a, b, 0.5)
```

## Matrices

`Matrix3` and `Matrix4` are immutable and row-major, and both default to the
identity. Each takes a tuple of `Vector3` or `Vector4` rows. Multiplying by a
number, a row-sized vector or another matrix of the same size works as usual.
`Matrix3` can also multiply a `Vector2`, which it treats as a homogeneous
point.

Both types provide `row`, `column`, `get`, `determinant`, `transpose`,
`cofactors` and `inverse`. `row` and `column` return the zero vector for an
index out of range. `Matrix3.inverse` returns the identity when the
determinant is below 0.0001. `Matrix4.inverse` returns the identity when the
determinant is exactly 0.

The builders are:

- `Matrix3`: `identity`, `zero`, `translation(x, y)`, `scaling(x, y)` and
  `rotation(angle)`.
- `Matrix4`: `identity`, `zero`, `translation(x, y, z)`,
  `translation_to(position)`, `scaling`, `rotation_x`, `rotation_y`,
  `rotation_z`, `perspective(fov, near, far, aspect)`,
  `orthographic(right, left, top, bottom, near, far)` and
  `look_at(eye, target, up)`.

```python
from octaraster.matrices import Matrix4

move = Matrix4.translation(1, 2, 3)
back = move.inverse()
```

## Camera

`Camera` computes its view and projection matrices once, when it is created.
The view is always built with the world z axis as up. The `up` argument is
kept as `requested_up` but is not used. `fov` goes straight to `tan`, so it
is an angle in radians. `world_to_screen` maps a point given in an object's
local space, through that object's world matrix, to pixel coordinates.

```python
from octaraster.camera import Camera
from octaraster.matrices import Matrix4
from octaraster.vectors import Vector3

camera = Camera(Vector3(0, -2, 2), Vector3(0, 0, 0), Vector3(0, 0, 1),
                90.0, 1.0, 0.1, 10.0, 500, 500)
pixel = camera.world_to_screen(Vector3(0, 0, 0), Matrix4.identity())
```

## Shapes

`generate_points(sides, size, height, center, is_plane=False)` returns
`[bottom, top]`. `bottom` is the ring of a regular polygon around `center`,
and `top` is the same ring raised by `height` along z. When `is_plane` is
true, the second list holds the output of `generate_plane_lines()` instead:
pairs of endpoints of grid lines across a unit plane. A side count below 1
raises `ValueError`.

## Timer

`Timer(samples=10, smooth_factor=0.75)` measures the time between calls to
`signal`. It provides:

- `delta`: the time between the last two signals.
- `smooth_delta`: a weighted average of recent deltas.
- `total_time`: the time up to the last signal.
- `total_time_exact`: the time up to now.
- `samples_per_second`: the signal rate.

`throttle(target_hz)` sleeps while signals arrive faster than the target. It
does nothing for a target of 1 or less. `restart` clears everything.

## Rendering

`Renderer(lab=RenderLab.WEEK_TWO_OPTIONAL, width=None, height=None)` builds
the chosen scene as soon as it is created. The default size is 1920x1080 for
`RenderLab.OCTAGON` and 500x500 for the other scenes. A width or height
outside 1–65535 raises `ValueError`.

The scene is stored as a list of `Actor`s in `renderer.actors`. The pixels are
a flat list of ints in `renderer.pixels`.

- `frame()` clears the buffer, calls `update_actors()`, calls
  `raster_scene()` and returns a copy of the pixels.
- `update_actors()` turns each actor whose `rotation_modifier` is non-zero by
  one more degree about its position. It then redraws every wireframe.
- `raster_actor` fills the actor's triangles that face the camera. The colour
  of each pixel comes from its barycentric weights.
- `draw_line`, `draw_point` and `render_shapes` draw directly into the buffer.
- `clear()` sets every pixel to 0.
- `determine_triangles(actor)` adds the side triangles of a prism, and both
  caps when the prism is triangular. It raises `ValueError` when the top face
  is missing.
- `lerp_blend(front, back)` blends one ARGB colour over another.

`RenderLoop(renderer, frame_interval=0.032)` calls `renderer.frame()` about
once per interval. It keeps going until `stop()` is called, and then `run()`
returns the number of frames drawn.

## Command

```
octaraster [--lab {0,1,2}] [--width N] [--height N]
```

The command starts a `RenderLoop` on a background thread. It waits for Enter,
stops the loop and exits. The default scene is lab 2.

## What it does not do

The package does not open a window or show anything on screen. The frames
stay in the `Renderer`'s pixel list. The command only computes frames until
Enter is pressed. To see a frame, take the list from `Renderer.frame()` and
hand it to an image or display library yourself.