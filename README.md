# physics3d

Shapes, a free-fly camera, backdrop geometry and a frame-rate overlay for a
small 3D physics sandbox. Every part produces plain data that a renderer can
upload to the GPU: vertex and index arrays, 4x4 matrices, colours and
rectangles.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `physics3d.shapes`: the abstract `Shape` base and the `Box` and `Plane`
  shapes. Each shape has a per-axis `scale` and gives `volume()`,
  `inertia_tensor(mass)`, `bounding_box_min()`, `bounding_box_max()`,
  `center()` and `contains_point(point)`. `vertices()`, `normals()` and
  `indices()` return read-only flat arrays, generated on first use and
  regenerated after the size, normal or scale changes. `Box.set_dimensions`
  and `Plane.set_dimensions` / `Plane.set_normal` change the shape; a zero
  normal raises `ValueError`.
- `physics3d.round_shapes`: `Sphere` (with `set_radius`, `set_segments`) and
  a Y-aligned `Cylinder` (with `set_radius`, `set_height`, `set_segments`).
  A non-uniform scale uses the largest relevant axis for the radius. Fewer
  than one segment raises `ValueError`.
- `physics3d.camera`: `Camera`, with angles in degrees. `update(pressed,
  delta_time)` moves and zooms according to a collection of held `Key`
  values (W/S/A/D/I/K to move, LEFT_SHIFT to sprint, EQUAL/MINUS to zoom).
  `on_mouse_move` turns the camera, with pitch clamped to ±89°, `on_scroll`
  zooms within 20°–90°, and `on_key(Key.B, True)` toggles the controls.
  `view_matrix()` and `projection_matrix(aspect_ratio)` return column-vector
  4x4 matrices; the projection uses near 0.1 and far 100.
- `physics3d.backdrop`: `grid_vertices(size, divisions)` and the `Grid`
  dataclass for a debug outline with centre lines; `skybox_vertices()`,
  `day_skybox_colors()` and `skybox_view(view)`, which strips the
  translation from a view matrix.
- `physics3d.glyphs`: block-letter text made of `Rect`s. `glyph_rects`
  covers one character, `text_rects` a string with newlines, and
  `rect_triangles` turns a rectangle into six 2D vertices.
- `physics3d.fps`: `FPSMonitor` records frames with `update(...)` into
  `PerformanceMetrics`, including 60-frame histories and rough CPU/GPU load
  estimates. It refreshes a smoothed `displayed_fps` once per interval.
  `performance_color` grades a frame rate against the target, and
  `overlay()` returns the draw list for the on-screen readout, or `None`
  while the display is off. `format_number` and `format_bytes` format
  values as text.

## Example

```python
import numpy as np
from physics3d.shapes import Box
from physics3d.round_shapes import Sphere
from physics3d.camera import Camera, Key
from physics3d.fps import FPSMonitor

box = Box(2.0, 1.0, 1.0)
print(box.volume())                      # 2.0
print(box.inertia_tensor(12.0))          # 3x3 diagonal tensor

ball = Sphere(0.5)
print(ball.contains_point((0.1, 0.2, 0.0)))   # True

camera = Camera()
camera.update({Key.W}, 0.016)            # move forward for one frame
view = camera.view_matrix()
projection = camera.projection_matrix(16 / 9)
print(np.round(projection @ view, 3))

monitor = FPSMonitor()
monitor.toggle_display()
for _ in range(60):
    monitor.update(1 / 60, object_count=10, collision_checks=45)
print(monitor.overlay_text)              # FPS: 60
```

## What it does not do

The package opens no window, reads no input device and issues no draw calls:
the host application feeds in key, mouse and scroll events and draws the data
it gets back. It has no procedural terrain, no scattered grass or rocks, no
shared mesh cache and no physics stepping or collision handling. It also has
no command-line program.