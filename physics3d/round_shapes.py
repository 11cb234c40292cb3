"""Round rigid-body shapes: spheres and Y-aligned cylinders."""

from __future__ import annotations

import math
from typing import ClassVar, Sequence

import numpy as np

from physics3d.shapes import Shape, _vector


def _check_segments(segments: int) -> int:
    if segments < 1:
        raise ValueError("segments must be at least 1")
    return int(segments)


def _normalized_rows(points: np.ndarray) -> np.ndarray:
    lengths = np.linalg.norm(points, axis=1, keepdims=True)
    with np.errstate(invalid="ignore", divide="ignore"):
        return points / lengths


class Sphere(Shape):
    """Sphere of a given radius; non-uniform scale uses the largest axis."""

    type_name: ClassVar[str] = "Sphere"

    def __init__(self, radius: float = 0.5, segments: int = 32) -> None:
        super().__init__()
        self._radius = float(radius)
        self._segments = _check_segments(segments)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def segments(self) -> int:
        return self._segments

    def _scaled_radius(self) -> float:
        return self._radius * float(np.max(self._scale))

    def volume(self) -> float:
        r = self._scaled_radius()
        return (4.0 / 3.0) * math.pi * r * r * r

    def inertia_tensor(self, mass: float) -> np.ndarray:
        r = self._scaled_radius()
        return np.eye(3) * ((2.0 / 5.0) * mass * r * r)

    def bounding_box_min(self) -> np.ndarray:
        return np.full(3, -self._scaled_radius())

    def bounding_box_max(self) -> np.ndarray:
        return np.full(3, self._scaled_radius())

    def contains_point(self, point: Sequence[float]) -> bool:
        return bool(np.linalg.norm(_vector(point, 3)) <= self._scaled_radius())

    def set_radius(self, radius: float) -> None:
        self._radius = float(radius)
        self._mesh = None

    def set_segments(self, segments: int) -> None:
        self._segments = _check_segments(segments)
        self._mesh = None

    def _build_mesh(self):
        n = self._segments
        r = self._scaled_radius()
        steps = np.arange(n + 1)
        y_angle = (math.pi * steps / n)[:, None]
        x_angle = (2.0 * math.pi * steps / n)[None, :]

        ring_radius = np.sin(y_angle) * r
        x = np.cos(x_angle) * ring_radius
        y = np.broadcast_to(np.cos(y_angle) * r, x.shape)
        z = np.sin(x_angle) * ring_radius
        positions = np.stack([x, y, z], axis=-1).reshape(-1, 3)
        normals = _normalized_rows(positions)

        rows, cols = np.meshgrid(np.arange(n), np.arange(n), indexing="ij")
        current = rows * (n + 1) + cols
        below = current + n + 1
        indices = np.stack(
            [current, below, current + 1, current + 1, below, below + 1], axis=-1
        ).reshape(-1)
        return positions.reshape(-1), normals.reshape(-1), indices


class Cylinder(Shape):
    """Cylinder aligned with the Y axis, centred on the origin."""

    type_name: ClassVar[str] = "Cylinder"

    def __init__(self, radius: float = 0.5, height: float = 1.0, segments: int = 16) -> None:
        super().__init__()
        self._radius = float(radius)
        self._height = float(height)
        self._segments = _check_segments(segments)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def height(self) -> float:
        return self._height

    @property
    def segments(self) -> int:
        return self._segments

    def _scaled(self) -> tuple[float, float]:
        radius = self._radius * max(float(self._scale[0]), float(self._scale[2]))
        return radius, self._height * float(self._scale[1])

    def volume(self) -> float:
        r, h = self._scaled()
        return math.pi * r * r * h

    def inertia_tensor(self, mass: float) -> np.ndarray:
        r, h = self._scaled()
        ixx = mass * (3.0 * r * r + h * h) / 12.0
        iyy = mass * r * r / 2.0
        return np.diag([ixx, iyy, ixx])

    def bounding_box_min(self) -> np.ndarray:
        r, h = self._scaled()
        return np.array([-r, -h * 0.5, -r])

    def bounding_box_max(self) -> np.ndarray:
        r, h = self._scaled()
        return np.array([r, h * 0.5, r])

    def contains_point(self, point: Sequence[float]) -> bool:
        r, h = self._scaled()
        x, y, z = _vector(point, 3)
        return bool(math.hypot(x, z) <= r and abs(y) <= h * 0.5)

    def set_radius(self, radius: float) -> None:
        self._radius = float(radius)
        self._mesh = None

    def set_height(self, height: float) -> None:
        self._height = float(height)
        self._mesh = None

    def set_segments(self, segments: int) -> None:
        self._segments = _check_segments(segments)
        self._mesh = None

    def _build_mesh(self):
        n = self._segments
        r, h = self._scaled()
        half = h * 0.5

        angles = 2.0 * math.pi * np.arange(n + 1) / n
        xs = np.cos(angles) * r
        zs = np.sin(angles) * r
        bottom = np.stack([xs, np.full_like(xs, -half), zs], axis=-1)
        top = np.stack([xs, np.full_like(xs, half), zs], axis=-1)
        ring = np.stack([bottom, top], axis=1).reshape(-1, 3)

        side_normal = _normalized_rows(np.stack([xs, np.zeros_like(xs), zs], axis=-1))
        side_normals = np.repeat(side_normal, 2, axis=0)

        seg = np.arange(n)
        current = seg * 2
        following = (seg + 1) * 2
        side_indices = np.stack(
            [current, following, current + 1, current + 1, following, following + 1],
            axis=-1,
        ).reshape(-1)

        cap_start = len(ring)
        centers = np.array([[0.0, -half, 0.0], [0.0, half, 0.0]])
        down = np.array([0.0, -1.0, 0.0])
        up = np.array([0.0, 1.0, 0.0])
        cap_normals = np.vstack([down, up, np.tile(np.stack([down, up]), (n + 1, 1))])

        cap_current = cap_start + 2 + seg * 2
        cap_next = cap_start + 2 + ((seg + 1) % n) * 2
        bottom_center = np.full(n, cap_start)
        top_center = np.full(n, cap_start + 1)
        cap_indices = np.stack(
            [bottom_center, cap_current, cap_next, top_center, cap_next + 1, cap_current + 1],
            axis=-1,
        ).reshape(-1)

        vertices = np.vstack([ring, centers, ring])
        normals = np.vstack([side_normals, cap_normals])
        indices = np.concatenate([side_indices, cap_indices])
        return vertices.reshape(-1), normals.reshape(-1), indices