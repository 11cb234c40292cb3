"""Backdrop geometry: a ground grid outline and a solid-colour skybox cube."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

_GRID_HEIGHT = 0.01

_SKYBOX_VERTICES = (
    -1.0, 1.0, -1.0,
    -1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    1.0, 1.0, -1.0,
    -1.0, 1.0, -1.0,

    -1.0, -1.0, 1.0,
    -1.0, -1.0, -1.0,
    -1.0, 1.0, -1.0,
    -1.0, 1.0, -1.0,
    -1.0, 1.0, 1.0,
    -1.0, -1.0, 1.0,

    1.0, -1.0, -1.0,
    1.0, -1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, -1.0,
    1.0, -1.0, -1.0,

    -1.0, -1.0, 1.0,
    -1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    1.0, -1.0, 1.0,
    -1.0, -1.0, 1.0,

    -1.0, 1.0, -1.0,
    1.0, 1.0, -1.0,
    1.0, 1.0, 1.0,
    1.0, 1.0, 1.0,
    -1.0, 1.0, 1.0,
    -1.0, 1.0, -1.0,

    -1.0, -1.0, -1.0,
    -1.0, -1.0, 1.0,
    1.0, -1.0, -1.0,
    1.0, -1.0, -1.0,
    -1.0, -1.0, 1.0,
    1.0, -1.0, 1.0,
)

# One RGB colour per cube-map face: +X, -X, +Y, -Y, +Z, -Z.
_DAY_SKYBOX_COLORS = (
    0.2, 0.3, 0.5,  # right
    0.2, 0.3, 0.5,  # left
    0.3, 0.4, 0.6,  # top (zenith)
    0.1, 0.1, 0.2,  # bottom (horizon)
    0.2, 0.3, 0.5,  # front
    0.2, 0.3, 0.5,  # back
)


def grid_vertices(size: float, divisions: int) -> np.ndarray:
    """Line-list vertices (x, y, z triples) of a square outline and its centre cross.

    The square has side ``size`` and lies just above y = 0. ``divisions`` must be
    positive; only the outline and the two centre lines are drawn.
    """
    if divisions < 1:
        raise ValueError("grid divisions must be at least 1")
    h = float(size) * 0.5
    y = _GRID_HEIGHT
    corners = [(-h, -h), (h, -h), (h, h), (-h, h)]
    segments: list[tuple[tuple[float, float], tuple[float, float]]] = [
        (corners[i], corners[(i + 1) % 4]) for i in range(4)
    ]
    segments.append(((0.0, -h), (0.0, h)))
    segments.append(((-h, 0.0), (h, 0.0)))
    points = [(x, y, z) for segment in segments for (x, z) in segment]
    return np.array(points, dtype=np.float32).ravel()


@dataclass
class Grid:
    """A debug grid overlay with a line colour."""

    size: float
    divisions: int
    color: tuple[float, float, float] = (0.3, 0.3, 0.3)
    vertices: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.vertices = grid_vertices(self.size, self.divisions)
        self.set_color(self.color)

    def set_color(self, color: Sequence[float]) -> None:
        """Set the line colour as an RGB triple."""
        values = tuple(float(c) for c in color)
        if len(values) != 3:
            raise ValueError("colour must have three components")
        self.color = values  # type: ignore[assignment]

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    @property
    def line_count(self) -> int:
        return self.vertex_count // 2


def skybox_vertices() -> np.ndarray:
    """The skybox cube as 36 non-indexed vertices (12 triangles) of side 2."""
    return np.array(_SKYBOX_VERTICES, dtype=np.float32)


def day_skybox_colors() -> np.ndarray:
    """Day preset: one RGB colour per cube-map face, in +X, -X, +Y, -Y, +Z, -Z order."""
    return np.array(_DAY_SKYBOX_COLORS, dtype=np.float32)


def skybox_view(view: Sequence[Sequence[float]]) -> np.ndarray:
    """The view matrix with its translation removed, keeping only rotation."""
    matrix = np.asarray(view, dtype=np.float64)
    if matrix.shape != (4, 4):
        raise ValueError("view matrix must be 4x4")
    result = np.eye(4)
    result[:3, :3] = matrix[:3, :3]
    return result