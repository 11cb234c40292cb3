"""Rigid-body shapes: volume, inertia, bounds, containment and render meshes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Sequence

import numpy as np

_BoxMesh = tuple[np.ndarray, np.ndarray, np.ndarray]

# Normal order and face order differ; face i takes normal i.
_BOX_NORMALS = np.array(
    [
        (0.0, 0.0, -1.0), (0.0, 0.0, 1.0),   # back, front
        (-1.0, 0.0, 0.0), (1.0, 0.0, 0.0),   # left, right
        (0.0, -1.0, 0.0), (0.0, 1.0, 0.0),   # bottom, top
    ]
)

_BOX_FACES = np.array(
    [
        (0, 1, 2, 3),  # back
        (4, 7, 6, 5),  # front
        (0, 4, 5, 1),  # bottom
        (2, 6, 7, 3),  # top
        (0, 3, 7, 4),  # left
        (1, 5, 6, 2),  # right
    ]
)

_QUAD_TRIANGLES = np.array((0, 1, 2, 0, 2, 3))

_PLANE_TOLERANCE = 0.01


def _vector(value: Sequence[float], size: int) -> np.ndarray:
    array = np.asarray(value, dtype=np.float64).reshape(-1)
    if array.shape != (size,):
        raise ValueError(f"expected a vector of {size} components, got {array.shape[0]}")
    return array.copy()


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


class Shape(ABC):
    """Base for shapes centred on their local origin, with a per-axis scale."""

    type_name: ClassVar[str] = "Shape"

    def __init__(self) -> None:
        self._scale = np.ones(3)
        self._mesh: Optional[_BoxMesh] = None

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: Sequence[float]) -> None:
        self._scale = _vector(value, 3)
        self._mesh = None

    @abstractmethod
    def volume(self) -> float:
        """Volume in cubic metres."""

    @abstractmethod
    def inertia_tensor(self, mass: float) -> np.ndarray:
        """3x3 inertia tensor about the centre for the given mass."""

    @abstractmethod
    def bounding_box_min(self) -> np.ndarray:
        """Minimum corner of the local axis-aligned bounding box."""

    @abstractmethod
    def bounding_box_max(self) -> np.ndarray:
        """Maximum corner of the local axis-aligned bounding box."""

    def center(self) -> np.ndarray:
        """Local centre of the shape."""
        return np.zeros(3)

    @abstractmethod
    def contains_point(self, point: Sequence[float]) -> bool:
        """Whether a point in local coordinates lies inside the shape."""

    @abstractmethod
    def _build_mesh(self) -> _BoxMesh:
        """Return (vertices, normals, indices) as flat arrays."""

    def _ensure_mesh(self) -> _BoxMesh:
        if self._mesh is None:
            vertices, normals, indices = self._build_mesh()
            self._mesh = (
                _frozen(np.asarray(vertices, dtype=np.float32)),
                _frozen(np.asarray(normals, dtype=np.float32)),
                _frozen(np.asarray(indices, dtype=np.uint32)),
            )
        return self._mesh

    def vertices(self) -> np.ndarray:
        """Flat (x, y, z) vertex positions, generated on first use."""
        return self._ensure_mesh()[0]

    def normals(self) -> np.ndarray:
        """Flat (x, y, z) per-vertex normals."""
        return self._ensure_mesh()[1]

    def indices(self) -> np.ndarray:
        """Triangle indices into the vertex list."""
        return self._ensure_mesh()[2]


class Box(Shape):
    """Axis-aligned box given by width, height and depth in metres."""

    type_name: ClassVar[str] = "Box"

    def __init__(self, width: float = 1.0, height: float = 1.0, depth: float = 1.0) -> None:
        super().__init__()
        self._dimensions = np.array([width, height, depth], dtype=np.float64)

    @property
    def dimensions(self) -> np.ndarray:
        return self._dimensions.copy()

    def _scaled(self) -> np.ndarray:
        return self._dimensions * self._scale

    def volume(self) -> float:
        return float(np.prod(self._scaled()))

    def inertia_tensor(self, mass: float) -> np.ndarray:
        w, h, d = self._scaled()
        return np.diag(
            [
                mass * (h * h + d * d) / 12.0,
                mass * (w * w + d * d) / 12.0,
                mass * (w * w + h * h) / 12.0,
            ]
        )

    def bounding_box_min(self) -> np.ndarray:
        return -self._scaled() * 0.5

    def bounding_box_max(self) -> np.ndarray:
        return self._scaled() * 0.5

    def contains_point(self, point: Sequence[float]) -> bool:
        half = self._scaled() * 0.5
        p = _vector(point, 3)
        return bool(np.all((p >= -half) & (p <= half)))

    def set_dimensions(self, dimensions: Sequence[float]) -> None:
        self._dimensions = _vector(dimensions, 3)
        self._mesh = None

    def _build_mesh(self) -> _BoxMesh:
        w, h, d = self._scaled() * 0.5
        positions = np.array(
            [
                (-w, -h, -d), (w, -h, -d), (w, h, -d), (-w, h, -d),
                (-w, -h, d), (w, -h, d), (w, h, d), (-w, h, d),
            ]
        )
        vertices = positions[_BOX_FACES].reshape(-1)
        normals = np.repeat(_BOX_NORMALS, 4, axis=0).reshape(-1)
        indices = (np.arange(6)[:, None] * 4 + _QUAD_TRIANGLES).reshape(-1)
        return vertices, normals, indices


class Plane(Shape):
    """Horizontal rectangle of a given width (x) and depth (z); it has no volume."""

    type_name: ClassVar[str] = "Plane"

    def __init__(self, width: float = 10.0, depth: float = 10.0) -> None:
        super().__init__()
        self._dimensions = np.array([width, depth], dtype=np.float64)
        self._normal = np.array([0.0, 1.0, 0.0])

    @property
    def dimensions(self) -> np.ndarray:
        return self._dimensions.copy()

    @property
    def normal(self) -> np.ndarray:
        return self._normal.copy()

    def _scaled(self) -> np.ndarray:
        return self._dimensions * self._scale[[0, 2]]

    def volume(self) -> float:
        return 0.0

    def inertia_tensor(self, mass: float) -> np.ndarray:
        return np.eye(3) * (1e6 * mass)

    def bounding_box_min(self) -> np.ndarray:
        w, d = self._scaled() * 0.5
        return np.array([-w, -_PLANE_TOLERANCE, -d])

    def bounding_box_max(self) -> np.ndarray:
        w, d = self._scaled() * 0.5
        return np.array([w, _PLANE_TOLERANCE, d])

    def contains_point(self, point: Sequence[float]) -> bool:
        w, d = self._scaled() * 0.5
        x, y, z = _vector(point, 3)
        return bool(-w <= x <= w and -d <= z <= d and abs(y) <= _PLANE_TOLERANCE)

    def set_dimensions(self, dimensions: Sequence[float]) -> None:
        self._dimensions = _vector(dimensions, 2)
        self._mesh = None

    def set_normal(self, normal: Sequence[float]) -> None:
        n = _vector(normal, 3)
        length = float(np.linalg.norm(n))
        if length == 0.0:
            raise ValueError("plane normal must not be the zero vector")
        self._normal = n / length
        self._mesh = None

    def _build_mesh(self) -> _BoxMesh:
        w, d = self._scaled() * 0.5
        vertices = np.array(
            [(-w, 0.0, -d), (w, 0.0, -d), (w, 0.0, d), (-w, 0.0, d)]
        ).reshape(-1)
        normals = np.tile(self._normal, 4)
        return vertices, normals, _QUAD_TRIANGLES.copy()