"""Free-fly camera with mouse look, keyboard movement and zoom.

Matrices follow the column-vector convention: ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Container, Sequence

import numpy as np

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_MIN_FOV = 20.0
_MAX_FOV = 90.0
_MAX_PITCH = 89.0
_NEAR = 0.1
_FAR = 100.0
_SPRINT_FACTOR = 2.5
_ZOOM_RATE = 50.0
_SCROLL_STEP = 2.0


class Key(enum.Enum):
    """Keys the camera reacts to."""

    W = "w"
    S = "s"
    A = "a"
    D = "d"
    I = "i"  # noqa: E741
    K = "k"
    LEFT_SHIFT = "left_shift"
    EQUAL = "equal"
    MINUS = "minus"
    B = "b"


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(eq=False)
class Camera:
    """Camera state; angles are in degrees."""

    position: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 5.0]))
    yaw: float = -90.0
    pitch: float = 0.0
    fov: float = 45.0
    move_speed: float = 3.0
    mouse_sensitivity: float = 0.1
    controls_enabled: bool = True
    _first_mouse: bool = field(default=True, repr=False)
    _last_mouse: tuple[float, float] = field(default=(400.0, 300.0), repr=False)

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64).copy()

    def front(self) -> np.ndarray:
        """Unit view direction from yaw and pitch."""
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        return _normalize(
            np.array(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )
        )

    def update(self, pressed: Container[Key], delta_time: float) -> None:
        """Move and zoom according to the keys currently held."""
        if not self.controls_enabled:
            return
        front = self.front()
        right = _normalize(np.cross(front, _WORLD_UP))
        up = _normalize(np.cross(right, front))

        velocity = self.move_speed * delta_time
        if Key.LEFT_SHIFT in pressed:
            velocity *= _SPRINT_FACTOR

        moves = (
            (Key.W, front),
            (Key.S, -front),
            (Key.A, -right),
            (Key.D, right),
            (Key.I, up),
            (Key.K, -up),
        )
        for key, direction in moves:
            if key in pressed:
                self.position = self.position + direction * velocity

        if Key.EQUAL in pressed:
            self.fov = max(_MIN_FOV, self.fov - _ZOOM_RATE * delta_time)
        if Key.MINUS in pressed:
            self.fov = min(_MAX_FOV, self.fov + _ZOOM_RATE * delta_time)

    def view_matrix(self) -> np.ndarray:
        """Right-handed look-at matrix for the current position and direction."""
        eye = self.position
        f = self.front()
        s = _normalize(np.cross(f, _WORLD_UP))
        u = np.cross(s, f)
        m = np.eye(4)
        m[0, :3] = s
        m[1, :3] = u
        m[2, :3] = -f
        m[0, 3] = -np.dot(s, eye)
        m[1, 3] = -np.dot(u, eye)
        m[2, 3] = np.dot(f, eye)
        return m

    def projection_matrix(self, aspect_ratio: float) -> np.ndarray:
        """Perspective projection mapping depth to [-1, 1]."""
        if aspect_ratio == 0:
            raise ValueError("aspect ratio must not be zero")
        tan_half = math.tan(math.radians(self.fov) / 2.0)
        m = np.zeros((4, 4))
        m[0, 0] = 1.0 / (aspect_ratio * tan_half)
        m[1, 1] = 1.0 / tan_half
        m[2, 2] = -(_FAR + _NEAR) / (_FAR - _NEAR)
        m[2, 3] = -(2.0 * _FAR * _NEAR) / (_FAR - _NEAR)
        m[3, 2] = -1.0
        return m

    def on_mouse_move(self, xpos: float, ypos: float) -> None:
        """Turn the camera by the cursor movement since the last event."""
        if not self.controls_enabled:
            return
        if self._first_mouse:
            self._last_mouse = (xpos, ypos)
            self._first_mouse = False
        last_x, last_y = self._last_mouse
        xoffset = xpos - last_x
        yoffset = last_y - ypos
        self._last_mouse = (xpos, ypos)

        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch = _clamp(self.pitch + yoffset * self.mouse_sensitivity, -_MAX_PITCH, _MAX_PITCH)

    def on_scroll(self, xoffset: float, yoffset: float) -> None:
        """Zoom with the scroll wheel."""
        if not self.controls_enabled:
            return
        self.fov = _clamp(self.fov - yoffset * _SCROLL_STEP, _MIN_FOV, _MAX_FOV)

    def on_key(self, key: Key, pressed: bool) -> None:
        """Pressing B toggles the controls; re-enabling resets mouse tracking."""
        if key is Key.B and pressed:
            self.controls_enabled = not self.controls_enabled
            if self.controls_enabled:
                self._first_mouse = True

    @property
    def cursor_captured(self) -> bool:
        """Whether the host window should hide and capture the cursor."""
        return self.controls_enabled

    def set_position(self, position: Sequence[float]) -> None:
        self.position = np.asarray(position, dtype=np.float64).reshape(3).copy()