"""Frame-rate and load metrics, with a small on-screen FPS overlay."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from physics3d.glyphs import Rect, text_rects

Color = tuple[float, float, float]

HISTORY_SIZE = 60
_POINTER_SIZE = 8

_GREEN: Color = (0.0, 1.0, 0.0)
_YELLOW: Color = (1.0, 1.0, 0.0)
_ORANGE: Color = (1.0, 0.5, 0.0)
_RED: Color = (1.0, 0.0, 0.0)
_BACKGROUND: Color = (0.1, 0.1, 0.1)
_BACKGROUND_DIM = 0.7


def _round_half_away(value: float) -> float:
    return float(math.copysign(math.floor(abs(value) + 0.5), value))


def _history() -> deque:
    return deque([0.0] * HISTORY_SIZE, maxlen=HISTORY_SIZE)


@dataclass
class PerformanceMetrics:
    """Latest per-frame measurements and rough load estimates."""

    fps: float = 0.0
    frame_time: float = 0.0
    physics_time: float = 0.0
    render_time: float = 0.0

    object_count: int = 0
    collision_checks: int = 0
    memory_usage: int = 0
    gpu_usage: float = 0.0
    cpu_usage: float = 0.0

    draw_calls: int = 0
    triangles_rendered: int = 0
    gpu_memory_usage: float = 0.0
    average_frame_time: float = 0.0
    min_frame_time: float = 0.0
    max_frame_time: float = 0.0

    mesh_cache_size: int = 0
    inertia_cache_size: int = 0

    object_pool_available: int = 0
    object_pool_reused: int = 0

    fps_history: deque = field(default_factory=_history)
    frame_time_history: deque = field(default_factory=_history)


@dataclass
class FPSMonitor:
    """Tracks frame timing and produces a smoothed once-per-interval FPS readout."""

    display_enabled: bool = False
    position: tuple[float, float] = (20.0, 20.0)
    scale: float = 2.0
    fps_target: float = 60.0
    fps_update_interval: float = 1.0
    metrics: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    displayed_fps: float = 0.0
    main_loop_fps: float = 0.0
    _update_timer: float = field(default=0.0, repr=False)
    _frame_count: float = field(default=0.0, repr=False)
    _time_accumulator: float = field(default=0.0, repr=False)

    def update(
        self,
        delta_time: float,
        object_count: int,
        collision_checks: int,
        draw_calls: int = 0,
        triangles_rendered: int = 0,
        mesh_cache_size: int = 0,
        inertia_cache_size: int = 0,
        object_pool_available: int = 0,
        object_pool_reused: int = 0,
    ) -> PerformanceMetrics:
        """Record one frame and refresh all derived metrics."""
        m = self.metrics
        m.fps = 1.0 / delta_time if delta_time > 0.0 else 0.0
        m.frame_time = delta_time
        m.object_count = object_count
        m.collision_checks = collision_checks
        m.draw_calls = draw_calls
        m.triangles_rendered = triangles_rendered
        m.mesh_cache_size = mesh_cache_size
        m.inertia_cache_size = inertia_cache_size
        m.object_pool_available = object_pool_available
        m.object_pool_reused = object_pool_reused

        m.fps_history.append(m.fps)
        m.frame_time_history.append(m.frame_time)

        self._frame_count += 1.0
        self._time_accumulator += delta_time
        self._update_timer += delta_time
        if self._update_timer >= self.fps_update_interval:
            if self._time_accumulator > 0.0:
                self.main_loop_fps = self._frame_count / self._time_accumulator
                if self.displayed_fps == 0.0:
                    self.displayed_fps = _round_half_away(self.main_loop_fps)
                else:
                    smoothed = self.displayed_fps * 0.7 + self.main_loop_fps * 0.3
                    self.displayed_fps = _round_half_away(smoothed)
            self._frame_count = 0.0
            self._time_accumulator = 0.0
            self._update_timer = 0.0

        history = m.frame_time_history
        m.average_frame_time = sum(history) / len(history)
        m.min_frame_time = min(history)
        m.max_frame_time = max(history)

        m.memory_usage = m.object_count * _POINTER_SIZE * 100
        m.gpu_usage = min(100.0, m.draw_calls * 0.5 + m.triangles_rendered * 0.001)
        m.gpu_memory_usage = m.triangles_rendered * 32.0
        m.cpu_usage = min(100.0, m.object_count * 0.1 + m.collision_checks * 0.05)
        return m

    def toggle_display(self) -> bool:
        """Switch the overlay on or off and return the new state."""
        self.display_enabled = not self.display_enabled
        return self.display_enabled

    def performance_color(self, fps: float) -> Color:
        """Green, yellow, orange or red depending on how close ``fps`` is to target."""
        if fps >= self.fps_target * 0.9:
            return _GREEN
        if fps >= self.fps_target * 0.6:
            return _YELLOW
        if fps >= self.fps_target * 0.3:
            return _ORANGE
        return _RED

    @property
    def overlay_text(self) -> str:
        return f"FPS: {int(self.displayed_fps)}"

    def overlay(self) -> Optional[list[tuple[Rect, Color]]]:
        """Draw list for the overlay: the background first, then the text strokes.

        Returns None while the display is disabled.
        """
        if not self.display_enabled:
            return None
        x, y = self.position
        background = Rect(x, y, 120.0 * self.scale, 40.0 * self.scale)
        bg_color = tuple(c * _BACKGROUND_DIM for c in _BACKGROUND)
        commands: list[tuple[Rect, Color]] = [(background, bg_color)]  # type: ignore[list-item]
        color = self.performance_color(self.displayed_fps)
        strokes = text_rects(
            self.overlay_text, x + 15.0 * self.scale, y + 15.0 * self.scale, self.scale
        )
        commands.extend((rect, color) for rect in strokes)
        return commands


def format_number(value: float, decimals: int = 1) -> str:
    """Fixed-point text with ``decimals`` digits after the point."""
    if decimals < 0:
        raise ValueError("decimals must not be negative")
    return f"{value:.{decimals}f}"


def format_bytes(num_bytes: int) -> str:
    """Human-readable size in B, KB, MB or GB with one decimal."""
    if num_bytes < 0:
        raise ValueError("byte count must not be negative")
    units = ("B", "KB", "MB", "GB")
    size = float(num_bytes)
    unit = 0
    while size >= 1024.0 and unit < len(units) - 1:
        size /= 1024.0
        unit += 1
    return f"{size:.1f} {units[unit]}"