"""Block-letter glyphs built from axis-aligned rectangles, for overlay text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

_GLYPH_WIDTH = 6.0
_GLYPH_HEIGHT = 10.0
_STROKE = 1.0
_ADVANCE = 8.0
_LINE_HEIGHT = 12.0
_SPACING = 2.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen space; y grows downward."""

    x: float
    y: float
    width: float
    height: float


_Box = tuple[float, float, float, float]
_Builder = Callable[[float, float, float, float, float], list[_Box]]


def _s_shape(x: float, y: float, w: float, h: float, t: float) -> list[_Box]:
    return [
        (x, y, w, t),
        (x, y, t, h / 2),
        (x, y + h / 2, w, t),
        (x + w - t, y + h / 2, t, h / 2),
        (x, y + h - t, w, t),
    ]


def _percent(x: float, y: float, w: float, h: float, t: float) -> list[_Box]:
    boxes = [(x, y, t, t), (x + w - t, y + h - t, t, t)]
    boxes.extend((x + i * w / h, y + i, t, t) for i in range(0, math.ceil(h), 2))
    return boxes


_GLYPHS: dict[str, _Builder] = {
    "F": lambda x, y, w, h, t: [
        (x, y, w, t),
        (x, y, t, h),
        (x, y + h / 2, w * 0.6, t),
    ],
    "P": lambda x, y, w, h, t: [
        (x, y, t, h),
        (x, y, w * 0.6, t),
        (x + w * 0.6, y, t, h / 2 + t),
        (x, y + h / 2, w * 0.6, t),
    ],
    "S": _s_shape,
    "5": _s_shape,
    "s": _s_shape,
    ":": lambda x, y, w, h, t: [
        (x + w / 2 - t / 2, y + h / 3, t, t),
        (x + w / 2 - t / 2, y + h * 2 / 3, t, t),
    ],
    " ": lambda x, y, w, h, t: [],
    "0": lambda x, y, w, h, t: [
        (x, y, t, h),
        (x + w - t, y, t, h),
        (x, y, w, t),
        (x, y + h - t, w, t),
    ],
    "1": lambda x, y, w, h, t: [
        (x + w / 2 - t / 2, y, t, h),
        (x, y, w / 2, t),
    ],
    "2": lambda x, y, w, h, t: [
        (x, y, w, t),
        (x + w - t, y, t, h / 2),
        (x, y + h / 2, w, t),
        (x, y + h / 2, t, h / 2),
        (x, y + h - t, w, t),
    ],
    "3": lambda x, y, w, h, t: [
        (x, y, w, t),
        (x + w - t, y, t, h),
        (x, y + h / 2, w, t),
        (x, y + h - t, w, t),
    ],
    "4": lambda x, y, w, h, t: [
        (x, y, t, h / 2),
        (x + w - t, y, t, h),
        (x, y + h / 2, w, t),
    ],
    "6": lambda x, y, w, h, t: [
        (x, y, t, h),
        (x, y, w, t),
        (x, y + h / 2, w, t),
        (x + w - t, y + h / 2, t, h / 2),
        (x, y + h - t, w, t),
    ],
    "7": lambda x, y, w, h, t: [
        (x, y, w, t),
        (x + w - t, y, t, h),
    ],
    "8": lambda x, y, w, h, t: [
        (x, y, t, h),
        (x + w - t, y, t, h),
        (x, y, w, t),
        (x, y + h / 2, w, t),
        (x, y + h - t, w, t),
    ],
    "9": lambda x, y, w, h, t: [
        (x, y, w, t),
        (x, y, t, h / 2),
        (x + w - t, y, t, h),
        (x, y + h / 2, w, t),
        (x, y + h - t, w, t),
    ],
    ".": lambda x, y, w, h, t: [
        (x + w / 2 - t / 2, y + h - t, t, t),
    ],
    "m": lambda x, y, w, h, t: [
        (x, y, t, h),
        (x, y, w * 0.3, t),
        (x + w * 0.3, y, t, h),
        (x + w * 0.6, y, w * 0.4, t),
        (x + w - t, y, t, h),
    ],
    "%": _percent,
}


def _unknown(x: float, y: float, w: float, h: float, t: float) -> list[_Box]:
    return [(x + w / 2 - t / 2, y + h / 2 - t / 2, t, t)]


def glyph_rects(char: str, x: float, y: float, scale: float = 1.0) -> list[Rect]:
    """Rectangles drawing one character with its top-left corner at (x, y).

    Characters without a glyph are drawn as a small centred square.
    """
    if len(char) != 1:
        raise ValueError("expected a single character")
    w = _GLYPH_WIDTH * scale
    h = _GLYPH_HEIGHT * scale
    t = _STROKE * scale
    build = _GLYPHS.get(char, _unknown)
    return [Rect(*box) for box in build(x, y, w, h, t)]


def text_rects(text: str, x: float, y: float, scale: float = 1.0) -> list[Rect]:
    """Rectangles drawing a string; a newline starts a new line at ``x``."""
    advance = (_ADVANCE + _SPACING) * scale
    line_step = (_LINE_HEIGHT + _SPACING) * scale
    rects: list[Rect] = []
    cursor_x, cursor_y = x, y
    for char in text:
        if char == "\n":
            cursor_x = x
            cursor_y += line_step
            continue
        rects.extend(glyph_rects(char, cursor_x, cursor_y, scale))
        cursor_x += advance
    return rects


def rect_triangles(rect: Rect) -> np.ndarray:
    """Two triangles covering ``rect`` as six (x, y) pairs."""
    left, top = rect.x, rect.y
    right, bottom = rect.x + rect.width, rect.y + rect.height
    return np.array(
        [
            left, top,
            right, top,
            left, bottom,
            right, top,
            right, bottom,
            left, bottom,
        ],
        dtype=np.float32,
    )