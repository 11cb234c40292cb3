"""Shapes, a free-fly camera, backdrop geometry and an FPS overlay for a small 3D sandbox."""

__version__ = "1.0.0"