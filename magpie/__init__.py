"""Maths, colours, timing, input, camera, scene, shadow-atlas and stream helpers for a 3D renderer."""

__version__ = "0.1.0"