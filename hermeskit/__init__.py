"""Pieces of a small UI toolkit: arrays, colours, UTF-8, a bitmap font, GPU painting and app models."""

__version__ = "0.1.0"

__all__ = ["converter", "dynamicarray", "font", "gpu_context", "gpu_painter", "todo", "utils"]