"""Types shared between painters and GPU back ends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its left, right, top and bottom edges."""

    l: int
    r: int
    t: int
    b: int

    def intersection(self, other: Rectangle) -> Rectangle:
        """Return the overlap of two rectangles, which may be empty."""
        return Rectangle(
            max(self.l, other.l),
            min(self.r, other.r),
            max(self.t, other.t),
            min(self.b, other.b),
        )

    @property
    def width(self) -> int:
        return self.r - self.l

    @property
    def height(self) -> int:
        return self.b - self.t

    def is_valid(self) -> bool:
        """Return whether the rectangle covers any area."""
        return self.width > 0 and self.height > 0


@dataclass
class Vertex:
    """A screen-space vertex with texture coordinates and an ARGB colour."""

    x: float
    y: float
    u: float = 0.0
    v: float = 0.0
    color: int = 0


@dataclass
class GPUTexture:
    """A texture uploaded to a back end, wrapping its native handle."""

    handle: Any
    width: int
    height: int


class GPUContext(ABC):
    """Drawing operations that a GPU back end provides to the painter."""

    @abstractmethod
    def fill_rect(self, rect: Rectangle, color: int) -> None:
        """Fill ``rect`` with an ARGB colour."""

    @abstractmethod
    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line between two points."""

    @abstractmethod
    def draw_tris(self, vertices: Sequence[Vertex]) -> None:
        """Draw triangles, three vertices each."""

    @abstractmethod
    def draw_image(self, dst: Rectangle, src: Rectangle, texture: GPUTexture) -> None:
        """Copy the ``src`` part of ``texture`` onto ``dst``."""

    @abstractmethod
    def set_clip(self, rect: Rectangle) -> None:
        """Restrict drawing to ``rect``."""

    @abstractmethod
    def restore_clip(self) -> None:
        """Undo the most recent clip change."""

    @abstractmethod
    def upload_texture(self, bits: Sequence[int], width: int, height: int) -> Optional[GPUTexture]:
        """Upload ARGB pixels and return the texture, or ``None`` on failure."""

    @abstractmethod
    def free_texture(self, texture: GPUTexture) -> None:
        """Release a texture."""

    @abstractmethod
    def set_tint(self, texture: GPUTexture, argb: int) -> None:
        """Set the colour that ``texture`` is multiplied by when drawn."""

    @abstractmethod
    def begin(self) -> None:
        """Start a frame."""

    @abstractmethod
    def present(self) -> None:
        """Finish the frame and show it."""

    @abstractmethod
    def get_native(self) -> Any:
        """Return the back end's own drawing object."""