"""Painter that sends drawing operations to a GPU back end."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .font import GLYPH_COLUMNS, GLYPH_ROWS, glyph_rows
from .gpu_context import GPUContext, GPUTexture, Rectangle, Vertex

ATLAS_WIDTH = 512
ATLAS_HEIGHT = 512
CIRCLE_SEGMENTS = 32
OPAQUE = 0xFF000000
INVERT_COLOR = 0x80FFFFFF
NO_TINT = 0xFFFFFFFF
BITMAP_ADVANCE = 9

Char = Union[int, str]


def _opaque(color: int) -> int:
    return (color | OPAQUE) & 0xFFFFFFFF


@dataclass
class GlyphAtlasEntry:
    """Where one glyph lives in the atlas and how to place it on screen."""

    codepoint: int
    bounds: Rectangle
    offset_x: int = 0
    offset_y: int = 0
    advance: int = 0
    valid: bool = True


@dataclass
class GlyphAtlas:
    """A single texture that glyphs are packed into, row by row."""

    texture: Optional[GPUTexture] = None
    bits: list[int] = field(default_factory=lambda: [0] * (ATLAS_WIDTH * ATLAS_HEIGHT))
    entries: list[GlyphAtlasEntry] = field(default_factory=list)
    cursor_x: int = 0
    cursor_y: int = 0
    row_height: int = 0
    dirty: bool = True

    def find(self, codepoint: int) -> Optional[GlyphAtlasEntry]:
        """Return the valid entry for ``codepoint``, if it has been packed."""
        return next(
            (e for e in self.entries if e.codepoint == codepoint and e.valid),
            None,
        )

    def add(self, codepoint: int) -> Optional[GlyphAtlasEntry]:
        """Pack the bitmap glyph for ``codepoint``; ``None`` if the atlas is full.

        Code points outside 0 to 127 are packed as a question mark.
        """
        if codepoint < 0 or codepoint > 127:
            codepoint = ord("?")
        gw, gh = GLYPH_COLUMNS, GLYPH_ROWS

        if self.cursor_x + gw > ATLAS_WIDTH:
            self.cursor_x = 0
            self.cursor_y += self.row_height + 1
            self.row_height = 0

        if self.cursor_y + gh > ATLAS_HEIGHT:
            return None

        for y, row in enumerate(glyph_rows(codepoint)):
            start = (self.cursor_y + y) * ATLAS_WIDTH + self.cursor_x
            self.bits[start : start + gw] = [
                ((0xFF if row >> x & 1 else 0) << 24) | 0x00FFFFFF for x in range(gw)
            ]

        entry = GlyphAtlasEntry(
            codepoint=codepoint,
            bounds=Rectangle(self.cursor_x, self.cursor_x + gw, self.cursor_y, self.cursor_y + gh),
            advance=BITMAP_ADVANCE,
        )
        self.cursor_x += gw + 1
        self.row_height = max(self.row_height, gh)
        self.dirty = True
        self.entries.append(entry)
        return entry


class GPUPainter:
    """Draws shapes, glyphs and images through a :class:`GPUContext`.

    Creating a painter begins a frame; closing it presents the frame.
    """

    def __init__(self, gpu: GPUContext, width: int, height: int) -> None:
        if gpu is None:
            raise ValueError("a GPU context is required")
        self.gpu = gpu
        self.clip = Rectangle(0, width, 0, height)
        self.clip_stack: list[Rectangle] = []
        self.atlas = GlyphAtlas()
        self._closed = False
        gpu.begin()

    def _sync_clip(self) -> None:
        self.gpu.set_clip(self.clip)

    def draw_block(self, rect: Rectangle, color: int) -> None:
        """Fill ``rect``, clipped, with an opaque colour."""
        self._sync_clip()
        rect = self.clip.intersection(rect)
        if not rect.is_valid():
            return
        self.gpu.fill_rect(rect, _opaque(color))

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a line in an opaque colour."""
        self._sync_clip()
        self.gpu.draw_line(x0, y0, x1, y1, _opaque(color))

    def draw_triangle(
        self, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
    ) -> None:
        """Fill a triangle in an opaque colour."""
        self._sync_clip()
        c = _opaque(color)
        self.gpu.draw_tris(
            [
                Vertex(float(x0), float(y0), 0.0, 0.0, c),
                Vertex(float(x1), float(y1), 0.0, 0.0, c),
                Vertex(float(x2), float(y2), 0.0, 0.0, c),
            ]
        )

    def draw_glyph(self, x: int, y: int, c: Char, color: int) -> None:
        """Draw character ``c`` with its top-left corner at ``(x, y)``."""
        self._sync_clip()
        code = ord(c) if isinstance(c, str) else int(c)
        atlas = self.atlas
        entry = atlas.find(code) or atlas.add(code)
        if entry is None:
            return

        if atlas.dirty or atlas.texture is None:
            if atlas.texture is not None:
                self.gpu.free_texture(atlas.texture)
            atlas.texture = self.gpu.upload_texture(atlas.bits, ATLAS_WIDTH, ATLAS_HEIGHT)
            atlas.dirty = False
        if atlas.texture is None:
            return

        dst = Rectangle(
            x + entry.offset_x,
            x + entry.offset_x + entry.bounds.width,
            y + entry.offset_y,
            y + entry.offset_y + entry.bounds.height,
        )
        self.gpu.set_tint(atlas.texture, _opaque(color))
        self.gpu.draw_image(dst, entry.bounds, atlas.texture)
        self.gpu.set_tint(atlas.texture, NO_TINT)

    def draw_image(self, dst: Rectangle, bits: list[int], w: int, h: int) -> None:
        """Draw a ``w`` by ``h`` block of ARGB pixels into ``dst``, clipped."""
        self._sync_clip()
        dst = self.clip.intersection(dst)
        texture = self.gpu.upload_texture(bits, w, h)
        if texture is None:
            return
        self.gpu.draw_image(dst, Rectangle(0, w, 0, h), texture)
        self.gpu.free_texture(texture)

    def draw_invert(self, rect: Rectangle) -> None:
        """Highlight ``rect`` with a translucent white overlay."""
        self._sync_clip()
        rect = self.clip.intersection(rect)
        if not rect.is_valid():
            return
        self.gpu.fill_rect(rect, INVERT_COLOR)

    def draw_circle(
        self, cx: int, cy: int, radius: int, fill: int, outline: int, hollow: bool
    ) -> None:
        """Fill a circle as a fan of triangles; outline and hollow are not drawn."""
        self._sync_clip()
        c = _opaque(fill)
        vertices: list[Vertex] = []
        for i in range(CIRCLE_SEGMENTS):
            a0 = i / CIRCLE_SEGMENTS * 2.0 * math.pi
            a1 = (i + 1) / CIRCLE_SEGMENTS * 2.0 * math.pi
            vertices += [
                Vertex(float(cx), float(cy), 0.0, 0.0, c),
                Vertex(cx + math.cos(a0) * radius, cy + math.sin(a0) * radius, 0.0, 0.0, c),
                Vertex(cx + math.cos(a1) * radius, cy + math.sin(a1) * radius, 0.0, 0.0, c),
            ]
        self.gpu.draw_tris(vertices)

    def set_clip(self, clip: Rectangle) -> None:
        """Narrow the clip to ``clip``, remembering the previous one."""
        self.clip_stack.append(self.clip)
        self.clip = self.clip.intersection(clip)
        self.gpu.set_clip(self.clip)

    def restore_clip(self) -> None:
        """Return to the clip in force before the last :meth:`set_clip`."""
        if self.clip_stack:
            self.clip = self.clip_stack.pop()
            self.gpu.set_clip(self.clip)

    def get_native(self) -> Any:
        """Return the back end's own drawing object."""
        return self.gpu.get_native()

    def close(self) -> None:
        """Release the glyph texture and present the frame."""
        if self._closed:
            return
        self._closed = True
        if self.atlas.texture is not None:
            self.gpu.free_texture(self.atlas.texture)
            self.atlas.texture = None
        self.clip_stack.clear()
        self.gpu.present()

    def __enter__(self) -> GPUPainter:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()