"""Batched sprite quads grouped into per-texture draw calls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from gaemi.vector import Vector2, Vector4
from gaemi.vertex2d import UV, ColorRGBA8, Position, Vertex2D

VERTICES_PER_GLYPH = 6


class GlyphSortType(Enum):
    """How glyphs are ordered before being grouped into batches."""

    NONE = "none"
    FRONT_TO_BACK = "front_to_back"
    BACK_TO_FRONT = "back_to_front"
    TEXTURE = "texture"


def rotate_point(pos: Vector2, angle: float) -> Vector2:
    """Rotate ``pos`` about the origin by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Vector2(pos.x * c - pos.y * s, pos.x * s + pos.y * c)


def _vertex(x: float, y: float, u: float, v: float, color: ColorRGBA8) -> Vertex2D:
    return Vertex2D(Position(x, y), color, UV(u, v))


class Glyph:
    """A single textured quad.

    ``dest_rect`` and ``uv_rect`` are (x, y, width, height) in their x, y, z, w
    components. When ``angle`` is given the quad is rotated about its centre.
    """

    def __init__(
        self,
        dest_rect: Vector4,
        uv_rect: Vector4,
        texture: int,
        depth: float,
        color: ColorRGBA8,
        angle: float | None = None,
    ) -> None:
        self.texture = texture
        self.depth = depth

        u_left, u_right = uv_rect.x, uv_rect.x + uv_rect.z
        v_bottom, v_top = uv_rect.y, uv_rect.y + uv_rect.w

        if angle is None:
            left, right = dest_rect.x, dest_rect.x + dest_rect.z
            bottom, top = dest_rect.y, dest_rect.y + dest_rect.w
            tl, bl = (left, top), (left, bottom)
            br, tr = (right, bottom), (right, top)
        else:
            half = Vector2(dest_rect.z / 2.0, dest_rect.w / 2.0)
            corners = (
                Vector2(-half.x, half.y),
                Vector2(-half.x, -half.y),
                Vector2(half.x, -half.y),
                Vector2(half.x, half.y),
            )
            tl, bl, br, tr = (
                (dest_rect.x + p.x, dest_rect.y + p.y)
                for p in (rotate_point(corner, angle) + half for corner in corners)
            )

        self.top_left = _vertex(*tl, u_left, v_top, color)
        self.bottom_left = _vertex(*bl, u_left, v_bottom, color)
        self.bottom_right = _vertex(*br, u_right, v_bottom, color)
        self.top_right = _vertex(*tr, u_right, v_top, color)

    def triangles(self) -> tuple[Vertex2D, ...]:
        """The six vertices of the quad's two triangles."""
        return (
            self.top_left,
            self.bottom_left,
            self.bottom_right,
            self.bottom_right,
            self.top_right,
            self.top_left,
        )


@dataclass
class RenderBatch:
    """One draw call: a run of vertices sharing a texture."""

    offset: int
    num_vertices: int
    texture: int


_SORT_KEYS: dict[GlyphSortType, tuple[Callable[[Glyph], float], bool]] = {
    GlyphSortType.FRONT_TO_BACK: (lambda g: g.depth, False),
    GlyphSortType.BACK_TO_FRONT: (lambda g: g.depth, True),
    GlyphSortType.TEXTURE: (lambda g: g.texture, False),
}


class Spritebatch:
    """Collects glyphs between ``begin`` and ``end`` and groups them for drawing."""

    def __init__(self) -> None:
        self.sort_type = GlyphSortType.TEXTURE
        self.glyphs: list[Glyph] = []
        self.vertices: list[Vertex2D] = []
        self.render_batches: list[RenderBatch] = []

    def begin(self, sort_type: GlyphSortType = GlyphSortType.TEXTURE) -> None:
        """Start a new batch, discarding the glyphs and batches of the last one."""
        self.sort_type = sort_type
        self.render_batches = []
        self.glyphs = []
        self.vertices = []

    def end(self) -> None:
        """Sort the glyphs and build the render batches and vertex list."""
        ordered = self._sorted_glyphs()
        self.render_batches = []
        self.vertices = []
        previous_texture = None
        for glyph in ordered:
            if self.render_batches and glyph.texture == previous_texture:
                self.render_batches[-1].num_vertices += VERTICES_PER_GLYPH
            else:
                self.render_batches.append(
                    RenderBatch(len(self.vertices), VERTICES_PER_GLYPH, glyph.texture)
                )
            self.vertices.extend(glyph.triangles())
            previous_texture = glyph.texture

    def draw(
        self,
        dest_rect: Vector4,
        uv_rect: Vector4,
        texture: int,
        depth: float,
        color: ColorRGBA8,
        angle: float | None = None,
    ) -> None:
        """Add a glyph, rotated by ``angle`` radians when one is given."""
        self.glyphs.append(Glyph(dest_rect, uv_rect, texture, depth, color, angle))

    def draw_toward(
        self,
        dest_rect: Vector4,
        uv_rect: Vector4,
        texture: int,
        depth: float,
        color: ColorRGBA8,
        direction: Vector2,
    ) -> None:
        """Add a glyph rotated to face a normalized ``direction``."""
        cosine = Vector2(1.0, 0.0).dot(direction)
        if not -1.0 <= cosine <= 1.0:
            raise ValueError(f"direction must be normalized, got {direction!r}")
        angle = math.acos(cosine)
        if direction.y < 0.0:
            angle = -angle
        self.glyphs.append(Glyph(dest_rect, uv_rect, texture, depth, color, angle))

    def render(self, draw_call: Callable[[int, int, int], object]) -> None:
        """Issue ``draw_call(texture, offset, num_vertices)`` for every batch."""
        for batch in self.render_batches:
            draw_call(batch.texture, batch.offset, batch.num_vertices)

    def _sorted_glyphs(self) -> list[Glyph]:
        if self.sort_type is GlyphSortType.NONE:
            return list(self.glyphs)
        key, reverse = _SORT_KEYS[self.sort_type]
        if reverse:
            # sorted(reverse=True) keeps equal elements in their original order.
            return sorted(self.glyphs, key=key, reverse=True)
        return sorted(self.glyphs, key=key)


@dataclass
class Sprite:
    """A fixed-size sprite placed at a position."""

    position: Vector2 = field(default_factory=Vector2)
    angle: float = 0.0
    texture_name: str = "wall"
    size: float = 10.0

    def draw(self, spritebatch: Spritebatch, texture: int) -> None:
        """Add this sprite to ``spritebatch`` using the texture id ``texture``."""
        rect = Vector4(self.position.x, self.position.y, self.size, self.size)
        uv_rect = Vector4(0.0, 0.0, 1.0, 1.0)
        color = ColorRGBA8(255, 255, 255, 255)
        spritebatch.draw(rect, uv_rect, texture, 0.0, color)