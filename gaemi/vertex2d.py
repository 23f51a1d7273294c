"""Plain vertex data for 2D rendering, and axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from gaemi.vector import Vector2


@dataclass(frozen=True)
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class ColorRGBA8:
    """An 8-bit-per-channel colour as uploaded to the GPU; defaults to transparent black."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class UV:
    u: float = 0.0
    v: float = 0.0


@dataclass(frozen=True)
class Vertex2D:
    """A vertex with a position, a colour and texture coordinates."""

    position: Position = field(default_factory=Position)
    color: ColorRGBA8 = field(default_factory=ColorRGBA8)
    uv: UV = field(default_factory=UV)


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle with its edges and size stored together."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_size(cls, left: float, top: float, width: float, height: float) -> Rectangle:
        return cls(
            left=left,
            right=left + width,
            top=top,
            bottom=top + height,
            width=width,
            height=height,
        )

    def center(self) -> Vector2:
        return Vector2(self.left + self.width / 2.0, self.top + self.height / 2.0)