"""RGBA colours with 8-bit channels."""

from __future__ import annotations

from dataclasses import dataclass

from gaemi.mathutil import clamp, lerp as _lerp
from gaemi.vector import Vector3, Vector4


def _to_channel(value: float) -> int:
    """Truncate towards zero and keep the result within 0..255."""
    return clamp(int(value), 0, 255)


@dataclass(frozen=True)
class Color:
    """An immutable colour; every channel is an integer in 0..255."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Unpack a 32-bit integer laid out as 0xAABBGGRR."""
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"colour value out of 32-bit range: {value!r}")
        return cls(
            value & 0xFF,
            (value >> 8) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 24) & 0xFF,
        )

    def lerp(self, other: Color, amount: float) -> Color:
        """Interpolate each channel from this colour towards ``other``."""
        return Color(
            _to_channel(_lerp(self.r, other.r, amount)),
            _to_channel(_lerp(self.g, other.g, amount)),
            _to_channel(_lerp(self.b, other.b, amount)),
            _to_channel(_lerp(self.a, other.a, amount)),
        )

    def __mul__(self, scale: float) -> Color:
        """Scale every channel, alpha included, by ``scale``."""
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Color(
            _to_channel(self.r * scale),
            _to_channel(self.g * scale),
            _to_channel(self.b * scale),
            _to_channel(self.a * scale),
        )

    def to_vector3(self) -> Vector3:
        return Vector3(float(self.r), float(self.g), float(self.b))

    def to_vector4(self) -> Vector4:
        return Vector4(float(self.r), float(self.g), float(self.b), float(self.a))


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.LIGHT_YELLOW = Color(255, 255, 225)
Color.LIGHT_BLUE = Color(170, 217, 230)
Color.LIGHT_PINK = Color(255, 180, 200)
Color.LIGHT_GREEN = Color(142, 240, 142)