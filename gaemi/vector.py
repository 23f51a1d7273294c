"""Two, three and four component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vector2 | float) -> Vector2:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        if isinstance(other, (int, float)):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vector2:
        """Return a unit vector in the same direction."""
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def lerp(self, other: Vector2, f: float) -> Vector2:
        """Interpolate from this vector towards ``other`` by ``f``."""
        return self + f * (other - self)

    def reflect(self, normal: Vector2) -> Vector2:
        """Reflect this vector about a normalized ``normal``."""
        return self - 2.0 * self.dot(normal) * normal


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)
Vector2.NEG_UNIT_X = Vector2(-1.0, 0.0)
Vector2.NEG_UNIT_Y = Vector2(0.0, -1.0)


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction."""
        length = self.length()
        return Vector3(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def lerp(self, other: Vector3, f: float) -> Vector3:
        """Interpolate from this vector towards ``other`` by ``f``."""
        return self + f * (other - self)

    def reflect(self, normal: Vector3) -> Vector3:
        """Reflect this vector about a normalized ``normal``."""
        return self - 2.0 * self.dot(normal) * normal

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.UNIT_X = Vector3(1.0, 0.0, 0.0)
Vector3.UNIT_Y = Vector3(0.0, 1.0, 0.0)
Vector3.UNIT_Z = Vector3(0.0, 0.0, 1.0)
Vector3.NEG_UNIT_X = Vector3(-1.0, 0.0, 0.0)
Vector3.NEG_UNIT_Y = Vector3(0.0, -1.0, 0.0)
Vector3.NEG_UNIT_Z = Vector3(0.0, 0.0, -1.0)
Vector3.INFINITY = Vector3(math.inf, math.inf, math.inf)
Vector3.NEG_INFINITY = Vector3(-math.inf, -math.inf, -math.inf)


@dataclass(frozen=True)
class Vector4:
    """An immutable 4D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)