"""Unit quaternions for 3D rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass

from gaemi.mathutil import lerp as _lerp
from gaemi.vector import Vector3


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion; the default value is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians about a normalized ``axis``."""
        scalar = math.sin(angle / 2.0)
        return cls(axis.x * scalar, axis.y * scalar, axis.z * scalar, math.cos(angle / 2.0))

    @classmethod
    def identity(cls) -> Quaternion:
        return cls(0.0, 0.0, 0.0, 1.0)

    def _vector(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def conjugated(self) -> Quaternion:
        """The conjugate, which for a unit quaternion is the inverse rotation."""
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w

    def length(self) -> float:
        return math.sqrt(self.length_sq())

    def normalized(self) -> Quaternion:
        length = self.length()
        return Quaternion(self.x / length, self.y / length, self.z / length, self.w / length)

    def dot(self, other: Quaternion) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def lerp(self, other: Quaternion, f: float) -> Quaternion:
        """Normalized linear interpolation towards ``other``."""
        return Quaternion(
            _lerp(self.x, other.x, f),
            _lerp(self.y, other.y, f),
            _lerp(self.z, other.z, f),
            _lerp(self.w, other.w, f),
        ).normalized()

    def slerp(self, other: Quaternion, f: float) -> Quaternion:
        """Spherical linear interpolation towards ``other``."""
        raw_cos = self.dot(other)
        cos_omega = abs(raw_cos)
        if cos_omega < 0.9999:
            omega = math.acos(cos_omega)
            inv_sin = 1.0 / math.sin(omega)
            scale0 = math.sin((1.0 - f) * omega) * inv_sin
            scale1 = math.sin(f * omega) * inv_sin
        else:
            # Nearly collinear: fall back to linear interpolation.
            scale0 = 1.0 - f
            scale1 = f
        if raw_cos < 0.0:
            scale1 = -scale1
        return Quaternion(
            scale0 * self.x + scale1 * other.x,
            scale0 * self.y + scale1 * other.y,
            scale0 * self.z + scale1 * other.z,
            scale0 * self.w + scale1 * other.w,
        ).normalized()

    def concatenate(self, other: Quaternion) -> Quaternion:
        """Rotation by this quaternion followed by ``other``."""
        qv = self._vector()
        pv = other._vector()
        vec = other.w * qv + self.w * pv + pv.cross(qv)
        return Quaternion(vec.x, vec.y, vec.z, other.w * self.w - pv.dot(qv))

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate ``v`` by this (unit) quaternion."""
        qv = self._vector()
        return v + 2.0 * qv.cross(qv.cross(v) + self.w * v)