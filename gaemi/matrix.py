"""Row-major 3x3 and 4x4 transformation matrices (row-vector convention)."""

from __future__ import annotations

import math
from typing import ClassVar, Iterable, Sequence

from gaemi.mathutil import cot, near_zero
from gaemi.vector import Vector2, Vector3

Rows = tuple[tuple[float, ...], ...]

_SINGULAR_EPSILON = 1e-12


class _SquareMatrix:
    """Immutable square matrix of floats stored row by row."""

    __slots__ = ("_rows",)
    SIZE: ClassVar[int] = 0

    def __init__(self, rows: Sequence[Sequence[float]] | None = None) -> None:
        if rows is None:
            rows = [[1.0 if i == j else 0.0 for j in range(self.SIZE)] for i in range(self.SIZE)]
        converted = tuple(tuple(float(value) for value in row) for row in rows)
        if len(converted) != self.SIZE or any(len(row) != self.SIZE for row in converted):
            raise ValueError(f"{type(self).__name__} needs {self.SIZE}x{self.SIZE} values")
        self._rows: Rows = converted

    @classmethod
    def identity(cls):
        """The identity matrix."""
        return cls()

    @property
    def rows(self) -> Rows:
        return self._rows

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self._rows[index]

    def __iter__(self) -> Iterable[tuple[float, ...]]:
        return iter(self._rows)

    def __mul__(self, other):
        """Matrix product ``self * other``."""
        if type(other) is not type(self):
            return NotImplemented
        columns = list(zip(*other.rows))
        return type(self)(
            [[sum(a * b for a, b in zip(row, column)) for column in columns] for row in self._rows]
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rows == other.rows

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._rows))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows!r})"

    def _flat(self) -> tuple[float, ...]:
        return tuple(value for row in self._rows for value in row)


class Matrix3(_SquareMatrix):
    """A 3x3 matrix for 2D transformations."""

    __slots__ = ()
    SIZE = 3

    def __init__(self, rows: Sequence[Sequence[float]] | None = None) -> None:
        super().__init__(rows)

    def __mul__(self, other: Matrix3) -> Matrix3:
        return super().__mul__(other)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = _SquareMatrix.__hash__

    @classmethod
    def identity(cls) -> Matrix3:
        return cls()

    def flat(self) -> tuple[float, ...]:
        """All values in row-major order, as uploaded to a shader."""
        return self._flat()

    @classmethod
    def create_scale(cls, x_scale: float | Vector2, y_scale: float | None = None) -> Matrix3:
        """Scale matrix from two factors, a vector, or one uniform factor."""
        if isinstance(x_scale, Vector2):
            x_scale, y_scale = x_scale.x, x_scale.y
        elif y_scale is None:
            y_scale = x_scale
        return cls(
            (
                (x_scale, 0.0, 0.0),
                (0.0, y_scale, 0.0),
                (0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_rotation(cls, theta: float) -> Matrix3:
        """Rotation about the Z axis; ``theta`` is in radians."""
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            (
                (c, s, 0.0),
                (-s, c, 0.0),
                (0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_translation(cls, trans: Vector2) -> Matrix3:
        """Translation on the xy-plane."""
        return cls(
            (
                (1.0, 0.0, 0.0),
                (0.0, 1.0, 0.0),
                (trans.x, trans.y, 1.0),
            )
        )


class Matrix4(_SquareMatrix):
    """A 4x4 matrix for 3D transformations and projections."""

    __slots__ = ()
    SIZE = 4

    def __init__(self, rows: Sequence[Sequence[float]] | None = None) -> None:
        super().__init__(rows)

    def __mul__(self, other: Matrix4) -> Matrix4:
        return super().__mul__(other)

    def __eq__(self, other: object) -> bool:
        return super().__eq__(other)

    __hash__ = _SquareMatrix.__hash__

    @classmethod
    def identity(cls) -> Matrix4:
        return cls()

    def flat(self) -> tuple[float, ...]:
        """All values in row-major order, as uploaded to a shader."""
        return self._flat()

    def inverted(self) -> Matrix4:
        """Return the inverse matrix; raise ValueError if it is singular."""
        size = self.SIZE
        augmented = [
            list(row) + [1.0 if i == j else 0.0 for j in range(size)]
            for i, row in enumerate(self._rows)
        ]
        for col in range(size):
            pivot = max(range(col, size), key=lambda r: abs(augmented[r][col]))
            if abs(augmented[pivot][col]) < _SINGULAR_EPSILON:
                raise ValueError("matrix is singular and cannot be inverted")
            augmented[col], augmented[pivot] = augmented[pivot], augmented[col]
            pivot_value = augmented[col][col]
            augmented[col] = [value / pivot_value for value in augmented[col]]
            for r, row in enumerate(augmented):
                if r != col and row[col] != 0.0:
                    factor = row[col]
                    augmented[r] = [a - factor * b for a, b in zip(row, augmented[col])]
        return Matrix4([row[size:] for row in augmented])

    def translation(self) -> Vector3:
        """The translation component."""
        row = self._rows[3]
        return Vector3(row[0], row[1], row[2])

    def x_axis(self) -> Vector3:
        """The normalized X axis (forward)."""
        row = self._rows[0]
        return Vector3(row[0], row[1], row[2]).normalized()

    def y_axis(self) -> Vector3:
        """The normalized Y axis (left)."""
        row = self._rows[1]
        return Vector3(row[0], row[1], row[2]).normalized()

    def z_axis(self) -> Vector3:
        """The normalized Z axis (up)."""
        row = self._rows[2]
        return Vector3(row[0], row[1], row[2]).normalized()

    def scale(self) -> Vector3:
        """The scale component, as the lengths of the three axes."""
        x, y, z = (Vector3(row[0], row[1], row[2]).length() for row in self._rows[:3])
        return Vector3(x, y, z)

    @classmethod
    def create_scale(
        cls,
        x_scale: float | Vector3,
        y_scale: float | None = None,
        z_scale: float | None = None,
    ) -> Matrix4:
        """Scale matrix from three factors, a vector, or one uniform factor."""
        if isinstance(x_scale, Vector3):
            x_scale, y_scale, z_scale = x_scale.x, x_scale.y, x_scale.z
        elif y_scale is None and z_scale is None:
            y_scale = z_scale = x_scale
        elif y_scale is None or z_scale is None:
            raise ValueError("give one uniform factor or all three factors")
        return cls(
            (
                (x_scale, 0.0, 0.0, 0.0),
                (0.0, y_scale, 0.0, 0.0),
                (0.0, 0.0, z_scale, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_rotation_x(cls, theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, c, s, 0.0),
                (0.0, -s, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_rotation_y(cls, theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            (
                (c, 0.0, -s, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (s, 0.0, c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_rotation_z(cls, theta: float) -> Matrix4:
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            (
                (c, s, 0.0, 0.0),
                (-s, c, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_from_quaternion(cls, q) -> Matrix4:
        """Rotation matrix from a unit quaternion with x, y, z, w attributes."""
        x, y, z, w = q.x, q.y, q.z, q.w
        return cls(
            (
                (1.0 - 2.0 * y * y - 2.0 * z * z, 2.0 * x * y + 2.0 * w * z, 2.0 * x * z - 2.0 * w * y, 0.0),
                (2.0 * x * y - 2.0 * w * z, 1.0 - 2.0 * x * x - 2.0 * z * z, 2.0 * y * z + 2.0 * w * x, 0.0),
                (2.0 * x * z + 2.0 * w * y, 2.0 * y * z - 2.0 * w * x, 1.0 - 2.0 * x * x - 2.0 * y * y, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def create_translation(cls, trans: Vector3) -> Matrix4:
        return cls(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (trans.x, trans.y, trans.z, 1.0),
            )
        )

    @classmethod
    def create_look_at(cls, eye: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """View matrix looking from ``eye`` towards ``target``."""
        z_axis = (target - eye).normalized()
        x_axis = up.cross(z_axis).normalized()
        y_axis = z_axis.cross(x_axis).normalized()
        return cls(
            (
                (x_axis.x, y_axis.x, z_axis.x, 0.0),
                (x_axis.y, y_axis.y, z_axis.y, 0.0),
                (x_axis.z, y_axis.z, z_axis.z, 0.0),
                (-x_axis.dot(eye), -y_axis.dot(eye), -z_axis.dot(eye), 1.0),
            )
        )

    @classmethod
    def create_ortho(cls, width: float, height: float, near: float, far: float) -> Matrix4:
        return cls(
            (
                (2.0 / width, 0.0, 0.0, 0.0),
                (0.0, 2.0 / height, 0.0, 0.0),
                (0.0, 0.0, 1.0 / (far - near), 0.0),
                (0.0, 0.0, near / (near - far), 1.0),
            )
        )

    @classmethod
    def create_perspective_fov(
        cls, fov_y: float, width: float, height: float, near: float, far: float
    ) -> Matrix4:
        y_scale = cot(fov_y / 2.0)
        x_scale = y_scale * height / width
        return cls(
            (
                (x_scale, 0.0, 0.0, 0.0),
                (0.0, y_scale, 0.0, 0.0),
                (0.0, 0.0, far / (far - near), 1.0),
                (0.0, 0.0, -near * far / (far - near), 0.0),
            )
        )

    @classmethod
    def create_simple_view_proj(cls, width: float, height: float) -> Matrix4:
        return cls(
            (
                (2.0 / width, 0.0, 0.0, 0.0),
                (0.0, 2.0 / height, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (0.0, 0.0, 1.0, 1.0),
            )
        )


def transform_vector2(vec: Vector2, mat: Matrix3, w: float = 1.0) -> Vector2:
    """Transform a 2D vector (as a row vector with extra component ``w``)."""
    components = (vec.x, vec.y, w)
    x, y = (sum(c * row[i] for c, row in zip(components, mat.rows)) for i in range(2))
    return Vector2(x, y)


def _transform4(vec: Vector3, mat: Matrix4, w: float) -> tuple[float, float, float, float]:
    components = (vec.x, vec.y, vec.z, w)
    x, y, z, tw = (sum(c * row[i] for c, row in zip(components, mat.rows)) for i in range(4))
    return x, y, z, tw


def transform_vector3(vec: Vector3, mat: Matrix4, w: float = 1.0) -> Vector3:
    """Transform a 3D vector, ignoring the resulting w component."""
    x, y, z, _ = _transform4(vec, mat, w)
    return Vector3(x, y, z)


def transform_with_persp_div(vec: Vector3, mat: Matrix4, w: float = 1.0) -> Vector3:
    """Transform a 3D vector and divide by the resulting w unless it is near zero."""
    x, y, z, tw = _transform4(vec, mat, w)
    result = Vector3(x, y, z)
    if not near_zero(abs(tw)):
        result = result * (1.0 / tw)
    return result