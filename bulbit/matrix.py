"""Column-major 2x2, 3x3 and 4x4 matrices."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import TypeVar, Union

Vector = tuple[float, ...]
_M = TypeVar("_M", bound="_SquareMatrix")


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


def _diagonal(cls: type[_M], v: Union[float, Iterable[float]]) -> _M:
    n = cls._DIM
    if isinstance(v, (int, float)):
        diag = (float(v),) * n
    else:
        diag = tuple(float(x) for x in v)
        if len(diag) != n:
            raise ValueError(f"diagonal of {cls.__name__} needs {n} components")
    return cls(*(tuple(diag[i] if i == j else 0.0 for i in range(n)) for j in range(n)))


def _transposed(m: _M) -> _M:
    return type(m)(*zip(*m.columns))


class _SquareMatrix:
    """Square matrix stored as a tuple of columns."""

    __slots__ = ("_cols",)
    _DIM = 0
    _TRAILING_NEWLINE = False

    def __init__(self, *columns: Iterable[float]) -> None:
        if len(columns) != self._DIM:
            raise ValueError(f"{type(self).__name__} needs {self._DIM} columns, got {len(columns)}")
        cols = tuple(tuple(float(x) for x in c) for c in columns)
        if any(len(c) != self._DIM for c in cols):
            raise ValueError(f"every column of {type(self).__name__} needs {self._DIM} components")
        self._cols = cols

    @classmethod
    def zero(cls: type[_M]) -> _M:
        """Return the zero matrix."""
        return _diagonal(cls, 0.0)

    @property
    def columns(self) -> tuple[Vector, ...]:
        return self._cols

    @property
    def ex(self) -> Vector:
        return self._cols[0]

    @property
    def ey(self) -> Vector:
        return self._cols[1]

    def __getitem__(self, i: int) -> Vector:
        return self._cols[i]

    def __iter__(self):
        return iter(self._cols)

    def __len__(self) -> int:
        return self._DIM

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._cols == other._cols

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._cols))

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._cols!r}"

    def __str__(self) -> str:
        rows = zip(*self._cols)
        text = "\n".join("\t".join(f"{x:.4f}" for x in row) for row in rows)
        return text + "\n" if self._TRAILING_NEWLINE else text

    def __add__(self: _M, other: _M) -> _M:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(tuple(x + y for x, y in zip(a, b)) for a, b in zip(self._cols, other._cols)))

    def __matmul__(self, other):
        return mul(self, other)


class Mat2(_SquareMatrix):
    """2x2 matrix with columns ``ex`` and ``ey``."""

    __slots__ = ()
    _DIM = 2

    @staticmethod
    def identity() -> Mat2:
        """Return the identity matrix."""
        return _diagonal(Mat2, 1.0)

    @staticmethod
    def diagonal(v: Union[float, Iterable[float]]) -> Mat2:
        """Return a diagonal matrix from a scalar or a vector of diagonal entries."""
        return _diagonal(Mat2, v)

    def transpose(self) -> Mat2:
        """Return the transposed matrix."""
        return _transposed(self)

    def determinant(self) -> float:
        (a, b), (c, d) = self._cols
        return a * d - c * b

    def inverse(self) -> Mat2:
        """Return the inverse; a singular matrix yields the zero matrix."""
        (a, b), (c, d) = self._cols
        det = a * d - c * b
        if det != 0:
            det = 1 / det
        return Mat2((det * d, -det * b), (-det * c, det * a))


class Mat3(_SquareMatrix):
    """3x3 matrix with columns ``ex``, ``ey`` and ``ez``."""

    __slots__ = ()
    _DIM = 3
    _TRAILING_NEWLINE = True

    @staticmethod
    def identity() -> Mat3:
        """Return the identity matrix."""
        return _diagonal(Mat3, 1.0)

    @staticmethod
    def diagonal(v: Union[float, Iterable[float]]) -> Mat3:
        """Return a diagonal matrix from a scalar or a vector of diagonal entries."""
        return _diagonal(Mat3, v)

    def transpose(self) -> Mat3:
        """Return the transposed matrix."""
        return _transposed(self)

    @property
    def ez(self) -> Vector:
        return self._cols[2]

    def inverse(self) -> Mat3:
        """Return the inverse; a singular matrix yields the zero matrix."""
        (exx, exy, exz), (eyx, eyy, eyz), (ezx, ezy, ezz) = self._cols
        det = exx * (eyy * ezz - eyz * ezy) - eyx * (exy * ezz - ezy * exz) + ezx * (exy * eyz - eyy * exz)
        if det != 0:
            det = 1 / det
        return Mat3(
            (
                (eyy * ezz - eyz * ezy) * det,
                (ezy * exz - exy * ezz) * det,
                (exy * eyz - exz * eyy) * det,
            ),
            (
                (ezx * eyz - eyx * ezz) * det,
                (exx * ezz - ezx * exz) * det,
                (exz * eyx - exx * eyz) * det,
            ),
            (
                (eyx * ezy - ezx * eyy) * det,
                (exy * ezx - exx * ezy) * det,
                (exx * eyy - exy * eyx) * det,
            ),
        )

    def scale(self, scale: Sequence[float]) -> Mat3:
        """Return this matrix followed by a 2D scale."""
        sx, sy = scale
        return mul(self, Mat3((sx, 0, 0), (0, sy, 0), (0, 0, 1)))

    def rotate(self, rotation: float) -> Mat3:
        """Return this matrix followed by a 2D rotation in radians."""
        s = math.sin(rotation)
        c = math.cos(rotation)
        return mul(self, Mat3((c, s, 0), (-s, c, 0), (0, 0, 1)))

    def translate(self, translation: Sequence[float]) -> Mat3:
        """Return this matrix followed by a 2D translation."""
        tx, ty = translation
        return mul(self, Mat3((1, 0, 0), (0, 1, 0), (tx, ty, 1)))


class Mat4(_SquareMatrix):
    """4x4 matrix with columns ``ex``, ``ey``, ``ez`` and ``ew``."""

    __slots__ = ()
    _DIM = 4
    _TRAILING_NEWLINE = True

    @staticmethod
    def identity() -> Mat4:
        """Return the identity matrix."""
        return _diagonal(Mat4, 1.0)

    @staticmethod
    def diagonal(v: Union[float, Iterable[float]]) -> Mat4:
        """Return a diagonal matrix from a scalar or a vector of diagonal entries."""
        return _diagonal(Mat4, v)

    def transpose(self) -> Mat4:
        """Return the transposed matrix."""
        return _transposed(self)

    @property
    def ez(self) -> Vector:
        return self._cols[2]

    @property
    def ew(self) -> Vector:
        return self._cols[3]

    @staticmethod
    def from_rotation_translation(r: Mat3, p: Sequence[float]) -> Mat4:
        """Build an affine matrix from a 3x3 rotation and a translation."""
        px, py, pz = p
        return Mat4((*r.ex, 0), (*r.ey, 0), (*r.ez, 0), (px, py, pz, 1))

    def inverse(self) -> Mat4:
        """Return the inverse; a singular matrix yields the zero matrix."""
        (exx, exy, exz, exw), (eyx, eyy, eyz, eyw), (ezx, ezy, ezz, ezw), (ewx, ewy, ewz, eww) = self._cols

        a2323 = ezz * eww - ezw * ewz
        a1323 = ezy * eww - ezw * ewy
        a1223 = ezy * ewz - ezz * ewy
        a0323 = ezx * eww - ezw * ewx
        a0223 = ezx * ewz - ezz * ewx
        a0123 = ezx * ewy - ezy * ewx
        a2313 = eyz * eww - eyw * ewz
        a1313 = eyy * eww - eyw * ewy
        a1213 = eyy * ewz - eyz * ewy
        a2312 = eyz * ezw - eyw * ezz
        a1312 = eyy * ezw - eyw * ezy
        a1212 = eyy * ezz - eyz * ezy
        a0313 = eyx * eww - eyw * ewx
        a0213 = eyx * ewz - eyz * ewx
        a0312 = eyx * ezw - eyw * ezx
        a0212 = eyx * ezz - eyz * ezx
        a0113 = eyx * ewy - eyy * ewx
        a0112 = eyx * ezy - eyy * ezx

        det = (
            exx * (eyy * a2323 - eyz * a1323 + eyw * a1223)
            - exy * (eyx * a2323 - eyz * a0323 + eyw * a0223)
            + exz * (eyx * a1323 - eyy * a0323 + eyw * a0123)
            - exw * (eyx * a1223 - eyy * a0223 + eyz * a0123)
        )
        if det != 0:
            det = 1 / det

        return Mat4(
            (
                det * (eyy * a2323 - eyz * a1323 + eyw * a1223),
                det * -(exy * a2323 - exz * a1323 + exw * a1223),
                det * (exy * a2313 - exz * a1313 + exw * a1213),
                det * -(exy * a2312 - exz * a1312 + exw * a1212),
            ),
            (
                det * -(eyx * a2323 - eyz * a0323 + eyw * a0223),
                det * (exx * a2323 - exz * a0323 + exw * a0223),
                det * -(exx * a2313 - exz * a0313 + exw * a0213),
                det * (exx * a2312 - exz * a0312 + exw * a0212),
            ),
            (
                det * (eyx * a1323 - eyy * a0323 + eyw * a0123),
                det * -(exx * a1323 - exy * a0323 + exw * a0123),
                det * (exx * a1313 - exy * a0313 + exw * a0113),
                det * -(exx * a1312 - exy * a0312 + exw * a0112),
            ),
            (
                det * -(eyx * a1223 - eyy * a0223 + eyz * a0123),
                det * (exx * a1223 - exy * a0223 + exz * a0123),
                det * -(exx * a1213 - exy * a0213 + exz * a0113),
                det * (exx * a1212 - exy * a0212 + exz * a0112),
            ),
        )

    def scale(self, scale: Sequence[float]) -> Mat4:
        """Return this matrix followed by a 3D scale."""
        sx, sy, sz = scale
        return mul(self, Mat4((sx, 0, 0, 0), (0, sy, 0, 0), (0, 0, sz, 0), (0, 0, 0, 1)))

    def rotate(self, euler_rotation: Sequence[float]) -> Mat4:
        """Return this matrix followed by a rotation given as Euler angles in radians."""
        rx, ry, rz = euler_rotation
        sin_x, cos_x = math.sin(rx), math.cos(rx)
        sin_y, cos_y = math.sin(ry), math.cos(ry)
        sin_z, cos_z = math.sin(rz), math.cos(rz)

        t = Mat4(
            (
                cos_y * cos_z,
                sin_x * sin_y * cos_z + cos_x * sin_z,
                -cos_x * sin_y * cos_z + sin_x * sin_z,
                0,
            ),
            (
                -cos_y * sin_z,
                -sin_x * sin_y * sin_z + cos_x * cos_z,
                cos_x * sin_y * sin_z + sin_x * cos_z,
                0,
            ),
            (sin_y, -sin_x * cos_y, cos_x * cos_y, 0),
            (0, 0, 0, 1),
        )
        return mul(self, t)

    def translate(self, translation: Sequence[float]) -> Mat4:
        """Return this matrix followed by a 3D translation."""
        tx, ty, tz = translation
        return mul(self, Mat4((1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (tx, ty, tz, 1)))

    @staticmethod
    def orth(left: float, right: float, bottom: float, top: float, z_near: float, z_far: float) -> Mat4:
        """Return an orthographic projection matrix."""
        return Mat4(
            (2 / (right - left), 0, 0, 0),
            (0, 2 / (top - bottom), 0, 0),
            (0, 0, 2 / (z_far - z_near), 0),
            (
                -(right + left) / (right - left),
                -(top + bottom) / (top - bottom),
                -(z_far + z_near) / (z_far - z_near),
                1,
            ),
        )

    @staticmethod
    def perspective(vertical_fov: float, aspect_ratio: float, z_near: float, z_far: float) -> Mat4:
        """Return a perspective projection matrix; the field of view is in radians."""
        tan_half_fov = math.tan(vertical_fov / 2)
        return Mat4(
            (1 / (aspect_ratio * tan_half_fov), 0, 0, 0),
            (0, 1 / tan_half_fov, 0, 0),
            (0, 0, -(z_far + z_near) / (z_far - z_near), -1),
            (0, 0, -(2 * z_far * z_near) / (z_far - z_near), 0),
        )


def _as_vector(m: _SquareMatrix, v: Iterable[float]) -> Vector:
    vec = tuple(float(x) for x in v)
    if len(vec) != m._DIM:
        raise ValueError(f"{type(m).__name__} needs a vector of {m._DIM} components, got {len(vec)}")
    return vec


def _check_pair(a: object, b: object) -> None:
    if not isinstance(a, _SquareMatrix):
        raise TypeError(f"expected a matrix, got {type(a).__name__}")
    if isinstance(b, _SquareMatrix) and type(b) is not type(a):
        raise TypeError(f"cannot multiply {type(a).__name__} with {type(b).__name__}")


def mul(a, b):
    """Return ``a * b`` for a matrix ``a`` and a matrix or vector ``b``."""
    _check_pair(a, b)
    n = a._DIM
    if isinstance(b, _SquareMatrix):
        return type(a)(*(mul(a, col) for col in b))
    v = _as_vector(a, b)
    return tuple(sum(col[i] * vj for col, vj in zip(a.columns, v)) for i in range(n))


def mul_t(a, b):
    """Return ``transpose(a) * b`` for a matrix ``a`` and a matrix or vector ``b``."""
    _check_pair(a, b)
    if isinstance(b, _SquareMatrix):
        return type(a)(*(tuple(_dot(ac, bc) for ac in a) for bc in b))
    v = _as_vector(a, b)
    return tuple(_dot(col, v) for col in a)