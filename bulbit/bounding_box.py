"""Axis-aligned bounding boxes in two and three dimensions."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar, Union

from bulbit.floats import infinity, max_float
from bulbit.ray import Ray

_B = TypeVar("_B", bound="_BoundingBox")


def _inverse(d: float) -> float:
    """Return ``1 / d``, giving a signed infinity for a zero component."""
    if d == 0:
        return math.copysign(infinity, d)
    return 1 / d


@dataclass(frozen=True)
class _BoundingBox:
    """Storage shared by the 2D and 3D boxes; ``min`` and ``max`` are corners."""

    min: Any = None
    max: Any = None

    _DIM: ClassVar[int] = 0

    def __post_init__(self) -> None:
        n = self._DIM
        lo = (max_float,) * n if self.min is None else tuple(self.min)
        hi = (-max_float,) * n if self.max is None else tuple(self.max)
        if len(lo) != n or len(hi) != n:
            raise ValueError(f"{type(self).__name__} corners need {n} components")
        object.__setattr__(self, "min", lo)
        object.__setattr__(self, "max", hi)

    def __getitem__(self, i: int) -> tuple:
        if i == 0:
            return self.min
        if i == 1:
            return self.max
        raise IndexError(f"bounding box corner index must be 0 or 1, got {i}")


def _center(box: _BoundingBox) -> tuple:
    return tuple((a + b) * 0.5 for a, b in zip(box.min, box.max))


def _extents(box: _BoundingBox) -> tuple:
    return tuple(b - a for a, b in zip(box.min, box.max))


def _contains(box: _BoundingBox, other: _BoundingBox) -> bool:
    return all(a <= b for a, b in zip(box.min, other.min)) and all(
        a >= b for a, b in zip(box.max, other.max)
    )


def _test_point(box: _BoundingBox, point: Sequence[float]) -> bool:
    return all(lo <= p <= hi for lo, p, hi in zip(box.min, point, box.max))


def _test_overlap(box: _BoundingBox, other: _BoundingBox) -> bool:
    return all(
        not (lo > ohi or hi < olo)
        for lo, hi, olo, ohi in zip(box.min, box.max, other.min, other.max)
    )


def _slabs(box: _BoundingBox, ray: Ray, t_min: float, t_max: float) -> Union[float, None]:
    for axis in range(box._DIM):
        inv_d = _inverse(ray.d[axis])
        origin = ray.o[axis]
        t0 = (box.min[axis] - origin) * inv_d
        t1 = (box.max[axis] - origin) * inv_d
        if inv_d < 0:
            t0, t1 = t1, t0
        t_min = t0 if t0 > t_min else t_min
        t_max = t1 if t1 < t_max else t_max
        if t_max <= t_min:
            return None
    return t_min


def _test_ray_precomputed(
    box: _BoundingBox,
    o: Sequence[float],
    t_min: float,
    t_max: float,
    inv_dir: Sequence[float],
    is_neg_dir: Sequence[int],
) -> bool:
    for axis in range(box._DIM):
        near = (box[is_neg_dir[axis]][axis] - o[axis]) * inv_dir[axis]
        far = (box[1 - is_neg_dir[axis]][axis] - o[axis]) * inv_dir[axis]
        if t_min > far or t_max < near:
            return False
        if near > t_min:
            t_min = near
        if far < t_max:
            t_max = far
    return True


def _intersect(box: _BoundingBox, ray: Ray, t_min: float, t_max: float) -> float:
    t = _slabs(box, ray, t_min, t_max)
    return infinity if t is None else t


def _bounding_ball(box: _BoundingBox) -> tuple[tuple, float]:
    c = _center(box)
    radius = math.dist(c, box.max) if _test_point(box, c) else 0
    return c, radius


def _union(a: _B, b: Union[_B, Sequence[float]]) -> _B:
    if isinstance(b, _BoundingBox):
        if type(b) is not type(a):
            raise TypeError(f"cannot unite {type(a).__name__} with {type(b).__name__}")
        lo_b, hi_b = b.min, b.max
    else:
        lo_b = hi_b = tuple(b)
        if len(lo_b) != a._DIM:
            raise ValueError(f"{type(a).__name__} needs a point of {a._DIM} components")
    lo = tuple(min(x, y) for x, y in zip(a.min, lo_b))
    hi = tuple(max(x, y) for x, y in zip(a.max, hi_b))
    return type(a)(lo, hi)


@dataclass(frozen=True)
class BoundingBox2(_BoundingBox):
    """A 2D axis-aligned box; an empty box by default."""

    _DIM: ClassVar[int] = 2

    def center(self) -> tuple:
        """Return the midpoint of the box."""
        return _center(self)

    def extents(self) -> tuple:
        """Return the size of the box along each axis."""
        return _extents(self)

    def surface_area(self) -> float:
        """Return the area of the box."""
        return (self.max[0] - self.min[0]) * (self.max[1] - self.min[1])

    def perimeter(self) -> float:
        """Return the perimeter of the box."""
        wx, wy = self.extents()
        return 2 * (wx + wy)

    def contains(self, other: BoundingBox2) -> bool:
        """Return True if ``other`` lies entirely inside this box."""
        return _contains(self, other)

    def test_point(self, point: Sequence[float]) -> bool:
        """Return True if ``point`` lies inside or on the box."""
        return _test_point(self, point)

    def test_overlap(self, other: BoundingBox2) -> bool:
        """Return True if the two boxes overlap or touch."""
        return _test_overlap(self, other)

    def test_ray(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Return True if the ray hits the box within ``(t_min, t_max)``."""
        return _slabs(self, ray, t_min, t_max) is not None

    def test_ray_precomputed(
        self,
        o: Sequence[float],
        t_min: float,
        t_max: float,
        inv_dir: Sequence[float],
        is_neg_dir: Sequence[int],
    ) -> bool:
        """Slab test with a precomputed inverse direction and direction signs."""
        return _test_ray_precomputed(self, o, t_min, t_max, inv_dir, is_neg_dir)

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> float:
        """Return the entry distance of the ray, or infinity on a miss."""
        return _intersect(self, ray, t_min, t_max)

    def bounding_circle(self) -> tuple[tuple, float]:
        """Return the center and radius of a circle enclosing the box."""
        return _bounding_ball(self)

    @staticmethod
    def union(a: BoundingBox2, b: Union[BoundingBox2, Sequence[float]]) -> BoundingBox2:
        """Return the box enclosing ``a`` and a box or point ``b``."""
        return _union(a, b)


@dataclass(frozen=True)
class BoundingBox3(_BoundingBox):
    """A 3D axis-aligned box; an empty box by default."""

    _DIM: ClassVar[int] = 3

    def center(self) -> tuple:
        """Return the midpoint of the box."""
        return _center(self)

    def extents(self) -> tuple:
        """Return the size of the box along each axis."""
        return _extents(self)

    def volume(self) -> float:
        """Return the volume of the box."""
        wx, wy, wz = self.extents()
        return wx * wy * wz

    def surface_area(self) -> float:
        """Return the total area of the six faces."""
        wx, wy, wz = self.extents()
        return 2 * (wx * wy + wy * wz + wz * wx)

    def contains(self, other: BoundingBox3) -> bool:
        """Return True if ``other`` lies entirely inside this box."""
        return _contains(self, other)

    def test_point(self, point: Sequence[float]) -> bool:
        """Return True if ``point`` lies inside or on the box."""
        return _test_point(self, point)

    def test_overlap(self, other: BoundingBox3) -> bool:
        """Return True if the two boxes overlap or touch."""
        return _test_overlap(self, other)

    def test_ray(self, ray: Ray, t_min: float, t_max: float) -> bool:
        """Return True if the ray hits the box within ``(t_min, t_max)``."""
        return _slabs(self, ray, t_min, t_max) is not None

    def test_ray_precomputed(
        self,
        o: Sequence[float],
        t_min: float,
        t_max: float,
        inv_dir: Sequence[float],
        is_neg_dir: Sequence[int],
    ) -> bool:
        """Slab test with a precomputed inverse direction and direction signs."""
        return _test_ray_precomputed(self, o, t_min, t_max, inv_dir, is_neg_dir)

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> float:
        """Return the entry distance of the ray, or infinity on a miss."""
        return _intersect(self, ray, t_min, t_max)

    def bounding_sphere(self) -> tuple[tuple, float]:
        """Return the center and radius of a sphere enclosing the box."""
        return _bounding_ball(self)

    @staticmethod
    def union(a: BoundingBox3, b: Union[BoundingBox3, Sequence[float]]) -> BoundingBox3:
        """Return the box enclosing ``a`` and a box or point ``b``."""
        return _union(a, b)


def iter_points(box: _BoundingBox) -> Iterator[tuple[int, ...]]:
    """Yield the integer points of ``[min, max)``, x varying fastest."""
    for value in (*box.min, *box.max):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("iter_points needs a box with integer corners")
    if any(lo >= hi for lo, hi in zip(box.min, box.max)):
        return
    ranges = [range(lo, hi) for lo, hi in zip(box.min, box.max)]
    for p in itertools.product(*reversed(ranges)):
        yield tuple(reversed(p))