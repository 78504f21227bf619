"""Sampling routines, MIS heuristics, tabulated distributions and reservoir sampling."""

from __future__ import annotations

import bisect
import itertools
import math
import random
from collections.abc import Sequence
from typing import Any, Generic, NamedTuple, Optional, TypeVar

from bulbit.floats import epsilon, inv_four_pi, inv_pi, inv_two_pi, two_pi

Vec3 = tuple[float, float, float]
Point2 = tuple[float, float]

T = TypeVar("T")

_X_AXIS: Vec3 = (1.0, 0.0, 0.0)
_Z_AXIS: Vec3 = (0.0, 0.0, 1.0)


class DiscreteSample(NamedTuple):
    """Index picked from a discrete distribution, its probability and the reusable remainder of ``u``."""

    index: int
    pmf: float
    u_remapped: Optional[float]


class ContinuousSample(NamedTuple):
    """Value drawn from a piecewise-constant distribution, its density and the segment it fell in."""

    value: float
    pdf: float
    offset: int


def _sqr(x: float) -> float:
    return x * x


def _safe_sqrt(x: float) -> float:
    return math.sqrt(max(0.0, x))


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _lerp(a: float, b: float, t: float) -> float:
    return (1 - t) * a + t * b


def _normalize(v: Sequence[float]) -> Vec3:
    length = math.sqrt(sum(x * x for x in v))
    x, y, z = v
    return (x / length, y / length, z / length)


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    ax, ay, az = a
    bx, by, bz = b
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def balance_heuristic(pdf_f: float, pdf_g: float, nf: int = 1, ng: int = 1) -> float:
    """Balance heuristic weight for multiple importance sampling."""
    f = nf * pdf_f
    g = ng * pdf_g
    return f / (f + g)


def power_heuristic(pdf_f: float, pdf_g: float, nf: int = 1, ng: int = 1) -> float:
    """Power heuristic (exponent 2) weight for multiple importance sampling."""
    f = nf * pdf_f
    g = ng * pdf_g
    return (f * f) / (f * f + g * g)


def sample_uniform_hemisphere(u: Point2) -> Vec3:
    """Map ``u`` to a direction uniformly distributed over the hemisphere z >= 0."""
    z = u[0]
    r = math.sqrt(max(0.0, 1 - z * z))
    phi = two_pi * u[1]
    return (r * math.cos(phi), r * math.sin(phi), z)


def uniform_hemisphere_pdf() -> float:
    return inv_two_pi


def sample_uniform_sphere(u: Point2) -> Vec3:
    """Map ``u`` to a direction uniformly distributed over the unit sphere."""
    z = 1 - 2 * u[0]
    r = math.sqrt(max(0.0, 1 - z * z))
    phi = two_pi * u[1]
    return (r * math.cos(phi), r * math.sin(phi), z)


def uniform_sphere_pdf() -> float:
    return inv_four_pi


def sample_cosine_hemisphere(u: Point2) -> Vec3:
    """Map ``u`` to a cosine-weighted direction with z > 0."""
    z = math.sqrt(1 - u[1])
    phi = two_pi * u[0]
    su2 = math.sqrt(u[1])
    return (math.cos(phi) * su2, math.sin(phi) * su2, z)


def cosine_hemisphere_pdf(cos_theta: float) -> float:
    return cos_theta * inv_pi


def sample_inside_unit_sphere(u: Point2) -> Vec3:
    """Map ``u`` to a point on the unit sphere by spherical angles."""
    theta = two_pi * u[0]
    phi = math.acos(2 * u[1] - 1)
    sin_phi = math.sin(phi)
    return (sin_phi * math.cos(theta), sin_phi * math.sin(theta), math.cos(phi))


def sample_uniform_unit_disk_xy(u: Point2) -> Vec3:
    """Map ``u`` to a point uniformly distributed on the unit disk in the xy plane."""
    r = math.sqrt(u[0])
    theta = two_pi * u[1]
    return (r * math.cos(theta), r * math.sin(theta), 0.0)


def sample_exponential(u: float, a: float) -> float:
    return -math.log(1 - u) / a


def exponential_pdf(x: float, a: float) -> float:
    return a * math.exp(-a * x)


def sample_ggx(wo: Vec3, alpha2: float, u: Point2) -> Vec3:
    """Sample a half vector from the GGX normal distribution; ``wo`` is unused."""
    theta = math.acos(math.sqrt((1 - u[0]) / ((alpha2 - 1) * u[0] + 1)))
    phi = two_pi * u[1]
    sin_theta = math.sin(theta)
    return (math.cos(phi) * sin_theta, math.sin(phi) * sin_theta, math.cos(theta))


def sample_vndf_hemisphere(wo: Vec3, u: Point2) -> Vec3:
    """Sample a spherical cap in (-wo.z, 1] and return the unnormalized halfway direction."""
    phi = two_pi * u[0]
    z = (1 - u[1]) * (1 + wo[2]) - wo[2]
    sin_theta = math.sqrt(_clamp(1 - z * z, 0.0, 1.0))
    c = (sin_theta * math.cos(phi), sin_theta * math.sin(phi), z)
    return (c[0] + wo[0], c[1] + wo[1], c[2] + wo[2])


def sample_ggx_vndf_dupuy_benyoub(wo: Vec3, alpha_x: float, alpha_y: float, u: Point2) -> Vec3:
    """Sample a visible GGX normal with the spherical-cap method."""
    wo_std = _normalize((wo[0] * alpha_x, wo[1] * alpha_y, wo[2]))
    wm_std = sample_vndf_hemisphere(wo_std, u)
    return _normalize((wm_std[0] * alpha_x, wm_std[1] * alpha_y, wm_std[2]))


def sample_ggx_vndf_heitz(wo: Vec3, alpha_x: float, alpha_y: float, u: Point2) -> Vec3:
    """Sample a visible GGX normal with the projected-area method."""
    vh = _normalize((alpha_x * wo[0], alpha_y * wo[1], wo[2]))

    t1_axis = _normalize(_cross(vh, _Z_AXIS)) if vh[2] < 0.999 else _X_AXIS
    t2_axis = _cross(t1_axis, vh)

    r = math.sqrt(u[0])
    phi = two_pi * u[1]
    t1 = r * math.cos(phi)
    t2 = r * math.sin(phi)
    s = 0.5 * (1 + vh[2])
    t2 = _lerp(math.sqrt(1 - t1 * t1), t2, s)

    w = math.sqrt(max(0.0, 1 - t1 * t1 - t2 * t2))
    nh = tuple(t1 * a + t2 * b + w * c for a, b, c in zip(t1_axis, t2_axis, vh))

    return _normalize((alpha_x * nh[0], alpha_y * nh[1], max(0.0, nh[2])))


def henyey_greenstein(cos_theta: float, g: float) -> float:
    """Henyey-Greenstein phase function value."""
    denom = 1 + _sqr(g) + 2 * g * cos_theta
    return inv_four_pi * (1 - _sqr(g)) / (denom * _safe_sqrt(denom))


def sample_discrete(weights: Sequence[float], u: float) -> DiscreteSample:
    """Pick an index with probability proportional to its weight.

    An empty sequence gives index -1 with a zero pmf.
    """
    if not weights:
        return DiscreteSample(-1, 0.0, None)

    sum_weights = math.fsum(weights)
    up = u * sum_weights
    if up == sum_weights:
        up -= epsilon

    offset = len(weights) - 1
    acc = 0.0
    for i, w in enumerate(weights):
        if acc + w > up:
            offset = i
            break
        acc += w
    else:
        acc -= weights[-1]

    w = weights[offset]
    pmf = w / sum_weights
    u_remapped = min((up - acc) / w, 1 - epsilon) if w else 0.0
    return DiscreteSample(offset, pmf, u_remapped)


class Distribution1D:
    """Piecewise-constant 1D distribution over [0, 1)."""

    def __init__(self, func: Sequence[float]) -> None:
        self.func = [float(x) for x in func]
        n = len(self.func)
        if n == 0:
            raise ValueError("Distribution1D needs at least one value")
        cdf = list(itertools.accumulate((f / n for f in self.func), initial=0.0))
        self.func_integral = cdf[n]
        if self.func_integral == 0:
            cdf = [i / n for i in range(n + 1)]
        else:
            cdf = [c / self.func_integral for c in cdf]
        self.cdf = cdf

    def __len__(self) -> int:
        return len(self.func)

    @property
    def count(self) -> int:
        return len(self.func)

    def _find_interval(self, u: float) -> int:
        i = bisect.bisect_right(self.cdf, u) - 1
        return int(_clamp(i, 0, len(self.cdf) - 2))

    def _remap(self, u: float, offset: int) -> float:
        width = self.cdf[offset + 1] - self.cdf[offset]
        du = u - self.cdf[offset]
        return du / width if width > 0 else du

    def sample_continuous(self, u: float) -> ContinuousSample:
        """Draw a value in [0, 1) with its density and the segment index."""
        offset = self._find_interval(u)
        pdf = self.func[offset] / self.func_integral if self.func_integral else 0.0
        du = self._remap(u, offset)
        return ContinuousSample((offset + du) / self.count, pdf, offset)

    def sample_discrete(self, u: float) -> DiscreteSample:
        """Pick a segment index with its probability and the remapped ``u``."""
        offset = self._find_interval(u)
        return DiscreteSample(offset, self.discrete_pdf(offset), self._remap(u, offset))

    def discrete_pdf(self, index: int) -> float:
        if self.func_integral == 0:
            return 0.0
        return self.func[index] / (self.func_integral * self.count)


class Distribution2D:
    """Piecewise-constant 2D distribution built from rows of values (one row per v)."""

    def __init__(self, func: Sequence[Sequence[float]]) -> None:
        rows = [list(row) for row in func]
        if not rows:
            raise ValueError("Distribution2D needs at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows of a Distribution2D must have the same length")
        self.conditional_v = [Distribution1D(row) for row in rows]
        self.marginal = Distribution1D([d.func_integral for d in self.conditional_v])

    def sample_continuous(self, u: Point2) -> tuple[Point2, float]:
        """Draw a point in [0, 1)^2 and return it with its density."""
        d1, pdf1, v = self.marginal.sample_continuous(u[1])
        d0, pdf0, _ = self.conditional_v[v].sample_continuous(u[0])
        return (d0, d1), pdf0 * pdf1

    def pdf(self, p: Point2) -> float:
        """Return the density at point ``p``."""
        w = self.conditional_v[0].count
        h = self.marginal.count
        iu = int(_clamp(int(p[0] * w), 0, w - 1))
        iv = int(_clamp(int(p[1] * h), 0, h - 1))
        if self.marginal.func_integral == 0:
            return 0.0
        return self.conditional_v[iv].func[iu] / self.marginal.func_integral


class WeightedReservoirSampler(Generic[T]):
    """Keeps one item from a stream, chosen with probability proportional to its weight."""

    def __init__(self, seed: Any = None) -> None:
        self._rng = random.Random(seed)
        self._reservoir: Optional[T] = None
        self.reservoir_weight = 0.0
        self.weight_sum = 0.0

    def seed(self, seed: Any) -> None:
        self._rng.seed(seed)

    def add(self, sample: T, weight: float) -> bool:
        """Offer a sample; return True if it replaced the kept one."""
        self.weight_sum += weight
        if self._rng.random() < weight / self.weight_sum:
            self._reservoir = sample
            self.reservoir_weight = weight
            return True
        return False

    def has_sample(self) -> bool:
        return self.weight_sum > 0

    @property
    def sample(self) -> Optional[T]:
        return self._reservoir

    def sample_probability(self) -> float:
        """Probability with which the kept sample was chosen."""
        if self.weight_sum == 0:
            raise ValueError("the reservoir holds no sample")
        return self.reservoir_weight / self.weight_sum

    def reset(self) -> None:
        self.reservoir_weight = 0.0
        self.weight_sum = 0.0

    def merge(self, other: WeightedReservoirSampler[T]) -> bool:
        """Fold another reservoir into this one."""
        if other.has_sample() and self.add(other._reservoir, other.weight_sum):  # type: ignore[arg-type]
            self.reservoir_weight = other.reservoir_weight
            return True
        return False