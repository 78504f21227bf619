"""Rays with an origin and a direction."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

Vec3 = tuple[float, float, float]


def _vec3(v: Iterable[float], what: str) -> Vec3:
    t = tuple(float(x) for x in v)
    if len(t) != 3:
        raise ValueError(f"ray {what} needs 3 components, got {len(t)}")
    return t  # type: ignore[return-value]


@dataclass(frozen=True)
class Ray:
    """A ray ``o + t * d``."""

    o: Vec3
    d: Vec3

    epsilon: ClassVar[float] = 1e-4

    def __post_init__(self) -> None:
        object.__setattr__(self, "o", _vec3(self.o, "origin"))
        object.__setattr__(self, "d", _vec3(self.d, "direction"))

    def at(self, t: float) -> Vec3:
        """Return the point at parameter ``t`` along the ray."""
        ox, oy, oz = self.o
        dx, dy, dz = self.d
        return (ox + dx * t, oy + dy * t, oz + dz * t)