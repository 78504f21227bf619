"""Point, directional and uniform environment lights and helpers that add them to a scene."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from bulbit.material_builder import Scene

Vec3 = tuple[float, float, float]
SpectrumLike = Union[float, Sequence[float]]


def _vec3(value: Sequence[float], what: str) -> Vec3:
    comps = tuple(float(x) for x in value)
    if len(comps) != 3:
        raise ValueError(f"{what} needs 3 components, got {len(comps)}")
    return comps  # type: ignore[return-value]


def _spectrum(value: SpectrumLike) -> Vec3:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        f = float(value)
        return (f, f, f)
    return _vec3(value, "spectrum")


@dataclass(frozen=True)
class PointLight:
    position: Vec3
    intensity: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _vec3(self.position, "position"))
        object.__setattr__(self, "intensity", _spectrum(self.intensity))


@dataclass(frozen=True)
class DirectionalLight:
    direction: Vec3
    intensity: Vec3
    visible_radius: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", _vec3(self.direction, "direction"))
        object.__setattr__(self, "intensity", _spectrum(self.intensity))
        object.__setattr__(self, "visible_radius", float(self.visible_radius))


@dataclass(frozen=True)
class UniformInfiniteLight:
    l: Vec3  # noqa: E741
    scale: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "l", _spectrum(self.l))
        object.__setattr__(self, "scale", float(self.scale))


def create_point_light(scene: Scene, position: Sequence[float], intensity: SpectrumLike) -> PointLight:
    return scene.create_light(PointLight(position, intensity))  # type: ignore[arg-type]


def create_directional_light(
    scene: Scene, direction: Sequence[float], intensity: SpectrumLike, visible_radius: float = 0
) -> DirectionalLight:
    return scene.create_light(DirectionalLight(direction, intensity, visible_radius))  # type: ignore[arg-type]


def create_uniform_infinite_light(scene: Scene, l: SpectrumLike, scale: float = 1) -> UniformInfiniteLight:  # noqa: E741
    return scene.create_light(UniformInfiniteLight(l, scale))  # type: ignore[arg-type]