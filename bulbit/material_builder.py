"""Scene container and helpers that build materials from plain values."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

from bulbit.textures import Texture, TexturePool

Spectrum = tuple[float, float, float]
SpectrumLike = Union[float, Sequence[float]]
BLACK: Spectrum = (0.0, 0.0, 0.0)


def _spectrum(value: SpectrumLike) -> Spectrum:
    if isinstance(value, bool):
        raise TypeError("a spectrum cannot be a bool")
    if isinstance(value, (int, float)):
        f = float(value)
        return (f, f, f)
    if isinstance(value, (str, bytes)):
        raise TypeError("a spectrum cannot be a string")
    comps = tuple(float(x) for x in value)
    if len(comps) != 3:
        raise ValueError(f"a spectrum needs 3 components, got {len(comps)}")
    return comps  # type: ignore[return-value]


class Scene:
    """Owns the textures, materials and lights created for a render."""

    def __init__(self) -> None:
        self.textures = TexturePool()
        self._materials: list[Any] = []
        self._lights: list[Any] = []

    @property
    def materials(self) -> tuple:
        return tuple(self._materials)

    @property
    def lights(self) -> tuple:
        return tuple(self._lights)

    def create_material(self, material: Any) -> Any:
        """Add ``material`` to the scene and return it."""
        self._materials.append(material)
        return material

    def create_light(self, light: Any) -> Any:
        """Add ``light`` to the scene and return it."""
        self._lights.append(light)
        return light

    def create_constant_texture(self, value: Any) -> Texture:
        """Return the shared constant texture for ``value``."""
        return self.textures.create_constant(value)

    def create_checker_texture(self, a: Texture, b: Texture, resolution: Any) -> Texture:
        """Return the shared checker texture of ``a`` and ``b``."""
        return self.textures.create_checker(a, b, resolution)


def _spectrum_texture(scene: Scene, value: Union[Texture, SpectrumLike]) -> Texture:
    if isinstance(value, Texture):
        return value
    if isinstance(value, (str, bytes)):
        raise TypeError("image textures are not supported here; pass a Texture")
    return scene.create_constant_texture(_spectrum(value))


def _float_texture(scene: Scene, value: float) -> Texture:
    return scene.create_constant_texture(float(value))


@dataclass(frozen=True)
class DiffuseMaterial:
    reflectance: Texture
    normalmap: Optional[Texture] = None
    alpha: Optional[Texture] = None


@dataclass(frozen=True)
class DielectricMaterial:
    eta: float
    u_roughness: Texture
    v_roughness: Texture
    normalmap: Optional[Texture] = None


@dataclass(frozen=True)
class ConductorMaterial:
    """Conductor given either by ``eta`` and ``k`` or by a ``reflectance``."""

    u_roughness: Texture
    v_roughness: Texture
    eta: Optional[Texture] = None
    k: Optional[Texture] = None
    reflectance: Optional[Texture] = None
    normalmap: Optional[Texture] = None
    alpha: Optional[Texture] = None


@dataclass(frozen=True)
class UnrealMaterial:
    basecolor: Texture
    metallic: Texture
    u_roughness: Texture
    v_roughness: Texture
    emission: Texture
    normalmap: Optional[Texture] = None
    alpha: Optional[Texture] = None


@dataclass(frozen=True)
class SubsurfaceDiffusionMaterial:
    reflectance: Texture
    mfp: Spectrum
    eta: float
    u_roughness: Texture
    v_roughness: Texture
    normalmap: Optional[Texture] = None


@dataclass(frozen=True)
class SubsurfaceRandomWalkMaterial:
    reflectance: Texture
    mfp: Spectrum
    eta: float
    u_roughness: Texture
    v_roughness: Texture
    g: float = 0.0
    normalmap: Optional[Texture] = None


@dataclass(frozen=True)
class MixtureMaterial:
    material1: Any
    material2: Any
    amount: Texture


@dataclass(frozen=True)
class MirrorMaterial:
    reflectance: Texture
    normalmap: Optional[Texture] = None
    alpha: Optional[Texture] = None


@dataclass(frozen=True)
class DiffuseLightMaterial:
    emission: Texture
    two_sided: bool = False
    alpha: Optional[Texture] = None


def create_diffuse_material(
    scene: Scene,
    reflectance: Union[Texture, SpectrumLike],
    normalmap: Optional[Texture] = None,
    alpha: float = 1,
) -> DiffuseMaterial:
    return scene.create_material(
        DiffuseMaterial(_spectrum_texture(scene, reflectance), normalmap, _float_texture(scene, alpha))
    )


def create_dielectric_material(
    scene: Scene, eta: float, roughness: float = 0, normalmap: Optional[Texture] = None
) -> DielectricMaterial:
    r = _float_texture(scene, roughness)
    return scene.create_material(DielectricMaterial(float(eta), r, r, normalmap))


def create_conductor_material(
    scene: Scene,
    eta: SpectrumLike,
    k: SpectrumLike,
    roughness_u: float,
    roughness_v: Optional[float] = None,
    normalmap: Optional[Texture] = None,
    alpha: float = 1,
) -> ConductorMaterial:
    """Conductor from complex index of refraction; ``roughness_v`` defaults to ``roughness_u``."""
    rv = roughness_u if roughness_v is None else roughness_v
    return scene.create_material(
        ConductorMaterial(
            u_roughness=_float_texture(scene, roughness_u),
            v_roughness=_float_texture(scene, rv),
            eta=_spectrum_texture(scene, eta),
            k=_spectrum_texture(scene, k),
            normalmap=normalmap,
            alpha=_float_texture(scene, alpha),
        )
    )


def create_conductor_material_from_reflectance(
    scene: Scene,
    reflectance: SpectrumLike,
    roughness_u: float,
    roughness_v: Optional[float] = None,
    normalmap: Optional[Texture] = None,
    alpha: float = 1,
) -> ConductorMaterial:
    """Conductor from a reflectance colour; ``roughness_v`` defaults to ``roughness_u``."""
    rv = roughness_u if roughness_v is None else roughness_v
    return scene.create_material(
        ConductorMaterial(
            u_roughness=_float_texture(scene, roughness_u),
            v_roughness=_float_texture(scene, rv),
            reflectance=_spectrum_texture(scene, reflectance),
            normalmap=normalmap,
            alpha=_float_texture(scene, alpha),
        )
    )


def create_unreal_material(
    scene: Scene,
    basecolor: SpectrumLike,
    metallic: float,
    u_roughness: float,
    v_roughness: Optional[float] = None,
    emission: SpectrumLike = BLACK,
    normalmap: Optional[Texture] = None,
    alpha: Optional[Texture] = None,
) -> UnrealMaterial:
    """Metallic-roughness material; ``v_roughness`` defaults to ``u_roughness``."""
    rv = u_roughness if v_roughness is None else v_roughness
    return scene.create_material(
        UnrealMaterial(
            _spectrum_texture(scene, basecolor),
            _float_texture(scene, metallic),
            _float_texture(scene, u_roughness),
            _float_texture(scene, rv),
            _spectrum_texture(scene, emission),
            normalmap,
            alpha,
        )
    )


def create_subsurface_diffusion_material(
    scene: Scene,
    reflectance: Union[Texture, SpectrumLike],
    mfp: SpectrumLike,
    eta: float,
    roughness: float,
    normalmap: Optional[Texture] = None,
) -> SubsurfaceDiffusionMaterial:
    r = _float_texture(scene, roughness)
    return scene.create_material(
        SubsurfaceDiffusionMaterial(
            _spectrum_texture(scene, reflectance), _spectrum(mfp), float(eta), r, r, normalmap
        )
    )


def create_subsurface_random_walk_material(
    scene: Scene,
    reflectance: Union[Texture, SpectrumLike],
    mfp: SpectrumLike,
    eta: float,
    roughness: float,
    g: float = 0,
    normalmap: Optional[Texture] = None,
) -> SubsurfaceRandomWalkMaterial:
    r = _float_texture(scene, roughness)
    return scene.create_material(
        SubsurfaceRandomWalkMaterial(
            _spectrum_texture(scene, reflectance), _spectrum(mfp), float(eta), r, r, float(g), normalmap
        )
    )


def create_mixture_material(scene: Scene, material1: Any, material2: Any, amount: float) -> MixtureMaterial:
    return scene.create_material(MixtureMaterial(material1, material2, _float_texture(scene, amount)))


def create_mirror_material(
    scene: Scene, reflectance: SpectrumLike, normalmap: Optional[Texture] = None, alpha: float = 1
) -> MirrorMaterial:
    return scene.create_material(
        MirrorMaterial(_spectrum_texture(scene, reflectance), normalmap, _float_texture(scene, alpha))
    )


def create_diffuse_light_material(
    scene: Scene, emission: SpectrumLike, two_sided: bool = False, alpha: float = 1
) -> DiffuseLightMaterial:
    return scene.create_material(
        DiffuseLightMaterial(_spectrum_texture(scene, emission), bool(two_sided), _float_texture(scene, alpha))
    )


def create_random_unreal_material(scene: Scene, rng: Any = None) -> UnrealMaterial:
    """Create an unreal material with a random colour, metalness and roughness.

    ``rng`` is a ``random.Random``; the module-level generator is used without one.
    """
    gen = random if rng is None else rng
    basecolor = tuple(gen.uniform(0.0, 1.0) * 0.7 for _ in range(3))
    metallic = 1.0 if gen.random() > 0.5 else 0.0
    u_roughness = math.sqrt(gen.uniform(0.1, 1.0))
    v_roughness = math.sqrt(gen.uniform(0.1, 1.0))
    glow = gen.uniform(0.0, 0.3) if gen.random() < 0.08 else 0.0
    emission = tuple(c * glow for c in basecolor)
    return create_unreal_material(scene, basecolor, metallic, u_roughness, v_roughness, emission)