"""Constant and checkerboard textures and a pool that shares identical ones."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
Point2 = tuple[float, float]


def _freeze(value: Any) -> Any:
    """Turn a scalar or spectrum value into a hashable canonical form."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return tuple(float(x) for x in value)
    return value


def _point2(resolution: Union[float, Sequence[float]]) -> Point2:
    if isinstance(resolution, (int, float)):
        return (float(resolution), float(resolution))
    rx, ry = resolution
    return (float(rx), float(ry))


class Texture(ABC, Generic[T]):
    """A value that varies over texture coordinates."""

    @abstractmethod
    def evaluate(self, uv: Point2) -> T:
        """Return the texture value at ``uv``."""


class ConstantTexture(Texture[T]):
    """A texture with the same value everywhere."""

    def __init__(self, value: T) -> None:
        self.value = value

    def evaluate(self, uv: Point2) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantTexture({self.value!r})"


class CheckerTexture(Texture[T]):
    """Alternates between two textures on a grid of ``resolution`` cells."""

    def __init__(self, a: Texture[T], b: Texture[T], resolution: Union[float, Sequence[float]]) -> None:
        self.a = a
        self.b = b
        self.resolution = _point2(resolution)

    def evaluate(self, uv: Point2) -> T:
        cx = int(uv[0] * self.resolution[0])
        cy = int(uv[1] * self.resolution[1])
        if (cx + cy) % 2:
            return self.a.evaluate(uv)
        return self.b.evaluate(uv)


class TexturePool:
    """Creates textures and hands back the same object for identical requests."""

    def __init__(self) -> None:
        self._constants: dict[Any, ConstantTexture] = {}
        self._checkers: dict[tuple, CheckerTexture] = {}

    def __len__(self) -> int:
        return len(self._constants) + len(self._checkers)

    def create_constant(self, value: Any) -> ConstantTexture:
        """Return the constant texture for ``value``, creating it on first use."""
        key = _freeze(value)
        texture = self._constants.get(key)
        if texture is None:
            texture = ConstantTexture(key)
            self._constants[key] = texture
        return texture

    def create_checker(
        self, a: Texture, b: Texture, resolution: Union[float, Sequence[float]]
    ) -> CheckerTexture:
        """Return the checker texture of ``a``, ``b`` and ``resolution``, creating it on first use."""
        res = _point2(resolution)
        key = (id(a), id(b), res)
        texture = self._checkers.get(key)
        if texture is None:
            texture = CheckerTexture(a, b, res)
            self._checkers[key] = texture
        return texture

    def clear(self) -> None:
        """Forget every texture created so far."""
        self._constants.clear()
        self._checkers.clear()