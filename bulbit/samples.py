"""Named scene set-ups that build a scene and return its camera."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any


class SampleNotFoundError(KeyError):
    """Raised when no sample is registered under a name."""


SampleFunc = Callable[[Any], Any]


class SampleRegistry:
    """Maps sample names to functions that fill a scene and return a camera."""

    def __init__(self) -> None:
        self._samples: dict[str, SampleFunc] = {}
        self.count = 0

    def register(self, name: str, func: SampleFunc) -> int:
        """Register ``func`` under ``name`` and return the number of registrations.

        A name that is already taken keeps its first function.
        """
        self._samples.setdefault(name, func)
        self.count += 1
        return self.count

    def get(self, name: str, scene: Any) -> Any:
        """Build sample ``name`` into ``scene`` and return its camera."""
        try:
            func = self._samples[name]
        except KeyError:
            raise SampleNotFoundError(name) from None
        return func(scene)

    def __contains__(self, name: object) -> bool:
        return name in self._samples

    def __iter__(self) -> Iterator[str]:
        return iter(self._samples)

    def __len__(self) -> int:
        return len(self._samples)


registry = SampleRegistry()