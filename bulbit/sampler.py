"""Base class for per-pixel sample generators."""

from __future__ import annotations

from abc import ABC, abstractmethod

Point2 = tuple[float, float]
Point2i = tuple[int, int]


class Sampler(ABC):
    """Produces sample values for one pixel sample at a time."""

    def __init__(self, samples_per_pixel: int) -> None:
        self._samples_per_pixel = samples_per_pixel
        self.current_pixel: Point2i = (0, 0)
        self.current_sample_index = 0

    @property
    def samples_per_pixel(self) -> int:
        return self._samples_per_pixel

    def start_pixel_sample(self, pixel: Point2i, sample_index: int) -> None:
        """Begin generating values for ``sample_index`` of ``pixel``."""
        px, py = pixel
        self.current_pixel = (px, py)
        self.current_sample_index = sample_index

    @abstractmethod
    def next_1d(self) -> float:
        """Return the next value in [0, 1)."""

    @abstractmethod
    def next_2d(self) -> Point2:
        """Return the next point in [0, 1)^2."""

    @abstractmethod
    def clone(self) -> Sampler:
        """Return an independent copy of this sampler."""