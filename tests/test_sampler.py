import random

import pytest

from bulbit.sampler import Sampler


class RandomSampler(Sampler):
    def __init__(self, spp, seed=0):
        super().__init__(spp)
        self.seed = seed
        self._key = None
        self._random = None

    def _rng(self):
        key = (self.current_pixel, self.current_sample_index, self.seed)
        if key != self._key:
            self._key = key
            self._random = random.Random(repr(key))
        return self._random

    def next_1d(self):
        return self._rng().random()

    def next_2d(self):
        rng = self._rng()
        return (rng.random(), rng.random())

    def clone(self):
        return RandomSampler(self.samples_per_pixel, self.seed)


def test_abstract_sampler_cannot_be_created():
    with pytest.raises(TypeError):
        Sampler(4)


def test_start_pixel_sample_records_state():
    s = RandomSampler(16)
    Sampler.start_pixel_sample(s, (3, 7), 5)
    assert s.current_pixel == (3, 7)
    assert s.current_sample_index == 5
    assert s.samples_per_pixel == 16


def test_samples_per_pixel_is_read_only():
    s = RandomSampler(8)
    Sampler.start_pixel_sample(s, (0, 0), 0)
    with pytest.raises(AttributeError):
        s.samples_per_pixel = 2
    assert s.samples_per_pixel == 8


def test_clone_is_independent_and_reproducible():
    s = RandomSampler(8, seed=3)
    c = s.clone()
    assert c is not s
    assert c.samples_per_pixel == s.samples_per_pixel
    Sampler.start_pixel_sample(s, (1, 2), 0)
    Sampler.start_pixel_sample(c, (1, 2), 0)
    assert s.next_2d() == c.next_2d()
    assert 0 <= s.next_1d() < 1