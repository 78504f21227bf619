import math

import pytest

from bulbit.floats import inv_four_pi, inv_pi, inv_two_pi
from bulbit.sampling import (
    Distribution1D,
    Distribution2D,
    WeightedReservoirSampler,
    balance_heuristic,
    cosine_hemisphere_pdf,
    exponential_pdf,
    henyey_greenstein,
    power_heuristic,
    sample_cosine_hemisphere,
    sample_discrete,
    sample_exponential,
    sample_ggx,
    sample_ggx_vndf_dupuy_benyoub,
    sample_ggx_vndf_heitz,
    sample_inside_unit_sphere,
    sample_uniform_hemisphere,
    sample_uniform_sphere,
    sample_uniform_unit_disk_xy,
    sample_vndf_hemisphere,
    uniform_hemisphere_pdf,
    uniform_sphere_pdf,
)

GRID = [(a / 7 + 0.03, b / 5 + 0.07) for a in range(7) for b in range(5)]


def _length(v):
    return math.sqrt(sum(x * x for x in v))


@pytest.mark.parametrize("f,g", [(0.2, 0.8), (1.0, 3.0), (5.0, 0.5)])
def test_heuristics_are_complementary(f, g):
    assert balance_heuristic(f, g) + balance_heuristic(g, f) == pytest.approx(1.0)
    assert power_heuristic(f, g) + power_heuristic(g, f) == pytest.approx(1.0)
    assert balance_heuristic(f, g, 2, 3) + balance_heuristic(g, f, 3, 2) == pytest.approx(1.0)
    assert power_heuristic(f, g, 2, 3) + power_heuristic(g, f, 3, 2) == pytest.approx(1.0)


def test_equal_pdfs_share_weight_evenly():
    assert balance_heuristic(0.7, 0.7) == pytest.approx(power_heuristic(0.7, 0.7))
    assert balance_heuristic(0.7, 0.7) == pytest.approx(balance_heuristic(0.3, 0.3))


def test_power_heuristic_favours_larger_pdf_more():
    assert power_heuristic(3.0, 1.0) > balance_heuristic(3.0, 1.0)


@pytest.mark.parametrize("u", GRID)
def test_direction_samplers_give_unit_vectors(u):
    for v in (
        sample_uniform_hemisphere(u),
        sample_uniform_sphere(u),
        sample_cosine_hemisphere(u),
        sample_inside_unit_sphere(u),
    ):
        assert _length(v) == pytest.approx(1.0)
    assert sample_uniform_hemisphere(u)[2] >= 0
    assert sample_cosine_hemisphere(u)[2] > 0


@pytest.mark.parametrize("u", GRID)
def test_disk_sample_in_unit_disk(u):
    x, y, z = sample_uniform_unit_disk_xy(u)
    assert z == 0
    assert math.hypot(x, y) <= 1.0


def test_pdf_constants():
    assert uniform_hemisphere_pdf() == inv_two_pi
    assert uniform_sphere_pdf() == inv_four_pi
    assert cosine_hemisphere_pdf(1.0) == pytest.approx(inv_pi)


@pytest.mark.parametrize("u,a", [(0.1, 1.0), (0.5, 2.0), (0.9, 0.3)])
def test_exponential_sample_matches_pdf(u, a):
    x = sample_exponential(u, a)
    assert x >= 0
    assert exponential_pdf(x, a) == pytest.approx(a * (1 - u))


@pytest.mark.parametrize("u", GRID)
def test_ggx_samples_upper_hemisphere(u):
    h = sample_ggx((0.0, 0.0, 1.0), 0.25, u)
    assert _length(h) == pytest.approx(1.0)
    assert h[2] >= 0


@pytest.mark.parametrize("u", GRID)
def test_vndf_samplers(u):
    wo = (0.3, -0.2, math.sqrt(1 - 0.13))
    for h in (
        sample_ggx_vndf_dupuy_benyoub(wo, 0.3, 0.6, u),
        sample_ggx_vndf_heitz(wo, 0.3, 0.6, u),
    ):
        assert _length(h) == pytest.approx(1.0)
        assert h[2] >= 0


def test_vndf_hemisphere_with_alpha_one_is_half_vector():
    wo = (0.0, 0.0, 1.0)
    h = sample_vndf_hemisphere(wo, (0.25, 0.4))
    # The cap sample is on the unit sphere, so h - wo has unit length.
    assert _length((h[0] - wo[0], h[1] - wo[1], h[2] - wo[2])) == pytest.approx(1.0)


def test_henyey_greenstein_isotropic():
    assert henyey_greenstein(0.3, 0.0) == pytest.approx(inv_four_pi)


@pytest.mark.parametrize("g", [-0.7, 0.0, 0.4, 0.85])
def test_henyey_greenstein_normalized(g):
    n = 4000
    total = sum(henyey_greenstein(-1 + (i + 0.5) * 2 / n, g) for i in range(n)) * (2 / n) * 2 * math.pi
    assert total == pytest.approx(1.0, rel=1e-3)


def test_sample_discrete_empty():
    result = sample_discrete([], 0.5)
    assert result.index == -1
    assert result.pmf == 0


def test_sample_discrete_picks_by_weight():
    weights = [1.0, 3.0]
    first = sample_discrete(weights, 0.1)
    second = sample_discrete(weights, 0.6)
    assert first.index == 0
    assert second.index == 1
    assert first.pmf + second.pmf == pytest.approx(1.0)
    assert 0 <= first.u_remapped < 1
    assert 0 <= second.u_remapped < 1


def test_sample_discrete_top_end_stays_in_range():
    result = sample_discrete([2.0, 5.0, 1.0], 1.0)
    assert result.index == 2
    assert result.u_remapped < 1


def test_distribution1d_discrete_pdfs_sum_to_one():
    d = Distribution1D([1.0, 0.0, 2.0, 5.0])
    assert len(d) == 4
    assert sum(d.discrete_pdf(i) for i in range(len(d))) == pytest.approx(1.0)
    assert d.cdf[0] == 0
    assert d.cdf[-1] == pytest.approx(1.0)
    assert all(a <= b for a, b in zip(d.cdf, d.cdf[1:]))


def test_distribution1d_never_samples_zero_segment():
    d = Distribution1D([1.0, 0.0, 2.0, 5.0])
    for i in range(100):
        s = d.sample_continuous((i + 0.5) / 100)
        assert s.offset != 1
        assert 0 <= s.value < 1
        assert s.pdf > 0
        assert d.sample_discrete((i + 0.5) / 100).index != 1


def test_distribution1d_uniform_is_identity():
    d = Distribution1D([3.0, 3.0, 3.0])
    for u in (0.05, 0.4, 0.77):
        s = d.sample_continuous(u)
        assert s.value == pytest.approx(u)
        assert s.pdf == pytest.approx(1.0)


def test_distribution1d_all_zero_falls_back_to_uniform_cdf():
    d = Distribution1D([0.0, 0.0])
    assert d.cdf[1] == pytest.approx(0.5)


def test_distribution1d_empty_raises():
    with pytest.raises(ValueError):
        Distribution1D([])


def test_distribution2d_pdf_matches_sample():
    func = [[1.0, 2.0, 3.0], [0.5, 0.5, 4.0]]
    d = Distribution2D(func)
    for u in GRID:
        p, pdf = d.sample_continuous(u)
        assert 0 <= p[0] < 1 and 0 <= p[1] < 1
        assert d.pdf(p) == pytest.approx(pdf)


def test_distribution2d_ragged_rows_raise():
    with pytest.raises(ValueError):
        Distribution2D([[1.0, 2.0], [1.0]])


def test_reservoir_single_sample():
    r = WeightedReservoirSampler(1)
    assert not r.has_sample()
    assert r.add("a", 2.0)
    assert r.has_sample()
    assert r.sample == "a"
    assert r.sample_probability() == pytest.approx(1.0)
    r.reset()
    assert not r.has_sample()
    with pytest.raises(ValueError):
        r.sample_probability()


def test_reservoir_weight_sum_and_probability():
    r = WeightedReservoirSampler(42)
    for name, w in [("a", 1.0), ("b", 2.0), ("c", 3.0)]:
        r.add(name, w)
    assert r.weight_sum == pytest.approx(6.0)
    weights = {"a": 1.0, "b": 2.0, "c": 3.0}
    assert r.sample_probability() == pytest.approx(weights[r.sample] / 6.0)


def test_reservoir_zero_weight_never_chosen_after_positive():
    r = WeightedReservoirSampler(3)
    r.add("x", 1.0)
    assert not r.add("y", 0.0)
    assert r.sample == "x"


def test_reservoir_merge_into_empty():
    a = WeightedReservoirSampler(5)
    b = WeightedReservoirSampler(6)
    b.add("q", 2.0)
    assert a.merge(b)
    assert a.sample == "q"
    assert a.weight_sum == pytest.approx(b.weight_sum)
    assert a.reservoir_weight == b.reservoir_weight
    assert not a.merge(WeightedReservoirSampler(7))


def test_reservoir_seed_is_reproducible():
    def run(r):
        for i in range(20):
            r.add(i, 1.0)
        return r.sample

    first = WeightedReservoirSampler(0)
    second = WeightedReservoirSampler(99)
    second.seed(0)
    assert run(first) == run(second)