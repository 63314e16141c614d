import math

import pytest

from statslib.rng import RNG
from statslib.sampling import invert_cdf, metropolis_hastings, rejection_sampling


def _target_pdf(x):
    return math.exp(-x)


def test_invert_cdf_square():
    def cdf(x):
        return x * x

    sample = invert_cdf(cdf, 0.5)
    assert abs(cdf(sample) - 0.5) < 0.1


def test_invert_cdf_identity():
    sample = invert_cdf(lambda x: x, 0.5)
    assert sample == pytest.approx(0.5, abs=0.01)


def test_invert_cdf_zero_returns_origin():
    assert invert_cdf(lambda x: x, 0.0) == 0.0


def test_rejection_sampling_non_negative():
    proposal_rng = RNG(7)
    sample = rejection_sampling(
        _target_pdf,
        lambda: proposal_rng.uniform_real(0, 10),
        lambda x: 0.1,
        2.0,
        RNG(42),
    )
    assert 0.0 <= sample <= 10.0


def test_rejection_sampling_accepts_when_ratio_high():
    proposals = iter([3.5, 9.0])
    sample = rejection_sampling(lambda x: 10.0, lambda: next(proposals), lambda x: 1.0, 2.0, RNG(1))
    assert sample == 3.5


def test_rejection_sampling_skips_zero_density():
    proposals = iter([-1.0, -2.0, 4.0])

    def target(x):
        return 0.0 if x < 0 else 10.0

    sample = rejection_sampling(target, lambda: next(proposals), lambda x: 1.0, 2.0, RNG(3))
    assert sample == 4.0


@pytest.mark.parametrize("c", [1.0, 0.5, -2.0])
def test_rejection_sampling_rejects_small_c(c):
    with pytest.raises(ValueError):
        rejection_sampling(_target_pdf, lambda: 1.0, lambda x: 0.1, c)


def test_metropolis_hastings_sample_count():
    kernel_rng = RNG(5)
    samples = metropolis_hastings(
        1000,
        _target_pdf,
        lambda x: x + kernel_rng.normal(0, 1),
        100,
        0.0,
        RNG(42),
    )
    assert len(samples) == 1000


def test_metropolis_hastings_always_accepts_uphill():
    samples = metropolis_hastings(5, lambda x: x + 1.0, lambda x: x + 1.0, 0, 0.0, RNG(11))
    assert samples == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_metropolis_hastings_discards_burn_in():
    samples = metropolis_hastings(3, lambda x: x + 1.0, lambda x: x + 1.0, 2, 0.0, RNG(11))
    assert samples == [3.0, 4.0, 5.0]


def test_metropolis_hastings_stays_when_proposal_impossible():
    def target(x):
        return 1.0 if x == 0.0 else 0.0

    samples = metropolis_hastings(10, target, lambda x: x + 1.0, 0, 0.0, RNG(2))
    assert samples == [0.0] * 10


def test_metropolis_hastings_is_reproducible_with_seed():
    def run():
        kernel_rng = RNG(9)
        return metropolis_hastings(50, _target_pdf, lambda x: x + kernel_rng.normal(), 10, 1.0, RNG(4))

    first = run()
    second = run()
    assert len(first) == 50
    assert len(second) == 50
    assert all(a == b for a, b in zip(first, second))