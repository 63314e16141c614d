"""Sampling by CDF inversion, rejection and Metropolis-Hastings."""

from __future__ import annotations

import math
from collections.abc import Callable

from statslib.rng import RNG

__all__ = ["invert_cdf", "rejection_sampling", "metropolis_hastings"]

_INVERSION_STEP = 0.001


def invert_cdf(cdf: Callable[[float], float], u: float) -> float:
    """Scan upward from 0 in steps of 0.001 until the CDF reaches u."""
    x = 0.0
    y = 0.0
    while y < u:
        y = cdf(x)
        x += _INVERSION_STEP
    return x


def rejection_sampling(
    target_pdf: Callable[[float], float],
    proposal_sample: Callable[[], float],
    proposal_pdf: Callable[[float], float],
    c: float,
    rng: RNG | None = None,
) -> float:
    """Draw one sample, accepting a proposal x when u <= f(x) * c / g(x)."""
    if c <= 1.0:
        raise ValueError("c must be greater than 1.0")
    if rng is None:
        rng = RNG()
    while True:
        x = proposal_sample()
        u = rng.uniform_real(0.0, 1.0)
        if u <= target_pdf(x) * c / proposal_pdf(x):
            return x


def _acceptance(target_pdf: Callable[[float], float], current: float, proposed: float) -> float:
    current_density = target_pdf(current)
    proposed_density = target_pdf(proposed)
    if current_density == 0:
        return 1.0
    return min(1.0, proposed_density / current_density)


def metropolis_hastings(
    n_samples: int,
    target_pdf: Callable[[float], float],
    kernel: Callable[[float], float],
    burn_in: float,
    x0: float,
    rng: RNG | None = None,
) -> list[float]:
    """Run a Metropolis chain and return the states after the burn-in."""
    if rng is None:
        rng = RNG()
    samples: list[float] = []
    x = x0
    total = n_samples + burn_in
    for i in range(max(0, math.ceil(total))):
        u = rng.uniform_real(0.0, 1.0)
        y = kernel(x)
        if u <= _acceptance(target_pdf, x, y):
            x = y
        if i >= burn_in:
            samples.append(x)
    return samples