"""Probability density, mass and cumulative distribution functions."""

from __future__ import annotations

import math
from collections.abc import Callable

DEFAULT_STEPS = 10_000

# Slope of the logistic curve used to approximate the standard normal CDF.
_LOGISTIC_NORMAL_SLOPE = -1.65451


def factorial(n: int) -> float:
    """Return n! as a float; non-positive n gives 1.0."""
    return math.prod(range(1, n + 1), start=1.0)


def n_choose_k(n: int, k: int) -> int:
    """Return the binomial coefficient, or 0 when k exceeds n."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    if k > n:
        return 0
    return math.comb(n, k)


def beta_function(a: float, b: float) -> float:
    """Return the beta function B(a, b)."""
    return math.gamma(a) * math.gamma(b) / math.gamma(a + b)


def normal_pdf(x: float, mu: float, sigma: float) -> float:
    """Density of the normal distribution with mean mu and deviation sigma."""
    coefficient = 1.0 / (sigma * math.sqrt(2.0 * math.pi))
    return coefficient * math.exp(-((x - mu) ** 2) / (2.0 * sigma**2))


def normal_cdf(x: float, mu: float, sigma: float) -> float:
    """Logistic approximation of the normal cumulative distribution."""
    z = (x - mu) / sigma
    return 1.0 / (1.0 + math.exp(_LOGISTIC_NORMAL_SLOPE * z))


def poisson_pdf(lam: float, x: int) -> float:
    """Probability of exactly x events for a Poisson rate lam."""
    return math.exp(-lam) * (lam**x / factorial(x))


def poisson_cdf(lam: float, x: int) -> float:
    """Probability of at most x events for a Poisson rate lam."""
    if x < 0:
        raise ValueError("X must be greater than or equal to 0")
    total = sum(lam**i / factorial(i) for i in range(x + 1))
    return total * math.exp(-lam)


def exponential_pdf(beta: float, x: float) -> float:
    """Density of the exponential distribution with scale beta."""
    return (1.0 / beta) * math.exp(-x / beta)


def exponential_cdf(beta: float, x: float) -> float:
    """Cumulative exponential distribution with scale beta."""
    return 1.0 - math.exp(-x / beta)


def beta_pdf(alpha: float, beta: float, x: float) -> float:
    """Density of the beta distribution with shapes alpha and beta."""
    return (1.0 / beta_function(alpha, beta)) * x ** (alpha - 1) * (1 - x) ** (beta - 1)


def gamma_pdf(alpha: float, beta: float, x: float) -> float:
    """Density of the gamma distribution with shape alpha and rate beta."""
    return (beta**alpha / math.gamma(alpha)) * x ** (alpha - 1) * math.exp(-beta * x)


def _midpoint_integral(density: Callable[[float], float], upper: float, steps: int) -> float:
    if steps <= 0:
        raise ValueError("steps must be positive")
    dx = upper / steps
    return sum(density((i + 0.5) * dx) for i in range(steps)) * dx


def beta_cdf(alpha: float, beta: float, x: float, steps: int = DEFAULT_STEPS) -> float:
    """Beta CDF by midpoint integration of the density over [0, x]."""
    return _midpoint_integral(lambda t: beta_pdf(alpha, beta, t), x, steps)


def gamma_cdf(alpha: float, beta: float, x: float, steps: int = DEFAULT_STEPS) -> float:
    """Gamma CDF by midpoint integration of the density over [0, x]."""
    return _midpoint_integral(lambda t: gamma_pdf(alpha, beta, t), x, steps)


def binomial_pdf(p: float, n: int, x: int) -> float:
    """Probability of x successes in n trials with success probability p."""
    if p > 1 or p < 0:
        raise ValueError("p has to be between 0 and 1")
    if x < 0 or n < 0:
        raise ValueError("X and n must be greater than or equal to 0")
    if x > n:
        raise ValueError("X must be less than or equal to N")
    return n_choose_k(n, x) * p**x * (1 - p) ** (n - x)