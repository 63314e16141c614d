"""Maximum-likelihood and method-of-moments parameter estimators."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence

__all__ = [
    "ConvergenceError",
    "mle_normal",
    "mle_exponential",
    "mle_bernoulli",
    "mle_beta",
    "mom_normal",
    "mom_exponential",
    "mom_bernoulli",
    "mom_poisson",
    "mle_generic",
]


class ConvergenceError(RuntimeError):
    """Raised when an iterative estimator runs out of iterations."""


def _as_values(data: Iterable[float]) -> list[float]:
    values = [float(x) for x in data]
    if not values:
        raise ValueError("data must not be empty")
    return values


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _mean_and_variance(data: Iterable[float]) -> tuple[float, float]:
    values = _as_values(data)
    mu = _mean(values)
    variance = sum((x - mu) ** 2 for x in values) / len(values)
    return mu, variance


def _reciprocal_of_mean(data: Iterable[float]) -> float:
    mu = _mean(_as_values(data))
    return 1.0 / mu if mu != 0 else math.inf


def mle_normal(data: Iterable[float]) -> tuple[float, float]:
    """Return the estimated mean and (biased) variance of normal data."""
    return _mean_and_variance(data)


def mle_exponential(data: Iterable[float]) -> float:
    """Return the estimated rate of exponential data."""
    return _reciprocal_of_mean(data)


def mle_bernoulli(data: Iterable[float]) -> float:
    """Return the estimated success probability of 0/1 data."""
    return _mean(_as_values(data))


def mle_beta(data: Iterable[float]) -> tuple[float, float]:
    """Return the sums of x and of 1 - x as alpha and beta estimates."""
    values = _as_values(data)
    alpha = sum(values)
    beta = sum(1.0 - x for x in values)
    return alpha, beta


def mom_normal(data: Iterable[float]) -> tuple[float, float]:
    """Method-of-moments mean and variance of normal data."""
    return _mean_and_variance(data)


def mom_exponential(data: Iterable[float]) -> float:
    """Method-of-moments rate of exponential data."""
    return _reciprocal_of_mean(data)


def mom_bernoulli(data: Iterable[float]) -> float:
    """Method-of-moments success probability of 0/1 data."""
    return _mean(_as_values(data))


def mom_poisson(data: Iterable[float]) -> float:
    """Method-of-moments rate of Poisson data."""
    return _mean(_as_values(data))


def mle_generic(
    log_likelihood: Callable[[list[float]], float],
    data: Iterable[float],
    initial_guesses: Iterable[float],
    tolerance: float,
    max_iterations: int,
) -> list[float]:
    """Maximise a log-likelihood by unit steps along each parameter axis.

    Each round tries moving every parameter by +1 and -1 from the current
    point; the last move that improves on the current point becomes the next
    point. Stops when the log-likelihood changes by less than ``tolerance``.
    ``data`` is accepted for symmetry with the other estimators and unused.
    """
    current = [float(g) for g in initial_guesses]
    current_value = log_likelihood(list(current))

    for _ in range(max_iterations):
        best, best_value = current, current_value
        for index, guess in enumerate(current):
            for step in (1.0, -1.0):
                candidate = list(current)
                candidate[index] = guess + step
                candidate_value = log_likelihood(list(candidate))
                if candidate_value > current_value:
                    best, best_value = candidate, candidate_value

        if abs(best_value - current_value) < tolerance:
            return list(best)

        current, current_value = best, best_value

    raise ConvergenceError("Maximum iterations reached without convergence")