"""Seeded pseudo-random generator with samplers for common distributions."""

from __future__ import annotations

import math
import random
import secrets

_MT_MAX = 0xFFFFFFFF
_MT_STATE_SIZE = 624


def _mt19937_state(seed: int) -> tuple[int, ...]:
    """Internal state of a Mersenne Twister initialised from a 32-bit seed."""
    state = [seed]
    for i in range(1, _MT_STATE_SIZE):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MT_MAX)
    return (*state, _MT_STATE_SIZE)


def _radius(u: float) -> float:
    return math.sqrt(-2.0 * math.log(u)) if u > 0 else math.inf


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class RNG:
    """Random numbers from a 32-bit Mersenne Twister seeded with one integer."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = secrets.randbits(32)
        self._mt = random.Random()
        self._mt.setstate((self._mt.VERSION, _mt19937_state(seed & _MT_MAX), None))

    def _unit(self) -> float:
        return self._mt.getrandbits(32) / _MT_MAX

    def uniform_real(self, a: float = 0.0, b: float = 1.0) -> float:
        """Uniform number between a and b."""
        if a > b:
            raise ValueError("A must be less than b")
        return self._unit() * (b - a) + a

    def uniform_int(self, a: int, b: int) -> int:
        """Uniform integer in [a, b]."""
        return int(self.uniform_real(a, b + 1))

    def bernoulli(self, p: float) -> bool:
        """True with probability p."""
        if p < 0 or p > 1:
            raise ValueError("Probability must be between 0 and 1")
        return self._unit() < p

    def _standard_normal(self) -> float:
        u1 = self._unit()
        u2 = self._unit()
        return _radius(u1) * math.cos(2.0 * math.pi * u2)

    def normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        """Normal variate by the Box-Muller transform."""
        return mu + sigma * self._standard_normal()

    def exponential(self, lam: float) -> float:
        """Exponential variate with rate lam."""
        if lam <= 0:
            raise ValueError("Lambda must be positive")
        u = self._unit()
        remaining = 1.0 - u
        return (-math.log(remaining) if remaining > 0 else math.inf) / lam

    def poisson(self, lam: float) -> int:
        """Poisson variate; a normal approximation is used for lam >= 30."""
        if lam <= 0:
            raise ValueError("Lambda must be positive")
        if lam < 30:
            limit = math.exp(-lam)
            product = 1.0
            k = 0
            while True:
                k += 1
                product *= self._unit()
                if product <= limit:
                    return k - 1
        z = self._standard_normal()
        return int(max(0.0, _round_half_away(lam + math.sqrt(lam) * z)))

    def binomial(self, n: int, p: float) -> int:
        """Number of successes in n Bernoulli trials."""
        if p < 0 or p > 1:
            raise ValueError("Probability must be between 0 and 1")
        if n < 0:
            raise ValueError("Number of trials must be non-negative")
        return sum(self.bernoulli(p) for _ in range(n))