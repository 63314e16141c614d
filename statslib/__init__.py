"""Probability distributions, random variates, estimators and sampling methods."""

__version__ = "1.0.0"
__all__ = ["distributions", "rng", "estimation", "sampling"]