# statslib

statslib is a small statistics toolkit with no dependencies. It has four modules:

- **`statslib.distributions`** holds density, mass and cumulative distribution
  functions for the normal, Poisson, exponential, beta, gamma and binomial
  distributions. It also has `factorial`, `n_choose_k` and `beta_function`.
- **`statslib.rng`** holds the `RNG` class. It is a seedable 32-bit Mersenne
  Twister that draws uniform reals and integers, and Bernoulli, normal,
  exponential, Poisson and binomial variates.
- **`statslib.estimation`** holds maximum-likelihood and method-of-moments
  estimators. It also has `mle_generic`, a coordinate hill-climber for any
  log-likelihood.
- **`statslib.sampling`** holds inverse-CDF scanning, rejection sampling and
  Metropolis–Hastings.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Distributions

```python
from statslib.distributions import (
    normal_pdf, normal_cdf, poisson_cdf, binomial_pdf, beta_cdf, gamma_cdf,
)

normal_pdf(0.0, 0.0, 1.0)           # 0.3989...
normal_cdf(1.0, 0.0, 1.0)           # ~0.84, logistic approximation
poisson_cdf(2.0, 1)                 # 0.4060...
binomial_pdf(0.5, 5, 2)             # 0.3125
beta_cdf(2.0, 2.0, 0.5)             # ~0.5
gamma_cdf(2.0, 1.0, 1.0, 10_000)    # ~0.2642
```

Each function takes its arguments in a fixed order:

- `normal_pdf` and `normal_cdf` take `(x, mu, sigma)`.
- `poisson_pdf` and `poisson_cdf` take `(lam, x)`.
- `exponential_pdf` and `exponential_cdf` take `(beta, x)`, where `beta` is a scale.
- `beta_pdf` takes `(alpha, beta, x)`.
- `gamma_pdf` takes `(alpha, beta, x)`, where `beta` is a rate.
- `binomial_pdf` takes `(p, n, x)`.

`normal_cdf` is a logistic approximation of the normal CDF, not the exact
value.

`beta_cdf` and `gamma_cdf` integrate the density over `[0, x]` with the
midpoint rule. They take `steps` intervals, 10,000 by default
(`DEFAULT_STEPS`).

These functions raise `ValueError` when an argument is out of range:

- `poisson_cdf` raises it for a negative `x`.
- `binomial_pdf` raises it when `p` is outside `[0, 1]`, when `n` or `x` is negative, or when `x > n`.
- `n_choose_k` raises it for a negative argument. It returns 0 when `k > n`.
- `beta_cdf` and `gamma_cdf` raise it when `steps` is not positive.

## Random numbers

```python
from statslib.rng import RNG

rng = RNG(42)                # fixed seed; RNG() draws a random seed
rng.uniform_real()           # in [0, 1]
rng.uniform_real(1.0, 5.0)   # ValueError if a > b
rng.uniform_int(1, 10)
rng.bernoulli(0.5)           # True or False
rng.normal(0.0, 1.0)         # Box-Muller
rng.exponential(1.0)         # rate 1.0
rng.poisson(5.0)             # normal approximation when lam >= 30
rng.binomial(10, 0.5)        # sum of 10 Bernoulli trials
```

The methods raise `ValueError` in these cases:

- `bernoulli` and `binomial` raise it when the probability is outside `[0, 1]`.
- `binomial` also raises it when `n` is negative.
- `exponential` and `poisson` raise it when the rate is not positive.

## Estimation

```python
from statslib.estimation import (
    mle_normal, mle_exponential, mle_beta, mom_poisson, mle_generic,
)

mle_normal([1.0, 2.0, 3.0, 4.0, 5.0])       # (3.0, 2.0): mean, biased variance
mle_exponential([1.0, 2.0, 3.0, 4.0, 5.0])  # 0.2, the reciprocal of the mean
mle_beta([0.1, 0.2, 0.3, 0.4, 0.5])         # (1.5, 3.5): sums of x and 1 - x
mom_poisson([1.0, 2.0, 3.0, 4.0, 5.0])      # 3.0

params = mle_generic(
    lambda p: -p[0] ** 2 - p[1] ** 2,
    [1.0, 2.0, 3.0],      # data, accepted but not used
    [1.0, 1.0],           # initial guesses
    1e-10,                # tolerance
    100,                  # max iterations
)                         # [0.0, 0.0]
```

Each estimator has a method-of-moments counterpart that gives the same
results:

| Maximum likelihood | Method of moments |
| --- | --- |
| `mle_normal` | `mom_normal` |
| `mle_exponential` | `mom_exponential` |
| `mle_bernoulli` | `mom_bernoulli` |

`mom_poisson` returns the sample mean.

Every estimator raises `ValueError` on empty data. The exponential estimators
return `inf` when the mean is zero.

`mle_generic` moves each parameter by whole steps of +1 and -1. It raises
`ConvergenceError`, a subclass of `RuntimeError`, when it does not converge
within `max_iterations`.

## Sampling

```python
import math
from statslib.rng import RNG
from statslib.sampling import invert_cdf, rejection_sampling, metropolis_hastings

rng = RNG(7)

x = invert_cdf(lambda t: t * t, 0.5)   # scans up from 0 in steps of 0.001

sample = rejection_sampling(
    lambda t: math.exp(-t),              # target pdf
    lambda: rng.uniform_real(0.0, 10.0), # proposal sampler
    lambda t: 0.1,                       # proposal pdf
    2.0,                                 # c, must be > 1.0
    rng,
)

chain = metropolis_hastings(
    1000,                                # samples kept
    lambda t: math.exp(-t * t / 2),      # target pdf
    lambda t: t + rng.normal(0.0, 1.0),  # proposal kernel
    100,                                 # burn-in
    0.0,                                 # start
    rng,
)
len(chain)   # 1000
```

`rejection_sampling` keeps drawing until a proposal `x` passes the test
`u <= target_pdf(x) * c / proposal_pdf(x)`, where `u` is a fresh uniform
draw. It raises `ValueError` when `c <= 1.0`.

In both `rejection_sampling` and `metropolis_hastings`, the `rng` argument is
optional. When it is left out, a fresh `RNG` with a random seed is used.

## Scope

statslib is a library only. It has no command-line interface and does not
read or write files. It does not plot.

## Running the tests

```
pytest
```