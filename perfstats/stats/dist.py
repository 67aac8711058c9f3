"""Generic distribution helpers and the Dirac delta distribution.

A distribution is any object with ``cdf(x)`` and ``bounds()`` methods.
Continuous distributions add ``pdf(x)``; discrete ones add ``pmf(x)`` and
``step()``.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .mathx import bisect_bool

_INF = math.inf
_NAN = math.nan


@dataclass(frozen=True)
class DeltaDist:
    """The Dirac delta distribution centred at t, with total area 1.

    Its CDF is the Heaviside step function, with cdf(t) == 1.
    """

    t: float

    def pdf(self, x: float) -> float:
        return _INF if x == self.t else 0.0

    def pdf_each(self, xs: Iterable[float]) -> list[float]:
        return [self.pdf(x) for x in xs]

    def cdf(self, x: float) -> float:
        return 1.0 if x >= self.t else 0.0

    def cdf_each(self, xs: Iterable[float]) -> list[float]:
        return [self.cdf(x) for x in xs]

    def inv_cdf(self, y: float) -> float:
        if y < 0 or y > 1:
            return _NAN
        return self.t

    def bounds(self) -> tuple[float, float]:
        return self.t - 1, self.t + 1


def inv_cdf(dist: Any) -> Callable[[float], float]:
    """Return the inverse CDF (quantile function) of dist.

    If dist has its own ``inv_cdf`` method, that is returned. Otherwise a
    numerical inverse is built from ``dist.cdf``. The returned function
    gives NaN for y outside [0, 1]; for y == 0 or y == 1 it gives the
    support bound if the support is finite, or -inf/inf otherwise.
    """
    own = getattr(dist, "inv_cdf", None)
    if callable(own):
        return own

    almost_xtol = 1e-16

    def numeric_inv(y: float) -> float:
        if y < 0 or y > 1:
            return _NAN
        if y == 0:
            low, _ = dist.bounds()
            return low if dist.cdf(low) == 0 else -_INF
        if y == 1:
            _, high = dist.bounds()
            return high if dist.cdf(high) == 1 else _INF

        # Find lo_x, hi_x with cdf(lo_x) < y <= cdf(hi_x).
        lo_x = hi_x = 0.0
        y1 = dist.cdf(0.0)
        xdelta = 1.0
        if y1 < y:
            hi_y = y1
            while hi_y < y and hi_x != _INF:
                lo_x, hi_x = hi_x, hi_x + xdelta
                hi_y = dist.cdf(hi_x)
                xdelta *= 2
        else:
            lo_y = y1
            while y <= lo_y and lo_x != -_INF:
                hi_x, lo_x = lo_x, lo_x - xdelta
                lo_y = dist.cdf(lo_x)
                xdelta *= 2
        if lo_x == -_INF:
            return lo_x
        if hi_x == _INF:
            return hi_x

        _, x = bisect_bool(lambda v: dist.cdf(v) < y, lo_x, hi_x, almost_xtol)
        return x

    return numeric_inv


def rand(dist: Any) -> Callable[..., float]:
    """Return a generator of random values drawn from dist.

    The generator takes an optional ``random.Random``; without one it uses
    the module-level source. If dist has its own ``rand`` method, that is
    returned; otherwise sampling goes through the inverse CDF.
    """
    own = getattr(dist, "rand", None)
    if callable(own):
        return own

    inverse = inv_cdf(dist)

    def generic_rand(rng: random.Random | None = None) -> float:
        source = rng if rng is not None else random
        y = 0.0
        while y == 0:
            y = source.random()
        return inverse(y)

    return generic_rand