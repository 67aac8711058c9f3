"""Descriptive statistics over possibly weighted samples."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence


def bounds(xs: Sequence[float]) -> tuple[float, float]:
    """Return the minimum and maximum of xs, or (NaN, NaN) if xs is empty."""
    if not xs:
        return math.nan, math.nan
    lo = hi = xs[0]
    for x in xs:
        if x < lo:
            lo = x
        if x > hi:
            hi = x
    return lo, hi


def mean(xs: Sequence[float]) -> float:
    """Return the arithmetic mean of xs, or NaN if xs is empty."""
    if not xs:
        return math.nan
    m = 0.0
    for i, x in enumerate(xs, start=1):
        m += (x - m) / i
    return m


def geo_mean(xs: Sequence[float]) -> float:
    """Return the geometric mean of xs; NaN if xs is empty or holds a value <= 0."""
    if not xs:
        return math.nan
    m = 0.0
    for i, x in enumerate(xs, start=1):
        if x <= 0:
            return math.nan
        m += (math.log(x) - m) / i
    return math.exp(m)


def variance(xs: Sequence[float]) -> float:
    """Return the sample variance of xs using Welford's online algorithm."""
    if not xs:
        return math.nan
    if len(xs) == 1:
        return 0.0
    avg, m2 = 0.0, 0.0
    for n, x in enumerate(xs, start=1):
        delta = x - avg
        avg += delta / n
        m2 += delta * (x - avg)
    return m2 / (len(xs) - 1)


def std_dev(xs: Sequence[float]) -> float:
    """Return the sample standard deviation of xs."""
    return math.sqrt(variance(xs))


def _is_sorted(xs: Sequence[float]) -> bool:
    return all(not (b < a) for a, b in zip(xs, xs[1:]))


@dataclass
class Sample:
    """A collection of possibly weighted data points.

    If weights is None every value has weight 1; otherwise it must have the
    same length as xs and hold non-negative values. ``sorted`` records that
    xs is in ascending order.
    """

    xs: list[float] = field(default_factory=list)
    weights: list[float] | None = None
    sorted: bool = False

    def __post_init__(self) -> None:
        self.xs = list(self.xs)
        if self.weights is not None:
            self.weights = list(self.weights)
            if len(self.weights) != len(self.xs):
                raise ValueError("weights must have the same length as xs")

    def bounds(self) -> tuple[float, float]:
        """Return the minimum and maximum values, ignoring zero-weighted ones."""
        if not self.xs or (not self.sorted and self.weights is None):
            return bounds(self.xs)

        if self.sorted:
            if self.weights is None:
                return self.xs[0], self.xs[-1]
            present = [x for x, w in zip(self.xs, self.weights) if w != 0]
            if not present:
                return math.nan, math.nan
            return present[0], present[-1]

        lo, hi = math.inf, -math.inf
        for x, w in zip(self.xs, self.weights):
            if w == 0:
                continue
            if x < lo:
                lo = x
            if x > hi:
                hi = x
        if math.isinf(lo):
            return math.nan, math.nan
        return lo, hi

    def sum(self) -> float:
        """Return the (possibly weighted) sum of the values."""
        if self.weights is None:
            total = 0.0
            for x in self.xs:
                total += x
            return total
        total = 0.0
        for x, w in zip(self.xs, self.weights):
            total += x * w
        return total

    def weight(self) -> float:
        """Return the total weight of the sample."""
        if self.weights is None:
            return float(len(self.xs))
        total = 0.0
        for w in self.weights:
            total += w
        return total

    def mean(self) -> float:
        """Return the (possibly weighted) arithmetic mean."""
        if not self.xs or self.weights is None:
            return mean(self.xs)
        m, wsum = 0.0, 0.0
        for x, w in zip(self.xs, self.weights):
            wsum += w
            m += (x - m) * w / wsum
        return m

    def geo_mean(self) -> float:
        """Return the (possibly weighted) geometric mean; values must be positive."""
        if not self.xs or self.weights is None:
            return geo_mean(self.xs)
        m, wsum = 0.0, 0.0
        for x, w in zip(self.xs, self.weights):
            wsum += w
            m += (math.log(x) - m) * w / wsum
        return math.exp(m)

    def variance(self) -> float:
        """Return the sample variance; weighted samples are rejected."""
        if not self.xs or self.weights is None:
            return variance(self.xs)
        raise ValueError("variance of a weighted sample is not supported")

    def std_dev(self) -> float:
        """Return the sample standard deviation; weighted samples are rejected."""
        if not self.xs or self.weights is None:
            return std_dev(self.xs)
        raise ValueError("standard deviation of a weighted sample is not supported")

    def percentile(self, pctile: float) -> float:
        """Return the pctile-th value using Hyndman and Fan's method R8.

        pctile is capped to [0, 1]. Returns NaN for an empty sample.
        percentile(0.5) is the median.
        """
        if not self.xs:
            return math.nan
        if pctile <= 0:
            return self.bounds()[0]
        if pctile >= 1:
            return self.bounds()[1]

        s = self if self.sorted else self.copy().sort()
        xs = s.xs

        if s.weights is None:
            n = 1 / 3.0 + pctile * (len(xs) + 1 / 3.0)
            frac, kf = math.modf(n)
            k = int(kf)
            if k <= 0:
                return xs[0]
            if k >= len(xs):
                return xs[-1]
            return xs[k - 1] + frac * (xs[k] - xs[k - 1])

        target = s.weight() * pctile
        for x, w in zip(xs, s.weights):
            target -= w
            if target < 0:
                return x
        return xs[-1]

    def iqr(self) -> float:
        """Return the interquartile range."""
        s = self if self.sorted else self.copy().sort()
        return s.percentile(0.75) - s.percentile(0.25)

    def sort(self) -> Sample:
        """Sort the values (with their weights) in place and return self."""
        if self.sorted or _is_sorted(self.xs):
            pass
        elif self.weights is None:
            self.xs.sort()
        else:
            pairs = sorted(zip(self.xs, self.weights), key=lambda p: p[0])
            self.xs = [x for x, _ in pairs]
            self.weights = [w for _, w in pairs]
        self.sorted = True
        return self

    def copy(self) -> Sample:
        """Return a copy sharing no data with this sample."""
        return Sample(
            list(self.xs),
            None if self.weights is None else list(self.weights),
            self.sorted,
        )