"""Student's and Welch's t-tests."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, Sequence

from .errors import MismatchedSamplesError, SampleSizeError, ZeroVarianceError
from .location import LocationHypothesis
from .sample import mean, std_dev
from .tdist import TDist


class TTestSample(Protocol):
    """A sample usable by the one- and two-sample t-tests."""

    def weight(self) -> float: ...

    def mean(self) -> float: ...

    def variance(self) -> float: ...


@dataclass(frozen=True)
class TTestResult:
    """The result of a t-test.

    n1 and n2 are the input sample sizes (n2 is 0 for a one-sample test),
    t is the t-statistic, dof the degrees of freedom and p the p-value for
    the alternative hypothesis alt_hypothesis.
    """

    n1: int
    n2: int
    t: float
    dof: float
    alt_hypothesis: LocationHypothesis
    p: float


def _result(
    n1: int, n2: int, t: float, dof: float, alt: LocationHypothesis
) -> TTestResult:
    alt = LocationHypothesis(alt)
    dist = TDist(dof)
    if alt is LocationHypothesis.DIFFERS:
        p = 2 * (1 - dist.cdf(abs(t)))
    elif alt is LocationHypothesis.LESS:
        p = dist.cdf(t)
    else:
        p = 1 - dist.cdf(t)
    return TTestResult(n1=n1, n2=n2, t=t, dof=dof, alt_hypothesis=alt, p=p)


def two_sample_t_test(
    x1: TTestSample,
    x2: TTestSample,
    alt: LocationHypothesis = LocationHypothesis.DIFFERS,
) -> TTestResult:
    """Unpaired Student's t-test assuming equal variances and normal populations."""
    n1, n2 = x1.weight(), x2.weight()
    if n1 == 0 or n2 == 0:
        raise SampleSizeError()
    v1, v2 = x1.variance(), x2.variance()
    if v1 == 0 and v2 == 0:
        raise ZeroVarianceError()

    dof = n1 + n2 - 2
    v12 = ((n1 - 1) * v1 + (n2 - 1) * v2) / dof
    t = (x1.mean() - x2.mean()) / math.sqrt(v12 * (1 / n1 + 1 / n2))
    return _result(int(n1), int(n2), t, dof, alt)


def two_sample_welch_t_test(
    x1: TTestSample,
    x2: TTestSample,
    alt: LocationHypothesis = LocationHypothesis.DIFFERS,
) -> TTestResult:
    """Unpaired Welch's t-test, which does not assume equal variances."""
    n1, n2 = x1.weight(), x2.weight()
    if n1 <= 1 or n2 <= 1:
        raise SampleSizeError()
    v1, v2 = x1.variance(), x2.variance()
    if v1 == 0 and v2 == 0:
        raise ZeroVarianceError()

    dof = (v1 / n1 + v2 / n2) ** 2 / (
        (v1 / n1) ** 2 / (n1 - 1) + (v2 / n2) ** 2 / (n2 - 1)
    )
    s = math.sqrt(v1 / n1 + v2 / n2)
    t = (x1.mean() - x2.mean()) / s
    return _result(int(n1), int(n2), t, dof, alt)


def paired_t_test(
    x1: Sequence[float],
    x2: Sequence[float],
    mu0: float = 0.0,
    alt: LocationHypothesis = LocationHypothesis.DIFFERS,
) -> TTestResult:
    """Paired t-test of whether the mean of x1 - x2 differs from mu0."""
    if len(x1) != len(x2):
        raise MismatchedSamplesError()
    if len(x1) <= 1:
        raise SampleSizeError()

    dof = float(len(x1) - 1)
    diff = [a - b for a, b in zip(x1, x2)]
    sd = std_dev(diff)
    if sd == 0:
        raise ZeroVarianceError()
    t = (mean(diff) - mu0) * math.sqrt(len(x1)) / sd
    return _result(len(x1), len(x2), t, dof, alt)


def one_sample_t_test(
    x: TTestSample,
    mu0: float = 0.0,
    alt: LocationHypothesis = LocationHypothesis.DIFFERS,
) -> TTestResult:
    """One-sample t-test of whether the population mean equals mu0."""
    n, v = x.weight(), x.variance()
    if n == 0:
        raise SampleSizeError()
    if v == 0:
        raise ZeroVarianceError()
    dof = n - 1
    t = (x.mean() - mu0) * math.sqrt(n) / math.sqrt(v)
    return _result(int(n), 0, t, dof, alt)