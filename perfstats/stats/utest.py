"""The Mann-Whitney U-test."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import groupby
from operator import itemgetter
from typing import Sequence

from .errors import SampleSizeError, SamplesEqualError
from .location import LocationHypothesis
from .mathx import math_sign
from .normaldist import STD_NORMAL
from .udist import UDist

MANN_WHITNEY_EXACT_LIMIT = 50
"""Largest sample size for which the exact U distribution is used without ties."""

MANN_WHITNEY_TIES_EXACT_LIMIT = 25
"""Largest sample size for which the exact U distribution is used with ties."""


@dataclass(frozen=True)
class MannWhitneyUTestResult:
    """The result of a Mann-Whitney U-test.

    u is the U statistic with ties counted as 0.5; the mirror statistic for
    the other sample is n1*n2 - u. p is the p-value for alt_hypothesis.
    """

    n1: int
    n2: int
    u: float
    alt_hypothesis: LocationHypothesis
    p: float


def labeled_merge(
    x1: Sequence[float], x2: Sequence[float]
) -> tuple[list[float], list[int]]:
    """Merge sorted x1 and x2, labelling each value 1 or 2 by its origin.

    On equal values the one from x2 comes first.
    """
    merged: list[float] = []
    labels: list[int] = []
    i = j = 0
    while i < len(x1) and j < len(x2):
        if x1[i] < x2[j]:
            merged.append(x1[i])
            labels.append(1)
            i += 1
        else:
            merged.append(x2[j])
            labels.append(2)
            j += 1
    merged.extend(x1[i:])
    labels.extend([1] * (len(x1) - i))
    merged.extend(x2[j:])
    labels.extend([2] * (len(x2) - j))
    return merged, labels


def tie_correction(ties: Sequence[int]) -> float:
    """Return the tie correction factor: the sum of t**3 - t over the tie counts."""
    return float(sum(t * t * t - t for t in ties))


def mann_whitney_u_test(
    x1: Sequence[float],
    x2: Sequence[float],
    alt: LocationHypothesis = LocationHypothesis.DIFFERS,
) -> MannWhitneyUTestResult:
    """Test whether x1 and x2 come from the same population.

    Uses the exact U distribution for small samples and a normal
    approximation with tie and continuity correction otherwise. Raises
    SampleSizeError if a sample is empty and SamplesEqualError if all
    values are equal.
    """
    alt = LocationHypothesis(alt)
    n1, n2 = len(x1), len(x2)
    if n1 == 0 or n2 == 0:
        raise SampleSizeError()

    merged, labels = labeled_merge(sorted(x1), sorted(x2))

    r1 = 0.0
    ties: list[int] = []
    rank = 1
    for _, group in groupby(zip(merged, labels), key=itemgetter(0)):
        group_labels = [label for _, label in group]
        count = len(group_labels)
        nx1 = group_labels.count(1)
        if nx1:
            r1 += float(2 * rank + count - 1) / 2 * nx1
        ties.append(count)
        rank += count
    has_ties = any(count > 1 for count in ties)

    u1 = r1 - float(n1 * (n1 + 1)) / 2
    u2 = float(n1 * n2) - u1
    u_small = min(u1, u2)

    exact = (
        not has_ties
        and n1 <= MANN_WHITNEY_EXACT_LIMIT
        and n2 <= MANN_WHITNEY_EXACT_LIMIT
    ) or (
        has_ties
        and n1 <= MANN_WHITNEY_TIES_EXACT_LIMIT
        and n2 <= MANN_WHITNEY_TIES_EXACT_LIMIT
    )

    if exact:
        if len(ties) == 1:
            raise SamplesEqualError()
        dist = UDist(n1=n1, n2=n2, t=tuple(ties))
        if alt is LocationHypothesis.DIFFERS:
            # The whole distribution is the answer when U sits at its centre.
            p = 1.0 if u1 == u2 else dist.cdf(u_small) * 2
        elif alt is LocationHypothesis.LESS:
            p = dist.cdf(u1)
        else:
            p = 1 - dist.cdf(u1 - 1)
    else:
        t = tie_correction(ties)
        n = float(n1 + n2)
        mu_u = float(n1 * n2) / 2
        sigma_u = math.sqrt(float(n1 * n2) * ((n + 1) - t / (n * (n - 1))) / 12)
        if sigma_u == 0:
            raise SamplesEqualError()
        numer = u1 - mu_u
        if alt is LocationHypothesis.DIFFERS:
            numer -= math_sign(numer) * 0.5
        elif alt is LocationHypothesis.LESS:
            numer += 0.5
        else:
            numer -= 0.5
        z = numer / sigma_u
        if alt is LocationHypothesis.DIFFERS:
            p = 2 * min(STD_NORMAL.cdf(z), 1 - STD_NORMAL.cdf(z))
        elif alt is LocationHypothesis.LESS:
            p = STD_NORMAL.cdf(z)
        else:
            p = 1 - STD_NORMAL.cdf(z)

    return MannWhitneyUTestResult(n1=n1, n2=n2, u=u1, alt_hypothesis=alt, p=p)