"""The distribution of the Mann-Whitney U statistic, with and without ties."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .mathx import math_choose

_UKey = tuple[int, int]  # (size of first sample, 2*U statistic)


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _two_u_min(n1: int, t: Sequence[int], a: Sequence[int]) -> int:
    two_u = -n1 * n1
    remaining = n1
    for k, tk in enumerate(t, start=1):
        take = min(remaining, tk)
        two_u += take * a[k]
        remaining -= take
    return two_u


def _two_u_max(n1: int, t: Sequence[int], a: Sequence[int]) -> int:
    two_u = -n1 * n1
    remaining = n1
    for k in range(len(t), 0, -1):
        take = min(remaining, t[k - 1])
        two_u += take * a[k]
        remaining -= take
    return two_u


def make_umemo(two_u: int, n1: int, t: Sequence[int]) -> list[dict[_UKey, float]]:
    """Build the memo table of cumulative U counts in the presence of ties.

    Entry ``memo[k][(m, two_v)]`` is the number of permutations of a first
    sample of size m, ranked with tie vector ``t[:k]``, whose U statistic is
    at most two_v / 2. The table covers what is needed to answer the query
    ``memo[len(t)][(n1, two_u)]``. Follows Cheung and Klotz (1997).
    """
    t = list(t)
    k_total = len(t)
    if k_total < 2:
        raise ValueError("tie vector must have at least two ranks")

    # a[k] coefficients; a[0] is unused.
    a = [0] * (k_total + 1)
    a[1] = t[0]
    for k in range(2, k_total + 1):
        a[k] = a[k - 1] + t[k - 2] + t[k - 1]

    memo: list[dict[_UKey, float]] = [{} for _ in range(k_total + 1)]
    memo[k_total] = {(n1, two_u): 0.0}

    # Work out the needed (k, n1, 2U) triples from high k down.
    tsum = sum(t)  # always sum(t[:k])
    for k in range(k_total - 1, 1, -1):
        tsum -= t[k]
        prefix = t[:k]
        level: dict[_UKey, float] = {}
        for up_n1, up_two_u in memo[k + 1]:
            for rk in range(max(0, up_n1 - tsum), min(up_n1, t[k]) + 1):
                two_u_k = up_two_u - rk * (a[k + 1] - 2 * up_n1 + rk)
                n1_k = up_n1 - rk
                if _two_u_min(n1_k, prefix, a) <= two_u_k <= _two_u_max(n1_k, prefix, a):
                    level[(n1_k, two_u_k)] = 0.0
        memo[k] = level

    # Base case k == 2.
    n_2 = t[0] + t[1]
    base = memo[2]
    for key in base:
        key_n1, key_two_u = key
        r2_low = max(0, key_n1 - t[0])
        r2_high = _trunc_div(key_two_u - key_n1 * (t[0] - key_n1), n_2)
        total = 0.0
        for r2 in range(r2_low, r2_high + 1):
            total += math_choose(t[0], key_n1 - r2) * math_choose(t[1], r2)
        base[key] = total

    # Unwind the recurrence from low k up.
    tsum = t[0]  # always sum(t[:k-1])
    for k in range(3, k_total + 1):
        tsum += t[k - 2]
        prev = memo[k - 1]
        prefix = t[: k - 1]
        level = memo[k]
        for key in level:
            key_n1, key_two_u = key
            total = 0.0
            for rk in range(max(0, key_n1 - tsum), min(key_n1, t[k - 1]) + 1):
                two_u_prev = key_two_u - rk * (a[k] - 2 * key_n1 + rk)
                n1_prev = key_n1 - rk
                x = prev.get((n1_prev, two_u_prev))
                if x is None:
                    if _two_u_max(n1_prev, prefix, a) < two_u_prev:
                        x = math_choose(tsum, n1_prev)
                    else:
                        x = 0.0
                total += x * math_choose(t[k - 1], rk)
            level[key] = total

    return memo


@dataclass(frozen=True)
class UDist:
    """Distribution of the Mann-Whitney U statistic for samples of sizes n1 and n2.

    t counts the tied values at each rank of the merged samples; None means
    there are no ties. When given, sum(t) must equal n1 + n2.
    """

    n1: int
    n2: int
    t: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        if self.t is not None:
            object.__setattr__(self, "t", tuple(self.t))

    def has_ties(self) -> bool:
        """Return True if any rank holds more than one value."""
        return any(count > 1 for count in self.t or ())

    def _p(self, u: int) -> list[float]:
        """Return Mann and Whitney's p_{n1,n2}(U) for U in 0..u."""
        n_small, m_big = sorted((self.n1, self.n2))
        memo = [[0.0] * (u + 1) for _ in range(n_small + 1)]
        for m in range(m_big + 1):
            memo[0][0] = 1.0
            for n in range(1, min(n_small, m) + 1):
                lp = memo[n - 1]
                rp = memo[n] if n <= m - 1 else memo[m - 1]
                out = memo[n]
                nplusm = float(n + m)
                for u1 in range(min(n * m, u), -1, -1):
                    left = n * lp[u1 - m] if u1 - m >= 0 else 0.0
                    out[u1] = (left + m * rp[u1]) / nplusm
        return memo[n_small]

    def _tied_count(self, two_u: int) -> float:
        key = (self.n1, two_u)
        count = make_umemo(two_u, self.n1, self.t)[len(self.t)].get(key)
        if count is None:
            raise RuntimeError("memo table lacks the requested entry")
        return count

    def pmf(self, u: float) -> float:
        """Return Pr[U = u], with u rounded down to a multiple of step()."""
        if u < 0 or u >= 0.5 + self.n1 * self.n2:
            return 0.0
        if self.has_ties():
            two_u = int(2 * u)
            below = self._tied_count(two_u - 1)
            upto = self._tied_count(two_u)
            return (upto - below) / math_choose(self.n1 + self.n2, self.n1)
        ui = math.floor(u)
        return self._p(ui)[ui]

    def cdf(self, u: float) -> float:
        """Return Pr[U <= u]."""
        if u < 0:
            return 0.0
        if u >= self.n1 * self.n2:
            return 1.0
        if self.has_ties():
            return self._tied_count(int(2 * u)) / math_choose(self.n1 + self.n2, self.n1)

        ui = math.floor(u)
        # The distribution is symmetric about n1*n2/2; sum the smaller tail.
        flip = ui >= (self.n1 * self.n2 + 1) // 2
        if flip:
            ui = self.n1 * self.n2 - ui - 1
        p = 0.0
        for mass in self._p(ui)[: ui + 1]:
            p += mass
        return 1 - p if flip else p

    def step(self) -> float:
        return 0.5

    def bounds(self) -> tuple[float, float]:
        return 0.0, float(self.n1 * self.n2)