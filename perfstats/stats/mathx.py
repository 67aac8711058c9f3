"""Numerical helpers: signs, binomial coefficients, root finding and beta functions."""

from __future__ import annotations

import math
from typing import Callable

_INF = math.inf
_NAN = math.nan
_SMALLEST_NONZERO = 5e-324

_SMALL_FACT_LIMIT = 20  # 20! fits in 62 bits


def _lgamma(x: float) -> float:
    """Natural log of |Gamma(x)|, +inf at the poles."""
    try:
        return math.lgamma(x)
    except ValueError:
        return _INF


def _exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return _INF


def math_sign(x: float) -> float:
    """Return -1, 0 or 1 according to the sign of x, or NaN if x is NaN."""
    if x == 0:
        return 0.0
    if x < 0:
        return -1.0
    if x > 0:
        return 1.0
    return _NAN


def _lchoose(n: int, k: int) -> float:
    return _lgamma(float(n + 1)) - _lgamma(float(k + 1)) - _lgamma(float(n - k + 1))


def math_choose(n: int, k: int) -> float:
    """Return the binomial coefficient of n and k."""
    if k == 0 or k == n:
        return 1.0
    if k < 0 or n < k:
        return 0.0
    if n <= _SMALL_FACT_LIMIT:
        return float(math.comb(n, k))
    return _exp(_lchoose(n, k))


def math_lchoose(n: int, k: int) -> float:
    """Return the natural log of math_choose(n, k)."""
    if k == 0 or k == n:
        return 0.0
    if k < 0 or n < k:
        return _NAN
    return _lchoose(n, k)


def bisect(
    f: Callable[[float], float], low: float, high: float, tolerance: float
) -> tuple[float, bool]:
    """Find x in [low, high] with |f(x)| <= tolerance by bisection.

    f(low) and f(high) must have opposite signs, otherwise ValueError is
    raised. Returns (x, True) on success; if f has no root in the interval
    (it is discontinuous), returns the x of the apparent discontinuity and
    False.
    """
    flow, fhigh = f(low), f(high)
    if -tolerance <= flow <= tolerance:
        return low, True
    if -tolerance <= fhigh <= tolerance:
        return high, True
    if math_sign(flow) == math_sign(fhigh):
        raise ValueError(
            f"root of f is not bracketed by [low, high]; "
            f"f({low:g})={flow:g} f({high:g})={fhigh:g}"
        )
    while True:
        mid = (high + low) / 2
        fmid = f(mid)
        if -tolerance <= fmid <= tolerance:
            return mid, True
        if mid == high or mid == low:
            return mid, False
        if math_sign(fmid) == math_sign(flow):
            low, flow = mid, fmid
        else:
            high = mid


def bisect_bool(
    f: Callable[[float], bool], low: float, high: float, xtol: float
) -> tuple[float, float]:
    """Bisect a boolean function.

    Returns x1 < x2 in [low, high] with f(x1) != f(x2) and x2 - x1 <= xtol
    (or as close as floating point allows). Raises ValueError if
    f(low) == f(high).
    """
    flow, fhigh = f(low), f(high)
    if flow == fhigh:
        raise ValueError(
            f"root of f is not bracketed by [low, high]; "
            f"f({low:g})={flow} f({high:g})={fhigh}"
        )
    while True:
        if high - low <= xtol:
            return low, high
        mid = (high + low) / 2
        if mid == high or mid == low:
            return low, high
        fmid = f(mid)
        if fmid == flow:
            low, flow = mid, fmid
        else:
            high = mid


def series(f: Callable[[float], float]) -> float:
    """Sum f(0) + f(1) + ... until the partial sum stops changing."""
    y, yp = 0.0, 1.0
    n = 0.0
    while y != yp:
        yp = y
        y += f(n)
        n += 1
    return y


def math_beta(a: float, b: float) -> float:
    """Return the complete beta function B(a, b)."""
    return _exp(_lgamma(a) + _lgamma(b) - _lgamma(a + b))


def math_beta_inc(x: float, a: float, b: float) -> float:
    """Return the regularized incomplete beta function I_x(a, b).

    Returns NaN if x is outside [0, 1].
    """
    if x < 0 or x > 1:
        return _NAN
    bt = 0.0
    if 0 < x < 1:
        bt = _exp(
            _lgamma(a + b) - _lgamma(a) - _lgamma(b)
            + a * math.log(x) + b * math.log(1 - x)
        )
    if x < (a + 1) / (a + b + 2):
        return bt * _betacf(x, a, b) / a
    return 1 - bt * _betacf(1 - x, b, a) / b


def _raise_zero(z: float) -> float:
    if abs(z) < _SMALLEST_NONZERO:
        return _SMALLEST_NONZERO
    return z


def _betacf(x: float, a: float, b: float) -> float:
    """Continued fraction part of the regularized incomplete beta function."""
    max_iterations = 200
    epsilon = 3e-14

    c = 1.0
    d = 1 / _raise_zero(1 - (a + b) * x / (a + 1))
    h = d
    for m in range(1, max_iterations + 1):
        mf = float(m)

        numer = mf * (b - mf) * x / ((a + 2 * mf - 1) * (a + 2 * mf))
        d = 1 / _raise_zero(1 + numer * d)
        c = _raise_zero(1 + numer / c)
        h *= d * c

        numer = -(a + mf) * (a + b + mf) * x / ((a + 2 * mf) * (a + 2 * mf + 1))
        d = 1 / _raise_zero(1 + numer * d)
        c = _raise_zero(1 + numer / c)
        hfac = d * c
        h *= hfac

        if abs(hfac - 1) < epsilon:
            return h
    raise ArithmeticError("betainc: a or b too big; failed to converge")