import math

import pytest

from perfstats.stats.mathx import (
    bisect,
    bisect_bool,
    math_beta,
    math_beta_inc,
    math_choose,
    math_lchoose,
    math_sign,
    series,
)


# I_0.5(a, 3) for a = 0..10, from MATLAB's betainc documentation.
BETA_INC_CASES = [
    (0, 1.00000000000000),
    (1, 0.87500000000000),
    (2, 0.68750000000000),
    (3, 0.50000000000000),
    (4, 0.34375000000000),
    (5, 0.22656250000000),
    (6, 0.14453125000000),
    (7, 0.08984375000000),
    (8, 0.05468750000000),
    (9, 0.03271484375000),
    (10, 0.01928710937500),
]


@pytest.mark.parametrize("a,want", BETA_INC_CASES)
def test_beta_inc_matlab_examples(a, want):
    got = math_beta_inc(0.5, float(a), 3.0)
    assert got == pytest.approx(want, rel=1e-8)


@pytest.mark.parametrize("x", [-0.1, 1.1])
def test_beta_inc_out_of_range_is_nan(x):
    got = math_beta_inc(x, 2.0, 3.0)
    assert got == pytest.approx(math.nan, nan_ok=True)


def test_beta_inc_endpoints():
    assert math_beta_inc(0.0, 2.0, 3.0) == 0.0
    assert math_beta_inc(1.0, 2.0, 3.0) == 1.0


def test_beta_inc_symmetry():
    for x in (0.1, 0.3, 0.7):
        left = math_beta_inc(x, 2.5, 4.0)
        right = 1 - math_beta_inc(1 - x, 4.0, 2.5)
        assert abs(left - right) < 1e-12


def test_math_beta_known_values():
    assert abs(math_beta(1.0, 1.0) - 1.0) < 1e-12
    assert abs(math_beta(2.0, 3.0) - 1 / 12) < 1e-12
    assert abs(math_beta(3.0, 2.0) - math_beta(2.0, 3.0)) < 1e-15


@pytest.mark.parametrize(
    "x,want", [(-3.5, -1.0), (0.0, 0.0), (2.0, 1.0), (-math.inf, -1.0)]
)
def test_math_sign(x, want):
    assert math_sign(x) == want


def test_math_sign_nan():
    assert math_sign(math.nan) == pytest.approx(math.nan, nan_ok=True)


def test_math_choose_small_matches_comb():
    for n in range(0, 21):
        for k in range(0, n + 1):
            assert math_choose(n, k) == float(math.comb(n, k))


def test_math_choose_edges():
    assert math_choose(5, 0) == 1.0
    assert math_choose(5, 5) == 1.0
    assert math_choose(5, -1) == 0.0
    assert math_choose(3, 4) == 0.0


def test_math_choose_large_is_close_to_exact():
    got = math_choose(40, 13)
    assert abs(got - math.comb(40, 13)) / math.comb(40, 13) < 1e-9


def test_math_lchoose():
    assert math_lchoose(7, 0) == 0.0
    assert math_lchoose(7, 7) == 0.0
    assert math_lchoose(3, 5) == pytest.approx(math.nan, nan_ok=True)
    assert abs(math_lchoose(30, 12) - math.log(math.comb(30, 12))) < 1e-9


def test_bisect_finds_root():
    x, ok = bisect(lambda v: v * v - 2, 0.0, 2.0, 1e-12)
    assert ok
    assert abs(x - math.sqrt(2)) < 1e-6


def test_bisect_returns_endpoint_root():
    assert bisect(lambda v: v - 1.0, 1.0, 3.0, 1e-9) == (1.0, True)


def test_bisect_discontinuity():
    x, ok = bisect(lambda v: -1.0 if v < 0.5 else 1.0, 0.0, 1.0, 1e-9)
    assert not ok
    assert abs(x - 0.5) < 1e-12


def test_bisect_not_bracketed():
    with pytest.raises(ValueError):
        bisect(lambda v: v * v + 1, -1.0, 1.0, 1e-9)


def test_bisect_bool_bracket():
    x1, x2 = bisect_bool(lambda v: v < 0.3, 0.0, 1.0, 1e-9)
    assert x1 < x2
    assert x2 - x1 <= 1e-9
    assert x1 < 0.3 <= x2


def test_bisect_bool_not_bracketed():
    with pytest.raises(ValueError):
        bisect_bool(lambda v: True, 0.0, 1.0, 1e-9)


def test_series_geometric():
    assert abs(series(lambda n: 0.5**n) - 2.0) < 1e-12