import math

import pytest

from perfstats.stats.sample import (
    Sample,
    bounds,
    geo_mean,
    mean,
    std_dev,
    variance,
)


@pytest.mark.parametrize(
    "pctile, want",
    [
        (-1, 15),
        (0, 15),
        (0.05, 15),
        (0.30, 19.666666666666666),
        (0.40, 27),
        (0.95, 50),
        (1, 50),
        (2, 50),
    ],
)
def test_sample_percentile(pctile, want):
    s = Sample(xs=[15, 20, 35, 40, 50])
    assert s.percentile(pctile) == pytest.approx(want, rel=1e-8)


def test_percentile_unsorted_does_not_modify():
    s = Sample(xs=[50, 15, 40, 20, 35])
    assert s.percentile(0.5) == pytest.approx(35)
    assert s.xs == [50, 15, 40, 20, 35]
    assert s.sorted is False


def test_percentile_empty_is_nan():
    assert Sample().percentile(0.5) == pytest.approx(math.nan, nan_ok=True)


def test_weighted_percentile():
    s = Sample(xs=[1, 2, 3], weights=[1, 1, 2])
    assert s.percentile(0.5) == 3
    assert s.percentile(0.25) == 2


def test_iqr():
    s = Sample(xs=[40, 15, 50, 20, 35])
    assert s.iqr() == pytest.approx(25.0)


def test_bounds_function():
    assert bounds([3.0, -1.0, 7.0, 2.0]) == (-1.0, 7.0)
    assert bounds([]) == pytest.approx((math.nan, math.nan), nan_ok=True)


def test_sample_bounds_sorted_weighted_skips_zero_weights():
    s = Sample(xs=[1, 2, 3, 4], weights=[0, 1, 1, 0], sorted=True)
    assert s.bounds() == (2, 3)


@pytest.mark.parametrize("is_sorted", [True, False])
def test_sample_bounds_all_zero_weights(is_sorted):
    got = Sample(xs=[1, 2], weights=[0, 0], sorted=is_sorted).bounds()
    assert got == pytest.approx((math.nan, math.nan), nan_ok=True)


def test_sample_bounds_unsorted_weighted():
    s = Sample(xs=[5, 1, 9, 3], weights=[1, 0, 0, 2])
    assert s.bounds() == (3, 5)


def test_mean_and_sample_mean():
    assert mean([1, 2, 3, 4]) == pytest.approx(2.5)
    assert mean([]) == pytest.approx(math.nan, nan_ok=True)
    assert Sample(xs=[1, 3], weights=[1, 3]).mean() == pytest.approx(2.5)


def test_sum_and_weight():
    s = Sample(xs=[1, 3], weights=[1, 3])
    assert s.sum() == pytest.approx(10.0)
    assert s.weight() == pytest.approx(4.0)
    assert Sample(xs=[1, 2, 3]).sum() == pytest.approx(6.0)
    assert Sample(xs=[1, 2, 3]).weight() == 3.0


def test_geo_mean():
    assert geo_mean([1, 4]) == pytest.approx(2.0)
    assert geo_mean([1, 0, 4]) == pytest.approx(math.nan, nan_ok=True)
    assert geo_mean([]) == pytest.approx(math.nan, nan_ok=True)
    assert Sample(xs=[1, 8], weights=[2, 1]).geo_mean() == pytest.approx(2.0)


def test_variance_and_std_dev():
    assert variance([2, 1, 3, 4]) == pytest.approx(5 / 3)
    assert variance([7]) == 0.0
    assert variance([]) == pytest.approx(math.nan, nan_ok=True)
    assert std_dev([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(math.sqrt(32 / 7))
    assert Sample(xs=[2, 1, 3, 4]).variance() == pytest.approx(5 / 3)


def test_weighted_variance_rejected():
    s = Sample(xs=[1, 2], weights=[1, 1])
    with pytest.raises(ValueError):
        s.variance()
    with pytest.raises(ValueError):
        s.std_dev()


def test_sort_keeps_weights_paired():
    s = Sample(xs=[3, 1, 2], weights=[30, 10, 20])
    result = s.sort()
    assert result is s
    assert s.xs == [1, 2, 3]
    assert s.weights == [10, 20, 30]
    assert s.sorted is True


def test_copy_is_independent():
    s = Sample(xs=[3, 1, 2], weights=[1, 1, 1])
    c = s.copy()
    c.sort()
    assert s.xs == [3, 1, 2]
    assert c.xs == [1, 2, 3]
    assert s.sorted is False


def test_mismatched_weights_rejected():
    with pytest.raises(ValueError):
        Sample(xs=[1, 2], weights=[1])