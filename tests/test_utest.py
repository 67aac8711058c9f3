import pytest

from perfstats.stats.errors import SampleSizeError, SamplesEqualError
from perfstats.stats.location import LocationHypothesis
from perfstats.stats.utest import (
    MannWhitneyUTestResult,
    labeled_merge,
    mann_whitney_u_test,
    tie_correction,
)

LESS = LocationHypothesis.LESS
DIFFERS = LocationHypothesis.DIFFERS
GREATER = LocationHypothesis.GREATER

S1 = [2, 1, 3, 5]
S2 = [12, 11, 13, 15]
S3 = [0, 4, 6, 7]
S4 = [2, 2, 2, 2]
S5 = [1, 1, 1, 1, 1]

L1 = [float(i * 2) for i in range(500)]
L2 = [float(i * 2 - 41) for i in range(600)]
L3 = L1[:30] + L2[30:]


def aeq(expect, got):
    if expect < 0 and got < 0:
        expect, got = -expect, -got
    return expect * 0.99999999 <= got and got * 0.99999999 <= expect


def check3(x1, x2, u, pless, pdiff, pgreater):
    for alt, p in ((LESS, pless), (DIFFERS, pdiff), (GREATER, pgreater)):
        got = mann_whitney_u_test(x1, x2, alt)
        assert isinstance(got, MannWhitneyUTestResult)
        assert got.n1 == len(x1)
        assert got.n2 == len(x2)
        assert aeq(u, got.u), (alt, got)
        assert got.alt_hypothesis == alt
        assert aeq(p, got.p), (alt, got)


def test_small_no_ties():
    check3(S1, S2, 0, 0.014285714285714289, 0.028571428571428577, 1)
    check3(S2, S1, 16, 1, 0.028571428571428577, 0.014285714285714289)
    check3(S1, S3, 5, 0.24285714285714288, 0.485714285714285770, 0.8285714285714285)


def test_small_ties():
    check3(S1, S1, 8, 0.6285714285714286, 1, 0.6285714285714286)
    check3(S1, S4, 10, 0.8571428571428571, 0.7142857142857143, 0.3571428571428571)
    check3(S1, S5, 17.5, 1, 0, 0.04761904761904767)


def test_all_equal():
    with pytest.raises(SamplesEqualError):
        mann_whitney_u_test(S4, S4, DIFFERS)


def test_empty_sample():
    with pytest.raises(SampleSizeError):
        mann_whitney_u_test([], S1, DIFFERS)


def test_large_no_ties():
    check3(L1, L2, 135250, 0.0024667680407086112, 0.0049335360814172224, 0.9975346930458906)


def test_large_identical():
    check3(L1, L1, 125000, 0.5000436801680628, 1, 0.5000436801680628)


def test_large_ties():
    check3(L1, L3, 134845, 0.0019351907119808942, 0.0038703814239617884, 0.9980659818257166)


def test_inputs_not_modified():
    x1 = [3.0, 1.0, 2.0]
    x2 = [6.0, 4.0, 5.0]
    mann_whitney_u_test(x1, x2, DIFFERS)
    assert x1 == [3.0, 1.0, 2.0]
    assert x2 == [6.0, 4.0, 5.0]


def test_labeled_merge():
    merged, labels = labeled_merge([1, 3, 5], [2, 3, 6, 7])
    assert merged == [1, 2, 3, 3, 5, 6, 7]
    assert labels == [1, 2, 2, 1, 1, 2, 2]


def test_labeled_merge_one_empty():
    merged, labels = labeled_merge([], [1, 2])
    assert merged == [1, 2]
    assert labels == [2, 2]


def test_tie_correction():
    assert tie_correction([1, 1, 1]) == 0.0
    assert tie_correction([2, 3, 1]) == 6.0 + 24.0
    assert tie_correction([]) == 0.0