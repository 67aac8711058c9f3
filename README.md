# perfstats

Statistics for comparing benchmark results. It needs only the standard library.

## What is in it

- `perfstats.stats.normaldist`: `NormalDist(mu, sigma)` has `pdf`, `pdf_each`,
  `cdf`, `cdf_each`, `inv_cdf`, `rand(rng=None)` and `bounds` (mean ± 3 sigma).
  `STD_NORMAL` is the standard normal distribution.
- `perfstats.stats.tdist`: `TDist(v)` is Student's t-distribution. It has
  `pdf`, `cdf` and `bounds`.
- `perfstats.stats.udist`: `UDist(n1, n2, t=None)` is the exact distribution of
  the Mann-Whitney U statistic. `t` is an optional tie vector. It has `pmf`,
  `cdf`, `step`, `bounds` and `has_ties`. `make_umemo` builds the table of
  counts that is used when there are ties.
- `perfstats.stats.dist`: `DeltaDist(t)` is the Dirac delta distribution.
  `inv_cdf(dist)` returns the distribution's own `inv_cdf` method if it has
  one. Otherwise it returns a numerical inverse built from `cdf`.
  `rand(dist)` returns the distribution's own `rand` method if it has one.
  Otherwise it returns a sampler that goes through the inverse CDF.
- `perfstats.stats.sample`: `Sample(xs, weights=None, sorted=False)` has
  `bounds`, `sum`, `weight`, `mean`, `geo_mean`, `variance`, `std_dev`,
  `percentile` (Hyndman–Fan R8, where `pctile` is clamped to [0, 1]), `iqr`,
  `sort` and `copy`. The functions `bounds`, `mean`, `geo_mean`, `variance` and
  `std_dev` work on plain sequences.
- `perfstats.stats.ttest`: `two_sample_t_test`, `two_sample_welch_t_test`,
  `paired_t_test` and `one_sample_t_test`. Each returns a `TTestResult` with
  the fields `n1`, `n2`, `t`, `dof`, `alt_hypothesis` and `p`.
- `perfstats.stats.utest`: `mann_whitney_u_test` returns a
  `MannWhitneyUTestResult` with the fields `n1`, `n2`, `u`, `alt_hypothesis`
  and `p`. It uses the exact U distribution when both samples have at most
  `MANN_WHITNEY_EXACT_LIMIT` (50) values, or at most
  `MANN_WHITNEY_TIES_EXACT_LIMIT` (25) values when there are ties. Above those
  sizes it uses a normal approximation with tie and continuity correction.
  `labeled_merge` and `tie_correction` are also available.
- `perfstats.stats.location`: `LocationHypothesis` has the members `LESS`,
  `DIFFERS` and `GREATER`.
- `perfstats.stats.mathx`: numerical helpers. These are `math_sign`,
  `math_choose`, `math_lchoose`, `bisect`, `bisect_bool`, `series`,
  `math_beta` and `math_beta_inc`, the last being the regularised incomplete
  beta function.
- `perfstats.diff.diff(s1, s2)` returns `""` for equal strings. Otherwise it
  returns the output of `diff -u` run on the two strings. If no `diff` command
  is installed, it returns a short message that quotes both strings.
- `perfstats.basedir.find(pkg)` asks `go list` for the directory of a Go
  package. If that fails, it searches `GOPATH`, or the default from
  `default_gopath()`. It returns `""` if the directory is not found.

## Installation

```
pip install .
```

## Example

```python
from perfstats.stats.sample import Sample
from perfstats.stats.location import LocationHypothesis
from perfstats.stats.ttest import two_sample_welch_t_test
from perfstats.stats.utest import mann_whitney_u_test
from perfstats.stats.errors import StatsError

old = Sample([2, 1, 3, 4])
new = Sample([6, 5, 7, 9])

print(old.percentile(0.5), old.iqr())

result = two_sample_welch_t_test(old, new, LocationHypothesis.DIFFERS)
print(result.t, result.dof, result.p)

try:
    u = mann_whitney_u_test([2, 1, 3, 5], [12, 11, 13, 15], LocationHypothesis.LESS)
    print(u.u, u.p)   # 0.0  0.0142857...
except StatsError as err:
    print("test not applicable:", err)
```

## Errors

The tests raise subclasses of `StatsError` (itself a `ValueError`) from
`perfstats.stats.errors`:

- `SampleSizeError`: a sample is too small.
- `ZeroVarianceError`: the samples have no variance.
- `MismatchedSamplesError`: the two samples of a paired test differ in length.
- `SamplesEqualError`: every value is the same.

## Limits

- A weighted `Sample` has no variance or standard deviation. `variance` and
  `std_dev` raise `ValueError` for one.
- The package is a library only. It has no command-line tool, and it does not
  read or parse benchmark output files.

## Running the tests

```
pip install .[test]
pytest
```