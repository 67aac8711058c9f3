"""Alternative hypotheses for location tests."""

from enum import IntEnum


class LocationHypothesis(IntEnum):
    """The alternative hypothesis of a location test such as a t-test or U-test.

    The default is DIFFERS, a two-tailed test.
    """

    LESS = -1
    """The location of the first sample is less than the second (one-tailed)."""

    DIFFERS = 0
    """The locations of the two samples are not equal (two-tailed)."""

    GREATER = 1
    """The location of the first sample is greater than the second (one-tailed)."""