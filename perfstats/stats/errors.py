"""Exceptions raised by the statistical tests."""


class StatsError(ValueError):
    """Base class for errors reported by statistical tests."""

    default_message = "statistics error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class SamplesEqualError(StatsError):
    """All sample values are equal, so the test is meaningless."""

    default_message = "all samples are equal"


class SampleSizeError(StatsError):
    """A sample is too small for the requested test."""

    default_message = "sample is too small"


class ZeroVarianceError(StatsError):
    """A sample has zero variance."""

    default_message = "sample has zero variance"


class MismatchedSamplesError(StatsError):
    """Paired samples have different lengths."""

    default_message = "samples have different lengths"