"""Statistical distributions, hypothesis tests and descriptive statistics."""

__all__ = [
    "dist",
    "errors",
    "location",
    "mathx",
    "normaldist",
    "sample",
    "tdist",
    "ttest",
    "udist",
    "utest",
]