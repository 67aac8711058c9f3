"""Statistics, diff and directory helpers for analysing benchmark results."""

__version__ = "0.1.0"