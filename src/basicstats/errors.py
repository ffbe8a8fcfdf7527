# src/basicstats/errors.py

"""Exceptions raised by :mod:`basicstats`."""

from __future__ import annotations

__all__ = ["StatsError", "OutOfRangeError", "InvalidArgumentError"]


class StatsError(Exception):
	"""Base class for every error raised by the statistics helpers."""


class OutOfRangeError(StatsError, ValueError):
	"""
	A bounded scalar parameter fell outside its domain.

	Raised for percentile ranks outside ``[0, 100]`` and confidence levels
	outside ``(0, 100)``. Values are never clamped.
	"""


class InvalidArgumentError(StatsError, ValueError):
	"""
	An argument has the wrong shape or content.

	Typical causes: parallel sequences of different length, a non-positive
	iteration count, or data that cannot be coerced to a 1D numeric vector.
	"""
