# src/basicstats/stats/aggregate.py

"""
Aggregate statistics over a single sample.

Every function promotes the sample to float64 and returns a Python ``float``.
An empty sample is not an error: each function returns ``0.0`` for it, so a
caller that must tell "no data" apart from a genuine zero checks the length
first.

Quartiles follow one fixed split of the sorted sample: the lower half holds
the first ``ceil(n/2)`` values (the middle value included for odd ``n``) and
the upper half the last ``floor(n/2)`` values.
"""

from __future__ import annotations

from typing import Tuple

from .coerce import ColumnLike, SampleLike, coerce_sample

from ..imports import numpy as np  # type: ignore

__all__ = [
	"sum", "mean", "geo_mean", "median",
	"first_quartile", "third_quartile",
	"variance", "stdev", "coeff_of_variation",
	"range", "iqr",
]


# --- helpers on already coerced arrays ---
def _median_sorted(s: "np.ndarray") -> float:
	n = s.size
	if n == 0:
		return 0.0
	mid = n // 2
	if n % 2 == 0:
		return float((s[mid - 1] + s[mid]) / 2.0)
	return float(s[mid])


def _halves(x: "np.ndarray") -> Tuple["np.ndarray", "np.ndarray"]:
	s = np.sort(x)
	split = s.size - s.size // 2
	return s[:split], s[split:]


def _mean(x: "np.ndarray") -> float:
	if x.size == 0:
		return 0.0
	return float(np.sum(x) / x.size)


def _variance(x: "np.ndarray") -> float:
	if x.size == 0:
		return 0.0
	m = _mean(x)
	return float(np.sum((x - m) ** 2) / x.size)


# --- public API ---
def sum(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""Arithmetic sum; ``0.0`` for an empty sample."""
	return float(np.sum(coerce_sample(data, column=column)))


def mean(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""Arithmetic mean (sum/count); ``0.0`` for an empty sample."""
	return _mean(coerce_sample(data, column=column))


def geo_mean(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""
	Geometric mean: the product of the values raised to ``1/count``.

	Values are expected to be positive. Nothing is validated; a negative product
	gives NaN and an overflowing one gives inf, following NumPy rules.

	:param data: Sample.
	:param column: Column selector for DataFrame input.
	:return: Geometric mean, ``0.0`` for an empty sample.
	"""
	x = coerce_sample(data, column=column)
	if x.size == 0:
		return 0.0
	with np.errstate(over="ignore", invalid="ignore"):
		return float(np.power(np.prod(x), 1.0 / x.size))


def median(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""
	Median of a sorted private copy of the sample.

	Even counts average the two middle values. The caller's container is left
	untouched. ``0.0`` for an empty sample.
	"""
	return _median_sorted(np.sort(coerce_sample(data, column=column)))


def first_quartile(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""Median of the lower ``ceil(n/2)`` sorted values; ``0.0`` for an empty sample."""
	lower, _ = _halves(coerce_sample(data, column=column))
	return _median_sorted(lower)


def third_quartile(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""
	Median of the upper ``floor(n/2)`` sorted values.

	A single-value sample has an empty upper half, so the result is ``0.0``
	just like for an empty sample.
	"""
	_, upper = _halves(coerce_sample(data, column=column))
	return _median_sorted(upper)


def variance(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""Population variance (divides by count, not count-1); ``0.0`` for an empty sample."""
	return _variance(coerce_sample(data, column=column))


def stdev(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""Population standard deviation, the square root of :func:`variance`."""
	return float(np.sqrt(variance(data, column=column)))


def coeff_of_variation(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""
	Coefficient of variation, ``stdev / mean``.

	``0.0`` for an empty sample. A non-empty sample with zero mean is not
	rejected: the result is inf (or NaN when the spread is zero too).
	"""
	x = coerce_sample(data, column=column)
	if x.size == 0:
		return 0.0
	with np.errstate(divide="ignore", invalid="ignore"):
		return float(np.sqrt(np.float64(_variance(x))) / np.float64(_mean(x)))


def range(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""Spread between the largest and the smallest value; ``0.0`` for an empty sample."""
	x = coerce_sample(data, column=column)
	if x.size == 0:
		return 0.0
	return float(np.max(x) - np.min(x))


def iqr(data: SampleLike, *, column: ColumnLike = None) -> float:
	"""Interquartile range, ``third_quartile - first_quartile``; ``0.0`` for an empty sample."""
	x = coerce_sample(data, column=column)
	if x.size == 0:
		return 0.0
	lower, upper = _halves(x)
	return _median_sorted(upper) - _median_sorted(lower)
