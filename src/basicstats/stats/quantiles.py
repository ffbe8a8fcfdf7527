# src/basicstats/stats/quantiles.py

from __future__ import annotations

import math
from typing import Iterable

from ..errors import OutOfRangeError
from .coerce import ColumnLike, SampleLike, coerce_sample

from ..imports import numpy as np  # type: ignore

__all__ = ["percentile", "percentiles"]


def _check_rank(p: float) -> float:
	p = float(p)
	if not 0.0 <= p <= 100.0:
		raise OutOfRangeError(f"Percentile rank must lie within [0, 100], got {p}")
	return p


def _interpolate(s: "np.ndarray", p: float) -> float:
	"""Linear interpolation between closest ranks of an already sorted, non-empty array."""
	rank = p / 100.0 * (s.size - 1)
	lower = math.floor(rank)
	upper = math.ceil(rank)
	if upper >= s.size:
		return float(s[lower])
	weight = rank - lower
	return float(s[lower] + weight * (s[upper] - s[lower]))


def percentile(data: SampleLike, p: float, *, column: ColumnLike = None) -> float:
	"""
	Percentile by linear interpolation between closest ranks (Hyndman-Fan type 7,
	the NumPy/Excel ``PERCENTILE.INC`` rule).

	The sample is sorted into a private copy; with ``rank = p/100 * (n-1)`` the
	result is ``s[floor(rank)] + (rank - floor(rank)) * (s[ceil(rank)] - s[floor(rank)])``.

	:param data: Sample.
	:param p: Percentile rank within ``[0, 100]``.
	:param column: Column selector for DataFrame input.
	:return: Interpolated value, ``0.0`` for an empty sample whatever ``p`` is.
	:raises OutOfRangeError: If ``p`` lies outside ``[0, 100]`` (non-empty sample).
	"""
	x = coerce_sample(data, column=column)
	if x.size == 0:
		return 0.0
	return _interpolate(np.sort(x), _check_rank(p))


def percentiles(data: SampleLike, ranks: Iterable[float], *, column: ColumnLike = None) -> "np.ndarray":
	"""Vectorised :func:`percentile`: sorts once, returns one value per rank."""
	x = coerce_sample(data, column=column)
	ranks = list(ranks)
	if x.size == 0:
		return np.zeros(len(ranks), dtype=float)
	s = np.sort(x)
	return np.asarray([_interpolate(s, _check_rank(p)) for p in ranks], dtype=float)
