# src/basicstats/stats/outliers.py

from __future__ import annotations

from typing import List

from ..errors import InvalidArgumentError
from ..logutil import get_logger
from .aggregate import first_quartile, third_quartile
from .coerce import ColumnLike, SampleLike, coerce_sample

from ..imports import numpy as np  # type: ignore

LOG = get_logger(__name__)

__all__ = ["outliers_iqr"]


def outliers_iqr(
		data: SampleLike,
		*,
		column: ColumnLike = None,
		threshold: float = 1.5,
		max_iterations: int = 5
) -> "np.ndarray":
	"""
	Find outliers with Tukey fences, peeling them off in repeated passes.

	Each pass computes Q1 and Q3 with this package's quartile split, flags the
	values outside ``[Q1 - threshold * IQR, Q3 + threshold * IQR]`` and removes
	them before the next pass. Stops after ``max_iterations`` passes or when a
	pass flags nothing.

	:param data: Sample.
	:param column: Column selector for DataFrame input.
	:param threshold: IQR multiplier for the fences (non-negative).
	:param max_iterations: Maximum number of passes (positive).
	:return: Flagged values, in input order within each pass and passes in order.
	:raises InvalidArgumentError: On a negative threshold or a non-positive pass count.
	"""
	if threshold < 0:
		raise InvalidArgumentError(f"threshold must be non-negative, got {threshold}")
	if max_iterations < 1:
		raise InvalidArgumentError(f"max_iterations must be positive, got {max_iterations}")

	x_work = coerce_sample(data, column=column)
	outs: List[float] = []
	for n_pass in range(max_iterations):
		# a lone value has an empty upper half, so its fences would be inverted
		if x_work.size < 2:
			break
		q1 = first_quartile(x_work)
		q3 = third_quartile(x_work)
		spread = q3 - q1
		lo, hi = q1 - threshold * spread, q3 + threshold * spread
		mask = (x_work < lo) | (x_work > hi)
		if not mask.any():
			break
		LOG.debug("outliers_iqr pass %d flagged %d value(s)", n_pass + 1, int(mask.sum()))
		outs.extend(x_work[mask].tolist())
		x_work = x_work[~mask]
	return np.asarray(outs, dtype=float)
