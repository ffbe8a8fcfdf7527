# src/basicstats/stats/summary.py

from __future__ import annotations

from typing import Dict

from . import aggregate
from .coerce import ColumnLike, SampleLike, coerce_sample

from ..imports import numpy as np  # type: ignore

__all__ = ["describe"]


def describe(data: SampleLike, *, column: ColumnLike = None) -> Dict[str, float]:
	"""
	Every aggregate statistic of a sample in one dict.

	:param data: Sample.
	:param column: Column selector for DataFrame input.
	:return: count, sum, mean, geo_mean, median, q1, q3, min, max, range, iqr,
			 variance, stdev (population) and coeff_var. All zeros for an empty sample.
	"""
	x = coerce_sample(data, column=column)
	empty = x.size == 0
	return {
		"count": int(x.size),
		"sum": aggregate.sum(x),
		"mean": aggregate.mean(x),
		"geo_mean": aggregate.geo_mean(x),
		"median": aggregate.median(x),
		"q1": aggregate.first_quartile(x),
		"q3": aggregate.third_quartile(x),
		"min": 0.0 if empty else float(np.min(x)),
		"max": 0.0 if empty else float(np.max(x)),
		"range": aggregate.range(x),
		"iqr": aggregate.iqr(x),
		"variance": aggregate.variance(x),
		"stdev": aggregate.stdev(x),
		"coeff_var": aggregate.coeff_of_variation(x),
	}
