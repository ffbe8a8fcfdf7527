# src/basicstats/stats/filtering.py

"""Predicate filters that keep the original order of the sample."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union, overload

from ..errors import InvalidArgumentError
from .coerce import ColumnLike, SampleLike, coerce_sample

from ..imports import numpy as np  # type: ignore

__all__ = ["Predicate", "filter", "filter_values", "filter_by"]

Predicate = Callable[[float], Any]


def _mask(values: "np.ndarray", predicate: Predicate) -> "np.ndarray":
	return np.fromiter(
		(bool(predicate(v)) for v in values.tolist()),
		dtype=bool,
		count=values.size,
	)


def filter_values(data: SampleLike, predicate: Predicate, *, column: ColumnLike = None) -> "np.ndarray":
	"""
	Keep the values for which ``predicate`` holds.

	Like every function in this package the sample is promoted to float64, so
	integer input comes back as floats (``[4, 5]`` becomes ``array([4., 5.])``)
	and integers beyond 2**53 lose precision.

	:param data: Sample.
	:param predicate: Called with each value as a Python ``float``.
	:param column: Column selector for DataFrame input.
	:return: New float array, original order preserved.
	"""
	x = coerce_sample(data, column=column)
	return x[_mask(x, predicate)]


def filter_by(data: SampleLike, criteria: SampleLike, predicate: Predicate) -> "np.ndarray":
	"""
	Keep ``data[i]`` whenever ``predicate(criteria[i])`` holds.

	``data`` and ``criteria`` are parallel arrays, e.g. measured values and the
	temperature each one was taken at. The selected values are float64, as in
	:func:`filter_values`.

	:param data: Sample to select from.
	:param criteria: Co-indexed values the predicate is evaluated on.
	:param predicate: Called with each criteria value as a Python ``float``.
	:return: New float array with the selected ``data`` values in original order.
	:raises InvalidArgumentError: If the two sequences differ in length.
	"""
	x = coerce_sample(data)
	c = coerce_sample(criteria)
	if x.size != c.size:
		raise InvalidArgumentError(
			f"Data and criteria must be of the same size: {x.size} != {c.size}"
		)
	return x[_mask(c, predicate)]


@overload
def filter(data: SampleLike, predicate: Predicate) -> "np.ndarray": ...


@overload
def filter(data: SampleLike, criteria: SampleLike, predicate: Predicate) -> "np.ndarray": ...


def filter(
		data: SampleLike,
		criteria: Union[SampleLike, Predicate],
		predicate: Optional[Predicate] = None
) -> "np.ndarray":
	"""
	Filter a sample either by its own values or by a parallel criteria sequence.

	``filter(data, pred)`` is :func:`filter_values`; ``filter(data, criteria, pred)``
	is :func:`filter_by`. Both return a float64 array.

	:raises InvalidArgumentError: On mismatched lengths or a missing predicate.
	"""
	if predicate is None:
		if not callable(criteria):
			raise InvalidArgumentError("filter() needs a predicate callable.")
		return filter_values(data, criteria)
	return filter_by(data, criteria, predicate)  # type: ignore[arg-type]
