# src/basicstats/stats/bootstrap.py

"""
Bootstrap resampling and percentile confidence intervals.

A single :class:`numpy.random.Generator` is built per call from ``seed`` and
shared by all iterations, so passing an int seed reproduces the whole interval.
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple, Optional, Union

from ..errors import InvalidArgumentError, OutOfRangeError
from ..logutil import get_logger
from .coerce import ColumnLike, SampleLike, coerce_sample
from .quantiles import _interpolate

from ..imports import numpy as np  # type: ignore

LOG = get_logger(__name__)

__all__ = [
	"DEFAULT_ITERATIONS", "SeedLike", "Statistic", "ConfidenceInterval",
	"resample", "bootstrap_distribution",
	"bootstrap_interval", "bootstrap_interval_diff", "confidence_interval",
]

DEFAULT_ITERATIONS = 1024

SeedLike = Optional[Union[int, "np.random.Generator"]]  # type: ignore[name-defined]
Statistic = Callable[["np.ndarray"], float]


class ConfidenceInterval(NamedTuple):
	"""Bounds of a bootstrapped statistic; unpacks as ``low, high``."""

	low: float
	high: float

	@property
	def width(self) -> float:
		return self.high - self.low


# --- validation ---
def check_confidence_level(confidence_level: float) -> float:
	"""Return ``confidence_level`` as float or raise :class:`OutOfRangeError` outside ``(0, 100)``."""
	level = float(confidence_level)
	if not 0.0 < level < 100.0:
		raise OutOfRangeError(
			f"Confidence level must lie strictly between 0 and 100, got {confidence_level}"
		)
	return level


def check_iterations(iterations: Any) -> int:
	"""Return ``iterations`` as int or raise :class:`InvalidArgumentError` unless a positive integer."""
	if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)):
		raise InvalidArgumentError(f"iterations must be an integer, got {type(iterations).__name__}")
	if iterations < 1:
		raise InvalidArgumentError(f"iterations must be positive, got {iterations}")
	return int(iterations)


# --- resampling ---
def _generator(seed: SeedLike) -> "np.random.Generator":
	# default_rng hands an existing Generator back unchanged
	return np.random.default_rng(seed)


def _draw(x: "np.ndarray", rng: "np.random.Generator") -> "np.ndarray":
	return x[rng.integers(0, x.size, size=x.size)]


def _evaluate(statistic: Statistic, values: "np.ndarray") -> float:
	try:
		return float(statistic(values))
	except Exception:
		LOG.exception("Statistic %r failed on a resample of size %d", statistic, values.size)
		raise


def resample(data: SampleLike, seed: SeedLike = None, *, column: ColumnLike = None) -> "np.ndarray":
	"""
	Draw a bootstrap resample: same length, uniform selection with replacement.

	:param data: Source sample.
	:param seed: ``None`` for OS entropy, an int for a reproducible draw, or an
				 existing ``numpy.random.Generator`` to continue its stream.
	:param column: Column selector for DataFrame input.
	:return: New float array; duplicates are expected and some values may be missing.
			 An empty sample gives an empty array and consumes no randomness.
	"""
	x = coerce_sample(data, column=column)
	if x.size == 0:
		return np.empty(0, dtype=float)
	return _draw(x, _generator(seed))


def bootstrap_distribution(
		data: SampleLike,
		statistic: Statistic,
		iterations: int = DEFAULT_ITERATIONS,
		*,
		seed: SeedLike = None,
		column: ColumnLike = None
) -> "np.ndarray":
	"""
	Evaluate ``statistic`` on ``iterations`` independent resamples of ``data``.

	:return: Array of the bootstrapped statistic values (empty for an empty sample).
	:raises InvalidArgumentError: If ``iterations`` is not a positive integer.
	"""
	iterations = check_iterations(iterations)
	x = coerce_sample(data, column=column)
	if x.size == 0:
		return np.empty(0, dtype=float)

	rng = _generator(seed)
	LOG.debug("Bootstrapping %r: %d iterations over %d values", statistic, iterations, x.size)
	results = np.empty(iterations, dtype=float)
	for i in range(iterations):
		results[i] = _evaluate(statistic, _draw(x, rng))
	return results


def _interval(results: "np.ndarray", level: float) -> ConfidenceInterval:
	s = np.sort(results)
	tail = (100.0 - level) / 2.0
	return ConfidenceInterval(_interpolate(s, tail), _interpolate(s, 100.0 - tail))


def bootstrap_interval(
		data: SampleLike,
		statistic: Statistic,
		confidence_level: float,
		iterations: int = DEFAULT_ITERATIONS,
		*,
		seed: SeedLike = None,
		column: ColumnLike = None
) -> ConfidenceInterval:
	"""
	Two-tailed percentile bootstrap interval of ``statistic`` over one sample.

	Each iteration applies ``statistic`` to a fresh resample. The bounds are the
	``(100 - level)/2`` and ``100 - (100 - level)/2`` percentiles of the collected
	values, interpolated like :func:`basicstats.stats.quantiles.percentile`;
	a 95 % interval uses the 2.5th and 97.5th percentiles.

	:param data: Sample.
	:param statistic: Callable mapping a float array to a number (e.g. ``mean``).
	:param confidence_level: Percentage strictly between 0 and 100.
	:param iterations: Number of resamples (default 1024).
	:param seed: Seed or generator, see :func:`resample`.
	:param column: Column selector for DataFrame input.
	:return: ``ConfidenceInterval(low, high)``; ``(0.0, 0.0)`` for an empty sample.
	:raises OutOfRangeError: If ``confidence_level`` is outside ``(0, 100)``.
	:raises InvalidArgumentError: If ``iterations`` is not a positive integer.
	"""
	level = check_confidence_level(confidence_level)
	iterations = check_iterations(iterations)
	x = coerce_sample(data, column=column)
	if x.size == 0:
		return ConfidenceInterval(0.0, 0.0)
	results = bootstrap_distribution(x, statistic, iterations, seed=seed)
	return _interval(results, level)


def bootstrap_interval_diff(
		data1: SampleLike,
		data2: SampleLike,
		statistic: Statistic,
		confidence_level: float,
		iterations: int = DEFAULT_ITERATIONS,
		*,
		seed: SeedLike = None
) -> ConfidenceInterval:
	"""
	Bootstrap interval of ``statistic(data1) - statistic(data2)``.

	Both samples are resampled independently on every iteration and the
	difference of the two statistic values is collected; the interval is then
	taken over the differences exactly as in :func:`bootstrap_interval`.

	:return: ``ConfidenceInterval(low, high)``; ``(0.0, 0.0)`` if either sample is empty.
	:raises OutOfRangeError: If ``confidence_level`` is outside ``(0, 100)``.
	:raises InvalidArgumentError: If ``iterations`` is not a positive integer.
	"""
	level = check_confidence_level(confidence_level)
	iterations = check_iterations(iterations)
	x1 = coerce_sample(data1)
	x2 = coerce_sample(data2)
	if x1.size == 0 or x2.size == 0:
		return ConfidenceInterval(0.0, 0.0)

	rng = _generator(seed)
	LOG.debug(
		"Bootstrapping difference of %r: %d iterations over %d and %d values",
		statistic, iterations, x1.size, x2.size
	)
	diffs = np.empty(iterations, dtype=float)
	for i in range(iterations):
		r1 = _draw(x1, rng)
		r2 = _draw(x2, rng)
		diffs[i] = _evaluate(statistic, r1) - _evaluate(statistic, r2)
	return _interval(diffs, level)


def confidence_interval(data: SampleLike, *args: Any, **kwargs: Any) -> ConfidenceInterval:
	"""
	Bootstrap confidence interval for one sample or for the difference of two.

	``confidence_interval(sample, statistic, level, iterations=1024, *, seed=None)``
	calls :func:`bootstrap_interval`;
	``confidence_interval(sample1, sample2, statistic, level, iterations=1024, *, seed=None)``
	calls :func:`bootstrap_interval_diff`. The form is chosen by whether the
	second argument is callable.
	"""
	if args and callable(args[0]):
		return bootstrap_interval(data, *args, **kwargs)
	if not args and callable(kwargs.get("statistic")) and "data2" not in kwargs:
		return bootstrap_interval(data, **kwargs)
	return bootstrap_interval_diff(data, *args, **kwargs)
