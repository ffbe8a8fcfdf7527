# src/basicstats/stats/wrapper.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from . import aggregate
from .bootstrap import ConfidenceInterval, SeedLike, Statistic, bootstrap_interval, resample
from .coerce import ColumnLike, SampleLike, coerce_sample
from .config import BootstrapConfig
from .summary import describe
from .filtering import Predicate, filter_by, filter_values
from .outliers import outliers_iqr
from .quantiles import percentile, percentiles

from ..imports import numpy as np  # type: ignore

__all__ = ["Stats"]


@dataclass
class Stats:
	"""
	Optional thin wrapper binding one sample to the module-level functions.

	Examples
	--------
	>>> st = Stats([1, 2, 3, 4, 5])
	>>> st.mean(), st.median(), st.variance()
	(3.0, 3.0, 2.0)
	>>> st.filter(lambda v: v > 3)
	array([4., 5.])
	>>> low, high = Stats([2.1, 2.4, 1.9, 2.8], bootstrap=BootstrapConfig(seed=7)).confidence_interval()

	Notes
	-----
	- ``data`` may be any sample container; ``column`` selects a DataFrame column.
	- Bootstrap defaults (iterations, level, seed) come from ``bootstrap``.
	- If you prefer stateless usage, call module-level functions instead.
	"""

	data: SampleLike
	column: ColumnLike = None
	bootstrap: BootstrapConfig = field(default_factory=BootstrapConfig)

	def vector(self) -> np.ndarray:
		"""Return the sample as a 1D float array."""
		return coerce_sample(self.data, column=self.column)

	def __len__(self) -> int:
		return int(self.vector().size)

	# --- aggregates ---
	def sum(self) -> float:
		return aggregate.sum(self.data, column=self.column)

	def mean(self) -> float:
		return aggregate.mean(self.data, column=self.column)

	def geo_mean(self) -> float:
		return aggregate.geo_mean(self.data, column=self.column)

	def median(self) -> float:
		return aggregate.median(self.data, column=self.column)

	def first_quartile(self) -> float:
		return aggregate.first_quartile(self.data, column=self.column)

	def third_quartile(self) -> float:
		return aggregate.third_quartile(self.data, column=self.column)

	def variance(self) -> float:
		return aggregate.variance(self.data, column=self.column)

	def stdev(self) -> float:
		return aggregate.stdev(self.data, column=self.column)

	def coeff_of_variation(self) -> float:
		return aggregate.coeff_of_variation(self.data, column=self.column)

	def range(self) -> float:
		return aggregate.range(self.data, column=self.column)

	def iqr(self) -> float:
		return aggregate.iqr(self.data, column=self.column)

	def describe(self) -> Dict[str, float]:
		"""Return every aggregate statistic of the stored sample."""
		return describe(self.data, column=self.column)

	# --- percentiles ---
	def percentile(self, p: float) -> float:
		return percentile(self.data, p, column=self.column)

	def percentiles(self, ranks: Iterable[float]) -> np.ndarray:
		return percentiles(self.data, ranks, column=self.column)

	# --- filtering ---
	def filter(self, predicate: Predicate, criteria: Optional[SampleLike] = None) -> np.ndarray:
		"""Filter by own values, or by a parallel ``criteria`` sequence when given."""
		if criteria is None:
			return filter_values(self.data, predicate, column=self.column)
		return filter_by(self.vector(), criteria, predicate)

	def outliers(self, *, threshold: float = 1.5, max_iterations: int = 5) -> np.ndarray:
		"""Identify outliers in the stored sample via Tukey fences."""
		return outliers_iqr(
			self.data,
			column=self.column,
			threshold=threshold,
			max_iterations=max_iterations
		)

	# --- bootstrap ---
	def resample(self, seed: SeedLike = None) -> np.ndarray:
		"""Draw one resample; falls back to the configured seed."""
		return resample(self.data, self.bootstrap.seed if seed is None else seed, column=self.column)

	def confidence_interval(
			self,
			statistic: Statistic = aggregate.mean,
			*,
			confidence_level: Optional[float] = None,
			iterations: Optional[int] = None
	) -> ConfidenceInterval:
		"""
		Bootstrap interval of ``statistic`` (default: mean) for the stored sample.

		Unset arguments fall back to :attr:`bootstrap`.
		"""
		cfg = self.bootstrap
		return bootstrap_interval(
			self.data,
			statistic,
			cfg.confidence_level if confidence_level is None else confidence_level,
			cfg.iterations if iterations is None else iterations,
			seed=cfg.seed,
			column=self.column
		)
