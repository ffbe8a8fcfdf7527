"""
basicstats: descriptive statistics over 1D numeric samples.

Top-level API keeps imports lazy (numpy loads on first use):

    from basicstats import mean, median, percentile
    mean([1, 2, 3, 4, 5])            # 3.0
    percentile([1, 2, 3, 4, 5], 50)  # 3.0

    from basicstats import confidence_interval
    low, high = confidence_interval(sample, mean, 95, seed=42)

    from basicstats import Stats  # stateful convenience wrapper
    Stats([1, 2, 3]).describe()
"""

from importlib import import_module
from importlib.metadata import version, PackageNotFoundError as _PNF
from typing import TYPE_CHECKING

try:
	__version__ = version("basicstats")
except _PNF:
	__version__ = "0.0.0+local"

_STATS_EXPORTS = {
	"sum", "mean", "geo_mean", "median",
	"first_quartile", "third_quartile",
	"variance", "stdev", "coeff_of_variation",
	"range", "iqr", "describe",
	"percentile", "percentiles",
	"filter", "filter_values", "filter_by", "outliers_iqr",
	"resample", "bootstrap_distribution", "bootstrap_interval",
	"bootstrap_interval_diff", "confidence_interval", "ConfidenceInterval",
	"coerce_sample", "BootstrapConfig", "Stats",
}

_ERROR_EXPORTS = {"StatsError", "OutOfRangeError", "InvalidArgumentError"}

__all__ = [
	"__version__",
	"configure_logging",
	# namespaces
	"imports", "logutil", "errors", "stats",
	*sorted(_ERROR_EXPORTS),
	*sorted(_STATS_EXPORTS),
]


def __getattr__(name: str):
	if name == "configure_logging":
		return import_module("basicstats.logutil").configure_logging

	# --- namespaces (lazy) ---
	if name in {"imports", "logutil", "errors", "stats"}:
		return import_module(f"basicstats.{name}")

	# --- lazy re-exports ---
	if name in _ERROR_EXPORTS:
		return getattr(import_module("basicstats.errors"), name)
	if name in _STATS_EXPORTS:
		return getattr(import_module("basicstats.stats"), name)

	raise AttributeError(f"module 'basicstats' has no attribute {name!r}")


# Help type-checkers without eager imports
if TYPE_CHECKING:
	from . import imports, logutil, errors, stats  # noqa: F401
	from .logutil import configure_logging  # noqa: F401
	from .errors import StatsError, OutOfRangeError, InvalidArgumentError  # noqa: F401
	from .stats import (  # noqa: F401
		sum, mean, geo_mean, median, first_quartile, third_quartile,
		variance, stdev, coeff_of_variation, range, iqr, describe,
		percentile, percentiles, filter, filter_values, filter_by, outliers_iqr,
		resample, bootstrap_distribution, bootstrap_interval,
		bootstrap_interval_diff, confidence_interval, ConfidenceInterval,
		coerce_sample, BootstrapConfig, Stats,
	)
