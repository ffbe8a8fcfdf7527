# src/basicstats/stats/__init__.py
"""
Descriptive statistics over 1D samples, split by concern.
"""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = [
	# aggregates
	"sum", "mean", "geo_mean", "median",
	"first_quartile", "third_quartile",
	"variance", "stdev", "coeff_of_variation",
	"range", "iqr", "describe",
	# percentiles
	"percentile", "percentiles",
	# filtering
	"filter", "filter_values", "filter_by", "outliers_iqr",
	# bootstrap
	"resample", "bootstrap_distribution", "bootstrap_interval",
	"bootstrap_interval_diff", "confidence_interval", "ConfidenceInterval",
	# helpers
	"coerce_sample", "BootstrapConfig",
	# class
	"Stats",
]

_MOD_OF = {
	"sum": "basicstats.stats.aggregate",
	"mean": "basicstats.stats.aggregate",
	"geo_mean": "basicstats.stats.aggregate",
	"median": "basicstats.stats.aggregate",
	"first_quartile": "basicstats.stats.aggregate",
	"third_quartile": "basicstats.stats.aggregate",
	"variance": "basicstats.stats.aggregate",
	"stdev": "basicstats.stats.aggregate",
	"coeff_of_variation": "basicstats.stats.aggregate",
	"range": "basicstats.stats.aggregate",
	"iqr": "basicstats.stats.aggregate",
	"describe": "basicstats.stats.summary",
	"percentile": "basicstats.stats.quantiles",
	"percentiles": "basicstats.stats.quantiles",
	"filter": "basicstats.stats.filtering",
	"filter_values": "basicstats.stats.filtering",
	"filter_by": "basicstats.stats.filtering",
	"outliers_iqr": "basicstats.stats.outliers",
	"resample": "basicstats.stats.bootstrap",
	"bootstrap_distribution": "basicstats.stats.bootstrap",
	"bootstrap_interval": "basicstats.stats.bootstrap",
	"bootstrap_interval_diff": "basicstats.stats.bootstrap",
	"confidence_interval": "basicstats.stats.bootstrap",
	"ConfidenceInterval": "basicstats.stats.bootstrap",
	"coerce_sample": "basicstats.stats.coerce",
	"BootstrapConfig": "basicstats.stats.config",
	"Stats": "basicstats.stats.wrapper",
}


def __getattr__(name: str):
	if name in _MOD_OF:
		mod = import_module(_MOD_OF[name])
		return getattr(mod, name)
	raise AttributeError(f"module 'basicstats.stats' has no attribute {name!r}")


if TYPE_CHECKING:
	from .aggregate import (  # noqa: F401
		sum, mean, geo_mean, median, first_quartile, third_quartile,
		variance, stdev, coeff_of_variation, range, iqr,
	)
	from .summary import describe  # noqa: F401
	from .quantiles import percentile, percentiles  # noqa: F401
	from .filtering import filter, filter_values, filter_by  # noqa: F401
	from .outliers import outliers_iqr  # noqa: F401
	from .bootstrap import (  # noqa: F401
		resample, bootstrap_distribution, bootstrap_interval,
		bootstrap_interval_diff, confidence_interval, ConfidenceInterval,
	)
	from .coerce import coerce_sample  # noqa: F401
	from .config import BootstrapConfig  # noqa: F401
	from .wrapper import Stats  # noqa: F401
