# src/basicstats/imports/__init__.py

from __future__ import annotations

from .lazyproxy import LazyModule, lazy_module

# numpy does every computation; pandas only widens the accepted input containers
np = numpy = lazy_module("numpy", install="pip install numpy", reason="numerical arrays and random resampling")
pd = pandas = lazy_module("pandas", install="pip install pandas", reason="Series/DataFrame samples")

__all__ = [
	"LazyModule", "lazy_module",
	"np", "numpy", "pd", "pandas",
]
