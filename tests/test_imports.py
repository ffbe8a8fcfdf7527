"""Tests for the lazy import proxies and the lazy package namespace."""

from __future__ import annotations

import pytest

import basicstats
from basicstats.imports import LazyModule, lazy_module


def test_lazy_module_defers_import():
	proxy = lazy_module("json")
	assert not proxy.loaded
	assert proxy.available
	assert proxy.dumps([1]) == "[1]"
	assert proxy.loaded
	assert "loaded=" in repr(proxy)


def test_missing_module_has_install_hint():
	proxy = LazyModule("basicstats_missing_dependency", install="pip install nothing", reason="tests")
	assert not proxy.available
	with pytest.raises(ImportError, match="pip install nothing"):
		proxy.anything


def test_submodule_fallback():
	proxy = lazy_module("xml")
	assert proxy.dom.__name__ == "xml.dom"


def test_package_exports_resolve():
	pytest.importorskip("numpy")
	assert basicstats.mean([1, 2, 3]) == 2.0
	assert basicstats.stats.median is basicstats.median
	assert issubclass(basicstats.OutOfRangeError, basicstats.StatsError)
	with pytest.raises(AttributeError):
		basicstats.no_such_name  # noqa: B018
