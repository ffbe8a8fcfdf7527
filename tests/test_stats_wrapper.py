"""Integration tests for :class:`basicstats.stats.wrapper.Stats`."""

from __future__ import annotations

import math

import pytest

np = pytest.importorskip("numpy")


from basicstats import BootstrapConfig, Stats  # noqa: E402
from basicstats.stats import (  # noqa: E402
	bootstrap_interval, describe, mean, outliers_iqr, percentiles, resample,
)


def test_stats_workflow_matches_function_equivalents():
	data = [1, 2, 3, 4, 5, 6, 7, 100]
	st = Stats(data)

	summary = st.describe()
	expected = describe(data)
	for key, value in expected.items():
		assert math.isclose(summary[key], value, rel_tol=1e-12, abs_tol=1e-12)

	assert st.mean() == summary["mean"]
	assert st.iqr() == st.third_quartile() - st.first_quartile()
	assert len(st) == 8

	np.testing.assert_allclose(st.percentiles([25, 50, 75]), percentiles(data, [25, 50, 75]))
	assert st.percentile(50) == percentiles(data, [50])[0]

	np.testing.assert_array_equal(st.outliers(), outliers_iqr(data))
	assert st.filter(lambda v: v > 6).tolist() == [7.0, 100.0]
	assert st.filter(lambda c: c == "x", criteria=[0] * 8).size == 0


def test_stats_filter_with_criteria():
	st = Stats([1, 2, 3, 4, 5])
	assert st.filter(lambda c: c > 30, criteria=[10, 20, 30, 40, 50]).tolist() == [4.0, 5.0]


def test_stats_bootstrap_uses_config():
	data = [2.1, 2.4, 1.9, 2.8, 3.0, 2.2]
	cfg = BootstrapConfig(iterations=200, confidence_level=90, seed=7)
	st = Stats(data, bootstrap=cfg)

	assert st.confidence_interval() == bootstrap_interval(data, mean, 90, 200, seed=7)
	wider = st.confidence_interval(confidence_level=99)
	narrow = st.confidence_interval()
	assert wider.low <= narrow.low and wider.high >= narrow.high

	np.testing.assert_array_equal(st.resample(), resample(data, 7))


def test_stats_dataframe_column():
	pd = pytest.importorskip("pandas")
	df = pd.DataFrame({"a": [1, 2, 3], "b": [2, 4, 6]})
	st = Stats(df, column="b")
	assert st.mean() == 4.0
	assert st.range() == 4.0
	assert st.sum() == 12.0


def test_stats_empty_sample():
	st = Stats([])
	assert st.mean() == 0.0
	assert st.confidence_interval() == (0.0, 0.0)
	assert st.resample().size == 0
