"""Tests for bootstrap resampling and confidence intervals."""

from __future__ import annotations

import logging

import pytest

np = pytest.importorskip("numpy")

from basicstats import (  # noqa: E402
	ConfidenceInterval, InvalidArgumentError, OutOfRangeError,
	bootstrap_distribution, bootstrap_interval, bootstrap_interval_diff,
	confidence_interval, mean, median, resample,
)

SAMPLE = [2.3, 4.1, 3.3, 5.8, 2.9, 4.4, 3.7, 6.1, 1.8, 3.9, 4.6, 5.0]


def test_resample_length_and_membership():
	for seed in range(20):
		out = resample(SAMPLE, seed)
		assert out.shape == (len(SAMPLE),)
		assert set(out.tolist()) <= set(SAMPLE)


def test_resample_is_reproducible_with_seed():
	np.testing.assert_array_equal(resample(SAMPLE, 123), resample(SAMPLE, 123))


def test_resample_accepts_generator():
	rng = np.random.default_rng(5)
	first = resample(SAMPLE, rng)
	second = resample(SAMPLE, rng)
	assert first.size == second.size == len(SAMPLE)


def test_resample_empty_draws_nothing():
	rng = np.random.default_rng(9)
	state = rng.bit_generator.state
	assert resample([], rng).size == 0
	assert rng.bit_generator.state == state


def test_resample_without_seed():
	out = resample([1, 2, 3])
	assert set(out.tolist()) <= {1.0, 2.0, 3.0}


def test_interval_bounds_ordered_and_contain_estimate():
	ci = confidence_interval(SAMPLE, mean, 95, seed=0)
	assert isinstance(ci, ConfidenceInterval)
	low, high = ci
	assert low <= mean(SAMPLE) <= high
	assert ci.width == high - low


def test_interval_matches_percentiles_of_distribution():
	dist = bootstrap_distribution(SAMPLE, mean, 500, seed=42)
	ci = bootstrap_interval(SAMPLE, mean, 90, 500, seed=42)
	expected = np.percentile(dist, [5, 95])
	assert ci.low == pytest.approx(expected[0])
	assert ci.high == pytest.approx(expected[1])


def test_interval_widens_with_confidence_level():
	previous = None
	for level in (50, 80, 90, 95, 99):
		ci = confidence_interval(SAMPLE, median, level, 256, seed=17)
		assert ci.low <= ci.high
		if previous is not None:
			assert ci.low <= previous.low
			assert ci.high >= previous.high
		previous = ci


def test_interval_reproducible_with_seed():
	assert confidence_interval(SAMPLE, mean, 95, seed=8) == confidence_interval(SAMPLE, mean, 95, seed=8)


@pytest.mark.parametrize("level", [0, 100, -5, 150])
def test_interval_rejects_bad_level(level):
	with pytest.raises(OutOfRangeError):
		confidence_interval(SAMPLE, mean, level)
	with pytest.raises(OutOfRangeError):
		confidence_interval(SAMPLE, SAMPLE, mean, level)


@pytest.mark.parametrize("iterations", [0, -3, 2.5, True])
def test_interval_rejects_bad_iterations(iterations):
	with pytest.raises(InvalidArgumentError):
		confidence_interval(SAMPLE, mean, 95, iterations)


def test_empty_sample_gives_zero_interval():
	calls = []

	def statistic(values):
		calls.append(values)
		return 1.0

	assert confidence_interval([], statistic, 95) == (0.0, 0.0)
	assert confidence_interval([], SAMPLE, statistic, 95) == (0.0, 0.0)
	assert confidence_interval(SAMPLE, [], statistic, 95) == (0.0, 0.0)
	assert calls == []


def test_iteration_count_controls_statistic_calls():
	calls = []

	def statistic(values):
		calls.append(values.size)
		return float(values.sum())

	bootstrap_interval(SAMPLE, statistic, 95, 37, seed=1)
	assert calls == [len(SAMPLE)] * 37


def test_two_sample_difference():
	shifted = [v + 10.0 for v in SAMPLE]
	ci = confidence_interval(shifted, SAMPLE, mean, 95, 512, seed=4)
	assert ci.low <= 10.0 <= ci.high
	assert ci.low > 0.0
	assert ci == bootstrap_interval_diff(shifted, SAMPLE, mean, 95, 512, seed=4)


def test_two_sample_identical_constant_samples():
	ci = confidence_interval([3, 3, 3], [3, 3], mean, 95, 64, seed=0)
	assert ci == (0.0, 0.0)


def test_keyword_form_dispatches_to_one_sample():
	ci = confidence_interval(SAMPLE, statistic=mean, confidence_level=95, iterations=64, seed=2)
	assert ci == bootstrap_interval(SAMPLE, mean, 95, 64, seed=2)


def test_statistic_errors_are_logged_and_raised(caplog):
	def broken(values):
		raise RuntimeError("boom")

	with caplog.at_level(logging.ERROR, logger="basicstats"):
		with pytest.raises(RuntimeError, match="boom"):
			confidence_interval(SAMPLE, broken, 95, 4, seed=0)
	assert any("failed on a resample" in record.getMessage() for record in caplog.records)
