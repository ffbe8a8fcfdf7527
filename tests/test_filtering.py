"""Tests for predicate filtering."""

from __future__ import annotations

import pytest

np = pytest.importorskip("numpy")

from basicstats import InvalidArgumentError  # noqa: E402
from basicstats.stats import filter, filter_by, filter_values  # noqa: E402


def test_filter_single_predicate():
	result = filter([1, 2, 3, 4, 5], lambda x: x > 3)
	assert result.tolist() == [4.0, 5.0]


def test_filter_keeps_original_order():
	result = filter([5, 1, 4, 2, 3, 6], lambda x: x % 2 == 0)
	assert result.tolist() == [4.0, 2.0, 6.0]


def test_filter_with_criteria():
	result = filter([1, 2, 3, 4, 5], [10, 20, 30, 40, 50], lambda c: c > 30)
	assert result.tolist() == [4.0, 5.0]


def test_filter_with_criteria_length_mismatch():
	with pytest.raises(InvalidArgumentError):
		filter([1, 2], [1], lambda c: c > 0)
	with pytest.raises(ValueError):
		filter_by([1], [1, 2], lambda c: c > 0)


def test_filter_requires_callable():
	with pytest.raises(InvalidArgumentError):
		filter([1, 2, 3], [1, 2, 3])


def test_filter_does_not_mutate_inputs():
	data = np.array([3.0, 1.0, 2.0])
	criteria = [0, 1, 0]
	out = filter_by(data, criteria, bool)
	out[:] = -1
	np.testing.assert_array_equal(data, [3.0, 1.0, 2.0])
	assert criteria == [0, 1, 0]


def test_filter_empty_and_no_match():
	assert filter_values([], lambda x: True).size == 0
	assert filter_values([1, 2, 3], lambda x: x > 10).size == 0
	assert filter_by([], [], lambda c: True).size == 0


def test_predicate_receives_python_floats():
	seen = []

	def predicate(value):
		seen.append(type(value))
		return True

	filter_values(np.array([1, 2], dtype=np.int32), predicate)
	assert seen == [float, float]


def test_filter_promotes_integers_to_float():
	result = filter(np.array([1, 2, 3, 4, 5], dtype=np.int64), lambda x: x > 3)
	assert result.dtype == np.float64
	np.testing.assert_array_equal(result, [4, 5])
	assert filter_by([1, 2], [0, 1], bool).dtype == np.float64
