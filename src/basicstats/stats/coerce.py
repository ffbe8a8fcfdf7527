# src/basicstats/stats/coerce.py
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from ..errors import InvalidArgumentError
from ..logutil import get_logger
from ..imports import numpy as np  # type: ignore
from ..imports import pandas as pd  # type: ignore

LOG = get_logger(__name__)

__all__ = ["SampleLike", "ColumnLike", "coerce_sample"]

ColumnLike = Optional[Union[int, str]]
ArrayLike1D = Union[Sequence[float], "np.ndarray", "pd.Series"]  # type: ignore[name-defined]
SampleLike = Union[ArrayLike1D, "pd.DataFrame", Mapping[Any, float]]  # type: ignore[name-defined]


# --- Core Conversion Helpers ---
def _is_pandas_df(obj: Any) -> bool:
	return pd.available and isinstance(obj, pd.DataFrame)  # type: ignore[attr-defined]


def _is_pandas_series(obj: Any) -> bool:
	return pd.available and isinstance(obj, pd.Series)  # type: ignore[attr-defined]


def _ensure_numeric(a: "np.ndarray") -> "np.ndarray":
	"""Reject bool/object/string arrays, then promote to float64."""
	if a.size and not np.issubdtype(a.dtype, np.number):
		raise InvalidArgumentError(f"Expected numeric data, got dtype={a.dtype!r}")
	if np.issubdtype(a.dtype, np.complexfloating):
		raise InvalidArgumentError("Complex samples are not supported.")
	return a.astype(float, copy=False)


def _to_array(values: Any) -> "np.ndarray":
	try:
		return np.asarray(values)
	except (TypeError, ValueError) as exc:
		raise InvalidArgumentError(f"Could not convert data to an array: {exc}") from exc


def _from_dataframe(df: "pd.DataFrame", column: ColumnLike) -> "np.ndarray":  # type: ignore[name-defined]
	if df.shape[1] == 1 and column is None:
		arr = df.iloc[:, 0].to_numpy()
	else:
		if column is None:
			raise InvalidArgumentError(
				f"DataFrame has {df.shape[1]} columns; please specify `column` (name or 0-based index)."
			)
		try:
			col = df.iloc[:, column] if isinstance(column, int) else df[column]
		except (IndexError, KeyError) as exc:
			LOG.error("Failed to select column %r: %s", column, exc)
			raise InvalidArgumentError(f"Invalid column selector: {column!r}") from exc
		arr = col.to_numpy()
	return _ensure_numeric(_to_array(arr))


def _from_nd_array(a: "np.ndarray") -> "np.ndarray":
	if a.ndim == 0:
		raise InvalidArgumentError("Scalar is not valid; expected 1D array-like")
	if a.ndim > 1:
		raise InvalidArgumentError(f"Expected 1D array-like; got ndim={a.ndim}")
	return _ensure_numeric(a)


def coerce_sample(data: SampleLike, *, column: ColumnLike = None) -> "np.ndarray":
	"""
	Convert a sample container to a 1D float64 numpy array.

	Accepts: sequence/ndarray/Series/Mapping and a single-column DataFrame.
	For a DataFrame with several columns you must specify ``column`` (name or index).
	Mapping values are used in insertion order. Empty input is valid and yields an
	empty array; the aggregate functions turn it into zero results.

	The returned array may share memory with an ndarray input that already is
	float64, so callers must not modify it in place (``np.sort`` copies).

	:param data: Input sample.
	:param column: Column selector when ``data`` is a DataFrame.
	:return: 1D float array.
	:raises InvalidArgumentError: On unsupported types, non-numeric or nested data,
								  or a multi-column DataFrame without ``column``.
	"""
	if isinstance(data, np.ndarray):
		return _from_nd_array(data)

	if isinstance(data, Sequence) and not isinstance(data, (str, bytes, bytearray)):
		return _from_nd_array(_to_array(list(data)))

	if isinstance(data, Mapping):
		return _from_nd_array(_to_array(list(data.values())))

	if _is_pandas_series(data):
		return _ensure_numeric(_to_array(data.to_numpy()))

	if _is_pandas_df(data):
		return _from_dataframe(data, column)  # type: ignore[arg-type]

	raise InvalidArgumentError(f"Unsupported data type: {type(data)}")
