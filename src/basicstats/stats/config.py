# src/basicstats/stats/config.py

"""Default parameters for bootstrap confidence intervals."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace as _dc_replace
from typing import Any, Mapping, Optional

from ..errors import InvalidArgumentError
from ..logutil import get_logger
from .bootstrap import DEFAULT_ITERATIONS, check_confidence_level, check_iterations

LOG = get_logger(__name__)

__all__ = ["BootstrapConfig", "DEFAULT_CONFIDENCE_LEVEL"]

DEFAULT_CONFIDENCE_LEVEL = 95.0


@dataclass(frozen=True)
class BootstrapConfig:
	"""
	Validated bootstrap settings.

	``seed=None`` draws from OS entropy; an int makes every interval reproducible.
	"""

	iterations: int = DEFAULT_ITERATIONS
	confidence_level: float = DEFAULT_CONFIDENCE_LEVEL
	seed: Optional[int] = None

	def __post_init__(self) -> None:
		check_iterations(self.iterations)
		object.__setattr__(self, "confidence_level", check_confidence_level(self.confidence_level))
		if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
			raise InvalidArgumentError(f"seed must be an integer or None, got {self.seed!r}")
		if self.seed is not None and self.seed < 0:
			raise InvalidArgumentError(f"seed must be non-negative, got {self.seed}")

	@staticmethod
	def _parse_int(value: str, *, name: str) -> int:
		try:
			return int(value.strip())
		except ValueError as exc:
			raise InvalidArgumentError(f"{name} must be an integer: {value!r}") from exc

	@classmethod
	def from_strings(
			cls,
			*,
			iterations: str = "",
			confidence_level: str = "",
			seed: str = ""
	) -> "BootstrapConfig":
		"""
		Parse INI/CLI style text values; blank strings keep the defaults.

		``confidence_level`` may carry a trailing ``%`` (``"99%"``).
		"""
		kwargs: dict = {}
		if iterations.strip():
			kwargs["iterations"] = cls._parse_int(iterations, name="iterations")
		if confidence_level.strip():
			text = confidence_level.strip().rstrip("%").strip()
			try:
				kwargs["confidence_level"] = float(text)
			except ValueError as exc:
				raise InvalidArgumentError(
					f"confidence_level must be a number: {confidence_level!r}"
				) from exc
		if seed.strip() and seed.strip().lower() not in {"none", "random"}:
			kwargs["seed"] = cls._parse_int(seed, name="seed")
		return cls(**kwargs)

	@classmethod
	def from_mapping(cls, values: Mapping[str, Any]) -> "BootstrapConfig":
		"""
		Build from a dict such as a parsed config section.

		String values go through :meth:`from_strings`; unknown keys are ignored with a warning.
		"""
		known = {f.name for f in fields(cls)}
		unknown = sorted(set(values) - known)
		if unknown:
			LOG.warning("Ignoring unknown bootstrap settings: %s", ", ".join(unknown))

		text = {k: v for k, v in values.items() if k in known and isinstance(v, str)}
		parsed = cls.from_strings(**text)
		typed = {k: v for k, v in values.items() if k in known and not isinstance(v, str)}
		return _dc_replace(parsed, **typed) if typed else parsed

	def replace(self, **changes: Any) -> "BootstrapConfig":
		"""Return a validated copy with ``changes`` applied."""
		return _dc_replace(self, **changes)
