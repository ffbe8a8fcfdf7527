# src/basicstats/imports/lazyproxy.py

from __future__ import annotations

import importlib
import importlib.util
from types import ModuleType
from typing import Any, Optional

__all__ = ["LazyModule", "lazy_module"]


class LazyModule:
	"""
	Proxy that defers importing a third-party module until it is first used.

	Notes
	-----
	* Attribute access triggers the import; ``available`` only checks that it can be found.
	* A missing module raises an ImportError carrying an install hint.
	* For type checkers use ``if TYPE_CHECKING: import numpy as np`` in your modules.
	"""
	def __init__(
			self,
			name: str,
			*,
			install: Optional[str] = None,
			reason: Optional[str] = None
	) -> None:
		self._name = name
		self._mod: Optional[ModuleType] = None
		self._found: Optional[bool] = None
		self._install = install
		self._reason = reason

	@property
	def loaded(self) -> bool:
		"""True once the underlying module has been imported through this proxy."""
		return self._mod is not None

	@property
	def available(self) -> bool:
		"""
		Whether the module can be imported, without importing it.

		Used to skip container checks (e.g. ``isinstance(x, pd.Series)``) when an
		optional library is absent instead of failing on the import.
		"""
		if self._mod is not None:
			return True
		if self._found is None:
			try:
				self._found = importlib.util.find_spec(self._name) is not None
			except (ImportError, ValueError):
				self._found = False
		return self._found

	def _missing_message(self) -> str:
		parts = [f"Dependency module '{self._name}' is not installed."]
		if self._reason:
			parts.append(f"Needed for {self._reason}.")
		if self._install:
			parts.append(f"Install with '{self._install}'.")
		return " ".join(parts)

	def _load(self) -> ModuleType:
		if self._mod is None:
			try:
				self._mod = importlib.import_module(self._name)
			except ImportError as exc:
				raise ImportError(self._missing_message()) from exc
		return self._mod

	def __getattr__(self, item: str) -> Any:
		mod = self._load()
		try:
			return getattr(mod, item)
		except AttributeError:
			pass

		full_name = f"{self._name}.{item}"
		try:
			submod = importlib.import_module(full_name)
		except ImportError as exc:
			raise AttributeError(
				f"Module {self._name!r} has no attribute {item!r} "
				f"and importing submodule {full_name!r} failed."
			) from exc

		setattr(mod, item, submod)
		return submod

	def __repr__(self) -> str:
		state = "not loaded" if self._mod is None else f"loaded={self._mod!r}"
		return f"<LazyModule name={self._name!r} {state}>"


def lazy_module(
		name: str, *, install: Optional[str] = None, reason: Optional[str] = None
) -> LazyModule:
	"""
	Create a lazy module proxy.

	:param name: Fully qualified module name.
	:param install: Optional installation hint for the ImportError message.
	:param reason: Optional context why the dependency is needed.
	:return: :class:`LazyModule` instance.
	"""
	return LazyModule(name, install=install, reason=reason)
