# src/basicstats/logutil.py

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal, Optional, Union

PathLike = Union[str, Path]

ROOT_LOGGER = "basicstats"

ConsoleLevelName = Literal[
	"CRITICAL",
	"FATAL",
	"ERROR",
	"WARNING",
	"WARN",
	"INFO",
	"DEBUG",
	"NOTSET",
]

LevelLike = Union[int, ConsoleLevelName]


def _normalize_level(value: LevelLike, *, param_name: str) -> int:
	if isinstance(value, int):
		return value

	resolved = logging.getLevelName(str(value).upper())
	if isinstance(resolved, int):
		return resolved

	raise ValueError(f"Unknown logging level name for {param_name}: {value}")


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
	"""
	Return a package logger.

	The console handler lives on the ``basicstats`` root logger only; module
	loggers (``basicstats.stats.bootstrap`` ...) propagate to it, so records are
	printed once no matter how many modules ask for a logger.

	:param name: Logger name, usually ``__name__``.
	:return: The logger.
	"""
	root = logging.getLogger(ROOT_LOGGER)
	if not root.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
		root.addHandler(handler)
		root.setLevel(logging.INFO)
	return logging.getLogger(name)


def configure_logging(
		*,
		name: str = ROOT_LOGGER,
		console_level: ConsoleLevelName = "INFO",
		file_path: Optional[PathLike] = None,
		file_level: Optional[LevelLike] = None,
		mode: str = "w",
		rotate: bool = False,
		max_bytes: int = 2_000_000,
		backup_count: int = 3,
		formatter: Optional[logging.Formatter] = None,
		propagate: bool = False
) -> logging.Logger:
	"""
	Configure the shared ``basicstats`` logger.

	Calling it again updates the existing console handler instead of stacking a
	second one, and a file handler is added only once per path.

	:param name: Logger name.
	:param console_level: Console handler level.
	:param file_path: Optional log file path to add a file handler.
	:param file_level: File handler level (int or level name,
					   defaults to console-level if None).
	:param mode: 'w' for overwriting or 'a' for appending.
	:param rotate: Use RotatingFileHandler when True.
	:param max_bytes: Rotation threshold per file.
	:param backup_count: Number of rotated backups.
	:param formatter: Custom formatter; default includes timestamp.
	:param propagate: Whether to propagate to parent loggers.
	:return: The configured logger.
	:raises ValueError: On an unknown level name.
	"""
	console_level_value = _normalize_level(console_level, param_name="console_level")
	file_level_value = (
		_normalize_level(file_level, param_name="file_level")
		if file_level is not None
		else None
	)

	get_logger(name)
	log = logging.getLogger(name)
	effective_level = min(
		console_level_value,
		file_level_value if file_level_value is not None else console_level_value
	)
	log.setLevel(effective_level)
	log.propagate = propagate

	fmt = formatter or logging.Formatter(
		"%(asctime)s [%(levelname)s] %(name)s: %(message)s"
	)

	has_stream = False
	for handler in log.handlers:
		# FileHandler subclasses StreamHandler
		if type(handler) is logging.StreamHandler:
			handler.setLevel(console_level_value)
			handler.setFormatter(fmt)
			has_stream = True
	if not has_stream:
		stream_handler = logging.StreamHandler()
		stream_handler.setLevel(console_level_value)
		stream_handler.setFormatter(fmt)
		log.addHandler(stream_handler)

	if file_path:
		path = Path(file_path)
		if not any(
				getattr(handler, "baseFilename", None) == os.path.abspath(path)
				for handler in log.handlers
		):
			path.parent.mkdir(parents=True, exist_ok=True)
			file_handler: logging.Handler
			if rotate:
				file_handler = RotatingFileHandler(
					path,
					mode=mode,
					maxBytes=max_bytes,
					backupCount=backup_count,
					encoding="utf-8"
				)
			else:
				file_handler = logging.FileHandler(path, mode=mode, encoding="utf-8")
			file_handler.setLevel(
				file_level_value if file_level_value is not None else console_level_value
			)
			file_handler.setFormatter(fmt)
			log.addHandler(file_handler)

	return log
