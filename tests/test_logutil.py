"""Tests for :mod:`basicstats.logutil`."""

from __future__ import annotations

import logging

import pytest

from basicstats.logutil import configure_logging, get_logger


@pytest.fixture()
def scratch_logger():
	name = "basicstats.tests.scratch"
	yield name
	log = logging.getLogger(name)
	for handler in list(log.handlers):
		log.removeHandler(handler)
		handler.close()


def test_module_loggers_share_package_handler():
	root = get_logger()
	child = get_logger("basicstats.stats.bootstrap")
	assert child.name == "basicstats.stats.bootstrap"
	assert root.handlers
	assert not child.handlers


def test_package_logger_propagates_to_application_handlers(caplog):
	assert get_logger().propagate
	with caplog.at_level(logging.INFO, logger="basicstats"):
		get_logger("basicstats.stats.config").warning("ignored setting")
	assert [r.getMessage() for r in caplog.records] == ["ignored setting"]


def test_configure_logging_writes_file(tmp_path, scratch_logger):
	log_file = tmp_path / "logs" / "run.log"
	log = configure_logging(name=scratch_logger, console_level="WARNING", file_path=log_file, file_level="DEBUG")
	assert log.level == logging.DEBUG

	log.debug("bootstrap detail")
	for handler in log.handlers:
		handler.flush()
	assert "bootstrap detail" in log_file.read_text(encoding="utf-8")


def test_configure_logging_is_idempotent(tmp_path, scratch_logger):
	log_file = tmp_path / "run.log"
	configure_logging(name=scratch_logger, file_path=log_file)
	log = configure_logging(name=scratch_logger, file_path=log_file, console_level="ERROR")
	streams = [h for h in log.handlers if type(h) is logging.StreamHandler]
	files = [h for h in log.handlers if isinstance(h, logging.FileHandler)]
	assert len(streams) == 1 and streams[0].level == logging.ERROR
	assert len(files) == 1


def test_configure_logging_rejects_unknown_level(scratch_logger):
	with pytest.raises(ValueError):
		configure_logging(name=scratch_logger, console_level="LOUD")  # type: ignore[arg-type]
