# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for pyleader.core.logging.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from pyleader.core import logging as app_logging


@pytest.fixture(autouse=True)
def _clean_handlers():
	level = logging.getLogger().level
	app_logging._reset_logging_for_tests()
	yield
	app_logging._reset_logging_for_tests()
	logging.getLogger().setLevel(level)


def _ours() -> list[logging.Handler]:
	return list(app_logging._HANDLERS)


@pytest.mark.parametrize(
	("raw", "expected"),
	[
		("debug", logging.DEBUG),
		(" WARNING ", logging.WARNING),
		("10", 10),
		(40, 40),
		("nonsense", logging.INFO),
		(None, logging.INFO),
	],
)
def test_coerce_level(raw, expected):
	assert app_logging.coerce_level(raw) == expected


def test_get_app_logger_names():
	assert app_logging.get_app_logger().name == "pyleader.app"
	assert app_logging.get_app_logger("store").name == "pyleader.app.store"


def test_init_logging_is_idempotent():
	cfg = {"logging.level": "DEBUG"}

	app_logging.init_logging(cfg)
	first = _ours()
	app_logging.init_logging(cfg)

	assert _ours() == first
	assert len(first) == 1
	assert logging.getLogger().level == logging.DEBUG


def test_changed_settings_replace_our_handlers_only():
	root = logging.getLogger()
	foreign = logging.NullHandler()
	root.addHandler(foreign)
	try:
		app_logging.init_logging({"logging.level": "INFO"})
		first = _ours()
		app_logging.init_logging({"logging.level": "ERROR"})

		assert first[0] not in root.handlers
		assert foreign in root.handlers
		assert _ours()[0].level == logging.ERROR
	finally:
		root.removeHandler(foreign)


def test_file_handler_creates_parent_dirs(tmp_path):
	log_file = tmp_path / "logs" / "pyleader.log"

	app_logging.init_logging({"logging.console": False, "logging.file": str(log_file)})
	app_logging.get_app_logger("test").warning("hello file")
	for h in _ours():
		h.flush()

	assert log_file.is_file()
	assert "hello file" in log_file.read_text(encoding="utf-8")


def test_cfg_without_get_uses_defaults():
	app_logging.init_logging(object())

	assert len(_ours()) == 1
	assert isinstance(_ours()[0], logging.StreamHandler)
