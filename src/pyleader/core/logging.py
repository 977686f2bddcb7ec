# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for pyleader (stdlib logging).
#
# Notes:
#	- Safe to call before any UI exists (no Tk dependencies).
#	- Idempotent initialization (won't duplicate handlers).
#	- cfg is anything with cfg.get(key, default) (AppConfig or a dict).
#
#	Supported cfg keys:
#		"logging.level"		(default: "INFO")
#		"logging.console"	(default: True)
#		"logging.file"		(default: None)
#		"logging.format"	(default: standard format)
#		"logging.datefmt"	(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/02/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Rename app logger base to pyleader.app
# 01/10/2026	Paul G. LeDuc				Drop legacy flat keys + file_mode
# ---------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path
from typing import Any
import logging


APP_LOGGER_BASE = "pyleader.app"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_CONFIG_SIGNATURE: tuple[Any, ...] | None = None
_HANDLERS: list[logging.Handler] = []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()				-> pyleader.app
		get_app_logger("store")		-> pyleader.app.store
		get_app_logger("navigation")	-> pyleader.app.navigation
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_BASE}.{component}")
	return logging.getLogger(APP_LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure the root logger from cfg.

	Repeated calls with the same settings are no-ops. Changed settings replace
	the handlers installed by the previous call (other handlers are left alone).
	"""
	global _CONFIG_SIGNATURE

	level = coerce_level(_cfg_get(cfg, "logging.level", "INFO"))
	console = bool(_cfg_get(cfg, "logging.console", True))
	log_file = _cfg_get(cfg, "logging.file", None)
	fmt = str(_cfg_get(cfg, "logging.format", None) or DEFAULT_FORMAT)
	datefmt = str(_cfg_get(cfg, "logging.datefmt", None) or DEFAULT_DATEFMT)

	signature: tuple[Any, ...] = (level, console, str(log_file) if log_file else None, fmt, datefmt)
	if _CONFIG_SIGNATURE == signature:
		return

	root = logging.getLogger()
	root.setLevel(level)

	for h in _HANDLERS:
		root.removeHandler(h)
		h.close()
	_HANDLERS.clear()

	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	if console:
		_HANDLERS.append(logging.StreamHandler())

	if log_file:
		path = Path(str(log_file)).expanduser()
		path.parent.mkdir(parents=True, exist_ok=True)
		_HANDLERS.append(logging.FileHandler(path, mode="a", encoding="utf-8"))

	for h in _HANDLERS:
		h.setLevel(level)
		h.setFormatter(formatter)
		root.addHandler(h)

	_CONFIG_SIGNATURE = signature


def coerce_level(level: Any) -> int:
	"""
	Convert "debug" / "INFO" / "10" / 10 to a logging level (INFO on junk).
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		found = logging.getLevelName(val)
		if isinstance(found, int):
			return found

	return logging.INFO


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default

	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)
	return default


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	"""
	Remove handlers installed by init_logging (unit tests only).
	"""
	global _CONFIG_SIGNATURE
	root = logging.getLogger()
	for h in _HANDLERS:
		root.removeHandler(h)
		h.close()
	_HANDLERS.clear()
	_CONFIG_SIGNATURE = None
