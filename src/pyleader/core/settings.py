# ---------------------------------------------------------------------------
# File: settings.py
# ---------------------------------------------------------------------------
# Description:
#	Application settings for pyleader (AppConfig + defaults).
#
# Notes:
#	- AppConfig is a thin read-only wrapper: options first, then DEFAULTS.
#	- Settings live in a small JSON file next to config.json (optional).
#	- A missing settings file means defaults; a malformed one logs a warning
#	  and also means defaults (settings must never block startup).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/17/2025	Paul G. LeDuc				Initial AppConfig (in app.py)
# 01/12/2026	Paul G. LeDuc				Move to core/settings + defaults + load()
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pyleader.core.logging import get_app_logger


log = get_app_logger("settings")

APP_NAME = "pyleader"
SETTINGS_FILE_NAME = "settings.json"

DEFAULTS: dict[str, Any] = {
	"config_dir": None,
	"modifier_keys": "controlGroupOptionSticky",
	"save_debounce_ms": 300,
	"reload_indicator_ms": 1200,
	"ui.theme": None,
	"logging.level": "INFO",
	"logging.console": True,
	"logging.file": None,
	"telemetry_enabled": False,
	"telemetry_sink": "null",
}


def default_config_dir(create: bool = True) -> Path:
	"""
	Return $XDG_CONFIG_HOME/pyleader (or ~/.config/pyleader).
	"""
	base = os.environ.get("XDG_CONFIG_HOME")
	root = Path(base) if base else Path.home() / ".config"
	path = root / APP_NAME
	if create:
		path.mkdir(parents=True, exist_ok=True)
	return path


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is not None and key in self.options:
			return self.options[key]
		if key in DEFAULTS and DEFAULTS[key] is not None:
			return DEFAULTS[key]
		return default

	def with_overrides(self, **overrides: Any) -> "AppConfig":
		"""
		Return a copy with overrides applied (None values are ignored).

		Dotted keys can be passed with "__" (logging__level -> logging.level).
		"""
		merged = dict(self.options or {})
		for key, value in overrides.items():
			if value is None:
				continue
			merged[key.replace("__", ".")] = value
		return AppConfig(merged)

	@property
	def config_dir(self) -> Path:
		raw = self.get("config_dir")
		if raw:
			return Path(str(raw)).expanduser()
		return default_config_dir()

	@property
	def save_debounce_s(self) -> float:
		return _coerce_ms(self.get("save_debounce_ms"), DEFAULTS["save_debounce_ms"]) / 1000.0

	@property
	def reload_indicator_s(self) -> float:
		return _coerce_ms(self.get("reload_indicator_ms"), DEFAULTS["reload_indicator_ms"]) / 1000.0

	@classmethod
	def load(cls, path: Path | str | None = None) -> "AppConfig":
		"""
		Load settings from a JSON object file (defaults when absent or unreadable).
		"""
		settings_path = Path(path) if path else default_config_dir(create=False) / SETTINGS_FILE_NAME

		try:
			text = settings_path.read_text(encoding="utf-8")
		except FileNotFoundError:
			return cls({})
		except OSError as ex:
			log.warning("Could not read settings %s: %s", settings_path, ex)
			return cls({})

		try:
			data = json.loads(text)
		except json.JSONDecodeError as ex:
			log.warning("Ignoring malformed settings %s: %s", settings_path, ex)
			return cls({})

		if not isinstance(data, dict):
			log.warning("Ignoring settings %s: top level must be an object", settings_path)
			return cls({})

		return cls(data)


def _coerce_ms(value: Any, fallback: int) -> float:
	try:
		ms = float(value)
	except (TypeError, ValueError):
		log.warning("Invalid millisecond value %r; using %s", value, fallback)
		return float(fallback)

	if ms < 0:
		log.warning("Negative millisecond value %r; using 0", value)
		return 0.0
	return ms
