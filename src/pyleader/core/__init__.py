# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	Core package for pyleader (logging, telemetry, settings, scheduling).
#
# Notes:
#	Keep this lightweight. Re-export stable public helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/02/2026	Paul G. LeDuc				Initial coding / release
# 01/03/2026	Paul G. LeDuc				Export telemetry functions
# 01/13/2026	Paul G. LeDuc				Export AppConfig + schedulers
# ---------------------------------------------------------------------------

from __future__ import annotations

from .logging import init_logging, get_logger, get_app_logger
from .telemetry import init_telemetry, get_telemetry
from .settings import AppConfig, default_config_dir
from .scheduler import ManualScheduler, Scheduler, ThreadScheduler

__all__ = [
	"get_logger",
	"get_app_logger",
	"init_logging",
	"init_telemetry",
	"get_telemetry",
	"AppConfig",
	"default_config_dir",
	"ManualScheduler",
	"Scheduler",
	"ThreadScheduler",
]
