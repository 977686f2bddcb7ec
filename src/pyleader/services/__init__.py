# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for pyleader.
#
#	Services are UI-agnostic: the config store, the event bus, and the
#	alert / conflict-prompt sinks it reports through.
#
# Notes:
#	- Tk implementations of the sinks live in pyleader.ui.dialogs.
#	- LeaderApp is responsible for constructing and wiring service instances.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/03/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Export ConfigStore + sinks
# ---------------------------------------------------------------------------

from .events import AppEvent, EventBus
from .prompts import (
	AlertHandler,
	AlertStyle,
	ConflictChoice,
	ConflictPrompt,
	ConsoleConflictPrompt,
	LoggingAlertHandler,
)
from .store import ConfigStore, SaveOutcome

__all__ = [
	"AppEvent",
	"EventBus",
	"AlertHandler",
	"AlertStyle",
	"ConflictChoice",
	"ConflictPrompt",
	"ConsoleConflictPrompt",
	"LoggingAlertHandler",
	"ConfigStore",
	"SaveOutcome",
]
