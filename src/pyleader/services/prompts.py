# ---------------------------------------------------------------------------
# File: prompts.py
# ---------------------------------------------------------------------------
# Description:
#	Alert + conflict-prompt sinks used by the config store.
#
# Notes:
#	- The store only sees the Protocols below; Tk versions live in ui.dialogs.
#	- LoggingAlertHandler: headless runs and tests.
#	- ConsoleConflictPrompt: the console front end (reads a choice from input).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Protocol, TextIO, runtime_checkable

from pyleader.core.logging import get_app_logger


class AlertStyle(str, Enum):
	INFO = "info"
	WARNING = "warning"
	CRITICAL = "critical"


class ConflictChoice(str, Enum):
	OVERWRITE = "overwrite"
	CANCEL = "cancel"
	RELOAD = "reload"


CONFLICT_TITLE = "Configuration file changed on disk"
CONFLICT_DETAIL = (
	"The configuration file has been modified outside of the app. "
	"Choose 'Read from File' to load the external changes, "
	"or 'Overwrite' to save your current changes."
)


@runtime_checkable
class AlertHandler(Protocol):
	def show_alert(self, style: AlertStyle, message: str, informative_text: str = "") -> None: ...


@runtime_checkable
class ConflictPrompt(Protocol):
	def ask_overwrite_cancel_reload(self) -> ConflictChoice: ...


_LEVELS: dict[AlertStyle, int] = {
	AlertStyle.INFO: logging.INFO,
	AlertStyle.WARNING: logging.WARNING,
	AlertStyle.CRITICAL: logging.ERROR,
}


class LoggingAlertHandler:
	"""
	Alert sink that only logs.
	"""

	def __init__(self, logger: Optional[logging.Logger] = None) -> None:
		self._log = logger or get_app_logger("alerts")

	def show_alert(self, style: AlertStyle, message: str, informative_text: str = "") -> None:
		if informative_text:
			self._log.log(_LEVELS[style], "%s: %s", message, informative_text)
		else:
			self._log.log(_LEVELS[style], "%s", message)


class ConsoleConflictPrompt:
	"""
	Ask on a text stream: [o]verwrite / [c]ancel / [r]ead from file.

	Anything unrecognised (including EOF) counts as cancel.
	"""

	_ANSWERS: dict[str, ConflictChoice] = {
		"o": ConflictChoice.OVERWRITE,
		"overwrite": ConflictChoice.OVERWRITE,
		"c": ConflictChoice.CANCEL,
		"cancel": ConflictChoice.CANCEL,
		"r": ConflictChoice.RELOAD,
		"read": ConflictChoice.RELOAD,
		"reload": ConflictChoice.RELOAD,
	}

	def __init__(self, read_line: Callable[[str], str] = input, out: Optional[TextIO] = None) -> None:
		self._read_line = read_line
		self._out = out

	def ask_overwrite_cancel_reload(self) -> ConflictChoice:
		if self._out is not None:
			print(CONFLICT_TITLE, file=self._out)
			print(CONFLICT_DETAIL, file=self._out)

		try:
			answer = self._read_line("[o]verwrite / [c]ancel / [r]ead from file? ")
		except EOFError:
			return ConflictChoice.CANCEL

		return self._ANSWERS.get(answer.strip().lower(), ConflictChoice.CANCEL)
