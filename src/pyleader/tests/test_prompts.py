# ---------------------------------------------------------------------------
# File: test_prompts.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the logging alert handler + console conflict prompt.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import io
import logging

import pytest

from pyleader.services.prompts import (
	CONFLICT_TITLE,
	AlertHandler,
	AlertStyle,
	ConflictChoice,
	ConflictPrompt,
	ConsoleConflictPrompt,
	LoggingAlertHandler,
)


def test_logging_alert_handler_levels(caplog):
	handler = LoggingAlertHandler()

	with caplog.at_level(logging.INFO, logger="pyleader.app.alerts"):
		handler.show_alert(AlertStyle.WARNING, "Directory missing")
		handler.show_alert(AlertStyle.CRITICAL, "Could not save", "disk full")

	levels = [(r.levelno, r.getMessage()) for r in caplog.records]
	assert levels == [
		(logging.WARNING, "Directory missing"),
		(logging.ERROR, "Could not save: disk full"),
	]


def test_sinks_satisfy_protocols():
	assert isinstance(LoggingAlertHandler(), AlertHandler)
	assert isinstance(ConsoleConflictPrompt(read_line=lambda p: "o"), ConflictPrompt)


@pytest.mark.parametrize(
	("answer", "expected"),
	[
		("o", ConflictChoice.OVERWRITE),
		("Overwrite", ConflictChoice.OVERWRITE),
		(" c ", ConflictChoice.CANCEL),
		("r", ConflictChoice.RELOAD),
		("read", ConflictChoice.RELOAD),
		("what?", ConflictChoice.CANCEL),
	],
)
def test_console_prompt_answers(answer, expected):
	prompt = ConsoleConflictPrompt(read_line=lambda p: answer)

	assert prompt.ask_overwrite_cancel_reload() is expected


def test_console_prompt_eof_cancels_and_prints_explanation():
	out = io.StringIO()

	def _eof(prompt: str) -> str:
		raise EOFError

	prompt = ConsoleConflictPrompt(read_line=_eof, out=out)

	assert prompt.ask_overwrite_cancel_reload() is ConflictChoice.CANCEL
	assert CONFLICT_TITLE in out.getvalue()
