# ---------------------------------------------------------------------------
# File: test_console.py
# ---------------------------------------------------------------------------
# Description:
#	Tests for the text front end (render_menu + run_console).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/16/2026	Paul G. LeDuc				Initial tests
# 01/19/2026	Paul G. LeDuc				Debounced save while the prompt is idle
# ---------------------------------------------------------------------------

from __future__ import annotations

import io
import json
import time
from typing import Callable, Iterable

import pytest

from pyleader.app.app import LeaderApp
from pyleader.app.console import render_menu, run_console
from pyleader.app.controller import HeadlessWindow, LoggingDispatcher
from pyleader.core.scheduler import ManualScheduler
from pyleader.core.settings import AppConfig
from pyleader.model.codec import decode
from pyleader.model.nodes import Action, ActionType
from pyleader.services.prompts import ConflictChoice, LoggingAlertHandler


CONFIG = {
	"type": "group",
	"actions": [
		{"key": "a", "type": "application", "value": "/Applications/App1.app"},
		{"key": "↵", "type": "url", "value": "https://example.com", "label": "Docs"},
		{"key": "c", "type": "group", "label": "Subgroup", "actions": []},
	],
}


class _Prompt:
	def ask_overwrite_cancel_reload(self) -> ConflictChoice:
		return ConflictChoice.OVERWRITE


@pytest.fixture
def app(tmp_path) -> LeaderApp:
	(tmp_path / "config.json").write_text(json.dumps(CONFIG), encoding="utf-8")
	a = LeaderApp(
		AppConfig({"config_dir": str(tmp_path)}),
		scheduler=ManualScheduler(),
		alert_handler=LoggingAlertHandler(),
		conflict_prompt=_Prompt(),
		dispatcher=LoggingDispatcher(),
		window=HeadlessWindow(),
	)
	a.start()
	return a


def _script(lines: Iterable[str]) -> Callable[[str], str]:
	it = iter(lines)

	def _read(prompt: str) -> str:
		try:
			return next(it)
		except StopIteration:
			raise EOFError from None

	return _read


def _run(app: LeaderApp, *lines: str) -> str:
	out = io.StringIO()
	run_console(app, read_line=_script(lines), out=out)
	return out.getvalue()


# ---------------------------------------------------------------------------
# render_menu
# ---------------------------------------------------------------------------

def test_render_root_menu(app):
	assert render_menu(app).splitlines() == [
		"•",
		"  [a] App1",
		"  [↵] Docs",
		"  [c] Subgroup …",
	]


def test_render_marks_selection_and_errors(app):
	app.store.append_child([], Action(key="a", kind=ActionType.URL, value="https://a"))
	app.controller.move_selection(1)

	lines = render_menu(app).splitlines()

	assert lines[1] == ">! [a] App1"
	assert lines[-1] == " ! [a] URL"


def test_render_empty_group_with_breadcrumb(app):
	app.controller.handle_key("c")

	assert render_menu(app).splitlines() == ["• > c", "  (empty)"]


def test_render_reloaded_title(app):
	app.store.reload_from_file()

	assert render_menu(app).splitlines()[0] == "•  (reloaded)"


# ---------------------------------------------------------------------------
# run_console
# ---------------------------------------------------------------------------

def test_console_keys_and_unknown_key(app):
	output = _run(app, "c", "z")

	assert "• > c" in output
	assert "no entry for 'z'" in output


def test_console_enter_reaches_tree_when_nothing_is_selected(app):
	_run(app, "enter", "↵")

	assert [a.label for a in app.controller.dispatcher.dispatched] == ["Docs", "Docs"]


def test_console_enter_runs_selection_when_there_is_one(app):
	_run(app, "down", "enter")

	assert [a.key for a in app.controller.dispatcher.dispatched] == ["a"]


def test_console_colon_commands(app):
	output = _run(app, ":errors", ":add x url https://x Example", ":save", ":bogus", ":")

	assert "no problems" in output
	assert "save: written" in output
	assert "error: unknown command :bogus" in output
	assert "error: empty command" in output
	assert "[x] Example" in output


def test_console_open_url(app):
	output = _run(app, ":open pyleader://navigate?keys=c&execute=false")

	assert "navigated" in output


def test_console_bad_keyseq_reports_error(app):
	output = _run(app, "hyper+a")

	assert "error: Unknown modifier" in output


def test_console_quit_stops_reading(app):
	reads: list[str] = []

	def _read(prompt: str) -> str:
		reads.append(prompt)
		if len(reads) > 3:
			raise AssertionError("kept reading after :quit")
		return ":quit"

	run_console(app, read_line=_read, out=io.StringIO())

	assert reads == ["leader> "]
	assert app.running is False


def test_console_idle_prompt_still_writes_debounced_save(tmp_path):
	# Real threads: the debounce timer must fire while read_line is blocked.
	path = tmp_path / "config.json"
	path.write_text(json.dumps(CONFIG), encoding="utf-8")
	app = LeaderApp(
		AppConfig({"config_dir": str(tmp_path), "save_debounce_ms": 50}),
		alert_handler=LoggingAlertHandler(),
		conflict_prompt=_Prompt(),
	)
	app.start()

	lines = iter([":add z url https://z.example"])
	on_disk: list[list[str]] = []

	def _read(prompt: str) -> str:
		line = next(lines, None)
		if line is not None:
			return line
		time.sleep(0.5)
		on_disk.append([c.key for c in decode(path.read_bytes()).children])
		raise EOFError

	try:
		run_console(app, read_line=_read, out=io.StringIO())
	finally:
		app.shutdown()

	assert on_disk == [["a", "↵", "c", "z"]]
