# ---------------------------------------------------------------------------
# File: test_app.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for the LeaderApp class.
#
# Notes:
#	- Headless: HeadlessWindow + LoggingDispatcher, ManualScheduler.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/26/2025	Paul G. LeDuc				Initial tests
# 01/15/2026	Paul G. LeDuc				Rework around ConfigStore + Controller
# 01/16/2026	Paul G. LeDuc				URL navigation
# 01/19/2026	Paul G. LeDuc				Modified enter
# ---------------------------------------------------------------------------

from __future__ import annotations

import json

import pytest

from pyleader.app.app import LeaderApp
from pyleader.app.commands import Command
from pyleader.app.controller import HeadlessWindow, KeyOutcome, LoggingDispatcher
from pyleader.app.keys import ModifierKeyConfig
from pyleader.core.scheduler import ManualScheduler
from pyleader.core.settings import AppConfig
from pyleader.core.telemetry import MemorySink, Telemetry
from pyleader.model.codec import decode
from pyleader.services.prompts import ConflictChoice, LoggingAlertHandler


CONFIG = {
	"type": "group",
	"actions": [
		{"key": "a", "type": "application", "value": "/Applications/App1.app"},
		{
			"key": "c",
			"type": "group",
			"label": "Subgroup",
			"actions": [
				{"key": "d", "type": "application", "value": "/Applications/App3.app"},
				{"key": "e", "type": "application", "value": "/Applications/App4.app"},
			],
		},
	],
}


class _Prompt:
	def ask_overwrite_cancel_reload(self) -> ConflictChoice:
		return ConflictChoice.OVERWRITE


def _make_app(tmp_path, **options) -> tuple[LeaderApp, MemorySink]:
	(tmp_path / "config.json").write_text(json.dumps(CONFIG), encoding="utf-8")
	sink = MemorySink()
	app = LeaderApp(
		AppConfig({"config_dir": str(tmp_path), **options}),
		scheduler=ManualScheduler(),
		alert_handler=LoggingAlertHandler(),
		conflict_prompt=_Prompt(),
		dispatcher=LoggingDispatcher(),
		window=HeadlessWindow(),
		telemetry=Telemetry(True, sink),
	)
	app.start()
	return app, sink


def _ran(app: LeaderApp) -> list[str]:
	return [a.key for a in app.controller.dispatcher.dispatched]


def test_start_loads_config(tmp_path):
	app, sink = _make_app(tmp_path)

	assert [c.key for c in app.store.root.children] == ["a", "c"]
	assert "config.loaded" in sink.event_names()
	assert str(tmp_path / "config.json") in repr(app)


def test_settings_reach_store_and_controller(tmp_path):
	app, _ = _make_app(tmp_path, modifier_keys="optionGroupControlSticky", reload_indicator_ms=500)

	assert app.controller.modifier_config is ModifierKeyConfig.OPTION_GROUP_CONTROL_STICKY
	assert app.controller._reload_indicator_s == 0.5


def test_press_shows_window_and_walks_tree(tmp_path):
	app, _ = _make_app(tmp_path)

	assert app.press("c") is True
	assert app.controller.window.is_visible is True
	assert len(app.controller.state.current_actions) == 2

	assert app.press("down") is True
	assert app.press("space") is True
	assert app.controller.state.selected_index == 1

	assert app.press("enter") is True
	assert _ran(app) == ["e"]
	assert app.controller.window.is_visible is False


def test_press_with_modifiers_goes_to_tree(tmp_path):
	app, _ = _make_app(tmp_path)

	assert app.press("ctrl+c") is True

	assert _ran(app) == ["d", "e"]


def test_option_enter_runs_selection_and_stays_open(tmp_path):
	app, _ = _make_app(tmp_path)
	app.press("down")

	assert app.press("opt+enter") is True

	assert _ran(app) == ["a"]
	assert app.controller.window.is_visible is True
	assert app.controller.state.selected_index == 0


def test_control_enter_runs_selected_group(tmp_path):
	app, _ = _make_app(tmp_path)
	app.press("down")
	app.press("down")

	assert app.press("ctrl+enter") is True

	assert _ran(app) == ["d", "e"]
	assert app.controller.window.is_visible is False


def test_enter_without_selection_falls_through_to_tree(tmp_path):
	app, sink = _make_app(tmp_path)

	assert app.press("enter") is False
	assert app.controller.window.not_found_count == 1
	assert "key.unhandled" in sink.event_names()


def test_unknown_key_is_unhandled(tmp_path):
	app, _ = _make_app(tmp_path)

	assert app.press("z") is False
	assert app.controller.window.not_found_count == 1


def test_escape_closes_and_cmd_q_quits(tmp_path):
	app, _ = _make_app(tmp_path)
	app.press("c")

	app.press("escape")
	assert app.controller.window.is_visible is False
	assert app.controller.state.navigation_path == []

	app.press("cmd+q")
	assert app.running is False


def test_custom_command_binding(tmp_path):
	app, _ = _make_app(tmp_path)
	calls: list[str] = []

	app.register_command(Command(id="custom.hello", handler=lambda ctx: calls.append("hello")))
	app.bind_key("ctrl+h", "custom.hello")

	assert app.press("Control+h") is True
	assert calls == ["hello"]


def test_invoke_unknown_command_raises(tmp_path):
	app, _ = _make_app(tmp_path)

	with pytest.raises(KeyError):
		app.invoke("nope")


def test_open_url_runs_keys(tmp_path):
	app, _ = _make_app(tmp_path)

	results = app.open_url("pyleader://navigate?keys=c,d")

	assert [r.outcome for r in results] == [KeyOutcome.NAVIGATED, KeyOutcome.RAN_ACTION]
	assert _ran(app) == ["d"]


def test_open_url_preview_keeps_window_open(tmp_path):
	app, _ = _make_app(tmp_path)

	results = app.open_url("pyleader://navigate?keys=c,e&execute=false")

	assert results[-1].outcome is KeyOutcome.PREVIEWED
	assert app.controller.window.is_visible is True
	assert results[-1].node.key == "e"
	assert len(app.controller.state.navigation_path) == 1
	assert app.controller.state.selected_index is None
	assert _ran(app) == []


def test_open_url_rejects_other_actions(tmp_path):
	app, _ = _make_app(tmp_path)

	with pytest.raises(ValueError):
		app.open_url("pyleader://settings")


def test_shutdown_flushes_pending_save(tmp_path):
	app, _ = _make_app(tmp_path)
	app.invoke("edit.add_action", "x", "url", "https://x")
	assert app.store.has_pending_save is True

	app.shutdown()

	saved = decode((tmp_path / "config.json").read_bytes())
	assert [c.key for c in saved.children] == ["a", "c", "x"]
	assert app.store.has_pending_save is False
