# ---------------------------------------------------------------------------
# File: default_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Default key bindings for pyleader.
#
# Notes:
#	- This module only declares bindings (policy).
#	- Keys not bound here fall through to the config tree. A config entry on
#	  one of these keys is only reached while its command is disabled.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/31/2025	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Menu navigation bindings
# 01/19/2026	Paul G. LeDuc				Modified enter runs the selection
# ---------------------------------------------------------------------------

from __future__ import annotations

from pyleader.app.keys import KeyMap


DEFAULT_BINDINGS: tuple[tuple[str, str], ...] = (
	("down", "nav.next"),
	("space", "nav.next"),
	("up", "nav.previous"),
	("enter", "nav.execute_selected"),
	("ctrl+enter", "nav.execute_selected"),
	("opt+enter", "nav.execute_selected"),
	("right", "nav.enter_group"),
	("left", "nav.back"),
	("backspace", "nav.clear"),
	("escape", "window.close"),
	("cmd+w", "window.close"),
	("cmd+q", "app.quit"),
)


def build_default_keymap() -> KeyMap:
	km = KeyMap()
	for keyseq, command_id in DEFAULT_BINDINGS:
		km.bind(keyseq, command_id)
	return km
