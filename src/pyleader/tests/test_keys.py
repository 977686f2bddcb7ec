# ---------------------------------------------------------------------------
# File: test_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for key matching, key sequences and KeyMap.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/30/2025	Paul G. LeDuc				Initial tests
# 01/14/2026	Paul G. LeDuc				Key matching + modifier config
# ---------------------------------------------------------------------------

import pytest

from pyleader.app.keys import (
	KeyMap,
	Modifier,
	ModifierKeyConfig,
	format_keyseq,
	keys_match,
	normalize_key,
	parse_keyseq,
)
from pyleader.model.keymaps import canonical_key, display_key, glyph_for, is_special_key, text_for


# ---------------------------------------------------------------------------
# Glyph table
# ---------------------------------------------------------------------------

def test_glyph_text_table():
	assert glyph_for("enter") == "↵"
	assert glyph_for("Tab") == "⇥"
	assert text_for("␣") == "space"
	assert text_for("→") == "right"
	assert glyph_for("a") is None
	assert is_special_key("UP") is True
	assert is_special_key("escape") is False


def test_canonical_and_display_key():
	assert canonical_key("↵") == "enter"
	assert canonical_key("Enter") == "enter"
	assert canonical_key("a") == "a"
	assert canonical_key(None) is None
	assert display_key("down") == "↓"
	assert display_key("x") == "x"
	assert display_key(None) == ""


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------

def test_glyph_matches_text_name():
	assert keys_match("↵", "enter")
	assert keys_match("enter", "↵")
	assert keys_match("space", "Space")


def test_printable_keys_are_case_sensitive():
	assert keys_match("a", "a")
	assert not keys_match("a", "A")


def test_keyless_node_never_matches():
	assert not keys_match(None, "a")
	assert not keys_match("", "a")
	assert not keys_match("a", "")


def test_normalize_key():
	assert normalize_key("Escape") == "escape"
	assert normalize_key("→") == "right"
	assert normalize_key("Q") == "Q"

	with pytest.raises(ValueError):
		normalize_key("")


# ---------------------------------------------------------------------------
# Key sequences
# ---------------------------------------------------------------------------

def test_parse_keyseq():
	assert parse_keyseq("a") == ("a", Modifier.NONE)
	assert parse_keyseq("ctrl+opt+a") == ("a", Modifier.CONTROL | Modifier.OPTION)
	assert parse_keyseq("Command+Enter") == ("enter", Modifier.COMMAND)
	assert parse_keyseq("alt+↓") == ("down", Modifier.OPTION)


def test_parse_keyseq_plus_key():
	assert parse_keyseq("+") == ("+", Modifier.NONE)
	assert parse_keyseq("cmd++") == ("+", Modifier.COMMAND)


def test_parse_keyseq_errors():
	with pytest.raises(ValueError):
		parse_keyseq("")

	with pytest.raises(ValueError):
		parse_keyseq("hyper+a")

	with pytest.raises(ValueError):
		parse_keyseq("ctrl+")


def test_format_keyseq_orders_modifiers():
	mods = Modifier.COMMAND | Modifier.SHIFT | Modifier.CONTROL

	assert format_keyseq("k", mods) == "shift+ctrl+cmd+k"
	assert format_keyseq("↵") == "enter"


# ---------------------------------------------------------------------------
# Modifier config
# ---------------------------------------------------------------------------

def test_modifier_config_default_control_group_option_sticky():
	cfg = ModifierKeyConfig.CONTROL_GROUP_OPTION_STICKY

	assert cfg.is_group_run(Modifier.CONTROL)
	assert not cfg.is_sticky(Modifier.CONTROL)
	assert cfg.is_sticky(Modifier.OPTION | Modifier.SHIFT)
	assert not cfg.is_group_run(None)
	assert not cfg.is_sticky(Modifier.NONE)


def test_modifier_config_swapped():
	cfg = ModifierKeyConfig.from_value("optionGroupControlSticky")

	assert cfg.is_group_run(Modifier.OPTION)
	assert cfg.is_sticky(Modifier.CONTROL)


def test_modifier_config_unknown_falls_back():
	assert ModifierKeyConfig.from_value("bogus") is ModifierKeyConfig.CONTROL_GROUP_OPTION_STICKY
	assert ModifierKeyConfig.from_value(None) is ModifierKeyConfig.CONTROL_GROUP_OPTION_STICKY


# ---------------------------------------------------------------------------
# KeyMap
# ---------------------------------------------------------------------------

def test_bind_and_resolve():
	m = KeyMap()

	m.bind("cmd+q", "quit")

	assert m.resolve("cmd+q") == "quit"
	assert m.resolve("Command+q") == "quit"
	assert "cmd+q" in m.keys()


def test_resolve_is_case_sensitive_for_printable_keys():
	m = KeyMap()
	m.bind("cmd+q", "quit")

	assert m.resolve("cmd+Q") is None


def test_resolve_key_with_modifiers():
	m = KeyMap()
	m.bind("down", "nav.next")

	assert m.resolve_key("↓") == "nav.next"
	assert m.resolve_key("down", Modifier.SHIFT) is None


def test_resolve_keyseq_tolerates_bad_sequences():
	m = KeyMap()

	assert m.resolve_keyseq("hyper+q") is None


def test_unbind_removes_binding():
	m = KeyMap()
	m.bind("ctrl+q", "quit")

	m.unbind("control+q")

	assert m.resolve("ctrl+q") is None


def test_bind_overwrite_defaults_to_true():
	m = KeyMap()

	m.bind("ctrl+q", "quit")
	m.bind("ctrl+q", "other")

	assert m.resolve("ctrl+q") == "other"


def test_bind_rejects_existing_when_overwrite_false():
	m = KeyMap()

	m.bind("ctrl+q", "quit")

	with pytest.raises(ValueError):
		m.bind("control+q", "other", overwrite=False)


def test_bind_rejects_empty_inputs():
	m = KeyMap()

	with pytest.raises(ValueError):
		m.bind("", "quit")

	with pytest.raises(ValueError):
		m.bind("ctrl+q", "")


def test_clear_removes_all_bindings():
	m = KeyMap()

	m.bind("ctrl+q", "quit")
	m.bind("ctrl+s", "save")

	assert len(m.keys()) == 2

	m.clear()

	assert m.resolve("ctrl+q") is None
	assert m.keys() == []
