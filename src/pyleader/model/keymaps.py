# ---------------------------------------------------------------------------
# File: keymaps.py
# ---------------------------------------------------------------------------
# Description:
#	Special-key lookup table for pyleader (text name <-> display glyph).
#
# Notes:
#	- Config files store the text form ("enter"), menus show the glyph ("↵").
#	- Text names are matched case-insensitively; glyphs are matched exactly.
#	- Anything not in the table is an ordinary printable key and passes through.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class KeyEntry:
	text: str
	glyph: str


SPECIAL_KEYS: tuple[KeyEntry, ...] = (
	KeyEntry("enter", "↵"),
	KeyEntry("tab", "⇥"),
	KeyEntry("space", "␣"),
	KeyEntry("up", "↑"),
	KeyEntry("down", "↓"),
	KeyEntry("left", "←"),
	KeyEntry("right", "→"),
)

_BY_TEXT: dict[str, KeyEntry] = {e.text: e for e in SPECIAL_KEYS}
_BY_GLYPH: dict[str, KeyEntry] = {e.glyph: e for e in SPECIAL_KEYS}


def entry_for(key: str) -> Optional[KeyEntry]:
	"""
	Look up a special key by glyph or by (case-insensitive) text name.
	"""
	if not key:
		return None

	entry = _BY_GLYPH.get(key)
	if entry is not None:
		return entry

	return _BY_TEXT.get(key.lower())


def glyph_for(key: str) -> Optional[str]:
	entry = entry_for(key)
	return entry.glyph if entry else None


def text_for(key: str) -> Optional[str]:
	entry = entry_for(key)
	return entry.text if entry else None


def is_special_key(key: str) -> bool:
	return entry_for(key) is not None


def canonical_key(key: Optional[str]) -> Optional[str]:
	"""
	Return the stored (textual) form of a key.

	"↵" and "Enter" both become "enter"; printable keys are returned unchanged.
	"""
	if key is None:
		return None
	return text_for(key) or key


def display_key(key: Optional[str]) -> str:
	"""
	Return the glyph form of a key for menus and prompts ("" when unset).
	"""
	if not key:
		return ""
	return glyph_for(key) or key
