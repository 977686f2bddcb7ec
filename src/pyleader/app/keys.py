# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Key matching + key mapping for pyleader.
#
#	- normalize_key() / keys_match(): compare a pressed key with a node key.
#	- Modifier + ModifierKeyConfig: which modifier means "sticky" and which
#	  means "run the whole group".
#	- parse_keyseq() / format_keyseq(): "ctrl+opt+a" <-> (key, Modifier).
#	- KeyMap: canonical key sequence -> command id.
#
# Notes:
#	- Special keys (enter, tab, space, arrows) match by name or glyph, case
#	  insensitive. Other named keys (escape, backspace, ...) are lowercased.
#	- Single printable characters match exactly: "a" and "A" are different keys.
#	- This module is UI-toolkit-agnostic; front ends translate their own
#	  events into key names before calling in.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/30/2025	Paul G. LeDuc				Initial coding / release
# 12/30/2025	Paul G. LeDuc				Add KeyMap
# 01/14/2026	Paul G. LeDuc				Canonical keyseqs + modifier config
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Any, Optional

from pyleader.core.logging import get_app_logger
from pyleader.model.keymaps import canonical_key, is_special_key


log = get_app_logger("keys")


# ---------------------------------------------------------------------------
# Modifiers
# ---------------------------------------------------------------------------

class Modifier(IntFlag):
	NONE = 0
	SHIFT = 1
	CONTROL = 2
	OPTION = 4
	COMMAND = 8


_MODIFIER_NAMES: dict[str, Modifier] = {
	"shift": Modifier.SHIFT,
	"ctrl": Modifier.CONTROL,
	"control": Modifier.CONTROL,
	"opt": Modifier.OPTION,
	"option": Modifier.OPTION,
	"alt": Modifier.OPTION,
	"cmd": Modifier.COMMAND,
	"command": Modifier.COMMAND,
	"meta": Modifier.COMMAND,
	"super": Modifier.COMMAND,
}

# Display order + canonical spelling.
_MODIFIER_ORDER: tuple[tuple[Modifier, str], ...] = (
	(Modifier.SHIFT, "shift"),
	(Modifier.CONTROL, "ctrl"),
	(Modifier.OPTION, "opt"),
	(Modifier.COMMAND, "cmd"),
)


class ModifierKeyConfig(str, Enum):
	"""
	Which held modifier runs a whole group and which keeps the window open.
	"""
	CONTROL_GROUP_OPTION_STICKY = "controlGroupOptionSticky"
	OPTION_GROUP_CONTROL_STICKY = "optionGroupControlSticky"

	@classmethod
	def from_value(cls, value: Any) -> "ModifierKeyConfig":
		if isinstance(value, cls):
			return value
		try:
			return cls(value)
		except ValueError:
			log.warning("Unknown modifier_keys %r; using %s", value, cls.CONTROL_GROUP_OPTION_STICKY.value)
			return cls.CONTROL_GROUP_OPTION_STICKY

	@property
	def group_modifier(self) -> Modifier:
		if self is ModifierKeyConfig.CONTROL_GROUP_OPTION_STICKY:
			return Modifier.CONTROL
		return Modifier.OPTION

	@property
	def sticky_modifier(self) -> Modifier:
		if self is ModifierKeyConfig.CONTROL_GROUP_OPTION_STICKY:
			return Modifier.OPTION
		return Modifier.CONTROL

	def is_group_run(self, modifiers: Optional[Modifier]) -> bool:
		return bool(modifiers and modifiers & self.group_modifier)

	def is_sticky(self, modifiers: Optional[Modifier]) -> bool:
		return bool(modifiers and modifiers & self.sticky_modifier)


# ---------------------------------------------------------------------------
# Key matching
# ---------------------------------------------------------------------------

def normalize_key(key: str) -> str:
	"""
	Canonical form of a single pressed key.

	Raises:
		ValueError: key is empty.
	"""
	if not key:
		raise ValueError("key must be a non-empty string")

	if is_special_key(key):
		return canonical_key(key) or key
	if len(key) == 1:
		return key
	return key.lower()


def keys_match(node_key: Optional[str], pressed: str) -> bool:
	"""
	True when pressed addresses a node with node_key. Keyless nodes never match.
	"""
	if not node_key or not pressed:
		return False
	return normalize_key(node_key) == normalize_key(pressed)


# ---------------------------------------------------------------------------
# Key sequences
# ---------------------------------------------------------------------------

def parse_keyseq(keyseq: str) -> tuple[str, Modifier]:
	"""
	Parse "ctrl+opt+a" into ("a", CONTROL | OPTION).

	"+" on its own (or as the last key, e.g. "cmd++") is the plus key.

	Raises:
		ValueError: empty sequence, missing key, or unknown modifier name.
	"""
	if not keyseq:
		raise ValueError("keyseq must be a non-empty string")

	if keyseq == "+":
		return "+", Modifier.NONE

	if keyseq.endswith("++"):
		key = "+"
		names = keyseq[:-2].split("+") if len(keyseq) > 2 else []
	else:
		parts = keyseq.split("+")
		key = parts[-1]
		names = parts[:-1]

	if not key:
		raise ValueError(f"keyseq has no key: {keyseq!r}")

	mods = Modifier.NONE
	for name in names:
		mod = _MODIFIER_NAMES.get(name.strip().lower())
		if mod is None:
			raise ValueError(f"Unknown modifier {name!r} in {keyseq!r}")
		mods |= mod

	return normalize_key(key), mods


def format_keyseq(key: str, modifiers: Modifier = Modifier.NONE) -> str:
	parts = [name for mod, name in _MODIFIER_ORDER if modifiers & mod]
	parts.append(normalize_key(key))
	return "+".join(parts)


def canonical_keyseq(keyseq: str) -> str:
	key, mods = parse_keyseq(keyseq)
	return format_keyseq(key, mods)


# ---------------------------------------------------------------------------
# KeyMap
# ---------------------------------------------------------------------------

@dataclass
class KeyMap:
	"""
	KeyMap

	Stores bindings of key sequences (e.g., "cmd+q") to command ids (e.g., "app.quit").
	Sequences are stored in canonical form, so "Command+Q" and "cmd+Q" bind the
	same slot but "cmd+q" does not.
	"""
	_bindings: dict[str, str] = field(default_factory=dict)

	def bind(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		if not keyseq:
			raise ValueError("keyseq must be a non-empty string")
		if not command_id:
			raise ValueError("command_id must be a non-empty string")

		canon = canonical_keyseq(keyseq)
		if not overwrite and canon in self._bindings:
			raise ValueError(f"Key binding already exists for {keyseq!r}")

		self._bindings[canon] = command_id

	def unbind(self, keyseq: str) -> None:
		self._bindings.pop(canonical_keyseq(keyseq), None)

	def resolve(self, keyseq: str) -> Optional[str]:
		return self._bindings.get(canonical_keyseq(keyseq))

	def resolve_keyseq(self, keyseq: str) -> Optional[str]:
		"""
		Like resolve(), but an unparsable sequence resolves to None.
		"""
		try:
			return self.resolve(keyseq)
		except ValueError:
			return None

	def resolve_key(self, key: str, modifiers: Modifier = Modifier.NONE) -> Optional[str]:
		return self._bindings.get(format_keyseq(key, modifiers))

	def keys(self) -> list[str]:
		return list(self._bindings.keys())

	def items(self) -> list[tuple[str, str]]:
		return list(self._bindings.items())

	def clear(self) -> None:
		self._bindings.clear()
