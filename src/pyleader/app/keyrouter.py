# ---------------------------------------------------------------------------
# File: keyrouter.py
# ---------------------------------------------------------------------------
# Description:
#	KeyRouter for pyleader (key sequence -> command, else -> config tree).
#
# Notes:
#	- KeyRouter is UI-toolkit-agnostic: it routes by key sequence strings.
#	- Resolution order:
#		1) App keymap (menu navigation, window, quit)
#		2) Fallback (the controller's tree lookup)
#	- The parsed modifiers ride along in ctx.extra["modifiers"].
#	- A bound command that is currently disabled falls through to the
#	  fallback, so a tree entry on "enter" still works with no selection.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/01/2026	Paul G. LeDuc				Initial coding / release
# 01/01/2026	Paul G. LeDuc				Use Protocol for KeyMapLike (typing-safe decoupling)
# 01/03/2026	Paul G. LeDuc				Add telemetry
# 01/14/2026	Paul G. LeDuc				Tree fallback; drop component layer
# 01/19/2026	Paul G. LeDuc				Drop mode layer; pass modifiers to commands
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, runtime_checkable

from pyleader.app.commands import CommandContext, CommandRegistry
from pyleader.app.keys import Modifier, format_keyseq, parse_keyseq
from pyleader.core.logging import get_app_logger
from pyleader.core.telemetry import Telemetry, get_telemetry


log = get_app_logger("keys")

KeyFallback = Callable[[str, Modifier], bool]


@runtime_checkable
class KeyMapLike(Protocol):
	"""
	Minimal interface KeyRouter needs from a keymap.
	"""
	def resolve_keyseq(self, keyseq: str) -> Optional[str]:
		...


@dataclass(slots=True)
class KeyRouter:
	"""
	KeyRouter

	- keyseq -> command_id via the app keymap
	- command_id -> execute via CommandRegistry
	- otherwise -> fallback(key, modifiers)
	"""
	registry: CommandRegistry
	global_keymap: KeyMapLike

	fallback: Optional[KeyFallback] = None
	telemetry: Telemetry = field(default_factory=get_telemetry)

	def route_keyseq(self, keyseq: str, ctx: CommandContext) -> bool:
		"""
		Route a key sequence string.

		Returns:
			True if handled (a command ran or the fallback handled it), else False.

		Raises:
			ValueError: keyseq is empty or names an unknown modifier.
		"""
		key, mods = parse_keyseq(keyseq)
		canon = format_keyseq(key, mods)

		self.telemetry.counter("keys.pressed", 1, {"keyseq": canon})

		command_id = self.global_keymap.resolve_keyseq(canon)
		if command_id:
			ctx.extra["modifiers"] = mods
			if self.registry.is_enabled(command_id, ctx):
				self.registry.execute(command_id, ctx)
				self.telemetry.event("command.dispatched", {"command_id": command_id, "keyseq": canon})
				return True
			log.debug("Command %s for %s is disabled; falling through", command_id, canon)

		if self.fallback is not None and self.fallback(key, mods):
			return True

		self.telemetry.event("key.unhandled", {"keyseq": canon})
		return False
