# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Command definitions + registry for pyleader.
#
# Notes:
#	Commands provide a single invocation spine for key bindings, console
#	":" commands and URL requests. Handlers and enablement checks receive a
#	CommandContext.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/30/2025	Paul G. LeDuc				Initial coding / release
# 12/30/2025	Paul G. LeDuc				Add Command + CommandRegistry
# 01/14/2026	Paul G. LeDuc				Context-aware handlers + enablement
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


@dataclass(slots=True)
class CommandContext:
	"""
	What a command runs against.

	- app:		The LeaderApp (or None in isolated tests).
	- args:		Positional arguments (e.g. from a ":add" console line).
	- extra:	Free-form per-call data.
	"""
	app: Any = None
	args: tuple[str, ...] = ()
	extra: dict[str, Any] = field(default_factory=dict)


CommandHandler = Callable[[CommandContext], Any]
EnabledCheck = Callable[[CommandContext], bool]


@dataclass(frozen=True, slots=True)
class Command:
	"""
	Command

	Represents an action that can be invoked by id.

	- id:			Unique identifier (required).
	- handler:		Callable executed on invoke.
	- label:		Optional friendly label.
	- description:	Optional help text.
	- enabled:		Optional bool (static enable/disable).
	- enabled_fn:	Optional callable for dynamic enablement.
	- accelerators:	Optional list of display hints (e.g., "⌘Q").
	"""
	id: str
	handler: CommandHandler

	label: Optional[str] = None
	description: Optional[str] = None

	enabled: bool = True
	enabled_fn: Optional[EnabledCheck] = None

	accelerators: tuple[str, ...] = field(default_factory=tuple)

	def is_enabled(self, ctx: CommandContext) -> bool:
		if not self.enabled:
			return False
		if self.enabled_fn is None:
			return True
		return bool(self.enabled_fn(ctx))


class CommandRegistry:
	"""
	CommandRegistry

	Stores commands by id and invokes them.
	"""

	def __init__(self) -> None:
		self._commands: dict[str, Command] = {}

	def register(self, command: Command) -> None:
		if not command.id:
			raise ValueError("Command id must be a non-empty string")

		if command.id in self._commands:
			raise ValueError(f"Duplicate command id: {command.id!r}")

		self._commands[command.id] = command

	def unregister(self, command_id: str) -> None:
		self._commands.pop(command_id, None)

	def has(self, command_id: str) -> bool:
		return command_id in self._commands

	def get(self, command_id: str) -> Optional[Command]:
		return self._commands.get(command_id)

	def ids(self) -> list[str]:
		return list(self._commands.keys())

	def is_enabled(self, command_id: str, ctx: CommandContext) -> bool:
		return self._require(command_id).is_enabled(ctx)

	def execute(self, command_id: str, ctx: CommandContext) -> Any:
		"""
		Run a command. Disabled commands are skipped and return None.

		Raises:
			KeyError: unknown command id.
		"""
		command = self._require(command_id)
		if not command.is_enabled(ctx):
			return None

		return command.handler(ctx)

	def _require(self, command_id: str) -> Command:
		command = self._commands.get(command_id)
		if command is None:
			raise KeyError(f"Unknown command id: {command_id!r}")
		return command
