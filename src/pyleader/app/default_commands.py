# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Default command definitions for pyleader.
#
# Notes:
#	- Handlers expect ctx.app to be a LeaderApp.
#	- "edit.add_action" takes its node from ctx.args:
#		key type value [label...]		(actions)
#		key group [label...]			(groups)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/31/2025	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Navigation + config commands
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Sequence

from pyleader.app.commands import Command, CommandContext, CommandRegistry
from pyleader.model.nodes import Action, ActionType, Group, Node


def node_from_args(args: Sequence[str]) -> Node:
	"""
	Build a node from "key type value [label...]" (or "key group [label...]").

	Raises:
		ValueError: too few arguments or an unknown type.
	"""
	if len(args) < 2:
		raise ValueError("usage: add <key> <type> <value> [label]")

	key, kind = args[0], args[1].lower()
	if kind == ActionType.GROUP.value:
		return Group(key=key, label=" ".join(args[2:]) or None)

	if len(args) < 3:
		raise ValueError(f"usage: add <key> {kind} <value> [label]")

	try:
		action_type = ActionType(kind)
	except ValueError as ex:
		raise ValueError(f"Unknown type {kind!r}") from ex

	return Action(key=key, kind=action_type, value=args[2], label=" ".join(args[3:]) or None)


def _has_selection(ctx: CommandContext) -> bool:
	return ctx.app.controller.state.selected_item is not None


def _group_selected(ctx: CommandContext) -> bool:
	return isinstance(ctx.app.controller.state.selected_item, Group)


def register_default_commands(registry: CommandRegistry) -> None:

	def _next(ctx: CommandContext) -> None:
		ctx.app.controller.move_selection(1)

	def _previous(ctx: CommandContext) -> None:
		ctx.app.controller.move_selection(-1)

	def _execute_selected(ctx: CommandContext) -> Any:
		return ctx.app.controller.execute_selected_item(ctx.extra.get("modifiers"))

	def _enter_group(ctx: CommandContext) -> bool:
		return ctx.app.controller.enter_selected_group()

	def _back(ctx: CommandContext) -> bool:
		return ctx.app.controller.go_back()

	def _clear(ctx: CommandContext) -> None:
		ctx.app.controller.clear()

	def _close(ctx: CommandContext) -> None:
		ctx.app.controller.hide()

	def _quit(ctx: CommandContext) -> None:
		ctx.app.quit()

	def _reload(ctx: CommandContext) -> None:
		ctx.app.store.reload_from_file()

	def _save(ctx: CommandContext) -> Any:
		return ctx.app.store.save()

	def _add(ctx: CommandContext) -> bool:
		return ctx.app.controller.add_action(node_from_args(ctx.args))

	def _delete(ctx: CommandContext) -> bool:
		return ctx.app.controller.delete_selected_item()

	def _errors(ctx: CommandContext) -> list[str]:
		return [
			f"{'/'.join(str(i) for i in err.path)}: {err.message}"
			for err in ctx.app.store.validation_errors
		]

	registry.register(Command(id="nav.next", label="Next", handler=_next, accelerators=("↓", "␣")))
	registry.register(Command(id="nav.previous", label="Previous", handler=_previous, accelerators=("↑",)))
	registry.register(Command(
		id="nav.execute_selected",
		label="Run Selected",
		handler=_execute_selected,
		enabled_fn=_has_selection,
		accelerators=("↵",),
	))
	registry.register(Command(
		id="nav.enter_group",
		label="Open Group",
		handler=_enter_group,
		enabled_fn=_group_selected,
		accelerators=("→",),
	))
	registry.register(Command(id="nav.back", label="Back", handler=_back, accelerators=("←",)))
	registry.register(Command(id="nav.clear", label="Clear", handler=_clear, accelerators=("⌫",)))

	registry.register(Command(id="window.close", label="Close", handler=_close, accelerators=("⎋", "⌘W")))
	registry.register(Command(
		id="app.quit",
		label="Quit pyleader",
		description="Save pending changes and exit.",
		handler=_quit,
		accelerators=("⌘Q",),
	))

	registry.register(Command(
		id="config.reload",
		label="Reload Config",
		description="Discard in-memory changes and read config.json again.",
		handler=_reload,
	))
	registry.register(Command(
		id="config.save",
		label="Save Config",
		description="Write the current tree to config.json now.",
		handler=_save,
	))
	registry.register(Command(
		id="config.errors",
		label="Show Errors",
		description="List validation problems in the current tree.",
		handler=_errors,
	))

	registry.register(Command(
		id="edit.add_action",
		label="Add",
		description="Add an action or group next to the selection.",
		handler=_add,
	))
	registry.register(Command(
		id="edit.delete_selected",
		label="Delete",
		description="Delete the selected item.",
		handler=_delete,
		enabled_fn=_has_selection,
	))
