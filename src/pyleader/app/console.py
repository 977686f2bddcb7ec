# ---------------------------------------------------------------------------
# File: console.py
# ---------------------------------------------------------------------------
# Description:
#	Line-oriented front end for pyleader.
#
#	Each input line is either one key sequence ("o", "ctrl+o", "down") or a
#	":" command:
#		:reload			read config.json again
#		:save			save now
#		:add ...		add an action/group (see default_commands)
#		:delete			delete the selected item
#		:errors			list validation problems
#		:open <url>		handle a pyleader:// URL
#		:quit			exit (also :q)
#
# Notes:
#	- The line is read on a worker thread while this thread keeps pumping,
#	  so a debounced save still lands while the prompt sits idle.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/16/2026	Paul G. LeDuc				Initial coding / release
# 01/19/2026	Paul G. LeDuc				Pump while waiting for input
# ---------------------------------------------------------------------------

from __future__ import annotations

import queue
import sys
import threading
from typing import Any, Callable, Optional, TextIO

from pyleader.app.app import LeaderApp
from pyleader.model.keymaps import display_key
from pyleader.model.nodes import Group
from pyleader.model.tree import resolve_index_path


_PUMP_INTERVAL_S = 0.05

_COLON_COMMANDS: dict[str, str] = {
	"reload": "config.reload",
	"save": "config.save",
	"add": "edit.add_action",
	"delete": "edit.delete_selected",
	"errors": "config.errors",
	"quit": "app.quit",
	"q": "app.quit",
}


def render_menu(app: LeaderApp) -> str:
	"""
	Text for the current menu level: a title line, then one line per child.

	">" marks the selection, "!" a child with a validation error.
	"""
	state = app.controller.state
	crumbs = [display_key(g.key) or g.display_name for g in state.navigation_path]
	title = " > ".join(["•", *crumbs])
	if state.is_showing_refresh_state:
		title += "  (reloaded)"

	index_prefix: Optional[tuple[int, ...]] = resolve_index_path(app.store.root, state.navigation_path)

	lines = [title]
	for i, child in enumerate(state.current_actions):
		marker = ">" if i == state.selected_index else " "
		error = ""
		if index_prefix is not None and app.store.validation_error((*index_prefix, i)) is not None:
			error = "!"
		suffix = " …" if isinstance(child, Group) else ""
		lines.append(f"{marker}{error:1} [{display_key(child.key) or ' '}] {child.display_name}{suffix}")

	if len(lines) == 1:
		lines.append("  (empty)")
	return "\n".join(lines)


def run_console(
	app: LeaderApp,
	read_line: Callable[[str], str] = input,
	out: TextIO = sys.stdout,
) -> None:
	"""
	Read lines until EOF or :quit. The app must already be started.
	"""
	print(render_menu(app), file=out)

	while app.running:
		try:
			line = _read_while_pumping(app, read_line, "leader> ")
		except EOFError:
			break

		app.pump()
		line = line.strip()
		if not line:
			continue

		try:
			if line.startswith(":"):
				_run_colon(app, line[1:], out)
			elif not app.press(line):
				print(f"no entry for {line!r}", file=out)
		except (ValueError, KeyError) as ex:
			print(f"error: {ex}", file=out)

		app.wait_idle()
		if app.running:
			print(render_menu(app), file=out)


def _run_colon(app: LeaderApp, text: str, out: TextIO) -> None:
	words = text.split()
	if not words:
		raise ValueError("empty command")
	name, args = words[0], words[1:]

	if name == "open":
		if not args:
			raise ValueError("usage: :open <url>")
		results = app.open_url(args[0])
		print(", ".join(r.outcome.value for r in results), file=out)
		return

	command_id = _COLON_COMMANDS.get(name)
	if command_id is None:
		raise ValueError(f"unknown command :{name}")

	result = app.invoke(command_id, *args)
	if command_id == "config.errors":
		for message in result or ["no problems"]:
			print(message, file=out)
	elif command_id == "config.save":
		print(f"save: {result.value}", file=out)


def _read_while_pumping(app: LeaderApp, read_line: Callable[[str], str], prompt: str) -> str:
	box: "queue.Queue[tuple[bool, Any]]" = queue.Queue(maxsize=1)

	def _reader() -> None:
		try:
			box.put((True, read_line(prompt)))
		except BaseException as ex:
			# Re-raised on the primary thread below (EOFError included).
			box.put((False, ex))

	threading.Thread(target=_reader, name="pyleader-input", daemon=True).start()

	while True:
		try:
			ok, value = box.get(timeout=_PUMP_INTERVAL_S)
		except queue.Empty:
			app.pump()
			continue
		if not ok:
			raise value
		return value
