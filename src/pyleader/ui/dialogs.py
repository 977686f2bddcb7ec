# ---------------------------------------------------------------------------
# File: dialogs.py
# ---------------------------------------------------------------------------
# Description:
#	Tk implementations of the alert + conflict-prompt sinks.
#
# Notes:
#	- TkAlertHandler: thin wrapper around tkinter.messagebox.
#	- TkConflictPrompt: modal Toplevel with three ttk buttons
#	  (Overwrite / Cancel / Read from File). Themed with ttkthemes when a
#	  theme name is configured (ui.theme).
#	- Both must be called on the Tk thread (the primary context).
#	- Closing the conflict window counts as Cancel.
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/06/2026	Paul G. LeDuc				Initial version
# 01/15/2026	Paul G. LeDuc				Alert handler + conflict prompt
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import messagebox, ttk

from ttkthemes import ThemedStyle

from pyleader.core.logging import get_app_logger
from pyleader.services.prompts import (
	CONFLICT_DETAIL,
	CONFLICT_TITLE,
	AlertStyle,
	ConflictChoice,
)


log = get_app_logger("ui")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_MESSAGEBOX_FN: dict[AlertStyle, str] = {
	AlertStyle.INFO: "showinfo",
	AlertStyle.WARNING: "showwarning",
	AlertStyle.CRITICAL: "showerror",
}


def _usable_parent(parent: tk.Misc | None) -> tk.Misc | None:
	if parent is None:
		return None
	try:
		if int(parent.winfo_exists()) == 1:
			return parent
	except tk.TclError:
		pass
	return None


def _safe_show(style: AlertStyle, *, title: str, message: str, parent: tk.Misc | None) -> None:
	"""
	Show a messagebox, passing parent only when it is still a live widget.

	A Tk failure is logged; the alert text was already logged by the caller.
	"""
	show: Callable[..., Any] = getattr(messagebox, _MESSAGEBOX_FN[style])
	usable = _usable_parent(parent)
	try:
		if usable is not None:
			show(title, message, parent=usable)
		else:
			show(title, message)
	except tk.TclError as ex:
		log.error("Could not show %s dialog %r: %s", style.value, title, ex)


def apply_theme(widget: tk.Misc, theme: Optional[str]) -> Optional[ThemedStyle]:
	"""
	Apply a ttkthemes theme to widget's ttk style (no-op when theme is unset).
	"""
	if not theme:
		return None

	style = ThemedStyle(widget)
	if theme not in style.theme_names():
		log.warning("Unknown ttk theme %r; keeping default", theme)
		return style

	style.set_theme(theme)
	return style


# ---------------------------------------------------------------------------
# Alerts
# ---------------------------------------------------------------------------

class TkAlertHandler:
	_TITLES: dict[AlertStyle, str] = {
		AlertStyle.INFO: "pyleader",
		AlertStyle.WARNING: "pyleader: Warning",
		AlertStyle.CRITICAL: "pyleader: Error",
	}

	def __init__(
		self,
		parent: tk.Misc | None = None,
		*,
		logger: logging.Logger | None = None,
		telemetry: Any | None = None,
	) -> None:
		self._parent = parent
		self._log = logger or log
		self._telemetry = telemetry

	def show_alert(self, style: AlertStyle, message: str, informative_text: str = "") -> None:
		self._log.info("Alert (%s): %s", style.value, message)
		if self._telemetry is not None:
			self._telemetry.event("ui.alert", {"style": style.value})

		text = f"{message}\n\n{informative_text}" if informative_text else message
		_safe_show(style, title=self._TITLES[style], message=text, parent=self._parent)


# ---------------------------------------------------------------------------
# Conflict prompt
# ---------------------------------------------------------------------------

class TkConflictPrompt:
	"""
	Three-way modal prompt shown when config.json changed on disk.
	"""

	BUTTONS: tuple[tuple[str, ConflictChoice], ...] = (
		("Overwrite", ConflictChoice.OVERWRITE),
		("Cancel", ConflictChoice.CANCEL),
		("Read from File", ConflictChoice.RELOAD),
	)

	def __init__(self, parent: tk.Misc | None = None, *, theme: Optional[str] = None) -> None:
		self._parent = parent
		self._theme = theme

	def ask_overwrite_cancel_reload(self) -> ConflictChoice:
		choice = self._run_dialog()
		log.info("Conflict dialog answered: %s", choice.value)
		return choice

	def _run_dialog(self) -> ConflictChoice:
		owner = _usable_parent(self._parent)
		temp_root: tk.Tk | None = None
		if owner is None:
			temp_root = tk.Tk()
			temp_root.withdraw()
			owner = temp_root

		result: list[ConflictChoice] = [ConflictChoice.CANCEL]
		top = tk.Toplevel(owner)
		try:
			top.title(CONFLICT_TITLE)
			top.resizable(False, False)
			apply_theme(top, self._theme)

			frame = ttk.Frame(top, padding=16)
			frame.pack(fill="both", expand=True)

			ttk.Label(frame, text=CONFLICT_TITLE, font=("TkDefaultFont", 12, "bold")).pack(anchor="w")
			ttk.Label(frame, text=CONFLICT_DETAIL, wraplength=360, justify="left").pack(anchor="w", pady=(8, 16))

			buttons = ttk.Frame(frame)
			buttons.pack(anchor="e")

			def _choose(choice: ConflictChoice) -> None:
				result[0] = choice
				top.destroy()

			for text, choice in self.BUTTONS:
				ttk.Button(buttons, text=text, command=lambda c=choice: _choose(c)).pack(side="left", padx=(8, 0))

			top.protocol("WM_DELETE_WINDOW", lambda: _choose(ConflictChoice.CANCEL))
			top.bind("<Escape>", lambda _e: _choose(ConflictChoice.CANCEL))

			top.transient(owner)
			top.grab_set()
			top.wait_window()
		finally:
			if temp_root is not None:
				temp_root.destroy()

		return result[0]
