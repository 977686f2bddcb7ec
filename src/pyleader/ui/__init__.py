# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public UI package surface for pyleader.
#
# Notes:
#	- Uses lazy exports so importing pyleader.ui does not import tkinter.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"TkAlertHandler",
	"TkConflictPrompt",
	"apply_theme",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"TkAlertHandler": ("pyleader.ui.dialogs", "TkAlertHandler"),
	"TkConflictPrompt": ("pyleader.ui.dialogs", "TkConflictPrompt"),
	"apply_theme": ("pyleader.ui.dialogs", "apply_theme"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from pyleader.ui.dialogs import TkAlertHandler, TkConflictPrompt, apply_theme
