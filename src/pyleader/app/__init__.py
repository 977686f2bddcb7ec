# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Public app package surface for pyleader.
#
# Notes:
#	- Uses lazy exports so importing a submodule (keys, navigation) does not
#	  pull in the store and controller.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"Controller",
	"KeyRouter",
	"LeaderApp",
	"NavigationState",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"Controller": ("pyleader.app.controller", "Controller"),
	"KeyRouter": ("pyleader.app.keyrouter", "KeyRouter"),
	"LeaderApp": ("pyleader.app.app", "LeaderApp"),
	"NavigationState": ("pyleader.app.navigation", "NavigationState"),
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
	from pyleader.app.app import LeaderApp
	from pyleader.app.controller import Controller
	from pyleader.app.keyrouter import KeyRouter
	from pyleader.app.navigation import NavigationState
