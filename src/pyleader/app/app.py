# ---------------------------------------------------------------------------
# File: app.py
# ---------------------------------------------------------------------------
# Description:
#	LeaderApp: wires store, navigation, key routing and commands together.
#
# Notes:
#	- Headless. Front ends (console, Tk dialogs) plug in through the sinks
#	  passed to the constructor.
#	- With a ThreadScheduler the caller's thread is the primary context and
#	  must call pump() to apply load/save results.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/17/2025	Paul G. LeDuc				Initial coding / release
# 12/30/2025	Paul G. LeDuc				Add command + keymap ownership
# 01/15/2026	Paul G. LeDuc				Rework around ConfigStore + Controller
# 01/16/2026	Paul G. LeDuc				URL navigation
# ---------------------------------------------------------------------------

from __future__ import annotations

import time
from typing import Any, Optional

from pyleader.app.commands import Command, CommandContext, CommandRegistry
from pyleader.app.controller import ActionDispatcher, Controller, KeyResult, WindowSink
from pyleader.app.default_commands import register_default_commands
from pyleader.app.default_keys import build_default_keymap
from pyleader.app.keyrouter import KeyRouter
from pyleader.app.keys import KeyMap, Modifier
from pyleader.app.urlscheme import parse_url
from pyleader.core.logging import get_app_logger
from pyleader.core.scheduler import Scheduler, ThreadScheduler
from pyleader.core.settings import AppConfig
from pyleader.core.telemetry import Telemetry, get_telemetry
from pyleader.services.events import EventBus
from pyleader.services.prompts import AlertHandler, ConflictPrompt, ConsoleConflictPrompt, LoggingAlertHandler
from pyleader.services.store import ConfigStore


log = get_app_logger("app")


class LeaderApp:
	"""
	LeaderApp

	Owns one ConfigStore, one Controller and the command/key spine.
	"""

	def __init__(
		self,
		cfg: Optional[AppConfig] = None,
		*,
		scheduler: Optional[Scheduler] = None,
		alert_handler: Optional[AlertHandler] = None,
		conflict_prompt: Optional[ConflictPrompt] = None,
		dispatcher: Optional[ActionDispatcher] = None,
		window: Optional[WindowSink] = None,
		telemetry: Optional[Telemetry] = None,
	) -> None:
		self.cfg = cfg or AppConfig()
		self.scheduler: Scheduler = scheduler or ThreadScheduler()
		self.telemetry = telemetry or get_telemetry()
		self.events = EventBus()
		self.running = True

		alerts = alert_handler or LoggingAlertHandler()

		self.store = ConfigStore(
			self.cfg.config_dir,
			scheduler=self.scheduler,
			alert_handler=alerts,
			conflict_prompt=conflict_prompt or ConsoleConflictPrompt(),
			events=self.events,
			telemetry=self.telemetry,
			debounce_s=self.cfg.save_debounce_s,
		)

		self.controller = Controller(
			self.store,
			scheduler=self.scheduler,
			alert_handler=alerts,
			dispatcher=dispatcher,
			window=window,
			events=self.events,
			modifier_config=self.cfg.get("modifier_keys"),
			telemetry=self.telemetry,
			reload_indicator_s=self.cfg.reload_indicator_s,
		)

		# -------------------------------------------------------------------
		# Command + keymap (invocation spine)
		# -------------------------------------------------------------------

		self.commands = CommandRegistry()
		register_default_commands(self.commands)

		self.keymap: KeyMap = build_default_keymap()
		self.router = KeyRouter(
			registry=self.commands,
			global_keymap=self.keymap,
			fallback=self._tree_fallback,
			telemetry=self.telemetry,
		)

	# -----------------------------------------------------------------------
	# Lifecycle
	# -----------------------------------------------------------------------

	def start(self, wait_s: float = 5.0) -> None:
		"""
		Ensure the config exists, load it, and wait for the load to apply.
		"""
		self.store.ensure_and_load()
		self.wait_idle(wait_s)
		log.info("Started with config %s", self.store.path)

	def wait_idle(self, timeout_s: float = 5.0) -> None:
		"""
		Pump until no load or save is in flight (or timeout_s passes).
		"""
		deadline = time.monotonic() + timeout_s
		while self.store.is_loading or self.store.is_saving:
			if time.monotonic() >= deadline:
				log.warning("Timed out waiting for config I/O")
				return
			self.pump(0.05)

	def pump(self, timeout: float = 0.0) -> int:
		if isinstance(self.scheduler, ThreadScheduler):
			return self.scheduler.pump(timeout)
		return 0

	def quit(self) -> None:
		self.running = False

	def shutdown(self) -> None:
		self.store.flush_pending_save()
		self.wait_idle()
		self.controller.close()
		if isinstance(self.scheduler, ThreadScheduler):
			self.scheduler.shutdown()
		log.info("Shut down")

	# -----------------------------------------------------------------------
	# Command / keymap wrappers
	# -----------------------------------------------------------------------

	def context(self, *args: str, **extra: Any) -> CommandContext:
		return CommandContext(app=self, args=tuple(args), extra=dict(extra))

	def register_command(self, command: Command) -> None:
		self.commands.register(command)

	def invoke(self, command_id: str, *args: str) -> Any:
		return self.commands.execute(command_id, self.context(*args))

	def bind_key(self, keyseq: str, command_id: str, *, overwrite: bool = True) -> None:
		self.keymap.bind(keyseq, command_id, overwrite=overwrite)

	def press(self, keyseq: str) -> bool:
		"""
		Feed one key sequence ("a", "ctrl+a", "down") through the router.
		"""
		if not self.controller.window.is_visible:
			self.controller.show()
		return self.router.route_keyseq(keyseq, self.context())

	def _tree_fallback(self, key: str, modifiers: Modifier) -> bool:
		return self.controller.handle_key(key, modifiers).handled

	# -----------------------------------------------------------------------
	# URL entry point
	# -----------------------------------------------------------------------

	def open_url(self, url: str) -> list[KeyResult]:
		"""
		Handle a pyleader://navigate URL.

		Raises:
			ValueError: the URL is not a navigate request.
		"""
		request = parse_url(url)
		self.controller.show()
		results = self.controller.run_key_sequence(request.keys, execute=request.execute)
		log.info("URL %s -> %s", url, [r.outcome.value for r in results])
		return results

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} config={str(self.store.path)!r}>"
