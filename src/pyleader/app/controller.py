# ---------------------------------------------------------------------------
# File: controller.py
# ---------------------------------------------------------------------------
# Description:
#	Controller: turns key presses into navigation, selection and dispatch.
#
# Notes:
#	- The controller never edits the tree itself; add/delete go through the
#	  ConfigStore mutation API, which re-validates and schedules a save.
#	- Side effects live behind two sinks:
#		ActionDispatcher	run_action(action) / run_group(group)
#		WindowSink			show() / hide() / not_found() / is_visible
#	- hide(after_close) clears navigation before after_close runs, so an
#	  action never sees a half-open menu.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Sticky + group-run modifiers
# 01/15/2026	Paul G. LeDuc				add_action / delete via ConfigStore
# 01/16/2026	Paul G. LeDuc				Reload indication
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Protocol, Sequence

from pyleader.app.keys import Modifier, ModifierKeyConfig, keys_match
from pyleader.app.navigation import NavigationState
from pyleader.core.logging import get_app_logger
from pyleader.core.scheduler import Cancellable, Scheduler
from pyleader.core.telemetry import Telemetry, get_telemetry
from pyleader.model.nodes import Action, Group, Node
from pyleader.model.tree import PathSegment, index_of_uid, iter_actions, resolve_group_path
from pyleader.services.events import AppEvent, EventBus
from pyleader.services.prompts import AlertHandler, AlertStyle
from pyleader.services.store import ConfigStore


log = get_app_logger("controller")


class KeyOutcome(str, Enum):
	PREVIEWED = "previewed"
	RAN_ACTION = "ran_action"
	RAN_GROUP = "ran_group"
	NAVIGATED = "navigated"
	NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class KeyResult:
	outcome: KeyOutcome
	node: Optional[Node] = None
	closes: bool = False

	@property
	def handled(self) -> bool:
		return self.outcome is not KeyOutcome.NOT_FOUND


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class ActionDispatcher(Protocol):
	def run_action(self, action: Action) -> None: ...
	def run_group(self, group: Group) -> None: ...


class BaseDispatcher:
	"""
	Runs a group as every descendant action, depth-first in child order.
	"""

	def run_action(self, action: Action) -> None:
		raise NotImplementedError

	def run_group(self, group: Group) -> None:
		for action in iter_actions(group):
			self.run_action(action)


class LoggingDispatcher(BaseDispatcher):
	"""
	Logs instead of launching anything. Keeps a record for callers that show it.
	"""

	def __init__(self) -> None:
		self.dispatched: list[Action] = []

	def run_action(self, action: Action) -> None:
		log.info("Run %s %s (%s)", action.kind.value, action.value, action.display_name)
		self.dispatched.append(action)


class WindowSink(Protocol):
	@property
	def is_visible(self) -> bool: ...
	def show(self) -> None: ...
	def hide(self) -> None: ...
	def not_found(self) -> None: ...


class HeadlessWindow:
	def __init__(self) -> None:
		self._visible = False
		self.not_found_count = 0

	@property
	def is_visible(self) -> bool:
		return self._visible

	def show(self) -> None:
		self._visible = True

	def hide(self) -> None:
		self._visible = False

	def not_found(self) -> None:
		self.not_found_count += 1


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class Controller:
	def __init__(
		self,
		store: ConfigStore,
		*,
		scheduler: Scheduler,
		alert_handler: AlertHandler,
		dispatcher: Optional[ActionDispatcher] = None,
		window: Optional[WindowSink] = None,
		state: Optional[NavigationState] = None,
		events: Optional[EventBus] = None,
		modifier_config: ModifierKeyConfig | str = ModifierKeyConfig.CONTROL_GROUP_OPTION_STICKY,
		telemetry: Optional[Telemetry] = None,
		reload_indicator_s: float = 1.2,
	) -> None:
		self.store = store
		self.state = state or NavigationState(root_provider=lambda: store.root)
		self.window: WindowSink = window or HeadlessWindow()
		self.dispatcher: ActionDispatcher = dispatcher or LoggingDispatcher()
		self.events = events or store.events
		self.modifier_config = ModifierKeyConfig.from_value(modifier_config)

		self._scheduler = scheduler
		self._alerts = alert_handler
		self._telemetry = telemetry or get_telemetry()
		self._reload_indicator_s = reload_indicator_s
		self._refresh_timer: Optional[Cancellable] = None

		self._unsubscribe = self.events.subscribe(self._on_event)

	def close(self) -> None:
		self._unsubscribe()
		if self._refresh_timer is not None:
			self._refresh_timer.cancel()
			self._refresh_timer = None

	# -----------------------------------------------------------------------
	# Key handling
	# -----------------------------------------------------------------------

	def handle_key(self, key: str, modifiers: Optional[Modifier] = None, execute: bool = True) -> KeyResult:
		"""
		Look key up among the current group's children (first match wins).
		"""
		hit = self._find_child(key)
		if hit is None:
			log.debug("No entry for key %r in current group", key)
			self.window.not_found()
			self._telemetry.event("key.not_found", {"key": key})
			return KeyResult(KeyOutcome.NOT_FOUND)

		_, node = hit
		if isinstance(node, Action):
			if not execute:
				return KeyResult(KeyOutcome.PREVIEWED, node)
			return self._run_action_for_key(node, modifiers)

		if execute and self.modifier_config.is_group_run(modifiers):
			self.hide(after_close=lambda: self._run_group(node))
			return KeyResult(KeyOutcome.RAN_GROUP, node, closes=True)

		self._enter(node)
		return KeyResult(KeyOutcome.NAVIGATED, node)

	def run_key_sequence(self, keys: Iterable[str], execute: bool = True) -> list[KeyResult]:
		"""
		Start from the root and feed keys one by one.

		Stops at the first key that is not found or that closes the menu.
		"""
		self.clear()
		results: list[KeyResult] = []
		for key in keys:
			result = self.handle_key(key, execute=execute)
			results.append(result)
			if not result.handled or result.closes:
				break
		return results

	def _find_child(self, key: str) -> Optional[tuple[int, Node]]:
		if not key:
			return None
		for i, child in enumerate(self.state.current_actions):
			if keys_match(child.key, key):
				return i, child
		return None

	def _run_action_for_key(self, action: Action, modifiers: Optional[Modifier]) -> KeyResult:
		if self.modifier_config.is_sticky(modifiers):
			self._run_action(action)
			return KeyResult(KeyOutcome.RAN_ACTION, action, closes=False)

		self.hide(after_close=lambda: self._run_action(action))
		return KeyResult(KeyOutcome.RAN_ACTION, action, closes=True)

	def _enter(self, group: Group) -> None:
		self.state.display = group.key
		self.state.navigate_to_group(group)

	def _run_action(self, action: Action) -> None:
		self.dispatcher.run_action(action)
		self._telemetry.event("action.dispatched", {"kind": action.kind.value})

	def _run_group(self, group: Group) -> None:
		self.dispatcher.run_group(group)
		self._telemetry.event("group.dispatched", {"key": group.key})

	# -----------------------------------------------------------------------
	# Selection
	# -----------------------------------------------------------------------

	def move_selection(self, delta: int) -> None:
		self.state.move_selection(delta)

	def execute_selected_item(self, modifiers: Optional[Modifier] = None) -> Optional[KeyResult]:
		"""
		Run the selected action, or enter the selected group.
		"""
		item = self.state.selected_item
		if item is None:
			return None

		if isinstance(item, Action):
			return self._run_action_for_key(item, modifiers)

		if self.modifier_config.is_group_run(modifiers):
			self.hide(after_close=lambda: self._run_group(item))
			return KeyResult(KeyOutcome.RAN_GROUP, item, closes=True)

		self._enter(item)
		return KeyResult(KeyOutcome.NAVIGATED, item)

	def enter_selected_group(self) -> bool:
		item = self.state.selected_item
		if not isinstance(item, Group):
			return False
		self._enter(item)
		return True

	def go_back(self) -> bool:
		return self.state.go_back()

	def clear(self) -> None:
		self.state.clear()

	# -----------------------------------------------------------------------
	# Window lifecycle
	# -----------------------------------------------------------------------

	def show(self) -> None:
		self.events.send(AppEvent.WILL_ACTIVATE)
		self.window.show()
		self.events.send(AppEvent.DID_ACTIVATE)

	def hide(self, after_close: Optional[Callable[[], None]] = None) -> None:
		self.events.send(AppEvent.WILL_DEACTIVATE)
		self.window.hide()
		self.clear()
		if after_close is not None:
			after_close()
		self.events.send(AppEvent.DID_DEACTIVATE)

	def _on_event(self, event: AppEvent) -> None:
		if event is not AppEvent.DID_RELOAD:
			return

		if self._refresh_timer is not None:
			self._refresh_timer.cancel()

		self.state.is_showing_refresh_state = True
		if not self.window.is_visible:
			self.show()
		self._refresh_timer = self._scheduler.call_later(self._reload_indicator_s, self._end_refresh)

	def _end_refresh(self) -> None:
		self._refresh_timer = None
		self.hide()
		self.state.is_showing_refresh_state = False

	# -----------------------------------------------------------------------
	# Editing
	# -----------------------------------------------------------------------

	def add_action(self, action: Node, navigation_path: Optional[Sequence[PathSegment]] = None) -> bool:
		"""
		Add a node next to the current selection.

		- Selected Group:	append inside it.
		- Selected Action:	insert right after it.
		- No selection:		append to the current group.

		A path that no longer resolves falls back to appending at the root.
		Returns True when the node ended up where it was asked to go.
		"""
		path = list(navigation_path) if navigation_path is not None else list(self.state.navigation_path)
		selected = self.state.selected_item if navigation_path is None else None

		if isinstance(selected, Group):
			ok = self.store.append_child([*path, selected], action)
		elif isinstance(selected, Action):
			ok = self._insert_after_selected(path, selected, action)
		else:
			ok = self.store.append_child(path, action)

		if not ok:
			log.warning("Could not resolve target group for new %s; appending at root", action.kind.value)
			self.store.append_child([], action)

		self._reselect(selected)
		return ok

	def _insert_after_selected(self, path: list[PathSegment], selected: Action, node: Node) -> bool:
		group = resolve_group_path(self.store.root, path)
		if group is None:
			return False
		index = index_of_uid(group.children, selected.uid)
		if index is None:
			return False
		return self.store.insert_after(path, index, node)

	def delete_selected_item(self) -> bool:
		item = self.state.selected_item
		index = self.state.selected_index
		if item is None or index is None:
			return False

		path = list(self.state.navigation_path)
		group = resolve_group_path(self.store.root, path)
		live_index = index_of_uid(group.children, item.uid) if group is not None else None
		if live_index is None:
			log.error("Current group no longer in config; not deleting %r", item.key)
			self._alerts.show_alert(
				AlertStyle.CRITICAL,
				"Could not delete item",
				"The current group is no longer in the configuration. Reload and try again.",
			)
			return False

		self.store.remove_child(path, live_index)

		remaining = len(self.state.current_actions)
		self.state.selected_index = min(index, remaining - 1) if remaining else None
		return True

	def _reselect(self, selected: Optional[Node]) -> None:
		if selected is None:
			return
		self.state.selected_index = index_of_uid(self.state.current_actions, selected.uid)
