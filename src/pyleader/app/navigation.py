# ---------------------------------------------------------------------------
# File: navigation.py
# ---------------------------------------------------------------------------
# Description:
#	NavigationState: where the user is in the config tree and what is selected.
#
# Notes:
#	- The tree is read through root_provider so a reload is picked up without
#	  rebuilding the state.
#	- navigation_path holds the Groups entered so far. current_group re-matches
#	  them by (key, label) against the live tree and falls back to the recorded
#	  Group when they no longer resolve.
#	- Nothing here raises on a stale or out-of-range selection; it reads as None.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Re-resolve path against live tree
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from pyleader.core.logging import get_app_logger
from pyleader.model.nodes import Group, Node
from pyleader.model.tree import resolve_group_path


log = get_app_logger("navigation")

RootProvider = Callable[[], Optional[Group]]


@dataclass(slots=True)
class NavigationState:
	root_provider: RootProvider
	display: Optional[str] = None
	is_showing_refresh_state: bool = False
	navigation_path: list[Group] = field(default_factory=list)
	selected_index: Optional[int] = None
	selection_history: list[Optional[int]] = field(default_factory=list)

	@property
	def root(self) -> Optional[Group]:
		return self.root_provider()

	@property
	def current_group(self) -> Optional[Group]:
		root = self.root
		if not self.navigation_path:
			return root

		if root is not None:
			live = resolve_group_path(root, self.navigation_path)
			if live is not None:
				return live
			log.debug("Navigation path no longer resolves; using recorded group")

		return self.navigation_path[-1]

	@property
	def current_actions(self) -> list[Node]:
		group = self.current_group
		return group.children if group is not None else []

	@property
	def selected_item(self) -> Optional[Node]:
		if self.selected_index is None:
			return None
		actions = self.current_actions
		if 0 <= self.selected_index < len(actions):
			return actions[self.selected_index]
		return None

	def navigate_to_group(self, group: Group) -> None:
		self.selection_history.append(self.selected_index)
		self.navigation_path.append(group)
		self.selected_index = None

	def go_back(self) -> bool:
		if not self.navigation_path:
			return False

		self.navigation_path.pop()
		self.selected_index = self.selection_history.pop() if self.selection_history else None

		current = self.current_group
		self.display = current.key if current is not None else None
		return True

	def move_selection(self, delta: int) -> None:
		count = len(self.current_actions)
		if count == 0:
			return

		if self.selected_index is None:
			self.selected_index = 0 if delta > 0 else count - 1
			return

		self.selected_index = (self.selected_index + delta) % count

	def clear(self) -> None:
		self.display = None
		self.is_showing_refresh_state = False
		self.navigation_path = []
		self.selected_index = None
		self.selection_history = []
