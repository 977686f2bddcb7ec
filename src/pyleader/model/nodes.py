# ---------------------------------------------------------------------------
# File: nodes.py
# ---------------------------------------------------------------------------
# Description:
#	Config tree node types for pyleader (Action / Group).
#
# Notes:
#	- A tree is a root Group whose children are Actions and nested Groups.
#	- Child order is display order and dispatch precedence (first match wins).
#	- uid is a process-local identity for UI tracking. It is never persisted
#	  and never takes part in equality.
#	- Keys are stored in textual form (see model.keymaps.canonical_key).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# 01/11/2026	Paul G. LeDuc				Add display names + error sentinel
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Optional, Union
from uuid import UUID, uuid4

from pyleader.model.keymaps import canonical_key


class ActionType(str, Enum):
	GROUP = "group"
	APPLICATION = "application"
	URL = "url"
	COMMAND = "command"
	FOLDER = "folder"
	FILE = "file"
	SCRIPT = "script"


ACTION_KINDS: frozenset[ActionType] = frozenset(t for t in ActionType if t is not ActionType.GROUP)


@dataclass(slots=True)
class ScriptArgument:
	name: str
	default_value: Optional[str] = None


@dataclass(slots=True)
class Action:
	"""
	Action

	Leaf node that performs one effect when dispatched.

	- key:			Trigger key (textual form), or None when unbound.
	- kind:			What the value means (application path, URL, command, ...).
	- value:		Path / URL / command text.
	- label:		Optional display label.
	- icon_path:	Optional icon override.
	- open_with:	Optional application used to open a folder/URL.
	- arguments:	Optional script arguments (script kind only).
	"""
	key: Optional[str]
	kind: ActionType
	value: str

	label: Optional[str] = None
	icon_path: Optional[str] = None
	open_with: Optional[str] = None
	arguments: Optional[list[ScriptArgument]] = None

	uid: UUID = field(default_factory=uuid4, compare=False, repr=False)

	def __post_init__(self) -> None:
		self.kind = ActionType(self.kind)
		if self.kind is ActionType.GROUP:
			raise ValueError("Action kind must not be 'group' (use Group)")
		self.key = canonical_key(self.key)
		if not self.label:
			self.label = None
		if not self.arguments:
			self.arguments = None

	@property
	def display_name(self) -> str:
		if self.label:
			return self.label
		return self.best_guess_display_name

	@property
	def best_guess_display_name(self) -> str:
		name = PurePath(self.value).name

		if self.kind is ActionType.APPLICATION:
			return name.replace(".app", "")
		if self.kind is ActionType.COMMAND:
			parts = self.value.split(" ")
			return parts[0] if parts else self.value
		if self.kind in (ActionType.FOLDER, ActionType.FILE):
			return name
		if self.kind is ActionType.SCRIPT:
			return name.replace(".sh", "")
		if self.kind is ActionType.URL:
			return "URL"
		return self.value


@dataclass(slots=True)
class Group:
	"""
	Group

	Internal node holding an ordered list of child Actions / Groups.
	"""
	key: Optional[str] = None
	label: Optional[str] = None
	icon_path: Optional[str] = None
	children: list["Node"] = field(default_factory=list)

	uid: UUID = field(default_factory=uuid4, compare=False, repr=False)

	def __post_init__(self) -> None:
		self.key = canonical_key(self.key)
		if not self.label:
			self.label = None

	@property
	def kind(self) -> ActionType:
		return ActionType.GROUP

	@property
	def display_name(self) -> str:
		return self.label or "Group"


Node = Union[Action, Group]


# ---------------------------------------------------------------------------
# Error sentinel
# ---------------------------------------------------------------------------

ERROR_ROOT_KEY = "🚫"
ERROR_ROOT_LABEL = "Config error"


def error_root() -> Group:
	"""
	Return the root installed after a failed load.

	A fresh instance each call (Groups are mutable).
	"""
	return Group(key=ERROR_ROOT_KEY, label=ERROR_ROOT_LABEL, children=[])


def is_error_root(group: Optional[Group]) -> bool:
	# Key + label only; children may have been edited since install.
	if group is None:
		return False
	return group.key == ERROR_ROOT_KEY and group.label == ERROR_ROOT_LABEL
