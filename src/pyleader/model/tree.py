# ---------------------------------------------------------------------------
# File: tree.py
# ---------------------------------------------------------------------------
# Description:
#	Path resolution + structural edits for the pyleader config tree.
#
# Notes:
#	- Paths are sequences of Groups (or GroupMatchers) from the root down.
#	  Each segment is re-matched by (key, label) against the tree it is applied
#	  to, so a path captured before a reload still works if the groups survive.
#	- First match in child order wins. A group with neither key nor label is
#	  ambiguous; matching it logs a warning but still resolves.
#	- Edit helpers return False / None when a segment no longer resolves and
#	  leave the tree untouched.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/11/2026	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Add replace_subtree + collect_action_values
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Union
from uuid import UUID

from pyleader.core.logging import get_app_logger
from pyleader.model.nodes import Action, ActionType, Group, Node


log = get_app_logger("tree")


@dataclass(frozen=True, slots=True)
class GroupMatcher:
	"""
	Identifies a Group by (key, label), independent of object identity.
	"""
	key: Optional[str]
	label: Optional[str]

	@classmethod
	def for_group(cls, group: Group) -> "GroupMatcher":
		return cls(key=group.key, label=group.label)

	def matches(self, group: Group) -> bool:
		if group.key != self.key or group.label != self.label:
			return False

		if self.key is None and self.label is None:
			log.warning("Matching group with no key and no label; first match wins and may be wrong")
		return True


PathSegment = Union[Group, GroupMatcher]


def _as_matcher(segment: PathSegment) -> GroupMatcher:
	if isinstance(segment, GroupMatcher):
		return segment
	return GroupMatcher.for_group(segment)


def groups_match(a: Group, b: Group) -> bool:
	return GroupMatcher.for_group(b).matches(a)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def find_child_group(parent: Group, segment: PathSegment) -> Optional[tuple[int, Group]]:
	matcher = _as_matcher(segment)
	for i, child in enumerate(parent.children):
		if isinstance(child, Group) and matcher.matches(child):
			return i, child
	return None


def resolve_index_path(root: Group, path: Sequence[PathSegment]) -> Optional[tuple[int, ...]]:
	"""
	Resolve a group path to child indices, or None if any segment is missing.
	"""
	indices: list[int] = []
	current = root
	for segment in path:
		hit = find_child_group(current, segment)
		if hit is None:
			return None
		idx, current = hit
		indices.append(idx)
	return tuple(indices)


def resolve_group_path(root: Group, path: Sequence[PathSegment]) -> Optional[Group]:
	"""
	Return the live Group addressed by path (root for an empty path).
	"""
	current = root
	for segment in path:
		hit = find_child_group(current, segment)
		if hit is None:
			return None
		current = hit[1]
	return current


def node_at(root: Group, index_path: Sequence[int]) -> Optional[Node]:
	node: Node = root
	for idx in index_path:
		if not isinstance(node, Group) or not (0 <= idx < len(node.children)):
			return None
		node = node.children[idx]
	return node


def index_of_uid(children: Sequence[Node], uid: UUID) -> Optional[int]:
	for i, child in enumerate(children):
		if child.uid == uid:
			return i
	return None


def iter_actions(group: Group) -> Iterator[Action]:
	"""
	Yield every Action under group, depth-first in child order.
	"""
	stack: list[Iterator[Node]] = [iter(group.children)]
	while stack:
		child = next(stack[-1], None)
		if child is None:
			stack.pop()
			continue
		if isinstance(child, Group):
			stack.append(iter(child.children))
		else:
			yield child


def collect_action_values(root: Group, kinds: Iterable[ActionType]) -> set[str]:
	wanted = set(kinds)
	return {a.value for a in iter_actions(root) if a.kind in wanted}


def count_nodes(root: Group) -> int:
	total = 0
	stack: list[Group] = [root]
	while stack:
		group = stack.pop()
		total += len(group.children)
		stack.extend(c for c in group.children if isinstance(c, Group))
	return total


# ---------------------------------------------------------------------------
# Edits
# ---------------------------------------------------------------------------

def append_child(root: Group, path: Sequence[PathSegment], node: Node) -> bool:
	target = resolve_group_path(root, path)
	if target is None:
		return False
	target.children.append(node)
	return True


def insert_after(root: Group, path: Sequence[PathSegment], index: int, node: Node) -> bool:
	target = resolve_group_path(root, path)
	if target is None or not (0 <= index < len(target.children)):
		return False
	target.children.insert(index + 1, node)
	return True


def remove_child(root: Group, path: Sequence[PathSegment], index: int) -> Optional[Node]:
	target = resolve_group_path(root, path)
	if target is None or not (0 <= index < len(target.children)):
		return None
	return target.children.pop(index)


def replace_subtree(root: Group, path: Sequence[PathSegment], group: Group) -> bool:
	"""
	Replace the group addressed by a non-empty path with another group.
	"""
	if not path:
		return False

	parent = resolve_group_path(root, path[:-1])
	if parent is None:
		return False

	hit = find_child_group(parent, path[-1])
	if hit is None:
		return False

	parent.children[hit[0]] = group
	return True
