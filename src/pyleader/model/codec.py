# ---------------------------------------------------------------------------
# File: codec.py
# ---------------------------------------------------------------------------
# Description:
#	JSON codec for the pyleader config tree.
#
# Notes:
#	- Output is deterministic: sorted keys, 2-space indent, trailing newline.
#	  Equal trees always encode to identical bytes (stable checksums).
#	- Empty/default optional fields are omitted to keep the file hand-editable.
#	- Keys are written in textual form ("enter", not "↵").
#	- Decode errors raise ConfigDecodeError with the index path of the bad node.
#
#	Node shape:
#		{ "key": "o", "type": "group", "label": "...", "actions": [ ... ] }
#		{ "key": "s", "type": "application", "value": "/Applications/Safari.app" }
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Report index path on decode errors
# ---------------------------------------------------------------------------

from __future__ import annotations

import json
from typing import Any, Optional

from pyleader.model.keymaps import canonical_key
from pyleader.model.nodes import Action, ActionType, Group, Node, ScriptArgument


class ConfigDecodeError(ValueError):
	"""
	Raised when config content cannot be decoded into a tree.
	"""

	def __init__(self, message: str, path: tuple[int, ...] = ()) -> None:
		self.path = path
		where = "/".join(str(i) for i in path) or "root"
		super().__init__(f"{message} (at {where})")


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def node_to_dict(node: Node) -> dict[str, Any]:
	out: dict[str, Any] = {}

	key = canonical_key(node.key)
	if key is not None:
		out["key"] = key

	out["type"] = node.kind.value

	if node.label:
		out["label"] = node.label
	if node.icon_path is not None:
		out["iconPath"] = node.icon_path

	if isinstance(node, Group):
		out["actions"] = [node_to_dict(child) for child in node.children]
		return out

	out["value"] = node.value
	if node.open_with is not None:
		out["openWith"] = node.open_with
	if node.arguments:
		out["arguments"] = [_argument_to_dict(a) for a in node.arguments]
	return out


def _argument_to_dict(arg: ScriptArgument) -> dict[str, Any]:
	out: dict[str, Any] = {"name": arg.name}
	if arg.default_value is not None:
		out["defaultValue"] = arg.default_value
	return out


def encode_str(root: Group) -> str:
	return json.dumps(node_to_dict(root), indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def encode(root: Group) -> bytes:
	"""
	Encode a root Group to UTF-8 bytes.
	"""
	return encode_str(root).encode("utf-8")


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode(data: bytes | str) -> Group:
	"""
	Decode config content into a root Group.

	Raises:
		ConfigDecodeError: malformed JSON or a node that does not fit the schema.
	"""
	if isinstance(data, bytes):
		try:
			text = data.decode("utf-8")
		except UnicodeDecodeError as ex:
			raise ConfigDecodeError(f"Config file is not valid UTF-8: {ex}") from ex
	else:
		text = data

	try:
		raw = json.loads(text)
	except json.JSONDecodeError as ex:
		raise ConfigDecodeError(f"Invalid JSON: {ex.msg} (line {ex.lineno}, column {ex.colno})") from ex

	node = node_from_dict(raw, ())
	if not isinstance(node, Group):
		raise ConfigDecodeError("Root node must be a group")
	return node


def node_from_dict(raw: Any, path: tuple[int, ...]) -> Node:
	if not isinstance(raw, dict):
		raise ConfigDecodeError(f"Expected an object, got {type(raw).__name__}", path)

	type_raw = raw.get("type")
	if type_raw is None:
		raise ConfigDecodeError("Missing required field 'type'", path)
	try:
		kind = ActionType(type_raw)
	except ValueError as ex:
		raise ConfigDecodeError(f"Unknown type {type_raw!r}", path) from ex

	key = _optional_str(raw, "key", path)
	label = _optional_str(raw, "label", path)
	icon_path = _optional_str(raw, "iconPath", path)

	if kind is ActionType.GROUP:
		actions = raw.get("actions")
		if not isinstance(actions, list):
			raise ConfigDecodeError("Group requires an 'actions' array", path)
		children = [node_from_dict(child, path + (i,)) for i, child in enumerate(actions)]
		return Group(key=key, label=label, icon_path=icon_path, children=children)

	value = raw.get("value")
	if not isinstance(value, str):
		raise ConfigDecodeError(f"Action of type {kind.value!r} requires a string 'value'", path)

	return Action(
		key=key,
		kind=kind,
		value=value,
		label=label,
		icon_path=icon_path,
		open_with=_optional_str(raw, "openWith", path),
		arguments=_arguments(raw.get("arguments"), path),
	)


def _optional_str(raw: dict[str, Any], name: str, path: tuple[int, ...]) -> Optional[str]:
	val = raw.get(name)
	if val is None or isinstance(val, str):
		return val
	raise ConfigDecodeError(f"Field {name!r} must be a string", path)


def _arguments(raw: Any, path: tuple[int, ...]) -> Optional[list[ScriptArgument]]:
	if raw is None:
		return None
	if not isinstance(raw, list):
		raise ConfigDecodeError("Field 'arguments' must be an array", path)

	args: list[ScriptArgument] = []
	for item in raw:
		if not isinstance(item, dict) or not isinstance(item.get("name"), str):
			raise ConfigDecodeError("Each argument requires a string 'name'", path)
		args.append(ScriptArgument(
			name=item["name"],
			default_value=_optional_str(item, "defaultValue", path),
		))
	return args
