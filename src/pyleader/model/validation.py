# ---------------------------------------------------------------------------
# File: validation.py
# ---------------------------------------------------------------------------
# Description:
#	Config tree validation for pyleader.
#
# Notes:
#	- validate() is pure, deterministic and never raises.
#	- Walks the tree with an explicit stack (no recursion limit on deep trees).
#	- Errors are addressed by index path from the root, e.g. (1, 0, 3).
#	- index_errors() builds the "1/0/3" -> type map used for O(1) row lookup.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/11/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Sequence

from pyleader.model.keymaps import is_special_key
from pyleader.model.nodes import Action, Group


class ValidationErrorType(str, Enum):
	EMPTY_KEY = "emptyKey"
	NON_SINGLE_CHARACTER_KEY = "nonSingleCharacterKey"
	DUPLICATE_KEY = "duplicateKey"
	MISSING_VALUE = "missingValue"


_MESSAGES: dict[ValidationErrorType, str] = {
	ValidationErrorType.EMPTY_KEY: "Key is empty",
	ValidationErrorType.NON_SINGLE_CHARACTER_KEY: "Key must be a single character",
	ValidationErrorType.DUPLICATE_KEY: "Key is already used by a sibling",
	ValidationErrorType.MISSING_VALUE: "Action has no value",
}


@dataclass(frozen=True, slots=True)
class ValidationError:
	path: tuple[int, ...]
	type: ValidationErrorType

	@property
	def message(self) -> str:
		return _MESSAGES[self.type]


Validator = Callable[[Group], list[ValidationError]]


def path_key(path: Sequence[int]) -> str:
	return "/".join(str(i) for i in path)


def index_errors(errors: Iterable[ValidationError]) -> dict[str, ValidationErrorType]:
	"""
	Map "/"-joined path -> error type. Later errors for the same path win.
	"""
	return {path_key(e.path): e.type for e in errors}


def validate(root: Group) -> list[ValidationError]:
	errors: list[ValidationError] = []
	stack: list[tuple[Group, tuple[int, ...]]] = [(root, ())]

	while stack:
		group, group_path = stack.pop()
		children = list(group.children)

		counts = Counter(c.key for c in children if c.key)

		for i, child in enumerate(children):
			path = group_path + (i,)
			key = child.key

			if key is None or key == "":
				errors.append(ValidationError(path, ValidationErrorType.EMPTY_KEY))
			elif len(key) != 1 and not is_special_key(key):
				errors.append(ValidationError(path, ValidationErrorType.NON_SINGLE_CHARACTER_KEY))
			elif counts[key] > 1:
				errors.append(ValidationError(path, ValidationErrorType.DUPLICATE_KEY))

			if isinstance(child, Action) and not child.value.strip():
				errors.append(ValidationError(path, ValidationErrorType.MISSING_VALUE))

		# Reversed so groups are visited in document order.
		for i in range(len(children) - 1, -1, -1):
			child = children[i]
			if isinstance(child, Group):
				stack.append((child, group_path + (i,)))

	return errors
