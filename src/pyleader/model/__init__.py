# ---------------------------------------------------------------------------
# File: model/__init__.py
# ---------------------------------------------------------------------------
# Description:
#	Config tree model for pyleader (nodes, codec, validation, path helpers).
#
# Notes:
#	No UI or file I/O in this package.
# ---------------------------------------------------------------------------

from __future__ import annotations

from .nodes import Action, ActionType, Group, Node, ScriptArgument, error_root, is_error_root
from .codec import ConfigDecodeError, decode, encode
from .validation import ValidationError, ValidationErrorType, validate

__all__ = [
	"Action",
	"ActionType",
	"Group",
	"Node",
	"ScriptArgument",
	"error_root",
	"is_error_root",
	"ConfigDecodeError",
	"decode",
	"encode",
	"ValidationError",
	"ValidationErrorType",
	"validate",
]
