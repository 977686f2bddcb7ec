# ---------------------------------------------------------------------------
# File: urlscheme.py
# ---------------------------------------------------------------------------
# Description:
#	Parse pyleader:// URLs into navigation requests.
#
#	pyleader://navigate?keys=o,s				open group "o", run "s"
#	pyleader://navigate?keys=o,s&execute=false	walk there but only preview
#
# Notes:
#	- keys is split on "," before percent-decoding, so "%2C" addresses the
#	  comma key itself.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/16/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote, urlsplit


SCHEME = "pyleader"

_FALSE_VALUES = {"false", "0", "no", "off"}


@dataclass(frozen=True, slots=True)
class NavigateRequest:
	keys: tuple[str, ...]
	execute: bool = True


def parse_url(url: str) -> NavigateRequest:
	"""
	Raises:
		ValueError: not a pyleader:// URL, unknown action, or no keys.
	"""
	parts = urlsplit(url)
	if parts.scheme.lower() != SCHEME:
		raise ValueError(f"Not a {SCHEME}:// URL: {url!r}")

	action = (parts.netloc or parts.path.strip("/")).lower()
	if action != "navigate":
		raise ValueError(f"Unsupported {SCHEME} action: {action!r}")

	raw_keys = ""
	execute = True
	for pair in parts.query.split("&"):
		if not pair:
			continue
		name, _, value = pair.partition("=")
		if name == "keys":
			raw_keys = value
		elif name == "execute":
			execute = unquote(value).strip().lower() not in _FALSE_VALUES

	keys = tuple(unquote(k) for k in raw_keys.split(",") if k)
	if not keys:
		raise ValueError(f"No keys in {url!r}")

	return NavigateRequest(keys=keys, execute=execute)
