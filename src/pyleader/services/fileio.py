# ---------------------------------------------------------------------------
# File: fileio.py
# ---------------------------------------------------------------------------
# Description:
#	File helpers for the config store (read, checksum, atomic write).
#
# Notes:
#	- Blocking; the store calls these through Scheduler.run_io().
#	- atomic_write() writes a sibling temp file, fsyncs it and os.replace()s it
#	  onto the target, so readers see either the old or the new file.
#	- An existing target keeps its permission bits across the replace.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/19/2026	Paul G. LeDuc				Keep file mode on replace
# ---------------------------------------------------------------------------

from __future__ import annotations

import hashlib
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional


def checksum(data: bytes) -> str:
	return hashlib.sha256(data).hexdigest()


def read_bytes(path: Path) -> bytes:
	return path.read_bytes()


def file_checksum(path: Path) -> Optional[str]:
	"""
	Checksum of the file at path, or None if it is missing/unreadable.
	"""
	try:
		return checksum(read_bytes(path))
	except OSError:
		return None


def _existing_mode(path: Path) -> Optional[int]:
	try:
		return stat.S_IMODE(path.stat().st_mode)
	except FileNotFoundError:
		return None


def atomic_write(path: Path, data: bytes) -> None:
	"""
	Replace path with data atomically.

	Raises:
		OSError: the temp file could not be written or moved into place.
	"""
	mode = _existing_mode(path)
	fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
	try:
		with os.fdopen(fd, "wb") as handle:
			handle.write(data)
			handle.flush()
			os.fsync(handle.fileno())
		if mode is not None:
			# mkstemp creates 0600.
			os.chmod(tmp_name, mode)
		os.replace(tmp_name, path)
	except BaseException:
		try:
			os.unlink(tmp_name)
		except FileNotFoundError:
			pass
		raise
