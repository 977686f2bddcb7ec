# ---------------------------------------------------------------------------
# File: test_fileio.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for checksum + atomic write helpers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial tests
# 01/19/2026	Paul G. LeDuc				File mode + read_bytes
# ---------------------------------------------------------------------------

from __future__ import annotations

import hashlib
import os
import stat

import pytest

from pyleader.services import fileio


def test_checksum_is_sha256_hex():
	assert fileio.checksum(b"abc") == hashlib.sha256(b"abc").hexdigest()


def test_file_checksum_missing_is_none(tmp_path):
	assert fileio.file_checksum(tmp_path / "absent.json") is None


def test_atomic_write_replaces_content(tmp_path):
	path = tmp_path / "config.json"
	path.write_bytes(b"old")

	fileio.atomic_write(path, b"new")

	assert path.read_bytes() == b"new"
	assert fileio.file_checksum(path) == fileio.checksum(b"new")
	assert os.listdir(tmp_path) == ["config.json"]


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_atomic_write_keeps_existing_mode(tmp_path):
	path = tmp_path / "config.json"
	path.write_bytes(b"old")
	os.chmod(path, 0o644)

	fileio.atomic_write(path, b"new")

	assert stat.S_IMODE(path.stat().st_mode) == 0o644
	assert path.read_bytes() == b"new"


def test_atomic_write_new_file(tmp_path):
	path = tmp_path / "config.json"

	fileio.atomic_write(path, b"{}")

	assert fileio.read_bytes(path) == b"{}"


def test_atomic_write_failure_keeps_old_file_and_removes_temp(tmp_path, monkeypatch):
	path = tmp_path / "config.json"
	path.write_bytes(b"old")

	def _boom(src, dst):
		raise OSError("disk full")

	monkeypatch.setattr(fileio.os, "replace", _boom)

	with pytest.raises(OSError):
		fileio.atomic_write(path, b"new")

	assert path.read_bytes() == b"old"
	assert os.listdir(tmp_path) == ["config.json"]


def test_atomic_write_missing_directory_raises(tmp_path):
	with pytest.raises(OSError):
		fileio.atomic_write(tmp_path / "nope" / "config.json", b"x")
