# ---------------------------------------------------------------------------
# File: store.py
# ---------------------------------------------------------------------------
# Description:
#	ConfigStore: owns the canonical config tree and keeps it in sync with
#	<config_dir>/config.json.
#
# Notes:
#	- root, validation state and checksums are only touched on the primary
#	  context. File reads/writes go through Scheduler.run_io().
#	- Every structural edit goes through the mutation API (edit, append_child,
#	  insert_after, remove_child, replace_subtree, replace_root). Each one
#	  re-validates and schedules a debounced save.
#	- Before any write the file checksum is compared with the checksum of the
#	  last read (or write). A mismatch means someone edited the file by hand;
#	  the ConflictPrompt decides: overwrite, cancel, or read from file.
#	- While a save is in flight (including its prompt) further edits are
#	  accepted into root and one more save runs after it finishes.
#	- After a failed decode the root is the error sentinel and saves are
#	  skipped, so the broken file stays on disk for the user to fix.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial coding / release
# 01/15/2026	Paul G. LeDuc				Debounced save + conflict prompt
# 01/16/2026	Paul G. LeDuc				Last-started-wins loads
# ---------------------------------------------------------------------------

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar

from pyleader.core.logging import get_app_logger
from pyleader.core.scheduler import Cancellable, Scheduler
from pyleader.core.settings import default_config_dir
from pyleader.core.telemetry import Telemetry, get_telemetry
from pyleader.model import tree
from pyleader.model.codec import decode, encode
from pyleader.model.defaults import DEFAULT_CONFIG_JSON
from pyleader.model.nodes import Group, Node, error_root, is_error_root
from pyleader.model.validation import (
	ValidationError,
	ValidationErrorType,
	Validator,
	index_errors,
	path_key,
	validate,
)
from pyleader.services.events import AppEvent, EventBus
from pyleader.services.fileio import atomic_write, checksum, file_checksum, read_bytes
from pyleader.services.prompts import (
	AlertHandler,
	AlertStyle,
	ConflictChoice,
	ConflictPrompt,
)


log = get_app_logger("store")

T = TypeVar("T")


class SaveOutcome(str, Enum):
	WRITTEN = "written"
	CANCELLED = "cancelled"
	RELOADED = "reloaded"
	FAILED = "failed"
	SKIPPED = "skipped"
	DEFERRED = "deferred"


class ConfigStore:
	"""
	ConfigStore

	Canonical config tree + its backing file.
	"""

	file_name = "config.json"

	def __init__(
		self,
		config_dir: Path | str,
		*,
		scheduler: Scheduler,
		alert_handler: AlertHandler,
		conflict_prompt: ConflictPrompt,
		validator: Validator = validate,
		events: Optional[EventBus] = None,
		telemetry: Optional[Telemetry] = None,
		debounce_s: float = 0.3,
		default_dir_factory: Callable[[], Path] = default_config_dir,
	) -> None:
		self.config_dir = Path(config_dir).expanduser()
		self.root: Group = error_root()
		self.validation_errors: list[ValidationError] = []
		self.validation_errors_by_path: dict[str, ValidationErrorType] = {}
		self.last_read_checksum: Optional[str] = None
		self.is_loading = False

		self.events = events or EventBus()

		self._scheduler = scheduler
		self._alerts = alert_handler
		self._prompt = conflict_prompt
		self._validator = validator
		self._telemetry = telemetry or get_telemetry()
		self._debounce_s = debounce_s
		self._default_dir_factory = default_dir_factory

		self._pending_save: Optional[Cancellable] = None
		self._save_in_flight = False
		self._resave_requested = False
		self._load_generation = 0

	# -----------------------------------------------------------------------
	# File location
	# -----------------------------------------------------------------------

	@property
	def path(self) -> Path:
		return self.config_dir / self.file_name

	@property
	def exists(self) -> bool:
		return self.path.is_file()

	@property
	def has_pending_save(self) -> bool:
		return self._pending_save is not None

	@property
	def is_saving(self) -> bool:
		return self._save_in_flight

	# -----------------------------------------------------------------------
	# Startup + loading
	# -----------------------------------------------------------------------

	def ensure_and_load(self) -> None:
		self.ensure_valid_config_directory()
		self.ensure_config_file_exists()
		self.load()

	def ensure_valid_config_directory(self) -> None:
		if self.config_dir.is_dir():
			return

		missing = self.config_dir
		self.config_dir = Path(self._default_dir_factory())
		log.warning("Config directory %s does not exist; using %s", missing, self.config_dir)
		self._alerts.show_alert(
			AlertStyle.WARNING,
			f"Config directory does not exist: {missing}\nResetting to default location.",
		)

	def ensure_config_file_exists(self) -> None:
		if self.exists:
			return

		log.info("No config at %s; writing default config", self.path)
		try:
			atomic_write(self.path, DEFAULT_CONFIG_JSON.encode("utf-8"))
		except OSError as ex:
			self._handle_error(ex, critical=True)

	def load(
		self,
		suppress_conflict_prompt: bool = False,
		on_complete: Optional[Callable[[bool], None]] = None,
	) -> None:
		"""
		Read, decode and validate the config file, then swap it in as root.

		suppress_conflict_prompt drops any pending save so a reload that
		discards in-memory edits is never followed by a prompt for them.
		on_complete(success) runs on the primary context once the load settles.
		"""
		if suppress_conflict_prompt:
			self._cancel_pending_save()
			self._resave_requested = False

		self.is_loading = True
		self._load_generation += 1
		generation = self._load_generation

		if not self.exists:
			self.root = error_root()
			self._set_validation_errors([])
			self.is_loading = False
			if on_complete:
				on_complete(False)
			return

		path = self.path
		validator = self._validator

		def _read() -> tuple[Group, str, list[ValidationError]]:
			data = read_bytes(path)
			root = decode(data)
			return root, checksum(data), validator(root)

		self._scheduler.run_io(
			_read,
			lambda result: self._finish_load(generation, result, on_complete),
			lambda ex: self._fail_load(generation, ex, on_complete),
		)

	def reload_from_file(self) -> None:
		"""
		Discard in-memory changes and load from disk (no conflict prompt).
		"""
		self.events.send(AppEvent.WILL_RELOAD)

		def _done(ok: bool) -> None:
			if ok:
				self._telemetry.event("config.reloaded", {"path": str(self.path)})
				self.events.send(AppEvent.DID_RELOAD)

		self.load(suppress_conflict_prompt=True, on_complete=_done)

	def _finish_load(
		self,
		generation: int,
		result: tuple[Group, str, list[ValidationError]],
		on_complete: Optional[Callable[[bool], None]],
	) -> None:
		if generation != self._load_generation:
			log.debug("Dropping result of superseded load #%s", generation)
			return

		root, digest, errors = result
		self.root = root
		self.last_read_checksum = digest
		self._set_validation_errors(errors)
		self.is_loading = False

		log.info("Loaded config from %s (%d nodes, %d errors)", self.path, tree.count_nodes(root), len(errors))
		self._telemetry.event("config.loaded", {"nodes": tree.count_nodes(root), "errors": len(errors)})
		self.events.send(AppEvent.DID_LOAD)
		if on_complete:
			on_complete(True)

	def _fail_load(
		self,
		generation: int,
		ex: BaseException,
		on_complete: Optional[Callable[[bool], None]],
	) -> None:
		if generation != self._load_generation:
			return

		self.is_loading = False
		log.error("Failed to load config from %s: %s", self.path, ex)
		self._handle_error(ex, critical=True)
		self._telemetry.event("config.load_failed", {"error": str(ex)})
		self.events.send(AppEvent.LOAD_FAILED)
		if on_complete:
			on_complete(False)

	# -----------------------------------------------------------------------
	# Validation
	# -----------------------------------------------------------------------

	def revalidate(self) -> None:
		self._set_validation_errors(self._validator(self.root))

	def validation_error(self, path: Sequence[int]) -> Optional[ValidationErrorType]:
		return self.validation_errors_by_path.get(path_key(path))

	def _set_validation_errors(self, errors: list[ValidationError]) -> None:
		self.validation_errors = list(errors)
		self.validation_errors_by_path = index_errors(errors)
		self.events.send(AppEvent.VALIDATION_CHANGED)

	# -----------------------------------------------------------------------
	# Mutation API
	# -----------------------------------------------------------------------

	def edit(self, mutator: Callable[[Group], T]) -> T:
		"""
		Run mutator(root) in place, then re-validate and schedule a save.
		"""
		result = mutator(self.root)
		self._did_mutate()
		return result

	def append_child(self, group_path: Sequence[tree.PathSegment], node: Node) -> bool:
		ok = tree.append_child(self.root, group_path, node)
		if ok:
			self._did_mutate()
		return ok

	def insert_after(self, group_path: Sequence[tree.PathSegment], index: int, node: Node) -> bool:
		ok = tree.insert_after(self.root, group_path, index, node)
		if ok:
			self._did_mutate()
		return ok

	def remove_child(self, group_path: Sequence[tree.PathSegment], index: int) -> Optional[Node]:
		removed = tree.remove_child(self.root, group_path, index)
		if removed is not None:
			self._did_mutate()
		return removed

	def replace_subtree(self, group_path: Sequence[tree.PathSegment], group: Group) -> bool:
		ok = tree.replace_subtree(self.root, group_path, group)
		if ok:
			self._did_mutate()
		return ok

	def replace_root(self, root: Group) -> None:
		self.root = root
		self._did_mutate()

	def _did_mutate(self) -> None:
		# A load in progress will replace root and re-validate anyway.
		if self.is_loading:
			return

		self.revalidate()
		if not is_error_root(self.root):
			self.save_debounced()

	# -----------------------------------------------------------------------
	# Saving
	# -----------------------------------------------------------------------

	def save(self) -> SaveOutcome:
		"""
		Save root now (blocking), with conflict detection.
		"""
		self._cancel_pending_save()

		if is_error_root(self.root):
			log.warning("Not saving: config failed to load; fix or reload the file first")
			return SaveOutcome.SKIPPED

		if self._save_in_flight:
			self._resave_requested = True
			return SaveOutcome.DEFERRED

		data = encode(self.root)

		if self._has_conflict(self._current_checksum()):
			choice = self._ask_conflict()
			if choice is ConflictChoice.RELOAD:
				self.reload_from_file()
				return SaveOutcome.RELOADED
			if choice is ConflictChoice.CANCEL:
				return SaveOutcome.CANCELLED

		self.revalidate()

		try:
			self._write(self.path, data)
		except OSError as ex:
			self._report_write_failure(ex)
			return SaveOutcome.FAILED

		self._did_write(data)
		return SaveOutcome.WRITTEN

	def save_debounced(self) -> None:
		"""
		(Re)start the debounce timer; the flush encodes root as it is then.
		"""
		if self._save_in_flight:
			self._resave_requested = True
			return

		self._cancel_pending_save()
		self._pending_save = self._scheduler.call_later(self._debounce_s, self._flush)

	def flush_pending_save(self) -> Optional[SaveOutcome]:
		"""
		Run a pending debounced save right away (used at shutdown).
		"""
		if self._pending_save is None and not self._resave_requested:
			return None
		self._resave_requested = False
		return self.save()

	def _flush(self) -> None:
		self._pending_save = None

		if is_error_root(self.root):
			return

		if self.is_loading:
			self.save_debounced()
			return

		data = encode(self.root)
		self._save_in_flight = True

		path = self.path
		has_baseline = self.last_read_checksum is not None

		self._scheduler.run_io(
			lambda: file_checksum(path) if has_baseline else None,
			lambda current: self._after_conflict_check(data, current),
			self._fail_save,
		)

	def _after_conflict_check(self, data: bytes, current: Optional[str]) -> None:
		if self._has_conflict(current):
			choice = self._ask_conflict()
			if choice is ConflictChoice.RELOAD:
				self._save_in_flight = False
				self._resave_requested = False
				self.reload_from_file()
				return
			if choice is ConflictChoice.CANCEL:
				self._finish_flight()
				return

		path = self.path
		self._scheduler.run_io(
			lambda: self._write(path, data),
			lambda _: self._after_write(data),
			self._fail_save,
		)

	def _after_write(self, data: bytes) -> None:
		self._did_write(data)
		self._finish_flight()

	def _fail_save(self, ex: BaseException) -> None:
		self._report_write_failure(ex)
		self._finish_flight()

	def _finish_flight(self) -> None:
		self._save_in_flight = False
		if self._resave_requested:
			self._resave_requested = False
			self.save_debounced()

	def _cancel_pending_save(self) -> None:
		if self._pending_save is not None:
			self._pending_save.cancel()
			self._pending_save = None

	# -----------------------------------------------------------------------
	# Conflict detection + writes
	# -----------------------------------------------------------------------

	def _current_checksum(self) -> Optional[str]:
		if self.last_read_checksum is None:
			return None
		return file_checksum(self.path)

	def _has_conflict(self, current: Optional[str]) -> bool:
		if self.last_read_checksum is None or current is None:
			return False
		return current != self.last_read_checksum

	def _ask_conflict(self) -> ConflictChoice:
		log.warning("Config file %s changed on disk since it was last read", self.path)
		choice = self._prompt.ask_overwrite_cancel_reload()
		log.info("Conflict resolution: %s", choice.value)
		self._telemetry.event("config.conflict", {"choice": choice.value})
		return choice

	def _write(self, path: Path, data: bytes) -> None:
		with self._telemetry.timer("config.write_ms"):
			atomic_write(path, data)

	def _did_write(self, data: bytes) -> None:
		self.last_read_checksum = checksum(data)
		log.info("Saved config to %s (%d bytes)", self.path, len(data))
		self._telemetry.event("config.saved", {"bytes": len(data)})
		self.events.send(AppEvent.DID_SAVE)

	def _report_write_failure(self, ex: BaseException) -> None:
		log.error("Failed to save config to %s: %s", self.path, ex)
		self._alerts.show_alert(AlertStyle.CRITICAL, f"Failed to save config: {ex}")
		self._telemetry.event("config.save_failed", {"error": str(ex)})
		self.events.send(AppEvent.SAVE_FAILED)

	# -----------------------------------------------------------------------
	# Errors
	# -----------------------------------------------------------------------

	def _handle_error(self, ex: BaseException, critical: bool) -> None:
		self._alerts.show_alert(
			AlertStyle.CRITICAL if critical else AlertStyle.WARNING,
			str(ex),
		)
		if critical:
			self.root = error_root()
			self._set_validation_errors([])
