# ---------------------------------------------------------------------------
# File: scheduler.py
# ---------------------------------------------------------------------------
# Description:
#	Execution contexts for pyleader (primary context, file I/O, timers).
#
# Notes:
#	- Every callback handed to a Scheduler runs on the *primary* context, the
#	  single thread allowed to touch the config tree and navigation state.
#	- run_io() runs blocking work elsewhere and hands the result back.
#	- ThreadScheduler: one I/O worker (reads/writes never interleave),
#	  threading.Timer for delays, a queue drained by pump() on the owner.
#	- ManualScheduler: virtual clock for tests; I/O runs inline.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/13/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Add ManualScheduler for deterministic tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import queue
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol, TypeVar


T = TypeVar("T")

Callback = Callable[[], None]
ErrorCallback = Callable[[BaseException], None]


class Cancellable(Protocol):
	def cancel(self) -> None: ...


class Scheduler(Protocol):
	def call_later(self, delay: float, fn: Callback) -> Cancellable: ...
	def post(self, fn: Callback) -> None: ...
	def run_io(
		self,
		fn: Callable[[], T],
		on_done: Callable[[T], None],
		on_error: ErrorCallback,
	) -> None: ...


# ---------------------------------------------------------------------------
# Thread-backed scheduler
# ---------------------------------------------------------------------------

class _TimerHandle:
	def __init__(self) -> None:
		self.cancelled = False
		self.timer: Optional[threading.Timer] = None

	def cancel(self) -> None:
		# The flag also covers a timer that already fired but whose callback
		# is still waiting in the primary queue.
		self.cancelled = True
		if self.timer is not None:
			self.timer.cancel()


class ThreadScheduler:
	"""
	ThreadScheduler

	The thread that calls pump() is the primary context.
	"""

	def __init__(self) -> None:
		self._queue: "queue.Queue[Callback]" = queue.Queue()
		self._io = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pyleader-io")

	def call_later(self, delay: float, fn: Callback) -> Cancellable:
		handle = _TimerHandle()

		def _fire() -> None:
			if not handle.cancelled:
				fn()

		timer = threading.Timer(delay, lambda: self.post(_fire))
		timer.daemon = True
		handle.timer = timer
		timer.start()
		return handle

	def post(self, fn: Callback) -> None:
		self._queue.put(fn)

	def run_io(
		self,
		fn: Callable[[], T],
		on_done: Callable[[T], None],
		on_error: ErrorCallback,
	) -> None:
		future = self._io.submit(fn)

		def _complete(f: Future) -> None:
			ex = f.exception()
			if ex is not None:
				self.post(lambda: on_error(ex))
			else:
				result = f.result()
				self.post(lambda: on_done(result))

		future.add_done_callback(_complete)

	def pump(self, timeout: float = 0.0) -> int:
		"""
		Run queued primary-context callbacks; wait up to timeout for the first.

		Returns the number of callbacks run.
		"""
		ran = 0
		block = timeout > 0
		while True:
			try:
				fn = self._queue.get(block=block, timeout=timeout if block else None)
			except queue.Empty:
				return ran
			block = False
			fn()
			ran += 1

	def shutdown(self) -> None:
		self._io.shutdown(wait=True)
		self.pump()


# ---------------------------------------------------------------------------
# Manual scheduler (deterministic)
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _ManualTimer:
	due: float
	seq: int
	fn: Callback
	cancelled: bool = False

	def cancel(self) -> None:
		self.cancelled = True


@dataclass(slots=True)
class ManualScheduler:
	"""
	ManualScheduler

	Virtual clock: timers fire only from advance(). post() and run_io() run
	inline on the caller, which is treated as the primary context.
	"""
	now: float = 0.0
	io_calls: int = 0
	_timers: list[_ManualTimer] = field(default_factory=list)
	_seq: int = 0

	def call_later(self, delay: float, fn: Callback) -> Cancellable:
		self._seq += 1
		t = _ManualTimer(due=self.now + max(0.0, delay), seq=self._seq, fn=fn)
		self._timers.append(t)
		return t

	def post(self, fn: Callback) -> None:
		fn()

	def run_io(
		self,
		fn: Callable[[], Any],
		on_done: Callable[[Any], None],
		on_error: ErrorCallback,
	) -> None:
		self.io_calls += 1
		try:
			result = fn()
		except Exception as ex:
			on_error(ex)
			return
		on_done(result)

	@property
	def pending(self) -> int:
		return sum(1 for t in self._timers if not t.cancelled)

	def advance(self, seconds: float) -> int:
		"""
		Move the clock forward, firing due timers in (due, scheduling) order.
		"""
		target = self.now + seconds
		fired = 0
		while True:
			due = [t for t in self._timers if not t.cancelled and t.due <= target]
			if not due:
				break
			t = min(due, key=lambda x: (x.due, x.seq))
			self._timers.remove(t)
			self.now = max(self.now, t.due)
			t.fn()
			fired += 1

		self._timers = [t for t in self._timers if not t.cancelled]
		self.now = target
		return fired
