# ---------------------------------------------------------------------------
# File: test_scheduler.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for ManualScheduler + ThreadScheduler.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/14/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import threading
import time

from pyleader.core.scheduler import ManualScheduler, ThreadScheduler


def test_manual_timers_fire_in_due_order():
	s = ManualScheduler()
	calls: list[str] = []

	s.call_later(0.3, lambda: calls.append("late"))
	s.call_later(0.1, lambda: calls.append("early"))
	s.call_later(0.1, lambda: calls.append("early-2"))

	assert s.advance(0.2) == 2
	assert calls == ["early", "early-2"]
	assert s.pending == 1

	s.advance(0.2)
	assert calls == ["early", "early-2", "late"]
	assert s.now == 0.4


def test_manual_cancel():
	s = ManualScheduler()
	calls: list[int] = []

	handle = s.call_later(0.1, lambda: calls.append(1))
	handle.cancel()

	assert s.advance(1.0) == 0
	assert calls == []
	assert s.pending == 0


def test_manual_timer_scheduled_from_timer_fires_in_same_advance():
	s = ManualScheduler()
	calls: list[str] = []

	def first() -> None:
		calls.append("first")
		s.call_later(0.1, lambda: calls.append("second"))

	s.call_later(0.1, first)
	s.advance(0.5)

	assert calls == ["first", "second"]


def test_manual_run_io_inline_success_and_error():
	s = ManualScheduler()
	done: list[int] = []
	errors: list[BaseException] = []

	s.run_io(lambda: 41 + 1, done.append, errors.append)
	s.run_io(lambda: 1 / 0, done.append, errors.append)

	assert done == [42]
	assert isinstance(errors[0], ZeroDivisionError)
	assert s.io_calls == 2


def test_thread_scheduler_results_arrive_on_pumping_thread():
	s = ThreadScheduler()
	seen: list[tuple[int, str]] = []
	try:
		s.run_io(
			lambda: threading.current_thread().name,
			lambda name: seen.append((threading.get_ident(), name)),
			lambda ex: None,
		)

		deadline = time.monotonic() + 5
		while not seen and time.monotonic() < deadline:
			s.pump(0.05)
	finally:
		s.shutdown()

	assert seen
	ident, worker_name = seen[0]
	assert ident == threading.get_ident()
	assert worker_name.startswith("pyleader-io")


def test_thread_scheduler_error_path():
	s = ThreadScheduler()
	errors: list[BaseException] = []
	try:
		s.run_io(lambda: 1 / 0, lambda _: None, errors.append)

		deadline = time.monotonic() + 5
		while not errors and time.monotonic() < deadline:
			s.pump(0.05)
	finally:
		s.shutdown()

	assert isinstance(errors[0], ZeroDivisionError)


def test_thread_scheduler_cancelled_timer_never_runs():
	s = ThreadScheduler()
	calls: list[str] = []
	try:
		handle = s.call_later(0.05, lambda: calls.append("cancelled"))
		s.call_later(0.05, lambda: calls.append("kept"))
		handle.cancel()

		deadline = time.monotonic() + 5
		while "kept" not in calls and time.monotonic() < deadline:
			s.pump(0.05)
	finally:
		s.shutdown()

	assert calls == ["kept"]
