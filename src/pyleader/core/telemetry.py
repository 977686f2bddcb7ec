# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Lightweight telemetry subsystem for pyleader.
#
#	Small facade for emitting events, counters and timers from the store,
#	the controller and the key router. Backends are "sinks".
#
# Notes:
#	- Safe to call even when disabled (NullSink).
#	- LogSink writes through stdlib logging.
#	- MemorySink keeps everything in lists for tests.
#
#	Names in use:
#		config.loaded / config.load_failed / config.reloaded
#		config.saved / config.save_failed / config.conflict
#		config.write_ms (timer)
#		keys.pressed (counter) / key.unhandled / command.dispatched
#		action.dispatched / group.dispatched / key.not_found
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/02/2026	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Config-driven init + enabled flag
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any]


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any]


class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Emits events and metrics at DEBUG level through a logger.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event name=%s attrs=%s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug(
			"telemetry.metric name=%s value=%s attrs=%s",
			metric.name,
			metric.value,
			metric.attrs,
		)


class MemorySink:
	"""
	In-memory sink for tests.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	def __init__(self, enabled: bool, sink: TelemetrySink) -> None:
		self._enabled = enabled
		self._sink = sink

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name=name, timestamp=time.time(), attrs=attrs or {}))

	def counter(self, name: str, value: int = 1, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name=name, value=float(value), attrs=attrs or {}))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, attrs or {})


class _TelemetryTimer:
	"""
	Context manager reporting elapsed milliseconds as a metric.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		self._telemetry.counter(self._name, value=int(elapsed_ms), attrs=self._attrs)


# ---------------------------------------------------------------------------
# Global helpers
# ---------------------------------------------------------------------------

_telemetry: Optional[Telemetry] = None


def init_telemetry(cfg: Any, logger: Optional[logging.Logger] = None) -> Telemetry:
	"""
	Initialize the global telemetry instance.

	cfg keys:
		telemetry_enabled:	bool
		telemetry_sink:		"null" | "log"
	"""
	global _telemetry

	enabled = bool(cfg.get("telemetry_enabled", False))
	sink_name = cfg.get("telemetry_sink", "null")

	if enabled and sink_name == "log" and logger is not None:
		_telemetry = Telemetry(True, LogSink(logger))
	else:
		_telemetry = Telemetry(enabled, NullSink())
	return _telemetry


def get_telemetry() -> Telemetry:
	"""
	Return the global telemetry instance (disabled until init_telemetry runs).
	"""
	global _telemetry

	if _telemetry is None:
		_telemetry = Telemetry(False, NullSink())
	return _telemetry
