# ---------------------------------------------------------------------------
# File: events.py
# ---------------------------------------------------------------------------
# Description:
#	App event bus for pyleader (reload / load / save / window lifecycle).
#
# Notes:
#	- The store and controller publish; UI sinks and the controller subscribe.
#	- Events are delivered synchronously on the caller (the primary context).
#	- Safe to send with no subscribers.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/03/2026	Paul G. LeDuc				Initial StatusService
# 01/13/2026	Paul G. LeDuc				Rework into EventBus for config events
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional


class AppEvent(str, Enum):
	WILL_RELOAD = "will_reload"
	DID_RELOAD = "did_reload"
	DID_LOAD = "did_load"
	LOAD_FAILED = "load_failed"
	DID_SAVE = "did_save"
	SAVE_FAILED = "save_failed"
	VALIDATION_CHANGED = "validation_changed"
	WILL_ACTIVATE = "will_activate"
	DID_ACTIVATE = "did_activate"
	WILL_DEACTIVATE = "will_deactivate"
	DID_DEACTIVATE = "did_deactivate"


EventCallback = Callable[[AppEvent], None]


@dataclass(slots=True)
class EventBus:
	"""
	EventBus

	Holds subscribers and the last event sent.
	"""
	_subscribers: list[EventCallback] = field(default_factory=list)
	last_event: Optional[AppEvent] = None

	def subscribe(self, cb: EventCallback) -> Callable[[], None]:
		"""
		Register a callback. Returns a function that unsubscribes it.
		"""
		self._subscribers.append(cb)

		def _unsubscribe() -> None:
			self.unsubscribe(cb)

		return _unsubscribe

	def unsubscribe(self, cb: EventCallback) -> None:
		if cb in self._subscribers:
			self._subscribers.remove(cb)

	def send(self, event: AppEvent) -> None:
		self.last_event = event
		# Copy: callbacks may unsubscribe themselves.
		for cb in list(self._subscribers):
			cb(event)
