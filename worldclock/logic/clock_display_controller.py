"""
ClockDisplayController
----------------------
Drives the once-per-second refresh of all clock panels.

The controller knows nothing about Tk. It needs:
- a scheduler with Tk-style `after(ms, callback)` / `after_cancel(id)`
  (any tk widget qualifies), and
- one panel per configured timezone, each with `show_snapshot(snapshot)`.

All work happens inside scheduler callbacks on the UI thread, so no locking
is needed. Each tick re-arms the timer only after its refresh pass, so a slow
pass delays the next tick instead of queueing extra ones.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Optional, Protocol, Sequence, Set

from ..exceptions.errors import UnknownTimezoneError
from ..models.clock_snapshot import ClockSnapshot
from .timezone_clock_model import TimezoneClockModel

logger = logging.getLogger(__name__)


class TickScheduler(Protocol):
    def after(self, ms: int, func: Callable[[], Any]) -> Any: ...

    def after_cancel(self, id: Any) -> None: ...


class ClockPanelView(Protocol):
    def show_snapshot(self, snapshot: ClockSnapshot) -> None: ...


class ControllerState(str, Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class ClockDisplayController:
    """Periodically pushes fresh snapshots from the model into the panels."""

    def __init__(
        self,
        model: TimezoneClockModel,
        panels: Sequence[ClockPanelView],
        scheduler: TickScheduler,
        *,
        interval_ms: int = 1000,
    ) -> None:
        """
        Args:
            model (TimezoneClockModel): Source of timezones and snapshots.
            panels (Sequence[ClockPanelView]): One panel per model entry, same order.
            scheduler (TickScheduler): Timer facility, usually the hosting widget.
            interval_ms (int): Tick period in milliseconds.

        Raises:
            ValueError: If the panel count does not match the timezone count,
                or the interval is not positive.
        """
        entries = model.list_timezones()
        if len(panels) != len(entries):
            raise ValueError(
                f"Expected {len(entries)} panels (one per timezone), got {len(panels)}"
            )
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        self._model = model
        self._panels = tuple(panels)
        self._scheduler = scheduler
        self._interval_ms = interval_ms
        self._state = ControllerState.STOPPED
        self._after_id: Optional[Any] = None
        self._reported_unknown: Set[str] = set()

    # --- Public API ---------------------------------------------------------

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ControllerState.RUNNING

    def start(self) -> None:
        """Paints once right away, then refreshes every `interval_ms`."""
        if self.is_running:
            return
        self._state = ControllerState.RUNNING
        logger.debug("Clock refresh started (%d panels, %d ms)", len(self._panels), self._interval_ms)
        try:
            self.refresh_all()
        finally:
            if self.is_running:
                self._schedule_tick()

    def stop(self) -> None:
        """Cancels the pending tick. Safe to call any number of times."""
        if not self.is_running:
            return
        self._state = ControllerState.STOPPED
        if self._after_id is not None:
            self._scheduler.after_cancel(self._after_id)
            self._after_id = None
        logger.debug("Clock refresh stopped")

    def refresh_all(self) -> None:
        """Computes a new snapshot for every timezone and updates its panel."""
        for entry, panel in zip(self._model.list_timezones(), self._panels):
            try:
                snapshot = self._model.snapshot(entry.identifier)
            except UnknownTimezoneError as exc:
                self._report_unknown(exc)
                snapshot = ClockSnapshot.placeholder()
            panel.show_snapshot(snapshot)

    # --- Tick loop ----------------------------------------------------------

    def _schedule_tick(self) -> None:
        self._after_id = self._scheduler.after(self._interval_ms, self._on_tick)

    def _on_tick(self) -> None:
        self._after_id = None
        if not self.is_running:
            return
        try:
            self.refresh_all()
        finally:
            # stop() may have been called from within the pass
            if self.is_running:
                self._schedule_tick()

    def _report_unknown(self, exc: UnknownTimezoneError) -> None:
        if exc.identifier in self._reported_unknown:
            logger.debug("Still unable to resolve %r, showing placeholder", exc.identifier)
            return
        self._reported_unknown.add(exc.identifier)
        logger.warning("%s; showing placeholder for this panel", exc)
