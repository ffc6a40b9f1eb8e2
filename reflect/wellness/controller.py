# -*- coding: utf-8 -*-
"""
Wellness session controller

Owns one ``SessionState`` plus the tick registration that drives it.
Every path that ends playback (stop, auto-completion, restart, close)
cancels the registration before the state changes, so no late tick can
touch a finished session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from . import machine
from .machine import Mode, SessionState
from .timings import ExerciseKind, MeditationKind, WellnessKind, tick_interval_ms

logger = logging.getLogger(__name__)


class TickHandle(Protocol):
    def cancel(self) -> None:
        ...


# schedule(callback, interval_ms) -> handle; the callback receives the elapsed milliseconds.
Scheduler = Callable[[Callable[[float], None], float], TickHandle]


@dataclass(frozen=True)
class Notice:
    """User-facing session notification."""
    event: str  # started | completed | ended
    message: str
    cycle_count: Optional[int] = None

    def to_dict(self) -> dict:
        payload = {"event": self.event, "message": self.message}
        if self.cycle_count is not None:
            payload["cycle_count"] = self.cycle_count
        return payload


class SessionController:
    """Translates user commands and ticks into state machine transitions."""

    def __init__(
        self,
        schedule: Scheduler,
        *,
        exercise_tick_ms: Optional[float] = None,
        meditation_tick_ms: Optional[float] = None,
        on_change: Optional[Callable[[SessionState], None]] = None,
        on_notice: Optional[Callable[[Notice], None]] = None,
    ) -> None:
        self._schedule = schedule
        self._exercise_tick_ms = exercise_tick_ms
        self._meditation_tick_ms = meditation_tick_ms
        self._on_change = on_change
        self._on_notice = on_notice
        self._state: SessionState = machine.IDLE
        self._handle: Optional[TickHandle] = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_ticking(self) -> bool:
        return self._handle is not None

    # ---- commands ----

    def start(self, kind: WellnessKind) -> SessionState:
        self._cancel_tick()
        self._set_state(machine.start(kind))
        self._ensure_ticking()
        if isinstance(kind, ExerciseKind):
            self._notify(Notice(event="started", message="Exercise started"))
        else:
            self._notify(Notice(event="started", message="Meditation started"))
        logger.info("Wellness session started: %s", kind.value)
        return self._state

    def pause(self) -> SessionState:
        self._set_state(machine.pause(self._state))
        return self._state

    def resume(self) -> SessionState:
        self._set_state(machine.resume(self._state))
        if self._state.is_playing:
            self._ensure_ticking()
        return self._state

    def reset(self) -> SessionState:
        self._set_state(machine.reset(self._state))
        if not self._state.is_idle:
            self._ensure_ticking()
        return self._state

    def stop(self) -> SessionState:
        previous = self._state
        self._cancel_tick()
        if previous.mode is Mode.EXERCISE:
            self._notify(
                Notice(
                    event="completed",
                    message=f"Completed {previous.cycle_count} cycles",
                    cycle_count=previous.cycle_count,
                )
            )
        elif previous.mode is Mode.MEDITATION and not previous.completed:
            # A completed meditation already announced its end.
            self._notify(Notice(event="ended", message="Meditation session ended"))
        self._set_state(machine.stop(previous))
        if not previous.is_idle:
            logger.info("Wellness session stopped: %s", previous.kind.value if previous.kind else "-")
        return self._state

    def close(self) -> None:
        """Teardown: release the tick registration and drop the session silently."""
        self._cancel_tick()
        self._state = machine.IDLE

    def dispatch(self, action: str, kind: Optional[WellnessKind] = None) -> SessionState:
        if action == "start":
            if kind is None:
                raise ValueError("start requires a kind")
            return self.start(kind)
        handlers = {
            "pause": self.pause,
            "resume": self.resume,
            "reset": self.reset,
            "stop": self.stop,
        }
        handler = handlers.get(action)
        if handler is None:
            raise ValueError(f"unknown action: {action!r}")
        return handler()

    # ---- ticks ----

    def tick(self, elapsed_ms: Optional[float] = None) -> SessionState:
        """Tick handler; suppressed while paused or idle."""
        state = self._state
        kind = state.kind
        if kind is None or not state.is_playing:
            return state
        if elapsed_ms is None:
            elapsed_ms = tick_interval_ms(kind)
        updated = machine.advance(state, elapsed_ms)
        if updated.completed and not state.completed:
            self._cancel_tick()
            self._set_state(updated)
            self._notify(Notice(event="ended", message="Meditation session ended"))
            logger.info("Meditation completed: %s", kind.value)
            return self._state
        self._set_state(updated)
        return self._state

    def _on_tick(self, elapsed_ms: float) -> None:
        try:
            self.tick(elapsed_ms)
        except Exception:
            # A failed tick ends the driver loop; drop its registration.
            self._cancel_tick()
            raise

    # ---- internals ----

    def _interval_for(self, kind: WellnessKind) -> float:
        if isinstance(kind, ExerciseKind) and self._exercise_tick_ms:
            return float(self._exercise_tick_ms)
        if isinstance(kind, MeditationKind) and self._meditation_tick_ms:
            return float(self._meditation_tick_ms)
        return float(tick_interval_ms(kind))

    def _ensure_ticking(self) -> None:
        kind = self._state.kind
        if self._handle is not None or kind is None or self._state.completed:
            return
        self._handle = self._schedule(self._on_tick, self._interval_for(kind))

    def _cancel_tick(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(state)

    def _notify(self, notice: Notice) -> None:
        if self._on_notice is not None:
            self._on_notice(notice)
