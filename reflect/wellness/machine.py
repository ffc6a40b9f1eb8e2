# -*- coding: utf-8 -*-
"""
Breathing / meditation phase state machine

Every operation is a pure function from one immutable ``SessionState`` to
the next. Time only enters through ``advance(state, elapsed_ms)``, so a
session can be replayed deterministically with synthetic tick times.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .timings import (
    PHASE_INSTRUCTIONS,
    ExerciseKind,
    MeditationKind,
    Phase,
    WellnessKind,
    active_phases,
    meditation_duration_ms,
    meditation_steps,
    tick_interval_ms,
)


class Mode(Enum):
    IDLE = "idle"
    EXERCISE = "exercise"
    MEDITATION = "meditation"


@dataclass(frozen=True)
class SessionState:
    """Snapshot of one breathing or meditation session."""
    mode: Mode = Mode.IDLE
    exercise: Optional[ExerciseKind] = None
    meditation: Optional[MeditationKind] = None
    is_playing: bool = False
    phase: Phase = Phase.INHALE       # exercise mode
    step_index: int = 0               # meditation mode
    phase_elapsed_ms: float = 0.0
    phase_progress_percent: float = 0.0
    cycle_count: int = 0              # exercise mode
    overall_progress_percent: float = 0.0  # meditation mode
    completed: bool = False           # meditation reached its last step

    @property
    def is_idle(self) -> bool:
        return self.mode is Mode.IDLE

    @property
    def kind(self) -> Optional[WellnessKind]:
        if self.mode is Mode.EXERCISE:
            return self.exercise
        if self.mode is Mode.MEDITATION:
            return self.meditation
        return None

    def to_dict(self) -> Dict[str, Any]:
        kind = self.kind
        payload: Dict[str, Any] = {
            "mode": self.mode.value,
            "kind": kind.value if kind is not None else None,
            "is_playing": self.is_playing,
            "phase_progress_percent": round(self.phase_progress_percent, 2),
            "completed": self.completed,
        }
        if self.mode is Mode.EXERCISE:
            payload.update(
                {
                    "phase": self.phase.value,
                    "instruction": PHASE_INSTRUCTIONS[self.phase],
                    "cycle_count": self.cycle_count,
                }
            )
        elif self.mode is Mode.MEDITATION and self.meditation is not None:
            steps = meditation_steps(self.meditation)
            payload.update(
                {
                    "step_index": self.step_index,
                    "step_count": len(steps),
                    "step_text": steps[self.step_index].text,
                    "overall_progress_percent": round(self.overall_progress_percent, 2),
                }
            )
        return payload


IDLE = SessionState()


def _active_step_indices(kind: MeditationKind) -> List[int]:
    return [i for i, step in enumerate(meditation_steps(kind)) if step.duration_ms > 0]


def start_exercise(kind: ExerciseKind) -> SessionState:
    first_phase = active_phases(kind)[0][0]
    return SessionState(mode=Mode.EXERCISE, exercise=kind, is_playing=True, phase=first_phase)


def start_meditation(kind: MeditationKind) -> SessionState:
    return SessionState(
        mode=Mode.MEDITATION,
        meditation=kind,
        is_playing=True,
        step_index=_active_step_indices(kind)[0],
    )


def start(kind: WellnessKind) -> SessionState:
    """Fresh, playing state for ``kind``; nothing carries over from before."""
    if isinstance(kind, ExerciseKind):
        return start_exercise(kind)
    if isinstance(kind, MeditationKind):
        return start_meditation(kind)
    raise TypeError(f"unknown wellness kind: {kind!r}")


def pause(state: SessionState) -> SessionState:
    if state.is_idle or not state.is_playing:
        return state
    return replace(state, is_playing=False)


def resume(state: SessionState) -> SessionState:
    if state.is_idle or state.completed or state.is_playing:
        return state
    return replace(state, is_playing=True)


def reset(state: SessionState) -> SessionState:
    """Back to the first phase/step with zero counters; playback flag kept."""
    kind = state.kind
    if kind is None:
        return state
    return replace(start(kind), is_playing=state.is_playing)


def stop(state: SessionState) -> SessionState:
    return IDLE


def _advance_exercise(state: SessionState, elapsed_ms: float) -> SessionState:
    assert state.exercise is not None
    phases = active_phases(state.exercise)
    order = [phase for phase, _ in phases]
    cycle_ms = sum(duration for _, duration in phases)

    idx = order.index(state.phase)
    elapsed = state.phase_elapsed_ms + elapsed_ms
    cycles = state.cycle_count

    # A full cycle from any position crosses the wrap exactly once.
    if elapsed >= cycle_ms:
        skipped = int(elapsed // cycle_ms)
        cycles += skipped
        elapsed -= skipped * cycle_ms

    while elapsed >= phases[idx][1]:
        elapsed -= phases[idx][1]
        idx += 1
        if idx == len(phases):
            idx = 0
            cycles += 1

    return replace(
        state,
        phase=phases[idx][0],
        phase_elapsed_ms=elapsed,
        phase_progress_percent=min(elapsed / phases[idx][1] * 100.0, 100.0),
        cycle_count=cycles,
    )


def _advance_meditation(state: SessionState, elapsed_ms: float) -> SessionState:
    assert state.meditation is not None
    steps = meditation_steps(state.meditation)
    active = _active_step_indices(state.meditation)
    total_ms = meditation_duration_ms(state.meditation)

    pos = active.index(state.step_index)
    elapsed = state.phase_elapsed_ms + elapsed_ms

    while elapsed >= steps[active[pos]].duration_ms:
        if pos == len(active) - 1:
            return replace(
                state,
                is_playing=False,
                completed=True,
                step_index=active[pos],
                phase_elapsed_ms=float(steps[active[pos]].duration_ms),
                phase_progress_percent=100.0,
                overall_progress_percent=100.0,
            )
        elapsed -= steps[active[pos]].duration_ms
        pos += 1

    idx = active[pos]
    done_ms = sum(step.duration_ms for step in steps[:idx])
    return replace(
        state,
        step_index=idx,
        phase_elapsed_ms=elapsed,
        phase_progress_percent=elapsed / steps[idx].duration_ms * 100.0,
        overall_progress_percent=min((done_ms + elapsed) / total_ms * 100.0, 100.0),
    )


def advance(state: SessionState, elapsed_ms: float) -> SessionState:
    """Apply ``elapsed_ms`` of playback; paused and idle states are returned unchanged."""
    if state.is_idle or not state.is_playing or elapsed_ms <= 0:
        return state
    if state.mode is Mode.EXERCISE:
        return _advance_exercise(state, elapsed_ms)
    return _advance_meditation(state, elapsed_ms)


def tick(state: SessionState) -> SessionState:
    """One fixed-interval tick (50 ms for exercises, 100 ms for meditations)."""
    kind = state.kind
    if kind is None:
        return state
    return advance(state, tick_interval_ms(kind))


def replay(state: SessionState, ticks: int) -> Tuple[SessionState, List[SessionState]]:
    """Apply ``ticks`` fixed ticks; returns the final state and every intermediate one."""
    history: List[SessionState] = []
    for _ in range(ticks):
        state = tick(state)
        history.append(state)
    return state, history
