# -*- coding: utf-8 -*-
"""
Breathing and meditation timing tables

Exercise phases are cyclic; a zero duration means the phase is skipped.
Meditation steps are played once, in order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple, Union


class ExerciseKind(Enum):
    """Breathing exercises"""
    BOX = "box"
    BREATHING_478 = "478"
    CALM = "calm"


class MeditationKind(Enum):
    """Guided meditations"""
    BODY_SCAN = "body_scan"
    MINDFULNESS = "mindfulness"
    LOVING_KINDNESS = "loving_kindness"


class Phase(Enum):
    """Breathing phases, in cycle order"""
    INHALE = "inhale"
    HOLD1 = "hold1"
    EXHALE = "exhale"
    HOLD2 = "hold2"


WellnessKind = Union[ExerciseKind, MeditationKind]

PHASE_ORDER: Tuple[Phase, ...] = (Phase.INHALE, Phase.HOLD1, Phase.EXHALE, Phase.HOLD2)

EXERCISE_TICK_MS = 50
MEDITATION_TICK_MS = 100


@dataclass(frozen=True)
class MeditationStep:
    text: str
    duration_ms: int


_EXERCISE_TIMINGS: Dict[ExerciseKind, Dict[Phase, int]] = {
    ExerciseKind.BOX: {Phase.INHALE: 4000, Phase.HOLD1: 4000, Phase.EXHALE: 4000, Phase.HOLD2: 4000},
    ExerciseKind.BREATHING_478: {Phase.INHALE: 4000, Phase.HOLD1: 7000, Phase.EXHALE: 8000, Phase.HOLD2: 0},
    # Exhale is 6s: the calm pattern is advertised as 10 seconds per cycle.
    ExerciseKind.CALM: {Phase.INHALE: 4000, Phase.HOLD1: 0, Phase.EXHALE: 6000, Phase.HOLD2: 0},
}

_MEDITATION_STEPS: Dict[MeditationKind, Tuple[MeditationStep, ...]] = {
    MeditationKind.BODY_SCAN: (
        MeditationStep("Settle into a comfortable position and close your eyes.", 30_000),
        MeditationStep("Bring your attention to your feet. Notice any warmth, pressure or tingling.", 45_000),
        MeditationStep("Move your awareness up through your legs, letting them grow heavy.", 45_000),
        MeditationStep("Notice your hips and lower back. Breathe into any tension you find.", 45_000),
        MeditationStep("Feel your belly and chest rise and fall with each breath.", 45_000),
        MeditationStep("Let your shoulders, arms and hands soften and release.", 45_000),
        MeditationStep("Relax your neck, jaw, face and the top of your head.", 45_000),
        MeditationStep("Sense your whole body at once, resting and at ease.", 30_000),
    ),
    MeditationKind.MINDFULNESS: (
        MeditationStep("Sit upright and let your breathing find its natural rhythm.", 30_000),
        MeditationStep("Rest your attention on the sensation of the breath at your nostrils.", 60_000),
        MeditationStep("When thoughts arise, notice them and gently return to the breath.", 60_000),
        MeditationStep("Widen your awareness to the sounds around you, without judging them.", 60_000),
        MeditationStep("Notice any feelings present right now and let them be as they are.", 60_000),
        MeditationStep("Take a deeper breath and slowly open your eyes.", 30_000),
    ),
    MeditationKind.LOVING_KINDNESS: (
        MeditationStep("Close your eyes and take a few slow, easy breaths.", 30_000),
        MeditationStep("Silently repeat: may I be safe, may I be happy, may I be at peace.", 60_000),
        MeditationStep("Picture someone you love and offer them the same wishes.", 60_000),
        MeditationStep("Bring to mind someone neutral, a face you pass by, and wish them well.", 60_000),
        MeditationStep("If you can, extend these wishes to someone you find difficult.", 60_000),
        MeditationStep("Let the wishes spread outward to all living beings.", 45_000),
        MeditationStep("Rest in the feeling of warmth for a moment before you return.", 30_000),
    ),
}

PHASE_INSTRUCTIONS: Dict[Phase, str] = {
    Phase.INHALE: "Breathe in slowly through your nose",
    Phase.HOLD1: "Hold your breath",
    Phase.EXHALE: "Breathe out slowly through your mouth",
    Phase.HOLD2: "Hold your breath",
}

EXERCISE_INFO: Dict[ExerciseKind, Tuple[str, str]] = {
    ExerciseKind.BOX: ("Box Breathing", "4-4-4-4 pattern. Great for stress and focus."),
    ExerciseKind.BREATHING_478: ("4-7-8 Breathing", "Inhale 4, hold 7, exhale 8. Promotes relaxation."),
    ExerciseKind.CALM: ("Calm Breathing", "Simple inhale-exhale. Perfect for beginners."),
}

MEDITATION_INFO: Dict[MeditationKind, Tuple[str, str]] = {
    MeditationKind.BODY_SCAN: ("Body Scan", "Progressive relaxation through body awareness"),
    MeditationKind.MINDFULNESS: ("Mindfulness", "Present moment awareness practice"),
    MeditationKind.LOVING_KINDNESS: ("Loving Kindness", "Cultivate compassion and positive emotions"),
}


def exercise_timings(kind: ExerciseKind) -> List[Tuple[Phase, int]]:
    """All four phases in cycle order, zero durations included."""
    table = _EXERCISE_TIMINGS[kind]
    return [(phase, table[phase]) for phase in PHASE_ORDER]


def active_phases(kind: ExerciseKind) -> List[Tuple[Phase, int]]:
    return [(phase, duration) for phase, duration in exercise_timings(kind) if duration > 0]


def cycle_duration_ms(kind: ExerciseKind) -> int:
    return sum(duration for _, duration in exercise_timings(kind))


def meditation_steps(kind: MeditationKind) -> Tuple[MeditationStep, ...]:
    return _MEDITATION_STEPS[kind]


def meditation_duration_ms(kind: MeditationKind) -> int:
    return sum(step.duration_ms for step in meditation_steps(kind))


def tick_interval_ms(kind: WellnessKind) -> int:
    if isinstance(kind, ExerciseKind):
        return EXERCISE_TICK_MS
    if isinstance(kind, MeditationKind):
        return MEDITATION_TICK_MS
    raise TypeError(f"unknown wellness kind: {kind!r}")


def parse_kind(value: str) -> WellnessKind:
    """Resolve a wire identifier ("box", "body_scan", …) to its enum member."""
    key = (value or "").strip().lower()
    for enum_cls in (ExerciseKind, MeditationKind):
        try:
            return enum_cls(key)
        except ValueError:
            continue
    raise ValueError(f"unknown exercise or meditation: {value!r}")
