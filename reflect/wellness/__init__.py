# -*- coding: utf-8 -*-
"""
Wellness module

Breathing exercises and guided meditations: timing tables, the pure phase
state machine, the session controller and its realtime driver.
"""

from .controller import Notice, SessionController
from .machine import Mode, SessionState, advance, tick
from .timings import ExerciseKind, MeditationKind, Phase, parse_kind

__all__ = [
    'ExerciseKind',
    'MeditationKind',
    'Phase',
    'Mode',
    'SessionState',
    'SessionController',
    'Notice',
    'advance',
    'tick',
    'parse_kind',
]
