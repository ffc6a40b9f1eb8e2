# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from reflect.wellness.timings import (
    ExerciseKind,
    MeditationKind,
    Phase,
    active_phases,
    cycle_duration_ms,
    exercise_timings,
    meditation_duration_ms,
    meditation_steps,
    parse_kind,
    tick_interval_ms,
)


class TestExerciseTimings(unittest.TestCase):
    def test_cycle_lengths(self) -> None:
        self.assertEqual(cycle_duration_ms(ExerciseKind.BOX), 16000)
        self.assertEqual(cycle_duration_ms(ExerciseKind.BREATHING_478), 19000)
        self.assertEqual(cycle_duration_ms(ExerciseKind.CALM), 10000)

    def test_every_kind_lists_all_phases_in_order(self) -> None:
        for kind in ExerciseKind:
            phases = [p for p, _ in exercise_timings(kind)]
            self.assertEqual(phases, [Phase.INHALE, Phase.HOLD1, Phase.EXHALE, Phase.HOLD2])

    def test_zero_phases_are_not_active(self) -> None:
        self.assertEqual(
            active_phases(ExerciseKind.BREATHING_478),
            [(Phase.INHALE, 4000), (Phase.HOLD1, 7000), (Phase.EXHALE, 8000)],
        )
        self.assertEqual(active_phases(ExerciseKind.CALM), [(Phase.INHALE, 4000), (Phase.EXHALE, 6000)])
        self.assertEqual(len(active_phases(ExerciseKind.BOX)), 4)


class TestMeditationSteps(unittest.TestCase):
    def test_step_counts_and_total_duration(self) -> None:
        for kind in MeditationKind:
            steps = meditation_steps(kind)
            self.assertGreaterEqual(len(steps), 6)
            self.assertLessEqual(len(steps), 8)
            total = meditation_duration_ms(kind)
            self.assertGreaterEqual(total, 5 * 60 * 1000)
            self.assertLessEqual(total, 6 * 60 * 1000)
            # Every step lines up with the 100 ms tick.
            for step in steps:
                self.assertEqual(step.duration_ms % 100, 0)


class TestKinds(unittest.TestCase):
    def test_tick_intervals(self) -> None:
        self.assertEqual(tick_interval_ms(ExerciseKind.BOX), 50)
        self.assertEqual(tick_interval_ms(MeditationKind.BODY_SCAN), 100)

    def test_parse_kind(self) -> None:
        self.assertIs(parse_kind("box"), ExerciseKind.BOX)
        self.assertIs(parse_kind(" 478 "), ExerciseKind.BREATHING_478)
        self.assertIs(parse_kind("Loving_Kindness"), MeditationKind.LOVING_KINDNESS)
        with self.assertRaises(ValueError):
            parse_kind("yoga")


if __name__ == "__main__":
    unittest.main()
