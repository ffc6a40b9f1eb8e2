# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from reflect.wellness import machine
from reflect.wellness.machine import IDLE, Mode, SessionState, advance, replay, tick
from reflect.wellness.timings import ExerciseKind, MeditationKind, Phase, meditation_duration_ms


class TestExerciseCycle(unittest.TestCase):
    def test_box_full_cycle_returns_to_inhale(self) -> None:
        state, _ = replay(machine.start(ExerciseKind.BOX), 16000 // 50)
        self.assertEqual(state.cycle_count, 1)
        self.assertIs(state.phase, Phase.INHALE)
        self.assertEqual(state.phase_progress_percent, 0.0)
        self.assertTrue(state.is_playing)

    def test_box_progress_within_phase(self) -> None:
        state, _ = replay(machine.start(ExerciseKind.BOX), 40)
        self.assertIs(state.phase, Phase.INHALE)
        self.assertAlmostEqual(state.phase_progress_percent, 50.0)

        state, _ = replay(state, 40)
        self.assertIs(state.phase, Phase.HOLD1)
        self.assertEqual(state.phase_progress_percent, 0.0)
        self.assertEqual(state.cycle_count, 0)

    def test_478_never_enters_hold2(self) -> None:
        state, history = replay(machine.start(ExerciseKind.BREATHING_478), 19000 // 50)
        self.assertNotIn(Phase.HOLD2, {s.phase for s in history})
        self.assertEqual(state.cycle_count, 1)
        self.assertIs(state.phase, Phase.INHALE)

    def test_calm_skips_both_holds(self) -> None:
        state, history = replay(machine.start(ExerciseKind.CALM), 80)
        self.assertIs(state.phase, Phase.EXHALE)
        state, more = replay(state, 120)
        self.assertEqual({s.phase for s in history + more}, {Phase.INHALE, Phase.EXHALE})
        self.assertEqual(state.cycle_count, 1)
        self.assertIs(state.phase, Phase.INHALE)

    def test_cycle_count_increments_once_per_wrap(self) -> None:
        state, history = replay(machine.start(ExerciseKind.CALM), 3 * 200)
        counts = [s.cycle_count for s in history]
        self.assertEqual(state.cycle_count, 3)
        # Monotonic, one step at a time.
        self.assertTrue(all(b - a in (0, 1) for a, b in zip(counts, counts[1:])))

    def test_progress_stays_in_range(self) -> None:
        _, history = replay(machine.start(ExerciseKind.BREATHING_478), 2 * 380)
        for s in history:
            self.assertGreaterEqual(s.phase_progress_percent, 0.0)
            self.assertLess(s.phase_progress_percent, 100.0)


class TestAdvanceElapsed(unittest.TestCase):
    def test_advance_crosses_multiple_phases(self) -> None:
        state = advance(machine.start(ExerciseKind.BOX), 5000)
        self.assertIs(state.phase, Phase.HOLD1)
        self.assertAlmostEqual(state.phase_progress_percent, 25.0)

    def test_advance_many_cycles_at_once(self) -> None:
        state = advance(machine.start(ExerciseKind.BOX), 3 * 16000 + 2000)
        self.assertEqual(state.cycle_count, 3)
        self.assertIs(state.phase, Phase.INHALE)
        self.assertAlmostEqual(state.phase_progress_percent, 50.0)

    def test_advance_matches_ticks(self) -> None:
        ticked, _ = replay(machine.start(ExerciseKind.BREATHING_478), 500)
        jumped = advance(machine.start(ExerciseKind.BREATHING_478), 500 * 50)
        self.assertEqual(ticked.phase, jumped.phase)
        self.assertEqual(ticked.cycle_count, jumped.cycle_count)
        self.assertAlmostEqual(ticked.phase_progress_percent, jumped.phase_progress_percent)

    def test_non_positive_elapsed_is_ignored(self) -> None:
        start = machine.start(ExerciseKind.BOX)
        self.assertEqual(advance(start, 0), start)
        self.assertEqual(advance(start, -10), start)


class TestPauseResume(unittest.TestCase):
    def test_paused_state_is_frozen(self) -> None:
        state, _ = replay(machine.start(ExerciseKind.BOX), 30)
        paused = machine.pause(state)
        self.assertFalse(paused.is_playing)

        after, _ = replay(paused, 100)
        self.assertEqual(after, paused)
        self.assertEqual(advance(paused, 10_000), paused)

        resumed = machine.resume(after)
        self.assertTrue(resumed.is_playing)
        self.assertIs(resumed.phase, state.phase)
        self.assertEqual(resumed.phase_progress_percent, state.phase_progress_percent)

        moved = tick(resumed)
        self.assertGreater(moved.phase_progress_percent, resumed.phase_progress_percent)

    def test_idle_commands_are_noops(self) -> None:
        self.assertEqual(machine.pause(IDLE), IDLE)
        self.assertEqual(machine.resume(IDLE), IDLE)
        self.assertEqual(machine.reset(IDLE), IDLE)
        self.assertEqual(tick(IDLE), IDLE)


class TestResetStop(unittest.TestCase):
    def test_reset_keeps_playback_flag(self) -> None:
        state, _ = replay(machine.start(ExerciseKind.BOX), 400)
        paused = machine.pause(state)
        reset = machine.reset(paused)
        self.assertFalse(reset.is_playing)
        self.assertEqual(reset.cycle_count, 0)
        self.assertIs(reset.phase, Phase.INHALE)
        self.assertEqual(reset.phase_progress_percent, 0.0)
        self.assertIs(reset.exercise, ExerciseKind.BOX)

        self.assertTrue(machine.reset(state).is_playing)

    def test_stop_returns_to_idle(self) -> None:
        for start in (machine.start(ExerciseKind.CALM), machine.start(MeditationKind.BODY_SCAN)):
            state, _ = replay(start, 123)
            stopped = machine.stop(state)
            self.assertEqual(stopped, SessionState())
            self.assertIs(stopped.mode, Mode.IDLE)
            self.assertEqual(stopped.cycle_count, 0)
            self.assertEqual(stopped.overall_progress_percent, 0.0)
            self.assertEqual(tick(stopped), stopped)

    def test_start_replaces_previous_session(self) -> None:
        state, _ = replay(machine.start(ExerciseKind.BOX), 700)
        self.assertGreater(state.cycle_count, 0)
        fresh = machine.start(MeditationKind.MINDFULNESS)
        self.assertIs(fresh.mode, Mode.MEDITATION)
        self.assertIsNone(fresh.exercise)
        self.assertEqual(fresh.cycle_count, 0)
        self.assertEqual(fresh.step_index, 0)


class TestMeditation(unittest.TestCase):
    def test_runs_to_completion_without_stop(self) -> None:
        kind = MeditationKind.MINDFULNESS
        ticks = meditation_duration_ms(kind) // 100
        state, history = replay(machine.start(kind), ticks)
        self.assertTrue(state.completed)
        self.assertFalse(state.is_playing)
        self.assertEqual(state.overall_progress_percent, 100.0)
        self.assertIs(state.mode, Mode.MEDITATION)
        # Only the last tick completes the session.
        self.assertFalse(history[-2].completed)

        after, _ = replay(state, 50)
        self.assertEqual(after, state)
        self.assertEqual(machine.resume(state), state)

    def test_steps_advance_linearly(self) -> None:
        kind = MeditationKind.MINDFULNESS
        state, history = replay(machine.start(kind), 300)
        self.assertEqual(state.step_index, 1)
        self.assertEqual(state.phase_progress_percent, 0.0)
        self.assertAlmostEqual(state.overall_progress_percent, 10.0)
        indices = [s.step_index for s in history]
        self.assertEqual(indices, sorted(indices))

    def test_overall_progress_includes_current_step(self) -> None:
        state = advance(machine.start(MeditationKind.MINDFULNESS), 45_000)
        self.assertEqual(state.step_index, 1)
        self.assertAlmostEqual(state.phase_progress_percent, 25.0)
        self.assertAlmostEqual(state.overall_progress_percent, 15.0)

    def test_overshoot_is_clamped_at_completion(self) -> None:
        kind = MeditationKind.BODY_SCAN
        state = advance(machine.start(kind), meditation_duration_ms(kind) * 3)
        self.assertTrue(state.completed)
        self.assertEqual(state.step_index, 7)
        self.assertEqual(state.phase_progress_percent, 100.0)
        self.assertEqual(state.overall_progress_percent, 100.0)


class TestSerialisation(unittest.TestCase):
    def test_exercise_payload(self) -> None:
        payload = machine.start(ExerciseKind.BREATHING_478).to_dict()
        self.assertEqual(payload["mode"], "exercise")
        self.assertEqual(payload["kind"], "478")
        self.assertEqual(payload["phase"], "inhale")
        self.assertEqual(payload["cycle_count"], 0)
        self.assertNotIn("step_index", payload)

    def test_meditation_payload(self) -> None:
        payload = machine.start(MeditationKind.LOVING_KINDNESS).to_dict()
        self.assertEqual(payload["mode"], "meditation")
        self.assertEqual(payload["step_index"], 0)
        self.assertEqual(payload["step_count"], 7)
        self.assertTrue(payload["step_text"])
        self.assertNotIn("cycle_count", payload)

    def test_idle_payload(self) -> None:
        self.assertEqual(IDLE.to_dict()["mode"], "idle")
        self.assertIsNone(IDLE.to_dict()["kind"])


if __name__ == "__main__":
    unittest.main()
