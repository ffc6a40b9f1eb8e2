# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from reflect.mood.stats import compute_mood_stats


class TestMoodStats(unittest.TestCase):
    def test_basic_summary(self) -> None:
        stats = compute_mood_stats(
            [
                {"mood": "happy", "intensity": 8},
                {"mood": "sad", "intensity": 4},
                {"mood": "happy", "intensity": 6},
            ]
        )
        assert stats is not None
        self.assertEqual(stats.total_entries, 3)
        self.assertEqual(stats.avg_intensity, 6.0)
        self.assertEqual(stats.most_common_mood, "happy")
        self.assertEqual(stats.common_triggers, [])
        self.assertEqual(stats.helpful_activities, [])

    def test_empty_collection_means_no_data(self) -> None:
        self.assertIsNone(compute_mood_stats([]))
        self.assertIsNone(compute_mood_stats(iter(())))

    def test_average_rounds_half_up(self) -> None:
        # mean 6.25 -> 6.3 (banker's rounding would give 6.2)
        stats = compute_mood_stats(
            [{"mood": "calm", "intensity": v} for v in (6, 6, 6, 7)]
        )
        assert stats is not None
        self.assertEqual(stats.avg_intensity, 6.3)

        stats = compute_mood_stats([{"mood": "calm", "intensity": v} for v in (1, 2, 2)])
        assert stats is not None
        self.assertEqual(stats.avg_intensity, 1.7)

    def test_mood_tie_goes_to_first_seen(self) -> None:
        stats = compute_mood_stats(
            [
                {"mood": "sad", "intensity": 3},
                {"mood": "happy", "intensity": 7},
                {"mood": "happy", "intensity": 7},
                {"mood": "sad", "intensity": 3},
            ]
        )
        assert stats is not None
        self.assertEqual(stats.most_common_mood, "sad")

    def test_top_five_triggers_and_activities(self) -> None:
        entries = [
            {"mood": "stressed", "intensity": 7, "triggers": ["work", "sleep", "news"], "activities": ["walk"]},
            {"mood": "anxious", "intensity": 6, "triggers": ["exams", "work"], "activities": ["music", "walk"]},
            {"mood": "sad", "intensity": 4, "triggers": ["family", "money", "work"], "activities": None},
            {"mood": "calm", "intensity": 3},
            {"mood": "happy", "intensity": 8, "triggers": ["weather", "money"], "activities": ["yoga"]},
        ]
        stats = compute_mood_stats(entries)
        assert stats is not None
        # work=3, money=2, then ties at 1 in first-seen order.
        self.assertEqual(stats.common_triggers, ["work", "money", "sleep", "news", "exams"])
        self.assertEqual(stats.helpful_activities, ["walk", "music", "yoga"])

    def test_tie_order_follows_input_order(self) -> None:
        a = [
            {"mood": "calm", "intensity": 5, "triggers": ["a", "b"]},
            {"mood": "calm", "intensity": 5, "triggers": ["b", "a"]},
        ]
        b = list(reversed(a))
        stats_a = compute_mood_stats(a)
        stats_b = compute_mood_stats(b)
        assert stats_a is not None and stats_b is not None
        self.assertEqual(stats_a.common_triggers, ["a", "b"])
        self.assertEqual(stats_b.common_triggers, ["b", "a"])
        # Deterministic for the same input.
        self.assertEqual(compute_mood_stats(a), stats_a)


if __name__ == "__main__":
    unittest.main()
