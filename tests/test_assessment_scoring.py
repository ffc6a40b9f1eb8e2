# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from reflect.assessments.scoring import AssessmentType, is_scored_type, score_assessment


class TestAssessmentScoring(unittest.TestCase):
    def test_phq9_bands(self) -> None:
        cases = [
            ([0] * 9, 0, "minimal"),
            ([1] * 5 + [0] * 4, 5, "mild"),
            ([1] * 9, 9, "mild"),
            ([2] * 5 + [0] * 4, 10, "moderate"),
            ([2] * 9, 18, "moderately_severe"),
            ([3] * 9, 27, "severe"),
        ]
        for answers, score, severity in cases:
            result = score_assessment(AssessmentType.PHQ9, answers)
            self.assertEqual(result.score, score)
            self.assertEqual(result.severity, severity)

    def test_gad7_bands(self) -> None:
        self.assertEqual(score_assessment(AssessmentType.GAD7, [0, 1, 1, 1, 1, 0, 0]).severity, "minimal")
        self.assertEqual(score_assessment(AssessmentType.GAD7, [2, 2, 2, 2, 2, 2, 2]).severity, "moderate")
        self.assertEqual(score_assessment(AssessmentType.GAD7, [3] * 7).severity, "severe")

    def test_malformed_answer_sheets(self) -> None:
        with self.assertRaises(ValueError):
            score_assessment(AssessmentType.PHQ9, [1] * 8)
        with self.assertRaises(ValueError):
            score_assessment(AssessmentType.GAD7, [4, 0, 0, 0, 0, 0, 0])
        with self.assertRaises(ValueError):
            score_assessment(AssessmentType.GAD7, [-1, 0, 0, 0, 0, 0, 0])

    def test_scored_types(self) -> None:
        self.assertTrue(is_scored_type("phq9"))
        self.assertTrue(is_scored_type("gad7"))
        self.assertFalse(is_scored_type("pss"))


if __name__ == "__main__":
    unittest.main()
