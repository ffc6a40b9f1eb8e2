# -*- coding: utf-8 -*-
"""
Self-assessment scoring

PHQ-9 (depression) and GAD-7 (anxiety) questionnaires: every answer is
0-3, the score is the sum and the severity comes from the published bands.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple


class AssessmentType(Enum):
    """Questionnaires scored server-side"""
    PHQ9 = "phq9"
    GAD7 = "gad7"


@dataclass(frozen=True)
class Questionnaire:
    question_count: int
    max_answer: int
    # (upper bound inclusive, severity label), ascending
    bands: Tuple[Tuple[int, str], ...]

    @property
    def max_score(self) -> int:
        return self.question_count * self.max_answer


QUESTIONNAIRES: Dict[AssessmentType, Questionnaire] = {
    AssessmentType.PHQ9: Questionnaire(
        question_count=9,
        max_answer=3,
        bands=((4, "minimal"), (9, "mild"), (14, "moderate"), (19, "moderately_severe"), (27, "severe")),
    ),
    AssessmentType.GAD7: Questionnaire(
        question_count=7,
        max_answer=3,
        bands=((4, "minimal"), (9, "mild"), (14, "moderate"), (21, "severe")),
    ),
}


@dataclass
class AssessmentResult:
    type: AssessmentType
    score: int
    severity: str
    answers: List[int]


def is_scored_type(value: str) -> bool:
    return value in {t.value for t in AssessmentType}


def score_assessment(assessment_type: AssessmentType, answers: Sequence[int]) -> AssessmentResult:
    """Score a questionnaire; raises ValueError on a malformed answer sheet."""
    questionnaire = QUESTIONNAIRES[assessment_type]
    if len(answers) != questionnaire.question_count:
        raise ValueError(
            f"{assessment_type.value} expects {questionnaire.question_count} answers, got {len(answers)}"
        )
    for answer in answers:
        if answer < 0 or answer > questionnaire.max_answer:
            raise ValueError(f"answers must be between 0 and {questionnaire.max_answer}")

    score = int(sum(answers))
    severity = questionnaire.bands[-1][1]
    for upper, label in questionnaire.bands:
        if score <= upper:
            severity = label
            break
    return AssessmentResult(type=assessment_type, score=score, severity=severity, answers=list(answers))
