from __future__ import annotations

import math
from typing import Sequence

from scorecard.grading.curve import clamp, score_to_percentile
from scorecard.grading.tables import GRADE_BANDS
from scorecard.schemas.grading import Grade, GradeBand

FALLBACK_GRADE: Grade = "F"

_DESCRIPTION_LADDER: tuple[tuple[float, str], ...] = (
    (95, "Exceptional - Top 5% of resumes"),
    (90, "Excellent - Top 10% of resumes"),
    (80, "Very Good - Top 20% of resumes"),
    (70, "Good - Top 30% of resumes"),
    (50, "Average - Better than half of resumes"),
    (30, "Below Average - Needs improvement"),
    (10, "Poor - Significant improvements needed"),
)
_DESCRIPTION_FLOOR = "Very Poor - Major overhaul required"

_GRADE_COLORS: dict[str, str] = {
    "A+": "text-green-600",
    "A": "text-green-600",
    "A-": "text-green-500",
    "B+": "text-green-500",
    "B": "text-yellow-500",
    "B-": "text-yellow-500",
    "C+": "text-orange-500",
    "C": "text-orange-500",
    "C-": "text-red-500",
    "D": "text-red-500",
    "F": "text-red-600",
}
_UNKNOWN_GRADE_COLOR = "text-gray-500"

_SCORE_COLOR_LADDER: tuple[tuple[float, str], ...] = (
    (90, "text-green-600"),
    (80, "text-green-500"),
    (70, "text-yellow-500"),
    (60, "text-orange-500"),
    (50, "text-red-500"),
)
_SCORE_COLOR_FLOOR = "text-red-600"


def percentile_to_grade(
    percentile: float,
    *,
    bands: Sequence[GradeBand] = GRADE_BANDS,
) -> Grade:
    """Map a percentile to a letter grade; first matching band wins, else "F"."""
    clamped = clamp(percentile)
    for band in bands:
        if band.contains(clamped):
            return band.grade
    return FALLBACK_GRADE


def score_to_grade(score: float) -> Grade:
    return percentile_to_grade(score_to_percentile(score))


def _ladder_lookup(value: float, ladder: tuple[tuple[float, str], ...], floor: str) -> str:
    if math.isnan(value):
        return floor
    for threshold, label in ladder:
        if value >= threshold:
            return label
    return floor


def get_percentile_description(percentile: float) -> str:
    """Human-readable rank sentence. Values above 100 read as the top rung, negatives as the bottom."""
    return _ladder_lookup(percentile, _DESCRIPTION_LADDER, _DESCRIPTION_FLOOR)


def get_grade_color(grade: str) -> str:
    return _GRADE_COLORS.get(grade, _UNKNOWN_GRADE_COLOR)


def get_score_color(score: float) -> str:
    return _ladder_lookup(score, _SCORE_COLOR_LADDER, _SCORE_COLOR_FLOOR)
