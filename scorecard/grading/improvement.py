from __future__ import annotations

import math

from scorecard.grading.curve import clamp, percentile_to_score, score_to_percentile
from scorecard.schemas.grading import Difficulty, ImprovementAssessment

DEFAULT_TARGET_PERCENTILE = 90.0

# (inclusive upper bound on points needed, tier)
_DIFFICULTY_TIERS: tuple[tuple[float, Difficulty], ...] = (
    (5, "easy"),
    (15, "moderate"),
    (30, "challenging"),
)


def classify_difficulty(improvement_needed: float) -> Difficulty:
    for ceiling, tier in _DIFFICULTY_TIERS:
        if improvement_needed <= ceiling:
            return tier
    return "difficult"


def calculate_improvement_potential(
    current_score: float,
    target_percentile: float = DEFAULT_TARGET_PERCENTILE,
) -> ImprovementAssessment:
    """How many raw points ``current_score`` needs to reach ``target_percentile``.

    The target score comes from inverting the calibration curve, so it is
    consistent with :func:`score_to_percentile` up to rounding. Targets above
    the curve's ceiling fall back to a target score of 100.
    """
    if not math.isfinite(current_score):
        current_score = clamp(current_score)

    current_percentile = score_to_percentile(current_score)
    target_score = percentile_to_score(target_percentile)

    improvement_needed = max(0, target_score - current_score)
    improvement_percentage = (
        improvement_needed / current_score * 100 if current_score > 0 else 0
    )

    return ImprovementAssessment(
        current_percentile=current_percentile,
        target_score=target_score,
        improvement_needed=improvement_needed,
        improvement_percentage=improvement_percentage,
        difficulty=classify_difficulty(improvement_needed),
    )
