from __future__ import annotations

import logging

from scorecard.core.config import settings
from scorecard.grading import (
    calculate_improvement_potential,
    get_grade_color,
    get_industry_benchmarks,
    get_industry_standing,
    get_percentile_description,
    get_score_color,
    percentile_to_grade,
    resolve_industry,
    score_to_percentile,
)
from scorecard.schemas.grading import ScoreReport

logger = logging.getLogger(__name__)

# percentile points between the upstream estimate and the calibrated value
_DRIFT_LOG_THRESHOLD = 15


def build_score_report(
    score: float,
    *,
    industry: str | None = None,
    target_percentile: float | None = None,
    estimated_percentile: float | None = None,
) -> ScoreReport:
    """Everything the presentation layer renders for one raw resume score."""
    target = settings.default_target_percentile if target_percentile is None else target_percentile
    percentile = score_to_percentile(score)
    grade = percentile_to_grade(percentile)
    industry_key = resolve_industry(industry)

    delta = None
    if estimated_percentile is not None:
        delta = estimated_percentile - percentile
        if abs(delta) >= _DRIFT_LOG_THRESHOLD:
            logger.warning(
                "score_report_percentile_drift computed=%s estimated=%s delta=%s",
                percentile,
                estimated_percentile,
                delta,
            )

    report = ScoreReport(
        score=score,
        percentile=percentile,
        grade=grade,
        description=get_percentile_description(percentile),
        grade_color=get_grade_color(grade),
        score_color=get_score_color(score),
        improvement=calculate_improvement_potential(score, target),
        industry=industry_key,
        benchmarks=get_industry_benchmarks(industry_key),
        standing=get_industry_standing(score, industry_key),
        estimated_percentile=estimated_percentile,
        percentile_delta=delta,
    )
    logger.info(
        "score_report_built score=%s percentile=%s grade=%s industry=%s difficulty=%s",
        score,
        percentile,
        grade,
        industry_key,
        report.improvement.difficulty,
    )
    return report
