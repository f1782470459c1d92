from .benchmarks import get_industry_benchmarks, get_industry_standing, resolve_industry
from .curve import percentile_to_score, score_to_percentile
from .grades import (
    get_grade_color,
    get_percentile_description,
    get_score_color,
    percentile_to_grade,
    score_to_grade,
)
from .improvement import DEFAULT_TARGET_PERCENTILE, calculate_improvement_potential, classify_difficulty
from .tables import CALIBRATION_CURVE, GRADE_BANDS, INDUSTRY_BENCHMARKS, GradingTables, load_grading_tables

__all__ = [
    "CALIBRATION_CURVE",
    "GRADE_BANDS",
    "INDUSTRY_BENCHMARKS",
    "GradingTables",
    "load_grading_tables",
    "score_to_percentile",
    "percentile_to_score",
    "percentile_to_grade",
    "score_to_grade",
    "get_percentile_description",
    "get_grade_color",
    "get_score_color",
    "DEFAULT_TARGET_PERCENTILE",
    "calculate_improvement_potential",
    "classify_difficulty",
    "get_industry_benchmarks",
    "get_industry_standing",
    "resolve_industry",
]
