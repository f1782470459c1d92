from __future__ import annotations

from typing import Mapping

from scorecard.grading.tables import DEFAULT_INDUSTRY, INDUSTRY_BENCHMARKS
from scorecard.schemas.grading import IndustryBenchmark, Standing


def resolve_industry(
    industry: str | None,
    *,
    benchmarks: Mapping[str, IndustryBenchmark] = INDUSTRY_BENCHMARKS,
) -> str:
    """Return the benchmark key used for ``industry``: exact, case-insensitive, else the default."""
    if not industry:
        return DEFAULT_INDUSTRY
    key = industry.lower()
    return key if key in benchmarks else DEFAULT_INDUSTRY


def get_industry_benchmarks(
    industry: str | None,
    *,
    benchmarks: Mapping[str, IndustryBenchmark] = INDUSTRY_BENCHMARKS,
) -> IndustryBenchmark:
    return benchmarks[resolve_industry(industry, benchmarks=benchmarks)]


def get_industry_standing(score: float, industry: str | None) -> Standing:
    benchmark = get_industry_benchmarks(industry)
    if score >= benchmark.excellent:
        return "excellent"
    if score >= benchmark.good:
        return "good"
    if score >= benchmark.average:
        return "average"
    return "below_average"
