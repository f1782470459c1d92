from fastapi import APIRouter, Query, Request

from scorecard.core.config import settings
from scorecard.core.rate_limit import rate_limit
from scorecard.grading import (
    CALIBRATION_CURVE,
    GRADE_BANDS,
    INDUSTRY_BENCHMARKS,
    calculate_improvement_potential,
    get_industry_benchmarks,
    get_percentile_description,
    percentile_to_grade,
    resolve_industry,
    score_to_percentile,
)
from scorecard.schemas.grading import (
    BenchmarkLookup,
    GradingTablesView,
    ImprovementAssessment,
    PercentileLookup,
    ScoreReport,
    ScoreReportRequest,
)
from scorecard.services.report_service import build_score_report

router = APIRouter()


@router.post("/grading/report", response_model=ScoreReport)
@rate_limit()
async def score_report(request: Request, payload: ScoreReportRequest):
    _ = request
    return build_score_report(
        payload.score,
        industry=payload.industry,
        target_percentile=payload.target_percentile,
        estimated_percentile=payload.estimated_percentile,
    )


@router.get("/grading/percentile", response_model=PercentileLookup)
@rate_limit()
async def percentile_lookup(
    request: Request,
    score: float = Query(ge=-1000.0, le=1000.0, allow_inf_nan=False),
):
    _ = request
    percentile = score_to_percentile(score)
    return PercentileLookup(
        score=score,
        percentile=percentile,
        grade=percentile_to_grade(percentile),
        description=get_percentile_description(percentile),
    )


@router.get("/grading/improvement", response_model=ImprovementAssessment)
@rate_limit()
async def improvement_lookup(
    request: Request,
    score: float = Query(ge=-1000.0, le=1000.0, allow_inf_nan=False),
    target_percentile: float = Query(
        default=settings.default_target_percentile, ge=0.0, le=100.0, allow_inf_nan=False
    ),
):
    _ = request
    return calculate_improvement_potential(score, target_percentile)


@router.get("/grading/benchmarks/{industry}", response_model=BenchmarkLookup)
@rate_limit()
async def benchmark_lookup(request: Request, industry: str):
    _ = request
    return BenchmarkLookup(
        industry=resolve_industry(industry),
        benchmarks=get_industry_benchmarks(industry),
    )


@router.get("/grading/tables", response_model=GradingTablesView)
@rate_limit()
async def grading_tables(request: Request):
    _ = request
    return GradingTablesView(
        calibration_curve=list(CALIBRATION_CURVE),
        grade_bands=list(GRADE_BANDS),
        industry_benchmarks=dict(INDUSTRY_BENCHMARKS),
    )
