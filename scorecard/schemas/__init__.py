from .grading import (
    BenchmarkLookup,
    CalibrationPoint,
    Difficulty,
    Grade,
    GradeBand,
    GradingTablesView,
    ImprovementAssessment,
    IndustryBenchmark,
    PercentileLookup,
    ScoreReport,
    ScoreReportRequest,
    Standing,
)

__all__ = [
    "Grade",
    "Difficulty",
    "Standing",
    "CalibrationPoint",
    "GradeBand",
    "IndustryBenchmark",
    "ImprovementAssessment",
    "ScoreReportRequest",
    "ScoreReport",
    "PercentileLookup",
    "BenchmarkLookup",
    "GradingTablesView",
]
