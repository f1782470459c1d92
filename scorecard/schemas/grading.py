from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Grade = Literal["A+", "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D", "F"]
Difficulty = Literal["easy", "moderate", "challenging", "difficult"]
Standing = Literal["excellent", "good", "average", "below_average"]


class CalibrationPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0.0, le=100.0)
    percentile: float = Field(ge=0.0, le=100.0)


class GradeBand(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: int = Field(ge=0, le=100)
    max: int = Field(ge=0, le=100)
    grade: Grade

    def contains(self, percentile: float) -> bool:
        return self.min <= percentile <= self.max


class IndustryBenchmark(BaseModel):
    model_config = ConfigDict(frozen=True)

    average: int = Field(ge=0, le=100)
    good: int = Field(ge=0, le=100)
    excellent: int = Field(ge=0, le=100)


class ImprovementAssessment(BaseModel):
    current_percentile: int
    target_score: int
    improvement_needed: float = Field(ge=0.0)
    improvement_percentage: float = Field(ge=0.0)
    difficulty: Difficulty


class ScoreReportRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    score: float = Field(ge=-1000.0, le=1000.0)
    industry: str | None = Field(default=None, max_length=80)
    target_percentile: float | None = Field(default=None, ge=0.0, le=100.0)
    estimated_percentile: float | None = Field(default=None, ge=0.0, le=100.0)

    @field_validator("industry")
    @classmethod
    def _blank_industry_is_none(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value


class ScoreReport(BaseModel):
    score: float
    percentile: int
    grade: Grade
    description: str
    grade_color: str
    score_color: str
    improvement: ImprovementAssessment
    industry: str
    benchmarks: IndustryBenchmark
    standing: Standing
    estimated_percentile: float | None = None
    percentile_delta: float | None = None


class PercentileLookup(BaseModel):
    score: float
    percentile: int
    grade: Grade
    description: str


class BenchmarkLookup(BaseModel):
    industry: str
    benchmarks: IndustryBenchmark


class GradingTablesView(BaseModel):
    calibration_curve: list[CalibrationPoint]
    grade_bands: list[GradeBand]
    industry_benchmarks: dict[str, IndustryBenchmark]
