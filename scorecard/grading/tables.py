from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from scorecard.schemas.grading import CalibrationPoint, GradeBand, IndustryBenchmark

DEFAULT_TABLES_PATH = Path(__file__).with_name("tables.yaml")
DEFAULT_INDUSTRY = "default"


@dataclass(frozen=True)
class GradingTables:
    calibration_curve: tuple[CalibrationPoint, ...]
    grade_bands: tuple[GradeBand, ...]
    industry_benchmarks: Mapping[str, IndustryBenchmark]


def _read_document(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise RuntimeError(f"Grading tables not found at '{path}'.")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read grading tables '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in grading tables '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid grading tables '{path}': expected a top-level mapping.")
    return parsed


def _require_list(document: dict[str, Any], key: str, path: Path) -> list[Any]:
    value = document.get(key)
    if not isinstance(value, list) or not value:
        raise RuntimeError(f"Invalid grading tables '{path}': '{key}' must be a non-empty list.")
    return value


def _check_curve(curve: tuple[CalibrationPoint, ...], path: Path) -> None:
    if len(curve) < 2:
        raise RuntimeError(f"Invalid grading tables '{path}': calibration curve needs at least two points.")
    first, last = curve[0], curve[-1]
    if first.score != 0 or first.percentile != 0:
        raise RuntimeError(f"Invalid grading tables '{path}': calibration curve must start at (0, 0).")
    if last.score != 100:
        raise RuntimeError(f"Invalid grading tables '{path}': calibration curve must end at score 100.")
    for previous, current in zip(curve, curve[1:]):
        if current.score <= previous.score:
            raise RuntimeError(
                f"Invalid grading tables '{path}': calibration scores must be strictly increasing "
                f"({previous.score} -> {current.score})."
            )
        if current.percentile < previous.percentile:
            raise RuntimeError(
                f"Invalid grading tables '{path}': calibration percentiles must not decrease "
                f"({previous.percentile} -> {current.percentile})."
            )


def _check_bands(bands: tuple[GradeBand, ...], path: Path) -> None:
    for band in bands:
        if band.min > band.max:
            raise RuntimeError(f"Invalid grading tables '{path}': band {band.grade} has min > max.")
    for percentile in range(0, 101):
        matches = [band.grade for band in bands if band.contains(percentile)]
        if len(matches) != 1:
            raise RuntimeError(
                f"Invalid grading tables '{path}': percentile {percentile} matches "
                f"{len(matches)} grade bands {matches}; bands must partition 0-100."
            )


def _check_benchmarks(benchmarks: dict[str, IndustryBenchmark], path: Path) -> None:
    for name, benchmark in benchmarks.items():
        if not benchmark.average <= benchmark.good <= benchmark.excellent:
            raise RuntimeError(
                f"Invalid grading tables '{path}': benchmark '{name}' must satisfy "
                f"average <= good <= excellent ({benchmark.average}, {benchmark.good}, {benchmark.excellent})."
            )


def load_grading_tables(path: str | Path | None = None) -> GradingTables:
    """Parse and validate the calibration curve, grade bands and industry benchmarks."""
    resolved = Path(path) if path else DEFAULT_TABLES_PATH
    document = _read_document(resolved)

    raw_benchmarks = document.get("industry_benchmarks")
    if not isinstance(raw_benchmarks, dict) or not raw_benchmarks:
        raise RuntimeError(
            f"Invalid grading tables '{resolved}': 'industry_benchmarks' must be a non-empty mapping."
        )

    try:
        curve = tuple(
            CalibrationPoint.model_validate(item)
            for item in _require_list(document, "calibration_curve", resolved)
        )
        bands = tuple(
            GradeBand.model_validate(item)
            for item in _require_list(document, "grade_bands", resolved)
        )
        benchmarks: dict[str, IndustryBenchmark] = {}
        for name, values in raw_benchmarks.items():
            key = str(name).lower()
            if key in benchmarks:
                raise RuntimeError(
                    f"Invalid grading tables '{resolved}': industry '{name}' duplicates '{key}' "
                    "once lower-cased."
                )
            benchmarks[key] = IndustryBenchmark.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid grading tables '{resolved}': {exc}") from exc

    _check_curve(curve, resolved)
    _check_bands(bands, resolved)
    _check_benchmarks(benchmarks, resolved)
    if DEFAULT_INDUSTRY not in benchmarks:
        raise RuntimeError(
            f"Invalid grading tables '{resolved}': industry_benchmarks needs a '{DEFAULT_INDUSTRY}' entry."
        )

    return GradingTables(
        calibration_curve=curve,
        grade_bands=bands,
        industry_benchmarks=MappingProxyType(benchmarks),
    )


_TABLES = load_grading_tables()

CALIBRATION_CURVE: tuple[CalibrationPoint, ...] = _TABLES.calibration_curve
GRADE_BANDS: tuple[GradeBand, ...] = _TABLES.grade_bands
INDUSTRY_BENCHMARKS: Mapping[str, IndustryBenchmark] = _TABLES.industry_benchmarks
