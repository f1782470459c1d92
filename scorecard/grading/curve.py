"""Piecewise-linear score <-> percentile conversion over the calibration curve."""

from __future__ import annotations

import math
from typing import Sequence

from scorecard.grading.tables import CALIBRATION_CURVE
from scorecard.schemas.grading import CalibrationPoint

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp(value: float, low: float = SCORE_MIN, high: float = SCORE_MAX) -> float:
    """Clamp into [low, high]. NaN is read as ``low``; infinities clamp normally."""
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    # half-up; built-in round() rounds halves to even
    return int(math.floor(value + 0.5))


def _interpolate(x: float, x1: float, y1: float, x2: float, y2: float) -> float:
    if x1 == x2:
        return y1
    return y1 + (x - x1) * (y2 - y1) / (x2 - x1)


def score_to_percentile(
    score: float,
    *,
    curve: Sequence[CalibrationPoint] = CALIBRATION_CURVE,
) -> int:
    """Convert a raw 0-100 resume score to its percentile rank.

    Out-of-range scores are clamped, never rejected. The result is
    non-decreasing in ``score`` and, with the shipped curve, stays within
    [0, 99].
    """
    clamped = clamp(score)

    for current, following in zip(curve, curve[1:]):
        if current.score <= clamped <= following.score:
            return round_half_up(
                _interpolate(
                    clamped,
                    current.score,
                    current.percentile,
                    following.score,
                    following.percentile,
                )
            )

    return round_half_up(curve[-1].percentile)


def percentile_to_score(
    percentile: float,
    *,
    curve: Sequence[CalibrationPoint] = CALIBRATION_CURVE,
    fallback: int = 100,
) -> int:
    """Inverse of :func:`score_to_percentile`: the raw score that reaches ``percentile``.

    Segments are matched by percentile. A flat segment resolves to its lower
    score. Targets the curve never reaches (above its last percentile, or NaN)
    return ``fallback``.
    """
    if not math.isnan(percentile) and percentile < 0:
        percentile = 0.0

    for current, following in zip(curve, curve[1:]):
        if current.percentile <= percentile <= following.percentile:
            return round_half_up(
                _interpolate(
                    percentile,
                    current.percentile,
                    current.score,
                    following.percentile,
                    following.score,
                )
            )

    return fallback
