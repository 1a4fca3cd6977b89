"""
Descriptive statistics over small lists of cupping scores.

Used by the consensus heatmap (mean / stdDev / range per attribute) and by
the farmer feedback report (percentile rank against the competition).

Conventions that must hold for heatmap colouring to be reproducible:

- Standard deviation is the POPULATION form (divide by N, ``ddof=0``).
- Empty input is not an error: average/stdDev are 0 and the range is (0, 0).
- Percentile is the share of the population strictly below the value,
  rounded half-up, and 0 for an empty population.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import stats

from .config import (
    DEVIATION_NEGATIVE,
    DEVIATION_NONE,
    DEVIATION_POSITIVE,
    HIGH_VARIANCE_THRESHOLD,
    MEDIUM_VARIANCE_THRESHOLD,
    VARIANCE_HIGH,
    VARIANCE_LOW,
    VARIANCE_MEDIUM,
)


@dataclass(frozen=True)
class ScoreStats:
    average: float
    std_dev: float
    range: tuple[float, float]

    @property
    def spread(self) -> float:
        return self.range[1] - self.range[0]


@dataclass(frozen=True)
class Deviation:
    """How far a single grader's score sits from the attribute average."""

    value: float
    tier: str
    sign: str


EMPTY_STATS = ScoreStats(average=0.0, std_dev=0.0, range=(0.0, 0.0))


# ---------------------------------------------------------------------------
# Core statistics
# ---------------------------------------------------------------------------

def calculate_stats(scores: Sequence[float]) -> ScoreStats:
    """
    Mean, population standard deviation, and [min, max] of ``scores``.

    Args:
        scores: Numeric scores; may be empty.

    Returns:
        ScoreStats.  ``stats([6, 8])`` → average 7.0, std_dev 1.0, range (6, 8).
    """
    if len(scores) == 0:
        return EMPTY_STATS

    values = np.asarray(scores, dtype=float)
    if len(values) == 1:
        only = float(values[0])
        return ScoreStats(average=only, std_dev=0.0, range=(only, only))

    return ScoreStats(
        average=float(values.mean()),
        std_dev=float(values.std(ddof=0)),
        range=(float(values.min()), float(values.max())),
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percentile_rank(value: float, population: Sequence[float]) -> int:
    """
    Percentage of ``population`` strictly below ``value`` (0–100).

    Args:
        value: The score being placed, e.g. a sample's attribute average.
        population: Competition scores for the same attribute.

    Returns:
        Integer percentile; 0 when the population is empty.
    """
    if len(population) == 0:
        return 0
    pct = stats.percentileofscore(np.asarray(population, dtype=float), value, kind="strict")
    return _round_half_up(float(pct))


# ---------------------------------------------------------------------------
# Heatmap classification
# ---------------------------------------------------------------------------

def classify_variance(std_dev: float) -> str:
    """Tier an attribute's stdDev across graders: high / medium / low."""
    if std_dev > HIGH_VARIANCE_THRESHOLD:
        return VARIANCE_HIGH
    if std_dev > MEDIUM_VARIANCE_THRESHOLD:
        return VARIANCE_MEDIUM
    return VARIANCE_LOW


def classify_deviation(score: float, average: float) -> Deviation:
    """
    Tier a single cell's deviation from the attribute average.

    The tier uses the same thresholds as :func:`classify_variance` applied
    to the absolute deviation; the sign is kept so the heatmap can colour
    over- and under-scoring differently.
    """
    deviation = float(score) - float(average)
    if deviation > 0:
        sign = DEVIATION_POSITIVE
    elif deviation < 0:
        sign = DEVIATION_NEGATIVE
    else:
        sign = DEVIATION_NONE
    return Deviation(value=deviation, tier=classify_variance(abs(deviation)), sign=sign)
