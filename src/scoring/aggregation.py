"""
Per-sample aggregation of grader score sheets (consensus heatmap inputs).

Only SUBMITTED sheets are aggregated; a draft in progress never influences
the statistics.  With zero submitted sheets every row is zero/empty and
``has_sufficient_data`` is False; the caller decides how to present
"no data yet".
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

import pandas as pd

from ..models.records import ScoreSheet
from .config import ATTRIBUTE_LABELS, DESCRIPTOR_PROFILE_SIZE, SCORE_ATTRIBUTES
from .statistics import (
    EMPTY_STATS,
    Deviation,
    ScoreStats,
    calculate_stats,
    classify_deviation,
    classify_variance,
)


@dataclass(frozen=True)
class AttributeRow:
    attribute: str
    average: float
    std_dev: float
    grader_scores: dict[str, float] = field(default_factory=dict)

    @property
    def variance_tier(self) -> str:
        return classify_variance(self.std_dev)


@dataclass(frozen=True)
class SampleAggregate:
    rows: tuple[AttributeRow, ...]
    grader_ids: tuple[str, ...]
    overall: ScoreStats = EMPTY_STATS

    @property
    def n_graders(self) -> int:
        return len(self.grader_ids)

    @property
    def has_sufficient_data(self) -> bool:
        return self.n_graders > 0

    def row(self, attribute: str) -> AttributeRow:
        for row in self.rows:
            if row.attribute == attribute:
                return row
        raise KeyError(attribute)


def submitted_only(sheets: Iterable[ScoreSheet]) -> list[ScoreSheet]:
    return [sheet for sheet in sheets if sheet.is_submitted]


def aggregate_score_sheets(
    sheets: Iterable[ScoreSheet],
    attributes: Sequence[str] = SCORE_ATTRIBUTES,
) -> SampleAggregate:
    """
    Build the attribute × grader comparison for one (sample, event) pair.

    Args:
        sheets: Score sheets for a single sample within a single event.
                Drafts are dropped here, so callers may pass everything.
        attributes: Attribute names to aggregate, in display order.

    Returns:
        SampleAggregate with one AttributeRow per attribute plus stats over
        the graders' final scores.
    """
    submitted = submitted_only(sheets)
    grader_ids = tuple(dict.fromkeys(sheet.grader_id for sheet in submitted))

    rows: list[AttributeRow] = []
    for attribute in attributes:
        per_grader = {sheet.grader_id: sheet.scores.attribute(attribute) for sheet in submitted}
        attr_stats = calculate_stats(list(per_grader.values()))
        rows.append(AttributeRow(
            attribute=attribute,
            average=attr_stats.average,
            std_dev=attr_stats.std_dev,
            grader_scores=per_grader,
        ))

    overall = calculate_stats([sheet.final_score for sheet in submitted])
    return SampleAggregate(rows=tuple(rows), grader_ids=grader_ids, overall=overall)


def heatmap_cells(aggregate: SampleAggregate) -> dict[tuple[str, str], Deviation]:
    """Deviation of every (attribute, grader) cell from the attribute average."""
    cells: dict[tuple[str, str], Deviation] = {}
    for row in aggregate.rows:
        for grader_id, score in row.grader_scores.items():
            cells[(row.attribute, grader_id)] = classify_deviation(score, row.average)
    return cells


def comparison_matrix(aggregate: SampleAggregate) -> pd.DataFrame:
    """
    Tabular view of the aggregate: one row per attribute.

    Columns: attribute, label, average, std_dev, variance_tier, then one
    column per grader id (in submission order).
    """
    records: list[dict] = []
    for row in aggregate.rows:
        record = {
            "attribute": row.attribute,
            "label": ATTRIBUTE_LABELS.get(row.attribute, row.attribute),
            "average": row.average,
            "std_dev": row.std_dev,
            "variance_tier": row.variance_tier,
        }
        for grader_id in aggregate.grader_ids:
            record[grader_id] = row.grader_scores.get(grader_id)
        records.append(record)

    columns = ["attribute", "label", "average", "std_dev", "variance_tier", *aggregate.grader_ids]
    return pd.DataFrame(records, columns=columns)


# ---------------------------------------------------------------------------
# Qualitative insights
# ---------------------------------------------------------------------------

def descriptor_frequency(sheets: Iterable[ScoreSheet]) -> list[tuple[str, int]]:
    """
    Descriptor name counts across submitted sheets, most frequent first.

    Ties keep first-seen order.
    """
    counts = Counter(
        descriptor.name
        for sheet in submitted_only(sheets)
        for descriptor in sheet.descriptors
    )
    # Counter preserves insertion order and sorted() is stable
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)


def descriptor_profile(
    sheets: Iterable[ScoreSheet],
    top_n: int = DESCRIPTOR_PROFILE_SIZE,
) -> str:
    """Comma-joined top descriptors, e.g. ``"Jasmine, Lemon"``."""
    return ", ".join(name for name, _ in descriptor_frequency(sheets)[:top_n])
