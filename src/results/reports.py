"""
Farmer feedback report for one sample.

For each attribute the sample's grader average is placed against the
competition: submitted sheets of the adjudicated samples in the same event
and processing-method category.  Rank, final score, and achievements are
filled in only once the event's results are revealed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..models.snapshot import CuppingSnapshot
from ..scoring.aggregation import aggregate_score_sheets, descriptor_frequency
from ..scoring.config import ATTRIBUTE_LABELS
from ..scoring.statistics import calculate_stats, percentile_rank
from .achievements import sample_achievements
from .config import (
    FEEDBACK_TEXT,
    LEVEL_HIGH,
    LEVEL_LOW,
    LEVEL_MID,
    ON_PAR_PERCENTILE_BAND,
    REPORT_DESCRIPTOR_LIMIT,
    REPORT_HIGH_LEVEL,
    REPORT_MID_LEVEL,
    SCORE_ATTRIBUTES,
    TREND_DOWN,
    TREND_ON_PAR,
    TREND_UP,
)
from .ranking import placement_title, rank_of, rank_samples


@dataclass(frozen=True)
class AttributeFeedback:
    attribute: str
    label: str
    sample_average: float
    competition_average: float
    percentile: int
    level: str
    trend: str
    summary: str
    detail: str

    @property
    def top_percent(self) -> int:
        """Reported as "Top N%" in the report."""
        return 100 - self.percentile


@dataclass(frozen=True)
class SampleReport:
    sample_id: str
    blind_code: str
    farm_name: str
    variety: str
    processing_method: str
    event_id: str
    event_name: str
    is_revealed: bool
    n_graders: int
    attributes: tuple[AttributeFeedback, ...]
    descriptors: tuple[tuple[str, int], ...]
    notes: tuple[str, ...]
    final_score: Optional[float] = None
    grade: Optional[str] = None
    rank: Optional[int] = None
    total_ranked: Optional[int] = None
    achievements: tuple[str, ...] = field(default_factory=tuple)

    @property
    def placement(self) -> Optional[str]:
        return placement_title(self.rank) if self.rank is not None else None


def feedback_level(average: float) -> str:
    if average >= REPORT_HIGH_LEVEL:
        return LEVEL_HIGH
    if average >= REPORT_MID_LEVEL:
        return LEVEL_MID
    return LEVEL_LOW


def feedback_trend(percentile: int) -> str:
    """On par inside the 40-60 band, otherwise up above 50 and down below."""
    low, high = ON_PAR_PERCENTILE_BAND
    if low <= percentile <= high:
        return TREND_ON_PAR
    return TREND_UP if percentile > 50 else TREND_DOWN


def build_sample_report(
    snapshot: CuppingSnapshot,
    sample_id: str,
    event_id: Optional[str] = None,
) -> SampleReport:
    """
    Assemble the feedback report for one sample.

    Args:
        snapshot: Current application snapshot.
        sample_id: Sample to report on.
        event_id: Event context; defaults to the first event the sample is
                  entered in.

    Raises:
        UnknownRecordError: Unknown sample or event.
        ValueError: The sample is not entered in the event (or in any event).
    """
    sample = snapshot.get_sample(sample_id)
    event = snapshot.get_event(event_id) if event_id is not None else snapshot.event_for_sample(sample_id)
    if event is None or not event.includes(sample_id):
        raise ValueError(f"Sample {sample_id!r} is not entered in the requested event")

    sheets = snapshot.sheets_for(sample_id, event.id)
    aggregate = aggregate_score_sheets(sheets)

    competitors = [
        s for s in snapshot.samples_for_event(event.id)
        if s.processing_method == sample.processing_method and s.is_adjudicated
    ]
    competition_sheets = [
        sheet for s in competitors for sheet in snapshot.sheets_for(s.id, event.id)
    ]

    feedback: list[AttributeFeedback] = []
    for attribute in SCORE_ATTRIBUTES:
        sample_average = aggregate.row(attribute).average
        population = [sheet.scores.attribute(attribute) for sheet in competition_sheets]
        percentile = percentile_rank(sample_average, population)
        level = feedback_level(sample_average)
        summary, detail = FEEDBACK_TEXT[attribute][level]
        feedback.append(AttributeFeedback(
            attribute=attribute,
            label=ATTRIBUTE_LABELS.get(attribute, attribute),
            sample_average=sample_average,
            competition_average=calculate_stats(population).average,
            percentile=percentile,
            level=level,
            trend=feedback_trend(percentile),
            summary=summary,
            detail=detail,
        ))

    report = dict(
        sample_id=sample.id,
        blind_code=sample.blind_code,
        farm_name=sample.farm_name,
        variety=sample.variety,
        processing_method=sample.processing_method,
        event_id=event.id,
        event_name=event.name,
        is_revealed=event.is_results_revealed,
        n_graders=aggregate.n_graders,
        attributes=tuple(feedback),
        descriptors=tuple(descriptor_frequency(sheets)[:REPORT_DESCRIPTOR_LIMIT]),
        # Grader identity is never attached to notes
        notes=tuple(sheet.notes for sheet in sheets if sheet.notes),
    )

    if event.is_results_revealed and sample.is_adjudicated:
        ranked = rank_samples(snapshot.samples_for_event(event.id), event_id=event.id)
        rank = rank_of(ranked, sample.id)
        report.update(
            final_score=sample.adjudicated_final_score,
            grade=sample.grade_level,
            rank=rank,
            total_ranked=len(ranked) if rank is not None else None,
            achievements=tuple(sample_achievements(
                sample.adjudicated_final_score, sample.grade_level, rank,
            )),
        )

    return SampleReport(**report)
