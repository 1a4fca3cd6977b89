"""
Head-judge adjudication helpers: grade bands, the consensus proposal the
judge starts from, finalization, and the reveal-gated final score accessor.

Finalization is once-only.  A second finalize raises
AdjudicationLockedError instead of silently merging; the caller is expected
to prevent two judges finalizing the same sample concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from ..models.errors import (
    AdjudicationLockedError,
    InsufficientScoresError,
    ResultsNotRevealedError,
)
from ..models.records import Adjudicated, CoffeeSample, CuppingEvent, ScoreSheet
from .aggregation import descriptor_profile, submitted_only
from .config import BELOW_SPECIALTY, GRADE_BANDS, GRADE_LEVELS, JUSTIFICATION_TOLERANCE
from .statistics import calculate_stats


@dataclass(frozen=True)
class AdjudicationProposal:
    """Starting point shown to the head judge for one sample."""

    sample_id: str
    score: float
    grade: str
    score_range: tuple[float, float]
    n_graders: int
    descriptor_profile: str


def grade_from_score(score: float) -> str:
    """Outstanding (90+), Excellent (85+), Specialty (80+), else Below Specialty."""
    for floor, grade in GRADE_BANDS:
        if score >= floor:
            return grade
    return BELOW_SPECIALTY


def propose_adjudication(
    sample: CoffeeSample,
    sheets: Iterable[ScoreSheet],
) -> AdjudicationProposal:
    """
    Consensus proposal: mean final score of the submitted sheets.

    Raises:
        InsufficientScoresError: No submitted sheets for the sample.
    """
    submitted = [s for s in submitted_only(sheets) if s.sample_id == sample.id]
    if not submitted:
        raise InsufficientScoresError(sample.id)

    overall = calculate_stats([sheet.final_score for sheet in submitted])
    return AdjudicationProposal(
        sample_id=sample.id,
        score=overall.average,
        grade=grade_from_score(overall.average),
        score_range=overall.range,
        n_graders=len(submitted),
        descriptor_profile=descriptor_profile(submitted),
    )


def requires_justification(final_score: float, proposed_score: float) -> bool:
    """True when the judge moved the score away from the consensus."""
    return abs(final_score - proposed_score) > JUSTIFICATION_TOLERANCE


def finalize_sample(
    sample: CoffeeSample,
    score: float,
    grade: str,
    notes: str = "",
    justification: str = "",
) -> CoffeeSample:
    """
    Return ``sample`` carrying the head judge's final result.

    Raises:
        AdjudicationLockedError: The sample was already finalized.
        ValueError: Non-positive score or unknown grade level.
    """
    if sample.is_adjudicated:
        raise AdjudicationLockedError(sample.id)
    if score <= 0:
        raise ValueError(f"Adjudicated score must be positive, got {score}")
    if grade not in GRADE_LEVELS:
        raise ValueError(f"Unknown grade level {grade!r}; expected one of {GRADE_LEVELS}")

    return replace(
        sample,
        adjudication=Adjudicated(score=float(score), grade=grade, notes=notes, justification=justification),
    )


def revealed_final_score(sample: CoffeeSample, event: CuppingEvent) -> float | None:
    """
    The sample's adjudicated score as visible to graders, farmers, public.

    Returns None for a sample that was never finalized.

    Raises:
        ResultsNotRevealedError: The event has not revealed its results.
        ValueError: The sample is not entered in ``event``.
    """
    if not event.includes(sample.id):
        raise ValueError(f"Sample {sample.id!r} is not entered in event {event.id!r}")
    if not event.is_results_revealed:
        raise ResultsNotRevealedError(event.id)
    return sample.adjudicated_final_score
