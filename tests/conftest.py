"""
Shared pytest fixtures and record builders for the scoring engine tests.

Builders return frozen records with sensible defaults so each test only
spells out the fields it is actually about.  The ``demo`` fixture is the
seed snapshot from src/models/seed.py:

- event-1 (unrevealed): sample-1, sample-2, sample-3
- event-2 (revealed):   sample-3, adjudicated at 88.5 / Excellent
- event-3 (unrevealed): no samples
"""

from __future__ import annotations

import random

import pytest

from src.models.records import (
    Adjudicated,
    CoffeeSample,
    CuppingEvent,
    CuppingScore,
    Descriptor,
    ScoreSheet,
    UNADJUDICATED,
)
from src.models.seed import demo_snapshot
from src.models.snapshot import CuppingSnapshot
from src.scoring.adjudication import grade_from_score


# ---------------------------------------------------------------------------
# Record builders
# ---------------------------------------------------------------------------

def make_score(value: float = 8.0, taints: int = 0, faults: int = 0, **overrides) -> CuppingScore:
    """Every attribute at ``value`` unless overridden by name."""
    fields = {
        name: value
        for name in (
            "fragrance", "flavor", "aftertaste", "acidity", "body", "balance",
            "uniformity", "clean_cup", "sweetness", "overall",
        )
    }
    fields.update(overrides)
    return CuppingScore(taints=taints, faults=faults, **fields)


def make_sheet(
    grader_id: str = "g1",
    sample_id: str = "s1",
    event_id: str = "e1",
    value: float = 8.0,
    submitted: bool = True,
    descriptors: tuple[tuple[str, int], ...] = (),
    notes: str = "",
    sheet_id: str | None = None,
    **overrides,
) -> ScoreSheet:
    return ScoreSheet(
        id=sheet_id or f"sheet-{grader_id}-{sample_id}-{event_id}",
        grader_id=grader_id,
        sample_id=sample_id,
        event_id=event_id,
        scores=make_score(value, **overrides),
        descriptors=tuple(Descriptor(name, intensity) for name, intensity in descriptors),
        notes=notes,
        is_submitted=submitted,
    )


def make_sample(
    sample_id: str = "s1",
    score: float | None = None,
    farmer_id: str = "f1",
    processing_method: str = "Washed",
    blind_code: str | None = None,
) -> CoffeeSample:
    """A sample; ``score`` set means adjudicated with the matching grade band."""
    adjudication = UNADJUDICATED
    if score is not None:
        adjudication = Adjudicated(score=score, grade=grade_from_score(score))
    return CoffeeSample(
        id=sample_id,
        farmer_id=farmer_id,
        blind_code=blind_code or "Z9Z9",
        farm_name=f"Farm {sample_id}",
        region="Test Region",
        altitude=1500,
        processing_method=processing_method,
        variety="Typica",
        adjudication=adjudication,
    )


def make_event(
    event_id: str = "e1",
    sample_ids: tuple[str, ...] = (),
    revealed: bool = False,
    date: str = "2024-01-01",
    processing_methods: tuple[str, ...] = ("Washed", "Natural"),
) -> CuppingEvent:
    return CuppingEvent(
        id=event_id,
        name=f"Event {event_id}",
        date=date,
        processing_methods=processing_methods,
        assigned_grader_ids=("g1", "g2"),
        assigned_head_judge_ids=("hj1",),
        sample_ids=tuple(sample_ids),
        is_results_revealed=revealed,
    )


def make_snapshot(
    events: tuple[CuppingEvent, ...] = (),
    samples: tuple[CoffeeSample, ...] = (),
    sheets: tuple[ScoreSheet, ...] = (),
) -> CuppingSnapshot:
    return CuppingSnapshot(events=tuple(events), samples=tuple(samples), score_sheets=tuple(sheets))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def demo() -> CuppingSnapshot:
    """The seed data set (Golden Bean Championship)."""
    return demo_snapshot()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so blind codes are reproducible."""
    return random.Random(20240815)


@pytest.fixture
def ranked_event_snapshot() -> CuppingSnapshot:
    """Revealed event with scores [88, None, 0, 91] in entry order."""
    samples = (
        make_sample("s1", score=88.0),
        make_sample("s2"),
        make_sample("s3", score=0.0),
        make_sample("s4", score=91.0),
    )
    event = make_event("e1", sample_ids=("s1", "s2", "s3", "s4"), revealed=True)
    return make_snapshot(events=(event,), samples=samples)
