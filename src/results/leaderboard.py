"""
Tabular leaderboard views and the organizer's score summary.

The leaderboard frame is what a results page or export would render; the
distribution and key metrics back the organizer report.  The organizer sees
adjudicated scores before reveal, so nothing here is reveal-gated: callers
that serve farmers or the public must rank through ``rank_event`` /
``rank_all_events`` first.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

import pandas as pd

from ..models.records import CoffeeSample
from ..models.snapshot import CuppingSnapshot
from .config import ALL_EVENTS, DISTRIBUTION_EDGES, DISTRIBUTION_LABELS
from .ranking import RankedSample, is_rankable, placement_title

LEADERBOARD_COLUMNS = [
    "rank", "ordinal", "title", "blind_code", "sample_id", "farm_name", "region",
    "processing_method", "variety", "score", "grade", "event_id", "event_name",
]


def leaderboard_frame(
    ranked: Sequence[RankedSample],
    snapshot: Optional[CuppingSnapshot] = None,
) -> pd.DataFrame:
    """
    One row per ranked sample, in rank order.

    Args:
        ranked: Output of rank_samples / rank_event / rank_all_events.
        snapshot: When given, event names are resolved; otherwise the
                  ``event_name`` column is left empty.

    Returns:
        DataFrame with LEADERBOARD_COLUMNS.
    """
    event_names: dict[str, str] = {}
    if snapshot is not None:
        event_names = {event.id: event.name for event in snapshot.events}

    records = [
        {
            "rank": entry.rank,
            "ordinal": entry.ordinal,
            "title": placement_title(entry.rank),
            "blind_code": entry.sample.blind_code,
            "sample_id": entry.sample.id,
            "farm_name": entry.sample.farm_name,
            "region": entry.sample.region,
            "processing_method": entry.sample.processing_method,
            "variety": entry.sample.variety,
            "score": entry.score,
            "grade": entry.sample.grade_level,
            "event_id": entry.event_id,
            "event_name": event_names.get(entry.event_id, ""),
        }
        for entry in ranked
    ]
    return pd.DataFrame(records, columns=LEADERBOARD_COLUMNS)


# ---------------------------------------------------------------------------
# Organizer report
# ---------------------------------------------------------------------------

def report_samples(
    snapshot: CuppingSnapshot,
    event_id: str = ALL_EVENTS,
    processing_method: Optional[str] = None,
) -> list[CoffeeSample]:
    """
    Scored samples in scope for the organizer report.

    ``event_id="all"`` covers every sample in the snapshot; otherwise only
    the event's samples.  Unscored samples are dropped either way.
    """
    if event_id == ALL_EVENTS:
        samples = list(snapshot.samples)
    else:
        samples = snapshot.samples_for_event(event_id)
    if processing_method is not None:
        samples = [s for s in samples if s.processing_method == processing_method]
    return [s for s in samples if is_rankable(s)]


def _scores(samples: Iterable[CoffeeSample]) -> pd.Series:
    return pd.Series(
        [s.adjudicated_final_score for s in samples if is_rankable(s)],
        dtype=float,
    )


def score_distribution(samples: Iterable[CoffeeSample]) -> pd.Series:
    """
    Count of adjudicated scores per band, every band present (zeros kept).

    Bands are left-closed: 82.0 counts in "82-84", 90.0 in "90+".
    """
    scores = _scores(samples)
    bins = pd.cut(scores, bins=DISTRIBUTION_EDGES, labels=DISTRIBUTION_LABELS, right=False)
    counts = bins.value_counts(sort=False).reindex(DISTRIBUTION_LABELS, fill_value=0)
    counts.name = "count"
    return counts.astype(int)


def key_metrics(samples: Iterable[CoffeeSample]) -> dict:
    """Average, high, low, and count of adjudicated scores (zeros when empty)."""
    scores = _scores(samples)
    if scores.empty:
        return {"average": 0.0, "high": 0.0, "low": 0.0, "count": 0}
    return {
        "average": float(scores.mean()),
        "high": float(scores.max()),
        "low": float(scores.min()),
        "count": int(scores.size),
    }
