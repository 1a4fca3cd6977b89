"""
Farmer achievement badges.

Each badge kind is a member of :class:`BadgeKind` carrying its display name,
description, and the predicate that awards it for a single history entry.
Per-sample kinds are counted once per qualifying (event, sample) entry;
MOST_IMPROVED is a history-level badge awarded at most once.

Only revealed results count.  An entry from an unrevealed event contributes
nothing (not even to the improvement series) so no badge can leak a score
before the organizer reveals it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import pandas as pd

from ..models.snapshot import CuppingSnapshot
from .config import (
    CLUB_85_SCORE,
    MOST_IMPROVED_DELTA,
    OUTSTANDING_CUP_SCORE,
    TOP_3_RANK,
    TOP_10_RANK,
)
from .ranking import rank_of, rank_samples


@dataclass(frozen=True)
class SampleHistoryEntry:
    """One farmer sample as entered in one event."""

    sample_id: str
    event_id: str
    event_date: str
    score: Optional[float]
    is_revealed: bool
    rank: Optional[int] = None

    @property
    def counts(self) -> bool:
        return self.is_revealed and self.score is not None and self.score > 0


class BadgeKind(Enum):
    OUTSTANDING_CUP = ("Outstanding Cup", "Achieved a score of 90+")
    CLUB_85 = ("85+ Club", "Achieved a score of 85+")
    FIRST_PLACE = ("1st Place Winner", "Finished first in an event")
    TOP_3 = ("Top 3 Finisher", "Finished in the top 3")
    TOP_10 = ("Top 10 Finisher", "Finished in the top 10")
    MOST_IMPROVED = ("Most Improved", "Score improved by 2+ points")

    def __init__(self, display_name: str, description: str):
        self.display_name = display_name
        self.description = description

    def earned_by(self, entry: SampleHistoryEntry) -> bool:
        """Per-entry predicate; always False for history-level kinds."""
        if not entry.counts:
            return False
        if self is BadgeKind.OUTSTANDING_CUP:
            return entry.score >= OUTSTANDING_CUP_SCORE
        if self is BadgeKind.CLUB_85:
            return entry.score >= CLUB_85_SCORE
        if entry.rank is None:
            return False
        if self is BadgeKind.FIRST_PLACE:
            return entry.rank == 1
        if self is BadgeKind.TOP_3:
            return entry.rank <= TOP_3_RANK
        if self is BadgeKind.TOP_10:
            return entry.rank <= TOP_10_RANK
        return False


PER_SAMPLE_BADGES: tuple[BadgeKind, ...] = (
    BadgeKind.OUTSTANDING_CUP,
    BadgeKind.CLUB_85,
    BadgeKind.FIRST_PLACE,
    BadgeKind.TOP_3,
    BadgeKind.TOP_10,
)


@dataclass(frozen=True)
class EarnedBadge:
    kind: BadgeKind
    count: int

    @property
    def name(self) -> str:
        return self.kind.display_name

    @property
    def description(self) -> str:
        return self.kind.description


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------

def farmer_history(snapshot: CuppingSnapshot, farmer_id: str) -> list[SampleHistoryEntry]:
    """
    One entry per (event, farmer sample) pair, newest event first.

    Ranks are computed only for revealed events, over every sample in the
    event (not just the farmer's).
    """
    farmer_sample_ids = {s.id for s in snapshot.samples_for_farmer(farmer_id)}
    history: list[SampleHistoryEntry] = []

    # Equal dates keep snapshot order
    for event in sorted(snapshot.events, key=lambda e: e.date, reverse=True):
        entered = [sid for sid in event.sample_ids if sid in farmer_sample_ids]
        if not entered:
            continue

        ranked = []
        if event.is_results_revealed:
            ranked = rank_samples(snapshot.samples_for_event(event.id), event_id=event.id)

        for sample_id in entered:
            sample = snapshot.get_sample(sample_id)
            history.append(SampleHistoryEntry(
                sample_id=sample_id,
                event_id=event.id,
                event_date=event.date,
                score=sample.adjudicated_final_score,
                is_revealed=event.is_results_revealed,
                rank=rank_of(ranked, sample_id) if event.is_results_revealed else None,
            ))
    return history


def scored_series(history: Sequence[SampleHistoryEntry]) -> list[SampleHistoryEntry]:
    """
    Revealed, scored entries in chronological order (event date ascending).

    A sample appearing in several events is kept once, at its earliest event.
    Equal dates keep history order.
    """
    seen: set[str] = set()
    series: list[SampleHistoryEntry] = []
    for entry in sorted(history, key=lambda e: e.event_date):
        if not entry.counts or entry.sample_id in seen:
            continue
        seen.add(entry.sample_id)
        series.append(entry)
    return series


def max_improvement(history: Sequence[SampleHistoryEntry]) -> float:
    """Largest positive jump between adjacent entries of the scored series (0 if none)."""
    series = scored_series(history)
    best = 0.0
    for previous, current in zip(series, series[1:]):
        best = max(best, current.score - previous.score)
    return best


# ---------------------------------------------------------------------------
# Badges
# ---------------------------------------------------------------------------

def evaluate_badges(history: Sequence[SampleHistoryEntry]) -> list[EarnedBadge]:
    """
    Accumulate badges over a farmer's history.

    Args:
        history: Output of :func:`farmer_history` (or equivalent entries).

    Returns:
        EarnedBadge list sorted by count descending; equal counts keep the
        order in which each badge was first earned.
    """
    counts: dict[BadgeKind, int] = {}
    for entry in history:
        for kind in PER_SAMPLE_BADGES:
            if kind.earned_by(entry):
                counts[kind] = counts.get(kind, 0) + 1

    if len(scored_series(history)) >= 2 and max_improvement(history) >= MOST_IMPROVED_DELTA:
        counts[BadgeKind.MOST_IMPROVED] = 1

    earned = [EarnedBadge(kind=kind, count=count) for kind, count in counts.items()]
    return sorted(earned, key=lambda badge: badge.count, reverse=True)


def performance_timeline(history: Sequence[SampleHistoryEntry]) -> pd.DataFrame:
    """Scored series as a frame: date, year, score, sample_id, event_id."""
    series = scored_series(history)
    frame = pd.DataFrame(
        {
            "date": pd.Series([e.event_date for e in series], dtype=object),
            "score": [e.score for e in series],
            "sample_id": [e.sample_id for e in series],
            "event_id": [e.event_id for e in series],
        },
        columns=["date", "score", "sample_id", "event_id"],
    )
    frame.insert(1, "year", frame["date"].str[:4])
    return frame


def sample_achievements(
    score: Optional[float],
    grade: Optional[str],
    rank: Optional[int],
) -> list[str]:
    """
    Badges shown on a single sample report: one rank tier and one grade tier.

    Nothing is shown until the sample has both a score and a revealed rank.
    """
    if score is None or rank is None:
        return []

    names: list[str] = []
    if rank == 1:
        names.append(BadgeKind.FIRST_PLACE.display_name)
    elif rank <= TOP_3_RANK:
        names.append(BadgeKind.TOP_3.display_name)
    elif rank <= TOP_10_RANK:
        names.append(BadgeKind.TOP_10.display_name)

    if grade == "Outstanding":
        names.append("Outstanding Cup (90+)")
    elif grade == "Excellent":
        names.append("Excellent Cup (85+)")
    return names
