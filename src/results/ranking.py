"""
Leaderboard ranking of adjudicated samples.

Eligibility: only samples with a defined, strictly positive adjudicated
score are ranked.  Unfinalized samples are excluded, not ranked last.

Tie handling is an explicit policy rather than an accident of sort
stability: samples are ordered by score descending, then by their position
in the input (the event's entry order).  ``tie_policy="sequential"`` gives
1..N positions; ``"competition"`` lets equal scores share a rank.

Rankings are never produced for an event whose results are not revealed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..models.errors import ResultsNotRevealedError
from ..models.records import CoffeeSample
from ..models.snapshot import CuppingSnapshot
from .config import DEFAULT_TIE_POLICY, PLACEMENT_TITLES, TIE_COMPETITION, TIE_POLICIES


@dataclass(frozen=True)
class RankedSample:
    rank: int
    sample: CoffeeSample
    score: float
    event_id: Optional[str] = None

    @property
    def ordinal(self) -> str:
        return ordinal(self.rank)


# ---------------------------------------------------------------------------
# Ordinals
# ---------------------------------------------------------------------------

def rank_suffix(rank: int) -> str:
    """English ordinal suffix: st / nd / rd / th (11–13 always take th)."""
    if 11 <= rank % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(rank % 10, "th")


def ordinal(rank: int) -> str:
    return f"{rank}{rank_suffix(rank)}"


def placement_title(rank: int) -> str:
    """Certificate wording, e.g. "First Place Winner" or "7th Place"."""
    return PLACEMENT_TITLES.get(rank, f"{ordinal(rank)} Place")


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

def is_rankable(sample: CoffeeSample) -> bool:
    score = sample.adjudicated_final_score
    return score is not None and score > 0


def rank_samples(
    samples: Sequence[CoffeeSample],
    tie_policy: str = DEFAULT_TIE_POLICY,
    event_id: Optional[str] = None,
) -> list[RankedSample]:
    """
    Rank adjudicated samples by final score, highest first.

    Args:
        samples: Candidate samples in entry order (the tie-break key).
        tie_policy: "sequential" or "competition".
        event_id: Recorded on each RankedSample for scoping.

    Returns:
        RankedSample list; scores [88, None, 0, 91] → [91 (1), 88 (2)].
    """
    if tie_policy not in TIE_POLICIES:
        raise ValueError(f"Unknown tie policy {tie_policy!r}; expected one of {TIE_POLICIES}")

    eligible = [(idx, s) for idx, s in enumerate(samples) if is_rankable(s)]
    ordered = sorted(eligible, key=lambda pair: (-pair[1].adjudicated_final_score, pair[0]))

    ranked: list[RankedSample] = []
    for position, (_, sample) in enumerate(ordered, start=1):
        score = sample.adjudicated_final_score
        rank = position
        if tie_policy == TIE_COMPETITION and ranked and ranked[-1].score == score:
            rank = ranked[-1].rank
        ranked.append(RankedSample(rank=rank, sample=sample, score=score, event_id=event_id))
    return ranked


def rank_event(
    snapshot: CuppingSnapshot,
    event_id: str,
    tie_policy: str = DEFAULT_TIE_POLICY,
    processing_method: Optional[str] = None,
) -> list[RankedSample]:
    """
    Leaderboard for one event.

    Args:
        snapshot: Current application snapshot.
        event_id: Event to rank.
        tie_policy: "sequential" or "competition".
        processing_method: Optional category filter (e.g. "Washed").

    Raises:
        ResultsNotRevealedError: The event has not revealed its results,
            even if samples already carry adjudicated scores.
    """
    event = snapshot.get_event(event_id)
    if not event.is_results_revealed:
        raise ResultsNotRevealedError(event_id)

    samples = snapshot.samples_for_event(event_id)
    if processing_method is not None:
        samples = [s for s in samples if s.processing_method == processing_method]
    return rank_samples(samples, tie_policy=tie_policy, event_id=event_id)


def rank_all_events(
    snapshot: CuppingSnapshot,
    tie_policy: str = DEFAULT_TIE_POLICY,
    processing_method: Optional[str] = None,
) -> list[RankedSample]:
    """
    Pooled leaderboard over every REVEALED event.

    Samples in unrevealed events never appear.  A sample entered in more
    than one revealed event is pooled once, under the first such event.
    """
    pooled: list[CoffeeSample] = []
    source_event: dict[str, str] = {}
    for event in snapshot.events:
        if not event.is_results_revealed:
            continue
        for sample in snapshot.samples_for_event(event.id):
            if sample.id in source_event:
                continue
            if processing_method is not None and sample.processing_method != processing_method:
                continue
            source_event[sample.id] = event.id
            pooled.append(sample)

    return [
        RankedSample(rank=r.rank, sample=r.sample, score=r.score, event_id=source_event[r.sample.id])
        for r in rank_samples(pooled, tie_policy=tie_policy)
    ]


def rank_of(ranked: Iterable[RankedSample], sample_id: str) -> Optional[int]:
    for entry in ranked:
        if entry.sample.id == sample_id:
            return entry.rank
    return None
