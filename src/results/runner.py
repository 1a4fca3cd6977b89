"""
Results runner: leaderboards, organizer summaries, and farmer badges for a
snapshot.

Prints one block per revealed event (or the event given) and a badge
summary per farmer, and returns everything as a dict for programmatic use.

Usage (from project root):
    python -m src.results.runner

Or programmatically:
    from src.results.runner import run_event_results
    results = run_event_results(snapshot, event_id="event-2")
"""

from __future__ import annotations

from typing import Optional

from ..models.records import Role
from ..models.seed import demo_snapshot
from ..models.snapshot import CuppingSnapshot
from .achievements import evaluate_badges, farmer_history
from .config import DEFAULT_TIE_POLICY
from .leaderboard import key_metrics, leaderboard_frame, score_distribution
from .ranking import rank_event


def _print_leaderboard(frame) -> None:
    if frame.empty:
        print("  No adjudicated samples.")
        return
    for row in frame.itertuples(index=False):
        print(
            f"  {row.ordinal:>5}  {row.blind_code}  {row.score:6.2f}  "
            f"{row.grade:<16} {row.farm_name} ({row.processing_method})"
        )


def run_event_results(
    snapshot: CuppingSnapshot,
    event_id: Optional[str] = None,
    tie_policy: str = DEFAULT_TIE_POLICY,
) -> dict:
    """
    Rank revealed events and summarize farmer achievements.

    Args:
        snapshot: Application snapshot to report on.
        event_id: Restrict to one event.  An unrevealed event raises
            ResultsNotRevealedError; with no event_id, unrevealed events
            are skipped.
        tie_policy: "sequential" or "competition".

    Returns:
        Dict with keys ``events`` (event id → leaderboard, distribution,
        metrics) and ``farmers`` (farmer id → earned badges).
    """
    sep = "=" * 70
    print(f"\n{sep}")
    print("CUPPING RESULTS")
    print(f"{sep}\n")

    events = [snapshot.get_event(event_id)] if event_id is not None else list(snapshot.events)
    results: dict = {"events": {}, "farmers": {}}

    for event in events:
        print(f"\n{sep}")
        print(f"{event.name}  ({event.date})")
        print(sep)
        if event_id is None and not event.is_results_revealed:
            print("  Skipped: results not revealed.")
            continue

        ranked = rank_event(snapshot, event.id, tie_policy=tie_policy)
        frame = leaderboard_frame(ranked, snapshot)
        samples = [entry.sample for entry in ranked]
        metrics = key_metrics(samples)

        _print_leaderboard(frame)
        print(
            f"\n  Samples: {metrics['count']}  avg {metrics['average']:.2f}  "
            f"high {metrics['high']:.2f}  low {metrics['low']:.2f}"
        )

        results["events"][event.id] = {
            "leaderboard": frame,
            "distribution": score_distribution(samples),
            "metrics": metrics,
        }

    print(f"\n{sep}")
    print("FARMER ACHIEVEMENTS")
    print(sep)
    for user in snapshot.users:
        if not user.has_role(Role.FARMER):
            continue
        badges = evaluate_badges(farmer_history(snapshot, user.id))
        results["farmers"][user.id] = badges
        listing = ", ".join(f"{b.name} x{b.count}" for b in badges) or "none yet"
        print(f"  {user.name:<20} {listing}")

    print(f"\n{sep}")
    print(f"RESULTS COMPLETE: {len(results['events'])} event(s) ranked")
    print(sep)

    return results


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    run_event_results(demo_snapshot())
