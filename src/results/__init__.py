"""
src/results: Rankings, achievements, and feedback reports.

Module layout
-------------
config.py        - Tie policies, placement titles, distribution bins,
                   report levels and feedback text
ranking.py       - Reveal-gated leaderboards, ordinals, certificate titles
leaderboard.py   - Leaderboard DataFrame, organizer score distribution and
                   key metrics
achievements.py  - Badge kinds, farmer history, badge evaluation,
                   performance timeline
reports.py       - Per-sample farmer feedback report
runner.py        - CLI entry point (python -m src.results.runner)

Public interface
----------------
    rank_event(snapshot, event_id, tie_policy="sequential")
    rank_all_events(snapshot)
    leaderboard_frame(ranked, snapshot)
    evaluate_badges(farmer_history(snapshot, farmer_id))
    build_sample_report(snapshot, sample_id)
"""

from .achievements import (
    BadgeKind,
    EarnedBadge,
    SampleHistoryEntry,
    evaluate_badges,
    farmer_history,
    performance_timeline,
    sample_achievements,
)
from .leaderboard import key_metrics, leaderboard_frame, report_samples, score_distribution
from .ranking import (
    RankedSample,
    ordinal,
    placement_title,
    rank_all_events,
    rank_event,
    rank_of,
    rank_samples,
    rank_suffix,
)
from .reports import AttributeFeedback, SampleReport, build_sample_report

__all__ = [
    # Ranking
    "RankedSample",
    "rank_samples",
    "rank_event",
    "rank_all_events",
    "rank_of",
    "rank_suffix",
    "ordinal",
    "placement_title",
    # Leaderboard
    "leaderboard_frame",
    "report_samples",
    "score_distribution",
    "key_metrics",
    # Achievements
    "BadgeKind",
    "EarnedBadge",
    "SampleHistoryEntry",
    "farmer_history",
    "evaluate_badges",
    "performance_timeline",
    "sample_achievements",
    # Reports
    "AttributeFeedback",
    "SampleReport",
    "build_sample_report",
]
