"""
src/scoring: Score-sheet scoring, aggregation, and adjudication.

Module layout
-------------
config.py        - Attribute lists, variance tiers, grade bands, statuses
statistics.py    - Mean / population stdDev / range, percentile rank,
                   variance and deviation tiers
final_score.py   - Final score formula, baseline sheet, draft edits, submit,
                   grader-queue status
aggregation.py   - Per-sample attribute × grader comparison, heatmap cells,
                   descriptor frequency
adjudication.py  - Grade bands, consensus proposal, finalization,
                   reveal-gated final score

Public interface
----------------
    calculate_stats(scores)
    percentile_rank(value, population)
    classify_variance(std_dev) / classify_deviation(score, average)
    calculate_final_score(values) / resolve_final_score(score)
    aggregate_score_sheets(sheets) / comparison_matrix(aggregate)
    propose_adjudication(sample, sheets) / finalize_sample(sample, ...)
    revealed_final_score(sample, event)
"""

from .adjudication import (
    AdjudicationProposal,
    finalize_sample,
    grade_from_score,
    propose_adjudication,
    requires_justification,
    revealed_final_score,
)
from .aggregation import (
    AttributeRow,
    SampleAggregate,
    aggregate_score_sheets,
    comparison_matrix,
    descriptor_frequency,
    descriptor_profile,
    heatmap_cells,
)
from .final_score import (
    apply_score_change,
    calculate_final_score,
    new_score_sheet,
    resolve_final_score,
    sample_status,
    submit,
)
from .statistics import (
    Deviation,
    ScoreStats,
    calculate_stats,
    classify_deviation,
    classify_variance,
    percentile_rank,
)

__all__ = [
    # Statistics
    "ScoreStats",
    "Deviation",
    "calculate_stats",
    "percentile_rank",
    "classify_variance",
    "classify_deviation",
    # Final score
    "calculate_final_score",
    "resolve_final_score",
    "new_score_sheet",
    "apply_score_change",
    "submit",
    "sample_status",
    # Aggregation
    "AttributeRow",
    "SampleAggregate",
    "aggregate_score_sheets",
    "comparison_matrix",
    "heatmap_cells",
    "descriptor_frequency",
    "descriptor_profile",
    # Adjudication
    "AdjudicationProposal",
    "grade_from_score",
    "propose_adjudication",
    "requires_justification",
    "finalize_sample",
    "revealed_final_score",
]
