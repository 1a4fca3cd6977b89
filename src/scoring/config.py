"""
Scoring-layer configuration: attribute lists, variance tiers, grade bands.

Values are re-exported from config/cupping_params.py (the authoritative
source) so that scoring modules import from one place.
"""

from config.cupping_params import (  # noqa: F401
    BASELINE_FINAL_SCORE,
    BASELINE_SCORES,
    BELOW_SPECIALTY,
    DESCRIPTOR_PROFILE_SIZE,
    GRADE_BANDS,
    GRADE_LEVELS,
    HIGH_VARIANCE_THRESHOLD,
    JUSTIFICATION_TOLERANCE,
    MEDIUM_VARIANCE_THRESHOLD,
    SCORE_ATTRIBUTES,
)

# ---------------------------------------------------------------------------
# Heatmap labels
# ---------------------------------------------------------------------------

VARIANCE_HIGH = "high"
VARIANCE_MEDIUM = "medium"
VARIANCE_LOW = "low"

DEVIATION_POSITIVE = "positive"
DEVIATION_NEGATIVE = "negative"
DEVIATION_NONE = "none"

# ---------------------------------------------------------------------------
# Grader queue statuses
# ---------------------------------------------------------------------------

STATUS_NOT_STARTED = "Not Started"
STATUS_DRAFT = "Draft"
STATUS_SUBMITTED = "Submitted"
STATUS_FINALIZED = "Finalized"

# Display labels for the comparison matrix ("clean_cup" → "Clean Cup")
ATTRIBUTE_LABELS: dict[str, str] = {
    name: name.replace("_", " ").title() for name in SCORE_ATTRIBUTES
}
