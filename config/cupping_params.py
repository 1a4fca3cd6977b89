"""
Cupping form parameters, adjudication thresholds, and badge rules.

This is the AUTHORITATIVE source for all scoring constants.
src/scoring/config.py and src/results/config.py import from here; do not
maintain parallel copies.

Notes:
- The ten attributes follow the order of the cupping form.  Reports, the
  comparison matrix and the seed data all iterate in this order.
- The baseline sheet is derived with the final-score formula (72 points);
  resuming an untouched sheet must reproduce exactly these values.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Cupping form attributes
# ---------------------------------------------------------------------------

SCORE_ATTRIBUTES: tuple[str, ...] = (
    "fragrance",
    "flavor",
    "aftertaste",
    "acidity",
    "body",
    "balance",
    "uniformity",
    "clean_cup",
    "sweetness",
    "overall",
)

DEFECT_FIELDS: tuple[str, ...] = ("taints", "faults")

ATTRIBUTE_MIN: float = 0.0
ATTRIBUTE_MAX: float = 10.0

# Points deducted per cup
TAINT_PENALTY: int = 2
FAULT_PENALTY: int = 4

# ---------------------------------------------------------------------------
# Baseline for a freshly opened score sheet
# ---------------------------------------------------------------------------

BASELINE_SCORES: dict[str, float] = {
    "fragrance":  6,
    "flavor":     6,
    "aftertaste": 6,
    "acidity":    6,
    "body":       6,
    "balance":    6,
    "uniformity": 10,
    "clean_cup":  10,
    "sweetness":  10,
    "overall":    6,
    "taints":     0,
    "faults":     0,
}
BASELINE_FINAL_SCORE: float = (
    sum(BASELINE_SCORES[name] for name in SCORE_ATTRIBUTES)
    - TAINT_PENALTY * BASELINE_SCORES["taints"]
    - FAULT_PENALTY * BASELINE_SCORES["faults"]
)

# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

DESCRIPTOR_INTENSITY_MIN: int = 1
DESCRIPTOR_INTENSITY_MAX: int = 5
DEFAULT_DESCRIPTOR_INTENSITY: int = 3
DESCRIPTOR_PROFILE_SIZE: int = 5     # top descriptors pasted into judge notes
REPORT_DESCRIPTOR_LIMIT: int = 15    # descriptor cloud on the farmer report

# ---------------------------------------------------------------------------
# Consensus heatmap (stdDev across graders)
# ---------------------------------------------------------------------------

HIGH_VARIANCE_THRESHOLD: float = 0.75
MEDIUM_VARIANCE_THRESHOLD: float = 0.4

# ---------------------------------------------------------------------------
# Grade bands: first band whose floor the score reaches
# ---------------------------------------------------------------------------

GRADE_BANDS: tuple[tuple[float, str], ...] = (
    (90, "Outstanding"),
    (85, "Excellent"),
    (80, "Specialty"),
)
BELOW_SPECIALTY: str = "Below Specialty"
GRADE_LEVELS: tuple[str, ...] = tuple(g for _, g in GRADE_BANDS) + (BELOW_SPECIALTY,)

# Adjusting the consensus score by more than this requires a justification
JUSTIFICATION_TOLERANCE: float = 0.01

# ---------------------------------------------------------------------------
# Achievements
# ---------------------------------------------------------------------------

OUTSTANDING_CUP_SCORE: float = 90
CLUB_85_SCORE: float = 85
TOP_3_RANK: int = 3
TOP_10_RANK: int = 10
MOST_IMPROVED_DELTA: float = 2.0

# ---------------------------------------------------------------------------
# Farmer feedback report
# ---------------------------------------------------------------------------

REPORT_HIGH_LEVEL: float = 8.25
REPORT_MID_LEVEL: float = 7.25
ON_PAR_PERCENTILE_BAND: tuple[int, int] = (40, 60)   # inclusive

# ---------------------------------------------------------------------------
# Blind codes
# ---------------------------------------------------------------------------

BLIND_CODE_LETTERS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BLIND_CODE_DIGITS: str = "0123456789"
PENDING_BLIND_CODE: str = "PENDING"
BLIND_CODE_SPACE: int = (len(BLIND_CODE_LETTERS) * len(BLIND_CODE_DIGITS)) ** 2  # 67,600
