"""
Results-layer configuration: tie policies, badge thresholds, report levels,
and leaderboard distribution bins.

Thresholds are re-exported from config/cupping_params.py; do NOT repeat them
inline in the ranking or achievement modules.
"""

from config.cupping_params import (  # noqa: F401
    CLUB_85_SCORE,
    MOST_IMPROVED_DELTA,
    ON_PAR_PERCENTILE_BAND,
    OUTSTANDING_CUP_SCORE,
    REPORT_DESCRIPTOR_LIMIT,
    REPORT_HIGH_LEVEL,
    REPORT_MID_LEVEL,
    SCORE_ATTRIBUTES,
    TOP_3_RANK,
    TOP_10_RANK,
)

# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

# "sequential":  1, 2, 3, ... even for equal scores; equal scores keep entry
#                order (position in the event's sample list).
# "competition": equal scores share a rank and the next rank skips (1, 1, 3).
TIE_SEQUENTIAL = "sequential"
TIE_COMPETITION = "competition"
TIE_POLICIES: tuple[str, ...] = (TIE_SEQUENTIAL, TIE_COMPETITION)
DEFAULT_TIE_POLICY = TIE_SEQUENTIAL

ALL_EVENTS = "all"

# Certificate wording for the podium; everything else is "<ordinal> Place"
PLACEMENT_TITLES: dict[int, str] = {
    1: "First Place Winner",
    2: "Second Place Finisher",
    3: "Third Place Finisher",
}

# ---------------------------------------------------------------------------
# Score distribution (organizer report)
# ---------------------------------------------------------------------------

# Left-closed bins over adjudicated scores: [0, 82), [82, 84), ... [90, inf)
DISTRIBUTION_EDGES: list[float] = [0, 82, 84, 86, 88, 90, float("inf")]
DISTRIBUTION_LABELS: list[str] = ["< 82", "82-84", "84-86", "86-88", "88-90", "90+"]

# ---------------------------------------------------------------------------
# Farmer feedback report
# ---------------------------------------------------------------------------

LEVEL_HIGH = "high"
LEVEL_MID = "mid"
LEVEL_LOW = "low"

TREND_UP = "up"
TREND_DOWN = "down"
TREND_ON_PAR = "on_par"

# (summary, detail) per attribute and level, shown beside each attribute in
# the farmer report.
FEEDBACK_TEXT: dict[str, dict[str, tuple[str, str]]] = {
    "fragrance": {
        LEVEL_HIGH: ("Exceptional Aroma", "A very pleasing and complex smell, both from the dry grounds and the wet crust."),
        LEVEL_MID: ("Pleasant Aroma", "A clean and noticeable aroma, a positive sign of the coffee's quality."),
        LEVEL_LOW: ("Needs Improvement", "A faint, dull, or slightly off-putting aroma. Consider roast profile or storage."),
    },
    "flavor": {
        LEVEL_HIGH: ("Distinct & Complex Flavor", "A rich and multi-layered taste profile with a clear character."),
        LEVEL_MID: ("Good Flavor Profile", "A pleasant and recognizable flavor forming the core of the coffee's character."),
        LEVEL_LOW: ("Lacks Distinctiveness", "The flavor may be simple or carry minor off-notes. Other processing methods could enhance it."),
    },
    "aftertaste": {
        LEVEL_HIGH: ("Long & Pleasant Finish", "The positive flavor impression remains long after tasting."),
        LEVEL_MID: ("Clean Finish", "A clean aftertaste that leaves no unpleasant impression."),
        LEVEL_LOW: ("Short or Unpleasant Finish", "The finish may be fleeting, bitter, or astringent. Often related to roasting or brewing."),
    },
    "acidity": {
        LEVEL_HIGH: ("Vibrant & Bright", "A lively, sparkling quality often described as juicy."),
        LEVEL_MID: ("Balanced Acidity", "A pleasant brightness well integrated with the other attributes."),
        LEVEL_LOW: ("Dull or Astringent", "Low acidity can taste flat; harsh or sour acidity is a negative quality."),
    },
    "body": {
        LEVEL_HIGH: ("Rich & Full-Bodied", "A pleasant sense of weight and texture in the mouth."),
        LEVEL_MID: ("Good Mouthfeel", "A pleasant texture that is neither too thin nor too heavy."),
        LEVEL_LOW: ("Thin or Watery", "The body may be weak or lack presence. Fermentation can affect this."),
    },
    "balance": {
        LEVEL_HIGH: ("Exceptionally Harmonious", "All aspects of the coffee work together and nothing overpowers."),
        LEVEL_MID: ("Well-Balanced", "The attributes are in good harmony for a complete experience."),
        LEVEL_LOW: ("Unbalanced", "One attribute may dominate the others, such as overpowering acidity."),
    },
    "uniformity": {
        LEVEL_HIGH: ("Very Consistent", "All cups tasted were identical."),
        LEVEL_MID: ("Consistent", "No significant variation was found between cups."),
        LEVEL_LOW: ("Inconsistent", "Cups varied in flavor, pointing to sorting or processing issues."),
    },
    "clean_cup": {
        LEVEL_HIGH: ("Very Clean Profile", "Free of any negative or interfering impression from first taste to finish."),
        LEVEL_MID: ("Clean", "Free of noticeable defects."),
        LEVEL_LOW: ("Minor Defects", "Slight off-flavors or aromas were detected."),
    },
    "sweetness": {
        LEVEL_HIGH: ("Rich & Obvious Sweetness", "A full sweetness from the natural sugars of ripe cherries."),
        LEVEL_MID: ("Good Sweetness", "A pleasant sweetness contributes positively to the flavor."),
        LEVEL_LOW: ("Lacks Sweetness", "The coffee may taste flat, sour, or green."),
    },
    "overall": {
        LEVEL_HIGH: ("Outstanding & Memorable", "The cuppers found the coffee exceptional."),
        LEVEL_MID: ("Very Good Coffee", "A solid specialty coffee the cuppers enjoyed."),
        LEVEL_LOW: ("Good but Unexciting", "A decent coffee without a distinctive character."),
    },
}
