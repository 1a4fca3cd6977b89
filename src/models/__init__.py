"""
src/models: Records, adjudication sum type, and engine errors.

The snapshot store lives in ``src.models.snapshot`` and the demo data set in
``src.models.seed``; both are imported explicitly by callers.
"""

from .errors import (
    AdjudicationLockedError,
    BlindCodeExhaustedError,
    CuppingEngineError,
    DuplicateScoreSheetError,
    InsufficientScoresError,
    ResultsNotRevealedError,
    ScoreSheetLockedError,
    UnknownRecordError,
)
from .records import (
    UNADJUDICATED,
    Adjudicated,
    Adjudication,
    CoffeeSample,
    CuppingEvent,
    CuppingScore,
    Descriptor,
    Role,
    ScoreSheet,
    Unadjudicated,
    User,
    is_adjudicated,
)

__all__ = [
    # Records
    "Role",
    "User",
    "Descriptor",
    "CuppingScore",
    "ScoreSheet",
    "Adjudication",
    "Adjudicated",
    "Unadjudicated",
    "UNADJUDICATED",
    "is_adjudicated",
    "CoffeeSample",
    "CuppingEvent",
    # Errors
    "CuppingEngineError",
    "ResultsNotRevealedError",
    "InsufficientScoresError",
    "AdjudicationLockedError",
    "ScoreSheetLockedError",
    "DuplicateScoreSheetError",
    "BlindCodeExhaustedError",
    "UnknownRecordError",
]
