"""
Distinguished precondition errors raised by the scoring engine.

Insufficient data (empty score lists, no submitted sheets) is NOT an error
anywhere in the engine; callers get zero/empty results instead.  The classes
below cover a misbehaving caller, where returning a zero would hide a
business-critical bug (for example a score shown before the reveal).
"""

from __future__ import annotations


class CuppingEngineError(Exception):
    """Base class for every engine precondition failure."""


class ResultsNotRevealedError(CuppingEngineError):
    """Ranking or final score requested for an event that is not revealed."""

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(
            f"Results for event {event_id!r} have not been revealed; "
            "rankings and final scores are unavailable."
        )


class InsufficientScoresError(CuppingEngineError):
    """A consensus score was requested for a sample with no submitted sheets."""

    def __init__(self, sample_id: str):
        self.sample_id = sample_id
        super().__init__(f"Sample {sample_id!r} has no submitted score sheets.")


class AdjudicationLockedError(CuppingEngineError):
    """The head judge already finalized this sample."""

    def __init__(self, sample_id: str):
        self.sample_id = sample_id
        super().__init__(f"Sample {sample_id!r} is already adjudicated.")


class ScoreSheetLockedError(CuppingEngineError):
    """A submitted score sheet cannot be edited or submitted again."""

    def __init__(self, sheet_id: str):
        self.sheet_id = sheet_id
        super().__init__(f"Score sheet {sheet_id!r} is already submitted.")


class DuplicateScoreSheetError(CuppingEngineError):
    """A second score sheet was offered for an existing (grader, sample, event)."""

    def __init__(self, key: tuple[str, str, str], existing_id: str):
        self.key = key
        self.existing_id = existing_id
        grader_id, sample_id, event_id = key
        super().__init__(
            f"Grader {grader_id!r} already has score sheet {existing_id!r} "
            f"for sample {sample_id!r} in event {event_id!r}."
        )


class BlindCodeExhaustedError(CuppingEngineError):
    """Every possible blind code is already assigned."""


class UnknownRecordError(CuppingEngineError, KeyError):
    """Lookup of an id that is not in the snapshot."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Unknown {kind}: {record_id!r}")

    def __str__(self) -> str:
        return self.args[0]
