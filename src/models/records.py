"""
Value-semantics records for users, events, samples, and score sheets.

Every record is a frozen dataclass.  Edits go through ``with_updates`` /
``dataclasses.replace`` and yield a new record, so a snapshot handed to the
scoring functions can never change underneath them.

Adjudication is modelled as a sum type (``Unadjudicated | Adjudicated``)
rather than a bag of optional fields, so a sample is always in exactly one
of the two states.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from config.cupping_params import (
    ATTRIBUTE_MAX,
    ATTRIBUTE_MIN,
    BASELINE_SCORES,
    DEFECT_FIELDS,
    DESCRIPTOR_INTENSITY_MAX,
    DESCRIPTOR_INTENSITY_MIN,
    FAULT_PENALTY,
    PENDING_BLIND_CODE,
    SCORE_ATTRIBUTES,
    TAINT_PENALTY,
)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class Role(str, Enum):
    ADMIN = "Administrator"
    Q_GRADER = "Q Grader"
    HEAD_JUDGE = "Head Judge"
    FARMER = "Farmer"


USER_STATUSES: tuple[str, ...] = ("Active", "Pending Invitation", "Deactivated")


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    roles: tuple[Role, ...]
    status: str = "Active"

    def __post_init__(self):
        if self.status not in USER_STATUSES:
            raise ValueError(f"Unknown user status: {self.status!r}")

    def has_role(self, role: Role) -> bool:
        return role in self.roles


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Descriptor:
    """A named flavour/aroma note with an intensity rating (1–5)."""

    name: str
    intensity: int

    def __post_init__(self):
        if not DESCRIPTOR_INTENSITY_MIN <= self.intensity <= DESCRIPTOR_INTENSITY_MAX:
            raise ValueError(
                f"Descriptor {self.name!r} intensity {self.intensity} outside "
                f"{DESCRIPTOR_INTENSITY_MIN}-{DESCRIPTOR_INTENSITY_MAX}"
            )


@dataclass(frozen=True)
class CuppingScore:
    """
    One grader's numeric assessment of one sample.

    ``final_score`` is derived on every access from the ten attributes and
    the two defect counts; it has no storage of its own and therefore can
    never disagree with its inputs.
    """

    fragrance: float
    flavor: float
    aftertaste: float
    acidity: float
    body: float
    balance: float
    uniformity: float
    clean_cup: float
    sweetness: float
    overall: float
    taints: int = 0
    faults: int = 0

    def __post_init__(self):
        for name in SCORE_ATTRIBUTES:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not ATTRIBUTE_MIN <= value <= ATTRIBUTE_MAX:
                raise ValueError(
                    f"{name}={value} outside [{ATTRIBUTE_MIN:g}, {ATTRIBUTE_MAX:g}]"
                )
        for name in DEFECT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

    @classmethod
    def baseline(cls) -> "CuppingScore":
        """Starting values for a sheet that has never been scored (72 points)."""
        return cls(**BASELINE_SCORES)

    @property
    def attribute_total(self) -> float:
        return sum(getattr(self, name) for name in SCORE_ATTRIBUTES)

    @property
    def defect_total(self) -> int:
        return TAINT_PENALTY * self.taints + FAULT_PENALTY * self.faults

    @property
    def final_score(self) -> float:
        return self.attribute_total - self.defect_total

    def attribute(self, name: str) -> float:
        if name not in SCORE_ATTRIBUTES:
            raise ValueError(f"Unknown score attribute: {name!r}")
        return getattr(self, name)

    def as_dict(self) -> dict[str, float]:
        values = {name: getattr(self, name) for name in SCORE_ATTRIBUTES + DEFECT_FIELDS}
        values["final_score"] = self.final_score
        return values

    def with_updates(self, **changes) -> "CuppingScore":
        """Return a new validated score with ``changes`` applied."""
        unknown = set(changes) - set(SCORE_ATTRIBUTES) - set(DEFECT_FIELDS)
        if unknown:
            raise ValueError(f"Unknown score fields: {sorted(unknown)}")
        return replace(self, **changes)


@dataclass(frozen=True)
class ScoreSheet:
    """Binds one CuppingScore to a (grader, sample, event) triple."""

    id: str
    grader_id: str
    sample_id: str
    event_id: str
    scores: CuppingScore = field(default_factory=CuppingScore.baseline)
    descriptors: tuple[Descriptor, ...] = ()
    notes: str = ""
    is_submitted: bool = False

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.grader_id, self.sample_id, self.event_id)

    @property
    def final_score(self) -> float:
        return self.scores.final_score


# ---------------------------------------------------------------------------
# Adjudication (sum type)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Unadjudicated:
    """The head judge has not finalized this sample yet."""


@dataclass(frozen=True)
class Adjudicated:
    """The head judge's final, authoritative result for a sample."""

    score: float
    grade: str
    notes: str = ""
    justification: str = ""


Adjudication = Union[Unadjudicated, Adjudicated]

UNADJUDICATED = Unadjudicated()


def is_adjudicated(adjudication: Adjudication) -> bool:
    return isinstance(adjudication, Adjudicated)


# ---------------------------------------------------------------------------
# Samples and events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CoffeeSample:
    id: str
    farmer_id: str
    blind_code: str
    farm_name: str
    region: str
    altitude: int
    processing_method: str
    variety: str
    moisture: Optional[float] = None
    adjudication: Adjudication = UNADJUDICATED
    flagged_for_discussion: bool = False

    @property
    def adjudicated_final_score(self) -> Optional[float]:
        if isinstance(self.adjudication, Adjudicated):
            return self.adjudication.score
        return None

    @property
    def grade_level(self) -> Optional[str]:
        if isinstance(self.adjudication, Adjudicated):
            return self.adjudication.grade
        return None

    @property
    def is_adjudicated(self) -> bool:
        return is_adjudicated(self.adjudication)

    @property
    def has_pending_blind_code(self) -> bool:
        return self.blind_code == PENDING_BLIND_CODE


@dataclass(frozen=True)
class CuppingEvent:
    id: str
    name: str
    date: str  # ISO date, e.g. "2024-08-15"
    description: str = ""
    processing_methods: tuple[str, ...] = ()
    assigned_grader_ids: tuple[str, ...] = ()
    assigned_head_judge_ids: tuple[str, ...] = ()
    sample_ids: tuple[str, ...] = ()
    is_results_revealed: bool = False
    tags: tuple[str, ...] = ()
    registration_open: bool = False

    def includes(self, sample_id: str) -> bool:
        return sample_id in self.sample_ids
