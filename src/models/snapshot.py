"""
Immutable application snapshot: users, events, samples, and score sheets.

Each scoring call receives a consistent snapshot.  Mutations never edit a
snapshot in place; they return a new one with the affected collection
rebuilt, so a computation holding the old snapshot is unaffected.

Store-level invariants enforced here:

- At most one ScoreSheet per (grader, sample, event) triple.
- A submitted sheet is immutable; submit happens exactly once.
- ``is_results_revealed`` only ever goes False → True.
- Adjudication is written once per sample.
- Blind codes are unique among samples at assignment time; farmer
  registrations hold ``PENDING`` until an explicit assignment.
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, replace
from typing import Iterable, Mapping, Optional

from config.cupping_params import PENDING_BLIND_CODE

from ..registry.blind_codes import generate_blind_code, generate_blind_codes
from ..scoring.adjudication import finalize_sample
from ..scoring.final_score import new_score_sheet, submit
from .errors import DuplicateScoreSheetError, ScoreSheetLockedError, UnknownRecordError
from .records import CoffeeSample, CuppingEvent, ScoreSheet, User

SAMPLE_DETAIL_FIELDS: tuple[str, ...] = (
    "farm_name", "region", "altitude", "processing_method", "variety", "moisture",
)
REQUIRED_SAMPLE_FIELDS: tuple[str, ...] = ("farm_name", "region", "processing_method", "variety")


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def _check_sample_details(details: Mapping, required: Iterable[str] = REQUIRED_SAMPLE_FIELDS) -> None:
    missing = [k for k in required if not details.get(k)]
    if missing:
        raise ValueError(f"Sample registration missing required fields: {missing}")


def _replace_by_id(records: tuple, updated) -> tuple:
    return tuple(updated if r.id == updated.id else r for r in records)


@dataclass(frozen=True)
class CuppingSnapshot:
    users: tuple[User, ...] = ()
    events: tuple[CuppingEvent, ...] = ()
    samples: tuple[CoffeeSample, ...] = ()
    score_sheets: tuple[ScoreSheet, ...] = ()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_user(self, user_id: str) -> User:
        for user in self.users:
            if user.id == user_id:
                return user
        raise UnknownRecordError("user", user_id)

    def get_event(self, event_id: str) -> CuppingEvent:
        for event in self.events:
            if event.id == event_id:
                return event
        raise UnknownRecordError("event", event_id)

    def get_sample(self, sample_id: str) -> CoffeeSample:
        for sample in self.samples:
            if sample.id == sample_id:
                return sample
        raise UnknownRecordError("sample", sample_id)

    def get_score_sheet(self, sheet_id: str) -> ScoreSheet:
        for sheet in self.score_sheets:
            if sheet.id == sheet_id:
                return sheet
        raise UnknownRecordError("score sheet", sheet_id)

    def find_score_sheet(
        self,
        grader_id: str,
        sample_id: str,
        event_id: str,
    ) -> Optional[ScoreSheet]:
        key = (grader_id, sample_id, event_id)
        for sheet in self.score_sheets:
            if sheet.key == key:
                return sheet
        return None

    def samples_for_event(self, event_id: str) -> list[CoffeeSample]:
        """Samples entered in the event, in entry order."""
        event = self.get_event(event_id)
        by_id = {sample.id: sample for sample in self.samples}
        return [by_id[sid] for sid in event.sample_ids if sid in by_id]

    def sheets_for(
        self,
        sample_id: str,
        event_id: str,
        submitted_only: bool = True,
    ) -> list[ScoreSheet]:
        return [
            sheet for sheet in self.score_sheets
            if sheet.sample_id == sample_id
            and sheet.event_id == event_id
            and (sheet.is_submitted or not submitted_only)
        ]

    def event_for_sample(self, sample_id: str) -> Optional[CuppingEvent]:
        """First event the sample is entered in, if any."""
        for event in self.events:
            if event.includes(sample_id):
                return event
        return None

    def events_for_grader(self, grader_id: str) -> list[CuppingEvent]:
        return [e for e in self.events if grader_id in e.assigned_grader_ids]

    def samples_for_farmer(self, farmer_id: str) -> list[CoffeeSample]:
        return [s for s in self.samples if s.farmer_id == farmer_id]

    def assigned_blind_codes(self) -> set[str]:
        return {s.blind_code for s in self.samples if not s.has_pending_blind_code}

    # ------------------------------------------------------------------
    # Score sheets
    # ------------------------------------------------------------------

    def get_or_create_score_sheet(
        self,
        grader_id: str,
        sample_id: str,
        event_id: str,
    ) -> ScoreSheet:
        """
        The grader's sheet for the sample, or a fresh baseline draft.

        The fresh draft is not stored; pass it to :meth:`save_score_sheet`
        once the grader edits it.
        """
        existing = self.find_score_sheet(grader_id, sample_id, event_id)
        if existing is not None:
            return existing
        return new_score_sheet(grader_id, sample_id, event_id)

    def save_score_sheet(self, sheet: ScoreSheet) -> "CuppingSnapshot":
        """
        Create-or-update keyed by the (grader, sample, event) triple.

        Raises:
            ScoreSheetLockedError: The stored sheet is already submitted.
            DuplicateScoreSheetError: A different sheet already owns the triple.
            ValueError: The sheet arrives already submitted, or its id belongs
                to a sheet for another triple.
        """
        if sheet.is_submitted:
            raise ValueError(
                f"Score sheet {sheet.id!r} is already submitted; save the draft "
                f"and use submit_score_sheet"
            )
        current = self.find_score_sheet(*sheet.key)
        if current is None:
            owner = next((s for s in self.score_sheets if s.id == sheet.id), None)
            if owner is not None:
                raise ValueError(
                    f"Score sheet id {sheet.id!r} already belongs to "
                    f"(grader, sample, event) {owner.key}"
                )
            return replace(self, score_sheets=self.score_sheets + (sheet,))
        if current.id != sheet.id:
            raise DuplicateScoreSheetError(sheet.key, current.id)
        if current.is_submitted:
            raise ScoreSheetLockedError(current.id)
        return replace(self, score_sheets=_replace_by_id(self.score_sheets, sheet))

    def submit_score_sheet(self, sheet_id: str) -> "CuppingSnapshot":
        sheet = self.get_score_sheet(sheet_id)
        return replace(self, score_sheets=_replace_by_id(self.score_sheets, submit(sheet)))

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def create_event(
        self,
        name: str,
        date: str,
        samples: Iterable[Mapping],
        assigned_grader_ids: Iterable[str] = (),
        assigned_head_judge_ids: Iterable[str] = (),
        rng: Optional[random.Random] = None,
        **details,
    ) -> tuple["CuppingSnapshot", CuppingEvent]:
        """
        Create an event together with its organizer-entered samples.

        Every sample gets a freshly generated unique blind code.

        Args:
            name: Event name.
            date: ISO event date.
            samples: Mappings with ``farmer_id`` plus the sample detail fields.
            assigned_grader_ids: Q graders scoring the event.
            assigned_head_judge_ids: Head judges adjudicating the event.
            rng: Random source for blind codes.
            **details: Extra CuppingEvent fields (description, tags, ...).

        Returns:
            Tuple of (new snapshot, created event).
        """
        sample_entries = list(samples)
        for entry in sample_entries:
            _check_sample_details(entry, ("farmer_id",) + REQUIRED_SAMPLE_FIELDS)
        codes = generate_blind_codes(len(sample_entries), self.assigned_blind_codes(), rng)

        new_samples = tuple(
            CoffeeSample(
                id=_new_id("sample"),
                farmer_id=entry["farmer_id"],
                blind_code=code,
                **{k: entry[k] for k in SAMPLE_DETAIL_FIELDS if k in entry},
            )
            for entry, code in zip(sample_entries, codes)
        )
        if "processing_methods" in details:
            details["processing_methods"] = tuple(details["processing_methods"])
        if "tags" in details:
            details["tags"] = tuple(details["tags"])
        event = CuppingEvent(
            id=_new_id("event"),
            name=name,
            date=date,
            assigned_grader_ids=tuple(dict.fromkeys(assigned_grader_ids)),
            assigned_head_judge_ids=tuple(dict.fromkeys(assigned_head_judge_ids)),
            sample_ids=tuple(s.id for s in new_samples),
            is_results_revealed=False,
            **details,
        )
        snapshot = replace(
            self,
            events=self.events + (event,),
            samples=self.samples + new_samples,
        )
        return snapshot, event

    def reveal_results(self, event_id: str) -> "CuppingSnapshot":
        """One-way gate; revealing an already revealed event is a no-op."""
        event = self.get_event(event_id)
        if event.is_results_revealed:
            return self
        return replace(self, events=_replace_by_id(self.events, replace(event, is_results_revealed=True)))

    def assign_graders(
        self,
        event_id: str,
        grader_ids: Iterable[str] = (),
        head_judge_ids: Iterable[str] = (),
    ) -> "CuppingSnapshot":
        """Add graders / head judges to an event, keeping existing assignments."""
        event = self.get_event(event_id)
        updated = replace(
            event,
            assigned_grader_ids=tuple(dict.fromkeys(event.assigned_grader_ids + tuple(grader_ids))),
            assigned_head_judge_ids=tuple(
                dict.fromkeys(event.assigned_head_judge_ids + tuple(head_judge_ids))
            ),
        )
        return replace(self, events=_replace_by_id(self.events, updated))

    # ------------------------------------------------------------------
    # Samples
    # ------------------------------------------------------------------

    def register_sample(
        self,
        event_id: str,
        farmer_id: str,
        details: Mapping,
    ) -> tuple["CuppingSnapshot", CoffeeSample]:
        """
        Farmer self-registration: the sample holds ``PENDING`` until an
        organizer calls :meth:`assign_blind_code`.
        """
        event = self.get_event(event_id)
        _check_sample_details(details)
        if event.processing_methods and details["processing_method"] not in event.processing_methods:
            raise ValueError(
                f"Processing method {details['processing_method']!r} not accepted by "
                f"event {event.id!r}; expected one of {event.processing_methods}"
            )

        sample = CoffeeSample(
            id=_new_id("sample"),
            farmer_id=farmer_id,
            blind_code=PENDING_BLIND_CODE,
            farm_name=details["farm_name"],
            region=details["region"],
            altitude=details.get("altitude", 0),
            processing_method=details["processing_method"],
            variety=details["variety"],
            moisture=details.get("moisture"),
        )
        updated_event = replace(event, sample_ids=event.sample_ids + (sample.id,))
        snapshot = replace(
            self,
            samples=self.samples + (sample,),
            events=_replace_by_id(self.events, updated_event),
        )
        return snapshot, sample

    def assign_blind_code(
        self,
        sample_id: str,
        rng: Optional[random.Random] = None,
    ) -> "CuppingSnapshot":
        """
        Explicit admin action replacing a ``PENDING`` code with a unique one.

        Raises:
            ValueError: The sample already has a blind code.
            BlindCodeExhaustedError: No codes are left.
        """
        sample = self.get_sample(sample_id)
        if not sample.has_pending_blind_code:
            raise ValueError(f"Sample {sample_id!r} already has blind code {sample.blind_code!r}")
        code = generate_blind_code(self.assigned_blind_codes(), rng)
        return replace(self, samples=_replace_by_id(self.samples, replace(sample, blind_code=code)))

    def finalize_adjudication(
        self,
        sample_id: str,
        score: float,
        grade: str,
        notes: str = "",
        justification: str = "",
    ) -> "CuppingSnapshot":
        """Write the head judge's result onto the sample (once only)."""
        sample = self.get_sample(sample_id)
        finalized = finalize_sample(sample, score, grade, notes=notes, justification=justification)
        return replace(self, samples=_replace_by_id(self.samples, finalized))

    def flag_for_discussion(self, sample_id: str, flagged: bool = True) -> "CuppingSnapshot":
        sample = self.get_sample(sample_id)
        return replace(
            self,
            samples=_replace_by_id(self.samples, replace(sample, flagged_for_discussion=flagged)),
        )
