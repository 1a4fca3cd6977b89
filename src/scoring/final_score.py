"""
Final score resolution for cupping score sheets.

    final = fragrance + flavor + aftertaste + acidity + body + balance
          + uniformity + clean_cup + sweetness + overall
          - 2 * taints - 4 * faults

The same formula produces a sheet's score and the headline score the head
judge starts from.  ``CuppingScore.final_score`` derives the value on every
access, so every edit made through this module yields a sheet whose final
score matches its current inputs.
"""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Mapping, Optional

from config.cupping_params import DEFAULT_DESCRIPTOR_INTENSITY, FAULT_PENALTY, TAINT_PENALTY

from ..models.errors import ScoreSheetLockedError
from ..models.records import CuppingEvent, CuppingScore, Descriptor, ScoreSheet
from .config import (
    SCORE_ATTRIBUTES,
    STATUS_DRAFT,
    STATUS_FINALIZED,
    STATUS_NOT_STARTED,
    STATUS_SUBMITTED,
)


def calculate_final_score(values: Mapping[str, float]) -> float:
    """
    Apply the final score formula to a mapping of attribute and defect values.

    Missing defect counts are treated as 0; missing attributes raise.

    Args:
        values: Mapping with the ten attribute keys plus optional
                ``taints`` / ``faults``.

    Returns:
        Attribute total minus the defect deduction.
    """
    missing = [name for name in SCORE_ATTRIBUTES if name not in values]
    if missing:
        raise ValueError(f"Missing score attributes: {missing}")
    attribute_total = sum(float(values[name]) for name in SCORE_ATTRIBUTES)
    defect_total = TAINT_PENALTY * int(values.get("taints", 0)) + FAULT_PENALTY * int(values.get("faults", 0))
    return attribute_total - defect_total


def resolve_final_score(score: CuppingScore) -> float:
    """Recompute a CuppingScore's final score from its current inputs."""
    return calculate_final_score(score.as_dict())


# ---------------------------------------------------------------------------
# Sheet lifecycle
# ---------------------------------------------------------------------------

def new_score_sheet(
    grader_id: str,
    sample_id: str,
    event_id: str,
    sheet_id: Optional[str] = None,
) -> ScoreSheet:
    """A draft sheet at the fixed baseline (BASELINE_FINAL_SCORE)."""
    return ScoreSheet(
        id=sheet_id or f"scoresheet-{uuid.uuid4().hex[:12]}",
        grader_id=grader_id,
        sample_id=sample_id,
        event_id=event_id,
        scores=CuppingScore.baseline(),
    )


def _ensure_draft(sheet: ScoreSheet) -> None:
    if sheet.is_submitted:
        raise ScoreSheetLockedError(sheet.id)


def apply_score_change(sheet: ScoreSheet, **changes) -> ScoreSheet:
    """
    Return a copy of a draft sheet with attribute/defect ``changes`` applied.

    Raises:
        ScoreSheetLockedError: The sheet is already submitted.
        ValueError: Unknown field or out-of-range value.
    """
    _ensure_draft(sheet)
    return replace(sheet, scores=sheet.scores.with_updates(**changes))


def toggle_descriptor(sheet: ScoreSheet, name: str) -> ScoreSheet:
    """Add ``name`` at the default intensity, or remove it if present."""
    _ensure_draft(sheet)
    if any(d.name == name for d in sheet.descriptors):
        descriptors = tuple(d for d in sheet.descriptors if d.name != name)
    else:
        descriptors = sheet.descriptors + (Descriptor(name, DEFAULT_DESCRIPTOR_INTENSITY),)
    return replace(sheet, descriptors=descriptors)


def set_descriptor_intensity(sheet: ScoreSheet, name: str, intensity: int) -> ScoreSheet:
    _ensure_draft(sheet)
    if not any(d.name == name for d in sheet.descriptors):
        raise ValueError(f"Descriptor {name!r} is not on sheet {sheet.id!r}")
    descriptors = tuple(
        Descriptor(d.name, intensity) if d.name == name else d for d in sheet.descriptors
    )
    return replace(sheet, descriptors=descriptors)


def update_notes(sheet: ScoreSheet, notes: str) -> ScoreSheet:
    _ensure_draft(sheet)
    return replace(sheet, notes=notes)


def submit(sheet: ScoreSheet) -> ScoreSheet:
    """Transition draft → submitted.  Happens exactly once per sheet."""
    _ensure_draft(sheet)
    return replace(sheet, is_submitted=True)


def sample_status(sheet: Optional[ScoreSheet], event: CuppingEvent) -> str:
    """
    Grader-queue status of one sample.

    Args:
        sheet: The grader's stored sheet for the sample, or None if the
               grader never opened it.
        event: The event the sample is entered in.

    Returns:
        "Finalized" once results are revealed, otherwise "Submitted",
        "Draft", or "Not Started".
    """
    if event.is_results_revealed:
        return STATUS_FINALIZED
    if sheet is None:
        return STATUS_NOT_STARTED
    if sheet.is_submitted:
        return STATUS_SUBMITTED
    return STATUS_DRAFT
