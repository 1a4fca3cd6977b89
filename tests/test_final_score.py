"""
Unit tests for src/scoring/final_score.py and the CuppingScore record.

Covers:
- Final score formula: attribute sum minus 2 × taints and 4 × faults.
- Baseline sheet: fixed starting values; the stored total matches the formula.
- Draft edits (scores, descriptors, notes) recompute the final score and
  never touch the original sheet; submitted sheets are locked.
- sample_status: grader-queue status transitions.
"""

from __future__ import annotations

import pytest

from config.cupping_params import BASELINE_FINAL_SCORE, BASELINE_SCORES
from src.models.errors import ScoreSheetLockedError
from src.models.records import CuppingScore
from src.scoring.final_score import (
    apply_score_change,
    calculate_final_score,
    new_score_sheet,
    resolve_final_score,
    sample_status,
    set_descriptor_intensity,
    submit,
    toggle_descriptor,
    update_notes,
)

from .conftest import make_event, make_score, make_sheet


# ---------------------------------------------------------------------------
# Class: formula
# ---------------------------------------------------------------------------

class TestFinalScoreFormula:

    def test_all_eights_no_defects(self):
        assert make_score(8.0).final_score == pytest.approx(80.0)

    def test_one_taint_deducts_two(self):
        assert make_score(8.0, taints=1).final_score == pytest.approx(78.0)

    def test_one_fault_deducts_four(self):
        assert make_score(8.0, faults=1).final_score == pytest.approx(76.0)

    def test_taints_and_faults_combine(self):
        assert make_score(9.0, taints=2, faults=1).final_score == pytest.approx(90 - 4 - 4)

    def test_mapping_form_matches_record(self):
        score = make_score(8.5, taints=1, flavor=9.0)
        assert calculate_final_score(score.as_dict()) == pytest.approx(score.final_score)
        assert resolve_final_score(score) == pytest.approx(score.final_score)

    def test_mapping_defects_default_to_zero(self):
        values = {name: 7.0 for name in make_score().as_dict() if name not in ("taints", "faults", "final_score")}
        assert calculate_final_score(values) == pytest.approx(70.0)

    def test_mapping_missing_attribute_raises(self):
        with pytest.raises(ValueError, match="Missing score attributes"):
            calculate_final_score({"fragrance": 8.0})

    def test_as_dict_carries_final_score(self):
        assert make_score(8.0).as_dict()["final_score"] == pytest.approx(80.0)


class TestBaseline:

    def test_baseline_total_follows_formula(self):
        assert CuppingScore.baseline().final_score == pytest.approx(72.0)
        assert BASELINE_FINAL_SCORE == pytest.approx(72.0)
        assert calculate_final_score(BASELINE_SCORES) == pytest.approx(BASELINE_FINAL_SCORE)

    def test_baseline_values(self):
        baseline = CuppingScore.baseline()
        assert baseline.fragrance == 6
        assert baseline.uniformity == 10
        assert baseline.clean_cup == 10
        assert baseline.sweetness == 10
        assert baseline.taints == 0 and baseline.faults == 0
        assert baseline.as_dict()["overall"] == BASELINE_SCORES["overall"]

    def test_new_sheet_is_baseline_draft(self):
        sheet = new_score_sheet("g1", "s1", "e1")
        assert sheet.final_score == pytest.approx(BASELINE_FINAL_SCORE)
        assert not sheet.is_submitted
        assert sheet.key == ("g1", "s1", "e1")
        assert sheet.id.startswith("scoresheet-")


# ---------------------------------------------------------------------------
# Class: validation
# ---------------------------------------------------------------------------

class TestScoreValidation:

    @pytest.mark.parametrize("bad", [-0.25, 10.25])
    def test_attribute_out_of_range(self, bad):
        with pytest.raises(ValueError):
            make_score(8.0, flavor=bad)

    def test_negative_defect_count(self):
        with pytest.raises(ValueError):
            make_score(8.0, taints=-1)

    def test_fractional_defect_count(self):
        with pytest.raises(ValueError):
            make_score(8.0, faults=1.5)

    def test_bool_is_not_a_score(self):
        with pytest.raises(ValueError):
            make_score(8.0, body=True)

    def test_unknown_field_in_update(self):
        with pytest.raises(ValueError, match="Unknown score fields"):
            make_score().with_updates(aroma=8.0)


# ---------------------------------------------------------------------------
# Class: draft edits
# ---------------------------------------------------------------------------

class TestDraftEdits:

    def test_score_change_recomputes_final(self):
        sheet = make_sheet(value=8.0, submitted=False)
        edited = apply_score_change(sheet, flavor=9.0, taints=1)
        assert edited.final_score == pytest.approx(80.0 + 1.0 - 2.0)
        assert sheet.final_score == pytest.approx(80.0)

    def test_toggle_descriptor_adds_at_default_intensity(self):
        sheet = toggle_descriptor(make_sheet(submitted=False), "Jasmine")
        assert [(d.name, d.intensity) for d in sheet.descriptors] == [("Jasmine", 3)]

    def test_toggle_descriptor_twice_removes(self):
        sheet = make_sheet(submitted=False)
        assert toggle_descriptor(toggle_descriptor(sheet, "Lemon"), "Lemon").descriptors == ()

    def test_set_intensity(self):
        sheet = toggle_descriptor(make_sheet(submitted=False), "Lemon")
        sheet = set_descriptor_intensity(sheet, "Lemon", 5)
        assert sheet.descriptors[0].intensity == 5

    def test_set_intensity_out_of_range(self):
        sheet = toggle_descriptor(make_sheet(submitted=False), "Lemon")
        with pytest.raises(ValueError):
            set_descriptor_intensity(sheet, "Lemon", 6)

    def test_set_intensity_missing_descriptor(self):
        with pytest.raises(ValueError, match="not on sheet"):
            set_descriptor_intensity(make_sheet(submitted=False), "Cocoa", 2)

    def test_update_notes(self):
        assert update_notes(make_sheet(submitted=False), "Clean").notes == "Clean"


class TestSubmittedLock:

    def test_submit_once(self):
        sheet = submit(make_sheet(submitted=False))
        assert sheet.is_submitted

    def test_submit_twice_raises(self):
        with pytest.raises(ScoreSheetLockedError):
            submit(make_sheet(submitted=True))

    @pytest.mark.parametrize("edit", [
        lambda s: apply_score_change(s, flavor=9.0),
        lambda s: toggle_descriptor(s, "Jasmine"),
        lambda s: update_notes(s, "late note"),
    ])
    def test_submitted_sheet_rejects_edits(self, edit):
        with pytest.raises(ScoreSheetLockedError):
            edit(make_sheet(submitted=True))


# ---------------------------------------------------------------------------
# Class: sample_status
# ---------------------------------------------------------------------------

class TestSampleStatus:

    def test_not_started(self):
        assert sample_status(None, make_event()) == "Not Started"

    def test_draft(self):
        assert sample_status(make_sheet(submitted=False), make_event()) == "Draft"

    def test_submitted(self):
        assert sample_status(make_sheet(submitted=True), make_event()) == "Submitted"

    def test_finalized_once_revealed(self):
        assert sample_status(None, make_event(revealed=True)) == "Finalized"
        assert sample_status(make_sheet(submitted=True), make_event(revealed=True)) == "Finalized"
