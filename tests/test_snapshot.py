"""
Unit tests for src/models/snapshot.py.

Covers:
- Lookups and unknown ids.
- Score sheet create-or-update keyed by (grader, sample, event), duplicate
  triple or id and locked-sheet rejection, submit only via submit_score_sheet.
- Event creation with unique blind codes and required sample fields;
  reveal is one-way; grader assignment.
- Farmer registration with PENDING codes and explicit code assignment.
- Adjudication written once; snapshots are never mutated in place.
"""

from __future__ import annotations

import pytest

from src.models.errors import (
    AdjudicationLockedError,
    DuplicateScoreSheetError,
    ScoreSheetLockedError,
    UnknownRecordError,
)
from src.registry.blind_codes import is_valid_blind_code
from src.scoring.final_score import apply_score_change

from .conftest import make_event, make_sample, make_sheet, make_snapshot


# ---------------------------------------------------------------------------
# Class: lookups
# ---------------------------------------------------------------------------

class TestLookups:

    def test_get_records(self, demo):
        assert demo.get_user("farmer-1").name == "Frank Farmer"
        assert demo.get_event("event-2").is_results_revealed
        assert demo.get_sample("sample-3").is_adjudicated
        assert demo.get_score_sheet("scoresheet-1-1").final_score == pytest.approx(88.0)

    @pytest.mark.parametrize("getter", ["get_user", "get_event", "get_sample", "get_score_sheet"])
    def test_unknown_id(self, demo, getter):
        with pytest.raises(UnknownRecordError, match="nope"):
            getattr(demo, getter)("nope")

    def test_unknown_record_is_key_error(self, demo):
        with pytest.raises(KeyError):
            demo.get_sample("nope")

    def test_samples_for_event_in_entry_order(self, demo):
        assert [s.id for s in demo.samples_for_event("event-1")] == ["sample-1", "sample-2", "sample-3"]

    def test_sheets_for_submitted_only(self, demo):
        assert [s.id for s in demo.sheets_for("sample-2", "event-1")] == ["scoresheet-2-1"]
        assert len(demo.sheets_for("sample-2", "event-1", submitted_only=False)) == 2

    def test_event_for_sample_is_first_match(self, demo):
        assert demo.event_for_sample("sample-3").id == "event-1"
        assert demo.event_for_sample("missing") is None

    def test_grader_and_farmer_views(self, demo):
        assert [e.id for e in demo.events_for_grader("qgrader-2")] == ["event-1", "event-3"]
        assert [s.id for s in demo.samples_for_farmer("farmer-1")] == ["sample-1", "sample-3"]

    def test_assigned_blind_codes(self, demo):
        assert demo.assigned_blind_codes() == {"A1B2", "C3D4", "E5F6"}


# ---------------------------------------------------------------------------
# Class: score sheets
# ---------------------------------------------------------------------------

class TestScoreSheets:

    def test_get_or_create_returns_existing(self, demo):
        assert demo.get_or_create_score_sheet("qgrader-1", "sample-1", "event-1").id == "scoresheet-1-1"

    def test_get_or_create_baseline_draft_not_stored(self, demo):
        sheet = demo.get_or_create_score_sheet("qgrader-3", "sample-1", "event-1")
        assert sheet.final_score == pytest.approx(72.0)
        assert not sheet.is_submitted
        assert demo.find_score_sheet("qgrader-3", "sample-1", "event-1") is None

    def test_save_new_then_update(self, demo):
        draft = demo.get_or_create_score_sheet("qgrader-3", "sample-1", "event-1")
        saved = demo.save_score_sheet(draft)
        edited = apply_score_change(draft, flavor=9.0)
        updated = saved.save_score_sheet(edited)
        assert len(updated.score_sheets) == len(demo.score_sheets) + 1
        assert updated.get_score_sheet(draft.id).scores.flavor == 9.0
        assert saved.get_score_sheet(draft.id).scores.flavor == 6.0

    def test_duplicate_triple_rejected(self):
        snapshot = make_snapshot(sheets=(make_sheet("g1", sheet_id="first", submitted=False),))
        with pytest.raises(DuplicateScoreSheetError):
            snapshot.save_score_sheet(make_sheet("g1", sheet_id="second", submitted=False))

    def test_submitted_sheet_cannot_be_saved_over(self):
        snapshot = make_snapshot(sheets=(make_sheet("g1", sheet_id="first", submitted=True),))
        with pytest.raises(ScoreSheetLockedError):
            snapshot.save_score_sheet(make_sheet("g1", sheet_id="first", value=9.0, submitted=False))

    def test_submitted_sheet_rejected_on_save(self):
        with pytest.raises(ValueError, match="submit_score_sheet"):
            make_snapshot().save_score_sheet(make_sheet("g1", submitted=True))

    def test_id_of_another_triple_rejected(self):
        snapshot = make_snapshot().save_score_sheet(make_sheet("g1", "x", "e", sheet_id="s1", submitted=False))
        with pytest.raises(ValueError, match="already belongs"):
            snapshot.save_score_sheet(make_sheet("g2", "x", "e", sheet_id="s1", submitted=False))
        assert snapshot.find_score_sheet("g1", "x", "e").id == "s1"
        assert snapshot.find_score_sheet("g2", "x", "e") is None

    def test_submit(self, demo):
        submitted = demo.submit_score_sheet("scoresheet-2-2")
        assert submitted.get_score_sheet("scoresheet-2-2").is_submitted
        assert not demo.get_score_sheet("scoresheet-2-2").is_submitted
        with pytest.raises(ScoreSheetLockedError):
            submitted.submit_score_sheet("scoresheet-2-2")


# ---------------------------------------------------------------------------
# Class: events
# ---------------------------------------------------------------------------

class TestEvents:

    def test_create_event_assigns_unique_codes(self, demo, rng):
        entries = [
            {"farmer_id": "farmer-1", "farm_name": f"Farm {i}", "region": "Peru",
             "altitude": 1700, "processing_method": "Washed", "variety": "Caturra"}
            for i in range(20)
        ]
        snapshot, event = demo.create_event(
            "Spring Cup", "2025-03-01", entries,
            assigned_grader_ids=["qgrader-1", "qgrader-1", "qgrader-2"],
            rng=rng,
            tags=["Regional"],
        )
        samples = snapshot.samples_for_event(event.id)
        codes = [s.blind_code for s in samples]
        assert len(samples) == 20
        assert all(is_valid_blind_code(code) for code in codes)
        assert len(set(codes)) == 20
        assert not set(codes) & demo.assigned_blind_codes()
        assert event.assigned_grader_ids == ("qgrader-1", "qgrader-2")
        assert event.tags == ("Regional",)
        assert not event.is_results_revealed
        assert len(demo.events) == 3

    @pytest.mark.parametrize("field", ["farmer_id", "farm_name", "region", "processing_method", "variety"])
    def test_create_event_missing_field(self, demo, rng, field):
        entry = {"farmer_id": "farmer-1", "farm_name": "Farm", "region": "Peru",
                 "altitude": 1700, "processing_method": "Washed", "variety": "Caturra"}
        del entry[field]
        with pytest.raises(ValueError, match="missing required fields"):
            demo.create_event("Spring Cup", "2025-03-01", [entry], rng=rng)

    def test_reveal_is_one_way(self, demo):
        revealed = demo.reveal_results("event-1")
        assert revealed.get_event("event-1").is_results_revealed
        assert revealed.reveal_results("event-1") is revealed
        assert not demo.get_event("event-1").is_results_revealed

    def test_assign_graders_keeps_existing(self, demo):
        updated = demo.assign_graders("event-3", grader_ids=["qgrader-1", "qgrader-2"])
        assert updated.get_event("event-3").assigned_grader_ids == ("qgrader-2", "headjudge-1", "qgrader-1")


# ---------------------------------------------------------------------------
# Class: samples
# ---------------------------------------------------------------------------

class TestSamples:

    DETAILS = {
        "farm_name": "La Esperanza", "region": "Guatemala, Huehuetenango",
        "altitude": 1850, "processing_method": "Natural", "variety": "Bourbon",
    }

    def test_register_holds_pending(self, demo):
        snapshot, sample = demo.register_sample("event-3", "farmer-1", self.DETAILS)
        assert sample.blind_code == "PENDING"
        assert sample.has_pending_blind_code
        assert snapshot.get_event("event-3").sample_ids == (sample.id,)
        assert "PENDING" not in snapshot.assigned_blind_codes()

    def test_register_missing_field(self, demo):
        with pytest.raises(ValueError, match="missing required fields"):
            demo.register_sample("event-3", "farmer-1", {**self.DETAILS, "variety": ""})

    def test_register_wrong_processing_method(self, demo):
        with pytest.raises(ValueError, match="not accepted"):
            demo.register_sample("event-2", "farmer-1", self.DETAILS)

    def test_assign_blind_code_is_explicit(self, demo, rng):
        snapshot, sample = demo.register_sample("event-3", "farmer-1", self.DETAILS)
        assigned = snapshot.assign_blind_code(sample.id, rng)
        code = assigned.get_sample(sample.id).blind_code
        assert is_valid_blind_code(code)
        assert code not in demo.assigned_blind_codes()

    def test_assign_blind_code_twice_rejected(self, demo, rng):
        with pytest.raises(ValueError, match="already has blind code"):
            demo.assign_blind_code("sample-1", rng)

    def test_finalize_once(self, demo):
        finalized = demo.finalize_adjudication("sample-1", 88.0, "Excellent", notes="Floral")
        assert finalized.get_sample("sample-1").adjudicated_final_score == 88.0
        assert not demo.get_sample("sample-1").is_adjudicated
        with pytest.raises(AdjudicationLockedError):
            finalized.finalize_adjudication("sample-1", 89.0, "Excellent")

    def test_flag_for_discussion(self):
        snapshot = make_snapshot(events=(make_event(sample_ids=("s1",)),), samples=(make_sample("s1"),))
        flagged = snapshot.flag_for_discussion("s1")
        assert flagged.get_sample("s1").flagged_for_discussion
        assert not flagged.flag_for_discussion("s1", flagged=False).get_sample("s1").flagged_for_discussion
