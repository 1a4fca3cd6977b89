"""
Demo snapshot: the Golden Bean Championship data set.

Used by the results runner (``python -m src.results.runner``) and by the
test-suite fixtures.  The Internal QC event is revealed and its single
sample finalized so the demo leaderboard has something to show.
"""

from __future__ import annotations

from .records import (
    Adjudicated,
    CoffeeSample,
    CuppingEvent,
    CuppingScore,
    Descriptor,
    Role,
    ScoreSheet,
    User,
)
from .snapshot import CuppingSnapshot

USERS: tuple[User, ...] = (
    User("admin-1", "Alice Organizer", "alice@cuppinghub.com", (Role.ADMIN,)),
    User("qgrader-1", "Bob Cupper", "bob@cuppinghub.com", (Role.Q_GRADER,)),
    User("qgrader-2", "Charlie Taster", "charlie@cuppinghub.com", (Role.Q_GRADER,)),
    User("qgrader-3", "Diana Roaster", "diana@cuppinghub.com", (Role.Q_GRADER,), "Pending Invitation"),
    User("headjudge-1", "Eve Adjudicator", "eve@cuppinghub.com", (Role.HEAD_JUDGE, Role.Q_GRADER)),
    User("farmer-1", "Frank Farmer", "frank@farm.com", (Role.FARMER,)),
    User("farmer-2", "Grace Grower", "grace@farm.com", (Role.FARMER,), "Deactivated"),
)

SAMPLES: tuple[CoffeeSample, ...] = (
    CoffeeSample(
        id="sample-1", farmer_id="farmer-1", blind_code="A1B2",
        farm_name="Gedeo Zone Cooperative", region="Ethiopia, Yirgacheffe", altitude=1900,
        processing_method="Washed", variety="Heirloom", moisture=11.5,
    ),
    CoffeeSample(
        id="sample-2", farmer_id="farmer-2", blind_code="C3D4",
        farm_name="Finca El Paraiso", region="Colombia, Huila", altitude=1750,
        processing_method="Natural", variety="Pink Bourbon", moisture=10.8,
    ),
    CoffeeSample(
        id="sample-3", farmer_id="farmer-1", blind_code="E5F6",
        farm_name="Tekangu Farmers Coop", region="Kenya, Nyeri", altitude=1800,
        processing_method="Washed", variety="SL-28", moisture=12.0,
        adjudication=Adjudicated(
            score=88.5,
            grade="Excellent",
            notes="Blackcurrant, grapefruit. Juicy and structured.",
            justification="Finish faded on the second table.",
        ),
    ),
)

EVENTS: tuple[CuppingEvent, ...] = (
    CuppingEvent(
        id="event-1",
        name="Golden Bean Championship 2024",
        date="2024-08-15",
        description="The premier championship for washed and natural process coffees in the region.",
        processing_methods=("Washed", "Natural"),
        assigned_grader_ids=("qgrader-1", "qgrader-2", "qgrader-3"),
        assigned_head_judge_ids=("headjudge-1",),
        sample_ids=("sample-1", "sample-2", "sample-3"),
        is_results_revealed=False,
        tags=("Championship", "Regional"),
        registration_open=True,
    ),
    CuppingEvent(
        id="event-2",
        name="Internal QC - Washed Lot #3",
        date="2024-09-01",
        description="A private quality control session for our internal lots.",
        processing_methods=("Washed",),
        assigned_grader_ids=("qgrader-1", "headjudge-1"),
        assigned_head_judge_ids=("headjudge-1",),
        sample_ids=("sample-3",),
        is_results_revealed=True,
        tags=("Private QC", "Internal"),
        registration_open=False,
    ),
    CuppingEvent(
        id="event-3",
        name="Winter Harvest Showcase",
        date="2024-11-20",
        description="Showcase for experimental and anaerobic processing methods.",
        processing_methods=("Natural", "Honey", "Anaerobic", "Other"),
        assigned_grader_ids=("qgrader-2", "headjudge-1"),
        assigned_head_judge_ids=("headjudge-1",),
        sample_ids=(),
        is_results_revealed=False,
        tags=("Experimental", "Showcase"),
        registration_open=True,
    ),
)

SCORE_SHEETS: tuple[ScoreSheet, ...] = (
    ScoreSheet(
        id="scoresheet-1-1", grader_id="qgrader-1", sample_id="sample-1", event_id="event-1",
        scores=CuppingScore(
            fragrance=8.5, flavor=8.25, aftertaste=8, acidity=8.5, body=8, balance=8.25,
            uniformity=10, clean_cup=10, sweetness=10, overall=8.5,
        ),
        descriptors=(Descriptor("Jasmine", 4), Descriptor("Lemon", 3)),
        notes="Vibrant floral notes, citrusy acidity. Very clean.",
        is_submitted=True,
    ),
    ScoreSheet(
        id="scoresheet-1-2", grader_id="qgrader-2", sample_id="sample-1", event_id="event-1",
        scores=CuppingScore(
            fragrance=8.75, flavor=8.5, aftertaste=8.25, acidity=8.5, body=7.75, balance=8,
            uniformity=10, clean_cup=10, sweetness=10, overall=8.25,
        ),
        notes="Jasmine and bergamot on the nose. Tea-like body.",
        is_submitted=True,
    ),
    ScoreSheet(
        id="scoresheet-2-1", grader_id="qgrader-1", sample_id="sample-2", event_id="event-1",
        scores=CuppingScore(
            fragrance=8.75, flavor=8.5, aftertaste=8.5, acidity=8.25, body=8.5, balance=8.5,
            uniformity=10, clean_cup=10, sweetness=10, overall=8.5,
        ),
        descriptors=(Descriptor("Strawberry", 5), Descriptor("Tropical Fruit", 4)),
        notes="Intense strawberry and tropical fruit notes. Syrupy body.",
        is_submitted=True,
    ),
    # Draft left untouched at zero by qgrader-2
    ScoreSheet(
        id="scoresheet-2-2", grader_id="qgrader-2", sample_id="sample-2", event_id="event-1",
        scores=CuppingScore(
            fragrance=0, flavor=0, aftertaste=0, acidity=0, body=0, balance=0,
            uniformity=0, clean_cup=0, sweetness=0, overall=0,
        ),
        is_submitted=False,
    ),
    ScoreSheet(
        id="scoresheet-3-1", grader_id="qgrader-1", sample_id="sample-3", event_id="event-2",
        scores=CuppingScore(
            fragrance=8.5, flavor=8.75, aftertaste=8.25, acidity=8.75, body=8.25, balance=8.5,
            uniformity=10, clean_cup=10, sweetness=10, overall=8.5,
        ),
        descriptors=(Descriptor("Blackcurrant", 4), Descriptor("Grapefruit", 3)),
        notes="Juicy, structured acidity.",
        is_submitted=True,
    ),
    ScoreSheet(
        id="scoresheet-3-2", grader_id="headjudge-1", sample_id="sample-3", event_id="event-2",
        scores=CuppingScore(
            fragrance=8.25, flavor=8.5, aftertaste=8, acidity=8.5, body=8, balance=8.25,
            uniformity=10, clean_cup=10, sweetness=10, overall=8.25,
        ),
        descriptors=(Descriptor("Blackcurrant", 3),),
        notes="Blackcurrant up front, slightly short finish.",
        is_submitted=True,
    ),
)


def demo_snapshot() -> CuppingSnapshot:
    return CuppingSnapshot(
        users=USERS,
        events=EVENTS,
        samples=SAMPLES,
        score_sheets=SCORE_SHEETS,
    )
