# file: tests/test_conventions_openings.py
from __future__ import annotations

from conftest import STRONG_24

from bridge_bidding.auction import VulnerabilityState

WEAK_TWO_SPADES = "KQJ432 32 432 32"


def test_strong_2c_opening(recommend_for) -> None:
    rec = recommend_for(STRONG_24, [])
    assert rec.bid.token == "2C"
    assert rec.bid.convention_used.startswith("Strong 2C opening: 22+ HCP")
    assert rec.convention.name == "Strong 2 Clubs"


def test_waiting_response_to_2c(recommend_for) -> None:
    rec = recommend_for("432 432 5432 432", ["2C", "P"])
    assert rec.bid.token == "2D"
    assert rec.bid.convention_used == "Waiting response to 2C: artificial"


def test_2nt_rebid_after_waiting_response(recommend_for) -> None:
    rec = recommend_for(STRONG_24, ["2C", "P", "2D", "P"])
    assert rec.bid.token == "2NT"
    assert rec.bid.convention_used == "2NT rebid over 2C: 22–24 HCP, balanced"


def test_weak_two_at_equal_vulnerability(recommend_for) -> None:
    rec = recommend_for(WEAK_TWO_SPADES, [])
    assert rec.bid.token == "2S"
    assert rec.bid.convention_used == "Weak Two opening: 6-card spades, 5–11 HCP (vul=equal)"


def test_weak_two_needs_more_when_unfavourable(recommend_for) -> None:
    unfav = VulnerabilityState(we=True, they=False)
    rec = recommend_for(WEAK_TWO_SPADES, [], vul=unfav)
    assert rec.bid.is_pass


def test_three_level_preempt_with_seven_cards(recommend_for) -> None:
    rec = recommend_for("KQJ5432 2 432 32", [])
    assert rec.bid.token == "3S"
    assert rec.bid.convention_used.startswith("Preemptive opening: 7-card spades")


def test_feature_ask_over_weak_two(recommend_for) -> None:
    rec = recommend_for("Q3 AK32 AK32 432", ["2S", "P"])
    assert rec.bid.token == "2NT"
    assert rec.bid.convention_used.startswith("Feature ask over Weak Two")


def test_natural_3nt_over_weak_two_with_stoppers(recommend_for) -> None:
    rec = recommend_for("Q3 AK32 AK32 K32", ["2S", "P"])
    assert rec.bid.token == "3NT"
    assert rec.bid.convention_used.startswith("Natural 3NT over Weak Two Major")


def test_feature_answer_shows_outside_ace(recommend_for) -> None:
    rec = recommend_for("KQJ432 32 A32 32", ["2S", "P", "2NT", "P"])
    assert rec.bid.token == "3D"
    assert rec.bid.convention_used == "Feature shown: A of diamonds, maximum weak two"


def test_feature_answer_minimum_rebids_the_suit(recommend_for) -> None:
    rec = recommend_for(WEAK_TWO_SPADES, ["2S", "P", "2NT", "P"])
    assert rec.bid.token == "3S"
    assert rec.bid.convention_used.startswith("No feature")
