# file: tests/test_conventions_slam.py
from __future__ import annotations

from conftest import BALANCED_15

from bridge_bidding.conventions_slam import rkcb_step

SLAM_HAND = "KQ32 AKQ3 AQ3 K2"


def test_gerber_over_1nt_with_slam_values(recommend_for) -> None:
    rec = recommend_for(SLAM_HAND, ["1NT", "P"])
    assert rec.bid.token == "4C"
    assert rec.bid.convention_used == "Gerber (ace ask)"
    assert rec.convention.key == "gerber_ask"


def test_gerber_response_counts_aces(recommend_for) -> None:
    rec = recommend_for(BALANCED_15, ["1NT", "P", "4C", "P"])
    assert rec.bid.token == "4H"
    assert rec.bid.convention_used == "Gerber response: 1 ace"

    rec = recommend_for("AQ32 A54 KJ3 Q32", ["1NT", "P", "4C", "P"])
    assert rec.bid.token == "4S"
    assert rec.bid.convention_used == "Gerber response: 2 aces"


def test_gerber_followup_asks_for_kings_with_all_aces(recommend_for) -> None:
    rec = recommend_for(SLAM_HAND, ["1NT", "P", "4C", "P", "4S", "P"])
    assert rec.bid.token == "5C"
    assert rec.bid.convention_used == "Gerber king ask: all aces held"


def test_gerber_followup_without_continuations(recommend_for, config_with) -> None:
    cfg = config_with({"ace_asking": {"gerber": {"continuations": False}}})
    rec = recommend_for(SLAM_HAND, ["1NT", "P", "4C", "P", "4S", "P"], config=cfg)
    assert rec.bid.token == "6NT"


def test_rkcb_ask_after_a_major_raise(recommend_for) -> None:
    rec = recommend_for("AKQ432 AK3 KQ2 A", ["1S", "P", "3S", "P"])
    assert rec.bid.token == "4NT"
    assert rec.bid.convention_used == "RKCB (keycard ask)"


def test_rkcb_1430_response(recommend_for) -> None:
    rec = recommend_for("KQ32 A32 432 432", ["1S", "P", "3S", "P", "4NT", "P"])
    assert rec.bid.token == "5S"
    assert rec.bid.convention_used == "RKCB 1430 response: 2 keycards with the trump queen"


def test_classic_blackwood_counts_aces_only(recommend_for, config_with) -> None:
    cfg = config_with({"ace_asking": {"blackwood": {"variant": "classic"}}})
    rec = recommend_for("KQ32 A32 432 432", ["1S", "P", "3S", "P", "4NT", "P"], config=cfg)
    assert rec.bid.token == "5D"
    assert rec.bid.convention_used == "Blackwood response: 1 ace"


def test_blackwood_followup_one_keycard_missing(recommend_for) -> None:
    calls = ["1S", "P", "3S", "P", "4NT", "P", "5S", "P"]
    rec = recommend_for("AQJ432 AK3 KQ2 2", calls)
    assert rec.bid.token == "6S"
    assert rec.bid.convention_used == "Small slam: one ace missing"


def test_rkcb_steps_by_scheme() -> None:
    assert rkcb_step(1, False, "1430") == "5C"
    assert rkcb_step(3, False, "1430") == "5D"
    assert rkcb_step(1, False, "0314") == "5D"
    assert rkcb_step(0, False, "0314") == "5C"
    assert rkcb_step(2, False, "1430") == "5H"
    assert rkcb_step(2, True, "1430") == "5S"
