# file: tests/test_natural.py
from __future__ import annotations

import pytest

from conftest import BALANCED_15, VOID_SPADES_9


@pytest.mark.parametrize(
    "hand, token",
    [
        (BALANCED_15, "1NT"),
        ("AK432 K32 32 Q32", "1S"),
        ("AQ3 K5 K432 Q432", "1D"),
        ("AKQ2 AK3 K32 Q32", "2NT"),
        ("K5432 Q432 J3 54", "PASS"),
    ],
)
def test_openings(recommend_for, hand, token) -> None:
    rec = recommend_for(hand, [])
    assert rec.bid.token == token
    assert rec.convention is None


def test_new_suit_at_the_two_level(recommend_for) -> None:
    rec = recommend_for(VOID_SPADES_9, ["1S", "P"])
    assert rec.bid.token == "2H"
    assert rec.bid.convention_used == "New suit at 2-level: natural, 10+ HCP or a shapely 5-card suit"


def test_1nt_response_without_support(recommend_for) -> None:
    rec = recommend_for("32 K432 Q432 K32", ["1S", "P"])
    assert rec.bid.token == "1NT"
    assert rec.bid.convention_used == "1NT response: 6–10 HCP, no 3-card support"


def test_simple_raise_of_a_major(recommend_for) -> None:
    rec = recommend_for("K32 Q32 K432 432", ["1H", "P"])
    assert rec.bid.token == "2H"
    assert rec.bid.convention_used == "Simple raise: 6–9 HCP, 3-card support"


def test_four_four_majors_bid_up_the_line_over_a_minor(recommend_for) -> None:
    rec = recommend_for("KJ32 Q432 32 432", ["1C", "P"])
    assert rec.bid.token == "1H"


def test_weak_response_passes(recommend_for) -> None:
    rec = recommend_for("432 J432 5432 32", ["1S", "P"])
    assert rec.bid.is_pass
    assert rec.bid.convention_used == "Pass: fewer than 6 HCP"


def test_natural_overcall(recommend_for) -> None:
    rec = recommend_for("KQJ32 32 A32 432", ["1H"])
    assert rec.bid.token == "1S"
    assert rec.bid.convention_used == "Natural overcall: 5+ spades, 6+ HCP (vul=equal)"


def test_1nt_overcall_with_a_stopper(recommend_for) -> None:
    rec = recommend_for("AQ3 KJ3 K432 Q32", ["1H"])
    assert rec.bid.token == "1NT"
    assert rec.bid.convention_used == "1NT overcall: 15–18 HCP, balanced, stopper in their suit"


def test_weak_jump_overcall(recommend_for) -> None:
    rec = recommend_for("KQJ432 32 432 32", ["1C"])
    assert rec.bid.token == "2S"
    assert rec.bid.convention_used == "Weak jump overcall: 6 spades, weak hand (vul=equal)"


def test_advance_of_a_takeout_double(recommend_for) -> None:
    rec = recommend_for("K432 32 Q432 432", ["1H", "X", "P"])
    assert rec.bid.token == "1S"
    assert rec.bid.convention_used == "Advance of the takeout double: longest unbid suit, spades"


def test_opener_2nt_rebid_with_18_19(recommend_for) -> None:
    rec = recommend_for("AQ3 KJ3 AK32 Q32", ["1D", "P", "1S", "P"])
    assert rec.bid.token == "2NT"
    assert rec.bid.convention_used == "2NT rebid: 18–19 HCP, balanced"


def test_pass_once_game_is_reached(recommend_for) -> None:
    rec = recommend_for("AQ3 KJ3 AK32 Q32", ["1NT", "P", "3NT", "P"])
    assert rec.bid.is_pass


def test_light_opening_in_third_seat(recommend_for, config_with) -> None:
    hand = "AKJ54 Q32 J32 32"
    assert recommend_for(hand, []).bid.is_pass
    rec = recommend_for(hand, ["P", "P"])
    assert rec.bid.token == "1S"
    assert rec.bid.convention_used == "Light third-seat opening: good 5+ spades"
    cfg = config_with({"general": {"passed_hand_variations": False}})
    assert recommend_for(hand, ["P", "P"], config=cfg).bid.is_pass


def test_notrump_opening_range_is_configurable(recommend_for, config_with) -> None:
    cfg = config_with({"opening_bids": {"natural": {"one_notrump_range": [16, 18]}}})
    rec = recommend_for(BALANCED_15, [], config=cfg)
    assert rec.bid.token == "1C"
    rec = recommend_for("AQ32 K54 KJ3 K32", [], config=cfg)
    assert rec.bid.convention_used == "1NT opening: 16–18 HCP, balanced"


def test_overcall_length_is_configurable(recommend_for, config_with) -> None:
    cfg = config_with({"competitive": {"overcalls": {"min_length": 6}}})
    rec = recommend_for("KQJ32 32 A32 432", ["1H"], config=cfg)
    assert rec.bid.token != "1S"


def test_advance_of_a_double_when_every_suit_is_bid(recommend_for) -> None:
    calls = ["1C", "P", "1D", "P", "1H", "X", "1S"]
    for hand in ("J32 Q432 5432 32", "J32 Q432 K432 Q2"):
        rec = recommend_for(hand, calls)
        assert rec.bid.is_pass
