# file: tests/test_conventions_competitive.py
from __future__ import annotations


def test_michaels_over_a_major(recommend_for) -> None:
    rec = recommend_for("KQ432 2 AJ432 32", ["1H"])
    assert rec.bid.token == "2H"
    assert rec.bid.convention_used == "Michaels Cue Bid: 5+ spades and a 5-card minor"
    assert rec.convention.name == "Michaels"


def test_michaels_over_a_minor_shows_both_majors(recommend_for) -> None:
    rec = recommend_for("KQ432 AJ432 2 32", ["1C"])
    assert rec.bid.token == "2C"
    assert rec.bid.convention_used == "Michaels Cue Bid: 5-5 in the majors"


def test_michaels_is_direct_only_by_default(recommend_for) -> None:
    rec = recommend_for("KQ432 AJ432 2 32", ["1C", "P", "P"])
    assert rec.bid.token != "2C"


def test_sound_michaels_needs_ten_points(recommend_for, config_with) -> None:
    weak = "Q9432 KJ432 2 32"
    assert recommend_for(weak, ["1C"]).bid.token == "2C"
    cfg = config_with({"competitive": {"michaels": {"strength": "sound"}}})
    assert recommend_for(weak, ["1C"], config=cfg).bid.token != "2C"


def test_unusual_2nt_over_a_major(recommend_for) -> None:
    rec = recommend_for("2 32 KQ432 AJ432", ["1S"])
    assert rec.bid.token == "2NT"
    assert rec.bid.convention_used == "Unusual 2NT: 5-5 in clubs and diamonds (vul=equal)"


def test_michaels_advance_prefers_the_known_major(recommend_for) -> None:
    rec = recommend_for("432 K432 Q32 432", ["1H", "2H", "P"])
    assert rec.bid.token == "2S"
    assert rec.bid.convention_used == "Michaels advance: prefer spades"


def test_michaels_advance_asks_for_the_minor_without_support(recommend_for) -> None:
    rec = recommend_for("32 K432 Q432 432", ["1H", "2H", "P"])
    assert rec.bid.token == "2NT"
    assert rec.bid.convention_used == "Michaels advance: 2NT asks for the minor"


def test_cue_bid_raise_with_four_card_support(recommend_for) -> None:
    rec = recommend_for("KQ32 32 A432 J32", ["1S", "2H"])
    assert rec.bid.token == "3H"
    assert rec.bid.convention_used == "Cue Bid Raise: 4-card support, 10+ HCP"


def test_advancer_simple_raise(recommend_for) -> None:
    rec = recommend_for("K32 Q432 32 K432", ["1D", "1S", "P"])
    assert rec.bid.token == "2S"
    assert rec.bid.convention_used == "Advancer simple raise: 3-card support, 6–10 HCP"
