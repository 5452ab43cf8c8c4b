# file: tests/test_conventions_doubles.py
from __future__ import annotations

from conftest import BALANCED_15, REOPENING_9


def test_takeout_double_short_in_their_suit(recommend_for) -> None:
    rec = recommend_for("AQ32 2 KJ32 K432", ["1H"])
    assert rec.bid.is_double
    assert rec.bid.convention_used == (
        "Takeout Double: short in hearts, 11+ HCP, support for the unbid suits"
    )


def test_takeout_double_minimum_without_relaxed_style(recommend_for, config_with) -> None:
    cfg = config_with({"general": {"relaxed_takeout_doubles": False}})
    rec = recommend_for("AQ32 2 KJ32 J432", ["1H"], config=cfg)
    assert not rec.bid.is_double


def test_balanced_15_with_stopper_overcalls_1nt(recommend_for) -> None:
    rec = recommend_for("AQ3 KJ3 K432 Q32", ["1H"])
    assert rec.bid.token == "1NT"


def test_negative_double_shows_the_unbid_major(recommend_for) -> None:
    rec = recommend_for("32 KJ32 Q432 K32", ["1C", "1S"])
    assert rec.bid.is_double
    assert rec.bid.convention_used == "Negative Double: 6+ HCP, 4+ in hearts"


def test_negative_double_respects_the_level_cap(recommend_for, config_with) -> None:
    cfg = config_with({"competitive": {"negative_doubles": {"thru_level": 1}}})
    rec = recommend_for("32 KJ32 Q432 K32", ["1C", "2S"], config=cfg)
    assert not rec.bid.is_double


def test_responsive_double_with_both_minors(recommend_for) -> None:
    rec = recommend_for("K32 32 Q432 KJ32", ["1H", "X", "2H"])
    assert rec.bid.is_double
    assert rec.bid.convention_used == "Responsive Double: 8+ HCP, 4+ in diamonds/clubs"


def test_reopening_double(recommend_for) -> None:
    rec = recommend_for(REOPENING_9, ["1H", "P", "P"])
    assert rec.bid.is_double
    assert rec.bid.convention_used == (
        "Reopening Double: 9 HCP, short in hearts, 3+ in spades/diamonds/clubs"
    )


def test_support_double_with_exactly_three(recommend_for) -> None:
    rec = recommend_for(BALANCED_15, ["1D", "P", "1H", "1S"])
    assert rec.bid.is_double
    assert rec.bid.convention_used == "Support Double: exactly 3-card hearts support"


def test_support_double_switched_off(recommend_for, config_with) -> None:
    cfg = config_with({"competitive": {"support_doubles": False}})
    rec = recommend_for(BALANCED_15, ["1D", "P", "1H", "1S"], config=cfg)
    assert not rec.bid.is_double


def test_negative_double_minimum_is_configurable(recommend_for, config_with) -> None:
    cfg = config_with(
        {"competitive": {"negative_doubles": {"min_hcp_one_level": 10, "min_hcp_two_level": 10, "min_hcp_higher": 12}}}
    )
    rec = recommend_for("32 KJ32 Q432 K32", ["1C", "1S"], config=cfg)
    assert not rec.bid.is_double
