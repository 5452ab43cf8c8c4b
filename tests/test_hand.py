# file: tests/test_hand.py
from __future__ import annotations

import pytest

from bridge_bidding.bidding_types import FormatError
from bridge_bidding.hand import Hand, parse_hand, parse_hand_groups
from bridge_bidding.hand_eval import (
    best_minor,
    count_keycards,
    good_suit,
    has_stopper,
    is_balanced,
    rule_of_20,
    vul_adjustment,
)
from bridge_bidding.auction import VulnerabilityState
from bridge_bidding.config import BiddingConfig


def test_parse_hand_counts_points() -> None:
    hand = parse_hand("AKQ2 J43 - T98765")
    assert hand.length("S") == 4
    assert hand.length("D") == 0
    assert hand.hcp == 4 + 3 + 2 + 1
    # Void 3, no singleton/doubleton.
    assert hand.distribution_points == 3
    assert hand.total_points == 13


def test_parse_hand_accepts_ten_and_lowercase() -> None:
    hand = parse_hand("a10x kq 5432 j98")
    assert hand.ranks("S") == ["A", "T", "x"]
    assert hand.holds("J", "C")


def test_parse_hand_rejects_wrong_group_count() -> None:
    with pytest.raises(FormatError):
        parse_hand("AKQ J43 T98765")
    with pytest.raises(FormatError):
        parse_hand("")


def test_parse_hand_rejects_bad_rank() -> None:
    with pytest.raises(FormatError):
        parse_hand("AKZ2 J43 - T98765")


def test_parse_hand_groups_allows_empty_void() -> None:
    hand = parse_hand_groups(["AKQ2", "", "J43", "T98765"])
    assert hand.length("H") == 0


def test_to_text_round_trips_rank_sets() -> None:
    text = "2QAK 34J - 56789T"
    hand = parse_hand(text)
    again = parse_hand(hand.to_text())
    for suit in "SHDC":
        assert sorted(again.ranks(suit)) == sorted(hand.ranks(suit))
    assert hand.to_text() == "AKQ2 J43 - T98765"


def test_from_ranks_and_shape() -> None:
    hand = Hand.from_ranks({"S": "AKQJ2", "H": "432", "D": "32", "C": "432"})
    assert hand.shape() == [5, 3, 3, 2]
    assert hand.longest_suits() == ["S"]


def test_balanced_shapes_and_5422_option() -> None:
    assert is_balanced(parse_hand("AQ32 K54 KJ3 Q32"))
    semi = parse_hand("AKJ32 Q4 K3 5432")
    assert not is_balanced(semi, BiddingConfig())
    cfg = BiddingConfig.from_dict({"general": {"balanced_shapes": {"include_5422": True}}})
    assert is_balanced(semi, cfg)
    assert not is_balanced(parse_hand("AKJ32 Q432 K32 5"), cfg)


def test_rule_of_20() -> None:
    # 13 HCP + 5 + 4.
    hand = parse_hand("AKJ32 Q432 K3 54")
    assert hand.hcp == 13
    assert rule_of_20(hand)
    assert not rule_of_20(parse_hand("K5432 Q432 J3 54"))


def test_best_minor_prefers_clubs_with_3_3() -> None:
    assert best_minor(parse_hand("AQ32 K543 K32 Q3")) == "D"
    assert best_minor(parse_hand("AQ32 K54 K32 Q32")) == "C"
    assert best_minor(parse_hand("AQ3 K5 K432 Q432")) == "D"


def test_stoppers_and_suit_quality() -> None:
    hand = parse_hand("A2 K2 Q32 J432")
    assert all(has_stopper(hand, s) for s in "SHDC")
    assert not has_stopper(parse_hand("K A432 Q2 J432"), "S")
    assert good_suit(parse_hand("AQ9876 2 32 432"), "S")
    assert not good_suit(parse_hand("A98765 2 32 432"), "S")


def test_keycards_count_trump_king() -> None:
    hand = parse_hand("KQ32 A32 432 A32")
    assert count_keycards(hand, "S") == 3
    assert count_keycards(hand, "H") == 2


def test_vulnerability_adjustment_can_be_switched_off() -> None:
    unfav = VulnerabilityState(we=True, they=False)
    assert vul_adjustment("weak_two", unfav, BiddingConfig()) == 4
    cfg = BiddingConfig.from_dict({"general": {"vulnerability_adjustments": False}})
    assert vul_adjustment("weak_two", unfav, cfg) == 0
