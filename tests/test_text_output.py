# file: tests/test_text_output.py
from __future__ import annotations

from conftest import BALANCED_15

from bridge_bidding.auction import Auction
from bridge_bidding.bid import parse_bid
from bridge_bidding.hand import parse_hand
from bridge_bidding.practice_store import PracticeDeal
from bridge_bidding.text_output import (
    format_auction,
    format_call,
    format_deal_text,
    format_explained_calls,
    format_hand,
)


def _deal() -> PracticeDeal:
    hands = {
        "N": "AK32 A54 KJ3 Q32",
        "E": "T98 JT9 AT98 AKT",
        "S": "QJ4 KQ32 Q42 J54",
        "W": "765 876 765 9876",
    }
    hcp = {seat: parse_hand(text).hcp for seat, text in hands.items()}
    return PracticeDeal(hands=hands, conventions=("Stayman",), hcp=hcp)


def test_format_hand_shows_voids() -> None:
    lines = format_hand(parse_hand("AKQ2 - J43 T98765")).splitlines()
    assert lines[0] == "♠ A K Q 2"
    assert lines[1] == "♥ -"
    assert len(lines) == 4


def test_format_call() -> None:
    assert format_call(parse_bid("2H")) == "2♥"
    assert format_call(parse_bid("1NT")) == "1NT"
    assert format_call(parse_bid("P")) == "Pass"
    assert format_call(parse_bid("X")) == "X"


def test_format_deal_text_basic() -> None:
    text = format_deal_text(_deal(), dealer="E", vulnerability="Both", board_number=3)

    # Header present
    assert text.startswith("Board 3 - Dealer: East - Vul: Both")

    # Compass headings present
    for heading in ("North", "South", "West", "East"):
        assert heading in text

    # Suit symbols present somewhere
    for symbol in "♠♥♦♣":
        assert symbol in text


def test_format_auction_leaves_cells_before_the_dealer_blank() -> None:
    lines = format_auction(Auction(["1S", "P"], dealer="N")).splitlines()
    assert lines[0] == "West    North   East    South"
    assert lines[1] == "        1♠      Pass    ?"


def test_format_auction_closed_has_no_prompt() -> None:
    text = format_auction(Auction(["P", "P", "P", "P"], dealer="W"))
    assert "?" not in text
    assert text.splitlines()[1].split() == ["Pass"] * 4


def test_format_explained_calls() -> None:
    auction = Auction(["1NT", "P"], dealer="N")
    text = format_explained_calls(auction, ["1NT opening: 15–17 HCP, balanced", "Pass"])
    assert text.splitlines()[0] == "  N: 1NT    1NT opening: 15–17 HCP, balanced"
    assert text.splitlines()[1].startswith("  E: Pass")


def test_hand_block_uses_the_parsed_ranks() -> None:
    block = format_hand(parse_hand(BALANCED_15))
    assert "♦ K J 3" in block
