# file: tests/test_engine.py
from __future__ import annotations

import random
from typing import List

import pytest

from conftest import REOPENING_9, STAYMAN_10, VOID_SPADES_9

from bridge_bidding.auction import Auction, VulnerabilityState
from bridge_bidding.bid import Bid, contract_above, parse_bid
from bridge_bidding.bidding_types import (
    PHASE_OVERCALLING,
    PHASE_RESPONDING,
    RANKS,
    STRAINS,
    SUITS,
    AuctionClosedError,
)
from bridge_bidding.config import BiddingConfig
from bridge_bidding.conventions_catalog import ALL_CONVENTIONS, PRECEDENCE, default_registry
from bridge_bidding.convention_registry import ConventionRegistry
from bridge_bidding.engine import recommend, recommend_with_source
from bridge_bidding.explanations import get_explanation_for
from bridge_bidding.hand import Card, Hand, parse_hand
from bridge_bidding.legality import is_legal


# ---------------------------------------------------------------------------
# Worked examples
# ---------------------------------------------------------------------------

def test_void_in_partners_suit_bids_a_new_suit(make_hand, make_auction) -> None:
    bid = recommend(make_hand(VOID_SPADES_9), make_auction(["1S", "P"]))
    assert bid.token == "2H"


def test_stayman_over_partners_1nt(make_hand, make_auction) -> None:
    rec = recommend_with_source(make_hand(STAYMAN_10), make_auction(["1NT", "P"]))
    assert rec.bid.token == "2C"
    assert "Stayman" in rec.bid.convention_used
    assert rec.phase == PHASE_RESPONDING


def test_reopening_double_in_the_balancing_seat(make_hand, make_auction) -> None:
    rec = recommend_with_source(make_hand(REOPENING_9), make_auction(["1H", "P", "P"]))
    assert rec.bid.is_double
    assert "Reopening Double" in rec.bid.convention_used
    assert rec.phase == PHASE_OVERCALLING


# ---------------------------------------------------------------------------
# Engine contract
# ---------------------------------------------------------------------------

def test_same_inputs_give_the_same_call(make_hand, make_auction) -> None:
    hand = make_hand(STAYMAN_10)
    first = recommend(hand, make_auction(["1NT", "P"]))
    second = recommend(hand, make_auction(["1NT", "P"]))
    assert first == second
    assert first.convention_used == second.convention_used


def test_closed_auction_raises(make_hand, make_auction) -> None:
    with pytest.raises(AuctionClosedError):
        recommend(make_hand(STAYMAN_10), make_auction(["1NT", "P", "P", "P"]))


def test_input_auction_is_not_modified(make_hand, make_auction) -> None:
    auction = make_auction(["1NT", "P"])
    recommend(make_hand(STAYMAN_10), auction)
    assert auction.tokens() == ["1NT", "PASS"]


def test_registry_without_conventions_uses_natural_rules(make_hand, make_auction) -> None:
    empty = ConventionRegistry(ALL_CONVENTIONS, {phase: [] for phase in PRECEDENCE})
    rec = recommend_with_source(make_hand(STAYMAN_10), make_auction(["1NT", "P"]), registry=empty)
    assert rec.convention is None
    assert rec.bid.token == "3NT"


def test_config_change_applies_on_the_next_call(make_hand, make_auction, config_with) -> None:
    hand, calls = make_hand(STAYMAN_10), ["1NT", "P"]
    assert recommend(hand, make_auction(calls)).token == "2C"
    off = config_with({"notrump_responses": {"stayman": False}})
    assert recommend(hand, make_auction(calls), off).token == "3NT"
    assert recommend(hand, make_auction(calls)).token == "2C"


@pytest.mark.parametrize(
    "hand, calls",
    [
        ("AQ32 K54 KJ3 Q32", []),
        ("KQJ2 Q32 Q2 5432", ["1NT", "P"]),
        ("- KQxxx xxxxx Axx", ["1S", "P"]),
        ("K432 J2 Q54 K432", ["1H", "P", "P"]),
        ("AKQ432 AK3 KQ2 A", ["1S", "P", "3S", "P"]),
        ("432 432 5432 432", ["2C", "P"]),
        ("AQ32 2 KJ32 K432", ["1H", "2H", "3H"]),
        ("KQ32 A32 432 432", ["1S", "2D", "3S", "4D", "4NT", "5D"]),
        ("32 K432 Q432 K32", ["1C", "1S", "4S"]),
    ],
)
def test_recommendation_is_always_legal(hand, calls) -> None:
    auction = Auction(list(calls))
    bid = recommend(parse_hand(hand), auction)
    assert is_legal(bid, auction)


def test_registry_lists_what_applies_before_the_hand_is_seen(make_view, config_with) -> None:
    registry = default_registry()
    view = make_view(["1NT", "P"])
    keys = [conv.key for conv, _ in registry.applicable(view, BiddingConfig())]
    assert "stayman" in keys and "jacoby_transfer" in keys
    assert keys.index("stayman") < keys.index("jacoby_transfer")

    off = config_with({"notrump_responses": {"stayman": False}})
    assert "stayman" not in [conv.key for conv, _ in registry.applicable(view, off)]


# ---------------------------------------------------------------------------
# Self-play
# ---------------------------------------------------------------------------

def _deal(rng: random.Random) -> List[Hand]:
    deck = [Card(rank, suit) for suit in SUITS for rank in RANKS]
    rng.shuffle(deck)
    return [Hand({s: [c for c in deck[i::4] if c.suit == s] for s in SUITS}) for i in range(4)]


def _random_call(rng: random.Random, auction: Auction) -> Bid:
    """Any legal pass, double, redouble or contract up to one level above the cheapest."""
    options = [Bid.pass_(), Bid.double(), Bid.redouble()]
    for strain in STRAINS:
        bid = contract_above(auction.last_contract(), strain)
        if bid is not None:
            options.append(bid)
            if bid.level < 7:
                options.append(Bid.contract(bid.level + 1, strain))
    return rng.choice([b for b in options if is_legal(b, auction)])


@pytest.mark.parametrize("seed", range(30))
def test_self_play_is_legal_and_repeatable(seed) -> None:
    rng = random.Random(seed)
    hands = _deal(rng)
    vul = VulnerabilityState(we=rng.random() < 0.5, they=rng.random() < 0.5)
    auction = Auction()
    while not auction.is_closed():
        n = len(auction)
        # The opponents of the first seat sometimes make a random call.
        if n % 2 == 1 and rng.random() < 0.3:
            call = _random_call(rng, auction)
        else:
            seat_vul = vul if n % 2 == 0 else vul.flipped()
            first = recommend_with_source(hands[n % 4], auction, vul=seat_vul)
            second = recommend_with_source(hands[n % 4], auction, vul=seat_vul)
            assert is_legal(first.bid, auction)
            assert first.bid == second.bid
            assert first.bid.convention_used == second.bid.convention_used
            call = first.bid
        text = get_explanation_for(parse_bid(call.token), auction)
        assert text and text == get_explanation_for(parse_bid(call.token), auction)
        auction.add(call)
