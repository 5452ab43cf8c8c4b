# file: tests/test_session.py
from __future__ import annotations

import pytest

from conftest import STAYMAN_10, VOID_SPADES_9

from bridge_bidding.bidding_types import AuctionClosedError, BiddingError, SeatError
from bridge_bidding.session import BiddingSession

WEAK_TWO_SPADES = "KQJ432 32 432 32"


def test_start_session_validates_inputs() -> None:
    session = BiddingSession()
    with pytest.raises(SeatError):
        session.start_session("X")
    with pytest.raises(BiddingError):
        session.start_session("S", board_vul="NorthSouth")


def test_worked_example_through_a_session(make_session) -> None:
    session = make_session(["1S", "P"], our_seat="S", dealer="N")
    bid = session.get_bid(VOID_SPADES_9)
    assert bid.token == "2H"
    assert session.explain(bid) == bid.convention_used
    # The session's auction is untouched until the call is added.
    assert len(session.auction) == 2
    session.add_call(bid)
    assert session.auction.bids[-1].seat == "S"


def test_explain_a_call_already_made(make_session) -> None:
    session = make_session(["1NT", "P", "2C", "P"], dealer="N")
    assert session.explain("2C", index=2) == "Stayman: asks opener for a 4-card major"
    assert session.explain(session.auction.bids[2]) == "Stayman: asks opener for a 4-card major"


def test_board_vulnerability_follows_the_seat_to_act(make_session) -> None:
    session = make_session(["P", "P"], dealer="N", board_vul="NS")
    # South is next: vulnerable against not.
    assert session.vulnerability_for_next().label == "unfav"
    session.add_call("P")
    assert session.vulnerability_for_next().label == "fav"


def test_weak_two_respects_seat_vulnerability(make_session) -> None:
    unfav = make_session(dealer="N", board_vul="NS")
    assert unfav.get_bid(WEAK_TWO_SPADES).is_pass

    fav = make_session(dealer="N", board_vul="EW")
    bid = fav.get_bid(WEAK_TWO_SPADES)
    assert bid.token == "2S"
    assert bid.convention_used.endswith("(vul=fav)")


def test_legality_check(make_session) -> None:
    session = make_session(["1S", "P", "2H"])
    assert session.is_legal("2S")
    assert not session.is_legal("2D")
    assert session.is_legal("X")
    assert not session.is_legal("XX")


def test_closed_auction_has_no_recommendation(make_session) -> None:
    session = make_session(["1NT", "P", "P", "P"])
    with pytest.raises(AuctionClosedError):
        session.get_bid(STAYMAN_10)


def test_add_call_starts_a_session_when_needed() -> None:
    session = BiddingSession()
    session.add_call("1NT")
    session.add_call("P")
    assert session.auction.tokens() == ["1NT", "PASS"]
    assert session.get_bid(STAYMAN_10).token == "2C"


def test_reseat_applies_dealer_after_the_fact(make_session) -> None:
    session = make_session(["1S", "P"])
    session.reseat("E")
    assert [b.seat for b in session.auction] == ["E", "S"]


def test_new_config_takes_effect_immediately(make_session, config_with) -> None:
    session = make_session(["1NT", "P"])
    assert session.get_bid(STAYMAN_10).token == "2C"
    session.config = config_with({"notrump_responses": {"stayman": False}})
    assert session.get_bid(STAYMAN_10).token == "3NT"
