# file: bridge_bidding/conventions_openings.py
"""
Artificial and preemptive openings: strong 2C, weak twos and three-level
preempts, with responder's replies and opener's continuations.
"""

from __future__ import annotations

from typing import Optional

from .auction_view import ME, PARTNER, AuctionView
from .bid import Bid, contract_above
from .bidding_types import MAJORS, SUIT_NAMES, SUITS
from .config import BiddingConfig
from .convention_registry import Convention, Recognition, when
from .hand import Hand
from .hand_eval import (
    good_suit,
    has_stopper,
    is_balanced,
    longest_suit,
    rule_of_20,
    vul_adjustment,
)


def _partner_opened(view: AuctionView, tokens) -> Optional[Bid]:
    opening = view.opening
    if opening is None or view.opener != PARTNER or view.i_have_acted():
        return None
    if view.opening_index != view.n - 2 or not view.rho_passed():
        return None
    return opening if opening.token in tokens else None


def _my_opening_answered(view: AuctionView, tokens) -> Optional[Bid]:
    """I opened one of `tokens`, partner replied, RHO passed."""
    opening = view.opening
    if opening is None or view.opener != ME or view.opening_index != view.n - 4:
        return None
    if opening.token not in tokens or not view.rho_passed():
        return None
    return view.partner_call


# ---------------------------------------------------------------------------
# Strong 2C
# ---------------------------------------------------------------------------

def recognize_opening(view: AuctionView, config: BiddingConfig) -> Recognition:
    return when(view.opening_index is None, seat=view.n + 1)


def respond_strong_2c(hand, view, config, rec) -> Optional[Bid]:
    minimum = config.opening_bids.strong_2_clubs.min_hcp
    if hand.hcp >= minimum:
        return Bid.contract(2, "C", f"Strong 2C opening: {minimum}+ HCP, artificial and forcing")
    return None


def recognize_strong_2c_response(view: AuctionView, config: BiddingConfig) -> Recognition:
    return when(_partner_opened(view, ("2C",)) is not None)


def respond_strong_2c_response(hand, view, config, rec) -> Optional[Bid]:
    if hand.hcp >= 8:
        for suit in SUITS:
            if hand.length(suit) >= 5 and good_suit(hand, suit):
                level = 2 if suit in MAJORS else 3
                return Bid.contract(
                    level, suit, f"Positive response to 2C: good {SUIT_NAMES[suit]}, 8+ HCP"
                )
        if is_balanced(hand, config):
            return Bid.contract(2, "NT", "Positive response to 2C: balanced, 8+ HCP")
    return Bid.contract(2, "D", "Waiting response to 2C: artificial")


def recognize_strong_2c_rebid(view: AuctionView, config: BiddingConfig) -> Recognition:
    reply = _my_opening_answered(view, ("2C",))
    return when(reply is not None and reply.token == "2D")


def respond_strong_2c_rebid(hand, view, config, rec) -> Optional[Bid]:
    if is_balanced(hand, config):
        if 22 <= hand.hcp <= 24:
            return Bid.contract(2, "NT", "2NT rebid over 2C: 22–24 HCP, balanced")
        if 25 <= hand.hcp <= 27:
            return Bid.contract(3, "NT", "3NT rebid over 2C: 25–27 HCP, balanced")
    suit = longest_suit(hand)
    bid = contract_above(view.last_contract, suit)
    if bid is None:
        return None
    bid.convention_used = f"Strong 2C continuation: natural {SUIT_NAMES[suit]}"
    return bid


# ---------------------------------------------------------------------------
# Weak twos and preempts
# ---------------------------------------------------------------------------

def _weak_two_suit(hand: Hand) -> Optional[str]:
    for suit in ("S", "H", "D"):
        if hand.length(suit) == 6 and hand.suit_hcp(suit) >= 3:
            return suit
    return None


def respond_weak_two(hand, view, config, rec) -> Optional[Bid]:
    if rule_of_20(hand):
        return None
    suit = _weak_two_suit(hand)
    if suit is None:
        return None
    # No side four-card major.
    if any(hand.length(m) >= 4 for m in MAJORS if m != suit):
        return None
    setting = config.preempts.weak_two
    low = setting.min_hcp + vul_adjustment("weak_two", view.vul, config)
    if not (low <= hand.hcp <= setting.max_hcp):
        return None
    return Bid.contract(
        2, suit,
        f"Weak Two opening: 6-card {SUIT_NAMES[suit]}, {low}–{setting.max_hcp} HCP (vul={view.vul.label})",
    )


def respond_three_level_preempt(hand, view, config, rec) -> Optional[Bid]:
    if rule_of_20(hand):
        return None
    long_suits = [s for s in SUITS if hand.length(s) >= 7]
    if not long_suits:
        return None
    suit = long_suits[0]
    low = 5 + vul_adjustment("preempt", view.vul, config)
    if not (low <= hand.hcp <= 10) or hand.suit_hcp(suit) < 3:
        return None
    return Bid.contract(
        3, suit,
        f"Preemptive opening: 7-card {SUIT_NAMES[suit]}, {low}–10 HCP (vul={view.vul.label})",
    )


def recognize_weak_two_response(view: AuctionView, config: BiddingConfig) -> Recognition:
    opening = _partner_opened(view, ("2D", "2H", "2S"))
    return when(opening is not None, suit=opening.strain if opening else None)


def respond_weak_two_response(hand, view, config, rec) -> Optional[Bid]:
    suit = rec.details["suit"]
    support = hand.length(suit)
    if suit in MAJORS and support >= 3 and hand.hcp >= 17:
        return Bid.contract(4, suit, "Raise to game over Weak Two: support and 17+ HCP")
    if hand.hcp >= 16 and support < 3:
        for other in SUITS:
            if other != suit and hand.length(other) >= 5 and good_suit(hand, other):
                bid = contract_above(view.last_contract, other)
                bid.convention_used = f"New suit forcing over Weak Two: 5+ {SUIT_NAMES[other]}, 16+ HCP"
                return bid
        side = [s for s in SUITS if s != suit]
        if suit in MAJORS and is_balanced(hand, config) and all(has_stopper(hand, s) for s in side):
            return Bid.contract(3, "NT", "Natural 3NT over Weak Two Major: balanced, side suits stopped")
    if hand.hcp >= 15 and support >= 2:
        return Bid.contract(2, "NT", "Feature ask over Weak Two: 15+ HCP, asks for an outside ace or king")
    if support >= 3 and 10 <= hand.hcp <= 14:
        return Bid.contract(3, suit, f"Raise over Weak Two: {support}-card support, 10–14 HCP")
    return None


def recognize_feature_answer(view: AuctionView, config: BiddingConfig) -> Recognition:
    reply = _my_opening_answered(view, ("2D", "2H", "2S"))
    ok = reply is not None and reply.token == "2NT"
    return when(ok, suit=view.opening.strain if ok else None)


def respond_feature_answer(hand, view, config, rec) -> Optional[Bid]:
    suit = rec.details["suit"]
    if hand.hcp >= 9:
        for side in ("C", "D", "H", "S"):
            if side == suit:
                continue
            for rank in ("A", "K"):
                if hand.holds(rank, side):
                    return Bid.contract(
                        3, side, f"Feature shown: {rank} of {SUIT_NAMES[side]}, maximum weak two"
                    )
    return Bid.contract(3, suit, f"No feature: rebid 3{suit}, minimum or no outside honor")


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

CONVENTIONS = [
    Convention("strong_2c", "Strong 2 Clubs", recognize_opening, respond_strong_2c, "opening_bids.strong_2_clubs", "openings"),
    Convention("strong_2c_response", "Strong 2 Clubs", recognize_strong_2c_response, respond_strong_2c_response, "opening_bids.strong_2_clubs", "openings"),
    Convention("strong_2c_rebid", "Strong 2 Clubs", recognize_strong_2c_rebid, respond_strong_2c_rebid, "opening_bids.strong_2_clubs", "openings"),
    Convention("weak_two", "Weak 2 Bids", recognize_opening, respond_weak_two, "preempts.weak_two", "openings"),
    Convention("three_level_preempt", "Preempts", recognize_opening, respond_three_level_preempt, "preempts.three_level", "openings"),
    Convention("weak_two_response", "Weak 2 Bids", recognize_weak_two_response, respond_weak_two_response, "preempts.weak_two", "openings"),
    Convention("feature_answer", "Weak 2 Bids", recognize_feature_answer, respond_feature_answer, "preempts.weak_two", "openings"),
]
