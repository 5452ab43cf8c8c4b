# file: bridge_bidding/conventions_majors.py
"""
Raises of partner's one-of-a-major opening (splinters, Jacoby 2NT, Bergen,
Drury) and the opener's rebids over them.
"""

from __future__ import annotations

from typing import Optional

from .auction_view import ME, PARTNER, AuctionView
from .bid import Bid
from .bidding_types import SUIT_NAMES, SUITS
from .config import BiddingConfig
from .convention_registry import NOT_APPLICABLE, Convention, Recognition, applies, when
from .conventions_slam import SLAM_INTEREST_HCP, SPLINTERS
from .hand import Hand

# 3C / 3D meanings for the two Bergen styles.
_BERGEN = {
    "standard": {"C": (7, 10), "D": (11, 12)},
    "reverse": {"C": (11, 12), "D": (7, 10)},
}


def _partner_major(view: AuctionView) -> Optional[str]:
    """Trump suit when partner's 1H/1S opening is the last call before RHO's pass."""
    opening = view.opening
    if opening is None or view.opener != PARTNER or view.i_have_acted():
        return None
    if view.opening_index != view.n - 2 or not view.rho_passed():
        return None
    if opening.level == 1 and opening.strain in ("H", "S"):
        return opening.strain
    return None


def _my_major_answered(view: AuctionView) -> Optional[tuple]:
    """(trump, partner's reply) when I opened 1M and partner answered directly."""
    opening = view.opening
    if opening is None or view.opener != ME or view.opening_index != view.n - 4:
        return None
    if opening.level != 1 or opening.strain not in ("H", "S"):
        return None
    if not view.rho_passed() or not view.lho_call.is_pass:
        return None
    reply = view.partner_call
    if reply is None or not reply.is_contract:
        return None
    return opening.strain, reply


def _slam_interest(hand: Hand, config: BiddingConfig) -> bool:
    # Partner's game-forcing raise promises about 13.
    return config.slam_bidding.control_showing_cue_bids.enabled and hand.hcp + 13 >= SLAM_INTEREST_HCP


# ---------------------------------------------------------------------------
# Responder
# ---------------------------------------------------------------------------

def recognize_major_raise(view: AuctionView, config: BiddingConfig) -> Recognition:
    trump = _partner_major(view)
    return when(trump is not None and not view.is_passed_hand(), trump=trump)


def respond_splinter(hand, view, config, rec) -> Optional[Bid]:
    trump = rec.details["trump"]
    if hand.length(trump) < 4 or hand.hcp < 13:
        return None
    shortest = None
    for token, suit in SPLINTERS[trump].items():
        if hand.length(suit) <= 1 and (shortest is None or hand.length(suit) < shortest[1]):
            shortest = (token, hand.length(suit))
    if shortest is None:
        return None
    token = shortest[0]
    return Bid.contract(int(token[0]), token[1], "Splinter Bid")


def respond_jacoby_2nt(hand, view, config, rec) -> Optional[Bid]:
    trump = rec.details["trump"]
    if hand.length(trump) >= 4 and hand.hcp >= 13:
        return Bid.contract(2, "NT", "Jacoby 2NT")
    return None


def respond_bergen(hand, view, config, rec) -> Optional[Bid]:
    trump = rec.details["trump"]
    if hand.length(trump) < 4 or hand.hcp >= 13:
        return None
    style = config.responses.bergen_raises.style
    for strain, (lo, hi) in _BERGEN[style].items():
        if lo <= hand.hcp <= hi:
            return Bid.contract(
                3, strain, f"Bergen Raise: {lo}–{hi} HCP, 4-card {SUIT_NAMES[trump]} support"
            )
    return Bid.contract(3, trump, "Bergen Raise: preemptive, 0–6 HCP, 4-card support")


def recognize_drury(view: AuctionView, config: BiddingConfig) -> Recognition:
    trump = _partner_major(view)
    ok = trump is not None and view.is_passed_hand() and view.opening_index >= 2
    return when(ok, trump=trump)


def respond_drury(hand, view, config, rec) -> Optional[Bid]:
    if hand.length(rec.details["trump"]) >= 3 and 10 <= hand.hcp <= 12:
        return Bid.contract(2, "C", "Drury")
    return None


# ---------------------------------------------------------------------------
# Opener
# ---------------------------------------------------------------------------

def recognize_drury_rebid(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _my_major_answered(view)
    if found is None or view.opening_index < 2:
        return NOT_APPLICABLE
    trump, reply = found
    return when(reply.token == "2C" and view.partner_is_passed_hand(), trump=trump)


def respond_drury_rebid(hand, view, config, rec) -> Optional[Bid]:
    trump = rec.details["trump"]
    if hand.hcp <= 11:
        return Bid.contract(2, "D", "Drury rebid: sub-minimum opening")
    if hand.hcp >= 15:
        return Bid.contract(4, trump, "Drury rebid: full opening, bid game")
    return Bid.contract(2, trump, "Drury rebid: minimum full opening")


def recognize_jacoby_2nt_rebid(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _my_major_answered(view)
    return when(found is not None and found[1].token == "2NT", trump=found[0] if found else None)


def respond_jacoby_2nt_rebid(hand, view, config, rec) -> Optional[Bid]:
    trump = rec.details["trump"]
    if _slam_interest(hand, config):
        return None
    for suit in SUITS:
        if suit != trump and hand.length(suit) <= 1:
            return Bid.contract(3, suit, f"Jacoby 2NT rebid: shortness in {SUIT_NAMES[suit]}")
    if hand.hcp >= 18:
        return Bid.contract(3, trump, "Jacoby 2NT rebid: 18+ HCP, no shortness")
    if hand.hcp >= 15:
        return Bid.contract(3, "NT", "Jacoby 2NT rebid: 15–17 HCP, no shortness")
    return Bid.contract(4, trump, "Jacoby 2NT rebid: minimum, sign off in game")


def recognize_splinter_rebid(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _my_major_answered(view)
    ok = found is not None and found[1].token in SPLINTERS[found[0]]
    return when(ok, trump=found[0] if found else None)


def respond_splinter_rebid(hand, view, config, rec) -> Optional[Bid]:
    if _slam_interest(hand, config):
        return None
    return Bid.contract(4, rec.details["trump"], "Sign-off after splinter: no slam interest")


def recognize_bergen_rebid(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _my_major_answered(view)
    if found is None:
        return NOT_APPLICABLE
    trump, reply = found
    if reply.level != 3 or reply.strain not in ("C", "D", trump):
        return NOT_APPLICABLE
    if reply.strain == trump:
        return applies(trump=trump, low=0)
    lo, _ = _BERGEN[config.responses.bergen_raises.style][reply.strain]
    return applies(trump=trump, low=lo)


def respond_bergen_rebid(hand, view, config, rec) -> Optional[Bid]:
    trump, low = rec.details["trump"], rec.details["low"]
    # Game needs about 25 combined; the preemptive raise only plays game with a big hand.
    need = 18 if low == 0 else 25 - low
    if hand.hcp >= need:
        return Bid.contract(4, trump, "Bergen continuation: game values opposite the raise")
    if low == 0:
        return Bid.pass_("Bergen continuation: no game opposite the raise")
    return Bid.contract(3, trump, "Bergen continuation: sign off at the three level")


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

SPLINTER = "responses.splinter_bids"
JACOBY_2NT = "responses.jacoby_2nt"
BERGEN = "responses.bergen_raises"
DRURY = "responses.drury"

CONVENTIONS = [
    Convention("splinter", "Splinter Bids", recognize_major_raise, respond_splinter, SPLINTER, "majors"),
    Convention("jacoby_2nt", "Jacoby 2NT", recognize_major_raise, respond_jacoby_2nt, JACOBY_2NT, "majors"),
    Convention("bergen", "Bergen Raises", recognize_major_raise, respond_bergen, BERGEN, "majors"),
    Convention("drury", "Drury", recognize_drury, respond_drury, DRURY, "majors"),
    Convention("drury_rebid", "Drury", recognize_drury_rebid, respond_drury_rebid, DRURY, "majors"),
    Convention("jacoby_2nt_rebid", "Jacoby 2NT", recognize_jacoby_2nt_rebid, respond_jacoby_2nt_rebid, JACOBY_2NT, "majors"),
    Convention("splinter_rebid", "Splinter Bids", recognize_splinter_rebid, respond_splinter_rebid, SPLINTER, "majors"),
    Convention("bergen_rebid", "Bergen Raises", recognize_bergen_rebid, respond_bergen_rebid, BERGEN, "majors"),
]
