# file: bridge_bidding/conventions_doubles.py
"""
Competitive doubles.

Only one kind of double can come out of a single decision. Where two kinds
could both read the same auction, the order in the phase precedence tables
is: takeout, negative, responsive, reopening.
"""

from __future__ import annotations

from typing import List, Optional

from .auction_view import LHO, ME, PARTNER, RHO, AuctionView
from .bid import Bid, contract_above, parse_bid
from .bidding_types import MAJORS, SUIT_NAMES, SUITS, Suit
from .config import BiddingConfig
from .convention_registry import NOT_APPLICABLE, Convention, Recognition, applies
from .hand_eval import has_stopper, is_balanced


def _names(suits: List[Suit]) -> str:
    return "/".join(SUIT_NAMES[s] for s in suits)


def _others(suits: List[Suit]) -> List[Suit]:
    return [s for s in SUITS if s not in suits]


# ---------------------------------------------------------------------------
# Takeout
# ---------------------------------------------------------------------------

def recognize_takeout_double(view: AuctionView, config: BiddingConfig) -> Recognition:
    last = view.last_contract
    ok = (
        last is not None and view.last_contract_index == view.n - 1
        and view.last_contract_by == RHO
        and last.strain != "NT"
        and not view.i_have_acted() and not view.partner_has_acted()
    )
    if not ok:
        return NOT_APPLICABLE
    return applies(their=view.their_suits())


def respond_takeout_double(hand, view, config, rec) -> Optional[Bid]:
    their = rec.details["their"]
    unbid = _others(their)
    last = view.last_contract
    # Balanced 15-18 with a stopper overcalls 1NT instead.
    if (
        last.level == 1 and 15 <= hand.hcp <= 18 and is_balanced(hand, config)
        and all(has_stopper(hand, s) for s in their)
    ):
        return None
    if hand.hcp >= 17:
        return Bid.double(f"Takeout Double: {hand.hcp} HCP, too strong for a simple overcall")
    minimum = 11 if config.general.relaxed_takeout_doubles else 12
    if hand.hcp < minimum:
        return None
    if any(hand.length(s) > 2 for s in their) or any(hand.length(s) < 3 for s in unbid):
        return None
    if any(hand.length(m) >= 5 for m in unbid if m in MAJORS):
        return None
    return Bid.double(
        f"Takeout Double: short in {_names(their)}, {minimum}+ HCP, support for the unbid suits"
    )


# ---------------------------------------------------------------------------
# Negative
# ---------------------------------------------------------------------------

def recognize_negative_double(view: AuctionView, config: BiddingConfig) -> Recognition:
    opening = view.opening
    overcall = view.rho_call
    ok = (
        opening is not None and view.opener == PARTNER
        and view.opening_index == view.n - 2
        and opening.level == 1 and opening.strain != "NT"
        and overcall is not None and overcall.is_contract and overcall.strain != "NT"
        and overcall.level <= config.competitive.negative_doubles.thru_level
        and not view.i_have_acted()
    )
    if not ok:
        return NOT_APPLICABLE
    return applies(level=overcall.level, unbid=view.unbid_suits())


def respond_negative_double(hand, view, config, rec) -> Optional[Bid]:
    level, unbid = rec.details["level"], rec.details["unbid"]
    minimum = config.competitive.negative_doubles.min_hcp(level)
    if hand.hcp < minimum:
        return None
    majors = [m for m in unbid if m in MAJORS]
    if len(majors) == 2:
        shows = all(hand.length(m) >= 4 for m in majors)
    elif len(majors) == 1:
        major = majors[0]
        n = hand.length(major)
        # A five-card major that fits at the one level is simply bid.
        shows = n == 4 or (n == 5 and contract_above(view.rho_call, major).level >= 2)
    else:
        shows = len(unbid) >= 2 and all(hand.length(s) >= 4 for s in unbid)
    if not shows:
        return None
    return Bid.double(f"Negative Double: {minimum}+ HCP, 4+ in {_names(majors or unbid)}")


# ---------------------------------------------------------------------------
# Responsive
# ---------------------------------------------------------------------------

def recognize_responsive_double(view: AuctionView, config: BiddingConfig) -> Recognition:
    opening = view.opening
    partner = view.partner_call
    raise_ = view.rho_call
    setting = config.competitive.responsive_doubles
    ok = (
        opening is not None and view.opener == LHO
        and view.opening_index == view.n - 3
        and opening.strain != "NT"
        and partner is not None and partner.is_double
        and raise_ is not None and raise_.is_contract and raise_.strain == opening.strain
        and raise_.level <= setting.thru_level
    )
    if not ok:
        return NOT_APPLICABLE
    return applies(their=opening.strain)


def respond_responsive_double(hand, view, config, rec) -> Optional[Bid]:
    their = rec.details["their"]
    minimum = config.competitive.responsive_doubles.min_strength
    if hand.hcp < minimum:
        return None
    unbid = _others([their])
    if any(hand.length(m) >= 5 for m in unbid if m in MAJORS):
        return None
    if their in MAJORS and any(hand.length(m) >= 4 for m in unbid if m in MAJORS):
        return None
    four_card = [s for s in unbid if hand.length(s) >= 4]
    if len(four_card) < 2:
        return None
    return Bid.double(f"Responsive Double: {minimum}+ HCP, 4+ in {_names(four_card)}")


# ---------------------------------------------------------------------------
# Reopening
# ---------------------------------------------------------------------------

def recognize_reopening_double(view: AuctionView, config: BiddingConfig) -> Recognition:
    last = view.last_contract
    ok = (
        last is not None and last.strain != "NT"
        and view.last_contract_by == LHO
        and view.last_contract_index == view.n - 3
        and view.trailing_passes() == 2
        and not view.actions_by(PARTNER)
    )
    if not ok:
        return NOT_APPLICABLE
    return applies(their=last.strain)


def respond_reopening_double(hand, view, config, rec) -> Optional[Bid]:
    their = rec.details["their"]
    if hand.hcp < 8 or hand.length(their) > 2:
        return None
    side = [s for s in _others([their]) if hand.length(s) >= 3]
    if len(side) < 2:
        return None
    return Bid.double(
        f"Reopening Double: {hand.hcp} HCP, short in {SUIT_NAMES[their]}, 3+ in {_names(side)}"
    )


# ---------------------------------------------------------------------------
# Support
# ---------------------------------------------------------------------------

def recognize_support_double(view: AuctionView, config: BiddingConfig) -> Recognition:
    opening = view.opening
    partner = view.partner_call
    intervention = view.rho_call
    ok = (
        opening is not None and view.opener == ME
        and view.opening_index == view.n - 4
        and opening.level == 1 and opening.strain != "NT"
        and partner is not None and partner.is_contract
        and partner.strain not in ("NT", opening.strain)
        and intervention is not None and intervention.is_contract
    )
    if not ok:
        return NOT_APPLICABLE
    ceiling = parse_bid(config.competitive.support_doubles.thru)
    if intervention.rank > ceiling.rank:
        return NOT_APPLICABLE
    return applies(trump=partner.strain)


def respond_support_double(hand, view, config, rec) -> Optional[Bid]:
    trump = rec.details["trump"]
    if hand.length(trump) != 3:
        return None
    return Bid.double(f"Support Double: exactly 3-card {SUIT_NAMES[trump]} support")


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

CONVENTIONS = [
    Convention("takeout_double", "Takeout Doubles", recognize_takeout_double, respond_takeout_double, "competitive.takeout_doubles", "doubles"),
    Convention("negative_double", "Negative Doubles", recognize_negative_double, respond_negative_double, "competitive.negative_doubles", "doubles"),
    Convention("responsive_double", "Responsive Doubles", recognize_responsive_double, respond_responsive_double, "competitive.responsive_doubles", "doubles"),
    Convention("reopening_double", "Reopening Doubles", recognize_reopening_double, respond_reopening_double, "competitive.reopening_doubles", "doubles"),
    Convention("support_double", "Support Doubles", recognize_support_double, respond_support_double, "competitive.support_doubles", "doubles"),
]
