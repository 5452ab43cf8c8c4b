# file: bridge_bidding/conventions_competitive.py
"""
Two-suited overcalls (Michaels, Unusual NT) and competitive raises:
responder's cue-bid raise and advancer's raises of partner's overcall.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .auction_view import LHO, PARTNER, RHO, AuctionView
from .bid import Bid, contract_above
from .bidding_types import MAJORS, MINORS, SUIT_NAMES, STRAIN_ORDER, Suit
from .config import BiddingConfig
from .convention_registry import NOT_APPLICABLE, Convention, Recognition, applies, when
from .hand_eval import longest_suit, vul_adjustment


def _their_one_level_opening(view: AuctionView, direct_only: bool) -> Optional[Suit]:
    """Opponents' 1-suit opening that I can act over now."""
    opening = view.opening
    if opening is None or view.opener not in (LHO, RHO) or view.i_have_acted():
        return None
    if opening.level != 1 or opening.strain == "NT":
        return None
    o = view.opening_index
    if o == view.n - 1:
        return opening.strain
    # Balancing: 1X - P - P.
    if not direct_only and o == view.n - 3 and view.trailing_passes() == 2:
        return opening.strain
    return None


def _cue_of(view: AuctionView, suit: Suit) -> Optional[Bid]:
    return contract_above(view.last_contract, suit)


def _partner_two_suiter(view: AuctionView, test) -> Optional[Tuple[Bid, Bid]]:
    """(opening, partner's call) when partner's direct overcall passes `test` and RHO passed."""
    opening = view.opening
    if opening is None or view.opener != LHO or view.opening_index != view.n - 3:
        return None
    call = view.partner_call
    if call is None or not view.rho_passed() or not test(opening, call):
        return None
    return opening, call


# ---------------------------------------------------------------------------
# Michaels
# ---------------------------------------------------------------------------

def recognize_michaels(view: AuctionView, config: BiddingConfig) -> Recognition:
    suit = _their_one_level_opening(view, config.competitive.michaels.direct_only)
    return when(suit is not None, their=suit)


def respond_michaels(hand, view, config, rec) -> Optional[Bid]:
    their = rec.details["their"]
    if hand.hcp < config.competitive.michaels.min_hcp:
        return None
    if their in MINORS:
        if hand.length("H") >= 5 and hand.length("S") >= 5:
            bid = _cue_of(view, their)
            bid.convention_used = "Michaels Cue Bid: 5-5 in the majors"
            return bid
        return None
    other = "S" if their == "H" else "H"
    minor = longest_suit(hand, MINORS)
    if hand.length(other) >= 5 and hand.length(minor) >= 5:
        bid = _cue_of(view, their)
        bid.convention_used = f"Michaels Cue Bid: 5+ {SUIT_NAMES[other]} and a 5-card minor"
        return bid
    return None


def _is_michaels(opening: Bid, call: Bid) -> bool:
    return call.is_contract and call.level == 2 and call.strain == opening.strain and opening.level == 1


def recognize_michaels_advance(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _partner_two_suiter(view, _is_michaels)
    if found is None:
        return NOT_APPLICABLE
    their = found[0].strain
    return applies(their=their)


def respond_michaels_advance(hand, view, config, rec) -> Optional[Bid]:
    their = rec.details["their"]
    if their in MINORS:
        major = "S" if hand.length("S") > hand.length("H") else "H"
    else:
        major = "S" if their == "H" else "H"
        if hand.length(major) < 3:
            return Bid.contract(2, "NT", "Michaels advance: 2NT asks for the minor")
    fit = hand.length(major)
    if fit >= 4 and hand.hcp >= 13:
        return Bid.contract(4, major, f"Michaels advance: game in {SUIT_NAMES[major]}")
    bid = contract_above(view.last_contract, major)
    if bid is None:
        return None
    bid.convention_used = f"Michaels advance: prefer {SUIT_NAMES[major]}"
    return bid


def recognize_michaels_minor_answer(view: AuctionView, config: BiddingConfig) -> Recognition:
    mine = view.my_last_call
    opening = view.opening
    ok = (
        opening is not None and view.opener == RHO
        and view.opening_index == view.n - 5
        and mine is not None and _is_michaels(opening, mine) and opening.strain in MAJORS
        and view.partner_call.token == "2NT"
        and view.rho_passed()
    )
    return when(ok)


def respond_michaels_minor_answer(hand, view, config, rec) -> Optional[Bid]:
    minor = longest_suit(hand, MINORS)
    return Bid.contract(3, minor, f"Michaels: shows the {SUIT_NAMES[minor]}")


# ---------------------------------------------------------------------------
# Unusual notrump
# ---------------------------------------------------------------------------

def _two_lowest_unbid(their: Suit) -> List[Suit]:
    order = [s for s in ("C", "D", "H", "S") if s != their]
    return order[:2]


def recognize_unusual_nt(view: AuctionView, config: BiddingConfig) -> Recognition:
    setting = config.notrump_defenses.unusual_nt
    their = _their_one_level_opening(view, setting.direct)
    if their is None:
        return NOT_APPLICABLE
    if their in MINORS and not setting.over_minors:
        return NOT_APPLICABLE
    if view.is_passed_hand() and not setting.passed_hand:
        return NOT_APPLICABLE
    return applies(suits=_two_lowest_unbid(their))


def respond_unusual_nt(hand, view, config, rec) -> Optional[Bid]:
    first, second = rec.details["suits"]
    if hand.length(first) < 5 or hand.length(second) < 5:
        return None
    if hand.hcp < 8 + vul_adjustment("overcall", view.vul, config):
        return None
    return Bid.contract(
        2, "NT",
        f"Unusual 2NT: 5-5 in {SUIT_NAMES[first]} and {SUIT_NAMES[second]} (vul={view.vul.label})",
    )


def recognize_unusual_nt_advance(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _partner_two_suiter(
        view, lambda opening, call: call.token == "2NT" and opening.level == 1 and opening.strain != "NT"
    )
    if found is None:
        return NOT_APPLICABLE
    return applies(suits=_two_lowest_unbid(found[0].strain))


def respond_unusual_nt_advance(hand, view, config, rec) -> Optional[Bid]:
    suits = rec.details["suits"]
    # Longer of partner's suits; equal length prefers the higher one.
    pick = max(suits, key=lambda s: (hand.length(s), STRAIN_ORDER[s]))
    if pick in MAJORS and hand.length(pick) >= 4 and hand.hcp >= 13:
        return Bid.contract(4, pick, f"Unusual NT advance: game in {SUIT_NAMES[pick]}")
    bid = contract_above(view.last_contract, pick)
    if bid is None:
        return None
    bid.convention_used = f"Unusual NT advance: prefer {SUIT_NAMES[pick]}"
    return bid


# ---------------------------------------------------------------------------
# Competitive raises
# ---------------------------------------------------------------------------

def recognize_cue_bid_raise(view: AuctionView, config: BiddingConfig) -> Recognition:
    opening = view.opening
    overcall = view.rho_call
    ok = (
        opening is not None and view.opener == PARTNER
        and view.opening_index == view.n - 2
        and opening.level == 1 and opening.strain != "NT"
        and overcall is not None and overcall.is_contract and overcall.strain != "NT"
        and not view.i_have_acted()
    )
    if not ok:
        return NOT_APPLICABLE
    return applies(trump=opening.strain, their=overcall.strain)


def respond_cue_bid_raise(hand, view, config, rec) -> Optional[Bid]:
    trump, their = rec.details["trump"], rec.details["their"]
    if hand.length(trump) < 4 or hand.hcp < 10:
        return None
    bid = _cue_of(view, their)
    if bid is None:
        return None
    bid.convention_used = f"Cue Bid Raise: {hand.length(trump)}-card support, 10+ HCP"
    return bid


def recognize_advancer_raise(view: AuctionView, config: BiddingConfig) -> Recognition:
    opening = view.opening
    call = view.partner_call
    ok = (
        opening is not None and view.opener in (LHO, RHO) and opening.strain != "NT"
        and call is not None and call.is_contract and call.strain != "NT"
        and call.strain not in view.their_suits()
        and len(view.actions_by(PARTNER)) == 1
        and not view.i_have_acted()
        and view.rho_passed()
    )
    if not ok:
        return NOT_APPLICABLE
    return applies(trump=call.strain, their=opening.strain)


def respond_advancer_raise(hand, view, config, rec) -> Optional[Bid]:
    trump, their = rec.details["trump"], rec.details["their"]
    rules = config.competitive.advancer_raises
    fit = hand.length(trump)
    last = view.last_contract
    if fit >= rules.cuebid_min_support and hand.hcp >= rules.cuebid_min_hcp:
        bid = contract_above(last, their)
        if bid is not None:
            bid.convention_used = "Advancer cue bid raise: limit raise or better"
            return bid
    lo, hi = rules.jump_range
    if fit >= rules.jump_min_support and lo <= hand.hcp <= hi:
        simple = contract_above(last, trump)
        if simple is not None and simple.level < 7:
            return Bid.contract(simple.level + 1, trump, f"Advancer jump raise: {fit}-card support, {lo}–{hi} HCP")
    lo, hi = rules.simple_range
    if fit >= rules.simple_min_support and lo <= hand.hcp <= hi:
        bid = contract_above(last, trump)
        if bid is not None:
            bid.convention_used = f"Advancer simple raise: {fit}-card support, {lo}–{hi} HCP"
            return bid
    return None


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

MICHAELS = "competitive.michaels"
UNUSUAL_NT = "notrump_defenses.unusual_nt"

CONVENTIONS = [
    Convention("michaels", "Michaels", recognize_michaels, respond_michaels, MICHAELS, "competitive"),
    Convention("michaels_advance", "Michaels", recognize_michaels_advance, respond_michaels_advance, MICHAELS, "competitive"),
    Convention("michaels_minor_answer", "Michaels", recognize_michaels_minor_answer, respond_michaels_minor_answer, MICHAELS, "competitive"),
    Convention("unusual_nt", "Unusual NT", recognize_unusual_nt, respond_unusual_nt, UNUSUAL_NT, "competitive"),
    Convention("unusual_nt_advance", "Unusual NT", recognize_unusual_nt_advance, respond_unusual_nt_advance, UNUSUAL_NT, "competitive"),
    Convention("cue_bid_raise", "Cue Bid Raises", recognize_cue_bid_raise, respond_cue_bid_raise, "competitive.cue_bid_raises", "competitive"),
    Convention("advancer_raise", "Advancer Raises", recognize_advancer_raise, respond_advancer_raise, "competitive.advancer_raises", "competitive"),
]
