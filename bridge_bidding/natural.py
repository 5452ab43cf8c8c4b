# file: bridge_bidding/natural.py
"""
Natural valuation rules, consulted when no convention produces a call.

Every entry point returns a Bid; Pass is the floor. The rules are grouped by
auction phase the same way the convention precedence tables are, and each
group tries its candidates from most to least specific.
"""

from __future__ import annotations

from typing import List, Optional

from .auction_view import LHO, ME, PARTNER, RHO, AuctionView
from .bid import Bid, contract_above
from .bidding_types import (
    MAJORS,
    MINORS,
    PHASE_ADVANCING,
    PHASE_CONTINUING,
    PHASE_OPENING,
    PHASE_OVERCALLING,
    PHASE_RESPONDING,
    STRAIN_ORDER,
    SUIT_NAMES,
    SUITS,
    Strain,
    Suit,
)
from .config import BiddingConfig
from .hand import Hand
from .hand_eval import (
    best_minor,
    good_suit,
    has_stopper,
    is_balanced,
    longest_suit,
    rule_of_20,
    suits_with_length,
    vul_adjustment,
)

GAME_HCP = 25

# Notrump responses to a minor opening: (1NT, 2NT, 3NT) HCP bands.
_NT_OVER_MINOR = {
    "classic": ((6, 10), (13, 15), (16, 17)),
    "wide": ((6, 11), (12, 14), (15, 17)),
}


def natural_call(hand: Hand, view: AuctionView, config: BiddingConfig, phase: str) -> Bid:
    rule = _BY_PHASE[phase]
    bid = rule(hand, view, config)
    return bid if bid is not None else Bid.pass_("Pass: no natural action")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _cheapest(view: AuctionView, strain: Strain, tag: str) -> Optional[Bid]:
    bid = contract_above(view.last_contract, strain)
    if bid is not None:
        bid.convention_used = tag
    return bid


def _at(view: AuctionView, level: int, strain: Strain, tag: str) -> Optional[Bid]:
    """`level` of `strain` if that is still a legal contract."""
    if not (1 <= level <= 7):
        return None
    bid = Bid.contract(level, strain, tag)
    return bid if bid.outranks(view.last_contract) else None


def _game_level(strain: Strain) -> int:
    return {"C": 5, "D": 5, "H": 4, "S": 4, "NT": 3}[strain]


def _pick_suit(hand: Hand, candidates: List[Suit]) -> Optional[Suit]:
    """Longest candidate; 5-5 or longer ties bid the higher suit, 4-4 bids up the line."""
    if not candidates:
        return None
    top = max(hand.length(s) for s in candidates)
    tied = [s for s in candidates if hand.length(s) == top]
    if top >= 5:
        return max(tied, key=lambda s: STRAIN_ORDER[s])
    return min(tied, key=lambda s: STRAIN_ORDER[s])


def _stoppers(hand: Hand, suits: List[Suit]) -> bool:
    return all(has_stopper(hand, s) for s in suits)


def _game_reached(view: AuctionView) -> bool:
    last = view.last_contract
    return (
        last is not None and view.last_contract_ours()
        and last.level >= _game_level(last.strain)
    )


# ---------------------------------------------------------------------------
# Opening
# ---------------------------------------------------------------------------

def opening_call(hand: Hand, view: AuctionView, config: BiddingConfig) -> Optional[Bid]:
    natural = config.opening_bids.natural
    if is_balanced(hand, config):
        lo, hi = natural.one_notrump_range
        if lo <= hand.hcp <= hi:
            return Bid.contract(1, "NT", f"1NT opening: {lo}–{hi} HCP, balanced")
        lo, hi = natural.two_notrump_range
        if lo <= hand.hcp <= hi:
            return Bid.contract(2, "NT", f"2NT opening: {lo}–{hi} HCP, balanced")
    if hand.hcp < natural.min_hcp and not rule_of_20(hand):
        light = _light_third_seat(hand, view, config)
        if light is not None:
            return light
        return Bid.pass_("Pass: below opening strength")
    spades, hearts = hand.length("S"), hand.length("H")
    if max(spades, hearts) >= 5:
        major = "S" if spades >= hearts else "H"
        return Bid.contract(1, major, f"1{major} opening: 5+ {SUIT_NAMES[major]}")
    minor = best_minor(hand)
    return Bid.contract(1, minor, f"1{minor} opening: best minor")


def _light_third_seat(hand: Hand, view: AuctionView, config: BiddingConfig) -> Optional[Bid]:
    """After two passes, a good five-card major opens up to two points light."""
    if not config.general.passed_hand_variations or view.n != 2:
        return None
    if hand.hcp < config.opening_bids.natural.min_hcp - 2:
        return None
    majors = [s for s in MAJORS if hand.length(s) >= 5 and good_suit(hand, s)]
    suit = _pick_suit(hand, majors)
    if suit is None:
        return None
    return Bid.contract(1, suit, f"Light third-seat opening: good 5+ {SUIT_NAMES[suit]}")


# ---------------------------------------------------------------------------
# Responding
# ---------------------------------------------------------------------------

def responding_call(hand: Hand, view: AuctionView, config: BiddingConfig) -> Optional[Bid]:
    opening = view.opening
    interference = not view.rho_passed()
    if opening.strain == "NT":
        if interference:
            return _over_nt_interference(hand, view)
        return _answer_notrump(hand, view, opening.level, "response")
    if opening.level >= 2:
        return _over_preempt(hand, view, opening.strain)
    if interference:
        return _competitive_response(hand, view, config, opening.strain)
    return _one_level_response(hand, view, config, opening.strain)


def _answer_notrump(hand: Hand, view: AuctionView, level: int, role: str) -> Optional[Bid]:
    """Quantitative notrump raises opposite partner's natural 1NT/2NT."""
    if level == 1:
        for suit in MAJORS:
            if hand.length(suit) >= 6 and hand.hcp >= 10:
                return _at(view, 4, suit, f"Game in a 6-card {SUIT_NAMES[suit]} suit opposite 1NT")
        if 8 <= hand.hcp <= 9:
            return _at(view, 2, "NT", f"2NT {role} to 1NT: 8–9 HCP, invitational")
        if 10 <= hand.hcp <= 15:
            return _at(view, 3, "NT", f"3NT {role} to 1NT: 10–15 HCP, game values")
        if 16 <= hand.hcp <= 17:
            return _at(view, 4, "NT", f"Quantitative 4NT {role} to 1NT: 16–17 HCP")
        if hand.hcp >= 18:
            return _at(view, 6, "NT", f"6NT {role} to 1NT: 18+ HCP")
        return Bid.pass_("Pass: no game opposite 1NT")
    if level == 2:
        if hand.hcp >= 4:
            return _at(view, 3, "NT", f"3NT {role} to 2NT: 4+ HCP")
        return Bid.pass_("Pass: fewer than 4 HCP opposite 2NT")
    return Bid.pass_("Pass: partner has placed the contract")


def _over_nt_interference(hand: Hand, view: AuctionView) -> Optional[Bid]:
    their = view.rho_call
    if their.is_contract:
        if hand.hcp >= 10 and their.strain != "NT" and has_stopper(hand, their.strain):
            return _at(view, 3, "NT", "3NT over interference: game values, stopper in their suit")
        for suit in SUITS:
            if hand.length(suit) >= 5 and STRAIN_ORDER[suit] > STRAIN_ORDER[their.strain] and their.level == 2:
                return _at(
                    view, 2, suit,
                    f"Competitive response over 1NT interference: 5+ {SUIT_NAMES[suit]}",
                )
    return Bid.pass_("Pass: nothing to add over the interference")


def _over_preempt(hand: Hand, view: AuctionView, suit: Suit) -> Optional[Bid]:
    if view.opening.token == "2C":
        return None
    if suit in MAJORS and hand.length(suit) >= 3 and hand.hcp >= 14:
        return _at(view, 4, suit, f"Game raise of partner's preempt: {hand.hcp} HCP, support")
    return Bid.pass_("Pass: nothing to add to partner's preempt")


def _raise(view: AuctionView, trump: Suit, hcp: int, support: int) -> Optional[Bid]:
    if 6 <= hcp <= 9:
        return _at(view, 2, trump, f"Simple raise: 6–9 HCP, {support}-card support")
    if 10 <= hcp <= 12:
        return _at(view, 3, trump, f"Limit raise: 10–12 HCP, {support}-card support")
    if hcp >= 13 and trump in MAJORS:
        return _at(view, 4, trump, f"Game raise: 13+ HCP, {support}-card support")
    return None


def _one_level_response(hand: Hand, view: AuctionView, config: BiddingConfig, opened: Suit) -> Optional[Bid]:
    hcp = hand.hcp
    if hcp < 6:
        return Bid.pass_("Pass: fewer than 6 HCP")
    support = hand.length(opened)
    others = [s for s in SUITS if s != opened]

    if opened in MAJORS and support >= 3:
        bid = _raise(view, opened, hcp, support)
        if bid is not None:
            return bid

    # New suit at the one level: a major over a minor takes priority.
    one_level = [s for s in others if STRAIN_ORDER[s] > STRAIN_ORDER[opened] and hand.length(s) >= 4]
    if opened in MINORS:
        majors = [s for s in one_level if s in MAJORS]
        if majors:
            one_level = majors
    suit = _pick_suit(hand, one_level)
    if suit is not None:
        return _at(view, 1, suit, f"New suit at 1-level: {hand.length(suit)}+ {SUIT_NAMES[suit]}, 6+ HCP")

    if opened in MINORS:
        needed = 4 if opened == "D" else 5
        if support >= needed and hcp <= 12:
            bid = _raise(view, opened, hcp, support)
            if bid is not None:
                return bid

    two_level = [
        s for s in others
        if STRAIN_ORDER[s] < STRAIN_ORDER[opened]
        and (
            (hand.length(s) >= 5 and hcp + hand.distribution_points >= 12)
            or (hand.length(s) >= 4 and hcp >= 12)
        )
    ]
    suit = _pick_suit(hand, two_level)
    if suit is not None:
        return _at(view, 2, suit, "New suit at 2-level: natural, 10+ HCP or a shapely 5-card suit")

    if opened in MAJORS:
        if hcp <= 10:
            return _at(view, 1, "NT", "1NT response: 6–10 HCP, no 3-card support")
        if hcp <= 12:
            return _at(view, 2, "NT", "2NT response: 11–12 HCP, invitational, no fit")
        return _at(view, 3, "NT", "3NT response: 13+ HCP, balanced, no fit")

    bands = _NT_OVER_MINOR[config.general.nt_over_minors_range]
    for level, (lo, hi) in zip((1, 2, 3), bands):
        if lo <= hcp <= hi:
            return _at(view, level, "NT", f"{level}NT response: {lo}–{hi} HCP, no 4-card major")
    if hcp > bands[2][1]:
        return _at(view, 3, "NT", "3NT response: game values, no 4-card major")
    suit = longest_suit(hand, others)
    return _cheapest(view, suit, f"New suit response: {SUIT_NAMES[suit]}, between notrump ranges")


def _competitive_response(hand: Hand, view: AuctionView, config: BiddingConfig, opened: Suit) -> Optional[Bid]:
    their = view.rho_call
    hcp = hand.hcp
    support = hand.length(opened)
    need = 3 if opened in MAJORS else 4
    if support >= need and 6 <= hcp <= 9:
        return _cheapest(view, opened, f"Competitive raise: 6–9 HCP, {support}-card support")
    if hcp >= 6:
        theirs = view.their_suits()
        candidates = [
            s for s in SUITS
            if s != opened and s not in theirs and hand.length(s) >= 5
        ]
        suit = _pick_suit(hand, candidates)
        if suit is not None:
            bid = contract_above(view.last_contract, suit)
            if bid is not None and (bid.level == 1 or hcp >= 10):
                bid.convention_used = f"New suit over interference: 5+ {SUIT_NAMES[suit]}"
                return bid
        if is_balanced(hand, config) and _stoppers(hand, theirs):
            if hcp >= 13:
                return _at(view, 3, "NT", "3NT over interference: 13+ HCP, stopper in their suit")
            if 8 <= hcp <= 10:
                return _cheapest(view, "NT", "Notrump over interference: stopper in their suit")
    return Bid.pass_("Pass: no suitable action over the interference")


# ---------------------------------------------------------------------------
# Overcalling
# ---------------------------------------------------------------------------

def overcalling_call(hand: Hand, view: AuctionView, config: BiddingConfig) -> Optional[Bid]:
    last = view.last_contract
    if last is None:
        return None
    theirs = view.their_suits()
    balancing = view.last_contract_by == LHO and view.trailing_passes() == 2
    if view.last_contract_by != RHO and not balancing:
        return Bid.pass_("Pass: no natural overcall available")
    hcp = hand.hcp
    adj = vul_adjustment("overcall", view.vul, config)
    vul = view.vul.label

    balanced_stopped = is_balanced(hand, config) and _stoppers(hand, theirs)
    if balanced_stopped and last.strain != "NT":
        if last.level == 1 and 15 <= hcp <= 18:
            kind = "Balancing 1NT" if balancing else "1NT overcall"
            return _at(view, 1, "NT", f"{kind}: 15–18 HCP, balanced, stopper in their suit")
        if last.level == 1 and last.strain in MINORS and 19 <= hcp <= 21:
            return _at(view, 2, "NT", "Natural 2NT overcall: 19–21 HCP, balanced, stopper")
        if last.level == 2 and 15 <= hcp <= 18:
            kind = "Balancing 2NT" if balancing else "Natural 2NT overcall"
            return _at(view, 2, "NT", f"{kind}: 15–18 HCP, balanced, stopper in their suit")

    rules = config.competitive.overcalls
    candidates = [s for s in SUITS if s not in theirs and hand.length(s) >= rules.min_length]
    suit = _pick_suit(hand, candidates)
    if suit is not None:
        simple = contract_above(last, suit)
        n = hand.length(suit)
        if simple is not None and simple.level == 1 and n >= 6 and 6 + adj <= hcp <= 10 and not balancing:
            return _at(
                view, 2, suit,
                f"Weak jump overcall: {n} {SUIT_NAMES[suit]}, weak hand (vul={vul})",
            )
        floor = rules.one_level_min_hcp if simple is not None and simple.level == 1 else rules.two_level_min_hcp
        minimum = floor + adj
        if simple is not None and simple.level <= 3 and hcp >= minimum:
            kind = "Delayed natural overcall" if balancing else "Natural overcall"
            extra = ", 6-card permitted" if n >= 6 else ""
            simple.convention_used = (
                f"{kind}: {n}+ {SUIT_NAMES[suit]}, {minimum}+ HCP (vul={vul}){extra}"
            )
            return simple

    if balancing and rules.four_card_balancing:
        # A four-card major may be shown at the one level in the balancing seat.
        fours = [s for s in MAJORS if s not in theirs and hand.length(s) >= 4]
        suit = _pick_suit(hand, fours)
        if suit is not None and hcp >= rules.balancing_four_card_min_hcp:
            bid = contract_above(last, suit)
            if bid is not None and bid.level == 1:
                bid.convention_used = f"Balancing 1-level overcall: 4+ {SUIT_NAMES[suit]}"
                return bid
    return Bid.pass_("Pass: no natural overcall available")


# ---------------------------------------------------------------------------
# Advancing
# ---------------------------------------------------------------------------

def advancing_call(hand: Hand, view: AuctionView, config: BiddingConfig) -> Optional[Bid]:
    _, partner_bid = view.actions_by(PARTNER)[0]
    theirs = view.their_suits()
    hcp = hand.hcp
    rho_acted = not view.rho_passed()

    if partner_bid.is_double:
        if not rho_acted and view.last_contract.level >= 5:
            return Bid.pass_("Pass: partner's double of a five-level contract is for penalties")
        if hcp >= 12 and theirs:
            return _cheapest(view, theirs[0], "Cue bid advance: game-forcing values")
        if rho_acted and hcp < 6:
            return Bid.pass_("Pass: RHO's bid takes partner's double off the hook")
        unbid = [s for s in SUITS if s not in theirs]
        if not unbid:
            return Bid.pass_("Pass: the opponents have bid every suit")
        # Prefer a major when lengths tie.
        suit = max(unbid, key=lambda s: (hand.length(s), s in MAJORS, STRAIN_ORDER[s]))
        if is_balanced(hand, config) and _stoppers(hand, theirs) and 8 <= hcp <= 11 and hand.length(suit) < 5:
            return _cheapest(view, "NT", "Notrump advance of the double: 8–11 HCP, stopper in their suit")
        simple = contract_above(view.last_contract, suit)
        if simple is None:
            return None
        if 9 <= hcp <= 11 and simple.level < 4:
            return _at(view, simple.level + 1, suit, f"Jump advance of the double: 9–11 HCP, {SUIT_NAMES[suit]}")
        simple.convention_used = f"Advance of the takeout double: longest unbid suit, {SUIT_NAMES[suit]}"
        return simple

    if partner_bid.is_contract and partner_bid.strain == "NT" and partner_bid.level == 1:
        return _answer_notrump(hand, view, 1, "advance")

    if partner_bid.is_contract:
        candidates = [
            s for s in SUITS
            if s not in theirs and s != partner_bid.strain and hand.length(s) >= 5 and good_suit(hand, s)
        ]
        suit = _pick_suit(hand, candidates)
        if suit is not None and hcp >= 8:
            bid = contract_above(view.last_contract, suit)
            if bid is not None and bid.level <= 3:
                bid.convention_used = f"New suit advance: 5+ {SUIT_NAMES[suit]}, 8+ HCP"
                return bid
        if is_balanced(hand, config) and _stoppers(hand, theirs) and theirs:
            if 8 <= hcp <= 11:
                return _cheapest(view, "NT", "Notrump advance: 8–11 HCP, stopper in their suit")
            if hcp >= 12:
                return _at(view, 3, "NT", "3NT advance: 12+ HCP, stopper in their suit")
    return Bid.pass_("Pass: nothing to add to partner's overcall")


# ---------------------------------------------------------------------------
# Continuing
# ---------------------------------------------------------------------------

def continuing_call(hand: Hand, view: AuctionView, config: BiddingConfig) -> Optional[Bid]:
    if _game_reached(view):
        return Bid.pass_("Pass: game or higher already reached")
    mine = view.actions_by(ME)
    if view.opener == ME and len(mine) == 1 and mine[0][0] == view.opening_index:
        bid = _opener_rebid(hand, view, config)
        if bid is not None:
            return bid
    return _later_call(hand, view, config)


def _opener_rebid(hand: Hand, view: AuctionView, config: BiddingConfig) -> Optional[Bid]:
    opening = view.opening
    reply = view.partner_call
    if reply is None or not view.rho_passed():
        return None
    hcp = hand.hcp
    balanced = is_balanced(hand, config)

    if opening.strain == "NT":
        if reply.token == "2NT" and opening.level == 1:
            if hcp >= 16:
                return _at(view, 3, "NT", "Accept the invitation: 16–17 HCP")
            return Bid.pass_("Decline the invitation: 15 HCP")
        if reply.token == "4NT":
            if hcp >= 17:
                return _at(view, 6, "NT", "Accept the quantitative raise: maximum")
            return Bid.pass_("Decline the quantitative raise: minimum")
        return Bid.pass_("Pass: partner has placed the contract")

    if opening.level != 1:
        return None
    own = opening.strain
    if reply.is_pass:
        return None

    if reply.strain == own:
        if reply.level == 2:
            if hcp >= 19 and own in MAJORS:
                return _at(view, 4, own, "Game after a simple raise: 19+ HCP")
            if hcp >= 16:
                return _at(view, 3, own, "Invitation after a simple raise: 16–18 HCP")
            return Bid.pass_("Pass: minimum opposite a simple raise")
        if reply.level == 3:
            if hcp >= 14 and own in MAJORS:
                return _at(view, 4, own, "Accept the limit raise: 14+ HCP")
            if hcp >= 16 and balanced:
                return _at(view, 3, "NT", "3NT after a minor-suit raise: extras, balanced")
            return Bid.pass_("Pass: decline the limit raise")

    if reply.strain == "NT":
        if reply.level == 1:
            if balanced and 18 <= hcp <= 19:
                return _at(view, 2, "NT", "2NT rebid: 18–19 HCP, balanced")
            if balanced:
                return Bid.pass_("Pass: minimum balanced opposite 1NT")
        elif reply.level == 2:
            return _at(view, 3, "NT", "3NT: game opposite the 2NT response")
        else:
            return Bid.pass_("Pass: partner has placed the contract")

    partner_suit = reply.strain if reply.strain in SUITS else None
    if partner_suit is not None and partner_suit != own:
        support = hand.length(partner_suit)
        needed = 4 if reply.level == 1 or partner_suit in MINORS else 3
        if support >= needed:
            if hcp >= 19 and partner_suit in MAJORS:
                return _at(view, 4, partner_suit, f"Raise partner to game: 19+ HCP, {support}-card support")
            if hcp >= 16:
                level = 3 if reply.level == 1 or partner_suit in MINORS else 4
                return _at(view, level, partner_suit, f"Jump raise of partner: 16–18 HCP, {support}-card support")
            return _cheapest(view, partner_suit, f"Raise partner: minimum, {support}-card support")
        if balanced:
            if reply.level == 1 and 12 <= hcp <= 14:
                return _at(view, 1, "NT", "1NT rebid: 12–14 HCP, balanced")
            if reply.level == 1 and 18 <= hcp <= 19:
                return _at(view, 2, "NT", "2NT rebid: 18–19 HCP, balanced")
            if reply.level == 2 and hcp <= 14:
                return _at(view, 2, "NT", "2NT rebid: 12–14 HCP, balanced, after a two-level response")
            if reply.level == 2:
                return _at(view, 3, "NT", "3NT rebid: 15+ HCP, balanced, after a two-level response")

    if hand.length(own) >= 6:
        if hcp >= 16:
            bid = contract_above(view.last_contract, own)
            if bid is not None:
                return _at(view, bid.level + 1, own, f"Jump rebid of own suit: 16+ HCP, 6+ {SUIT_NAMES[own]}")
        return _cheapest(view, own, f"Rebid own suit: 6+ {SUIT_NAMES[own]}")

    seconds = [
        s for s in SUITS
        if s not in (own, partner_suit) and hand.length(s) >= 4
    ]
    for suit in sorted(seconds, key=lambda s: -hand.length(s)):
        bid = contract_above(view.last_contract, suit)
        if bid is None:
            continue
        lower_than_own = STRAIN_ORDER[suit] < STRAIN_ORDER[own]
        if bid.level == 1 or (bid.level == 2 and (lower_than_own or hcp >= 17)):
            bid.convention_used = f"New suit rebid: 4+ {SUIT_NAMES[suit]}"
            return bid
    return _cheapest(view, own, f"Rebid own suit: {hand.length(own)} {SUIT_NAMES[own]}")


def _later_call(hand: Hand, view: AuctionView, config: BiddingConfig) -> Optional[Bid]:
    combined = hand.hcp + view.partner_min_hcp()
    last = view.last_contract
    if last is None:
        return None
    theirs = view.their_suits()
    if not view.last_contract_ours():
        if combined >= GAME_HCP and view.our_suits():
            fit = _fit(hand, view)
            if fit is not None:
                return _cheapest(view, fit, f"Compete in our fit: {SUIT_NAMES[fit]}")
        return Bid.pass_("Pass: let the opponents play")

    fit = _fit(hand, view)
    if fit is not None:
        game = _game_level(fit)
        if combined >= GAME_HCP and last.level < game and fit in MAJORS:
            return _at(view, game, fit, f"Game in our {SUIT_NAMES[fit]} fit: {combined}+ combined HCP")
        if combined >= GAME_HCP and last.level < 3 and _stoppers(hand, theirs):
            return _at(view, 3, "NT", f"3NT: {combined}+ combined HCP")
        if last.strain != fit and (last.strain == "NT" or hand.length(last.strain) < 3):
            bid = contract_above(last, fit)
            if bid is not None and bid.level <= game:
                bid.convention_used = f"Preference: return to our {SUIT_NAMES[fit]} fit"
                return bid
        return Bid.pass_("Pass: fit found, no further values")

    if combined >= GAME_HCP and last.level < 3 and _stoppers(hand, theirs):
        return _at(view, 3, "NT", f"3NT: {combined}+ combined HCP, no fit")
    long_suits = suits_with_length(hand, 6)
    if long_suits and hand.hcp >= 8 and last.level < 3:
        suit = long_suits[0]
        return _cheapest(view, suit, f"Rebid a long suit: 6+ {SUIT_NAMES[suit]}")
    return Bid.pass_("Pass: no fit and no extra values")


def _fit(hand: Hand, view: AuctionView) -> Optional[Suit]:
    """A suit partner bid where I hold support, or my suit that partner raised."""
    partner_suits = view.suits_bid_by(PARTNER)
    mine = view.suits_bid_by(ME)
    for suit in partner_suits:
        if suit in mine or hand.length(suit) >= (3 if suit in MAJORS else 4):
            return suit
    return None


_BY_PHASE = {
    PHASE_OPENING: opening_call,
    PHASE_RESPONDING: responding_call,
    PHASE_OVERCALLING: overcalling_call,
    PHASE_ADVANCING: advancing_call,
    PHASE_CONTINUING: continuing_call,
}
