# file: bridge_bidding/conventions_notrump.py
"""
Notrump conventions.

Responder's tools over partner's 1NT/2NT (Stayman, Jacoby, Texas and
minor-suit transfers, stolen-bid double, Lebensohl), opener's answers, the
responder's second call, and the DONT / Meckwell defences against an
opposing 1NT with their relays.
"""

from __future__ import annotations

from typing import Optional

from .auction_view import LHO, ME, PARTNER, RHO, AuctionView
from .bid import Bid, contract_above
from .bidding_types import MAJORS, SUIT_NAMES, SUITS, STRAIN_ORDER, Suit
from .config import BiddingConfig
from .convention_registry import NOT_APPLICABLE, Convention, Recognition, applies, when
from .hand import Hand
from .hand_eval import has_stopper, is_balanced, longest_suit, vul_adjustment

# ---------------------------------------------------------------------------
# Auction readers
# ---------------------------------------------------------------------------


def _nt_opening_level(view: AuctionView, who: str) -> Optional[int]:
    opening = view.opening
    if opening is None or view.opener != who:
        return None
    if opening.strain != "NT" or opening.level not in (1, 2):
        return None
    return opening.level


def _interference_allows(view: AuctionView, config: BiddingConfig, system: str) -> bool:
    """RHO passed, or doubled with the named system kept on."""
    rho = view.rho_call
    if rho is None:
        return False
    if rho.is_pass:
        return True
    systems = config.general.systems_on_over_1nt_interference
    return rho.is_double and getattr(systems, system)


def _responding_to_nt(view: AuctionView, config: BiddingConfig, system: str) -> Optional[int]:
    level = _nt_opening_level(view, PARTNER)
    if level is None or view.i_have_acted() or view.n - view.opening_index != 2:
        return None
    if not _interference_allows(view, config, system):
        return None
    return level


def _opener_after(view: AuctionView, tokens_by_level) -> Optional[tuple]:
    """I opened 1NT/2NT and partner's reply (RHO quiet) is one of `tokens`."""
    level = _nt_opening_level(view, ME)
    if level is None or view.opening_index != view.n - 4:
        return None
    reply = view.partner_call
    rho = view.rho_call
    if reply is None or rho is None or rho.is_contract:
        return None
    if reply.token not in tokens_by_level.get(level, ()):
        return None
    return level, reply


# ---------------------------------------------------------------------------
# Responder over 1NT / 2NT
# ---------------------------------------------------------------------------

def recognize_stayman(view: AuctionView, config: BiddingConfig) -> Recognition:
    level = _responding_to_nt(view, config, "stayman")
    return when(level is not None, level=level)


def respond_stayman(hand, view, config, rec) -> Optional[Bid]:
    level = rec.details["level"]
    h, s = hand.length("H"), hand.length("S")
    if max(h, s) >= 6:
        return None
    four_card_major = h == 4 or s == 4
    if level == 1:
        if four_card_major and hand.hcp >= 8:
            return Bid.contract(2, "C", "Stayman: asks opener for a 4-card major")
        if (
            config.notrump_responses.minor_suit_transfers.enabled
            and 8 <= hand.hcp <= 9
            and is_balanced(hand, config)
        ):
            return Bid.contract(2, "C", "Stayman: invitational relay (2NT is a transfer)")
        return None
    if four_card_major and hand.hcp >= 4:
        return Bid.contract(3, "C", "Stayman over 2NT: asks for a 4-card major")
    return None


def recognize_jacoby_transfer(view: AuctionView, config: BiddingConfig) -> Recognition:
    level = _responding_to_nt(view, config, "transfers")
    return when(level is not None, level=level)


def respond_jacoby_transfer(hand, view, config, rec) -> Optional[Bid]:
    level = rec.details["level"]
    h, s = hand.length("H"), hand.length("S")
    if max(h, s) < 5:
        return None
    major = "S" if s >= h else "H"
    step = "D" if major == "H" else "H"
    return Bid.contract(level + 1, step, f"Jacoby transfer to {SUIT_NAMES[major]}")


def recognize_texas_transfer(view: AuctionView, config: BiddingConfig) -> Recognition:
    level = _responding_to_nt(view, config, "transfers")
    return when(level == 1, level=level)


def respond_texas_transfer(hand, view, config, rec) -> Optional[Bid]:
    h, s = hand.length("H"), hand.length("S")
    if max(h, s) < 6 or not (10 <= hand.hcp <= 15):
        return None
    major = "S" if s >= h else "H"
    step = "D" if major == "H" else "H"
    return Bid.contract(4, step, f"Texas transfer to {SUIT_NAMES[major]}: game values")


def recognize_minor_suit_transfer(view: AuctionView, config: BiddingConfig) -> Recognition:
    level = _responding_to_nt(view, config, "transfers")
    return when(level == 1, level=level)


def respond_minor_suit_transfer(hand, view, config, rec) -> Optional[Bid]:
    if max(hand.length("H"), hand.length("S")) >= 4 or hand.hcp > 9:
        return None
    c, d = hand.length("C"), hand.length("D")
    if max(c, d) < 6:
        return None
    if c >= d:
        return Bid.contract(2, "S", "Minor suit transfer to clubs")
    return Bid.contract(2, "NT", "Minor suit transfer to diamonds")


def recognize_stolen_bid_double(view: AuctionView, config: BiddingConfig) -> Recognition:
    level = _nt_opening_level(view, PARTNER)
    rho = view.rho_call
    ok = (
        level == 1
        and not view.i_have_acted()
        and view.n - view.opening_index == 2
        and rho is not None
        and rho.token == "2C"
    )
    return when(ok)


def respond_stolen_bid_double(hand, view, config, rec) -> Optional[Bid]:
    if hand.hcp >= 8 and 4 in (hand.length("H"), hand.length("S")):
        return Bid.double("Stolen bid double: Stayman over their 2C")
    return None


# ---------------------------------------------------------------------------
# Opener's answers
# ---------------------------------------------------------------------------

def recognize_stayman_answer(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _opener_after(view, {1: ("2C",), 2: ("3C",)})
    if found is not None:
        return applies(level=found[0] + 1)
    # 1NT (2C) X with the stolen-bid double on.
    level = _nt_opening_level(view, ME)
    stolen = config.general.systems_on_over_1nt_interference.stolen_bid_double
    lho = view.lho_call
    if (
        stolen and level == 1 and view.opening_index == view.n - 4
        and lho is not None and lho.token == "2C"
        and view.partner_call is not None and view.partner_call.is_double
        and view.rho_passed()
    ):
        return applies(level=2)
    return NOT_APPLICABLE


def respond_stayman_answer(hand, view, config, rec) -> Optional[Bid]:
    level = rec.details["level"]
    if hand.length("H") >= 4:
        return Bid.contract(level, "H", "Stayman response: 4-card hearts")
    if hand.length("S") >= 4:
        return Bid.contract(level, "S", "Stayman response: 4-card spades")
    return Bid.contract(level, "D", "Stayman response: no 4-card major")


def recognize_transfer_accept(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _opener_after(view, {1: ("2D", "2H"), 2: ("3D", "3H")})
    if found is None:
        return NOT_APPLICABLE
    level, reply = found
    return applies(level=level, major="H" if reply.strain == "D" else "S")


def respond_transfer_accept(hand, view, config, rec) -> Optional[Bid]:
    major, level = rec.details["major"], rec.details["level"]
    if level == 1 and hand.length(major) >= 4 and hand.hcp >= 17:
        return Bid.contract(3, major, "Jacoby transfer super-accepted: 4-card support, maximum")
    return Bid.contract(level + 1, major, "Jacoby transfer accepted")


def recognize_texas_accept(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _opener_after(view, {1: ("4D", "4H")})
    if found is None:
        return NOT_APPLICABLE
    return applies(major="H" if found[1].strain == "D" else "S")


def respond_texas_accept(hand, view, config, rec) -> Optional[Bid]:
    return Bid.contract(4, rec.details["major"], "Texas transfer accepted")


def recognize_minor_transfer_accept(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _opener_after(view, {1: ("2S", "2NT")})
    if found is None:
        return NOT_APPLICABLE
    return applies(minor="C" if found[1].strain == "S" else "D")


def respond_minor_transfer_accept(hand, view, config, rec) -> Optional[Bid]:
    return Bid.contract(3, rec.details["minor"], "Minor suit transfer accepted")


# ---------------------------------------------------------------------------
# Responder's second call
# ---------------------------------------------------------------------------

def _my_nt_convention(view: AuctionView, tokens_by_level) -> Optional[tuple]:
    """Partner opened 1NT/2NT, my next call was one of `tokens`, partner answered."""
    level = _nt_opening_level(view, PARTNER)
    if level is None or view.opening_index != view.n - 6:
        return None
    mine = view.my_last_call
    answer = view.partner_call
    if mine is None or answer is None or mine.token not in tokens_by_level.get(level, ()):
        return None
    if not answer.is_contract or not view.rho_passed():
        return None
    return level, mine, answer


def recognize_stayman_followup(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _my_nt_convention(view, {1: ("2C",), 2: ("3C",)})
    if found is None:
        return NOT_APPLICABLE
    level, _, answer = found
    return applies(level=level, answer=answer.strain)


def respond_stayman_followup(hand, view, config, rec) -> Optional[Bid]:
    level, answer = rec.details["level"], rec.details["answer"]
    game_hcp = 10 if level == 1 else 4
    invite_hcp = 8
    if answer in MAJORS and hand.length(answer) >= 4:
        if hand.hcp >= game_hcp:
            return Bid.contract(4, answer, "Major fit found via Stayman: game")
        if level == 1 and hand.hcp >= invite_hcp:
            return Bid.contract(3, answer, "Major fit found via Stayman: invitational raise")
        return Bid.pass_("Major fit found via Stayman: minimum")
    if hand.hcp >= game_hcp:
        return Bid.contract(3, "NT", "No major fit after Stayman: game in notrump")
    if level == 1 and hand.hcp >= invite_hcp:
        return Bid.contract(2, "NT", "No major fit after Stayman: invitational 2NT")
    return Bid.pass_("Stayman follow-up: weak, pass")


def recognize_transfer_followup(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _my_nt_convention(
        view, {1: ("2D", "2H", "4D", "4H", "2S", "2NT"), 2: ("3D", "3H")}
    )
    if found is None:
        return NOT_APPLICABLE
    level, mine, answer = found
    kind, path = "jacoby", JACOBY
    if mine.level == 4:
        kind, path = "texas", TEXAS
    elif mine.token in ("2S", "2NT"):
        kind, path = "minor", MINOR
    if not config.enabled(path):
        return NOT_APPLICABLE
    return applies(kind, level=level, answer=answer)


def respond_transfer_followup(hand, view, config, rec) -> Optional[Bid]:
    answer: Bid = rec.details["answer"]
    if rec.variant == "texas":
        return Bid.pass_("Texas transfer: sign-off in game")
    if rec.variant == "minor":
        return Bid.pass_("Minor suit transfer: sign-off")
    major = answer.strain
    if major not in MAJORS:
        return None
    length = hand.length(major)
    if rec.details["level"] == 2:
        if hand.hcp < 4:
            return Bid.pass_("Transfer completed: weak, pass")
        if length >= 6:
            return Bid.contract(4, major, "Transfer then game in the major")
        return Bid.contract(3, "NT", "Transfer then 3NT: choice of games")
    if answer.level == 3:
        if hand.hcp >= 6:
            return Bid.contract(4, major, "Game after super-accept")
        return Bid.pass_("Transfer super-accepted: weak, pass")
    if length >= 6:
        if hand.hcp >= 10:
            return Bid.contract(4, major, "Transfer then game in the major")
        if hand.hcp >= 8:
            return Bid.contract(3, major, "Transfer then invitational raise: 6-card major")
    elif hand.hcp >= 10:
        return Bid.contract(3, "NT", "Transfer then 3NT: choice of games, 5-card major")
    elif hand.hcp >= 8:
        return Bid.contract(2, "NT", "Transfer then 2NT: invitational, 5-card major")
    return Bid.pass_("Transfer completed: weak, pass")


# ---------------------------------------------------------------------------
# Lebensohl
# ---------------------------------------------------------------------------

def recognize_lebensohl(view: AuctionView, config: BiddingConfig) -> Recognition:
    if not config.notrump_defenses.lebensohl.after_interference:
        return NOT_APPLICABLE
    level = _nt_opening_level(view, PARTNER)
    rho = view.rho_call
    ok = (
        level == 1
        and not view.i_have_acted()
        and view.n - view.opening_index == 2
        and rho is not None
        and rho.is_contract
        and rho.level == 2
        and rho.strain != "NT"
    )
    return when(ok, their=rho.strain if ok else None)


def respond_lebensohl(hand, view, config, rec) -> Optional[Bid]:
    their = rec.details["their"]
    if hand.hcp >= 10:
        stopped = has_stopper(hand, their)
        # Fast denies: a direct 3NT has no stopper, going through 2NT shows one.
        if stopped == config.notrump_defenses.lebensohl.fast_denies:
            return Bid.contract(2, "NT", "Lebensohl 2NT relay: game values, 3NT to follow")
        shown = "with" if stopped else "without"
        return Bid.contract(3, "NT", f"Lebensohl: direct 3NT, game values {shown} a {SUIT_NAMES[their]} stopper")
    lower = [s for s in ("C", "D", "H") if STRAIN_ORDER[s] < STRAIN_ORDER[their]]
    long_lower = [s for s in lower if hand.length(s) >= 5]
    if long_lower and hand.hcp >= 3:
        return Bid.contract(2, "NT", "Lebensohl 2NT relay: weak with a long lower suit")
    return None


def recognize_lebensohl_relay_accept(view: AuctionView, config: BiddingConfig) -> Recognition:
    level = _nt_opening_level(view, ME)
    lho = view.lho_call
    ok = (
        level == 1
        and view.opening_index == view.n - 4
        and lho is not None and lho.is_contract and lho.level == 2
        and view.partner_call is not None and view.partner_call.token == "2NT"
        and view.rho_passed()
    )
    return when(ok)


def respond_lebensohl_relay_accept(hand, view, config, rec) -> Optional[Bid]:
    return Bid.contract(3, "C", "Lebensohl relay: 3C as requested")


def recognize_lebensohl_followup(view: AuctionView, config: BiddingConfig) -> Recognition:
    level = _nt_opening_level(view, PARTNER)
    ok = (
        level == 1
        and view.opening_index == view.n - 6
        and view.my_last_call is not None and view.my_last_call.token == "2NT"
        and view.partner_call is not None and view.partner_call.token == "3C"
        and view.rho_passed()
    )
    their = view.calls[view.n - 5].strain if ok else None
    return when(ok, their=their)


def respond_lebensohl_followup(hand, view, config, rec) -> Optional[Bid]:
    their = rec.details["their"]
    if hand.hcp >= 10:
        shown = "with" if has_stopper(hand, their) else "without"
        return Bid.contract(3, "NT", f"Lebensohl: slow 3NT, game values {shown} a {SUIT_NAMES[their]} stopper")
    lower = [s for s in ("C", "D", "H") if STRAIN_ORDER[s] < STRAIN_ORDER[their]]
    suit = longest_suit(hand, lower) if lower else "C"
    if suit == "C":
        return Bid.pass_("Lebensohl sign-off in clubs")
    return Bid.contract(3, suit, f"Lebensohl sign-off in {SUIT_NAMES[suit]}")


# ---------------------------------------------------------------------------
# DONT and Meckwell over their 1NT
# ---------------------------------------------------------------------------

def _their_1nt(view: AuctionView) -> bool:
    opening = view.opening
    return (
        opening is not None
        and opening.token == "1NT"
        and view.opener in (LHO, RHO)
        and view.last_contract_index == view.opening_index
        and not view.i_have_acted()
        and not view.partner_has_acted()
    )


def _two_suiter(hand: Hand):
    """(lower, higher) suits with 5-4 or better, else None."""
    order = ["C", "D", "H", "S"]
    for i, low in enumerate(order):
        for high in order[i + 1:]:
            a, b = hand.length(low), hand.length(high)
            if a >= 4 and b >= 4 and max(a, b) >= 5:
                return low, high
    return None


def _defence_strength(hand: Hand, view: AuctionView, config: BiddingConfig) -> bool:
    low = 8 + vul_adjustment("overcall", view.vul, config)
    return low <= hand.hcp <= 15


def recognize_dont(view: AuctionView, config: BiddingConfig) -> Recognition:
    return when(_their_1nt(view))


def respond_dont(hand, view, config, rec) -> Optional[Bid]:
    if not _defence_strength(hand, view, config):
        return None
    pair = _two_suiter(hand)
    if pair is not None:
        low, high = pair
        if low == "H":
            return Bid.contract(2, "H", "DONT: hearts and spades")
        return Bid.contract(2, low, f"DONT: {SUIT_NAMES[low]} and a higher-ranking suit")
    if hand.length("S") >= 6:
        return Bid.contract(2, "S", "DONT: natural spades, one-suited")
    if max(hand.length(s) for s in ("C", "D", "H")) >= 6:
        return Bid.double("DONT double: one-suited hand (advancer relays 2C)")
    return None


def recognize_meckwell(view: AuctionView, config: BiddingConfig) -> Recognition:
    if config.notrump_defenses.dont.enabled:
        return NOT_APPLICABLE
    return when(_their_1nt(view))


def respond_meckwell(hand, view, config, rec) -> Optional[Bid]:
    if not _defence_strength(hand, view, config):
        return None
    h, s = hand.length("H"), hand.length("S")
    if min(h, s) >= 4 and max(h, s) >= 5:
        return Bid.double("Meckwell double: both majors")
    for minor in ("C", "D"):
        if hand.length(minor) >= 5 and max(h, s) >= 4:
            return Bid.contract(2, minor, f"Meckwell: {SUIT_NAMES[minor]} and a major")
    for major in ("S", "H"):
        if hand.length(major) >= 6:
            return Bid.contract(2, major, f"Meckwell: natural {SUIT_NAMES[major]}, one-suited")
    if max(hand.length("C"), hand.length("D")) >= 6:
        return Bid.double("Meckwell double: one long minor")
    return None


def _partner_defended_1nt(view: AuctionView) -> Optional[Bid]:
    opening = view.opening
    if opening is None or opening.token != "1NT" or view.opener not in (LHO, RHO):
        return None
    actions = view.actions_by(PARTNER)
    if len(actions) != 1 or actions[0][0] != view.n - 2 or view.i_have_acted():
        return None
    if not view.rho_passed():
        return None
    index, call = actions[0]
    # Partner's call must be the first action after the 1NT opening.
    if any(not c.is_pass for c in view.calls[view.opening_index + 1:index]):
        return None
    return call


def recognize_nt_defence_advance(view: AuctionView, config: BiddingConfig) -> Recognition:
    call = _partner_defended_1nt(view)
    if call is None:
        return NOT_APPLICABLE
    style = "dont" if config.notrump_defenses.dont.enabled else "meckwell"
    if style == "meckwell" and not config.strong_club_defenses.meckwell.enabled:
        return NOT_APPLICABLE
    return applies(style, call=call)


def respond_nt_defence_advance(hand, view, config, rec) -> Optional[Bid]:
    call: Bid = rec.details["call"]
    label = "DONT" if rec.variant == "dont" else "Meckwell"
    if call.is_double:
        long_suits = [s for s in ("S", "H", "D") if hand.length(s) >= 6]
        if long_suits and rec.variant == "dont":
            suit = long_suits[0]
            return Bid.contract(2, suit, f"{label} advance: own long {SUIT_NAMES[suit]}")
        return Bid.contract(2, "C", f"{label} relay: 2C asks for the suit")
    if not call.is_contract or call.level != 2 or call.strain not in SUITS:
        return None
    if call.strain in ("H", "S") and (rec.variant == "meckwell" or call.strain == "S"):
        return Bid.pass_(f"{label} advance: pass the natural suit")
    if hand.length(call.strain) >= 3:
        return Bid.pass_(f"{label} advance: pass with support")
    step = contract_above(call, {"C": "D", "D": "H", "H": "S"}[call.strain])
    if step is None:
        return None
    step.convention_used = f"{label} advance: asks for the other suit"
    return step


def recognize_nt_defence_rebid(view: AuctionView, config: BiddingConfig) -> Recognition:
    opening = view.opening
    mine = view.my_last_call
    relay = view.partner_call
    ok = (
        opening is not None and opening.token == "1NT"
        and view.opener in (LHO, RHO)
        and mine is not None and mine.is_double
        and len(view.actions_by(ME)) == 1
        and relay is not None and relay.token == "2C"
        and view.rho_passed()
    )
    if config.notrump_defenses.dont.enabled:
        return when(ok, "dont")
    return when(ok and config.strong_club_defenses.meckwell.enabled, "meckwell")


def respond_nt_defence_rebid(hand, view, config, rec) -> Optional[Bid]:
    if rec.variant == "meckwell":
        if min(hand.length("H"), hand.length("S")) >= 4:
            return Bid.contract(2, "H", "Meckwell: shows both majors")
        if hand.length("D") > hand.length("C"):
            return Bid.contract(2, "D", "Meckwell: shows the long diamonds")
        return Bid.pass_("Meckwell: long clubs, pass the relay")
    suit = longest_suit(hand, ("C", "D", "H"))
    if suit == "C":
        return Bid.pass_("DONT: long clubs, pass the relay")
    return Bid.contract(2, suit, f"DONT: shows the single suit, {SUIT_NAMES[suit]}")


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

STAYMAN = "notrump_responses.stayman"
JACOBY = "notrump_responses.jacoby_transfers"
TEXAS = "notrump_responses.texas_transfers"
MINOR = "notrump_responses.minor_suit_transfers"
LEBENSOHL = "notrump_defenses.lebensohl"

CONVENTIONS = [
    Convention("stayman", "Stayman", recognize_stayman, respond_stayman, STAYMAN, "notrump"),
    Convention("jacoby_transfer", "Jacoby Transfers", recognize_jacoby_transfer, respond_jacoby_transfer, JACOBY, "notrump"),
    Convention("texas_transfer", "Texas Transfers", recognize_texas_transfer, respond_texas_transfer, TEXAS, "notrump"),
    Convention("minor_suit_transfer", "Minor Suit Transfers", recognize_minor_suit_transfer, respond_minor_suit_transfer, MINOR, "notrump"),
    Convention(
        "stolen_bid_double",
        "Stayman",
        recognize_stolen_bid_double,
        respond_stolen_bid_double,
        "general.systems_on_over_1nt_interference.stolen_bid_double",
        "notrump",
    ),
    Convention("stayman_answer", "Stayman", recognize_stayman_answer, respond_stayman_answer, STAYMAN, "notrump"),
    Convention("transfer_accept", "Jacoby Transfers", recognize_transfer_accept, respond_transfer_accept, JACOBY, "notrump"),
    Convention("texas_accept", "Texas Transfers", recognize_texas_accept, respond_texas_accept, TEXAS, "notrump"),
    Convention("minor_transfer_accept", "Minor Suit Transfers", recognize_minor_transfer_accept, respond_minor_transfer_accept, MINOR, "notrump"),
    Convention("stayman_followup", "Stayman", recognize_stayman_followup, respond_stayman_followup, STAYMAN, "notrump"),
    Convention("transfer_followup", "Jacoby Transfers", recognize_transfer_followup, respond_transfer_followup, None, "notrump"),
    Convention("lebensohl", "Lebensohl", recognize_lebensohl, respond_lebensohl, LEBENSOHL, "notrump"),
    Convention("lebensohl_relay_accept", "Lebensohl", recognize_lebensohl_relay_accept, respond_lebensohl_relay_accept, LEBENSOHL, "notrump"),
    Convention("lebensohl_followup", "Lebensohl", recognize_lebensohl_followup, respond_lebensohl_followup, LEBENSOHL, "notrump"),
    Convention("dont", "DONT", recognize_dont, respond_dont, "notrump_defenses.dont", "notrump"),
    Convention("meckwell", "Meckwell", recognize_meckwell, respond_meckwell, "strong_club_defenses.meckwell", "notrump"),
    Convention("nt_defence_advance", "DONT", recognize_nt_defence_advance, respond_nt_defence_advance, None, "notrump"),
    Convention("nt_defence_rebid", "DONT", recognize_nt_defence_rebid, respond_nt_defence_rebid, None, "notrump"),
]
