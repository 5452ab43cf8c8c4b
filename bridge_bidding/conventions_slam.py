# file: bridge_bidding/conventions_slam.py
"""
Slam conventions: Gerber, Blackwood / Roman Keycard Blackwood and
control-showing cue bids, with their responses and the asker's follow-ups.
"""

from __future__ import annotations

from typing import List, Optional

from .auction_view import ME, PARTNER, AuctionView
from .bid import Bid, contract_above, parse_bid
from .bidding_types import MAJORS, SUITS, Suit
from .config import BiddingConfig
from .convention_registry import (
    NOT_APPLICABLE,
    Convention,
    Recognition,
    applies,
    when,
)
from .hand import Hand
from .hand_eval import (
    count_aces,
    count_keycards,
    count_kings,
    first_round_control,
    has_trump_queen,
    second_round_control,
)

SLAM_HCP = 33
SLAM_INTEREST_HCP = 30

# ---------------------------------------------------------------------------
# Shared auction readers
# ---------------------------------------------------------------------------


def _previous_contract(view: AuctionView, index: int) -> Optional[int]:
    for j in range(index - 1, -1, -1):
        if view.calls[j].is_contract:
            return j
    return None


def _same_side(i: int, j: int) -> bool:
    return (i - j) % 2 == 0


def is_gerber_ask(view: AuctionView, index: int) -> bool:
    """4C directly over our own side's notrump, clubs not agreed."""
    if index < 0 or index >= view.n:
        return False
    bid = view.calls[index]
    if not (bid.is_contract and bid.level == 4 and bid.strain == "C"):
        return False
    j = _previous_contract(view, index)
    if j is None or view.calls[j].strain != "NT" or not _same_side(index, j):
        return False
    for k in range(index):
        b = view.calls[k]
        if _same_side(index, k) and b.is_contract and b.strain == "C" and b.level >= 3:
            return False
    return True


def is_blackwood_ask(view: AuctionView, index: int) -> bool:
    """4NT over our own side's suit contract."""
    if index < 0 or index >= view.n:
        return False
    bid = view.calls[index]
    if not (bid.is_contract and bid.level == 4 and bid.strain == "NT"):
        return False
    j = _previous_contract(view, index)
    return j is not None and view.calls[j].strain != "NT" and _same_side(index, j)


def agreed_trump(view: AuctionView, before: Optional[int] = None) -> Optional[Suit]:
    """
    Trump suit found by the side that calls at position `before`.

    A suit bid twice by that side (by either partner), or a jump to four of
    a major. The most recent qualifying suit wins.
    """
    end = view.n if before is None else before
    side = [
        view.calls[k]
        for k in range(end)
        if _same_side(end, k) and view.calls[k].is_contract
    ]
    trump = None
    seen: List[str] = []
    for bid in side:
        if bid.strain == "NT":
            continue
        if bid.strain in seen or (bid.level == 4 and bid.strain in MAJORS):
            trump = bid.strain
        seen.append(bid.strain)
    return trump


def _seats_conflict(a: Bid, b: Bid) -> bool:
    # Only explicitly supplied seats are trusted for this check.
    return (
        a.seat is not None and b.seat is not None
        and not a.auto_seat and not b.auto_seat
        and a.seat != b.seat
    )


def _quiet(view: AuctionView) -> bool:
    rho = view.rho_call
    return rho is not None and not rho.is_contract


# ---------------------------------------------------------------------------
# Gerber
# ---------------------------------------------------------------------------

def _gerber_step(config: BiddingConfig, count: int) -> str:
    return config.ace_asking.gerber.responses_map[0 if count in (0, 4) else count]


def recognize_gerber_ask(view: AuctionView, config: BiddingConfig) -> Recognition:
    partner = view.partner_call
    return when(
        partner is not None
        and partner.is_contract
        and partner.strain == "NT"
        and partner.level in (1, 2)
        and view.rho_passed()
        and view.last_contract_by == PARTNER
    )


def respond_gerber_ask(hand, view, config, rec) -> Optional[Bid]:
    if min(hand.lengths.values()) == 0:
        return None
    if hand.hcp + view.partner_min_hcp() < SLAM_HCP:
        return None
    return Bid.contract(4, "C", "Gerber (ace ask)")


def recognize_gerber_response(view: AuctionView, config: BiddingConfig) -> Recognition:
    return when(is_gerber_ask(view, view.n - 2) and _quiet(view))


def respond_gerber_response(hand, view, config, rec) -> Optional[Bid]:
    aces = count_aces(hand)
    bid = parse_bid(_gerber_step(config, aces))
    bid.convention_used = f"Gerber response: {aces} ace{'s' if aces != 1 else ''}"
    return bid


def recognize_gerber_king_response(view: AuctionView, config: BiddingConfig) -> Recognition:
    if not config.ace_asking.gerber.continuations or view.n < 6:
        return NOT_APPLICABLE
    ask, reply, king_ask = view.back(6), view.back(4), view.back(2)
    ok = (
        is_gerber_ask(view, view.n - 6)
        and reply is not None
        and reply.token in config.ace_asking.gerber.responses_map
        and king_ask is not None
        and king_ask.token == "5C"
        and not _seats_conflict(ask, king_ask)
        and _quiet(view)
    )
    return when(ok)


_GERBER_KINGS = {0: "5D", 1: "5H", 2: "5S", 3: "5NT", 4: "5D"}


def respond_gerber_king_response(hand, view, config, rec) -> Optional[Bid]:
    kings = count_kings(hand)
    bid = parse_bid(_GERBER_KINGS[kings])
    bid.convention_used = f"Gerber king response: {kings} king{'s' if kings != 1 else ''}"
    return bid


def _decode_gerber(config: BiddingConfig, token: str, my_aces: int) -> int:
    idx = list(config.ace_asking.gerber.responses_map).index(token)
    if idx == 0:
        return 4 if my_aces == 0 else 0
    return idx


def recognize_gerber_followup(view: AuctionView, config: BiddingConfig) -> Recognition:
    reply = view.partner_call
    ok = (
        is_gerber_ask(view, view.n - 4)
        and reply is not None
        and reply.token in config.ace_asking.gerber.responses_map
        and _quiet(view)
    )
    return when(ok, reply=reply.token if reply is not None else None)


def respond_gerber_followup(hand, view, config, rec) -> Optional[Bid]:
    mine = count_aces(hand)
    total = mine + _decode_gerber(config, rec.details["reply"], mine)
    if total == 4 and config.ace_asking.gerber.continuations:
        return Bid.contract(5, "C", "Gerber king ask: all aces held")
    if total == 3:
        return Bid.contract(6, "NT", "Small slam: one ace missing")
    if total == 4:
        return Bid.contract(6, "NT", "Small slam: all aces held")
    sign_off = contract_above(view.last_contract, "NT")
    if sign_off is not None and sign_off.level == 4:
        sign_off.convention_used = "Gerber sign-off: two aces missing"
        return sign_off
    return Bid.pass_("Gerber sign-off: two aces missing")


def recognize_gerber_king_followup(view: AuctionView, config: BiddingConfig) -> Recognition:
    reply = view.partner_call
    ok = (
        view.n >= 8
        and is_gerber_ask(view, view.n - 8)
        and view.back(4) is not None
        and view.back(4).token == "5C"
        and reply is not None
        and reply.token in _GERBER_KINGS.values()
        and _quiet(view)
    )
    return when(ok, reply=reply.token if reply is not None else None)


def respond_gerber_king_followup(hand, view, config, rec) -> Optional[Bid]:
    steps = {"5D": 0, "5H": 1, "5S": 2, "5NT": 3}
    mine = count_kings(hand)
    theirs = steps[rec.details["reply"]]
    if theirs == 0 and mine == 0:
        theirs = 4
    if mine + theirs == 4:
        return Bid.contract(7, "NT", "Grand slam: all aces and kings held")
    return Bid.contract(6, "NT", "Small slam: a king missing")


# ---------------------------------------------------------------------------
# Blackwood / RKCB
# ---------------------------------------------------------------------------

def _blackwood_variant(view: AuctionView, config: BiddingConfig, ask_index: int) -> Recognition:
    trump = agreed_trump(view, ask_index)
    if config.ace_asking.blackwood.variant == "rkcb" and trump is not None:
        return applies("rkcb", trump=trump, ask_index=ask_index)
    return applies("classic", trump=trump, ask_index=ask_index)


def recognize_blackwood_ask(view: AuctionView, config: BiddingConfig) -> Recognition:
    last = view.last_contract
    if last is None or not view.last_contract_ours() or last.strain == "NT":
        return NOT_APPLICABLE
    if last.rank >= (4, 4) or not view.rho_passed():
        return NOT_APPLICABLE
    trump = agreed_trump(view)
    return when(trump is not None, trump=trump)


def respond_blackwood_ask(hand, view, config, rec) -> Optional[Bid]:
    if min(hand.lengths.values()) == 0:
        return None
    if hand.hcp + view.partner_min_hcp() < SLAM_HCP:
        return None
    if config.ace_asking.blackwood.variant == "rkcb":
        return Bid.contract(4, "NT", "RKCB (keycard ask)")
    return Bid.contract(4, "NT", "Blackwood (ace ask)")


def recognize_blackwood_response(view: AuctionView, config: BiddingConfig) -> Recognition:
    index = view.n - 2
    if not (is_blackwood_ask(view, index) and _quiet(view)):
        return NOT_APPLICABLE
    return _blackwood_variant(view, config, index)


_CLASSIC_STEPS = {0: "5C", 1: "5D", 2: "5H", 3: "5S", 4: "5C"}


def rkcb_step(keycards: int, queen: bool, responses: str) -> str:
    low, high = ("5C", "5D") if responses == "1430" else ("5D", "5C")
    if keycards in (1, 4):
        return low
    if keycards in (0, 3):
        return high
    if keycards == 2:
        return "5S" if queen else "5H"
    return "5NT"


def respond_blackwood_response(hand, view, config, rec) -> Optional[Bid]:
    if rec.variant == "rkcb":
        trump = rec.details["trump"]
        keycards = count_keycards(hand, trump)
        queen = has_trump_queen(hand, trump)
        scheme = config.ace_asking.blackwood.responses
        bid = parse_bid(rkcb_step(keycards, queen, scheme))
        extra = " with the trump queen" if keycards == 2 and queen else ""
        bid.convention_used = f"RKCB {scheme} response: {keycards} keycard{'s' if keycards != 1 else ''}{extra}"
        return bid
    aces = count_aces(hand)
    bid = parse_bid(_CLASSIC_STEPS[aces])
    bid.convention_used = f"Blackwood response: {aces} ace{'s' if aces != 1 else ''}"
    return bid


def _decode_blackwood(rec_variant: str, scheme: str, token: str, mine: int) -> int:
    """Partner's keycards (or aces); ambiguous steps resolve to the count that fits."""
    total = 5 if rec_variant == "rkcb" else 4
    if rec_variant == "rkcb":
        if token in ("5H", "5S"):
            return 2
        if token == "5NT":
            return 5
        low = ("5C" if scheme == "1430" else "5D")
        options = (1, 4) if token == low else (0, 3)
    else:
        options = {"5C": (0, 4), "5D": (1,), "5H": (2,), "5S": (3,)}.get(token, (0,))
    fitting = [c for c in options if c + mine <= total]
    return min(fitting) if fitting else min(options)


def recognize_blackwood_followup(view: AuctionView, config: BiddingConfig) -> Recognition:
    index = view.n - 4
    reply = view.partner_call
    if not (is_blackwood_ask(view, index) and _quiet(view)):
        return NOT_APPLICABLE
    if reply is None or not reply.is_contract or reply.level != 5:
        return NOT_APPLICABLE
    rec = _blackwood_variant(view, config, index)
    return applies(rec.variant, reply=reply.token, **rec.details)


def respond_blackwood_followup(hand, view, config, rec) -> Optional[Bid]:
    trump = rec.details.get("trump") or "NT"
    scheme = config.ace_asking.blackwood.responses
    if rec.variant == "rkcb":
        mine = count_keycards(hand, trump)
        total = 5
    else:
        mine = count_aces(hand)
        total = 4
    missing = total - mine - _decode_blackwood(rec.variant, scheme, rec.details["reply"], mine)
    last = view.last_contract

    if missing >= 2:
        sign_off = contract_above(last, trump)
        if sign_off is not None and sign_off.level == 5:
            sign_off.convention_used = "Blackwood sign-off: two aces missing"
            return sign_off
        return Bid.pass_("Blackwood sign-off: two aces missing")
    if missing == 1:
        return Bid.contract(6, trump, "Small slam: one ace missing")
    if trump != "NT":
        return Bid.contract(5, "NT", "Blackwood king ask: all aces held")
    return Bid.contract(6, "NT", "Small slam: all aces held")


def recognize_blackwood_king_response(view: AuctionView, config: BiddingConfig) -> Recognition:
    ask = view.n - 6
    king_ask = view.partner_call
    if not (is_blackwood_ask(view, ask) and king_ask is not None and king_ask.token == "5NT"):
        return NOT_APPLICABLE
    if not _quiet(view) or _seats_conflict(view.calls[ask], king_ask):
        return NOT_APPLICABLE
    return _blackwood_variant(view, config, ask)


_KING_STEPS = {0: "6C", 1: "6D", 2: "6H", 3: "6S", 4: "6NT"}


def respond_blackwood_king_response(hand, view, config, rec) -> Optional[Bid]:
    kings = count_kings(hand)
    trump = rec.details.get("trump")
    if rec.variant == "rkcb" and trump and hand.holds("K", trump):
        # The trump king was already shown as a keycard.
        kings -= 1
    bid = parse_bid(_KING_STEPS[kings])
    bid.convention_used = f"Blackwood king response: {kings} king{'s' if kings != 1 else ''}"
    return bid


def recognize_blackwood_king_followup(view: AuctionView, config: BiddingConfig) -> Recognition:
    ask = view.n - 8
    reply = view.partner_call
    if not (
        is_blackwood_ask(view, ask)
        and view.back(4) is not None
        and view.back(4).token == "5NT"
        and reply is not None
        and reply.token in _KING_STEPS.values()
        and _quiet(view)
    ):
        return NOT_APPLICABLE
    rec = _blackwood_variant(view, config, ask)
    return applies(rec.variant, reply=reply.token, **rec.details)


def respond_blackwood_king_followup(hand, view, config, rec) -> Optional[Bid]:
    trump = rec.details.get("trump") or "NT"
    steps = {v: k for k, v in _KING_STEPS.items()}
    theirs = steps[rec.details["reply"]]
    mine = count_kings(hand)
    if rec.variant == "rkcb" and trump != "NT" and hand.holds("K", trump):
        mine -= 1
    needed = 3 if rec.variant == "rkcb" and trump != "NT" else 4
    if mine + theirs >= needed:
        return Bid.contract(7, trump, "Grand slam: all keycards and kings held")
    small = contract_above(view.last_contract, trump)
    if small is not None and small.level == 6:
        small.convention_used = "Small slam: a king missing"
        return small
    return Bid.pass_("Small slam reached: a king missing")


# ---------------------------------------------------------------------------
# Control-showing cue bids
# ---------------------------------------------------------------------------

def _game_force_trump(view: AuctionView, config: BiddingConfig) -> Optional[tuple]:
    """(trump, force_index) when our major opening met Jacoby 2NT or a splinter."""
    o = view.opening_index
    if o is None or view.relation(o) not in (ME, PARTNER):
        return None
    opening = view.calls[o]
    if opening.level != 1 or opening.strain not in MAJORS:
        return None
    force = o + 2
    if force >= view.n:
        return None
    answer = view.calls[force]
    if not answer.is_contract:
        return None
    if answer.token == "2NT" and config.responses.jacoby_2nt.enabled:
        return opening.strain, force
    if config.responses.splinter_bids.enabled and answer.token in SPLINTERS[opening.strain]:
        return opening.strain, force
    return None


SPLINTERS = {
    "H": {"3S": "S", "4C": "C", "4D": "D"},
    "S": {"4C": "C", "4D": "D", "4H": "H"},
}


def _cued_suits(view: AuctionView, trump: Suit, after: int) -> List[Suit]:
    cued: List[Suit] = []
    for k in range(after + 1, view.n):
        bid = view.calls[k]
        if view.is_ours(k) and bid.is_contract and bid.strain not in ("NT", trump):
            if bid.strain not in cued:
                cued.append(bid.strain)
    return cued


def recognize_control_cue_bid(view: AuctionView, config: BiddingConfig) -> Recognition:
    found = _game_force_trump(view, config)
    if found is None or not view.rho_passed():
        return NOT_APPLICABLE
    trump, force = found
    last = view.last_contract
    if last is None or last.level >= 6:
        return NOT_APPLICABLE
    return applies(trump=trump, force=force)


def respond_control_cue_bid(hand, view, config, rec) -> Optional[Bid]:
    trump, force = rec.details["trump"], rec.details["force"]
    cued = _cued_suits(view, trump, force)
    partner = view.partner_call
    partner_cued = (
        partner is not None and partner.is_contract
        and view.n - 2 > force and partner.strain not in ("NT", trump)
    )
    if not partner_cued and hand.hcp + view.partner_min_hcp() < SLAM_INTEREST_HCP:
        return None

    side = [s for s in SUITS if s != trump]
    if all(s in cued for s in side):
        return Bid.contract(6, trump, "Slam after control cue bids: all controls shown")

    last = view.last_contract
    ceiling = (5, 3)  # nothing above 5 of a major is a cue bid

    def cheapest(test) -> Optional[Bid]:
        options = []
        for s in side:
            if s in cued and view.relation(_last_index_of(view, s, force)) == ME:
                continue
            if not test(hand, s):
                continue
            bid = contract_above(last, s)
            if bid is not None and bid.rank <= ceiling:
                options.append(bid)
        return min(options, key=lambda b: b.rank) if options else None

    bid = cheapest(first_round_control) or cheapest(second_round_control)
    if bid is not None:
        bid.convention_used = "Control Showing Cue Bid"
        return bid
    game = contract_above(last, trump)
    if game is not None and game.level <= 4:
        game.convention_used = "Sign-off in game: no further controls"
        return game
    return None


def _last_index_of(view: AuctionView, strain: Suit, after: int) -> int:
    for k in range(view.n - 1, after, -1):
        if view.calls[k].is_contract and view.calls[k].strain == strain:
            return k
    return after


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------

GERBER = "ace_asking.gerber"
BLACKWOOD = "ace_asking.blackwood"

CONVENTIONS = [
    Convention("gerber_ask", "Gerber", recognize_gerber_ask, respond_gerber_ask, GERBER, "slam"),
    Convention("gerber_response", "Gerber", recognize_gerber_response, respond_gerber_response, GERBER, "slam"),
    Convention("gerber_followup", "Gerber", recognize_gerber_followup, respond_gerber_followup, GERBER, "slam"),
    Convention("gerber_king_response", "Gerber", recognize_gerber_king_response, respond_gerber_king_response, GERBER, "slam"),
    Convention("gerber_king_followup", "Gerber", recognize_gerber_king_followup, respond_gerber_king_followup, GERBER, "slam"),
    Convention("blackwood_ask", "Blackwood", recognize_blackwood_ask, respond_blackwood_ask, BLACKWOOD, "slam"),
    Convention("blackwood_response", "Blackwood", recognize_blackwood_response, respond_blackwood_response, BLACKWOOD, "slam"),
    Convention("blackwood_followup", "Blackwood", recognize_blackwood_followup, respond_blackwood_followup, BLACKWOOD, "slam"),
    Convention("blackwood_king_response", "Blackwood", recognize_blackwood_king_response, respond_blackwood_king_response, BLACKWOOD, "slam"),
    Convention("blackwood_king_followup", "Blackwood", recognize_blackwood_king_followup, respond_blackwood_king_followup, BLACKWOOD, "slam"),
    Convention(
        "control_cue_bid",
        "Control Showing Cue Bids",
        recognize_control_cue_bid,
        respond_control_cue_bid,
        "slam_bidding.control_showing_cue_bids",
        "slam",
    ),
]
