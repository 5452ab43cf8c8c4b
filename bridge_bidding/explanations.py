# file: bridge_bidding/explanations.py
"""
Explanation generator.

A call's meaning depends on who made it and what it answers. The same 2H
is a natural response when the last contract came from partner, and an
overcall (or a cue bid, in the opponents' suit) when it came from an
opponent. Explanations are therefore built from an AuctionView taken at
the point the call was (or would be) made.

A recommended Bid already carries the reason in `convention_used`; that
text is returned as is. Calls typed in by a user carry no reason, so the
recognizers are replayed to name any convention the call matches before
falling back to a natural description.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .auction import Auction, VulnerabilityState
from .auction_view import ME, PARTNER, AuctionView
from .bid import Bid
from .bidding_types import MAJORS, SUIT_NAMES, SUITS
from .config import DEFAULT_CONFIG, BiddingConfig
from .convention_registry import ConventionRegistry, Recognition
from .conventions_catalog import default_registry
from .conventions_slam import SPLINTERS, is_blackwood_ask, is_gerber_ask

Matcher = Callable[[Bid, AuctionView, Recognition], bool]
Describer = Callable[[Bid, Recognition], str]

_DOUBLES: List[Tuple[str, str]] = [
    ("stolen_bid_double", "Stolen bid double: shows Stayman over the interference"),
    ("support_double", "Support Double: exactly 3-card support for partner"),
    ("takeout_double", "Takeout Double: short in their suit, support for the unbid suits"),
    ("negative_double", "Negative Double: values and length in the unbid suits"),
    ("responsive_double", "Responsive Double: values, two places to play"),
    ("reopening_double", "Reopening Double: shortness in their suit, 3+ in two other suits"),
    ("dont", "DONT double: a single-suited hand"),
    ("meckwell", "Meckwell double: a minor or both majors"),
]


def _token(*tokens: str) -> Matcher:
    return lambda bid, view, rec: bid.token in tokens


def _over_notrump(strains: str) -> Matcher:
    """One level above partner's notrump opening, in one of `strains`."""
    return lambda bid, view, rec: bid.level == rec.details["level"] + 1 and bid.strain in strains.split()


def _transfer_target(bid: Bid) -> str:
    return SUIT_NAMES[{"D": "H", "H": "S"}[bid.strain]]


def _transfer_accepted(bid: Bid, rec: Recognition) -> str:
    if bid.level == rec.details["level"] + 2:
        return "Jacoby transfer super-accepted: 4-card support, maximum"
    return "Jacoby transfer accepted"


def _jacoby_2nt_rebid(bid: Bid, rec: Recognition) -> str:
    trump = rec.details["trump"]
    if bid.strain == "NT":
        return "Jacoby 2NT rebid: 15–17 HCP, no shortness"
    if bid.strain != trump:
        return f"Jacoby 2NT rebid: shortness in {SUIT_NAMES[bid.strain]}"
    if bid.level == 3:
        return "Jacoby 2NT rebid: 18+ HCP, no shortness"
    return "Jacoby 2NT rebid: minimum, sign off in game"


def _dont(bid: Bid, rec: Recognition) -> str:
    if bid.strain == "S":
        return "DONT: natural spades, one-suited"
    if bid.strain == "H":
        return "DONT: hearts and spades"
    return f"DONT: {SUIT_NAMES[bid.strain]} and a higher-ranking suit"


def _meckwell(bid: Bid, rec: Recognition) -> str:
    if bid.strain in MAJORS:
        return f"Meckwell: natural {SUIT_NAMES[bid.strain]}, one-suited"
    return f"Meckwell: {SUIT_NAMES[bid.strain]} and a major"


# (convention key, does this call match?, description)
_CONTRACTS: List[Tuple[str, Matcher, Describer]] = [
    ("gerber_ask", _token("4C"), lambda b, r: "Gerber: asks for aces"),
    ("stayman", _over_notrump("C"), lambda b, r: "Stayman: asks opener for a 4-card major"),
    ("jacoby_transfer", _over_notrump("D H"),
     lambda b, r: f"Jacoby transfer to {_transfer_target(b)}"),
    ("texas_transfer", _token("4D", "4H"),
     lambda b, r: f"Texas transfer to {_transfer_target(b)}"),
    ("minor_suit_transfer", _token("2S", "2NT"),
     lambda b, r: f"Minor suit transfer to {'clubs' if b.strain == 'S' else 'diamonds'}"),
    ("lebensohl", _token("2NT"), lambda b, r: "Lebensohl: 2NT relay to 3C"),
    ("strong_2c_response", _token("2D"), lambda b, r: "Waiting response to 2C: artificial"),
    ("weak_two_response", _token("2NT"), lambda b, r: "Feature ask over Weak Two"),
    ("jacoby_2nt", _token("2NT"), lambda b, r: "Jacoby 2NT: 4+ support, game-forcing"),
    ("splinter", lambda b, v, r: b.token in SPLINTERS[r.details['trump']],
     lambda b, r: f"Splinter Bid: shortness in {SUIT_NAMES[SPLINTERS[r.details['trump']][b.token]]}"),
    ("drury", _token("2C"), lambda b, r: "Drury: passed-hand limit raise"),
    ("bergen", _token("3C", "3D"), lambda b, r: "Bergen Raise: 4-card support"),
    ("michaels", lambda b, v, r: b.level == 2 and b.strain == r.details["their"],
     lambda b, r: "Michaels Cue Bid: a two-suited hand"),
    ("unusual_nt", _token("2NT"), lambda b, r: "Unusual NT: the two lowest unbid suits"),
    ("dont", lambda b, v, r: b.level == 2 and b.strain in SUITS, _dont),
    ("meckwell", lambda b, v, r: b.level == 2 and b.strain in SUITS, _meckwell),
    ("stayman_answer",
     lambda b, v, r: b.level == r.details["level"] and b.strain in ("D", "H", "S"),
     lambda b, r: f"Stayman response: {_stayman_answer(b)}"),
    ("transfer_accept",
     lambda b, v, r: b.strain == r.details["major"] and b.level - r.details["level"] in (1, 2),
     _transfer_accepted),
    ("texas_accept", lambda b, v, r: b.token == f"4{r.details['major']}",
     lambda b, r: "Texas transfer accepted"),
    ("minor_transfer_accept", lambda b, v, r: b.token == f"3{r.details['minor']}",
     lambda b, r: "Minor suit transfer accepted"),
    ("jacoby_2nt_rebid",
     lambda b, v, r: b.level == 3 or b.token == f"4{r.details['trump']}",
     _jacoby_2nt_rebid),
    ("control_cue_bid",
     lambda b, v, r: b.strain in SUITS and b.strain != r.details["trump"] and b.level <= 5,
     lambda b, r: "Control Showing Cue Bid"),
]


def _stayman_answer(bid: Bid) -> str:
    if bid.strain == "D":
        return "no 4-card major"
    return f"4-card {SUIT_NAMES[bid.strain]}"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def get_explanation_for(
    bid: Bid,
    auction: Auction,
    config: Optional[BiddingConfig] = None,
    index: Optional[int] = None,
    vul: Optional[VulnerabilityState] = None,
    registry: Optional[ConventionRegistry] = None,
) -> str:
    """
    Describe `bid` in the context of `auction`.

    `index` is the call's position when it is already part of the auction.
    When omitted, a call found in the auction (by identity) is explained at
    its own position and any other call is explained as the next call.
    """
    if bid.convention_used:
        return bid.convention_used
    config = config or DEFAULT_CONFIG
    registry = registry or default_registry()
    if index is None:
        index = _index_of(bid, auction)
    view = AuctionView(auction, vul, upto=index)

    if bid.is_pass:
        return "Pass"
    if bid.is_redouble:
        return "Redouble: extra values after the opponents' double"
    if bid.is_double:
        return _explain_double(view, config, registry)
    return _explain_contract(bid, view, config, registry)


def _index_of(bid: Bid, auction: Auction) -> Optional[int]:
    for i, call in enumerate(auction.bids):
        if call is bid:
            return i
    return None


def _applies(key: str, view: AuctionView, config: BiddingConfig, registry: ConventionRegistry) -> bool:
    return bool(registry.get(key).check(view, config))


def _explain_double(view: AuctionView, config: BiddingConfig, registry: ConventionRegistry) -> str:
    for key, text in _DOUBLES:
        if _applies(key, view, config, registry):
            return text
    return "Penalty double"


def _explain_contract(
    bid: Bid, view: AuctionView, config: BiddingConfig, registry: ConventionRegistry
) -> str:
    # Ace asks are read straight off the auction with the call appended.
    asked = AuctionView(_with_call(view, bid), view.vul)
    if is_gerber_ask(asked, view.n) and config.enabled("ace_asking.gerber"):
        return "Gerber: asks for aces"
    if is_blackwood_ask(asked, view.n) and config.enabled("ace_asking.blackwood"):
        if config.ace_asking.blackwood.variant == "rkcb":
            return "RKCB: asks for keycards"
        return "Blackwood: asks for aces"

    eligible = {c.key for c in registry.ordered(view.phase())}
    for key, matches, describe in _CONTRACTS:
        if key not in eligible:
            continue
        recognition = registry.get(key).check(view, config)
        if recognition and matches(bid, view, recognition):
            return describe(bid, recognition)
    return _natural(bid, view)


def _with_call(view: AuctionView, bid: Bid) -> Auction:
    auction = Auction()
    auction.bids = list(view.calls) + [bid]
    return auction


# ---------------------------------------------------------------------------
# Natural descriptions
# ---------------------------------------------------------------------------

def _natural(bid: Bid, view: AuctionView) -> str:
    last = view.last_contract
    strain = SUIT_NAMES[bid.strain]
    if last is None:
        if bid.strain == "NT":
            return f"{bid.token} opening: natural, balanced"
        if bid.level == 1:
            return f"{bid.token} opening: natural, {strain}"
        return f"{bid.token} opening: preemptive or strong, {strain}"

    owner = view.last_contract_by
    jump = bid.level > _cheapest_level(last, bid)
    if owner in (PARTNER, ME):
        if bid.strain == last.strain:
            return f"Raise of {strain}" + (": jump, invitational or better" if jump else "")
        if bid.strain == "NT":
            return f"Natural {bid.token}: balanced, no fit"
        if bid.strain in view.their_suits():
            return f"Cue bid in the opponents' {strain}: game interest"
        verb = "New suit" if bid.strain not in view.our_suits() else "Rebid"
        return f"{verb} at {bid.level}-level: natural response in {strain}"

    # The last contract is the opponents'.
    if bid.strain in view.their_suits():
        return f"Cue bid in the opponents' {strain}: strong hand or support for partner"
    if bid.strain == "NT":
        return f"Natural {bid.token} overcall: balanced, stopper in their suit"
    if jump:
        return f"Jump overcall at {bid.level}-level: {strain}"
    return f"Overcall at {bid.level}-level: natural, {strain}"


def _cheapest_level(last: Bid, bid: Bid) -> int:
    same_level = Bid.contract(last.level, bid.strain)
    return last.level if same_level.outranks(last) else last.level + 1
