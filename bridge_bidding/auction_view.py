# file: bridge_bidding/auction_view.py
"""
Seat-relative reading of an auction for the hand that calls next.

Relationships come from call order: the last call was made by RHO, the one
before by partner, then LHO, then the acting seat itself. A correctly
seated auction rotates the same way, so the reading is identical whether or
not seats are known.

`upto` views a prefix, which is how an existing call is explained from the
point of view of the seat that made it.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .auction import Auction, VulnerabilityState
from .bid import Bid
from .bidding_types import (
    PHASE_ADVANCING,
    PHASE_CONTINUING,
    PHASE_OPENING,
    PHASE_OVERCALLING,
    PHASE_RESPONDING,
    SUITS,
    Strain,
    Suit,
)

ME = "me"
PARTNER = "partner"
LHO = "lho"
RHO = "rho"

_BY_DISTANCE = {0: ME, 1: RHO, 2: PARTNER, 3: LHO}

IndexedBid = Tuple[int, Bid]


class AuctionView:
    def __init__(
        self,
        auction: Auction,
        vul: Optional[VulnerabilityState] = None,
        upto: Optional[int] = None,
    ) -> None:
        self.auction = auction
        self.calls: List[Bid] = list(auction.bids if upto is None else auction.bids[:upto])
        self.n = len(self.calls)
        self.vul = vul or VulnerabilityState()

    # ------------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------------

    def relation(self, index: int) -> str:
        return _BY_DISTANCE[(self.n - index) % 4]

    def is_ours(self, index: int) -> bool:
        return (self.n - index) % 2 == 0

    def calls_by(self, who: str) -> List[IndexedBid]:
        return [(i, b) for i, b in enumerate(self.calls) if self.relation(i) == who]

    def actions_by(self, who: str) -> List[IndexedBid]:
        """Non-pass calls by `who`."""
        return [(i, b) for i, b in self.calls_by(who) if not b.is_pass]

    def back(self, steps: int) -> Optional[Bid]:
        """Call `steps` positions back (1 = RHO's last call)."""
        if steps > self.n:
            return None
        return self.calls[self.n - steps]

    @property
    def rho_call(self) -> Optional[Bid]:
        return self.back(1)

    @property
    def partner_call(self) -> Optional[Bid]:
        return self.back(2)

    @property
    def lho_call(self) -> Optional[Bid]:
        return self.back(3)

    @property
    def my_last_call(self) -> Optional[Bid]:
        return self.back(4)

    def rho_passed(self) -> bool:
        call = self.rho_call
        return call is not None and call.is_pass

    # ------------------------------------------------------------------
    # Contracts
    # ------------------------------------------------------------------

    @property
    def opening_index(self) -> Optional[int]:
        for i, bid in enumerate(self.calls):
            if bid.is_contract:
                return i
        return None

    @property
    def opening(self) -> Optional[Bid]:
        i = self.opening_index
        return None if i is None else self.calls[i]

    @property
    def opener(self) -> Optional[str]:
        i = self.opening_index
        return None if i is None else self.relation(i)

    @property
    def opening_seat_position(self) -> Optional[int]:
        """1..4: how many calls into the auction the opening came."""
        i = self.opening_index
        return None if i is None else i + 1

    @property
    def last_contract_index(self) -> Optional[int]:
        for i in range(self.n - 1, -1, -1):
            if self.calls[i].is_contract:
                return i
        return None

    @property
    def last_contract(self) -> Optional[Bid]:
        i = self.last_contract_index
        return None if i is None else self.calls[i]

    @property
    def last_contract_by(self) -> Optional[str]:
        i = self.last_contract_index
        return None if i is None else self.relation(i)

    def last_contract_ours(self) -> bool:
        i = self.last_contract_index
        return i is not None and self.is_ours(i)

    def trailing_passes(self) -> int:
        count = 0
        for bid in reversed(self.calls):
            if not bid.is_pass:
                break
            count += 1
        return count

    # ------------------------------------------------------------------
    # Suits
    # ------------------------------------------------------------------

    def strains_bid_by(self, *who: str) -> List[Strain]:
        seen: List[Strain] = []
        for i, bid in enumerate(self.calls):
            if bid.is_contract and self.relation(i) in who and bid.strain not in seen:
                seen.append(bid.strain)
        return seen

    def suits_bid_by(self, *who: str) -> List[Suit]:
        return [s for s in self.strains_bid_by(*who) if s != "NT"]

    def their_suits(self) -> List[Suit]:
        return self.suits_bid_by(LHO, RHO)

    def our_suits(self) -> List[Suit]:
        return self.suits_bid_by(ME, PARTNER)

    def unbid_suits(self) -> List[Suit]:
        bid = set(self.suits_bid_by(ME, PARTNER, LHO, RHO))
        return [s for s in SUITS if s not in bid]

    # ------------------------------------------------------------------
    # Position
    # ------------------------------------------------------------------

    def i_have_acted(self) -> bool:
        return bool(self.actions_by(ME))

    def partner_has_acted(self) -> bool:
        return bool(self.actions_by(PARTNER))

    def is_passed_hand(self) -> bool:
        """I passed at my first turn, before anybody opened (or still no opening)."""
        mine = self.calls_by(ME)
        if not mine:
            return False
        first_index, first = mine[0]
        opening = self.opening_index
        return first.is_pass and (opening is None or first_index < opening)

    def partner_is_passed_hand(self) -> bool:
        calls = self.calls_by(PARTNER)
        if not calls:
            return False
        first_index, first = calls[0]
        opening = self.opening_index
        return first.is_pass and (opening is None or first_index < opening)

    def phase(self) -> str:
        return classify_phase(self)

    # ------------------------------------------------------------------
    # Partner's strength
    # ------------------------------------------------------------------

    def partner_min_hcp(self) -> int:
        """
        Rough floor on partner's HCP from the first constructive call.

        Used for game/slam arithmetic only; conventional rules read the
        auction directly.
        """
        actions = self.actions_by(PARTNER)
        if not actions:
            return 0
        index, first = actions[0]
        if index == self.opening_index:
            return _opening_floor(first, index)
        if first.is_double:
            return 12 if self.relation(self.opening_index) in (LHO, RHO) else 8
        if self.opener == ME:
            return _response_floor(first, self.opening)
        # Overcall.
        if first.strain == "NT" and first.level == 1:
            return 15
        return 8


def _opening_floor(bid: Bid, index: int) -> int:
    if bid.level == 1 and bid.strain == "NT":
        return 15
    if bid.level == 2 and bid.strain == "NT":
        return 20
    if bid.level == 2 and bid.strain == "C":
        return 22
    if bid.level >= 2:
        return 5
    # Third and fourth seat openings can be light.
    return 10 if index >= 2 else 12


def _response_floor(bid: Bid, opening: Optional[Bid]) -> int:
    if not bid.is_contract or opening is None:
        return 0
    if opening.strain == "NT":
        return 0 if bid.strain in ("D", "H") else 8
    if bid.strain == opening.strain:
        return 10 if bid.level >= 3 else 6
    if bid.strain == "NT":
        return {1: 6, 2: 13, 3: 13}.get(bid.level, 13)
    if bid.level == 1:
        return 6
    if bid.level == 2:
        return 10
    return 13


def classify_phase(view: AuctionView) -> str:
    if view.opening_index is None:
        return PHASE_OPENING
    if view.opener == ME or view.i_have_acted():
        return PHASE_CONTINUING
    if view.opener == PARTNER:
        return PHASE_RESPONDING
    if view.partner_has_acted():
        return PHASE_ADVANCING
    return PHASE_OVERCALLING
