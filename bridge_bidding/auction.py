# file: bridge_bidding/auction.py
"""
Auction state machine and vulnerability.

An Auction is an append-only list of Bid values with an optional dealer and
an optional perspective seat (`our_seat`). It is Open until it is Closed:

  * the last three calls are all Pass (any auction with >= 3 calls), or
  * exactly four calls have been made and all four are Pass.

When the dealer is known, each bid without a seat gets one by rotation as it
is added (and is flagged `auto_seat`). `reseat(dealer)` re-derives every
seat from a new dealer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .bid import Bid, parse_bid
from .bidding_types import (
    PARTNER,
    SEATS,
    Seat,
    SeatError,
)


# ---------------------------------------------------------------------------
# Seat helpers
# ---------------------------------------------------------------------------

def validate_seat(seat: Optional[Seat], *, what: str = "seat") -> Optional[Seat]:
    if seat is None:
        return None
    if not isinstance(seat, str) or seat.upper() not in SEATS:
        raise SeatError(f"Invalid {what} {seat!r}; expected one of N, E, S, W")
    return seat.upper()


def seat_after(seat: Seat, steps: int = 1) -> Seat:
    return SEATS[(SEATS.index(seat) + steps) % 4]


def same_side(a: Seat, b: Seat) -> bool:
    return a == b or PARTNER[a] == b


# ---------------------------------------------------------------------------
# Vulnerability
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VulnerabilityState:
    """`we` is the acting side, `they` the opponents. Independent flags."""

    we: bool = False
    they: bool = False

    @property
    def label(self) -> str:
        if self.we == self.they:
            return "equal"
        return "unfav" if self.we else "fav"

    def flipped(self) -> "VulnerabilityState":
        return VulnerabilityState(we=self.they, they=self.we)

    @classmethod
    def for_seat(cls, board_vul: str, seat: Seat) -> "VulnerabilityState":
        """From a board label ('None', 'NS', 'EW', 'Both') for `seat`."""
        ns = board_vul in ("NS", "Both")
        ew = board_vul in ("EW", "Both")
        if seat in ("N", "S"):
            return cls(we=ns, they=ew)
        return cls(we=ew, they=ns)


# ---------------------------------------------------------------------------
# Auction
# ---------------------------------------------------------------------------

class Auction:
    def __init__(
        self,
        bids: Optional[Iterable[Union[Bid, str]]] = None,
        dealer: Optional[Seat] = None,
        our_seat: Optional[Seat] = None,
    ) -> None:
        self.dealer: Optional[Seat] = validate_seat(dealer, what="dealer")
        self.our_seat: Optional[Seat] = validate_seat(our_seat, what="our_seat")
        self.bids: List[Bid] = []
        for bid in bids or []:
            self.add(bid)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, bid: Union[Bid, str]) -> Bid:
        """Append a copy of `bid`. Any call is accepted; closure is a query."""
        call = bid.copy() if isinstance(bid, Bid) else parse_bid(bid)
        if call.seat is None and self.dealer is not None:
            call.seat = seat_after(self.dealer, len(self.bids))
            call.auto_seat = True
        self.bids.append(call)
        return call

    def reseat(self, dealer: Seat) -> None:
        """Overwrite every bid's seat by rotation from `dealer`."""
        if dealer is None:
            raise SeatError("reseat() needs a dealer seat")
        self.dealer = validate_seat(dealer, what="dealer")
        for i, bid in enumerate(self.bids):
            bid.seat = seat_after(self.dealer, i)
            bid.auto_seat = True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.bids)

    def __iter__(self):
        return iter(self.bids)

    def __getitem__(self, index: int) -> Bid:
        return self.bids[index]

    def tokens(self) -> List[str]:
        return [b.token for b in self.bids]

    def is_closed(self) -> bool:
        n = len(self.bids)
        if n >= 3 and all(b.is_pass for b in self.bids[-3:]):
            return True
        return n == 4 and all(b.is_pass for b in self.bids)

    def next_seat(self) -> Optional[Seat]:
        """Seat due to call next, when the dealer is known."""
        if self.dealer is None:
            return None
        return seat_after(self.dealer, len(self.bids))

    def last_contract_index(self) -> Optional[int]:
        for i in range(len(self.bids) - 1, -1, -1):
            if self.bids[i].is_contract:
                return i
        return None

    def last_contract(self) -> Optional[Bid]:
        i = self.last_contract_index()
        return None if i is None else self.bids[i]

    def last_bidder_seat(self) -> Optional[Seat]:
        bid = self.last_contract()
        return None if bid is None else bid.seat

    def last_side(self) -> Optional[str]:
        """'we' / 'they' for the last contract, relative to our_seat."""
        seat = self.last_bidder_seat()
        if seat is None or self.our_seat is None:
            return None
        return "we" if same_side(seat, self.our_seat) else "they"

    def copy(self) -> "Auction":
        clone = Auction(dealer=self.dealer, our_seat=self.our_seat)
        clone.bids = [b.copy() for b in self.bids]
        return clone

    def __repr__(self) -> str:
        return (
            f"Auction({self.tokens()!r}, dealer={self.dealer!r}, "
            f"our_seat={self.our_seat!r})"
        )
