# file: bridge_bidding/bid.py
"""
Bid value type.

A Bid is exactly one of Pass, Double, Redouble or Contract(level, strain).
The text token ("1S", "PASS", "X", "XX") is an external encoding only:
parse it once with parse_bid() and work with the fields afterwards.

`seat` and `convention_used` may be filled in after construction (the
auction assigns seats, the engine attaches its explanation tag). Equality
compares the call itself, not that metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .bidding_types import (
    CONTRACT,
    DOUBLE,
    PASS,
    REDOUBLE,
    SEATS,
    STRAIN_ORDER,
    FormatError,
    Seat,
    Strain,
)

_PASS_ALIASES = {"PASS", "P", "-"}
_DOUBLE_ALIASES = {"X", "DBL", "DOUBLE", "D"}
_REDOUBLE_ALIASES = {"XX", "RDBL", "REDOUBLE", "R"}


@dataclass
class Bid:
    kind: str
    level: Optional[int] = None
    strain: Optional[Strain] = None
    seat: Optional[Seat] = field(default=None, compare=False)
    convention_used: Optional[str] = field(default=None, compare=False)
    # True when the auction filled `seat` in by rotation from the dealer.
    auto_seat: bool = field(default=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.kind == CONTRACT:
            if not isinstance(self.level, int) or not (1 <= self.level <= 7):
                raise FormatError(f"Contract level must be 1–7, got {self.level!r}")
            if self.strain not in STRAIN_ORDER:
                raise FormatError(f"Unknown strain {self.strain!r}")
        elif self.kind in (PASS, DOUBLE, REDOUBLE):
            if self.level is not None or self.strain is not None:
                raise FormatError(f"{self.kind} takes no level or strain")
        else:
            raise FormatError(f"Unknown call kind {self.kind!r}")
        if self.seat is not None and self.seat not in SEATS:
            raise FormatError(f"Invalid seat {self.seat!r} on bid")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def pass_(cls, convention_used: Optional[str] = None) -> "Bid":
        return cls(PASS, convention_used=convention_used)

    @classmethod
    def double(cls, convention_used: Optional[str] = None) -> "Bid":
        return cls(DOUBLE, convention_used=convention_used)

    @classmethod
    def redouble(cls, convention_used: Optional[str] = None) -> "Bid":
        return cls(REDOUBLE, convention_used=convention_used)

    @classmethod
    def contract(
        cls, level: int, strain: Strain, convention_used: Optional[str] = None
    ) -> "Bid":
        return cls(CONTRACT, level, strain, convention_used=convention_used)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_pass(self) -> bool:
        return self.kind == PASS

    @property
    def is_double(self) -> bool:
        return self.kind == DOUBLE

    @property
    def is_redouble(self) -> bool:
        return self.kind == REDOUBLE

    @property
    def is_contract(self) -> bool:
        return self.kind == CONTRACT

    @property
    def rank(self) -> Tuple[int, int]:
        """(level, strain order); only meaningful for contracts."""
        if not self.is_contract:
            return (0, -1)
        return (self.level, STRAIN_ORDER[self.strain])  # type: ignore[index]

    def outranks(self, other: Optional["Bid"]) -> bool:
        if not self.is_contract:
            return False
        if other is None:
            return True
        return self.rank > other.rank

    @property
    def token(self) -> str:
        if self.is_contract:
            return f"{self.level}{self.strain}"
        return self.kind

    def copy(self) -> "Bid":
        return Bid(
            self.kind,
            self.level,
            self.strain,
            seat=self.seat,
            convention_used=self.convention_used,
            auto_seat=self.auto_seat,
        )

    def __str__(self) -> str:
        return self.token


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_bid(token: str, seat: Optional[Seat] = None) -> Bid:
    """
    Parse a call token: "1C".."7NT" (also "1N"), "PASS"/"P", "X"/"DBL",
    "XX"/"RDBL". Case-insensitive.
    """
    if isinstance(token, Bid):
        return token
    if token is None:
        return Bid(PASS, seat=seat)
    if not isinstance(token, str):
        raise FormatError(f"Call token must be a string, got {type(token).__name__}")

    text = token.strip().upper()
    if text in _PASS_ALIASES:
        return Bid(PASS, seat=seat)
    if text in _DOUBLE_ALIASES:
        return Bid(DOUBLE, seat=seat)
    if text in _REDOUBLE_ALIASES:
        return Bid(REDOUBLE, seat=seat)

    if len(text) >= 2 and text[0].isdigit():
        strain = text[1:]
        if strain == "N":
            strain = "NT"
        return Bid(CONTRACT, int(text[0]), strain, seat=seat)

    raise FormatError(f"Cannot parse call token {token!r}")


def contract_above(bid: Optional[Bid], strain: Strain) -> Optional[Bid]:
    """Cheapest contract in `strain` that outranks `bid`, or None above 7."""
    level = cheapest_level(bid, strain)
    if level > 7:
        return None
    return Bid.contract(level, strain)


def cheapest_level(bid: Optional[Bid], strain: Strain) -> int:
    """Lowest level at which `strain` can be bid over `bid` (8 means none)."""
    if bid is None or not bid.is_contract:
        return 1
    if STRAIN_ORDER[strain] > STRAIN_ORDER[bid.strain]:
        return bid.level
    return bid.level + 1

