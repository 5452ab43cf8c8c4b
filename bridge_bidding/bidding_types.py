# bridge_bidding/bidding_types.py
#
# Seats, suits, strains, rank tables and the exception hierarchy.
#
# This is a LEAF module: it has no bridge_bidding imports.
# Every other module imports its constants and exceptions from here.
from __future__ import annotations

from typing import Dict, List, Tuple

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

Seat = str      # "N", "E", "S", "W"
Suit = str      # "S", "H", "D", "C"
Strain = str    # a Suit or "NT"
Rank = str      # "A", "K", ..., "2"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class BiddingError(Exception):
    """Base class for every error raised by bridge_bidding."""


class FormatError(BiddingError):
    """Raised when hand text or a call token cannot be parsed."""


class SeatError(BiddingError):
    """Raised when a seat outside N/E/S/W is supplied."""


class AuctionClosedError(BiddingError):
    """Raised when a recommendation is requested on a closed auction."""


class ConfigError(BiddingError):
    """Raised when a configuration value has the wrong type or range."""


class PracticeDealError(BiddingError):
    """Raised when a practice-deal record is malformed or inconsistent."""


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SEATS: List[Seat] = ["N", "E", "S", "W"]

PARTNER: Dict[Seat, Seat] = {
    "N": "S",
    "S": "N",
    "E": "W",
    "W": "E",
}

SEAT_NAMES: Dict[Seat, str] = {
    "N": "North",
    "E": "East",
    "S": "South",
    "W": "West",
}

# Display / text order (hand strings are written S H D C).
SUITS: List[Suit] = ["S", "H", "D", "C"]

# Bidding order, lowest first.
STRAINS: List[Strain] = ["C", "D", "H", "S", "NT"]
STRAIN_ORDER: Dict[Strain, int] = {s: i for i, s in enumerate(STRAINS)}

MAJORS: Tuple[Suit, ...] = ("H", "S")
MINORS: Tuple[Suit, ...] = ("C", "D")

SUIT_NAMES: Dict[Strain, str] = {
    "C": "clubs",
    "D": "diamonds",
    "H": "hearts",
    "S": "spades",
    "NT": "notrump",
}

RANKS: str = "AKQJT98765432"
HCP_VALUES: Dict[Rank, int] = {"A": 4, "K": 3, "Q": 2, "J": 1}

# Short-suit points by suit length: void, singleton, doubleton.
DISTRIBUTION_POINTS: Dict[int, int] = {0: 3, 1: 2, 2: 1}

PASS = "PASS"
DOUBLE = "X"
REDOUBLE = "XX"
CONTRACT = "CONTRACT"

# Phases an acting seat can be in (see auction_view.classify_phase).
PHASE_OPENING = "opening"
PHASE_RESPONDING = "responding"
PHASE_OVERCALLING = "overcalling"
PHASE_ADVANCING = "advancing"
PHASE_CONTINUING = "continuing"

PHASES: List[str] = [
    PHASE_OPENING,
    PHASE_RESPONDING,
    PHASE_OVERCALLING,
    PHASE_ADVANCING,
    PHASE_CONTINUING,
]
