# file: bridge_bidding/hand.py
"""
Hand model.

A Hand is four suit buckets of Card values plus point counts that are
computed once, at construction:

    lengths              cards per suit
    hcp                  A=4, K=3, Q=2, J=1
    distribution_points  void 3, singleton 2, doubleton 1

Text form is four whitespace-separated groups in S H D C order, "-" (or an
empty group) for a void, e.g. "AKQ2 J43 - T98765". Ranks are
case-insensitive, "10" is accepted for "T", and "x" is an unnamed spot card.
Hands are not checked for 13 cards or duplicates; synthetic partial hands
are normal in tests.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Sequence

from .bidding_types import (
    DISTRIBUTION_POINTS,
    HCP_VALUES,
    RANKS,
    SUITS,
    FormatError,
    Rank,
    Suit,
)

SPOT = "x"
_VALID_RANKS = set(RANKS) | {SPOT}


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in _VALID_RANKS:
            raise FormatError(f"Invalid card rank {self.rank!r}")
        if self.suit not in SUITS:
            raise FormatError(f"Invalid card suit {self.suit!r}")

    @property
    def hcp(self) -> int:
        return HCP_VALUES.get(self.rank, 0)

    def __str__(self) -> str:
        return f"{self.suit}{self.rank}"


def _rank_sort_key(rank: Rank) -> int:
    # Spot cards sort after the 2.
    return RANKS.index(rank) if rank in RANKS else len(RANKS)


class Hand:
    """A dealt (or synthetic) hand with cached point counts."""

    def __init__(self, suits: Mapping[Suit, Iterable[Card]]) -> None:
        buckets: Dict[Suit, List[Card]] = {s: [] for s in SUITS}
        for suit, cards in suits.items():
            if suit not in buckets:
                raise FormatError(f"Unknown suit bucket {suit!r}")
            for card in cards:
                if card.suit != suit:
                    raise FormatError(f"Card {card} filed under suit {suit}")
                buckets[suit].append(card)
        for suit in SUITS:
            buckets[suit].sort(key=lambda c: _rank_sort_key(c.rank))

        self.suits: Dict[Suit, List[Card]] = buckets
        self.lengths: Dict[Suit, int] = {s: len(buckets[s]) for s in SUITS}
        self.hcp: int = sum(c.hcp for s in SUITS for c in buckets[s])
        self.distribution_points: int = sum(
            DISTRIBUTION_POINTS.get(n, 0) for n in self.lengths.values()
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_ranks(cls, ranks_by_suit: Mapping[Suit, str]) -> "Hand":
        """Build from {"S": "AKQ", "H": "", ...} rank strings."""
        return cls(
            {suit: _parse_group(suit, ranks_by_suit.get(suit, "")) for suit in SUITS}
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def total_points(self) -> int:
        return self.hcp + self.distribution_points

    def length(self, suit: Suit) -> int:
        return self.lengths[suit]

    def ranks(self, suit: Suit) -> List[Rank]:
        return [c.rank for c in self.suits[suit]]

    def holds(self, rank: Rank, suit: Suit) -> bool:
        return rank in self.ranks(suit)

    def suit_hcp(self, suit: Suit) -> int:
        return sum(c.hcp for c in self.suits[suit])

    def shape(self) -> List[int]:
        """Suit lengths, longest first (e.g. [5, 4, 3, 1])."""
        return sorted(self.lengths.values(), reverse=True)

    def longest_suits(self) -> List[Suit]:
        """Suits of maximal length, highest-ranking first."""
        longest = max(self.lengths.values())
        return [s for s in SUITS if self.lengths[s] == longest]

    def to_text(self) -> str:
        groups = []
        for suit in SUITS:
            ranks = "".join(self.ranks(suit))
            groups.append(ranks or "-")
        return " ".join(groups)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Hand({self.to_text()!r})"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _parse_group(suit: Suit, group: str) -> List[Card]:
    text = group.strip().upper().replace("10", "T")
    if text in ("", "-"):
        return []
    cards: List[Card] = []
    for ch in text:
        rank = SPOT if ch == "X" else ch
        if rank not in _VALID_RANKS:
            raise FormatError(f"Invalid rank {ch!r} in {suit} group {group!r}")
        cards.append(Card(rank, suit))
    return cards


def parse_hand(text: str) -> Hand:
    """
    Parse "S H D C" hand text.

    Exactly four whitespace-separated groups are required; anything else is
    a FormatError. Use parse_hand_groups when a void arrives as "".
    """
    if not isinstance(text, str):
        raise FormatError(f"Hand text must be a string, got {type(text).__name__}")
    groups = re.split(r"\s+", text.strip()) if text.strip() else []
    if len(groups) != 4:
        raise FormatError(
            f"Hand text must have exactly 4 suit groups (S H D C), got {len(groups)}: {text!r}"
        )
    return parse_hand_groups(groups)


def parse_hand_groups(groups: Sequence[str]) -> Hand:
    """Parse four explicit suit groups in S H D C order; "" or "-" is a void."""
    if len(groups) != 4:
        raise FormatError(f"Expected 4 suit groups, got {len(groups)}")
    return Hand({suit: _parse_group(suit, g) for suit, g in zip(SUITS, groups)})
