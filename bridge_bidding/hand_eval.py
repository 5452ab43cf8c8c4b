# file: bridge_bidding/hand_eval.py
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .auction import VulnerabilityState
from .bidding_types import SUITS, STRAIN_ORDER, Suit
from .config import BiddingConfig
from .hand import Hand

# ---------------------------------------------------------------------------
# Shape
# ---------------------------------------------------------------------------

_BALANCED = {(4, 3, 3, 3), (4, 4, 3, 2), (5, 3, 3, 2)}
_SEMI_BALANCED_5422 = (5, 4, 2, 2)


def is_balanced(hand: Hand, config: Optional[BiddingConfig] = None) -> bool:
    shape = tuple(hand.shape())
    if shape in _BALANCED:
        return True
    if config is not None and config.general.balanced_shapes.include_5422:
        return shape == _SEMI_BALANCED_5422
    return False


def rule_of_20(hand: Hand) -> bool:
    top_two = hand.shape()[:2]
    return hand.hcp + sum(top_two) >= 20


def longest_suit(hand: Hand, suits: Iterable[Suit] = SUITS) -> Suit:
    """Longest of `suits`; ties go to the higher-ranking suit."""
    candidates = list(suits)
    return max(candidates, key=lambda s: (hand.length(s), STRAIN_ORDER[s]))


def best_minor(hand: Hand) -> Suit:
    """Opening minor: longer minor; 3-3 opens 1C, otherwise ties open 1D."""
    c, d = hand.length("C"), hand.length("D")
    if c > d:
        return "C"
    if d > c:
        return "D"
    return "C" if c == 3 else "D"


def suits_with_length(hand: Hand, minimum: int, suits: Iterable[Suit] = SUITS) -> List[Suit]:
    return [s for s in suits if hand.length(s) >= minimum]


def honors(hand: Hand, suit: Suit, top: str = "AKQJT") -> int:
    return sum(1 for r in hand.ranks(suit) if r in top)


def good_suit(hand: Hand, suit: Suit) -> bool:
    """Two of the top three honors, or three of the top five."""
    return honors(hand, suit, "AKQ") >= 2 or honors(hand, suit) >= 3


# ---------------------------------------------------------------------------
# Stoppers and controls
# ---------------------------------------------------------------------------

def has_stopper(hand: Hand, suit: Suit) -> bool:
    n = hand.length(suit)
    ranks = hand.ranks(suit)
    if "A" in ranks:
        return True
    if "K" in ranks and n >= 2:
        return True
    if "Q" in ranks and n >= 3:
        return True
    return "J" in ranks and n >= 4


def first_round_control(hand: Hand, suit: Suit) -> bool:
    return hand.length(suit) == 0 or hand.holds("A", suit)


def second_round_control(hand: Hand, suit: Suit) -> bool:
    return hand.length(suit) == 1 or hand.holds("K", suit)


def count_aces(hand: Hand) -> int:
    return sum(1 for s in SUITS if hand.holds("A", s))


def count_kings(hand: Hand) -> int:
    return sum(1 for s in SUITS if hand.holds("K", s))


def count_keycards(hand: Hand, trump: Suit) -> int:
    """Four aces plus the trump king."""
    return count_aces(hand) + (1 if hand.holds("K", trump) else 0)


def has_trump_queen(hand: Hand, trump: Suit) -> bool:
    return hand.holds("Q", trump)


# ---------------------------------------------------------------------------
# Vulnerability
# ---------------------------------------------------------------------------

# Adjustment to minimum HCP by action kind and vulnerability label.
VUL_ADJUSTMENTS: Dict[str, Dict[str, int]] = {
    "overcall": {"fav": -1, "equal": 0, "unfav": 1},
    "preempt": {"fav": -2, "equal": 0, "unfav": 2},
    "weak_two": {"fav": -1, "equal": 0, "unfav": 4},
}


def vul_adjustment(kind: str, vul: VulnerabilityState, config: BiddingConfig) -> int:
    if not config.general.vulnerability_adjustments:
        return 0
    return VUL_ADJUSTMENTS[kind][vul.label]
