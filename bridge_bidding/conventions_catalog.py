# file: bridge_bidding/conventions_catalog.py
"""
The default convention set and its per-phase precedence.

Order inside each list is the tie-break: the first convention that is
enabled, applies to the auction and produces a call wins. Ace- and
king-asking continuations come first, then other artificial calls, and the
natural rules run only after every list entry has declined.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from . import (
    conventions_competitive,
    conventions_doubles,
    conventions_majors,
    conventions_notrump,
    conventions_openings,
    conventions_slam,
)
from .bidding_types import (
    PHASE_ADVANCING,
    PHASE_CONTINUING,
    PHASE_OPENING,
    PHASE_OVERCALLING,
    PHASE_RESPONDING,
)
from .config import BiddingConfig
from .convention_registry import Convention, ConventionRegistry

ALL_CONVENTIONS: List[Convention] = (
    conventions_slam.CONVENTIONS
    + conventions_notrump.CONVENTIONS
    + conventions_openings.CONVENTIONS
    + conventions_majors.CONVENTIONS
    + conventions_competitive.CONVENTIONS
    + conventions_doubles.CONVENTIONS
)

PRECEDENCE: Dict[str, List[str]] = {
    PHASE_OPENING: [
        "strong_2c",
        "weak_two",
        "three_level_preempt",
    ],
    PHASE_RESPONDING: [
        "gerber_ask",
        "stolen_bid_double",
        "lebensohl",
        "texas_transfer",
        "stayman",
        "jacoby_transfer",
        "minor_suit_transfer",
        "strong_2c_response",
        "weak_two_response",
        "splinter",
        "jacoby_2nt",
        "drury",
        "bergen",
        "cue_bid_raise",
        "negative_double",
    ],
    PHASE_OVERCALLING: [
        "dont",
        "meckwell",
        "michaels",
        "unusual_nt",
        "takeout_double",
        "reopening_double",
    ],
    PHASE_ADVANCING: [
        "nt_defence_advance",
        "michaels_advance",
        "unusual_nt_advance",
        "responsive_double",
        "advancer_raise",
    ],
    PHASE_CONTINUING: [
        # Answers to ace and king asks.
        "gerber_response",
        "gerber_king_response",
        "blackwood_response",
        "blackwood_king_response",
        # The asker places the contract.
        "gerber_followup",
        "gerber_king_followup",
        "blackwood_followup",
        "blackwood_king_followup",
        # Relays and answers to artificial calls.
        "stayman_answer",
        "transfer_accept",
        "texas_accept",
        "minor_transfer_accept",
        "lebensohl_relay_accept",
        "nt_defence_rebid",
        "michaels_minor_answer",
        "feature_answer",
        "strong_2c_rebid",
        "drury_rebid",
        "jacoby_2nt_rebid",
        "splinter_rebid",
        "bergen_rebid",
        # Slam tries and competitive doubles.
        "support_double",
        "reopening_double",
        "control_cue_bid",
        "blackwood_ask",
        "gerber_ask",
        # Responder's second call after a notrump convention.
        "stayman_followup",
        "transfer_followup",
        "lebensohl_followup",
    ],
}

# Names used by the practice-deal artifact.
PRACTICE_CONVENTIONS = [
    "Strong 2 Clubs",
    "Weak 2 Bids",
    "Stayman",
    "Jacoby Transfers",
    "Texas Transfers",
    "Minor Suit Transfers",
    "Gerber",
    "Regular Blackwood",
    "RKC Blackwood 1430",
    "Control Showing Cue Bids",
    "DONT",
    "Meckwell",
    "Jacoby 2NT",
    "Splinter Bids",
    "Bergen Raises",
    "Lebensohl",
    "Unusual NT",
    "Michaels",
    "Responsive Doubles",
    "Negative Doubles",
    "Takeout Doubles",
    "Support Doubles",
    "Reopening Doubles",
    "Cue Bid Raises",
    "Drury",
]


def default_registry() -> ConventionRegistry:
    return ConventionRegistry(ALL_CONVENTIONS, PRECEDENCE)


def practice_name(convention: Convention, config: BiddingConfig) -> Optional[str]:
    """Practice-artifact name for a convention that fired, or None if it has none."""
    if convention.name == "Blackwood":
        if config.ace_asking.blackwood.variant == "classic":
            return "Regular Blackwood"
        return "RKC Blackwood 1430"
    if convention.key in ("nt_defence_advance", "nt_defence_rebid"):
        return "DONT" if config.notrump_defenses.dont.enabled else "Meckwell"
    return convention.name if convention.name in PRACTICE_CONVENTIONS else None
