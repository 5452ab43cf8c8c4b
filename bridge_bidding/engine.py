# file: bridge_bidding/engine.py
"""
Recommendation engine.

recommend() is a pure function of (hand, auction, config, vulnerability):

  1. classify the acting seat's phase from the auction;
  2. consult that phase's conventions in precedence order, skipping any
     whose call is illegal here;
  3. fall back to the natural rules;
  4. pass the winner through the legality enforcer.

Nothing is cached between calls, so a new config takes effect on the next
call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .auction import Auction, VulnerabilityState
from .auction_view import AuctionView
from .bid import Bid
from .bidding_types import AuctionClosedError
from .config import DEFAULT_CONFIG, BiddingConfig
from .convention_registry import Convention, ConventionRegistry
from .conventions_catalog import default_registry
from .hand import Hand
from .legality import ensure_legal, is_legal
from .natural import natural_call

logger = logging.getLogger(__name__)

_DEFAULT_REGISTRY: Optional[ConventionRegistry] = None


def _registry(registry: Optional[ConventionRegistry]) -> ConventionRegistry:
    global _DEFAULT_REGISTRY
    if registry is not None:
        return registry
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = default_registry()
    return _DEFAULT_REGISTRY


@dataclass
class Recommendation:
    bid: Bid
    phase: str
    convention: Optional[Convention] = None


def recommend_with_source(
    hand: Hand,
    auction: Auction,
    config: Optional[BiddingConfig] = None,
    vul: Optional[VulnerabilityState] = None,
    registry: Optional[ConventionRegistry] = None,
) -> Recommendation:
    """Recommended call plus the phase and the convention that produced it."""
    if auction.is_closed():
        raise AuctionClosedError(f"Auction is closed ({auction.tokens()}); no call to make")
    config = config or DEFAULT_CONFIG
    view = AuctionView(auction, vul)
    phase = view.phase()
    logger.debug("Phase %s after %s", phase, auction.tokens())

    match = _registry(registry).first_match(
        hand, view, config, phase, accept=lambda bid: is_legal(bid, auction)
    )
    if match is not None:
        convention, candidate = match
    else:
        convention, candidate = None, natural_call(hand, view, config, phase)
        logger.debug("Natural %s: %s (%s)", phase, candidate.token, candidate.convention_used)

    bid = ensure_legal(candidate, auction)
    if bid is not candidate:
        convention = None
    return Recommendation(bid, phase, convention)


def recommend(
    hand: Hand,
    auction: Auction,
    config: Optional[BiddingConfig] = None,
    vul: Optional[VulnerabilityState] = None,
    registry: Optional[ConventionRegistry] = None,
) -> Bid:
    return recommend_with_source(hand, auction, config, vul, registry).bid
