# file: bridge_bidding/legality.py
"""
Legality enforcer.

  * A contract must outrank the last contract (level first, then
    C < D < H < S < NT).
  * Double: the most recent non-pass call is an opposing contract.
  * Redouble: the most recent non-pass call is an opposing double.

"Opposing" is read from call order (an even number of trailing passes
means the last action came from the other side), so seatless auctions
behave exactly like seated ones. ensure_legal() never raises; anything
illegal comes back as Pass.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from .auction import Auction
from .bid import Bid

logger = logging.getLogger(__name__)


def _last_action(auction: Auction) -> Optional[Tuple[Bid, int]]:
    """(call, trailing_pass_count) for the most recent non-pass call."""
    passes = 0
    for bid in reversed(auction.bids):
        if bid.is_pass:
            passes += 1
            continue
        return bid, passes
    return None


def is_legal(bid: Bid, auction: Auction) -> bool:
    if bid is None:
        return False
    if auction.is_closed():
        return False
    if bid.is_pass:
        return True

    if bid.is_contract:
        return bid.outranks(auction.last_contract())

    found = _last_action(auction)
    if found is None:
        return False
    last, passes = found
    opposing = passes % 2 == 0

    if bid.is_double:
        return opposing and last.is_contract
    if bid.is_redouble:
        return opposing and last.is_double
    return False


def ensure_legal(bid: Optional[Bid], auction: Auction) -> Bid:
    """Return `bid` if legal, otherwise a Pass (keeping the reason as a tag)."""
    if bid is not None and is_legal(bid, auction):
        return bid
    if bid is not None:
        logger.warning(
            "Downgrading illegal call %s after %s to Pass", bid.token, auction.tokens()
        )
    return Bid.pass_(convention_used="Pass (no legal action available)")
