from __future__ import annotations

from typing import Optional, Sequence

import pytest

from bridge_bidding.auction import Auction, VulnerabilityState
from bridge_bidding.auction_view import AuctionView
from bridge_bidding.config import BiddingConfig
from bridge_bidding.engine import recommend_with_source
from bridge_bidding.hand import Hand, parse_hand
from bridge_bidding.session import BiddingSession


# ---------------------------------------------------------------------------
# Full 13-card hands reused across test modules
# ---------------------------------------------------------------------------

# 15 HCP, 4-3-3-3.
BALANCED_15 = "AQ32 K54 KJ3 Q32"
# 9 HCP, void spades, 5-5 in the reds.
VOID_SPADES_9 = "- KQxxx xxxxx Axx"
# 10 HCP, four spades.
STAYMAN_10 = "KQJ2 Q32 Q2 5432"
# 9 HCP, two hearts, 3+ in the other three suits.
REOPENING_9 = "K432 J2 Q54 K432"
# 24 HCP, balanced.
STRONG_24 = "AKQ2 AK3 KJ3 A32"


@pytest.fixture
def make_hand():
    """Factory: hand text -> Hand."""
    def _make(text: str) -> Hand:
        return parse_hand(text)

    return _make


@pytest.fixture
def make_auction():
    """
    Factory returning an Auction from call tokens.

        make_auction(["1S", "P"], dealer="N")
    """
    def _make(
        calls: Sequence[str] = (),
        dealer: Optional[str] = None,
        our_seat: Optional[str] = None,
    ) -> Auction:
        return Auction(list(calls), dealer=dealer, our_seat=our_seat)

    return _make


@pytest.fixture
def make_view(make_auction):
    def _make(calls: Sequence[str] = (), vul: Optional[VulnerabilityState] = None) -> AuctionView:
        return AuctionView(make_auction(calls), vul)

    return _make


@pytest.fixture
def make_session():
    """Factory: a started BiddingSession with the given calls already made."""
    def _make(
        calls: Sequence[str] = (),
        our_seat: Optional[str] = None,
        dealer: Optional[str] = None,
        board_vul: Optional[str] = None,
        config: Optional[BiddingConfig] = None,
    ) -> BiddingSession:
        session = BiddingSession(config=config)
        session.start_session(our_seat, dealer=dealer, board_vul=board_vul)
        for call in calls:
            session.add_call(call)
        return session

    return _make


@pytest.fixture
def config_with():
    """Factory: default config with a nested override mapping merged in."""
    def _make(overrides) -> BiddingConfig:
        return BiddingConfig().with_overrides(overrides)

    return _make


@pytest.fixture
def recommend_for():
    """
    Factory: (hand text, calls) -> Recommendation.

    The acting seat is whoever is due after `calls`; no dealer is needed.
    """
    def _recommend(
        hand: str,
        calls: Sequence[str] = (),
        config: Optional[BiddingConfig] = None,
        vul: Optional[VulnerabilityState] = None,
    ):
        return recommend_with_source(parse_hand(hand), Auction(list(calls)), config, vul)

    return _recommend
