# file: bridge_bidding/session.py
"""
BiddingSession: the entry points a UI or CLI drives.

A session owns one Auction, the perspective seat and the vulnerability.
The engine itself stays stateless; every query hands it the session's
current auction and config.

    session = BiddingSession()
    session.start_session("S", board_vul="NS", dealer="N")
    session.add_call("1S")
    session.add_call("P")
    bid = session.get_bid("- KQxxx xxxxx Axx")
    session.explain(bid)
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .auction import Auction, VulnerabilityState, validate_seat
from .bid import Bid, parse_bid
from .bidding_types import BiddingError, Seat
from .config import DEFAULT_CONFIG, BiddingConfig
from .convention_registry import ConventionRegistry
from .engine import Recommendation, recommend_with_source
from .explanations import get_explanation_for
from .hand import Hand, parse_hand
from .legality import is_legal

logger = logging.getLogger(__name__)

BOARD_VULS = ("None", "NS", "EW", "Both")

Call = Union[Bid, str]


class BiddingSession:
    def __init__(
        self,
        config: Optional[BiddingConfig] = None,
        registry: Optional[ConventionRegistry] = None,
    ) -> None:
        self.config: BiddingConfig = config or DEFAULT_CONFIG
        self.registry = registry
        self.auction: Optional[Auction] = None
        self.our_seat: Optional[Seat] = None
        self.board_vul: Optional[str] = None
        self.vul = VulnerabilityState()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_session(
        self,
        our_seat: Optional[Seat] = None,
        vul: Optional[VulnerabilityState] = None,
        dealer: Optional[Seat] = None,
        board_vul: Optional[str] = None,
    ) -> Auction:
        """
        Begin a fresh auction.

        `vul` is the acting side's vulnerability as a VulnerabilityState.
        `board_vul` ('None', 'NS', 'EW', 'Both') is an alternative that lets
        the session work out each seat's vulnerability once seats are known.
        """
        seat = validate_seat(our_seat, what="our_seat")
        if board_vul is not None and board_vul not in BOARD_VULS:
            raise BiddingError(f"Unknown board vulnerability {board_vul!r}; expected one of {BOARD_VULS}")
        self.our_seat = seat
        self.board_vul = board_vul
        self.vul = vul or VulnerabilityState()
        self.auction = Auction(dealer=dealer, our_seat=seat)
        logger.debug("Session started: our_seat=%s dealer=%s vul=%s", seat, dealer, board_vul or self.vul.label)
        return self.auction

    def _require_auction(self) -> Auction:
        if self.auction is None:
            self.start_session()
        return self.auction

    def reseat(self, dealer: Seat) -> None:
        self._require_auction().reseat(dealer)

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def add_call(self, call: Call) -> Bid:
        return self._require_auction().add(call)

    def is_legal(self, call: Call) -> bool:
        bid = call if isinstance(call, Bid) else parse_bid(call)
        return is_legal(bid, self._require_auction())

    def vulnerability_for_next(self) -> VulnerabilityState:
        auction = self._require_auction()
        seat = auction.next_seat()
        if self.board_vul is not None and seat is not None:
            return VulnerabilityState.for_seat(self.board_vul, seat)
        return self.vul

    def recommend(self, hand: Union[Hand, str]) -> Recommendation:
        if isinstance(hand, str):
            hand = parse_hand(hand)
        return recommend_with_source(
            hand,
            self._require_auction(),
            self.config,
            self.vulnerability_for_next(),
            self.registry,
        )

    def get_bid(self, hand: Union[Hand, str]) -> Bid:
        return self.recommend(hand).bid

    def explain(self, call: Call, index: Optional[int] = None) -> str:
        bid = call if isinstance(call, Bid) else parse_bid(call)
        return get_explanation_for(
            bid,
            self._require_auction(),
            self.config,
            index=index,
            vul=self.vulnerability_for_next(),
            registry=self.registry,
        )
