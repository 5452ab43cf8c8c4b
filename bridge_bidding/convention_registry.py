# file: bridge_bidding/convention_registry.py
"""
Convention registry.

A Convention is a named, independently switchable rule made of:

  recognize(view, config) -> Recognition
      Pure check of the auction alone. A negative Recognition means "does
      not apply here"; recognizers never raise for that.

  respond(hand, view, config, recognition) -> Optional[Bid]
      Maps the hand to the convention's call. None means the hand does not
      qualify and the next rule is consulted.

The registry keeps one ordered precedence list per auction phase. Order is
data: the first enabled convention that applies and yields a call wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .auction_view import AuctionView
from .bid import Bid
from .bidding_types import PHASES
from .config import BiddingConfig
from .hand import Hand

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Recognition
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Recognition:
    applies: bool
    variant: Optional[str] = None
    details: Mapping[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.applies


NOT_APPLICABLE = Recognition(False)


def applies(variant: Optional[str] = None, **details: Any) -> Recognition:
    return Recognition(True, variant, dict(details))


def when(condition: bool, variant: Optional[str] = None, **details: Any) -> Recognition:
    return applies(variant, **details) if condition else NOT_APPLICABLE


Recognizer = Callable[[AuctionView, BiddingConfig], Recognition]
Responder = Callable[[Hand, AuctionView, BiddingConfig, Recognition], Optional[Bid]]


# ---------------------------------------------------------------------------
# Convention
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Convention:
    key: str
    name: str
    recognize: Recognizer
    respond: Optional[Responder] = None
    # Dotted config path whose `enabled` switches this rule; None = always on.
    config_path: Optional[str] = None
    family: str = ""

    def is_enabled(self, config: BiddingConfig) -> bool:
        if self.config_path is None:
            return True
        return config.enabled(self.config_path)

    def check(self, view: AuctionView, config: BiddingConfig) -> Recognition:
        if not self.is_enabled(config):
            return NOT_APPLICABLE
        return self.recognize(view, config)

    def call_for(
        self, hand: Hand, view: AuctionView, config: BiddingConfig
    ) -> Optional[Bid]:
        recognition = self.check(view, config)
        if not recognition or self.respond is None:
            return None
        bid = self.respond(hand, view, config, recognition)
        if bid is not None and not bid.convention_used:
            bid.convention_used = self.name
        return bid


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class ConventionRegistry:
    def __init__(
        self,
        conventions: Iterable[Convention] = (),
        precedence: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        self._conventions: Dict[str, Convention] = {}
        self._precedence: Dict[str, List[str]] = {p: [] for p in PHASES}
        for conv in conventions:
            self.register(conv)
        for phase, keys in (precedence or {}).items():
            self.set_precedence(phase, keys)

    def register(self, convention: Convention) -> None:
        if convention.key in self._conventions:
            raise ValueError(f"Convention {convention.key!r} registered twice")
        self._conventions[convention.key] = convention

    def set_precedence(self, phase: str, keys: Sequence[str]) -> None:
        if phase not in self._precedence:
            raise ValueError(f"Unknown phase {phase!r}")
        missing = [k for k in keys if k not in self._conventions]
        if missing:
            raise ValueError(f"Precedence for {phase} names unknown conventions: {missing}")
        self._precedence[phase] = list(keys)

    def get(self, key: str) -> Convention:
        return self._conventions[key]

    def keys(self) -> List[str]:
        return list(self._conventions)

    def names(self) -> List[str]:
        """Distinct display names, in registration order."""
        seen: List[str] = []
        for conv in self._conventions.values():
            if conv.name not in seen:
                seen.append(conv.name)
        return seen

    def ordered(self, phase: str) -> List[Convention]:
        return [self._conventions[k] for k in self._precedence.get(phase, [])]

    def applicable(
        self, view: AuctionView, config: BiddingConfig, phase: Optional[str] = None
    ) -> List[Tuple[Convention, Recognition]]:
        """Every enabled convention whose recognizer accepts this auction."""
        phase = phase or view.phase()
        found = []
        for conv in self.ordered(phase):
            recognition = conv.check(view, config)
            if recognition:
                found.append((conv, recognition))
        return found

    def first_match(
        self,
        hand: Hand,
        view: AuctionView,
        config: BiddingConfig,
        phase: str,
        accept: Optional[Callable[[Bid], bool]] = None,
    ) -> Optional[Tuple[Convention, Bid]]:
        """
        The winning convention and its call, or None when nothing fires.

        A call rejected by `accept` does not win; the next convention in
        precedence order is tried instead.
        """
        for conv in self.ordered(phase):
            bid = conv.call_for(hand, view, config)
            if bid is not None and accept is not None and not accept(bid):
                logger.debug("%s: %s proposed %s, not accepted", phase, conv.key, bid.token)
                continue
            if bid is not None:
                logger.debug("%s: %s -> %s", phase, conv.key, bid.token)
                return conv, bid
        return None

