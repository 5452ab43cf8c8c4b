# file: bridge_bidding/practice_store.py
"""
Practice-deal artifact.

A practice file is a JSON list of records:

    {
      "hands": {"N": "AKQ2 ...", "E": "...", "S": "...", "W": "..."},
      "conventions": ["Stayman", "Jacoby Transfers"],
      "hcp": {"N": 17, "E": 8, "S": 9, "W": 6}
    }

The batch tool that writes these files lives outside this package; the
format is fixed. Records are validated on load: every hand must parse to
13 cards and the recorded HCP must match the hand.
"""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .auction import Auction, VulnerabilityState, seat_after
from .bid import Bid
from .bidding_types import SEATS, BiddingError, PracticeDealError, Seat
from .config import DEFAULT_CONFIG, BiddingConfig
from .conventions_catalog import PRACTICE_CONVENTIONS, practice_name
from .engine import recommend_with_source
from .hand import Hand, parse_hand

logger = logging.getLogger(__name__)

PRACTICE_DIR_NAME = "practice"
PRACTICE_FILE_NAME = "practice_deals.json"
CARDS_PER_HAND = 13


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------

def _project_root() -> Path:
    # bridge_bidding/ -> project root
    return Path(__file__).resolve().parents[1]


def _practice_dir(base_dir: Path | None = None) -> Path:
    """Return the practice/ directory, creating it if missing."""
    root = base_dir if base_dir is not None else _project_root()
    p = root / PRACTICE_DIR_NAME
    p.mkdir(parents=True, exist_ok=True)
    return p


def default_practice_path(base_dir: Path | None = None) -> Path:
    return _practice_dir(base_dir) / PRACTICE_FILE_NAME


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PracticeDeal:
    hands: Dict[Seat, str]
    conventions: Tuple[str, ...] = ()
    hcp: Dict[Seat, int] = field(default_factory=dict)

    def hand(self, seat: Seat) -> Hand:
        return parse_hand(self.hands[seat])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hands": {s: self.hands[s] for s in SEATS},
            "conventions": list(self.conventions),
            "hcp": {s: self.hcp[s] for s in SEATS},
        }


def validate_record(raw: Any, where: str = "record") -> PracticeDeal:
    """
    Check one raw record and build a PracticeDeal.

    Unknown convention names are dropped with a warning; every other
    inconsistency is a PracticeDealError.
    """
    if not isinstance(raw, Mapping):
        raise PracticeDealError(f"{where}: expected an object, got {type(raw).__name__}")
    for key in ("hands", "conventions", "hcp"):
        if key not in raw:
            raise PracticeDealError(f"{where}: missing field {key!r}")

    hands_raw = raw["hands"]
    hcp_raw = raw["hcp"]
    if not isinstance(hands_raw, Mapping) or set(hands_raw) != set(SEATS):
        raise PracticeDealError(f"{where}: 'hands' must have exactly the seats N, E, S, W")
    if not isinstance(hcp_raw, Mapping) or set(hcp_raw) != set(SEATS):
        raise PracticeDealError(f"{where}: 'hcp' must have exactly the seats N, E, S, W")

    hands: Dict[Seat, str] = {}
    hcp: Dict[Seat, int] = {}
    for seat in SEATS:
        text = hands_raw[seat]
        try:
            hand = parse_hand(text)
        except BiddingError as exc:
            raise PracticeDealError(f"{where}: bad hand for {seat}: {exc}") from exc
        cards = sum(hand.lengths.values())
        if cards != CARDS_PER_HAND:
            raise PracticeDealError(f"{where}: {seat} holds {cards} cards, expected {CARDS_PER_HAND}")
        recorded = hcp_raw[seat]
        if isinstance(recorded, bool) or not isinstance(recorded, int):
            raise PracticeDealError(f"{where}: hcp for {seat} must be an integer, got {recorded!r}")
        if recorded != hand.hcp:
            raise PracticeDealError(
                f"{where}: recorded hcp {recorded} for {seat} but the hand has {hand.hcp}"
            )
        hands[seat] = text
        hcp[seat] = recorded

    names = raw["conventions"]
    if not isinstance(names, Sequence) or isinstance(names, str):
        raise PracticeDealError(f"{where}: 'conventions' must be a list of names")
    unknown = [n for n in names if n not in PRACTICE_CONVENTIONS]
    if unknown:
        logger.warning("%s: skipping unknown convention names %s", where, unknown)
    known = tuple(n for n in names if n in PRACTICE_CONVENTIONS)
    return PracticeDeal(hands=hands, conventions=known, hcp=hcp)


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------

def load_deals(path: Path | None = None, base_dir: Path | None = None) -> List[PracticeDeal]:
    """Load and validate every record in a practice file. A missing file is an empty list."""
    path = Path(path) if path is not None else default_practice_path(base_dir)
    if not path.exists():
        logger.info("No practice file at %s", path)
        return []
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PracticeDealError(f"Practice file {path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise PracticeDealError(f"Practice file {path} must hold a JSON list of deals")

    deals = [validate_record(rec, where=f"{path.name}[{i}]") for i, rec in enumerate(raw)]
    logger.info("Loaded %d practice deals from %s", len(deals), path)
    return deals


def save_deals(deals: Sequence[PracticeDeal], path: Path | None = None, base_dir: Path | None = None) -> Path:
    path = Path(path) if path is not None else default_practice_path(base_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [d.to_dict() for d in deals]
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def filter_by_convention(deals: Sequence[PracticeDeal], name: Optional[str]) -> List[PracticeDeal]:
    if not name:
        return list(deals)
    return [d for d in deals if name in d.conventions]


def conventions_present(deals: Sequence[PracticeDeal]) -> List[str]:
    """Convention names found in `deals`, in catalogue order."""
    seen = {n for d in deals for n in d.conventions}
    return [n for n in PRACTICE_CONVENTIONS if n in seen]


def pick_deal(
    deals: Sequence[PracticeDeal],
    convention: Optional[str] = None,
    seed: Optional[int] = None,
) -> PracticeDeal:
    pool = filter_by_convention(deals, convention)
    if not pool:
        focus = f" featuring {convention}" if convention else ""
        raise PracticeDealError(f"No practice deals{focus}")
    return random.Random(seed).choice(pool)


# ---------------------------------------------------------------------------
# Auto-bidding
# ---------------------------------------------------------------------------

@dataclass
class AutobidResult:
    auction: Auction
    # (call index, practice convention name) for every call a named convention produced.
    conventions: List[Tuple[int, str]] = field(default_factory=list)

    @property
    def calls(self) -> List[Bid]:
        return list(self.auction.bids)

    def convention_names(self) -> List[str]:
        names: List[str] = []
        for _, name in self.conventions:
            if name not in names:
                names.append(name)
        return names


def autobid_deal(
    deal: PracticeDeal,
    dealer: Seat = "N",
    board_vul: str = "None",
    config: Optional[BiddingConfig] = None,
) -> AutobidResult:
    """Let the engine bid all four hands until the auction closes."""
    config = config or DEFAULT_CONFIG
    hands = {seat: deal.hand(seat) for seat in SEATS}
    auction = Auction(dealer=dealer)
    result = AutobidResult(auction)

    while not auction.is_closed():
        seat = seat_after(auction.dealer, len(auction))
        vul = VulnerabilityState.for_seat(board_vul, seat)
        rec = recommend_with_source(hands[seat], auction, config, vul)
        if rec.convention is not None:
            name = practice_name(rec.convention, config)
            if name is not None:
                result.conventions.append((len(auction), name))
        auction.add(rec.bid)

    logger.debug("Auto-bid auction: %s", auction.tokens())
    return result
