# file: bridge_bidding/config.py
"""
Typed convention-card configuration.

BiddingConfig is a tree of frozen dataclasses, one per namespace
(opening_bids, ace_asking, slam_bidding, notrump_defenses,
notrump_responses, responses, competitive, strong_club_defenses, preempts,
general). Every leaf carries `enabled` plus its parameters, with SAYC
defaults. Unknown keys are dropped with a warning at load time and absent
keys take the defaults, so rules never inspect the mapping themselves.

    cfg = BiddingConfig.from_dict({"responses": {"bergen_raises": True}})
    cfg.responses.bergen_raises.enabled   # True
    cfg.enabled("responses.splinter_bids")
"""

from __future__ import annotations

import dataclasses
import json
import typing
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

from .bid import parse_bid
from .bidding_types import ConfigError, FormatError


# ---------------------------------------------------------------------------
# Leaf settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Toggle:
    enabled: bool = True


def _off() -> Toggle:
    return Toggle(enabled=False)


@dataclass(frozen=True)
class StrongTwoClubs:
    enabled: bool = True
    min_hcp: int = 22

    def __post_init__(self) -> None:
        if not (15 <= self.min_hcp <= 37):
            raise ConfigError(f"strong_2_clubs.min_hcp out of range: {self.min_hcp}")


@dataclass(frozen=True)
class Gerber:
    enabled: bool = True
    continuations: bool = True
    # Reply for 0-or-4, 1, 2, 3 aces.
    responses_map: Tuple[str, ...] = ("4D", "4H", "4S", "4NT")

    def __post_init__(self) -> None:
        if len(self.responses_map) != 4:
            raise ConfigError("gerber.responses_map must list exactly 4 calls")
        for token in self.responses_map:
            try:
                parse_bid(token)
            except FormatError as exc:
                raise ConfigError(f"gerber.responses_map: {exc}") from exc


BLACKWOOD_VARIANTS = ("rkcb", "classic")
RKCB_RESPONSES = ("1430", "0314")


@dataclass(frozen=True)
class Blackwood:
    enabled: bool = True
    variant: str = "rkcb"
    responses: str = "1430"

    def __post_init__(self) -> None:
        if self.variant not in BLACKWOOD_VARIANTS:
            raise ConfigError(
                f"blackwood.variant must be one of {BLACKWOOD_VARIANTS}, got {self.variant!r}"
            )
        # "3014" is the common spelling of 0314.
        if self.responses == "3014":
            object.__setattr__(self, "responses", "0314")
        if self.responses not in RKCB_RESPONSES:
            raise ConfigError(
                f"blackwood.responses must be one of {RKCB_RESPONSES}, got {self.responses!r}"
            )


@dataclass(frozen=True)
class UnusualNotrump:
    enabled: bool = True
    direct: bool = True
    passed_hand: bool = False
    over_minors: bool = False


@dataclass(frozen=True)
class Lebensohl:
    enabled: bool = True
    after_interference: bool = True
    # A direct 3NT denies a stopper in their suit; showing one goes through
    # the 2NT relay. Off reverses the two.
    fast_denies: bool = True


@dataclass(frozen=True)
class BergenRaises:
    enabled: bool = False
    style: str = "standard"

    def __post_init__(self) -> None:
        if self.style not in ("standard", "reverse"):
            raise ConfigError(f"bergen_raises.style must be standard or reverse, got {self.style!r}")


@dataclass(frozen=True)
class Michaels:
    enabled: bool = True
    strength: str = "wide_range"
    direct_only: bool = True

    @property
    def min_hcp(self) -> int:
        return 6 if self.strength == "wide_range" else 10


@dataclass(frozen=True)
class NegativeDoubles:
    enabled: bool = True
    thru_level: int = 3
    # Minimum HCP by the level the double is made at.
    min_hcp_one_level: int = 6
    min_hcp_two_level: int = 8
    min_hcp_higher: int = 10

    def __post_init__(self) -> None:
        if not (1 <= self.thru_level <= 7):
            raise ConfigError(f"thru_level must be 1–7, got {self.thru_level}")
        if not (0 <= self.min_hcp_one_level <= self.min_hcp_two_level <= self.min_hcp_higher):
            raise ConfigError("negative_doubles minimums must rise with the level")

    def min_hcp(self, level: int) -> int:
        if level <= 1:
            return self.min_hcp_one_level
        if level == 2:
            return self.min_hcp_two_level
        return self.min_hcp_higher


@dataclass(frozen=True)
class Overcalls:
    min_length: int = 5
    one_level_min_hcp: int = 6
    two_level_min_hcp: int = 10
    # Balancing seat may overcall a strong four-card major at the one level.
    four_card_balancing: bool = True
    balancing_four_card_min_hcp: int = 10

    def __post_init__(self) -> None:
        if not (4 <= self.min_length <= 8):
            raise ConfigError(f"overcalls.min_length must be 4–8, got {self.min_length}")
        if self.one_level_min_hcp > self.two_level_min_hcp:
            raise ConfigError(
                f"overcalls minimums are inverted: {self.one_level_min_hcp}>{self.two_level_min_hcp}"
            )


@dataclass(frozen=True)
class ResponsiveDoubles:
    enabled: bool = True
    thru_level: int = 3
    min_strength: int = 8

    def __post_init__(self) -> None:
        if not (1 <= self.thru_level <= 7):
            raise ConfigError(f"thru_level must be 1–7, got {self.thru_level}")
        if self.min_strength < 0:
            raise ConfigError("responsive_doubles.min_strength cannot be negative")


@dataclass(frozen=True)
class SupportDoubles:
    enabled: bool = True
    thru: str = "2S"

    def __post_init__(self) -> None:
        try:
            bid = parse_bid(self.thru)
        except FormatError as exc:
            raise ConfigError(f"support_doubles.thru: {exc}") from exc
        if not bid.is_contract:
            raise ConfigError(f"support_doubles.thru must be a contract, got {self.thru!r}")


@dataclass(frozen=True)
class AdvancerRaises:
    simple_min_support: int = 3
    simple_range: Tuple[int, int] = (6, 10)
    jump_min_support: int = 4
    jump_range: Tuple[int, int] = (11, 12)
    cuebid_min_support: int = 3
    cuebid_min_hcp: int = 13
    enabled: bool = True

    def __post_init__(self) -> None:
        for name in ("simple_range", "jump_range"):
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ConfigError(f"advancer_raises.{name} is empty: {lo}>{hi}")


@dataclass(frozen=True)
class WeakTwo:
    enabled: bool = True
    min_hcp: int = 5
    max_hcp: int = 11

    def __post_init__(self) -> None:
        if self.min_hcp > self.max_hcp:
            raise ConfigError(f"weak_two range is empty: {self.min_hcp}>{self.max_hcp}")


@dataclass(frozen=True)
class NaturalOpenings:
    min_hcp: int = 12
    one_notrump_range: Tuple[int, int] = (15, 17)
    two_notrump_range: Tuple[int, int] = (20, 21)

    def __post_init__(self) -> None:
        if not (8 <= self.min_hcp <= 15):
            raise ConfigError(f"natural.min_hcp out of range: {self.min_hcp}")
        for name in ("one_notrump_range", "two_notrump_range"):
            band = getattr(self, name)
            if len(band) != 2 or band[0] > band[1]:
                raise ConfigError(f"natural.{name} must be [low, high], got {list(band)}")
        if self.one_notrump_range[1] >= self.two_notrump_range[0]:
            raise ConfigError("natural.one_notrump_range must sit below two_notrump_range")


@dataclass(frozen=True)
class BalancedShapes:
    include_5422: bool = False


@dataclass(frozen=True)
class SystemsOn:
    stayman: bool = False
    transfers: bool = False
    stolen_bid_double: bool = False


# ---------------------------------------------------------------------------
# Namespaces
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OpeningBids:
    natural: NaturalOpenings = field(default_factory=NaturalOpenings)
    strong_2_clubs: StrongTwoClubs = field(default_factory=StrongTwoClubs)


@dataclass(frozen=True)
class AceAsking:
    gerber: Gerber = field(default_factory=Gerber)
    blackwood: Blackwood = field(default_factory=Blackwood)


@dataclass(frozen=True)
class SlamBidding:
    control_showing_cue_bids: Toggle = field(default_factory=Toggle)


@dataclass(frozen=True)
class NotrumpDefenses:
    dont: Toggle = field(default_factory=Toggle)
    unusual_nt: UnusualNotrump = field(default_factory=UnusualNotrump)
    lebensohl: Lebensohl = field(default_factory=Lebensohl)


@dataclass(frozen=True)
class NotrumpResponses:
    stayman: Toggle = field(default_factory=Toggle)
    jacoby_transfers: Toggle = field(default_factory=Toggle)
    texas_transfers: Toggle = field(default_factory=Toggle)
    minor_suit_transfers: Toggle = field(default_factory=_off)


@dataclass(frozen=True)
class Responses:
    jacoby_2nt: Toggle = field(default_factory=Toggle)
    splinter_bids: Toggle = field(default_factory=Toggle)
    bergen_raises: BergenRaises = field(default_factory=BergenRaises)
    drury: Toggle = field(default_factory=Toggle)


@dataclass(frozen=True)
class Competitive:
    michaels: Michaels = field(default_factory=Michaels)
    responsive_doubles: ResponsiveDoubles = field(default_factory=ResponsiveDoubles)
    negative_doubles: NegativeDoubles = field(default_factory=NegativeDoubles)
    support_doubles: SupportDoubles = field(default_factory=SupportDoubles)
    cue_bid_raises: Toggle = field(default_factory=Toggle)
    reopening_doubles: Toggle = field(default_factory=Toggle)
    takeout_doubles: Toggle = field(default_factory=Toggle)
    advancer_raises: AdvancerRaises = field(default_factory=AdvancerRaises)
    overcalls: Overcalls = field(default_factory=Overcalls)


@dataclass(frozen=True)
class StrongClubDefenses:
    meckwell: Toggle = field(default_factory=Toggle)


@dataclass(frozen=True)
class Preempts:
    weak_two: WeakTwo = field(default_factory=WeakTwo)
    three_level: Toggle = field(default_factory=Toggle)


@dataclass(frozen=True)
class General:
    vulnerability_adjustments: bool = True
    passed_hand_variations: bool = True
    relaxed_takeout_doubles: bool = True
    nt_over_minors_range: str = "classic"
    balanced_shapes: BalancedShapes = field(default_factory=BalancedShapes)
    systems_on_over_1nt_interference: SystemsOn = field(default_factory=SystemsOn)

    def __post_init__(self) -> None:
        if self.nt_over_minors_range not in ("classic", "wide"):
            raise ConfigError(
                f"general.nt_over_minors_range must be classic or wide, got {self.nt_over_minors_range!r}"
            )


@dataclass(frozen=True)
class BiddingConfig:
    opening_bids: OpeningBids = field(default_factory=OpeningBids)
    ace_asking: AceAsking = field(default_factory=AceAsking)
    slam_bidding: SlamBidding = field(default_factory=SlamBidding)
    notrump_defenses: NotrumpDefenses = field(default_factory=NotrumpDefenses)
    notrump_responses: NotrumpResponses = field(default_factory=NotrumpResponses)
    responses: Responses = field(default_factory=Responses)
    competitive: Competitive = field(default_factory=Competitive)
    strong_club_defenses: StrongClubDefenses = field(default_factory=StrongClubDefenses)
    preempts: Preempts = field(default_factory=Preempts)
    general: General = field(default_factory=General)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, path: str) -> Any:
        """Dotted lookup, e.g. get("competitive.michaels.direct_only")."""
        node: Any = self
        for part in path.split("."):
            if not dataclasses.is_dataclass(node) or not hasattr(node, part):
                raise ConfigError(f"Unknown config path {path!r}")
            node = getattr(node, part)
        return node

    def enabled(self, path: str) -> bool:
        node = self.get(path)
        if isinstance(node, bool):
            return node
        return bool(getattr(node, "enabled", False))

    # ------------------------------------------------------------------
    # (De)serialisation
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "BiddingConfig":
        return _build(cls, data or {}, "")

    def to_dict(self) -> Dict[str, Any]:
        return _to_plain(self)

    def with_overrides(self, data: Mapping[str, Any]) -> "BiddingConfig":
        """Return a copy with `data` merged over the current values."""
        merged = _deep_merge(self.to_dict(), data)
        return BiddingConfig.from_dict(merged)


DEFAULT_CONFIG = BiddingConfig()


def load_config(path: Path) -> BiddingConfig:
    """Read a JSON config file; missing keys take the defaults."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object")
    return BiddingConfig.from_dict(raw)


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _build(cls: type, data: Any, prefix: str) -> Any:
    # A bare boolean is shorthand for {"enabled": <bool>}.
    if isinstance(data, bool):
        data = {"enabled": data}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Config section {prefix or '<root>'} must be a mapping")

    hints = typing.get_type_hints(cls)
    names = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - names)
    if unknown:
        warnings.warn(
            f"Ignoring unknown config keys under {prefix or '<root>'}: {', '.join(unknown)}",
            stacklevel=3,
        )

    kwargs: Dict[str, Any] = {}
    for name in names:
        if name not in data:
            continue
        value = data[name]
        hint = hints[name]
        path = f"{prefix}.{name}" if prefix else name
        if dataclasses.is_dataclass(hint):
            kwargs[name] = _build(hint, value, path)
        else:
            kwargs[name] = _coerce(hint, value, path)
    return cls(**kwargs)


def _coerce(hint: Any, value: Any, path: str) -> Any:
    origin = typing.get_origin(hint)
    if hint is bool:
        if not isinstance(value, bool):
            raise ConfigError(f"{path} must be true/false, got {value!r}")
        return value
    if hint is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{path} must be an integer, got {value!r}")
        return value
    if hint is str:
        if not isinstance(value, str):
            raise ConfigError(f"{path} must be a string, got {value!r}")
        return value
    if origin is tuple:
        if not isinstance(value, (list, tuple)):
            raise ConfigError(f"{path} must be a list, got {value!r}")
        return tuple(value)
    return value


def _to_plain(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj):
        return {f.name: _to_plain(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, tuple):
        return list(obj)
    return obj


def _deep_merge(base: Dict[str, Any], extra: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for key, value in extra.items():
        current = out.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            out[key] = _deep_merge(current, value)
        elif isinstance(current, dict) and isinstance(value, bool) and "enabled" in current:
            out[key] = {**current, "enabled": value}
        else:
            out[key] = value
    return out
