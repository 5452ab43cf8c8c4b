# bridge_bidding/cli_prompts.py
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar

from .bid import Bid, parse_bid
from .bidding_types import FormatError
from .hand import Hand, parse_hand

T = TypeVar("T")


def prompt_choice(
    prompt: str,
    options: Sequence[T],
    *,
    default_index: int = 0,
    label: Callable[[T], str] = str,
) -> T:
    """
    Pick one of `options` by its number or by typing the option itself.

    Typed options are case-insensitive, so "e" picks seat "E" and "both"
    picks the "Both" vulnerability. Blank input takes the default.
    """
    if not options:
        raise ValueError(f"No options to choose a {prompt.lower()} from")
    if not 0 <= default_index < len(options):
        raise ValueError(f"Default index {default_index} is out of range for {prompt.lower()}")

    for i, opt in enumerate(options, start=1):
        print(f"  {i}) {label(opt)}")
    by_text = {str(opt).upper(): opt for opt in options}

    while True:
        raw = input(f"{prompt} [{label(options[default_index])}]: ").strip()
        if raw == "":
            return options[default_index]
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        if raw.upper() in by_text:
            return by_text[raw.upper()]
        print(f"Enter 1–{len(options)} or one of: {', '.join(str(o) for o in options)}.")


def prompt_optional_int(prompt: str) -> Optional[int]:
    """Integer or blank (None)."""
    while True:
        raw = input(f"{prompt} [blank for none]: ").strip()
        if raw == "":
            return None
        try:
            return int(raw)
        except ValueError:
            print("Please enter a whole number or leave blank.")


def prompt_hand(prompt: str) -> Hand:
    """Re-prompts until the text parses as a hand (S H D C groups)."""
    while True:
        raw = input(f"{prompt} (S H D C, '-' for a void): ")
        try:
            return parse_hand(raw)
        except FormatError as exc:
            print(f"  {exc}")


def prompt_calls(prompt: str) -> List[Bid]:
    """Space-separated calls, e.g. '1S P 2H'. Blank means no calls."""
    while True:
        raw = input(f"{prompt} [blank for none]: ").strip()
        try:
            return [parse_bid(tok) for tok in raw.split()]
        except FormatError as exc:
            print(f"  {exc}")
