"""
Interactive CLI for the bidding advisor.

  • A main menu:
        1) Advise on a hand
        2) Practice with a stored deal
        3) View configuration
        4) Exit

  • Advice:
        - User gives seat, dealer, vulnerability, hand and the auction so far
        - The recommended call is printed with its explanation

  • Practice:
        - A stored deal is picked (optionally for one convention, seeded)
        - The engine bids all four hands and the conventions used are listed

Run with:  python -m bridge_bidding [--verbose] [--config FILE]
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from . import cli_prompts
from .bidding_types import SEAT_NAMES, SEATS, ConfigError, PracticeDealError
from .config import DEFAULT_CONFIG, BiddingConfig, load_config
from .explanations import get_explanation_for
from .practice_store import autobid_deal, conventions_present, load_deals, pick_deal
from .session import BOARD_VULS, BiddingSession
from .text_output import (
    format_auction,
    format_call,
    format_deal_text,
    format_explained_calls,
    format_hand,
)

logger = logging.getLogger(__name__)

ANY_CONVENTION = "Any convention"


# ---------------------------------------------------------------------------
# Advice
# ---------------------------------------------------------------------------

def _run_advice(config: BiddingConfig) -> None:
    print()
    print("Your seat:")
    seat = cli_prompts.prompt_choice("Seat", SEATS, default_index=2, label=SEAT_NAMES.__getitem__)
    print("Dealer:")
    dealer = cli_prompts.prompt_choice("Dealer", SEATS, label=SEAT_NAMES.__getitem__)
    print("Vulnerability:")
    board_vul = cli_prompts.prompt_choice("Vulnerability", BOARD_VULS)
    hand = cli_prompts.prompt_hand("Your hand")

    session = BiddingSession(config=config)
    session.start_session(seat, dealer=dealer, board_vul=board_vul)

    for call in cli_prompts.prompt_calls("Auction so far"):
        session.add_call(call)

    auction = session.auction
    print()
    print(format_hand(hand))
    print()
    print(format_auction(auction))
    print()

    if auction.is_closed():
        print("The auction is over; there is no call to make.")
        return
    if auction.next_seat() != seat:
        print(f"Note: {SEAT_NAMES[auction.next_seat()]} is next to call, not {SEAT_NAMES[seat]}.")

    bid = session.get_bid(hand)
    print(f"Recommended: {format_call(bid)}")
    print(f"  {session.explain(bid)}")


# ---------------------------------------------------------------------------
# Practice
# ---------------------------------------------------------------------------

def _run_practice(config: BiddingConfig, base_dir: Path | None = None) -> None:
    try:
        deals = load_deals(base_dir=base_dir)
    except PracticeDealError as exc:
        print(f"ERROR: {exc}")
        return
    if not deals:
        print("No practice deals found.")
        return

    print()
    print("Practice focus:")
    options: List[str] = [ANY_CONVENTION] + conventions_present(deals)
    focus = cli_prompts.prompt_choice("Convention", options)
    seed = cli_prompts.prompt_optional_int("Random seed")
    print("Dealer:")
    dealer = cli_prompts.prompt_choice("Dealer", SEATS, label=SEAT_NAMES.__getitem__)
    print("Vulnerability:")
    board_vul = cli_prompts.prompt_choice("Vulnerability", BOARD_VULS)

    deal = pick_deal(deals, None if focus == ANY_CONVENTION else focus, seed)
    print()
    print(format_deal_text(deal, dealer=dealer, vulnerability=board_vul))
    if deal.conventions:
        print(f"\nFeatures: {', '.join(deal.conventions)}")

    result = autobid_deal(deal, dealer=dealer, board_vul=board_vul, config=config)
    explanations = [
        get_explanation_for(bid, result.auction, config, index=i)
        for i, bid in enumerate(result.auction.bids)
    ]
    print()
    print(format_auction(result.auction))
    print()
    print(format_explained_calls(result.auction, explanations))
    used = result.convention_names()
    print()
    print(f"Conventions used: {', '.join(used) if used else 'none'}")


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def _show_config(config: BiddingConfig) -> None:
    print(json.dumps(config.to_dict(), indent=2))


# ---------------------------------------------------------------------------
# Main menu
# ---------------------------------------------------------------------------

def main_menu(config: Optional[BiddingConfig] = None, base_dir: Path | None = None) -> None:
    config = config or DEFAULT_CONFIG
    while True:
        print()
        print("=== SAYC Bidding Advisor ===")
        print("1) Advise on a hand")
        print("2) Practice with a stored deal")
        print("3) View configuration")
        print("4) Exit")

        choice = input("Choose [1-4] [4]: ").strip() or "4"

        if choice == "1":
            _run_advice(config)
        elif choice == "2":
            _run_practice(config, base_dir)
        elif choice == "3":
            _show_config(config)
        elif choice == "4":
            print("Goodbye.")
            break
        else:
            print("Invalid choice, please try again.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="bridge_bidding", description="SAYC bidding advisor")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    parser.add_argument("--config", type=Path, help="JSON config file (missing keys use defaults)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = DEFAULT_CONFIG
    if args.config is not None:
        try:
            config = load_config(args.config)
        except (OSError, ConfigError) as exc:
            print(f"ERROR: could not load config: {exc}")
            return 2
        logger.info("Loaded config from %s", args.config)

    main_menu(config)
    return 0
