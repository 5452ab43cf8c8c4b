from __future__ import annotations

from typing import List, Optional, Sequence

from .auction import Auction
from .bid import Bid
from .bidding_types import SEAT_NAMES, SEATS, SUITS
from .hand import Hand
from .practice_store import PracticeDeal

SUIT_SYMBOLS = {"S": "♠", "H": "♥", "D": "♦", "C": "♣"}
# Auction tables are laid out West first, the usual bridge diagram order.
TABLE_ORDER = ["W", "N", "E", "S"]
COLUMN = 6


def format_hand(hand: Hand) -> str:
    lines = []
    for s in SUITS:
        ranks = " ".join(hand.ranks(s)) or "-"
        lines.append(f"{SUIT_SYMBOLS[s]} {ranks}")
    return "\n".join(lines)


def format_deal_text(
    deal: PracticeDeal,
    dealer: str = "N",
    vulnerability: str = "None",
    board_number: Optional[int] = None,
) -> str:
    board = f"Board {board_number} - " if board_number is not None else ""
    header = f"{board}Dealer: {SEAT_NAMES[dealer]} - Vul: {vulnerability}"
    blocks = {seat: format_hand(deal.hand(seat)) for seat in SEATS}
    return (
        f"{header}\n\n"
        f"{_center('North')}\n{_indent(blocks['N'])}\n\n"
        f"{_side_by_side(blocks['W'], blocks['E'])}\n\n"
        f"{_center('South')}\n{_indent(blocks['S'])}"
    ).rstrip()


def format_call(bid: Bid) -> str:
    if bid.is_pass:
        return "Pass"
    if bid.is_contract and bid.strain != "NT":
        return f"{bid.level}{SUIT_SYMBOLS[bid.strain]}"
    return bid.token


def format_auction(auction: Auction) -> str:
    """Four-column auction table. Calls before the dealer's first call are left blank."""
    dealer = auction.dealer or "N"
    cells: List[str] = [""] * TABLE_ORDER.index(dealer)
    cells.extend(format_call(b) for b in auction.bids)
    if not auction.is_closed():
        cells.append("?")

    rows = ["".join(SEAT_NAMES[s].ljust(COLUMN + 2) for s in TABLE_ORDER).rstrip()]
    for i in range(0, len(cells), 4):
        row = cells[i:i + 4]
        rows.append("".join(c.ljust(COLUMN + 2) for c in row).rstrip())
    return "\n".join(rows)


def format_explained_calls(auction: Auction, explanations: Sequence[str]) -> str:
    lines = []
    for bid, text in zip(auction.bids, explanations):
        seat = bid.seat or "?"
        lines.append(f"  {seat}: {format_call(bid):<6} {text}")
    return "\n".join(lines)


def _center(t, w=25):
    return t.center(w)


def _indent(block, spaces=11):
    p = " " * spaces
    return "\n".join(p + line for line in block.splitlines())


def _side_by_side(west, east):
    wl = west.splitlines()
    el = east.splitlines()
    rows = ["West".ljust(20) + "East".rjust(20)]
    for i in range(max(len(wl), len(el))):
        L = wl[i] if i < len(wl) else ""
        R = el[i] if i < len(el) else ""
        rows.append(f"{L:<20}    {R}")
    return "\n".join(rows)
