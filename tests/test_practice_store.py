# file: tests/test_practice_store.py
from __future__ import annotations

import copy
import json
import logging

import pytest

from bridge_bidding.bidding_types import PracticeDealError
from bridge_bidding.legality import is_legal
from bridge_bidding.practice_store import (
    PRACTICE_DIR_NAME,
    PracticeDeal,
    autobid_deal,
    conventions_present,
    default_practice_path,
    filter_by_convention,
    load_deals,
    pick_deal,
    save_deals,
    validate_record,
)

# One full 52-card deal: N opens 1NT and S finds the spade fit through Stayman.
STAYMAN_DEAL = {
    "hands": {
        "N": "AK32 A54 KJ3 Q32",
        "E": "T98 JT9 AT98 AKT",
        "S": "QJ4 KQ32 Q42 J54",
        "W": "765 876 765 9876",
    },
    "conventions": ["Stayman"],
    "hcp": {"N": 17, "E": 12, "S": 11, "W": 0},
}


def _record(**changes):
    rec = copy.deepcopy(STAYMAN_DEAL)
    rec.update(changes)
    return rec


def _write(path, records) -> None:
    path.write_text(json.dumps(records), encoding="utf-8")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def test_validate_record_accepts_a_good_deal() -> None:
    deal = validate_record(STAYMAN_DEAL)
    assert deal.conventions == ("Stayman",)
    assert deal.hand("N").hcp == 17


def test_unknown_convention_names_are_dropped(caplog) -> None:
    rec = _record(conventions=["Stayman", "Puppet Stayman"])
    with caplog.at_level(logging.WARNING, logger="bridge_bidding.practice_store"):
        deal = validate_record(rec)
    assert deal.conventions == ("Stayman",)
    assert "Puppet Stayman" in caplog.text


@pytest.mark.parametrize(
    "record, message",
    [
        ({"hands": {}, "hcp": {}}, "missing field"),
        (_record(hcp={"N": 16, "E": 12, "S": 11, "W": 0}), "recorded hcp 16"),
        (_record(hcp={"N": "17", "E": 12, "S": 11, "W": 0}), "must be an integer"),
        (_record(hands={**STAYMAN_DEAL["hands"], "W": "765 876 765 987"}), "12 cards"),
        (_record(hands={**STAYMAN_DEAL["hands"], "W": "765 876 765"}), "bad hand for W"),
        (_record(hcp={"N": 17, "E": 12, "S": 11}), "exactly the seats"),
        ("not a record", "expected an object"),
    ],
)
def test_validate_record_rejects_bad_records(record, message) -> None:
    with pytest.raises(PracticeDealError, match=message):
        validate_record(record)


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------

def test_default_path_is_created_under_base_dir(tmp_path) -> None:
    path = default_practice_path(tmp_path)
    assert path.parent == tmp_path / PRACTICE_DIR_NAME
    assert path.parent.is_dir()


def test_missing_file_loads_as_empty(tmp_path) -> None:
    assert load_deals(base_dir=tmp_path) == []


def test_load_rejects_bad_json_and_non_lists(tmp_path) -> None:
    path = tmp_path / "deals.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(PracticeDealError, match="not valid JSON"):
        load_deals(path)
    _write(path, {"hands": {}})
    with pytest.raises(PracticeDealError, match="JSON list"):
        load_deals(path)


def test_save_then_load(tmp_path) -> None:
    deal = validate_record(STAYMAN_DEAL)
    path = save_deals([deal, deal], base_dir=tmp_path)
    loaded = load_deals(path)
    assert loaded == [deal, deal]
    assert json.loads(path.read_text(encoding="utf-8"))[0]["hcp"]["N"] == 17


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def _deals():
    stayman = validate_record(STAYMAN_DEAL)
    drury = PracticeDeal(hands=stayman.hands, conventions=("Drury", "Stayman"), hcp=stayman.hcp)
    plain = PracticeDeal(hands=stayman.hands, conventions=(), hcp=stayman.hcp)
    return [stayman, drury, plain]


def test_filter_and_catalogue_order() -> None:
    deals = _deals()
    assert len(filter_by_convention(deals, "Stayman")) == 2
    assert len(filter_by_convention(deals, None)) == 3
    assert conventions_present(deals) == ["Stayman", "Drury"]


def test_pick_deal_is_repeatable_with_a_seed() -> None:
    deals = _deals()
    assert pick_deal(deals, seed=7) is pick_deal(deals, seed=7)
    assert "Drury" in pick_deal(deals, "Drury", seed=1).conventions


def test_pick_deal_without_a_match() -> None:
    with pytest.raises(PracticeDealError, match="featuring Gerber"):
        pick_deal(_deals(), "Gerber")


# ---------------------------------------------------------------------------
# Auto-bidding
# ---------------------------------------------------------------------------

def test_autobid_plays_out_the_auction() -> None:
    result = autobid_deal(validate_record(STAYMAN_DEAL), dealer="N")
    auction = result.auction
    assert auction.is_closed()
    assert auction.tokens()[:7] == ["1NT", "PASS", "2C", "PASS", "2S", "PASS", "3NT"]
    assert [b.seat for b in result.calls[:3]] == ["N", "E", "S"]
    assert result.convention_names() == ["Stayman"]
    assert result.conventions[0] == (2, "Stayman")


def test_autobid_calls_are_all_legal() -> None:
    result = autobid_deal(validate_record(STAYMAN_DEAL), dealer="W", board_vul="Both")
    replay = type(result.auction)(dealer="W")
    for bid in result.calls:
        assert is_legal(bid, replay)
        replay.add(bid)
    assert replay.is_closed()
