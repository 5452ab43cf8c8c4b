# file: tests/test_conventions_notrump.py
from __future__ import annotations

from conftest import BALANCED_15, STAYMAN_10


# ---------------------------------------------------------------------------
# Responding to 1NT
# ---------------------------------------------------------------------------

def test_stayman_with_a_four_card_major(recommend_for) -> None:
    rec = recommend_for(STAYMAN_10, ["1NT", "P"])
    assert rec.bid.token == "2C"
    assert rec.bid.convention_used == "Stayman: asks opener for a 4-card major"
    assert rec.convention.name == "Stayman"


def test_jacoby_transfer_with_five_spades(recommend_for) -> None:
    rec = recommend_for("KJ432 Q32 32 432", ["1NT", "P"])
    assert rec.bid.token == "2H"
    assert rec.bid.convention_used == "Jacoby transfer to spades"


def test_texas_transfer_with_six_spades_and_game_values(recommend_for) -> None:
    rec = recommend_for("KQJ5432 A2 32 32", ["1NT", "P"])
    assert rec.bid.token == "4H"
    assert rec.bid.convention_used.startswith("Texas transfer to spades")


def test_minor_suit_transfer_only_when_enabled(recommend_for, config_with) -> None:
    hand = "32 432 2 KQ98765"
    cfg = config_with({"notrump_responses": {"minor_suit_transfers": True}})
    rec = recommend_for(hand, ["1NT", "P"], config=cfg)
    assert rec.bid.token == "2S"
    assert rec.bid.convention_used == "Minor suit transfer to clubs"

    assert recommend_for(hand, ["1NT", "P"]).bid.token != "2S"


def test_disabling_stayman_falls_back_to_natural(recommend_for, config_with) -> None:
    cfg = config_with({"notrump_responses": {"stayman": False}})
    rec = recommend_for(STAYMAN_10, ["1NT", "P"], config=cfg)
    assert rec.bid.token == "3NT"
    assert rec.convention is None


# ---------------------------------------------------------------------------
# Opener's answers
# ---------------------------------------------------------------------------

def test_stayman_answer_shows_spades(recommend_for) -> None:
    rec = recommend_for(BALANCED_15, ["1NT", "P", "2C", "P"])
    assert rec.bid.token == "2S"
    assert rec.bid.convention_used == "Stayman response: 4-card spades"


def test_stayman_answer_denies_a_major(recommend_for) -> None:
    rec = recommend_for("AQ3 K54 KJ32 Q32", ["1NT", "P", "2C", "P"])
    assert rec.bid.token == "2D"
    assert rec.bid.convention_used == "Stayman response: no 4-card major"


def test_transfer_accept_and_super_accept(recommend_for) -> None:
    rec = recommend_for(BALANCED_15, ["1NT", "P", "2H", "P"])
    assert rec.bid.token == "2S"
    assert rec.bid.convention_used == "Jacoby transfer accepted"

    rec = recommend_for("AQ32 K54 AJ3 K32", ["1NT", "P", "2H", "P"])
    assert rec.bid.token == "3S"
    assert rec.bid.convention_used.startswith("Jacoby transfer super-accepted")


def test_stayman_follow_up_finds_the_fit(recommend_for) -> None:
    rec = recommend_for(STAYMAN_10, ["1NT", "P", "2C", "P", "2S", "P"])
    assert rec.bid.token == "4S"
    assert rec.bid.convention_used == "Major fit found via Stayman: game"


def test_stayman_follow_up_without_a_fit(recommend_for) -> None:
    rec = recommend_for(STAYMAN_10, ["1NT", "P", "2C", "P", "2D", "P"])
    assert rec.bid.token == "3NT"
    assert rec.bid.convention_used == "No major fit after Stayman: game in notrump"


# ---------------------------------------------------------------------------
# Interference and defence
# ---------------------------------------------------------------------------

def test_lebensohl_stopper_goes_through_the_relay(recommend_for) -> None:
    hand = "A32 KQ3 Q432 J32"
    rec = recommend_for(hand, ["1NT", "2S"])
    assert rec.bid.token == "2NT"
    assert rec.bid.convention_used == "Lebensohl 2NT relay: game values, 3NT to follow"
    rec = recommend_for(hand, ["1NT", "2S", "2NT", "P", "3C", "P"])
    assert rec.bid.token == "3NT"
    assert rec.bid.convention_used == "Lebensohl: slow 3NT, game values with a spades stopper"


def test_lebensohl_direct_3nt_denies_a_stopper(recommend_for) -> None:
    rec = recommend_for("32 KQ3 AQ32 K432", ["1NT", "2S"])
    assert rec.bid.token == "3NT"
    assert rec.bid.convention_used == "Lebensohl: direct 3NT, game values without a spades stopper"


def test_lebensohl_slow_denies_reverses_the_routes(recommend_for, config_with) -> None:
    cfg = config_with({"notrump_defenses": {"lebensohl": {"fast_denies": False}}})
    rec = recommend_for("A32 KQ3 Q432 J32", ["1NT", "2S"], config=cfg)
    assert rec.bid.token == "3NT"
    assert rec.bid.convention_used == "Lebensohl: direct 3NT, game values with a spades stopper"
    rec = recommend_for("32 KQ3 AQ32 K432", ["1NT", "2S"], config=cfg)
    assert rec.bid.token == "2NT"


def test_lebensohl_relay_with_a_weak_long_minor(recommend_for) -> None:
    rec = recommend_for("32 432 KJ9876 32", ["1NT", "2S"])
    assert rec.bid.token == "2NT"
    assert rec.bid.convention_used.startswith("Lebensohl 2NT relay")


def test_dont_two_suiter(recommend_for) -> None:
    rec = recommend_for("2 KQ432 AJ432 32", ["1NT"])
    assert rec.bid.token == "2D"
    assert rec.bid.convention_used == "DONT: diamonds and a higher-ranking suit"


def test_meckwell_when_dont_is_off(recommend_for, config_with) -> None:
    cfg = config_with({"notrump_defenses": {"dont": False}})
    rec = recommend_for("2 KQ432 AJ432 32", ["1NT"], config=cfg)
    assert rec.bid.token == "2D"
    assert rec.bid.convention_used == "Meckwell: diamonds and a major"


def test_dont_double_is_relayed(recommend_for) -> None:
    rec = recommend_for("K32 Q432 J32 432", ["1NT", "X", "P"])
    assert rec.bid.token == "2C"
    assert rec.bid.convention_used == "DONT relay: 2C asks for the suit"


def test_advance_of_a_2nt_defence_is_natural(recommend_for) -> None:
    rec = recommend_for("T9542 KJ75 985 J", ["1NT", "2NT", "P"])
    assert rec.convention is None or rec.convention.key != "nt_defence_advance"


def test_defence_advance_needs_partner_directly_over_1nt(recommend_for) -> None:
    # Partner's 2NT came over the opponents' transfer, not over the 1NT.
    rec = recommend_for("T9542 KJ75 985 J", ["1NT", "P", "2D", "2NT", "P"])
    assert rec.convention is None or rec.convention.key != "nt_defence_advance"


def test_no_dont_relay_over_a_five_level_double(recommend_for) -> None:
    rec = recommend_for("K32 Q432 J32 432", ["1NT", "P", "5D", "X", "P"])
    assert rec.bid.is_pass
    assert rec.bid.convention_used == "Pass: partner's double of a five-level contract is for penalties"
