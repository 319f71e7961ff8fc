# tests/test_extraction/test_extractors.py
from datetime import datetime, timezone

import pytest

from lotto_service.extraction import (
    ABSENT,
    Balls,
    BallsExtractor,
    DateExtractor,
    Found,
    MoneyExtractor,
    MultiplierExtractor,
    TextExtractor,
)
from lotto_service.games import GA_CASH3, GA_FANTASY5, POWERBALL


# --- ExtractionResult ---

def test_found_and_absent_behave_like_optionals():
    assert Found(0)
    assert not ABSENT
    assert Found(5).or_none() == 5
    assert ABSENT.or_none() is None
    assert repr(ABSENT) == "Absent"


def test_map_turns_none_into_absent():
    assert Found("3").map(int) == Found(3)
    assert Found("x").map(lambda _: None) is ABSENT
    assert ABSENT.map(int) is ABSENT


# --- DateExtractor ---

def test_date_extractor_reads_date_after_anchor():
    extractor = DateExtractor(anchor=r"DRAWING DATE:?", window=60)
    result = extractor.extract("DRAWING DATE: Fri., 1/30/2026 Estimated Jackpot")
    assert result == Found(datetime(2026, 1, 30, 5, 0, tzinfo=timezone.utc))


def test_date_extractor_anchor_present_pattern_absent():
    extractor = DateExtractor(anchor=r"DRAWING DATE:?", window=60)
    assert extractor.extract("DRAWING DATE: Fri., 1/30 Estimated Jackpot") is ABSENT


def test_date_extractor_anchor_absent():
    extractor = DateExtractor(anchor=r"DRAWING DATE:?", window=60)
    assert extractor.extract("Next Drawing Tue., 2/3/2026") is ABSENT


def test_date_extractor_ignores_dates_outside_window():
    extractor = DateExtractor(anchor=r"DRAWING DATE:", window=10)
    assert extractor.extract("DRAWING DATE:" + " filler" * 5 + " 1/30/2026") is ABSENT


# --- MoneyExtractor ---

def test_money_extractor_reads_amount_after_anchor():
    extractor = MoneyExtractor(anchor=r"Estimated Jackpot:")
    assert extractor.extract("Estimated Jackpot: $59 Million Cash Value: $26.9 Million") == Found(
        59_000_000
    )


def test_money_extractor_anchor_present_pattern_absent():
    extractor = MoneyExtractor(anchor=r"Estimated Jackpot:")
    assert extractor.extract("Estimated Jackpot: Coming Soon") is ABSENT


def test_money_extractor_anchor_absent():
    extractor = MoneyExtractor(anchor=r"Cash Value:")
    assert extractor.extract("Estimated Jackpot: $59 Million") is ABSENT


# --- MultiplierExtractor ---

def test_multiplier_extractor():
    extractor = MultiplierExtractor(anchor=r"Power Play")
    assert extractor.extract("Power Play 10x Estimated Jackpot") == Found("10x")
    assert extractor.extract("Power Play 2 X") == Found("2x")


def test_multiplier_extractor_anchor_present_pattern_absent():
    extractor = MultiplierExtractor(anchor=r"Power Play")
    assert extractor.extract("Power Play not available for this draw") is ABSENT


def test_multiplier_extractor_anchor_absent():
    extractor = MultiplierExtractor(anchor=r"Megaplier")
    assert extractor.extract("Power Play 3x") is ABSENT


# --- TextExtractor ---

def test_text_extractor_returns_first_group():
    extractor = TextExtractor(anchor=r"Next\s*Drawing", pattern=r"(\w{3}\.,\s*\d+/\d+)")
    assert extractor.extract("Next Drawing   Tue., 2/3 @ 11 p.m.") == Found("Tue., 2/3")


def test_text_extractor_anchor_present_pattern_absent():
    extractor = TextExtractor(anchor=r"Next\s*Drawing", pattern=r"(\d+/\d+)")
    assert extractor.extract("Next Drawing to be announced") is ABSENT


def test_text_extractor_anchor_absent():
    assert TextExtractor(anchor=r"Next\s*Drawing").extract("Winning Numbers 1 2 3") is ABSENT


# --- BallsExtractor ---

def test_balls_extractor_main_and_special_are_padded():
    extractor = BallsExtractor(game=POWERBALL, anchor=r"Winning Numbers")
    result = extractor.extract("Winning Numbers Sat, Jan 31, 2026 9 16 29 41 56 15 Power Play 3x")
    assert result == Found(Balls(main=("09", "16", "29", "41", "56"), special="15"))


def test_balls_extractor_skips_date_tokens_and_money():
    extractor = BallsExtractor(game=GA_FANTASY5, anchor=None, window=None)
    result = extractor.extract("( 02/01/2026 ). $125,000 3 11 19 27 40")
    assert result == Found(Balls(main=("03", "11", "19", "27", "40")))


def test_balls_extractor_too_few_numbers_is_absent_not_truncated():
    extractor = BallsExtractor(game=POWERBALL, anchor=r"Winning Numbers")
    assert extractor.extract("Winning Numbers 9 16 29 41 56") is ABSENT


def test_balls_extractor_out_of_range_main_is_absent():
    extractor = BallsExtractor(game=POWERBALL, anchor=r"Winning Numbers")
    assert extractor.extract("Winning Numbers 9 16 29 41 70 15") is ABSENT


def test_balls_extractor_out_of_range_special_is_absent():
    extractor = BallsExtractor(game=POWERBALL, anchor=r"Winning Numbers")
    assert extractor.extract("Winning Numbers 9 16 29 41 56 27") is ABSENT


def test_balls_extractor_digit_game_reads_single_digits():
    extractor = BallsExtractor(game=GA_CASH3, window=None)
    assert extractor.extract("( 02/01/2026 ). 0 1 7 .") == Found(Balls(main=("0", "1", "7")))


def test_balls_extractor_anchor_present_pattern_absent():
    extractor = BallsExtractor(game=POWERBALL, anchor=r"Winning Numbers")
    assert extractor.extract("Winning Numbers will be posted shortly") is ABSENT


def test_balls_extractor_anchor_absent():
    extractor = BallsExtractor(game=POWERBALL, anchor=r"Winning Numbers")
    assert extractor.extract("9 16 29 41 56 15") is ABSENT


def test_balls_extractor_requires_a_game():
    with pytest.raises(ValueError):
        BallsExtractor(anchor=r"Winning Numbers").extract("Winning Numbers 1 2 3")


def test_money_extractor_amount_without_leading_digit():
    assert MoneyExtractor(anchor=r"Jackpot:").extract("Jackpot: $.5 Million") == Found(500_000)


def test_money_extractor_requires_a_dollar_amount():
    extractor = MoneyExtractor(anchor=r"\bJACKPOT\b", window=40)
    assert extractor.extract("JACKPOT LAST DRAW RESULTS: ( 02/01/2026 ). 3 11") is ABSENT


def test_money_extractor_stops_at_the_next_label():
    extractor = MoneyExtractor(anchor=r"Estimated Jackpot:", stop=r"Cash Value")
    assert extractor.extract("Estimated Jackpot: Coming Soon Cash Value: $26.5 Million") is ABSENT
    assert extractor.extract("Estimated Jackpot: $59 Million Cash Value: $26.5 Million") == Found(
        59_000_000
    )


def test_stop_pattern_absent_keeps_full_window():
    extractor = MultiplierExtractor(anchor=r"Power Play", stop=r"Estimated Jackpot")
    assert extractor.extract("Power Play 4x") == Found("4x")
