from datetime import time

from chesstime.utils.time_window import (
    MAX_GAME_SECONDS,
    elapsed_seconds,
    extract_clock_window,
    game_duration,
)
from tests.http_fakes import make_pgn


def test_extracts_start_and_end_clock() -> None:
    assert extract_clock_window(make_pgn("10:00:00", "10:05:00")) == (
        time(10, 0, 0),
        time(10, 5, 0),
    )


def test_plain_window() -> None:
    assert game_duration(make_pgn("10:00:00", "10:05:00")) == 300


def test_midnight_rollover() -> None:
    assert elapsed_seconds(time(23, 59, 0), time(0, 1, 0)) == 120
    assert game_duration(make_pgn("23:59:00", "00:01:00")) == 120


def test_long_game_is_measured_but_not_counted() -> None:
    assert elapsed_seconds(time(10, 0, 0), time(12, 0, 0)) == 7200
    assert game_duration(make_pgn("10:00:00", "12:00:00")) is None


def test_ceiling_is_inclusive() -> None:
    assert MAX_GAME_SECONDS == 4800
    assert game_duration(make_pgn("10:00:00", "11:20:00")) == 4800
    assert game_duration(make_pgn("10:00:00", "11:20:01")) is None


def test_zero_length_game_counts() -> None:
    assert game_duration(make_pgn("10:00:00", "10:00:00")) == 0


def test_missing_end_is_skipped() -> None:
    assert extract_clock_window(make_pgn("10:00:00", None)) is None
    assert game_duration(make_pgn("10:00:00", None)) is None


def test_missing_start_is_skipped() -> None:
    assert game_duration(make_pgn(None, "10:00:00")) is None


def test_malformed_clock_is_skipped() -> None:
    assert game_duration(make_pgn("25:00:00", "10:00:00")) is None
    assert game_duration(make_pgn("10:00", "10:05:00")) is None


def test_empty_pgn_is_skipped() -> None:
    assert game_duration("") is None
