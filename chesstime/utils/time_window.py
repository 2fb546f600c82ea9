# chesstime/utils/time_window.py
import io
import re
from datetime import datetime, time
from typing import Optional

import chess.pgn

CLOCK_RE = re.compile(r"\d{2}:\d{2}:\d{2}")
SECONDS_PER_DAY = 86400
# Anything longer is a daily/correspondence game or a broken header.
MAX_GAME_SECONDS = 4800


def _parse_clock(value: Optional[str]) -> Optional[time]:
    if not value or not CLOCK_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%H:%M:%S").time()
    except ValueError:
        return None


def extract_clock_window(pgn: str) -> Optional[tuple[time, time]]:
    """
    Pull the StartTime / EndTime headers out of a Chess.com PGN.
    Returns None unless both are present and look like HH:MM:SS.
    """
    if not pgn:
        return None
    headers = chess.pgn.read_headers(io.StringIO(pgn))
    if headers is None:
        return None

    start = _parse_clock(headers.get("StartTime"))
    end = _parse_clock(headers.get("EndTime"))
    if start is None or end is None:
        return None
    return start, end


def elapsed_seconds(start: time, end: time) -> int:
    start_s = start.hour * 3600 + start.minute * 60 + start.second
    end_s = end.hour * 3600 + end.minute * 60 + end.second
    elapsed = end_s - start_s
    if elapsed < 0:
        # finished after midnight
        elapsed += SECONDS_PER_DAY
    return elapsed


def game_duration(pgn: str) -> Optional[int]:
    """Seconds spent on one game, or None when the game should not be counted."""
    window = extract_clock_window(pgn)
    if window is None:
        return None
    duration = elapsed_seconds(*window)
    if not 0 <= duration <= MAX_GAME_SECONDS:
        return None
    return duration
