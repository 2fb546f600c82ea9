# === chesstime/services/profile.py ===
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import httpx

from chesstime.services.chesscom import (
    ChessComClient,
    ChessComRequestError,
    PlayerNotFoundError,
    json_object,
)

logger = logging.getLogger("chesstime.services.profile")

# Fixed +05:30 shift, no DST rules involved.
IST_OFFSET = timedelta(hours=5, minutes=30)
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

RATING_CATEGORIES = {
    "chess_blitz": "Blitz",
    "chess_bullet": "Bullet",
    "chess_rapid": "Rapid",
    "chess_daily": "Daily",
    "chess960_daily": "Chess960 Daily",
}


@dataclass
class ProfileSummary:
    username: str
    report: str
    joined: Optional[datetime] = None  # UTC


def utc_from_unix(ts: Optional[int]) -> Optional[datetime]:
    if not ts:
        return None
    return datetime.fromtimestamp(ts, tz=timezone.utc)


def to_ist(ts: Optional[int]) -> str:
    utc = utc_from_unix(ts)
    if utc is None:
        return "N/A"
    return (utc + IST_OFFSET).strftime(TIMESTAMP_FORMAT)


def _or_na(value: Any) -> Any:
    return value if value else "N/A"


def render_report(username: str, profile: Dict[str, Any], stats: Dict[str, Any]) -> str:
    country = (profile.get("country") or "").split("/")[-1]

    lines = [
        f"✅ Username: {username}",
        f"🔹 Name: {_or_na(profile.get('name'))}",
        f"🔹 Country: {_or_na(country)}",
        f"🔹 Membership: {_or_na(profile.get('status'))}",
        f"🔹 Joined On: {to_ist(profile.get('joined'))} IST",
        f"🔹 Last Online: {to_ist(profile.get('last_online'))} IST",
        f"🔹 Friends: {_or_na(profile.get('followers'))}",
        f"🔹 Title: {_or_na(profile.get('title'))}",
        "",
        "🔹 Ratings:",
    ]

    total_games = 0
    for key, label in RATING_CATEGORIES.items():
        mode = stats.get(key)
        if not isinstance(mode, dict) or not mode:
            continue
        rating = _or_na((mode.get("last") or {}).get("rating"))
        record = mode.get("record") or {}
        games = record.get("win", 0) + record.get("loss", 0) + record.get("draw", 0)
        total_games += games
        lines.append(f"   🔸 {label}: {rating} ({games} games)")

    lines.append(f"   🔸 Total Games : {total_games}")
    return "\n".join(lines) + "\n"


async def fetch_profile_summary(client: ChessComClient, username: str) -> ProfileSummary:
    """
    Fetch profile + stats side by side and render the text report.

    Raises PlayerNotFoundError when the profile lookup is not a 200, and
    ChessComRequestError for anything else that goes wrong on the way.
    """
    username = username.lower()

    profile_resp, stats_resp = await asyncio.gather(
        client.get_profile(username), client.get_stats(username), return_exceptions=True
    )
    for outcome in (profile_resp, stats_resp):
        if isinstance(outcome, Exception):
            logger.error(f"❌ Profile lookup for {username} failed: {outcome}")
            raise ChessComRequestError(outcome) from outcome

    if profile_resp.status_code != 200:
        logger.info(f"🔍 {username} not found ({profile_resp.status_code})")
        raise PlayerNotFoundError(username)

    try:
        profile = json_object(profile_resp)
        stats = json_object(stats_resp)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"❌ Profile lookup for {username} failed: {e}")
        raise ChessComRequestError(e) from e

    return ProfileSummary(
        username=username,
        report=render_report(username, profile, stats),
        joined=utc_from_unix(profile.get("joined")),
    )
