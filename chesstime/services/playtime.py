# === chesstime/services/playtime.py ===
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from chesstime.schemas import PlaytimeResponse
from chesstime.services.archives import fetch_archives
from chesstime.services.chesscom import ChessComClient
from chesstime.utils.duration import format_duration
from chesstime.utils.time_window import game_duration

logger = logging.getLogger("chesstime.services.playtime")


@dataclass
class PlaytimeReport:
    total_seconds: int = 0
    monthly_seconds: Dict[str, int] = field(default_factory=dict)

    def add(self, month: str, seconds: int) -> None:
        self.total_seconds += seconds
        self.monthly_seconds[month] = self.monthly_seconds.get(month, 0) + seconds

    def to_response(self) -> PlaytimeResponse:
        return PlaytimeResponse(
            totalTimePlayed=format_duration(self.total_seconds),
            monthlyBreakdown={
                month: format_duration(seconds)
                for month, seconds in self.monthly_seconds.items()
            },
        )


async def aggregate_playtime(
    client: ChessComClient,
    username: str,
    joined: Optional[datetime] = None,
    fetcher=None,
) -> PlaytimeReport:
    username = username.lower()
    report = PlaytimeReport()

    async for archive in fetch_archives(client, username, joined, fetcher):
        for game in archive.games:
            duration = game_duration(game.get("pgn") or "")
            if duration is not None:
                report.add(archive.key, duration)

    logger.info(
        f"⏱️ {username}: {format_duration(report.total_seconds)} "
        f"across {len(report.monthly_seconds)} months"
    )
    return report
