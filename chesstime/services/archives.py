# === chesstime/services/archives.py ===
import asyncio
import logging
from datetime import datetime, timezone
from typing import (
    Any,
    AsyncIterator,
    Callable,
    Dict,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Tuple,
)

import httpx

from chesstime.services.chesscom import ChessComClient, games_from

logger = logging.getLogger("chesstime.services.archives")


class Archive(NamedTuple):
    key: str  # "YYYY-MM"
    games: List[Dict[str, Any]]


def archive_key(archive_url: str) -> str:
    parts = archive_url.rstrip("/").split("/")
    return f"{parts[-2]}-{parts[-1]}"


def month_range(start: datetime, end: datetime) -> Iterator[Tuple[int, int]]:
    """(year, month) pairs from start's month through end's month, inclusive."""
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        month += 1
        if month > 12:
            year, month = year + 1, 1


class IndexArchiveFetcher:
    """
    Lists the player's archives through /games/archives and downloads them
    in fixed-size parallel batches. A failed archive is logged and skipped;
    the rest of its batch and later batches carry on.
    """

    def __init__(self, batch_size: int = 10):
        self.batch_size = batch_size

    async def fetch(
        self,
        client: ChessComClient,
        username: str,
        joined: Optional[datetime] = None,
    ) -> AsyncIterator[Archive]:
        # failure to get the index itself is not isolated
        archive_urls = await client.get_archive_index(username)
        logger.info(f"📚 {username}: {len(archive_urls)} archives listed")

        for i in range(0, len(archive_urls), self.batch_size):
            batch = archive_urls[i : i + self.batch_size]
            outcomes = await asyncio.gather(
                *(client.get(url) for url in batch), return_exceptions=True
            )
            for url, outcome in zip(batch, outcomes):
                if isinstance(outcome, Exception):
                    logger.warning(f"⚠️ Archive {url} failed: {outcome}")
                    continue
                try:
                    games = games_from(outcome)
                except (httpx.HTTPError, ValueError) as e:
                    logger.warning(f"⚠️ Archive {url} failed: {e}")
                    continue
                yield Archive(archive_key(url), games)


class CalendarArchiveFetcher:
    """
    Walks month by month from the join date to the current UTC month,
    one request at a time. Months that fail contribute nothing.
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        self.now = now or (lambda: datetime.now(timezone.utc))

    async def fetch(
        self,
        client: ChessComClient,
        username: str,
        joined: Optional[datetime] = None,
    ) -> AsyncIterator[Archive]:
        now = self.now()
        start = joined or now

        for year, month in month_range(start, now):
            key = f"{year}-{month:02d}"
            try:
                resp = await client.get_month(username, year, month)
                games = games_from(resp)
            except (httpx.HTTPError, ValueError) as e:
                logger.warning(f"⚠️ Month {key} for {username} failed: {e}")
                continue
            logger.info(f"Fetched archive {key} ({len(games)} games)")
            yield Archive(key, games)


def select_fetcher(client: ChessComClient):
    settings = client.settings
    if settings.archive_strategy == "calendar":
        return CalendarArchiveFetcher()
    return IndexArchiveFetcher(batch_size=settings.archive_batch_size)


def fetch_archives(
    client: ChessComClient,
    username: str,
    joined: Optional[datetime] = None,
    fetcher=None,
) -> AsyncIterator[Archive]:
    fetcher = fetcher or select_fetcher(client)
    return fetcher.fetch(client, username, joined)
