# === chesstime/services/chesscom.py ===
import logging
from typing import Any, Dict, List, Optional

import httpx

from chesstime.config import Settings

logger = logging.getLogger("chesstime.services.chesscom")


class ChessComError(Exception):
    """Base for failures that end up in front of the user as plain text."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PlayerNotFoundError(ChessComError):
    def __init__(self, username: str):
        super().__init__(
            f"❌ Username '{username}' not found. Please check and try again."
        )
        self.username = username


class ChessComRequestError(ChessComError):
    def __init__(self, cause: Exception):
        super().__init__(f"❌ API Request Failed: {cause}. Please try again later.")
        self.cause = cause


class ChessComClient:
    """
    Thin async wrapper over the Chess.com public API.

    Every request goes out with the User-Agent from the injected settings.
    Status codes are left for callers to interpret.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self._http = httpx.AsyncClient(
            headers=settings.headers,
            timeout=settings.request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ChessComClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def player_url(self, username: str, *path: str) -> str:
        return "/".join([self.settings.api_base, "player", username, *path])

    async def get(self, url: str) -> httpx.Response:
        return await self._http.get(url)

    async def get_profile(self, username: str) -> httpx.Response:
        return await self.get(self.player_url(username))

    async def get_stats(self, username: str) -> httpx.Response:
        return await self.get(self.player_url(username, "stats"))

    async def get_archive_index(self, username: str) -> List[str]:
        resp = await self.get(self.player_url(username, "games", "archives"))
        return json_object(resp).get("archives") or []

    async def get_month(self, username: str, year: int, month: int) -> httpx.Response:
        return await self.get(
            self.player_url(username, "games", str(year), f"{month:02d}")
        )


def json_object(resp: httpx.Response) -> Dict[str, Any]:
    """Decoded body of a successful response; anything but a JSON object is a ValueError."""
    resp.raise_for_status()
    data = resp.json()
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object from {resp.request.url}")
    return data


def games_from(resp: httpx.Response) -> List[Dict[str, Any]]:
    """Games of one archive response; raises on error status or bad JSON."""
    games = json_object(resp).get("games") or []
    if not isinstance(games, list):
        raise ValueError(f"malformed games list from {resp.request.url}")
    return [game for game in games if isinstance(game, dict)]
