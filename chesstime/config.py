# === chesstime/config.py ===
from functools import lru_cache
from os import getenv
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# ─── Defaults ──────────────────────────────────────────────────────────────
DEFAULT_API_BASE = "https://api.chess.com/pub"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseModel):
    """Immutable runtime configuration, handed to whatever talks to Chess.com."""

    model_config = ConfigDict(frozen=True)

    api_base: str = DEFAULT_API_BASE
    user_agent: str = DEFAULT_USER_AGENT
    archive_strategy: Literal["index", "calendar"] = "index"
    archive_batch_size: int = Field(10, ge=1)
    request_timeout: float = Field(10.0, gt=0)
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}


def load_settings() -> Settings:
    return Settings(
        api_base=getenv("CHESSCOM_API_BASE", DEFAULT_API_BASE).rstrip("/"),
        user_agent=getenv("CHESSCOM_USER_AGENT", DEFAULT_USER_AGENT),
        archive_strategy=getenv("ARCHIVE_STRATEGY", "index"),
        archive_batch_size=getenv("ARCHIVE_BATCH_SIZE", "10"),
        request_timeout=getenv("CHESSCOM_TIMEOUT", "10.0"),
        host=getenv("HOST", "0.0.0.0"),
        port=getenv("PORT", "3000"),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
