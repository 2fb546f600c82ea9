import pydantic
import pytest

from chesstime.config import DEFAULT_USER_AGENT, Settings, load_settings


def test_defaults(monkeypatch) -> None:
    for var in ("CHESSCOM_API_BASE", "ARCHIVE_STRATEGY", "ARCHIVE_BATCH_SIZE", "PORT"):
        monkeypatch.delenv(var, raising=False)

    settings = load_settings()

    assert settings.api_base == "https://api.chess.com/pub"
    assert settings.archive_strategy == "index"
    assert settings.archive_batch_size == 10
    assert settings.port == 3000
    assert settings.headers == {"User-Agent": DEFAULT_USER_AGENT}


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("CHESSCOM_API_BASE", "http://localhost:9000/pub/")
    monkeypatch.setenv("ARCHIVE_STRATEGY", "calendar")
    monkeypatch.setenv("ARCHIVE_BATCH_SIZE", "4")

    settings = load_settings()

    assert settings.api_base == "http://localhost:9000/pub"
    assert settings.archive_strategy == "calendar"
    assert settings.archive_batch_size == 4


def test_bad_strategy_rejected(monkeypatch) -> None:
    monkeypatch.setenv("ARCHIVE_STRATEGY", "random")

    with pytest.raises(pydantic.ValidationError):
        load_settings()


def test_settings_are_frozen() -> None:
    settings = Settings()

    with pytest.raises(pydantic.ValidationError):
        settings.user_agent = "someone else"
