"""Unit tests for src/core/config.py"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.core.config import Settings, configure_logging, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CHESS_AUTOMATED_OPPONENT", raising=False)
    monkeypatch.delenv("CHESS_LOG_LEVEL", raising=False)
    settings = load_settings()
    assert settings == Settings()
    assert not settings.automated_opponent
    assert settings.log_level == "WARNING"


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("true", True), ("Yes", True), ("0", False), ("off", False)],
)
def test_automated_opponent_from_env(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
) -> None:
    monkeypatch.setenv("CHESS_AUTOMATED_OPPONENT", value)
    assert load_settings().automated_opponent is expected


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHESS_LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"


def test_unknown_log_level() -> None:
    with pytest.raises(ValidationError):
        _ = Settings(log_level="chatty")


def test_configure_logging() -> None:
    with patch("src.core.config.logging.basicConfig") as mock_basic_config:
        configure_logging(Settings(log_level="info"))
    mock_basic_config.assert_called_once()
    assert mock_basic_config.call_args.kwargs["level"] == "INFO"
