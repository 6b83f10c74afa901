import pytest
from pydantic import ValidationError
from nullable.core.config import DEFAULT_LOG_FORMAT, Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("NULLABLE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("NULLABLE_LOG_FORMAT", raising=False)

    settings = Settings.load()

    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FORMAT == DEFAULT_LOG_FORMAT


def test_load_from_environment(monkeypatch):
    monkeypatch.setenv("NULLABLE_LOG_LEVEL", " debug ")
    monkeypatch.setenv("NULLABLE_LOG_FORMAT", "%(message)s")

    settings = Settings.load()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "%(message)s"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="LOUD")
