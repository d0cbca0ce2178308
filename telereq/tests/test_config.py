import textwrap

import pytest
from pydantic import ValidationError
from telereq.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # keep a developer's own .env and TELEREQ_* variables out of the tests
    monkeypatch.chdir(tmp_path)
    for name in (
        "TELEREQ_TELEGRAM_API_TOKEN",
        "TELEREQ_API_URL",
        "TELEREQ_TIMEOUT",
        "TELEREQ_OUTPUT_WORKERS",
        "TELEREQ_OUTPUT_QUEUE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_env_variables(monkeypatch):
    monkeypatch.setenv("TELEREQ_TELEGRAM_API_TOKEN", "env_token")
    monkeypatch.setenv("TELEREQ_OUTPUT_WORKERS", "4")

    settings = Settings()
    assert settings.telegram_api_token == "env_token"
    assert settings.output_workers == 4
    assert str(settings.api_url).startswith("https://api.telegram.org")
    assert settings.timeout == 10.0
    assert settings.output_queue_size == 512


def test_env_file(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text(
        textwrap.dedent(
            """
        TELEREQ_TELEGRAM_API_TOKEN=envfile_token
        TELEREQ_API_URL=https://bot-api.internal:8081
        TELEREQ_TIMEOUT=2.5
        """
        ).strip()
    )

    settings = Settings(_env_file=str(env_file))
    assert settings.telegram_api_token == "envfile_token"
    assert str(settings.api_url).startswith("https://bot-api.internal:8081")
    assert settings.timeout == 2.5


def test_missing_token():
    with pytest.raises(ValidationError):
        Settings()


def test_invalid_api_url(monkeypatch):
    monkeypatch.setenv("TELEREQ_TELEGRAM_API_TOKEN", "token")
    monkeypatch.setenv("TELEREQ_API_URL", "not a url")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("TELEREQ_TELEGRAM_API_TOKEN", "cached_token")
    assert get_settings() is get_settings()
    assert get_settings().telegram_api_token == "cached_token"
