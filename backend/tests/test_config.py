from tablewatch.config import Settings
from tablewatch.db.base import Base
from tablewatch.db.tables import ALL_TABLE_NAMES
from tablewatch.services.resy import ResyConfig, build_client


def test_settings_strip_secrets(monkeypatch):
    monkeypatch.setenv("RESY_API_KEY", "  key-with-newline\n")
    monkeypatch.setenv("RESY_EMAIL", " me@example.com ")
    settings = Settings(_env_file=None)
    assert settings.resy_api_key == "key-with-newline"
    assert settings.resy_email == "me@example.com"
    assert settings.reauth_cron == "59 * * * *"


def test_build_client_uses_settings():
    settings = Settings(
        _env_file=None,
        resy_api_key="key",
        resy_auth_token="tok",
        resy_base_url="https://api.test/",
        resy_timeout_seconds=5,
    )
    config = build_client(settings).config
    assert (config.api_key, config.auth_token, config.base_url, config.timeout) == ("key", "tok", "https://api.test", 5)


def test_resy_headers_carry_auth_token():
    headers = ResyConfig(api_key="key", auth_token="tok").headers()
    assert headers["Authorization"] == 'ResyAPI api_key="key"'
    assert headers["x-resy-auth-token"] == headers["x-resy-universal-auth"] == "tok"


def test_models_match_table_list():
    assert set(Base.metadata.tables) == set(ALL_TABLE_NAMES)
