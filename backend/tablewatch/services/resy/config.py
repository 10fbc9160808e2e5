"""Resy API config. Credentials from env (RESY_API_KEY, RESY_AUTH_TOKEN) or ResyClient args."""
import os
from pathlib import Path

from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parent.parent.parent.parent / ".env"
load_dotenv(_ENV_PATH)

DEFAULT_BASE_URL = "https://api.resy.com"
DEFAULT_TIMEOUT = 20.0


def _env(key: str, default: str = "") -> str:
    return (os.getenv(key) or default).strip()


class ResyConfig:
    """API credentials and base URL for Resy. auth_token is replaced on every re-login."""

    __slots__ = ("api_key", "auth_token", "base_url", "timeout")

    def __init__(
        self,
        *,
        api_key: str | None = None,
        auth_token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_key = (api_key or _env("RESY_API_KEY")).strip()
        self.auth_token = (auth_token or _env("RESY_AUTH_TOKEN")).strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key and self.auth_token)

    def headers(self) -> dict[str, str]:
        h = {
            "Authorization": f'ResyAPI api_key="{self.api_key}"',
            "Origin": "https://resy.com",
            "Referer": "https://resy.com/",
            "Accept": "application/json, text/plain, */*",
        }
        if self.auth_token:
            h["x-resy-auth-token"] = self.auth_token
            h["x-resy-universal-auth"] = self.auth_token
        return h
