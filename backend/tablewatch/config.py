"""
Application settings (Pydantic Settings).
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env next to backend/ (parent of tablewatch/)
_env_path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_path, extra="ignore")

    database_url: str = "sqlite:///./tablewatch.db"
    log_level: str = "INFO"

    # Resy: RESY_API_KEY from the browser; RESY_EMAIL/RESY_PASSWORD let the hourly job refresh the token
    resy_api_key: str = ""
    resy_auth_token: str = ""
    resy_email: str = ""
    resy_password: str = ""
    resy_base_url: str = "https://api.resy.com"
    resy_timeout_seconds: float = 20.0

    # Text notifications (Twilio)
    twilio_account_sid: str = ""
    twilio_auth_token: str = ""
    twilio_from_number: str = ""
    notify_phone: str = ""

    # Email notifications (SMTP); Gmail needs an App Password
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    notify_email: str = ""
    notify_from: str = ""

    # Re-login just before the top of every hour
    reauth_cron: str = "59 * * * *"
    run_cycle_on_startup: bool = True

    @field_validator(
        "resy_api_key",
        "resy_auth_token",
        "resy_email",
        "resy_password",
        "twilio_account_sid",
        "twilio_auth_token",
        mode="after",
    )
    @classmethod
    def strip_secret(cls, v: str) -> str:
        return (v or "").strip()


settings = Settings()
