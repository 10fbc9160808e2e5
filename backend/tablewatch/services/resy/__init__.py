"""Resy API: config, raw client and response types. Validation lives in providers.resy_provider."""
from tablewatch.services.resy.client import ResyClient
from tablewatch.services.resy.config import ResyConfig
from tablewatch.services.resy.types import (
    ResyBooking,
    ResyPaymentMethod,
    ResySlot,
    ResySlotConfig,
    ResySlotDate,
    ResySlotShift,
    ResyUser,
)


def build_client(settings) -> ResyClient:
    """Client configured from application settings (env values win over ResyConfig's own env lookup)."""
    config = ResyConfig(
        api_key=settings.resy_api_key or None,
        auth_token=settings.resy_auth_token or None,
        base_url=settings.resy_base_url,
        timeout=settings.resy_timeout_seconds,
    )
    return ResyClient(config)


__all__ = [
    "ResyClient",
    "ResyConfig",
    "build_client",
    "ResyBooking",
    "ResyPaymentMethod",
    "ResySlot",
    "ResySlotConfig",
    "ResySlotDate",
    "ResySlotShift",
    "ResyUser",
]
