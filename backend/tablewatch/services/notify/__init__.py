"""Notification channels (SMS, email) behind the TextNotifier protocol."""
import logging

from tablewatch.services.notify.base import TextNotifier
from tablewatch.services.notify.email_notify import EmailTextNotifier
from tablewatch.services.notify.text_notify import TwilioTextNotifier

logger = logging.getLogger(__name__)


class MultiNotifier:
    """Sends to every channel in order; True if at least one delivered."""

    def __init__(self, notifiers: list[TextNotifier]) -> None:
        self.notifiers = list(notifiers)

    async def send_text(self, message: str) -> bool:
        delivered = False
        for notifier in self.notifiers:
            if await notifier.send_text(message):
                delivered = True
        if not delivered:
            logger.info("Notification not delivered by any channel: %s", message)
        return delivered


def build_notifier(settings) -> MultiNotifier:
    """Configured channels from settings; unconfigured ones are left out."""
    candidates = [
        TwilioTextNotifier(
            settings.twilio_account_sid,
            settings.twilio_auth_token,
            settings.twilio_from_number,
            settings.notify_phone,
        ),
        EmailTextNotifier(
            settings.notify_email,
            smtp_host=settings.smtp_host,
            smtp_port=settings.smtp_port,
            smtp_user=settings.smtp_user,
            smtp_password=settings.smtp_password,
            from_email=settings.notify_from,
        ),
    ]
    active = [n for n in candidates if n.is_configured()]
    if not active:
        logger.warning("No notification channel configured; bookings will only be logged")
    return MultiNotifier(active)


__all__ = ["EmailTextNotifier", "MultiNotifier", "TextNotifier", "TwilioTextNotifier", "build_notifier"]
