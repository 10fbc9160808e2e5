"""
Send booking notifications by SMS via Twilio's REST API.
Set TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN, TWILIO_FROM_NUMBER and NOTIFY_PHONE in .env.
If not configured, send_text no-ops (log and return False).
"""
import logging

import httpx

logger = logging.getLogger(__name__)

TWILIO_API_BASE = "https://api.twilio.com/2010-04-01"


class TwilioTextNotifier:
    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        from_number: str,
        to_number: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.account_sid = (account_sid or "").strip()
        self.auth_token = (auth_token or "").strip()
        self.from_number = (from_number or "").strip()
        self.to_number = (to_number or "").strip()
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.account_sid and self.auth_token and self.from_number and self.to_number)

    async def send_text(self, message: str) -> bool:
        if not self.is_configured():
            logger.debug("Twilio not configured; skipping text: %s", message)
            return False
        url = f"{TWILIO_API_BASE}/Accounts/{self.account_sid}/Messages.json"
        data = {"To": self.to_number, "From": self.from_number, "Body": message}
        try:
            async with httpx.AsyncClient(timeout=10.0, transport=self._transport) as client:
                resp = await client.post(url, data=data, auth=(self.account_sid, self.auth_token))
        except httpx.HTTPError as e:
            logger.warning("Twilio request failed: %s", e, exc_info=True)
            return False
        if resp.status_code in (200, 201):
            logger.info("Text sent to %s", self.to_number)
            return True
        logger.warning("Twilio returned %s: %s", resp.status_code, resp.text[:500])
        return False
