"""
Send booking notifications by email via SMTP (Google Gmail or other).
Set NOTIFY_EMAIL, SMTP_USER, SMTP_PASSWORD in .env. Use a Gmail App Password (not your normal password).
"""
import asyncio
import logging
import smtplib
from email.mime.text import MIMEText

logger = logging.getLogger(__name__)


class EmailTextNotifier:
    """Delivers the same one-line text as an email; SMTP runs in a worker thread."""

    def __init__(
        self,
        to_email: str,
        *,
        smtp_host: str,
        smtp_port: int,
        smtp_user: str,
        smtp_password: str,
        from_email: str = "",
    ) -> None:
        self.to_email = (to_email or "").strip()
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.smtp_user = (smtp_user or "").strip()
        self.smtp_password = (smtp_password or "").strip()
        self.from_email = (from_email or "").strip()

    def is_configured(self) -> bool:
        return bool(self.to_email and self.smtp_user and self.smtp_password)

    def _from_address(self) -> str:
        if self.from_email:
            return self.from_email
        return f"Tablewatch <{self.smtp_user}>"

    def _send(self, message: str) -> bool:
        msg = MIMEText(message, "plain")
        msg["Subject"] = message if len(message) <= 78 else message[:75] + "..."
        msg["From"] = self._from_address()
        msg["To"] = self.to_email
        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=10) as server:
                server.starttls()
                server.login(self.smtp_user, self.smtp_password)
                server.sendmail(self.smtp_user, [self.to_email], msg.as_string())
            logger.info("Email sent to %s", self.to_email)
            return True
        except (smtplib.SMTPException, OSError) as e:
            logger.exception("Failed to send notification email: %s", e)
            return False

    async def send_text(self, message: str) -> bool:
        if not self.is_configured():
            logger.debug("SMTP_USER, SMTP_PASSWORD or NOTIFY_EMAIL not set; skipping email notify")
            return False
        return await asyncio.to_thread(self._send, message)
