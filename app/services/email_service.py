"""Outbound OTP email delivery over SMTP."""

from email.message import EmailMessage

import aiosmtplib
import structlog

from app.core.exceptions import EmailDeliveryError
from app.core.settings import MailConfig

logger = structlog.get_logger()

SMTP_TIMEOUT_SECONDS = 10
OTP_SUBJECT = "SuckDSA - Verify Your Email (OTP Inside)"

OTP_HTML_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h1 style="color: #667eea;">Welcome to SuckDSA!</h1>
  <p>Arre <strong>{name}</strong>! Ready to get roasted while learning DSA?</p>
  <p>Your OTP is:</p>
  <h2 style="font-size: 36px; color: #667eea; letter-spacing: 5px;">{code}</h2>
  <p>This OTP will expire in {minutes} minutes.
     Don't be slower than a government website!</p>
</div>
"""

OTP_TEXT_TEMPLATE = (
    "Arre {name}! Your SuckDSA OTP is {code}. "
    "It expires in {minutes} minutes."
)


def build_otp_message(
    sender: str, recipient: str, code: str, name: str, minutes: int
) -> EmailMessage:
    """Compose the verification email (plain text with an HTML alternative)."""
    message = EmailMessage()
    message["Subject"] = OTP_SUBJECT
    message["From"] = sender
    message["To"] = recipient
    fields = {"name": name, "code": code, "minutes": minutes}
    message.set_content(OTP_TEXT_TEMPLATE.format(**fields))
    message.add_alternative(OTP_HTML_TEMPLATE.format(**fields), subtype="html")
    return message


class EmailService:
    """Send one-time codes through the configured SMTP relay."""

    def __init__(self, config: MailConfig, otp_lifetime_seconds: int) -> None:
        self._config = config
        self._minutes = max(1, otp_lifetime_seconds // 60)

    async def send_otp(self, recipient: str, code: str, name: str = "User") -> None:
        """Deliver ``code`` to ``recipient``; raises EmailDeliveryError on failure."""
        config = self._config
        message = build_otp_message(
            sender=config.sender,
            recipient=recipient,
            code=code,
            name=name,
            minutes=self._minutes,
        )
        try:
            await aiosmtplib.send(
                message,
                hostname=config.smtp_host,
                port=config.smtp_port,
                username=config.smtp_username or None,
                password=config.smtp_password.get_secret_value() or None,
                start_tls=config.use_tls,
                timeout=SMTP_TIMEOUT_SECONDS,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Email sending failed", recipient=recipient, error=str(e))
            raise EmailDeliveryError from e
        logger.info("OTP email sent", recipient=recipient)
