"""Outbound mail configuration."""

from pydantic import BaseModel, SecretStr


class MailConfig(BaseModel, frozen=True):
    """SMTP settings for OTP delivery."""

    smtp_host: str
    smtp_port: int
    smtp_username: str
    smtp_password: SecretStr
    mail_from: str
    use_tls: bool

    @property
    def sender(self) -> str:
        """Envelope sender, falling back to the SMTP login."""
        return self.mail_from or self.smtp_username
