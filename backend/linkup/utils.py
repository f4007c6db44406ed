import logging
import smtplib
from dataclasses import dataclass
from datetime import datetime, timezone
from email.message import EmailMessage
from email.utils import formataddr
from html import escape

from linkup.core.config import settings

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    pass


@dataclass
class EmailData:
    html_content: str
    subject: str


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def build_profile_url(username: str) -> str:
    return f"{settings.CLIENT_URL.rstrip('/')}/profile/{username}"


def generate_connection_accepted_email(
    *,
    sender_name: str,
    recipient_name: str,
    profile_url: str,
) -> EmailData:
    subject = f"{recipient_name} accepted your connection request"
    html_content = (
        f"<p>Hi {escape(sender_name)},</p>"
        f"<p>{escape(recipient_name)} accepted your connection request on "
        f"{escape(settings.PROJECT_NAME)}.</p>"
        f'<p><a href="{escape(profile_url, quote=True)}">View their profile</a></p>'
    )
    return EmailData(html_content=html_content, subject=subject)


def send_email(
    *,
    email_to: str,
    subject: str = "",
    html_content: str = "",
) -> None:
    """
    Send an HTML email through the configured SMTP relay.

    Raises:
        AssertionError: If email delivery is not configured.
        EmailDeliveryError: If the SMTP relay refuses or cannot be reached.
    """
    assert settings.emails_enabled, "no provided configuration for email variables"

    message = EmailMessage()
    message["Subject"] = subject
    message["From"] = formataddr(
        (settings.EMAILS_FROM_NAME or settings.PROJECT_NAME, settings.EMAILS_FROM_EMAIL)
    )
    message["To"] = email_to
    message.set_content(html_content, subtype="html")

    smtp_class = smtplib.SMTP_SSL if settings.SMTP_SSL else smtplib.SMTP
    try:
        with smtp_class(settings.SMTP_HOST, settings.SMTP_PORT, timeout=10) as smtp:
            if settings.SMTP_TLS and not settings.SMTP_SSL:
                smtp.starttls()
            if settings.SMTP_USER:
                smtp.login(settings.SMTP_USER, settings.SMTP_PASSWORD or "")
            smtp.send_message(message)
    except (smtplib.SMTPException, OSError) as e:
        raise EmailDeliveryError(str(e)) from e
    logger.info("Sent email %r to %s", subject, email_to)
