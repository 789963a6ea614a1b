"""
Notification sender implementations.

SendGridNotificationSender talks to the SendGrid v3 mail API over httpx.
LoggingNotificationSender is used when no API key is configured.
"""

import logging

import httpx

from src.app.services.notification_sender import INotificationSender
from src.domain.exceptions import NotificationError

logger = logging.getLogger(__name__)

SENDGRID_MAIL_URL = "https://api.sendgrid.com/v3/mail/send"

RESET_SUBJECT = "Reset your Lumiere password"

RESET_TEMPLATE = """\
<p>Hi {first_name},</p>
<p>We received a request to change the password of your Lumiere account.
Use the link below to choose a new one. The link expires in <strong>1 hour</strong>.</p>
<p><a href="{reset_link}">{reset_link}</a></p>
<p>If you did not request this change you can ignore this email.</p>
"""


class SendGridNotificationSender(INotificationSender):
    """Sends email through the SendGrid v3 API"""

    def __init__(
        self,
        api_key: str,
        sender_email: str,
        sender_name: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport = None,
    ):
        self.api_key = api_key
        self.sender_email = sender_email
        self.sender_name = sender_name
        self.timeout = timeout
        self.transport = transport

    async def send_password_reset(
        self, email: str, reset_link: str, first_name: str
    ) -> bool:
        payload = {
            "personalizations": [{"to": [{"email": email}]}],
            "from": {"email": self.sender_email, "name": self.sender_name},
            "subject": RESET_SUBJECT,
            "content": [
                {
                    "type": "text/html",
                    "value": RESET_TEMPLATE.format(
                        first_name=first_name, reset_link=reset_link
                    ),
                }
            ],
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    SENDGRID_MAIL_URL, json=payload, headers=headers
                )
        except httpx.HTTPError as exc:
            raise NotificationError(f"SendGrid unreachable: {exc}") from exc

        if response.is_success:
            logger.info(
                f"Password reset email accepted: message_id={response.headers.get('x-message-id')}"
            )
            return True

        logger.error(f"SendGrid rejected password reset email: status={response.status_code}")
        return False


class LoggingNotificationSender(INotificationSender):
    """Development sender: logs the reset link instead of emailing it"""

    async def send_password_reset(
        self, email: str, reset_link: str, first_name: str
    ) -> bool:
        logger.info(f"Password reset link for {email}: {reset_link}")
        return True


def build_notification_sender(ApplicationConfig) -> INotificationSender:
    """Pick the sender for the configured environment"""
    if ApplicationConfig.SENDGRID_API_KEY:
        return SendGridNotificationSender(
            api_key=ApplicationConfig.SENDGRID_API_KEY,
            sender_email=ApplicationConfig.EMAIL_SENDER,
            sender_name=ApplicationConfig.EMAIL_SENDER_NAME,
        )
    logger.warning("SENDGRID_API_KEY not set, password reset links will only be logged")
    return LoggingNotificationSender()
