"""Email and chat notifications for form submissions"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional, Sequence

import httpx

from formhandler.config import Settings
from formhandler.models.forms import FormDefinition, ValidatedField
from formhandler.models.notification import ChatNotification, EmailNotification
from formhandler.templating import render_minified, render_template

logger = logging.getLogger(__name__)


def replace_tags(text: str, fields: Sequence[ValidatedField]) -> str:
    """
    Replaces simple tags in a string with the value of a form field.
    `Hello {name}` → `Hello Tobias`
    """
    for field in fields:
        text = text.replace("{" + field.name + "}", field.value)
    return text


def build_email(form: FormDefinition, fields: Sequence[ValidatedField]) -> EmailNotification:
    """Render the notification email for a validated submission"""
    subject = replace_tags(form.subject, fields)
    context = {
        "form": form,
        "subject": subject,
        "fields": [field for field in fields if not field.is_reserved],
        "details": [field for field in fields if field.is_reserved],
    }

    return EmailNotification(
        from_address=replace_tags(form.sender, fields),
        to_addresses=form.destination_addresses,
        subject=subject,
        html_content=render_minified("email.html", **context),
        text_content=render_template("email.txt", **context).strip()
    )


class NotificationDispatcher:
    """
    Sends submission notifications via Mailgun and a Slack incoming webhook.

    Both channels are best-effort: failures are logged and reported as False,
    never raised.
    """

    def __init__(self, settings: Settings, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._client = client

    @asynccontextmanager
    async def _http(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return

        async with httpx.AsyncClient(timeout=self.settings.notification_timeout) as client:
            yield client

    async def send_email(
        self,
        from_address: str,
        to_addresses: List[str],
        subject: str,
        html_body: str,
        text_body: str = ""
    ) -> bool:
        """Send an email via Mailgun's API"""
        if not self.settings.email_enabled:
            logger.info("Mailgun not configured, skipping email")
            return False

        try:
            async with self._http() as client:
                response = await client.post(
                    f"{self.settings.mailgun_api_base}/{self.settings.mailgun_domain}/messages",
                    auth=("api", self.settings.mailgun_api_key),
                    data={
                        "from": from_address,
                        "to": to_addresses,
                        "subject": subject,
                        "text": text_body,
                        "html": html_body
                    }
                )

            if response.status_code == 200:
                logger.info(f"Mailgun message sent to {to_addresses}")
                return True

            logger.error(f"Mailgun send failed: {response.status_code} - {response.text}")
            return False

        except Exception as e:
            logger.error(f"Mailgun error: {e}")
            return False

    async def send_chat_notification(self, channel: str, text: str) -> bool:
        """Post a message to the Slack webhook"""
        if not self.settings.slack_endpoint or not channel:
            logger.info("Slack not configured, skipping notification")
            return False

        message = ChatNotification(channel=channel, text=text)

        try:
            async with self._http() as client:
                response = await client.post(self.settings.slack_endpoint, json=message.model_dump())

            if response.status_code == 200:
                logger.info(f"Slack notification sent to {channel}")
                return True

            logger.error(f"Slack notification failed: {response.status_code} - {response.text}")
            return False

        except Exception as e:
            logger.error(f"Slack error: {e}")
            return False

    async def notify(self, form: FormDefinition, fields: Sequence[ValidatedField]) -> None:
        """Issue the email and chat notifications for a submission and wait for both"""
        email = build_email(form, fields)

        await asyncio.gather(
            self.send_chat_notification(self.settings.slack_channel, f"New {email.subject}"),
            self.send_email(
                email.from_address,
                email.to_addresses,
                email.subject,
                email.html_content,
                email.text_content
            )
        )
