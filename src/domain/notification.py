"""
Failure notification domain service.

Builds the failed-registration email and hands it to the email port.
Recipients on the internal domain are tagged "Internal", everyone else
"External", so the provider's statistics can tell the two apart.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .ports import EmailSender, TemplatedEmail, UpstreamResponse

logger = logging.getLogger(__name__)

DEFAULT_SENDER = "Holo <no-reply@holo.host>"
DEFAULT_TEMPLATE_ALIAS = "failed-registration"
DEFAULT_INTERNAL_DOMAIN = "holo.host"


@dataclass
class FailureNotifier:
    """Domain service that emails a registrant about a failed registration."""

    email_sender: EmailSender
    sender: str = DEFAULT_SENDER
    template_alias: str = DEFAULT_TEMPLATE_ALIAS
    internal_domain: str = DEFAULT_INTERNAL_DOMAIN

    async def notify(self, email: str, error: Any) -> UpstreamResponse:
        """
        Send the failed-registration email.

        Args:
            email: Recipient address
            error: Error description rendered by the template, any JSON value

        Returns:
            The email provider's response, unmodified
        """
        message = self.build_message(email, error)
        logger.info("Sending %s to %s", message.tag, email)
        response = await self.email_sender.send_with_template(message)
        logger.info("Email provider answered %s", response.status_code)
        return response

    def build_message(self, email: str, error: Any) -> TemplatedEmail:
        group = "Internal" if self.is_internal(email) else "External"
        return TemplatedEmail(
            sender=self.sender,
            tag=f"{group} {self.template_alias}",
            to=email,
            template_alias=self.template_alias,
            template_model={"error": error},
        )

    def is_internal(self, email: str) -> bool:
        return email.endswith(f"@{self.internal_domain}")
