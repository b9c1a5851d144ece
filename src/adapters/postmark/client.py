"""
Postmark email sender adapter - Implements EmailSender protocol.

Sends templated email through POST {base}/email/withTemplate,
authenticated with the server token header.
"""

import httpx

from src.adapters.http import send, to_upstream_response
from src.domain.ports import SettingsStore, TemplatedEmail, UpstreamResponse

DEFAULT_BASE_URL = "https://api.postmarkapp.com"


class PostmarkEmailSender:
    """
    Implements EmailSender protocol via the Postmark HTTP API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        settings: SettingsStore,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        self._http = http
        self._settings = settings
        self._base_url = base_url.rstrip("/")

    async def send_with_template(self, email: TemplatedEmail) -> UpstreamResponse:
        """
        POST the message and return Postmark's reply whatever its status.

        Raises:
            SettingNotFound: If postmark_server_token is not configured
            UpstreamError: On transport failure or undecodable body
        """
        headers = {
            "Accept": "application/json",
            "X-Postmark-Server-Token": self._settings.get("postmark_server_token"),
        }
        response = await send(
            self._http,
            "POST",
            f"{self._base_url}/email/withTemplate",
            headers=headers,
            json=self.payload(email),
        )
        return to_upstream_response(response)

    @staticmethod
    def payload(email: TemplatedEmail) -> dict:
        """Postmark wire keys for a templated message."""
        return {
            "From": email.sender,
            "Tag": email.tag,
            "To": email.to,
            "TemplateAlias": email.template_alias,
            "TemplateModel": dict(email.template_model),
        }
