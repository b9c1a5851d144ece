"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, plus the small value types that cross them.
Adapters implement these protocols.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class UpstreamResponse:
    """
    A downstream provider's reply, relayed to the caller unmodified.

    Kept framework-free so the domain never depends on the HTTP client.
    """

    status_code: int
    content: bytes = b""
    content_type: str | None = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class MembershipRecord:
    """
    One member entry of a ZeroTier network, as listed by ZeroTier Central.

    Owned by the provider. `name` is not guaranteed unique.
    """

    node_id: str
    name: str | None = None
    authorized: bool = False
    description: str | None = None


@dataclass(frozen=True)
class TemplatedEmail:
    """Templated email message for the transactional-email provider."""

    sender: str
    tag: str
    to: str
    template_alias: str
    template_model: Mapping[str, Any] = field(default_factory=dict)


class SettingsStore(Protocol):
    """Port interface for configuration and secrets lookup."""

    def get(self, key: str) -> str:
        """
        Resolve a configuration value by key.

        Args:
            key: Setting name, e.g. "zerotier_network_id"

        Returns:
            The configured value

        Raises:
            SettingNotFound: If the key is absent or empty
        """
        ...


class NetworkMembership(Protocol):
    """Port interface for the software-defined network membership service."""

    async def list_members(self) -> list[MembershipRecord]:
        """
        List every member of the configured network.

        Raises:
            UpstreamError: On transport failure, non-success status or bad body
        """
        ...

    async def deauthorize_member(self, node_id: str) -> None:
        """
        Soft-remove a member: set authorized to false, record stays listed.

        Raises:
            UpstreamError: On transport failure or non-success status
        """
        ...

    async def remove_member(self, node_id: str) -> None:
        """
        Hard-remove a member record from the network.

        Raises:
            UpstreamError: On transport failure or non-success status
        """
        ...

    async def authorize_member(
        self, address: str, name: str, description: str
    ) -> UpstreamResponse:
        """
        Authorize a member and label it with name and description.

        Returns:
            The provider's response, whatever its status

        Raises:
            UpstreamError: On transport failure or undecodable body
        """
        ...


class EmailSender(Protocol):
    """Port interface for templated email delivery."""

    async def send_with_template(self, email: TemplatedEmail) -> UpstreamResponse:
        """
        Send a templated email.

        Returns:
            The provider's response, whatever its status

        Raises:
            UpstreamError: On transport failure or undecodable body
        """
        ...
