"""
Member re-registration domain service.

Before a device is authorized on the network, every other member record
carrying the same name (the device's holochain agent id) is cleaned up,
so at most one record per name stays authorized.

Re-registration sequence
========================

1. List all members of the network.
2. Keep records whose name equals the new registrant's name
   (exact, case-sensitive, every match).
3. Clean up each match concurrently and wait for the whole batch.
4. Authorize the new member and return the provider's response.

Steps 1 and 3 are best effort: failures are logged and collected in the
result, then step 4 runs regardless. Step 4 is not guarded, so its
transport errors reach the caller and its non-success responses are
returned as-is.

Note: Nothing here serializes concurrent registrations for the same name.
Two overlapping calls can both see the same stale set and both authorize;
the provider decides the final state.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import UpstreamError
from .ports import MembershipRecord, NetworkMembership, UpstreamResponse

logger = logging.getLogger(__name__)


class CleanupMode(str, Enum):
    """How stale member records are cleaned up."""

    DEAUTHORIZE = "deauthorize"
    DELETE = "delete"


@dataclass(frozen=True)
class CleanupFailure:
    """
    A cleanup step that failed.

    node_id is None when listing the members failed.
    """

    node_id: str | None
    error: str


@dataclass
class RegistrationResult:
    """Outcome of one registration attempt."""

    response: UpstreamResponse
    cleaned: list[str] = field(default_factory=list)
    failures: list[CleanupFailure] = field(default_factory=list)


@dataclass
class MemberRegistrar:
    """
    Domain service for (re-)registering network members.

    Orchestrates stale-entry cleanup followed by authorization
    of the new member.
    """

    network: NetworkMembership
    cleanup_mode: CleanupMode = CleanupMode.DEAUTHORIZE

    async def register(self, address: str, name: str, description: str) -> RegistrationResult:
        """
        Replace any stale registration for name, then authorize address.

        Args:
            address: Network address of the new member
            name: Member label, matched exactly against existing records
            description: Free text stored on the member

        Returns:
            RegistrationResult holding the unmodified authorization response
            and the cleanup diagnostics

        Raises:
            UpstreamError: If the authorization call fails or its reply is unreadable
        """
        cleaned, failures = await self._clear_stale_entries(name)

        logger.info("Authorizing member %s as %s", address, name)
        response = await self.network.authorize_member(address, name, description)
        logger.info("Authorization of %s answered %s", address, response.status_code)

        return RegistrationResult(response=response, cleaned=cleaned, failures=failures)

    async def _clear_stale_entries(self, name: str) -> tuple[list[str], list[CleanupFailure]]:
        logger.info("Fetching all members with name %s", name)
        try:
            members = await self.network.list_members()
        except UpstreamError as exc:
            logger.error("Unable to list members: %s", exc)
            return [], [CleanupFailure(node_id=None, error=str(exc))]

        logger.info("Total number of members: %d", len(members))
        stale = self._matching(members, name)
        logger.info("Stale members: %s", [m.node_id for m in stale])

        cleanup = self._cleanup_call()
        outcomes = await asyncio.gather(
            *(self._clean_one(cleanup, member.node_id) for member in stale)
        )

        cleaned: list[str] = []
        failures: list[CleanupFailure] = []
        for member, failure in zip(stale, outcomes, strict=True):
            if failure is None:
                cleaned.append(member.node_id)
            else:
                failures.append(failure)

        logger.info("Clean up completed: %d cleaned, %d failed", len(cleaned), len(failures))
        return cleaned, failures

    async def _clean_one(
        self, cleanup: Callable[[str], Awaitable[None]], node_id: str
    ) -> CleanupFailure | None:
        logger.info("Cleaning up member %s (%s)", node_id, self.cleanup_mode.value)
        try:
            await cleanup(node_id)
        except UpstreamError as exc:
            logger.error("Unable to clean up member %s: %s", node_id, exc)
            return CleanupFailure(node_id=node_id, error=str(exc))
        logger.info("Cleaned up member %s", node_id)
        return None

    def _cleanup_call(self) -> Callable[[str], Awaitable[None]]:
        if self.cleanup_mode is CleanupMode.DELETE:
            return self.network.remove_member
        return self.network.deauthorize_member

    @staticmethod
    def _matching(members: list[MembershipRecord], name: str) -> list[MembershipRecord]:
        return [member for member in members if member.name == name]
