"""
ZeroTier Central adapter - Implements NetworkMembership protocol.

Talks to the ZeroTier Central REST API:
- GET    {base}/network/{network_id}/member            list members
- POST   {base}/network/{network_id}/member/{node_id}  update a member
- DELETE {base}/network/{network_id}/member/{node_id}  remove a member

The API token and network id are read from the settings store on every
call, so rotated credentials apply without a restart.
"""

import logging

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.adapters.http import ensure_success, send, to_upstream_response
from src.domain.exceptions import MalformedUpstreamResponse
from src.domain.ports import MembershipRecord, SettingsStore, UpstreamResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://my.zerotier.com/api"


class _MemberConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    authorized: bool = False


class _MemberPayload(BaseModel):
    """Wire shape of one entry in the member listing."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    node_id: str = Field(alias="nodeId")
    name: str | None = None
    description: str | None = None
    config: _MemberConfig = Field(default_factory=_MemberConfig)

    def to_record(self) -> MembershipRecord:
        return MembershipRecord(
            node_id=self.node_id,
            name=self.name,
            authorized=self.config.authorized,
            description=self.description,
        )


class ZeroTierCentralClient:
    """
    Implements NetworkMembership protocol against ZeroTier Central.

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

    async def list_members(self) -> list[MembershipRecord]:
        response = ensure_success(
            await send(self._http, "GET", self._members_url(), headers=self._headers())
        )
        try:
            payload = response.json()
        except ValueError as exc:
            raise MalformedUpstreamResponse(f"Member list is not JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise MalformedUpstreamResponse("Member list is not a JSON array")

        members: list[MembershipRecord] = []
        for item in payload:
            try:
                members.append(_MemberPayload.model_validate(item).to_record())
            except ValidationError as exc:
                logger.warning("Skipping unreadable member entry %r: %s", item, exc)
        return members

    async def deauthorize_member(self, node_id: str) -> None:
        response = await send(
            self._http,
            "POST",
            self._member_url(node_id),
            headers=self._headers(),
            json={"config": {"authorized": False}},
        )
        ensure_success(response)
        logger.debug("Deauthorized %s: %s", node_id, response.status_code)

    async def remove_member(self, node_id: str) -> None:
        response = await send(
            self._http, "DELETE", self._member_url(node_id), headers=self._headers()
        )
        ensure_success(response)
        logger.debug("Removed %s: %s", node_id, response.status_code)

    async def authorize_member(
        self, address: str, name: str, description: str
    ) -> UpstreamResponse:
        response = await send(
            self._http,
            "POST",
            self._member_url(address),
            headers=self._headers(),
            json={
                "config": {"authorized": True},
                "description": description,
                "name": name,
            },
        )
        return to_upstream_response(response)

    def _headers(self) -> dict[str, str]:
        token = self._settings.get("zerotier_central_api_token")
        return {"Authorization": f"Bearer {token}"}

    def _members_url(self) -> str:
        network_id = self._settings.get("zerotier_network_id")
        return f"{self._base_url}/network/{network_id}/member"

    def _member_url(self, node_id: str) -> str:
        return f"{self._members_url()}/{node_id}"
