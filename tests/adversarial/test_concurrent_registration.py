"""
Adversarial tests for overlapping registrations.

Nothing serializes registrations for the same name, so these tests pin
down what does and does not hold when several run at once:
- every registration still authorizes its own address
- every registration cleans up the stale set it observed
- no registration fails because another one touched the same records
"""

import asyncio

import pytest
from fakes import FakeNetwork, member

from src.domain.ports import MembershipRecord
from src.domain.registration import MemberRegistrar

# Apply adversarial marker to all tests in this module
pytestmark = pytest.mark.adversarial


class StatefulNetwork(FakeNetwork):
    """FakeNetwork whose cleanup and authorization mutate the member table."""

    def __init__(self, members: list[MembershipRecord]) -> None:
        super().__init__(members=members)
        self.table = {m.node_id: m for m in members}

    async def list_members(self) -> list[MembershipRecord]:
        self.calls.append(("list",))
        await asyncio.sleep(0)
        return list(self.table.values())

    async def deauthorize_member(self, node_id: str) -> None:
        await super().deauthorize_member(node_id)
        await asyncio.sleep(0)
        record = self.table[node_id]
        self.table[node_id] = MembershipRecord(node_id, record.name, False, record.description)

    async def authorize_member(self, address, name, description):
        response = await super().authorize_member(address, name, description)
        self.table[address] = MembershipRecord(address, name, True, description)
        return response

    def authorized(self, name: str) -> list[str]:
        return sorted(m.node_id for m in self.table.values() if m.name == name and m.authorized)


class TestOverlappingRegistrations:
    """Several registrations for the same name running together."""

    def test_concurrent_registrations_all_authorize(self) -> None:
        """Each overlapping registration authorizes its own address."""
        network = StatefulNetwork([member("stale", "hp1")])
        registrar = MemberRegistrar(network=network)

        async def race() -> list:
            return await asyncio.gather(
                *(registrar.register(f"addr{i}", "hp1", "desc") for i in range(5))
            )

        results = asyncio.run(race())

        assert all(r.response.is_success for r in results)
        assert sorted(c[1] for c in network.authorize_calls()) == [f"addr{i}" for i in range(5)]

    def test_concurrent_registrations_may_leave_duplicates(self) -> None:
        """Racing registrations can leave several records authorized under one name."""
        network = StatefulNetwork([member("stale", "hp1")])
        registrar = MemberRegistrar(network=network)

        async def race() -> None:
            await asyncio.gather(
                registrar.register("addr1", "hp1", "desc"),
                registrar.register("addr2", "hp1", "desc"),
            )

        asyncio.run(race())

        assert "stale" not in network.authorized("hp1")
        assert network.authorized("hp1") == ["addr1", "addr2"]

    def test_sequential_registrations_leave_one_authorized(self) -> None:
        """Without overlap, only the latest registration stays authorized."""
        network = StatefulNetwork([member("stale", "hp1")])
        registrar = MemberRegistrar(network=network)

        for i in range(3):
            asyncio.run(registrar.register(f"addr{i}", "hp1", "desc"))

        assert network.authorized("hp1") == ["addr2"]

    def test_shared_stale_set_cleaned_by_each(self) -> None:
        """Overlapping registrations each clean the stale set they listed."""
        network = StatefulNetwork([member("a", "hp1"), member("b", "hp1")])
        registrar = MemberRegistrar(network=network)

        async def race() -> list:
            return await asyncio.gather(
                registrar.register("addr1", "hp1", "desc"),
                registrar.register("addr2", "hp1", "desc"),
            )

        results = asyncio.run(race())

        for result in results:
            assert result.failures == []
            assert {"a", "b"} <= set(result.cleaned)
        assert network.authorized("hp1") == ["addr1", "addr2"]
