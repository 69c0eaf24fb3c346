"""Tests for alias-based record resolution."""

import pytest

from conviction.errors import DocumentNotFound, NotAuthenticated, UnknownAlias
from conviction.index import INDEX_FAMILY, IndexResolver
from conviction.testing import InMemoryNetwork

ALIASES = {"convictions": "kDefConvictions"}
ALICE = "did:key:alice"
BOB = "did:key:bob"


@pytest.fixture
def alice():
    return InMemoryNetwork(did=ALICE)


class TestIndexGet:
    @pytest.mark.asyncio
    async def test_missing_record_returns_none(self, alice):
        index = IndexResolver(alice, ALIASES)
        assert await index.get("convictions") is None

    @pytest.mark.asyncio
    async def test_read_does_not_write(self, alice):
        index = IndexResolver(alice, ALIASES)
        await index.get("convictions")

        assert alice.writes == []
        assert alice.document_count == 0

    @pytest.mark.asyncio
    async def test_reads_another_identity(self, alice):
        bob = alice.as_identity(BOB)
        await IndexResolver(bob, ALIASES).set("convictions", {"owner": "bob"})

        content = await IndexResolver(alice, ALIASES).get("convictions", BOB)

        assert content == {"owner": "bob"}

    @pytest.mark.asyncio
    async def test_unknown_alias(self, alice):
        with pytest.raises(UnknownAlias) as exc_info:
            await IndexResolver(alice, ALIASES).get("profile")
        assert exc_info.value.alias == "profile"

    @pytest.mark.asyncio
    async def test_requires_identity_without_owner(self):
        index = IndexResolver(InMemoryNetwork(did=None), ALIASES)
        with pytest.raises(NotAuthenticated):
            await index.get("convictions")


class TestIndexSet:
    @pytest.mark.asyncio
    async def test_first_set_creates_and_links_record(self, alice):
        index = IndexResolver(alice, ALIASES)

        record_id = await index.set("convictions", {"n": 1})

        index_doc = await alice.deterministic(ALICE, INDEX_FAMILY)
        assert index_doc.content == {"kDefConvictions": f"ceramic://{record_id}"}
        assert await index.get("convictions") == {"n": 1}

    @pytest.mark.asyncio
    async def test_second_set_updates_same_record(self, alice):
        index = IndexResolver(alice, ALIASES)

        first = await index.set("convictions", {"n": 1})
        second = await index.set("convictions", {"n": 2})

        assert first == second
        assert alice.document_count == 2  # record + index
        assert await index.get("convictions") == {"n": 2}

    @pytest.mark.asyncio
    async def test_set_requires_identity(self):
        index = IndexResolver(InMemoryNetwork(did=None), ALIASES)
        with pytest.raises(NotAuthenticated):
            await index.set("convictions", {})


class TestDanglingRecords:
    """An index entry whose record no longer exists is an error, not a miss."""

    async def _point_at_missing_record(self, network):
        index = await network.deterministic(ALICE, INDEX_FAMILY)
        await network.update(index.id, {"kDefConvictions": "ceramic://kGone"})

    @pytest.mark.asyncio
    async def test_get_raises(self, alice):
        await self._point_at_missing_record(alice)

        with pytest.raises(DocumentNotFound) as exc_info:
            await IndexResolver(alice, ALIASES).get("convictions")

        assert exc_info.value.address == "ceramic://kGone"
        assert exc_info.value.referrer == f"convictions index of {ALICE}"

    @pytest.mark.asyncio
    async def test_set_raises_without_relinking(self, alice):
        await self._point_at_missing_record(alice)
        writes_before = list(alice.writes)

        with pytest.raises(DocumentNotFound):
            await IndexResolver(alice, ALIASES).set("convictions", {"n": 1})

        assert alice.writes == writes_before
