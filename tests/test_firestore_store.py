"""
FirestoreDocumentStore against a mocked AsyncClient.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from google.api_core.exceptions import ServiceUnavailable

from storefront.repositories.store import FirestoreDocumentStore, StoreError


def snapshot(doc_id, data, exists=True):
    snap = MagicMock()
    snap.id = doc_id
    snap.exists = exists
    snap.to_dict.return_value = dict(data) if data is not None else None
    return snap


def stream_of(*snaps):
    async def _stream():
        for s in snaps:
            yield s
    return _stream


@pytest.fixture
def client():
    return MagicMock()


class TestReads:
    @pytest.mark.asyncio
    async def test_find_by_id_adds_id(self, client):
        ref = client.collection.return_value.document.return_value
        ref.get = AsyncMock(return_value=snapshot("u1", {"email": "a@example.com"}))

        doc = await FirestoreDocumentStore(client).find_by_id("users", "u1")

        assert doc == {"email": "a@example.com", "id": "u1"}
        client.collection.assert_called_with("users")

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, client):
        ref = client.collection.return_value.document.return_value
        ref.get = AsyncMock(return_value=snapshot("u1", None, exists=False))

        assert await FirestoreDocumentStore(client).find_by_id("users", "u1") is None

    @pytest.mark.asyncio
    async def test_find_one_first_match(self, client):
        query = client.collection.return_value.where.return_value.limit.return_value
        query.stream = stream_of(snapshot("c1", {"email": "a@example.com", "cart_items": []}))

        doc = await FirestoreDocumentStore(client, prefix="test_").find_one("carts", "email", "a@example.com")

        assert doc["id"] == "c1"
        client.collection.assert_called_with("test_carts")

    @pytest.mark.asyncio
    async def test_find_one_no_match(self, client):
        client.collection.return_value.where.return_value.limit.return_value.stream = stream_of()

        assert await FirestoreDocumentStore(client).find_one("carts", "email", "x@example.com") is None

    @pytest.mark.asyncio
    async def test_driver_error_becomes_store_error(self, client):
        ref = client.collection.return_value.document.return_value
        ref.get = AsyncMock(side_effect=ServiceUnavailable("down"))

        with pytest.raises(StoreError):
            await FirestoreDocumentStore(client).find_by_id("users", "u1")


class TestWrites:
    @pytest.mark.asyncio
    async def test_save_strips_id(self, client):
        ref = client.collection.return_value.document.return_value
        ref.set = AsyncMock()

        await FirestoreDocumentStore(client).save("carts", {"id": "c1", "email": "a@example.com"})

        client.collection.return_value.document.assert_called_with("c1")
        ref.set.assert_awaited_once_with({"email": "a@example.com"})

    @pytest.mark.asyncio
    async def test_create_returns_generated_id(self, client):
        ref = client.collection.return_value.document.return_value
        ref.id = "generated"
        ref.create = AsyncMock()

        doc = await FirestoreDocumentStore(client).create("carts", {"email": "a@example.com"})

        assert doc == {"email": "a@example.com", "id": "generated"}

    @pytest.mark.asyncio
    async def test_save_all_commits_one_batch(self, client):
        batch = client.batch.return_value
        batch.commit = AsyncMock()

        await FirestoreDocumentStore(client).save_all([
            ("users", {"id": "u1", "wallet_money": 75}),
            ("carts", {"id": "c1", "cart_items": []}),
        ])

        assert batch.set.call_count == 2
        batch.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_commit(self, client):
        client.batch.return_value.commit = AsyncMock(side_effect=ServiceUnavailable("down"))

        with pytest.raises(StoreError):
            await FirestoreDocumentStore(client).save_all([("users", {"id": "u1"})])
