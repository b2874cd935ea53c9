"""
storefront/repositories/store.py - Async document store contract and its Firestore adapter.

Every document is a plain dict; the document id travels under the "id" key.
Driver failures are re-raised as `StoreError` so callers never depend on
google-cloud exception types.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from google.api_core.exceptions import GoogleAPIError
from google.cloud.firestore_v1 import FieldFilter

logger = logging.getLogger("storefront.store")

Document = Dict[str, Any]


class StoreError(Exception):
    """Raised when the underlying document database fails."""


class DocumentStore(Protocol):
    async def find_by_id(self, collection: str, doc_id: str) -> Optional[Document]: ...

    async def find_one(self, collection: str, field: str, value: Any) -> Optional[Document]: ...

    async def find_all(self, collection: str) -> List[Document]: ...

    async def create(self, collection: str, doc: Document) -> Document: ...

    async def save(self, collection: str, doc: Document) -> Document: ...

    async def save_all(self, writes: Iterable[Tuple[str, Document]]) -> None:
        """Persist several documents atomically: all of them or none."""
        ...


def _body(doc: Document) -> Document:
    return {k: v for k, v in doc.items() if k != "id"}


class FirestoreDocumentStore:
    """`DocumentStore` over `google.cloud.firestore.AsyncClient`."""

    def __init__(self, client, prefix: str = ""):
        self._db = client
        self._prefix = prefix

    def _col(self, name: str):
        return self._db.collection(f"{self._prefix}{name}" if self._prefix else name)

    @staticmethod
    def _to_doc(snap) -> Document:
        data = snap.to_dict() or {}
        data["id"] = snap.id
        return data

    async def find_by_id(self, collection: str, doc_id: str) -> Optional[Document]:
        if not doc_id:
            return None
        try:
            snap = await self._col(collection).document(doc_id).get()
        except GoogleAPIError as exc:
            raise StoreError(f"read {collection}/{doc_id} failed: {exc}") from exc
        return self._to_doc(snap) if snap.exists else None

    async def find_one(self, collection: str, field: str, value: Any) -> Optional[Document]:
        q = self._col(collection).where(filter=FieldFilter(field, "==", value)).limit(1)
        try:
            async for snap in q.stream():
                return self._to_doc(snap)
        except GoogleAPIError as exc:
            raise StoreError(f"query {collection}.{field} failed: {exc}") from exc
        return None

    async def find_all(self, collection: str) -> List[Document]:
        try:
            return [self._to_doc(snap) async for snap in self._col(collection).stream()]
        except GoogleAPIError as exc:
            raise StoreError(f"list {collection} failed: {exc}") from exc

    async def create(self, collection: str, doc: Document) -> Document:
        ref = self._col(collection).document(doc["id"]) if doc.get("id") else self._col(collection).document()
        try:
            await ref.create(_body(doc))
        except GoogleAPIError as exc:
            raise StoreError(f"create in {collection} failed: {exc}") from exc
        logger.debug("Created %s/%s", collection, ref.id)
        return {**_body(doc), "id": ref.id}

    async def save(self, collection: str, doc: Document) -> Document:
        try:
            await self._col(collection).document(doc["id"]).set(_body(doc))
        except GoogleAPIError as exc:
            raise StoreError(f"save {collection}/{doc['id']} failed: {exc}") from exc
        return doc

    async def save_all(self, writes: Iterable[Tuple[str, Document]]) -> None:
        # A write batch commits every set() or none of them
        batch = self._db.batch()
        for collection, doc in writes:
            batch.set(self._col(collection).document(doc["id"]), _body(doc))
        try:
            await batch.commit()
        except GoogleAPIError as exc:
            raise StoreError(f"batch commit failed: {exc}") from exc
