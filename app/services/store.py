"""Candidate document store.

``CandidateStore`` is the three-call surface the lifecycle manager depends
on.  ``SupabaseCandidateStore`` implements it over the async Supabase
client; any client failure is re-raised as ``StoreError`` regardless of
cause (network, permissions, malformed rows).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from supabase import AsyncClient

from app.db.supabase import get_supabase
from app.models.candidate import Candidate, CandidateCreate

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Any failure reported by the document store."""


class CandidateStore(Protocol):
    async def list_all(self) -> list[Candidate]: ...

    async def create(self, payload: CandidateCreate) -> str: ...

    async def delete_by_id(self, record_id: str) -> None: ...


def _to_candidate(row: dict[str, Any]) -> Candidate:
    return Candidate.model_validate({**row, "id": str(row["id"])})


class SupabaseCandidateStore:
    """``CandidateStore`` backed by one Supabase table."""

    def __init__(
        self,
        collection: str,
        client_factory: Callable[[], Awaitable[AsyncClient]] | None = None,
    ) -> None:
        self.collection = collection
        self._client_factory = client_factory or get_supabase

    async def list_all(self) -> list[Candidate]:
        """Return every document in the collection, in store order."""
        try:
            client = await self._client_factory()
            result = await client.table(self.collection).select("*").execute()
            return [_to_candidate(row) for row in result.data or []]
        except Exception as exc:
            raise StoreError(f"list {self.collection} failed: {exc}") from exc

    async def create(self, payload: CandidateCreate) -> str:
        """Insert ``payload`` and return the id the store assigned to it."""
        try:
            client = await self._client_factory()
            result = (
                await client.table(self.collection)
                .insert(payload.to_document())
                .execute()
            )
            rows = result.data or []
            if not rows or "id" not in rows[0]:
                raise StoreError(f"insert into {self.collection} returned no id")
            return str(rows[0]["id"])
        except StoreError:
            raise
        except Exception as exc:
            raise StoreError(f"insert into {self.collection} failed: {exc}") from exc

    async def delete_by_id(self, record_id: str) -> None:
        try:
            client = await self._client_factory()
            await client.table(self.collection).delete().eq("id", record_id).execute()
        except Exception as exc:
            raise StoreError(
                f"delete {record_id} from {self.collection} failed: {exc}"
            ) from exc
