"""Shared test fixtures.

Provides an in-memory candidate store, a lifecycle manager wired to it, a
valid form payload, and a FastAPI ``test_client`` whose lifespan uses the
in-memory store instead of Supabase.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch

os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.models.candidate import Candidate, CandidateCreate  # noqa: E402
from app.services.lifecycle import CandidateLifecycleManager  # noqa: E402
from app.services.notifications import LoggingNotifier  # noqa: E402
from app.services.store import StoreError  # noqa: E402


class InMemoryStore:
    """``CandidateStore`` keeping documents in a dict, with failure switches."""

    def __init__(self, ids: list[str] | None = None) -> None:
        self.documents: dict[str, dict[str, str]] = {}
        self.calls: list[str] = []
        self.fail_list = False
        self.fail_create = False
        self.fail_delete = False
        self._ids = list(ids or [])
        self._counter = 0

    def seed(self, record_id: str, **fields: str) -> None:
        self.documents[record_id] = fields

    async def list_all(self) -> list[Candidate]:
        self.calls.append("list_all")
        if self.fail_list:
            raise StoreError("network unreachable")
        return [Candidate(id=rid, **doc) for rid, doc in self.documents.items()]

    async def create(self, payload: CandidateCreate) -> str:
        self.calls.append("create")
        if self.fail_create:
            raise StoreError("permission denied")
        if self._ids:
            record_id = self._ids.pop(0)
        else:
            self._counter += 1
            record_id = f"doc-{self._counter}"
        self.documents[record_id] = payload.model_dump()
        return record_id

    async def delete_by_id(self, record_id: str) -> None:
        self.calls.append("delete_by_id")
        if self.fail_delete:
            raise StoreError("network unreachable")
        self.documents.pop(record_id, None)


@pytest.fixture()
def valid_payload() -> dict[str, Any]:
    """A submission that satisfies every field constraint."""
    return {
        "jobRole": "Engineer",
        "fullName": "Ada Lovelace",
        "email": "ada@x.com",
        "address": "123 Main Street",
        "qualification": "BSc",
        "comments": "Strong background in analytical engines and numerics.",
    }


@pytest.fixture()
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def notifier() -> LoggingNotifier:
    return LoggingNotifier()


@pytest.fixture()
def reset_hook() -> MagicMock:
    return MagicMock()


@pytest.fixture()
def manager(
    store: InMemoryStore, notifier: LoggingNotifier, reset_hook: MagicMock
) -> CandidateLifecycleManager:
    return CandidateLifecycleManager(
        store=store,
        notifier=notifier,
        job_roles=["Engineer", "Data Scientist"],
        on_reset=reset_hook,
    )


@pytest.fixture()
def test_client(store: InMemoryStore) -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient backed by the in-memory store."""
    from app.main import app

    with patch("app.main.SupabaseCandidateStore", return_value=store):
        with TestClient(app) as client:
            yield client


@pytest.fixture()
def make_store() -> type[InMemoryStore]:
    """Return the in-memory store class, for tests that need preset ids."""
    return InMemoryStore
