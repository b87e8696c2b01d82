"""Candidate record lifecycle.

``CandidateLifecycleManager`` owns the local list of candidates and keeps it
in step with the store after every operation it performs:

- ``initialize``: replace the list with everything the store holds.
- ``submit``: validate, insert, append.
- ``delete``: confirm, delete remotely, remove locally.

Store failures never escape: they are logged, notified and returned as an
error result, and the list keeps its previous contents.  Changes made by
other clients are not picked up until the next ``initialize``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from app.core.constants import (
    ADD_FAILED_MESSAGE,
    CANDIDATE_ADDED_MESSAGE,
    CANDIDATE_DELETED_MESSAGE,
    DELETE_FAILED_MESSAGE,
    LOAD_FAILED_MESSAGE,
)
from app.models.candidate import Candidate, CandidateRow
from app.models.results import (
    DeleteDeclined,
    DeleteFailure,
    DeleteResult,
    DeleteSuccess,
    InitializeFailure,
    InitializeResult,
    InitializeSuccess,
    SubmitError,
    SubmitFailure,
    SubmitResult,
    SubmitSuccess,
    ValidationFailure,
)
from app.services.notifications import Notifier
from app.services.store import CandidateStore, StoreError
from app.services.validation import validate_candidate

logger = logging.getLogger(__name__)

Confirm = Callable[[str], Awaitable[bool]]


class CandidateLifecycleManager:
    """Mediates between the validator, the store and the local record list."""

    def __init__(
        self,
        store: CandidateStore,
        notifier: Notifier,
        job_roles: Iterable[str] | None = None,
        on_reset: Callable[[], None] | None = None,
    ) -> None:
        self._store = store
        self._notifier = notifier
        self._job_roles = tuple(job_roles) if job_roles is not None else None
        self._on_reset = on_reset
        self._records: list[Candidate] = []

    @property
    def records(self) -> tuple[Candidate, ...]:
        """Current records in insertion order (read-only view)."""
        return tuple(self._records)

    def rows(self) -> list[CandidateRow]:
        """Table projection of ``records`` with 1-based serial numbers."""
        return [
            CandidateRow(
                serial=index,
                id=record.id,
                full_name=record.full_name,
                job_role=record.job_role,
                email=record.email,
                qualification=record.qualification,
            )
            for index, record in enumerate(self._records, start=1)
        ]

    async def initialize(self) -> InitializeResult:
        """Load every stored candidate, replacing the local list."""
        try:
            fetched = await self._store.list_all()
        except StoreError as exc:
            logger.error("candidates_load_failed", extra={"error_message": str(exc)})
            self._notifier.error(LOAD_FAILED_MESSAGE)
            return InitializeFailure(error=str(exc))

        self._records = list(fetched)
        if not self._records:
            logger.info("candidates_load_empty")
        else:
            logger.info("candidates_loaded", extra={"count": len(self._records)})
        return InitializeSuccess(count=len(self._records))

    async def submit(self, raw: Mapping[str, Any]) -> SubmitResult:
        """Validate and persist one form submission.

        Invalid input returns ``SubmitFailure`` without touching the store.
        On a successful insert the record is appended and the reset hook
        fires; on a store failure the input is left in place for a retry.
        """
        validation = validate_candidate(raw, self._job_roles)
        if isinstance(validation, ValidationFailure):
            logger.debug(
                "candidate_rejected",
                extra={"fields": sorted(validation.field_errors)},
            )
            return SubmitFailure(field_errors=validation.field_errors)

        try:
            record_id = await self._store.create(validation.record)
        except StoreError as exc:
            logger.error("candidate_create_failed", extra={"error_message": str(exc)})
            self._notifier.error(ADD_FAILED_MESSAGE)
            return SubmitError(error=str(exc))

        record = Candidate.from_create(record_id, validation.record)
        self._records.append(record)
        logger.info("candidate_created", extra={"candidate_id": record_id})
        self._notifier.success(CANDIDATE_ADDED_MESSAGE)
        if self._on_reset is not None:
            self._on_reset()
        return SubmitSuccess(record=record)

    async def delete(self, record_id: str, confirm: Confirm) -> DeleteResult:
        """Delete ``record_id`` once ``confirm`` agrees.

        A declined confirmation is a silent no-op.
        """
        if not await confirm(record_id):
            return DeleteDeclined()

        try:
            await self._store.delete_by_id(record_id)
        except StoreError as exc:
            logger.error(
                "candidate_delete_failed",
                extra={"candidate_id": record_id, "error_message": str(exc)},
            )
            self._notifier.error(DELETE_FAILED_MESSAGE)
            return DeleteFailure(error=str(exc))

        self._records = [r for r in self._records if r.id != record_id]
        logger.info("candidate_deleted", extra={"candidate_id": record_id})
        self._notifier.success(CANDIDATE_DELETED_MESSAGE)
        return DeleteSuccess(id=record_id)
