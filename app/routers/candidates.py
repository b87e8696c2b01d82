"""Candidate endpoints.

GET    /           -- current records (camelCase documents with ``id``).
GET    /table      -- table rows with serial numbers.
GET    /job-roles  -- job roles offered by the form.
POST   /           -- validate and add a candidate (201, 422 on field errors).
DELETE /{id}       -- delete a candidate; requires ``?confirm=true``.

Store failures surface as ``502 Bad Gateway``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request
from starlette.responses import JSONResponse

from app.core.config import settings
from app.models.results import (
    DeleteDeclined,
    DeleteFailure,
    SubmitError,
    SubmitFailure,
)
from app.services.lifecycle import CandidateLifecycleManager

logger = logging.getLogger(__name__)

router = APIRouter()


def get_manager(request: Request) -> CandidateLifecycleManager:
    """Return the manager built by the application lifespan."""
    return request.app.state.candidates


@router.get("")
async def list_candidates(
    manager: CandidateLifecycleManager = Depends(get_manager),
) -> list[dict[str, Any]]:
    return [record.model_dump(by_alias=True) for record in manager.records]


@router.get("/table")
async def candidate_table(
    manager: CandidateLifecycleManager = Depends(get_manager),
) -> list[dict[str, Any]]:
    return [row.model_dump(by_alias=True) for row in manager.rows()]


@router.get("/job-roles")
async def job_roles() -> list[str]:
    return list(settings.job_roles)


@router.post("", status_code=201)
async def submit_candidate(
    payload: dict[str, Any] = Body(...),
    manager: CandidateLifecycleManager = Depends(get_manager),
) -> Any:
    """Validate ``payload`` and add it to the store.

    Field errors are returned as ``422`` with a ``field_errors`` mapping,
    keyed by the submitted field names.
    """
    result = await manager.submit(payload)

    if isinstance(result, SubmitFailure):
        return JSONResponse(status_code=422, content={"field_errors": result.field_errors})
    if isinstance(result, SubmitError):
        raise HTTPException(status_code=502, detail=f"Failed to add candidate: {result.error}")

    return result.record.model_dump(by_alias=True)


@router.delete("/{record_id}")
async def delete_candidate(
    record_id: str,
    confirm: bool = Query(False, description="Confirm the deletion"),
    manager: CandidateLifecycleManager = Depends(get_manager),
) -> dict[str, Any]:
    """Delete a candidate.  Without ``confirm=true`` nothing happens."""

    async def _confirmed(_: str) -> bool:
        return confirm

    result = await manager.delete(record_id, _confirmed)

    if isinstance(result, DeleteDeclined):
        return {"id": record_id, "status": result.status}
    if isinstance(result, DeleteFailure):
        raise HTTPException(status_code=502, detail=f"Failed to delete candidate: {result.error}")

    return {"id": result.id, "status": "deleted"}
