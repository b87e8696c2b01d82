"""Health check endpoint.

Returns service status including database connectivity and the number of
candidates currently held in memory.
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from app.core.config import settings
from app.db.supabase import get_supabase

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> Any:
    """Return health status including a real Supabase connectivity test.

    Returns 200 OK when healthy, 503 when the database is down.
    """
    db_status = "disconnected"

    try:
        client = await get_supabase()
        result = (
            await client.table(settings.CANDIDATES_COLLECTION)
            .select("id")
            .limit(1)
            .execute()
        )
        if result is not None:
            db_status = "connected"
    except Exception:
        logger.warning("Health check: Supabase connection failed", exc_info=True)

    manager = getattr(request.app.state, "candidates", None)
    payload: dict[str, Any] = {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "records": len(manager.records) if manager is not None else 0,
    }

    if db_status != "connected":
        return JSONResponse(status_code=503, content=payload)

    return payload
