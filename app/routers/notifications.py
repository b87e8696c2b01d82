"""Recent user-visible notifications (successes and store errors)."""

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("")
async def recent_notifications(request: Request) -> list[dict[str, Any]]:
    """Return the most recent notifications, oldest first."""
    return [n.model_dump() for n in request.app.state.notifier.recent]
