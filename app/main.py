"""FastAPI application entry point.

Configures CORS, structured logging, the lifespan (which builds the
candidate lifecycle manager and loads the stored records once), and router
registration.
"""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import setup_logging
from app.routers import candidates, health, notifications
from app.services.lifecycle import CandidateLifecycleManager
from app.services.notifications import LoggingNotifier
from app.services.store import SupabaseCandidateStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: startup and shutdown hooks.

    Builds the manager, stores it on ``application.state`` for the routers
    and runs the initial load.  A failed load leaves the list empty; the
    application still starts.
    """
    setup_logging()
    logger.info("Application starting up")

    notifier = LoggingNotifier()
    manager = CandidateLifecycleManager(
        store=SupabaseCandidateStore(settings.CANDIDATES_COLLECTION),
        notifier=notifier,
        job_roles=settings.job_roles,
    )
    application.state.notifier = notifier
    application.state.candidates = manager
    await manager.initialize()

    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Interview Candidates API",
    description="Records and lists interview candidates stored in Supabase",
    version="0.1.0",
    lifespan=lifespan,
)

# ---------------------------------------------------------------------------
# CORS Configuration
# ---------------------------------------------------------------------------
_raw_origins = settings.ALLOWED_ORIGINS.strip()
if _raw_origins == "*":
    _allowed_origins: list[str] = ["*"]
else:
    _allowed_origins = [o.strip() for o in _raw_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Router Registration
# ---------------------------------------------------------------------------
app.include_router(health.router, tags=["Health"])
app.include_router(candidates.router, prefix="/api/v1/candidates", tags=["Candidates"])
app.include_router(
    notifications.router, prefix="/api/v1/notifications", tags=["Notifications"]
)
