"""Health check endpoint."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from natrack.api.dependencies import get_session_service
from natrack.services.sessions import SessionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(
    service: SessionService = Depends(get_session_service),
) -> JSONResponse:
    """Check that the app is up and the database answers."""
    try:
        db_ok = await service.check_database()
    except Exception as exc:
        logger.exception("Health check failed")
        return JSONResponse(status_code=500, content={"ok": False, "error": str(exc)})
    return JSONResponse({"ok": True, "db": db_ok})
