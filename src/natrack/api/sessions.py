"""Session CRUD endpoints with token-gated writes."""

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from natrack.api.dependencies import get_session_service, require_edit_auth
from natrack.api.models import SessionCreate, SessionUpdate
from natrack.api.navigation import block_navigation
from natrack.services.errors import ServiceError
from natrack.services.sessions import SessionService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sessions"], dependencies=[Depends(block_navigation)])


@router.get("/auth/check", dependencies=[Depends(require_edit_auth)])
async def auth_check() -> dict[str, bool]:
    """Let the frontend verify its edit token."""
    return {"ok": True}


@router.get("/sessions", response_model=None)
async def list_sessions(
    session_type: str | None = Query(default=None, alias="type"),
    service: SessionService = Depends(get_session_service),
) -> list[dict[str, object]] | JSONResponse:
    """Return all sessions ordered by date, optionally filtered by type."""
    try:
        records = await service.list_sessions(session_type)
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Failed to list sessions")
        return _server_error(exc)
    return [record.to_dict() for record in records]


@router.post(
    "/sessions",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_edit_auth)],
    response_model=None,
)
async def create_session(
    payload: SessionCreate,
    service: SessionService = Depends(get_session_service),
) -> dict[str, object] | JSONResponse:
    """Create a session."""
    try:
        record = await service.create_session(
            date=payload.date,
            distance=payload.distance,
            session_type=payload.type,
            session_id=payload.id,
        )
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Failed to create session")
        return _server_error(exc)
    return record.to_dict()


@router.put(
    "/sessions/{session_id}",
    dependencies=[Depends(require_edit_auth)],
    response_model=None,
)
async def update_session(
    session_id: str,
    payload: SessionUpdate,
    service: SessionService = Depends(get_session_service),
) -> dict[str, object] | JSONResponse:
    """Update any subset of date, distance and type."""
    try:
        record = await service.update_session(
            session_id,
            date=payload.date,
            distance=payload.distance,
            session_type=payload.type,
        )
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Failed to update session", extra={"session_id": session_id})
        return _server_error(exc)
    return record.to_dict()


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_edit_auth)],
    response_class=Response,
)
async def delete_session(
    session_id: str,
    service: SessionService = Depends(get_session_service),
) -> Response:
    """Delete a session."""
    try:
        await service.delete_session(session_id)
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Failed to delete session", extra={"session_id": session_id})
        return _server_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _server_error(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )
