"""Request dependencies shared by the API routers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, Request

from natrack.services.auth import extract_token, is_authorized
from natrack.services.errors import AuthError
from natrack.services.sessions import SessionService  # noqa: TC001

if TYPE_CHECKING:
    from natrack.containers import AppContainer


def _get_edit_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.edit_token


def get_session_service(request: Request) -> SessionService:
    """Return the session service from the app container."""
    container: AppContainer = request.app.state.container
    return container.session_service


async def require_edit_auth(
    authorization: str | None = Header(default=None),
    x_api_key: str | None = Header(default=None),
    edit_token: str = Depends(_get_edit_token),
) -> None:
    """Ensure write requests carry the configured edit token."""
    token = extract_token(authorization, x_api_key)
    if not is_authorized(token, edit_token):
        raise AuthError
