"""Guard against browser address-bar navigation to API routes."""

import logging
from collections.abc import Mapping

from fastapi import Request

logger = logging.getLogger(__name__)


class NavigationBlockedError(Exception):
    """Raised when a GET looks like a full-page browser load."""


def is_browser_navigation(headers: Mapping[str, str]) -> bool:
    """Return True when request headers describe a document navigation."""
    if headers.get("sec-fetch-mode", "").lower() == "navigate":
        return True
    if headers.get("sec-fetch-dest", "").lower() == "document":
        return True
    return _prefers_html(headers.get("accept", ""))


def _prefers_html(accept: str) -> bool:
    accept = accept.lower()
    html_index = accept.find("text/html")
    if html_index == -1:
        return False
    json_index = accept.find("application/json")
    return json_index == -1 or html_index < json_index


async def block_navigation(request: Request) -> None:
    """Stop GET requests coming from a browser tab instead of a fetch call."""
    if request.method != "GET":
        return
    try:
        navigation = is_browser_navigation(request.headers)
    except Exception:
        logger.debug("Navigation check failed", exc_info=True)
        return
    if navigation:
        raise NavigationBlockedError(request.url.path)
