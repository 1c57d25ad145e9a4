"""Shared-secret token checks for write access."""

import secrets

_BEARER_PREFIX = "Bearer "


def extract_token(authorization: str | None, api_key: str | None) -> str | None:
    """Return the candidate token, preferring the API key header."""
    if api_key:
        return api_key
    if authorization and authorization.startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX) :] or None
    return None


def is_authorized(token: str | None, secret: str | None) -> bool:
    """Return True when a token was supplied and matches the configured secret."""
    if not token or not secret:
        return False
    return secrets.compare_digest(token.encode(), secret.encode())
