"""
Auth gates for mutating endpoints.

A gate is any callable taking the incoming request and returning True to
allow it. Handlers never see the gate; it runs as a route dependency.
"""
import hmac
from typing import Callable

from fastapi import Request

from .config import Settings

AuthGate = Callable[[Request], bool]

API_KEY_HEADER = "X-API-Key"


def allow_all(request: Request) -> bool:
    """Stub gate: every request is allowed."""
    return True


def api_key_gate(expected_key: str, header: str = API_KEY_HEADER) -> AuthGate:
    """Gate that requires `header` to carry `expected_key`."""

    def require_api_key(request: Request) -> bool:
        provided = request.headers.get(header)
        if not provided:
            return False
        return hmac.compare_digest(provided.encode(), expected_key.encode())

    return require_api_key


def gate_from_settings(settings: Settings) -> AuthGate:
    if settings.require_api_key and settings.api_key:
        return api_key_gate(settings.api_key)
    return allow_all
