"""
Request dependencies: store access and the auth gate.

Both run before the route handler and its body validation.
"""
from fastapi import Request

from .database import ProductStore
from .errors import AuthError
from .logger import get_logger

logger = get_logger("dependencies")


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def authenticate(request: Request) -> None:
    gate = request.app.state.auth_gate
    if not gate(request):
        logger.warning("auth gate denied %s %s", request.method, request.url.path)
        raise AuthError()
