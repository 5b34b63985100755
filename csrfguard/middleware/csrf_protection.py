"""
CSRF protection for resource handlers.

Wraps a handler exposing any of ``create``, ``replace`` and ``remove`` so
that each call validates the request before delegating.
"""

import inspect
import logging
from typing import Any

from csrfguard.core.security.validator import validate_csrf

logger = logging.getLogger(__name__)


async def _delegate(handler: Any, operation: str, *args: Any) -> Any:
    method = getattr(handler, operation, None)
    if method is None:
        logger.debug(f"{type(handler).__name__} has no '{operation}', nothing to delegate")
        return None
    result = method(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class CsrfProtectedHandler:
    """
    Composition wrapper enforcing CSRF validation on state-changing operations.

    Validation errors propagate unchanged to the caller. Attributes other
    than the three protected operations are forwarded to the wrapped handler.
    """

    def __init__(self, handler: Any):
        self._handler = handler

    @property
    def wrapped(self) -> Any:
        return self._handler

    async def create(self, target: Any, data: Any = None, request: Any = None) -> Any:
        validate_csrf(request, data)
        return await _delegate(self._handler, "create", target, data, request)

    async def replace(self, target: Any, data: Any = None, request: Any = None) -> Any:
        validate_csrf(request, data)
        return await _delegate(self._handler, "replace", target, data, request)

    async def remove(self, target: Any, data: Any = None, request: Any = None) -> Any:
        # Removals carry no payload, so only the header path applies
        validate_csrf(request)
        return await _delegate(self._handler, "remove", target, data, request)

    def __getattr__(self, name: str) -> Any:
        if name == "_handler":
            raise AttributeError(name)
        return getattr(self._handler, name)

    def __repr__(self) -> str:
        return f"CsrfProtectedHandler({self._handler!r})"


def with_csrf_protection(handler: Any) -> CsrfProtectedHandler:
    """Return ``handler`` wrapped with CSRF validation"""
    if isinstance(handler, CsrfProtectedHandler):
        return handler
    return CsrfProtectedHandler(handler)
