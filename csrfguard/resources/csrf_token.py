"""
CSRF token endpoint - clients GET this to retrieve their token.

The resource base class is supplied by the integration layer, so the
endpoint fits any host that dispatches a ``get(target, request)`` call.

Client fetches: GET /CsrfToken
Response: {"token": "abc123..."}
"""

import types
from typing import Any, Dict, Type

from fastapi import APIRouter, Request
from pydantic import BaseModel

from csrfguard.core.security.token_store import get_csrf_token
from csrfguard.models.request import CsrfRequest


class CsrfTokenResponse(BaseModel):
    token: str


def make_csrf_token_resource(base: Type = object, name: str = "CsrfToken") -> Type:
    """
    Build the token endpoint class over a host-supplied base.

    Args:
        base: Resource base class from the host framework
        name: Class name, which hosts commonly use as the route name

    Returns:
        A subclass of ``base`` exposing ``get(target, request)``
    """

    def get(self, target: Any, request: Any) -> Dict[str, str]:
        return {"token": get_csrf_token(request)}

    def body(namespace: Dict[str, Any]) -> None:
        namespace.update({
            "__doc__": "Collection-level endpoint returning the session's CSRF token",
            "__module__": __name__,
            "load_as_instance": False,
            "get": get,
        })

    # Goes through the host metaclass, including __prepare__ and __init_subclass__
    return types.new_class(name, (base,), exec_body=body)


CsrfToken = make_csrf_token_resource()


def request_context(request: Request) -> CsrfRequest:
    """Adapt a Starlette request; the session is None without SessionMiddleware"""
    session = request.session if "session" in request.scope else None
    return CsrfRequest(session=session, headers=request.headers)


def create_csrf_router(path: str = "/CsrfToken", resource: Any = None) -> APIRouter:
    """Expose the token endpoint as a FastAPI GET route"""
    router = APIRouter(tags=["csrf"])
    endpoint = resource if resource is not None else CsrfToken()

    @router.get(path, response_model=CsrfTokenResponse)
    async def csrf_token(request: Request) -> CsrfTokenResponse:
        return CsrfTokenResponse(**endpoint.get(None, request_context(request)))

    return router
