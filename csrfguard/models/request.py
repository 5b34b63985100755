# csrfguard/models/request.py

from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping, Optional


@dataclass
class CsrfRequest:
    """
    The parts of an incoming request the CSRF core reads.

    The session is owned by the host's session machinery; only a
    reference is held for the duration of one call.
    """
    session: Optional[MutableMapping[str, Any]] = None
    headers: Optional[Mapping[str, Any]] = field(default_factory=dict)


def request_field(request: Any, name: str) -> Any:
    """
    Read ``name`` from a dict-style or attribute-style request.

    Starlette asserts on ``request.session`` when SessionMiddleware is not
    installed; that case reads as a missing field.
    """
    if request is None:
        return None
    if isinstance(request, dict):
        return request.get(name)
    try:
        return getattr(request, name, None)
    except AssertionError:
        return None


def header_value(headers: Optional[Mapping[str, Any]], name: str) -> Any:
    """Case-insensitive header lookup"""
    if not headers:
        return None
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if isinstance(key, str) and key.lower() == lowered:
            return candidate
    return None
