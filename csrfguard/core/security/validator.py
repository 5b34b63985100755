"""
CSRF validation for state-changing requests.

Order of checks:
1. the request carries a session
2. the session holds a token
3. a header token, when present, decides the outcome on its own
4. otherwise a body field token is checked and stripped on success
"""

import logging
from collections.abc import MutableMapping
from typing import Any, Optional

from csrfguard.core.config import get_config
from csrfguard.core.exceptions import (
    SessionRequiredError,
    TokenNotFoundError,
    InvalidTokenError,
)
from csrfguard.core.security.tokens import timing_safe_equal
from csrfguard.models.request import request_field, header_value

logger = logging.getLogger(__name__)


def validate_csrf(request: Any, body: Optional[Any] = None) -> None:
    """
    Validate the CSRF token of a request.

    Args:
        request: Dict-style or attribute-style request with ``session``
                 and optional ``headers``
        body: Optional request payload; the token field is removed from it
              when the body path matches

    Raises:
        SessionRequiredError: No session attached
        TokenNotFoundError: Session holds no token
        InvalidTokenError: No candidate token matched
    """
    config = get_config()

    session = request_field(request, "session")
    if session is None:
        logger.warning("🚫 CSRF check without session")
        raise SessionRequiredError()

    session_token = session.get(config.session_key)
    if not session_token:
        logger.warning("🚫 CSRF check without token in session")
        raise TokenNotFoundError(session_key=config.session_key)

    header_token = header_value(request_field(request, "headers"), config.header_name)
    if header_token:
        if timing_safe_equal(header_token, session_token):
            return
        # A present header is authoritative; the body is not consulted.
        logger.warning(f"🔒 CSRF header '{config.header_name}' did not match session token")
        raise InvalidTokenError(source="header")

    if isinstance(body, MutableMapping):
        body_token = body.get(config.body_field)
        if body_token and timing_safe_equal(body_token, session_token):
            # Downstream handlers must not see the token as a data field
            del body[config.body_field]
            return
        if body_token:
            logger.warning(f"🔒 CSRF body field '{config.body_field}' did not match session token")
            raise InvalidTokenError(source="body")

    logger.warning("🔒 CSRF token missing from request")
    raise InvalidTokenError()
