"""
Session token storage.

Reads and writes the CSRF token inside a session mapping owned by the
host. The session is never created here; a missing session is an error.
"""

import logging
from typing import Any, MutableMapping, Optional

from csrfguard.core.config import get_config
from csrfguard.core.exceptions import SessionRequiredError
from csrfguard.core.security.tokens import generate_token
from csrfguard.models.request import request_field

logger = logging.getLogger(__name__)


def get_token(session: Optional[MutableMapping[str, Any]]) -> Optional[str]:
    """Return the session's token, or None if there is none yet"""
    if session is None:
        return None
    return session.get(get_config().session_key) or None


def get_or_create_token(session: Optional[MutableMapping[str, Any]]) -> str:
    """
    Return the session's token, creating and storing one if absent.

    Raises:
        SessionRequiredError: If no session is supplied
    """
    if session is None:
        raise SessionRequiredError()

    config = get_config()
    token = session.get(config.session_key)
    if token:
        return token

    token = generate_token(config.token_length)
    session[config.session_key] = token
    logger.debug(f"Created CSRF token under session key '{config.session_key}'")
    return token


def get_csrf_token(request: Any) -> str:
    """Get or create the CSRF token for the request's session"""
    return get_or_create_token(request_field(request, "session"))
