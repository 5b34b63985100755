"""
csrf-guard - session-bound anti-forgery tokens.

Usage:

1. Configure (values may use ``${ENV_VAR}``):

    from csrfguard import configure
    configure({"tokenLength": 32, "headerName": "x-csrf-token", "bodyField": "_csrf"})

2. Wrap resource handlers:

    from csrfguard import with_csrf_protection
    notes = with_csrf_protection(NotesHandler())
    await notes.create("id", data, request)   # CSRF already validated

3. Expose the token endpoint:

    from csrfguard import CsrfToken
    CsrfToken().get(None, request)  # {"token": "..."}
"""

from csrfguard.core.config import (
    CSRF_CONFIG,
    CsrfConfig,
    configure,
    expand_env_var,
    get_config,
    reload_config,
    reset_config,
)
from csrfguard.core.exceptions import (
    CsrfError,
    SessionRequiredError,
    TokenNotFoundError,
    InvalidTokenError,
)
from csrfguard.core.security import (
    generate_token,
    timing_safe_equal,
    get_token,
    get_or_create_token,
    get_csrf_token,
    validate_csrf,
)
from csrfguard.middleware.csrf_protection import CsrfProtectedHandler, with_csrf_protection
from csrfguard.models.request import CsrfRequest
from csrfguard.plugin import handle_application
from csrfguard.resources.csrf_token import CsrfToken, make_csrf_token_resource

__all__ = [
    'CSRF_CONFIG',
    'CsrfConfig',
    'configure',
    'expand_env_var',
    'get_config',
    'reload_config',
    'reset_config',
    'CsrfError',
    'SessionRequiredError',
    'TokenNotFoundError',
    'InvalidTokenError',
    'generate_token',
    'timing_safe_equal',
    'get_token',
    'get_or_create_token',
    'get_csrf_token',
    'validate_csrf',
    'CsrfProtectedHandler',
    'with_csrf_protection',
    'CsrfRequest',
    'handle_application',
    'CsrfToken',
    'make_csrf_token_resource',
]
