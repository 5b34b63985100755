# csrfguard/core/exceptions.py
"""
CSRF exceptions - standardized error handling for token validation.

Every validation failure carries an HTTP-style status code so the host
framework can render the response without knowing the failure kind.
"""

from typing import Optional, Dict, Any


class CsrfError(Exception):
    """Base exception for all CSRF errors"""

    status_code: int = 403

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize CSRF base exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status to report (defaults to 403)
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class SessionRequiredError(CsrfError):
    """No session object is attached to the request"""

    def __init__(self, details: Optional[Dict[str, Any]] = None):
        super().__init__("Session required for CSRF protection", details=details)


class TokenNotFoundError(CsrfError):
    """The session exists but holds no CSRF token"""

    def __init__(self, session_key: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__("CSRF token not found in session", details=details)
        self.session_key = session_key


class InvalidTokenError(CsrfError):
    """A candidate token matched neither via header nor body"""

    def __init__(self, source: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize invalid token error.

        Args:
            source: Where the rejected candidate came from ("header", "body")
                    or None when no candidate was supplied at all
            details: Additional validation context
        """
        super().__init__("Invalid CSRF token", details=details)
        self.source = source
