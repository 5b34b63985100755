"""
Security module for csrf-guard.

Centralizes the token lifecycle:
- Token generation and timing-safe comparison
- Session token storage
- Request validation

Kept free of any web framework so it can sit under any host.
"""

from .tokens import generate_token, timing_safe_equal
from .token_store import get_token, get_or_create_token, get_csrf_token
from .validator import validate_csrf

__all__ = [
    'generate_token',
    'timing_safe_equal',
    'get_token',
    'get_or_create_token',
    'get_csrf_token',
    'validate_csrf'
]
