"""
Token primitives: generation and timing-safe comparison.
"""

import hmac
import secrets
from typing import Any, Optional

from csrfguard.core.config import get_config


def generate_token(length: Optional[int] = None) -> str:
    """
    Generate a cryptographically secure random token.

    Args:
        length: Number of random bytes; defaults to the configured token length

    Returns:
        Lowercase hex string of ``2 * length`` characters
    """
    if length is None:
        length = get_config().token_length
    return secrets.token_hex(length)


def timing_safe_equal(a: Any, b: Any) -> bool:
    """
    Compare two tokens without leaking where they first differ.

    Length is not treated as secret, so a length mismatch returns early.
    Non-string values never compare equal. Lone surrogates (valid JSON
    escapes) are encoded as-is so they compare as ordinary mismatches.
    """
    if not isinstance(a, str) or not isinstance(b, str):
        return False
    a_bytes = a.encode("utf-8", "surrogatepass")
    b_bytes = b.encode("utf-8", "surrogatepass")
    if len(a_bytes) != len(b_bytes):
        return False
    return hmac.compare_digest(a_bytes, b_bytes)
