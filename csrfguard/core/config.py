# csrfguard/core/config.py
"""
CSRF configuration.

The live configuration is a frozen pydantic snapshot held in a single
module-level reference. Updates build a new snapshot and swap the
reference, so readers always see one complete field set.
"""

import os
import logging
import threading
from typing import Optional, Dict, Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_LENGTH = 32
DEFAULT_HEADER_NAME = "x-csrf-token"
DEFAULT_BODY_FIELD = "_csrf"
DEFAULT_SESSION_KEY = "csrfToken"


class CsrfConfig(BaseModel):
    """Immutable snapshot of the CSRF settings"""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    token_length: int = Field(default=DEFAULT_TOKEN_LENGTH, alias="tokenLength")
    header_name: str = Field(default=DEFAULT_HEADER_NAME, alias="headerName")
    body_field: str = Field(default=DEFAULT_BODY_FIELD, alias="bodyField")
    session_key: str = Field(default=DEFAULT_SESSION_KEY, alias="sessionKey")

    @field_validator("token_length", mode="before")
    @classmethod
    def _parse_token_length(cls, value: Any) -> int:
        return parse_token_length(value)


class Settings(BaseSettings):
    """Process settings read from the environment / .env"""
    APP_NAME: str = "csrf-guard"
    DEBUG: bool = False

    # Secret for the signed session cookie
    SESSION_SECRET: Optional[str] = None

    # Optional CSRF overrides, kept as raw strings so configure() does the parsing
    CSRF_TOKEN_LENGTH: Optional[str] = None
    CSRF_HEADER_NAME: Optional[str] = None
    CSRF_BODY_FIELD: Optional[str] = None
    CSRF_SESSION_KEY: Optional[str] = None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

    def csrf_options(self) -> Dict[str, str]:
        """CSRF overrides in host option naming, unset ones left out"""
        options = {
            "tokenLength": self.CSRF_TOKEN_LENGTH,
            "headerName": self.CSRF_HEADER_NAME,
            "bodyField": self.CSRF_BODY_FIELD,
            "sessionKey": self.CSRF_SESSION_KEY,
        }
        return {key: value for key, value in options.items() if value is not None}


# Host option name -> snapshot field name
_OPTION_FIELDS = {
    (field.alias or name): name for name, field in CsrfConfig.model_fields.items()
}

_config: CsrfConfig = CsrfConfig()
_write_lock = threading.Lock()


def parse_token_length(value: Any) -> int:
    """
    Coerce a token length to a positive integer.

    Strings (typically from an expanded environment variable) are parsed;
    anything unparsable or non-positive falls back to the default.
    """
    if isinstance(value, bool):
        value = None
    elif isinstance(value, str):
        try:
            value = int(value.strip(), 10)
        except ValueError:
            logger.warning(f"Invalid tokenLength {value!r}, using default {DEFAULT_TOKEN_LENGTH}")
            return DEFAULT_TOKEN_LENGTH
    if not isinstance(value, int) or value <= 0:
        logger.warning(f"Invalid tokenLength {value!r}, using default {DEFAULT_TOKEN_LENGTH}")
        return DEFAULT_TOKEN_LENGTH
    return value


def expand_env_var(value: Any) -> Any:
    """
    Expand an environment variable reference.

    A string of the exact form ``${NAME}`` is replaced by the value of
    ``NAME``; when the variable is unset the literal string is returned.
    All other values are returned unchanged.

    >>> expand_env_var('literal')
    'literal'
    >>> expand_env_var(123)
    123
    """
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        env_value = os.environ.get(value[2:-1])
        return env_value if env_value is not None else value
    return value


def expand_config_env_vars(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Expand environment variables in every top-level option value"""
    return {key: expand_env_var(value) for key, value in options.items()}


def _normalize(options: Mapping[str, Any]) -> Dict[str, Any]:
    # Map host/field names to snapshot fields and drop values that would
    # leave a field empty.
    normalized = {}
    for key, value in options.items():
        field_name = _OPTION_FIELDS.get(key, key if key in CsrfConfig.model_fields else None)
        if field_name is None:
            logger.debug(f"Ignoring unknown CSRF option: {key}")
            continue
        if value is None or value == "":
            continue
        normalized[field_name] = value
    return normalized


def _merge(base: CsrfConfig, options: Optional[Mapping[str, Any]]) -> CsrfConfig:
    values = base.model_dump()
    values.update(_normalize(expand_config_env_vars(options or {})))
    return CsrfConfig(**values)


def configure(options: Optional[Mapping[str, Any]] = None) -> CsrfConfig:
    """
    Merge options over the current configuration.

    Each value is env-expanded first. Returns the new snapshot.
    """
    global _config
    with _write_lock:
        _config = _merge(_config, options)
        return _config


def reload_config(options: Optional[Mapping[str, Any]] = None) -> CsrfConfig:
    """Rebuild the configuration from built-in defaults plus the full option set"""
    global _config
    with _write_lock:
        _config = _merge(CsrfConfig(), options)
        return _config


def reset_config() -> CsrfConfig:
    """Restore built-in defaults"""
    return reload_config()


def get_config() -> CsrfConfig:
    """Return the current configuration snapshot"""
    return _config


class _ClientConfig:
    """Live read-only view of the names clients need to submit a token"""

    @property
    def HEADER_NAME(self) -> str:
        return _config.header_name

    @property
    def BODY_FIELD(self) -> str:
        return _config.body_field


CSRF_CONFIG = _ClientConfig()
