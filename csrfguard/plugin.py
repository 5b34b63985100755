# csrfguard/plugin.py
"""
Host plugin entry point with runtime reconfiguration.

The host hands over a scope exposing:
- ``options.get_all()`` returning the raw plugin options
- ``options.on("change", callback)`` for configuration change notifications
- ``on("close", callback)`` for shutdown
- an optional ``logger``
"""

import logging
from typing import Any, Callable, Dict, Optional, Protocol

from csrfguard.core.config import reload_config

logger = logging.getLogger(__name__)


class PluginOptions(Protocol):
    def get_all(self) -> Optional[Dict[str, Any]]: ...

    def on(self, event: str, callback: Callable[[], Any]) -> Any: ...


class PluginScope(Protocol):
    options: PluginOptions
    logger: Optional[logging.Logger]

    def on(self, event: str, callback: Callable[[], Any]) -> Any: ...


def handle_application(scope: PluginScope) -> None:
    """Load configuration from the scope and follow its change notifications"""
    scope_logger = getattr(scope, "logger", None) or logger
    initialized = False

    def update_configuration() -> None:
        nonlocal initialized
        config = reload_config(scope.options.get_all() or {})
        settings = config.model_dump(by_alias=True)
        if initialized:
            scope_logger.info(f"CSRF configuration updated: {settings}")
        else:
            scope_logger.info(f"CSRF plugin loaded with config: {settings}")
            initialized = True

    update_configuration()

    scope.options.on("change", update_configuration)
    scope.on("close", lambda: scope_logger.info("CSRF plugin shutting down"))
