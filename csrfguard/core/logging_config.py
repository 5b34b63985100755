# csrfguard/core/logging_config.py
"""
Logging configuration for csrf-guard.

Validation failures are logged as warnings by ``csrfguard.core.security``.
Under a forgery attempt these can dominate the log, so their level is
tunable on its own through ``SECURITY_LOG_LEVEL``.
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

SECURITY_LOGGER = "csrfguard.core.security"


def setup_logging():
    """Configure root logging: console plus rotating file"""
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    log_dir = Path(os.getenv("LOG_DIR", "logs"))

    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler (attach once)
    if not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    # Rejected CSRF checks end up here for later review (5 MB per file, 5 files)
    log_file = log_dir / 'csrfguard.log'
    if not any(isinstance(h, RotatingFileHandler) and h.baseFilename == os.path.abspath(log_file) for h in root_logger.handlers):
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger(SECURITY_LOGGER).setLevel(os.getenv("SECURITY_LOG_LEVEL", log_level).upper())

    # Clients poll GET /CsrfToken; one access line per poll is noise
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
