"""
Logging setup for the Evently application.

Modules log through ``logging.getLogger(__name__)``; ``setup_logging`` is
called once by the entry point and attaches the handlers to the root logger:
stdout for everything at LOG_LEVEL and a rotating ``error.log`` for errors.
Noisy third-party loggers (SQLAlchemy, Stripe, httpx) are turned down.
"""

import os
import logging
import logging.handlers
import sys
from typing import Optional
from pathlib import Path

# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
VERBOSE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def setup_logging(log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Configure global logging for the application.

    Args:
        log_dir: Directory for the rotating error log. Defaults to ``logs``.
            File logging is skipped when TESTING is set.

    Returns:
        logging.Logger: Application logger
    """
    debug_mode = os.getenv("DEBUG", "False").lower() == "true"
    testing = os.getenv("TESTING", "").lower() == "true"
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates when reloading
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    verbose_formatter = logging.Formatter(
        VERBOSE_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )
    standard_formatter = logging.Formatter(
        DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(standard_formatter)
    console_handler.setLevel(logging.DEBUG if debug_mode else log_level)
    root_logger.addHandler(console_handler)

    if not testing:
        log_dir = Path(log_dir or "logs")
        log_dir.mkdir(exist_ok=True)
        error_file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "error.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        error_file_handler.setLevel(logging.ERROR)
        error_file_handler.setFormatter(verbose_formatter)
        root_logger.addHandler(error_file_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if debug_mode else logging.WARNING
    )
    logging.getLogger('stripe').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)

    logger = logging.getLogger('evently')
    logger.info(f"Logging initialized with level {log_level_name}")

    return logger
