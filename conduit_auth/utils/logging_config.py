"""
Logging setup for the auth service.
"""
import logging
import os
import sys
from typing import Optional

from ..config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    Configure root logging: stdout always, plus ``auth_events.log`` under
    ``log_dir`` (or LOG_DIR from settings) when one is configured.

    Args:
        log_dir: Directory for the log file, overrides settings.LOG_DIR
        level: Log level name, overrides settings.LOG_LEVEL
    """
    log_dir = log_dir or settings.LOG_DIR
    level = (level or settings.LOG_LEVEL).upper()

    handlers = [logging.StreamHandler(sys.stdout)]

    # Continue with stdout only if the log directory cannot be used
    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(log_dir, "auth_events.log")))
        except (OSError, PermissionError) as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)
