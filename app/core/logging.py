import logging
import sys
from typing import Optional
from app.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def resolve_log_level(settings: Settings) -> int:
    """LOG_LEVEL wins when it names a known level; otherwise DEBUG picks DEBUG or INFO."""
    if settings.LOG_LEVEL:
        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if settings.DEBUG else logging.INFO

def setup_logging(settings: Optional[Settings] = None) -> int:
    """Routes all simulator logs to stdout.

    Loggers listed in QUIET_LOGGERS (access log, SQL echo by default) are held
    at WARNING. Calling this twice does not add a second handler.

    Returns:
        The level applied to the root logger.
    """
    settings = settings or get_settings()
    log_level = resolve_log_level(settings)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)

    for name in settings.QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"Logging initialized with level: {logging.getLevelName(log_level)}")
    return log_level
