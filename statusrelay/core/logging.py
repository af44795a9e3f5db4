import sys
import os
from typing import List, Optional
from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
LOG_FILENAME = "statusrelay.log"


def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = None) -> List[int]:
    """
    Configures Loguru sinks for the relay.

    The console shows per-delivery DEBUG traces only in debug mode. The
    optional file sink always records DEBUG and rotates in place.

    Returns:
        Handler ids of the sinks added
    """
    logger.remove()

    console_level = "DEBUG" if debug_mode else "INFO"
    handler_ids = [logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT)]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handler_ids.append(logger.add(
            os.path.join(log_dir, LOG_FILENAME),
            level="DEBUG",
            rotation="10 MB",
            retention="1 week",
            encoding="utf-8",
        ))

    logger.info(f"Logging initialized (console {console_level}, file {'on' if log_dir else 'off'})")
    return handler_ids
