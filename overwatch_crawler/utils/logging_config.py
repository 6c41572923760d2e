"""
Logging setup for crawler scripts
"""

import logging
from overwatch_crawler.config.settings import LOG_LEVEL, LOG_FORMAT

# Libraries that log every connection at DEBUG
NOISY_LOGGERS = ['urllib3', 'charset_normalizer']

def setup_logging(level: str = LOG_LEVEL, format_str: str = LOG_FORMAT, quiet_libraries: bool = True):
    """
    Configure the root logger with a console handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_str: Log message format string
        quiet_libraries: Keep HTTP library loggers at WARNING even when level is DEBUG
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_str,
        handlers=[logging.StreamHandler()],
    )

    if quiet_libraries:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
