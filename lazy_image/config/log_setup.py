# lazy_image/config/log_setup.py
# Responsibility: Configures standard library logging for the application process.

import logging
from typing import Optional

from lazy_image.config.settings import settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Applies the configured log level and format to the root logger.
    Library modules only create named loggers; the process entry point calls this once.
    """
    logging.basicConfig(
        level=getattr(logging, (level or settings.LOGGING.LEVEL).upper(), logging.INFO),
        format=settings.LOGGING.FORMAT,
    )
