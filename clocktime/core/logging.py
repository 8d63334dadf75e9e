"""Logging configuration"""

import logging
from typing import Optional

from clocktime.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure console logging for the clocktime package"""
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        level=level_name,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),  # Console output
        ],
    )

    package_logger = logging.getLogger("clocktime")
    package_logger.setLevel(level_name)

    return package_logger
