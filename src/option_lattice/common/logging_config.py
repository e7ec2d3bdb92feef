# src/option_lattice/common/logging_config.py

import logging

from option_lattice.common.config import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


""" Example usage:

from option_lattice.common.logging_config import setup_logging

setup_logging()  # call once on app start
logger = logging.getLogger(__name__)

"""
