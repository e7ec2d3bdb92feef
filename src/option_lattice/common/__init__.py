from option_lattice.common.config import (
    PROJECT_NAME,
    LOG_LEVEL,
    DEFAULT_LATTICE_STEPS,
    MAX_LATTICE_STEPS,
    COMPOUND_UNDERLYING_STEPS,
    RELOAD_STEPS,
)
from option_lattice.common.logging_config import setup_logging

__all__ = [
    "PROJECT_NAME",
    "LOG_LEVEL",
    "DEFAULT_LATTICE_STEPS",
    "MAX_LATTICE_STEPS",
    "COMPOUND_UNDERLYING_STEPS",
    "RELOAD_STEPS",
    "setup_logging",
]
