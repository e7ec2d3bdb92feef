# src/option_lattice/common/config.py

import os

# General project config
PROJECT_NAME = "OptionLattice"

# Logging config
LOG_LEVEL = os.getenv("OPTION_LATTICE_LOG_LEVEL", "INFO")

# Lattice defaults
DEFAULT_LATTICE_STEPS = 250
MAX_LATTICE_STEPS = int(os.getenv("OPTION_LATTICE_MAX_STEPS", "20000"))

# Nested pricing: fixed and smaller than the outer tree so node count stays bounded
COMPOUND_UNDERLYING_STEPS = 30
RELOAD_STEPS = 100

# Compound call underlying terms (strike, expiry in years from today)
COMPOUND_UNDERLYING_STRIKE = 90.0
COMPOUND_UNDERLYING_EXPIRY = 6.0 / 12
