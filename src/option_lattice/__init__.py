# Expose main modules for easier imports
from option_lattice import common, exceptions, pricing_models, utils
from option_lattice.pricing_models import create_contract, lattice_value

__version__ = "0.1.0"

__all__ = [
    "common",
    "exceptions",
    "pricing_models",
    "utils",
    "create_contract",
    "lattice_value",
]
