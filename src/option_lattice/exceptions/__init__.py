from option_lattice.exceptions.pricing_exceptions import (
    PricingError,
    InvalidArgumentError,
    InvalidStepCountError,
    UnknownContractTypeError,
    UnsupportedOperationError,
    LatticeError,
)

__all__ = [
    "PricingError",
    "InvalidArgumentError",
    "InvalidStepCountError",
    "UnknownContractTypeError",
    "UnsupportedOperationError",
    "LatticeError",
]
