class PricingError(Exception):
    """Base class for pricing-related errors."""

    pass


class InvalidArgumentError(PricingError, ValueError):
    """Raised when a contract parameter, spot or lattice setting is invalid."""

    pass


class InvalidStepCountError(InvalidArgumentError):
    """Raised when the lattice step count is not a positive integer."""

    def __init__(self, n_steps):
        super().__init__(
            f"Number of lattice steps must be a positive integer, got {n_steps!r}."
        )


class UnknownContractTypeError(InvalidArgumentError):
    """Raised when an unknown contract kind is requested from the factory."""

    def __init__(self, kind: str, supported_types: list):
        super().__init__(
            f"Unknown contract type '{kind}'. Supported types: {', '.join(supported_types)}"
        )


class UnsupportedOperationError(PricingError, NotImplementedError):
    """Raised when a contract has no closed-form value."""

    def __init__(self, operation: str, contract_name: str):
        super().__init__(
            f"{operation} is not supported for {contract_name}; use lattice_value instead."
        )


class LatticeError(PricingError):
    """Raised for unexpected failures inside the lattice engine."""

    pass
