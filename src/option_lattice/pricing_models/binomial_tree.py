# src/option_lattice/pricing_models/binomial_tree.py

import logging
import math
from enum import IntEnum
from functools import wraps
from numbers import Integral, Real
from typing import Callable, NamedTuple, Optional, Tuple

import numpy as np
from numba import njit

from option_lattice.common.config import DEFAULT_LATTICE_STEPS, MAX_LATTICE_STEPS
from option_lattice.exceptions.pricing_exceptions import (
    InvalidArgumentError,
    InvalidStepCountError,
    LatticeError,
    PricingError,
)

logger = logging.getLogger(__name__)


class OptionType(IntEnum):
    """Enumeration for option type"""
    CALL = 0
    PUT = 1


class ExerciseStyle(IntEnum):
    """Enumeration for exercise style"""
    EUROPEAN = 0
    AMERICAN = 1


class VanillaTerms(NamedTuple):
    """
    Payoff description the compiled kernel can evaluate without calling back
    into Python. ``barrier`` of 0.0 means no barrier; a positive barrier is
    checked at maturity only.
    """

    option_type: OptionType
    exercise_style: ExerciseStyle
    barrier: float = 0.0


def error_handler(func: Callable) -> Callable:
    """
    Decorator to wrap public entry points with consistent error handling.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except PricingError:
            raise
        except Exception as e:
            raise LatticeError(
                f"Unexpected error in {func.__name__}: {str(e)}"
            ) from e
    return wrapper


@njit(cache=True)
def _solve_vanilla_lattice(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    q: float,
    n_steps: int,
    option_type: int,
    exercise_style: int,
    barrier: float,
) -> float:
    """
    Core Numba kernel for plain and terminal-barrier payoffs.

    Uses O(N) memory by storing only the current layer of option values.
    """
    dt = T / n_steps
    u = np.exp(sigma * np.sqrt(dt))
    d = 1.0 / u
    df = np.exp(-r * dt)
    p = (np.exp((r - q) * dt) - d) / (u - d)

    values = np.empty(n_steps + 1, dtype=np.float64)

    # Terminal payoffs, i up-moves out of N
    for i in range(n_steps + 1):
        spot_price = S * u ** (2.0 * i - n_steps)
        if option_type == 0:  # CALL
            payoff = max(spot_price - K, 0.0)
        else:  # PUT
            payoff = max(K - spot_price, 0.0)
        if barrier > 0.0:
            if K > barrier:
                if spot_price < barrier:
                    payoff = 0.0
            elif spot_price > barrier:
                payoff = 0.0
        values[i] = payoff

    # Backward induction
    for j in range(n_steps - 1, -1, -1):
        for i in range(j + 1):
            continuation = df * (p * values[i + 1] + (1.0 - p) * values[i])
            if exercise_style == 1:  # AMERICAN
                spot_price = S * u ** (2.0 * i - j)
                if option_type == 0:
                    intrinsic = max(spot_price - K, 0.0)
                else:
                    intrinsic = max(K - spot_price, 0.0)
                values[i] = max(continuation, intrinsic)
            else:
                values[i] = continuation

    return values[0]


def _tree_parameters(T: float, r: float, sigma: float, q: float, n_steps: int) -> Tuple[float, float, float, float, float]:
    dt = T / n_steps
    up = math.exp(sigma * math.sqrt(dt))
    down = 1.0 / up
    p_up = (math.exp((r - q) * dt) - down) / (up - down)
    if not 0.0 <= p_up <= 1.0:
        raise InvalidArgumentError(
            f"Risk-neutral probability {p_up:.6f} is outside [0, 1]; "
            "increase the number of steps or check rate and dividend yield."
        )
    return dt, up, down, p_up, math.exp(-r * dt)


def _validate_inputs(contract, spot: float, n_steps: int, dividend_yield: Optional[float]) -> float:
    if isinstance(n_steps, bool) or not isinstance(n_steps, Integral) or n_steps <= 0:
        raise InvalidStepCountError(n_steps)
    if n_steps > MAX_LATTICE_STEPS:
        raise InvalidArgumentError(
            f"Number of lattice steps {n_steps} exceeds the limit of {MAX_LATTICE_STEPS}"
        )
    if isinstance(spot, bool) or not isinstance(spot, Real) or not spot > 0 or not math.isfinite(spot):
        raise InvalidArgumentError(f"Spot must be positive and finite, got {spot}")
    if contract.T <= 0:
        raise InvalidArgumentError(
            f"Lattice valuation needs a positive time to maturity, got T={contract.T}"
        )
    q = 0.0 if dividend_yield is None else dividend_yield
    if isinstance(q, bool) or not isinstance(q, Real) or q < 0 or not math.isfinite(q):
        raise InvalidArgumentError(f"Dividend yield must be non-negative, got {q}")
    return q


def _backward_induction(contract, spot: float, n_steps: int, q: float) -> float:
    """Generic lattice: every node calls back into ``contract.exercise_value``."""
    T = contract.T
    dt, up, down, p_up, df = _tree_parameters(T, contract.r, contract.sigma, q, n_steps)
    p_down = 1.0 - p_up
    logger.debug(
        "Generic lattice for %s: N=%d u=%.6f d=%.6f p=%.6f",
        type(contract).__name__, n_steps, up, down, p_up,
    )

    values = np.empty(n_steps + 1, dtype=np.float64)
    for i in range(n_steps + 1):
        values[i] = contract.exercise_value(spot * up ** (2 * i - n_steps), T)

    for j in range(n_steps - 1, -1, -1):
        t = j * dt
        values[: j + 1] = df * (p_up * values[1 : j + 2] + p_down * values[: j + 1])
        for i in range(j + 1):
            exercise = contract.exercise_value(spot * up ** (2 * i - j), t)
            if exercise > values[i]:
                values[i] = exercise

    return float(values[0])


@error_handler
def lattice_value(
    contract,
    spot: float,
    n_steps: int = DEFAULT_LATTICE_STEPS,
    dividend_yield: Optional[float] = None,
    use_kernel: bool = True,
) -> float:
    """
    Value ``contract`` at ``spot`` on a recombining CRR tree of ``n_steps`` steps.

    Early exercise is checked at every node by comparing the discounted
    continuation value with ``contract.exercise_value(node_spot, t)``.
    Contracts that describe themselves through ``lattice_terms()`` are priced
    by the compiled kernel unless ``use_kernel`` is False; all others go
    through the generic path.

    Args:
        contract: Any object with K, T, sigma, r and ``exercise_value(s, t)``.
        spot: Current spot price.
        n_steps: Number of time steps (positive integer).
        dividend_yield: Continuous dividend yield; None means no dividends.
        use_kernel: Allow the compiled kernel for vanilla payoffs.

    Returns:
        Lattice option value (float).

    Raises:
        InvalidArgumentError: On bad step count, spot, maturity or yield.
    """
    q = _validate_inputs(contract, spot, n_steps, dividend_yield)

    terms = contract.lattice_terms() if use_kernel else None
    if terms is None:
        return _backward_induction(contract, spot, n_steps, q)

    # Parameter check shared with the generic path
    _tree_parameters(contract.T, contract.r, contract.sigma, q, n_steps)
    logger.debug("Compiled lattice for %s: N=%d", type(contract).__name__, n_steps)
    return float(
        _solve_vanilla_lattice(
            float(spot),
            float(contract.K),
            float(contract.T),
            float(contract.r),
            float(contract.sigma),
            float(q),
            int(n_steps),
            int(terms.option_type),
            int(terms.exercise_style),
            float(terms.barrier),
        )
    )


class BinomialTree:
    """
    CRR binomial tree pricer for any contract of the payoff model.

    Optimizations:
    - O(N) memory complexity (reusing 1D array)
    - Numba JIT kernel for plain and barrier payoffs
    """

    def __init__(self, num_steps: int = DEFAULT_LATTICE_STEPS, use_kernel: bool = True):
        if isinstance(num_steps, bool) or not isinstance(num_steps, Integral) or num_steps <= 0:
            raise InvalidStepCountError(num_steps)
        self.num_steps = num_steps
        self.use_kernel = use_kernel

    @error_handler
    def price(self, contract, S: float, q: Optional[float] = None) -> float:
        """Computes option price."""
        return lattice_value(contract, S, self.num_steps, q, use_kernel=self.use_kernel)

    @error_handler
    def price_many(self, contract, spots, q: Optional[float] = None) -> np.ndarray:
        """Prices the same contract over an array of spots."""
        return np.array([self.price(contract, float(s), q) for s in np.atleast_1d(spots)])
