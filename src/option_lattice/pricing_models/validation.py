# src/option_lattice/pricing_models/validation.py
"""
Option Pricing Validation Utilities.

Provides validation functions for ensuring pricing consistency:
- Put-Call Parity checks
- Arbitrage bounds validation
- Lattice convergence towards the closed form

Usage:
    >>> from option_lattice.pricing_models.validation import validate_put_call_parity
    >>> is_valid, error = validate_put_call_parity(call_price=10.45, put_price=5.57, S=100, K=100, T=1.0, r=0.05)
"""

from typing import Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from option_lattice.exceptions.pricing_exceptions import InvalidArgumentError
from option_lattice.pricing_models.binomial_tree import ExerciseStyle, OptionType, lattice_value
from option_lattice.pricing_models.black_scholes import black_scholes


def validate_put_call_parity(
    call_price: float,
    put_price: float,
    S: float,
    K: float,
    T: float,
    r: float,
    q: float = 0.0,
    tolerance: float = 1e-4,
) -> Tuple[bool, float]:
    """
    Validate put-call parity for European options.

    C - P = S * exp(-qT) - K * exp(-rT)

    Returns:
        Tuple of (is_valid, absolute_error).
    """
    expected_diff = S * np.exp(-q * T) - K * np.exp(-r * T)
    actual_diff = call_price - put_price
    error = abs(actual_diff - expected_diff)
    return error <= tolerance, error


def validate_arbitrage_bounds(
    price: float,
    S: float,
    K: float,
    T: float,
    r: float,
    option_type: str,
    q: float = 0.0,
) -> Tuple[bool, str]:
    """
    Check if a European option price satisfies no-arbitrage bounds.

    For calls: max(0, S*e^(-qT) - K*e^(-rT)) <= C <= S*e^(-qT)
    For puts: max(0, K*e^(-rT) - S*e^(-qT)) <= P <= K*e^(-rT)

    Returns:
        Tuple of (is_valid, violation_message).
    """
    pv_S = S * np.exp(-q * T)
    pv_K = K * np.exp(-r * T)

    if option_type == "call":
        lower_bound = max(0, pv_S - pv_K)
        upper_bound = pv_S

        if price < lower_bound - 1e-6:
            return False, f"Call price {price:.4f} below lower bound {lower_bound:.4f}"
        if price > upper_bound + 1e-6:
            return False, f"Call price {price:.4f} above upper bound {upper_bound:.4f}"
    else:
        lower_bound = max(0, pv_K - pv_S)
        upper_bound = pv_K

        if price < lower_bound - 1e-6:
            return False, f"Put price {price:.4f} below lower bound {lower_bound:.4f}"
        if price > upper_bound + 1e-6:
            return False, f"Put price {price:.4f} above upper bound {upper_bound:.4f}"

    return True, "OK"


def _reference_value(contract, spot: float, dividend_yield: Optional[float]) -> float:
    if not dividend_yield:
        return contract.analytic_value(spot)

    terms = contract.lattice_terms()
    if terms is None or terms.exercise_style != ExerciseStyle.EUROPEAN or terms.barrier > 0:
        raise InvalidArgumentError(
            f"No closed form with dividend yield for {type(contract).__name__}"
        )
    option_type = "call" if terms.option_type == OptionType.CALL else "put"
    return black_scholes(
        spot, contract.K, contract.T, contract.r, contract.sigma, option_type, q=dividend_yield
    )


def lattice_convergence_table(
    contract,
    spot: float,
    steps: Sequence[int] = (50, 200, 1000),
    dividend_yield: Optional[float] = None,
) -> pd.DataFrame:
    """
    Tabulate lattice values for increasing step counts against the closed form.

    Args:
        contract: Contract with ``analytic_value`` support. With a dividend
            yield only plain European calls and puts are accepted, since the
            reference is then the Black-Scholes-Merton price with that yield.
        spot: Spot price.
        steps: Step counts to evaluate.
        dividend_yield: Passed through to the lattice.

    Returns:
        DataFrame with columns n_steps, lattice, analytic, abs_error, scaled_error
        (abs_error * n_steps, roughly flat when the error shrinks like 1/N).
    """
    analytic = _reference_value(contract, spot, dividend_yield)
    rows = []
    for n in steps:
        value = lattice_value(contract, spot, n, dividend_yield)
        error = abs(value - analytic)
        rows.append(
            {
                "n_steps": n,
                "lattice": value,
                "analytic": analytic,
                "abs_error": error,
                "scaled_error": error * n,
            }
        )
    return pd.DataFrame(rows)
