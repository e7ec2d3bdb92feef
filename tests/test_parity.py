import numpy as np
import pytest

from option_lattice.pricing_models.black_scholes import black_scholes
from option_lattice.pricing_models.contracts import EuropeanCall, EuropeanPut
from option_lattice.pricing_models.validation import validate_put_call_parity


@pytest.mark.parametrize(
    "S, K, T, r, sigma",
    [
        (100, 100, 1.0, 0.05, 0.2),  # ATM
        (110, 100, 0.5, 0.02, 0.3),  # ITM Call
        (90, 100, 2.0, 0.05, 0.15),  # OTM Call
    ],
)
def test_put_call_parity(S, K, T, r, sigma):
    """
    Verifies C - P = S - K * exp(-rT)
    """
    call_price = black_scholes(S, K, T, r, sigma, option_type="call")
    put_price = black_scholes(S, K, T, r, sigma, option_type="put")

    lhs = call_price - put_price
    rhs = S - K * np.exp(-r * T)

    # Floating point arithmetic requires a small tolerance
    assert np.isclose(lhs, rhs, atol=1e-5), f"Parity violated: {lhs} != {rhs}"


@pytest.mark.parametrize("S", [80.0, 100.0, 125.0])
def test_lattice_put_call_parity(S):
    """European lattice prices satisfy parity at the same step count."""
    call = EuropeanCall(100, 1.0, 0.25, 0.03).lattice_value(S, 400)
    put = EuropeanPut(100, 1.0, 0.25, 0.03).lattice_value(S, 400)

    is_valid, error = validate_put_call_parity(call, put, S, 100, 1.0, 0.03, tolerance=1e-8)
    assert is_valid, f"Parity error {error}"
