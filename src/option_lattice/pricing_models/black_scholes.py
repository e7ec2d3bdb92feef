# src/option_lattice/pricing_models/black_scholes.py

from typing import Literal, Tuple

import numpy as np
from scipy.special import erfc

from option_lattice.exceptions.pricing_exceptions import InvalidArgumentError


def normal_cdf(x: float) -> float:
    """Standard normal CDF computed through erfc to keep precision in the tails."""
    return 0.5 * erfc(-x / np.sqrt(2.0))


def d1_d2(S: float, K: float, T: float, r: float, sigma: float, q: float = 0.0) -> Tuple[float, float]:
    d1 = (np.log(S / K) + (r - q + 0.5 * sigma**2) * T) / (sigma * np.sqrt(T))
    d2 = d1 - sigma * np.sqrt(T)
    return d1, d2


def black_scholes(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: Literal["call", "put"] = "call",
    q: float = 0.0,
) -> float:
    """
    Black-Scholes-Merton model for European option pricing.

    Parameters:
        S: Spot price of the underlying asset
        K: Strike price
        T: Time to maturity (in years)
        r: Risk-free interest rate (continuously compounded)
        sigma: Volatility of the underlying asset
        option_type: "call" or "put"
        q: Dividend yield (default 0)

    Returns:
        Option price (float)
    """
    if S <= 0 or K <= 0 or T < 0 or sigma <= 0:
        raise InvalidArgumentError(
            f"Invalid input: S, K and sigma must be positive and T >= 0 "
            f"(got S={S}, K={K}, T={T}, sigma={sigma})"
        )

    # Handle immediate expiration
    if T == 0:
        if option_type == "call":
            return max(S - K, 0.0)
        elif option_type == "put":
            return max(K - S, 0.0)
        raise InvalidArgumentError("option_type must be 'call' or 'put'")

    d1, d2 = d1_d2(S, K, T, r, sigma, q)

    if option_type == "call":
        return float(S * np.exp(-q * T) * normal_cdf(d1) - K * np.exp(-r * T) * normal_cdf(d2))

    elif option_type == "put":
        return float(K * np.exp(-r * T) * normal_cdf(-d2) - S * np.exp(-q * T) * normal_cdf(-d1))

    else:
        raise InvalidArgumentError("option_type must be 'call' or 'put'")


def digital_cash_or_nothing(
    S: float,
    K: float,
    T: float,
    r: float,
    sigma: float,
    option_type: Literal["call", "put"] = "call",
) -> float:
    """Present value of one unit of cash paid if S_T ends above (call) or below (put) K."""
    if T == 0:
        if option_type == "call":
            return 1.0 if S > K else 0.0
        return 1.0 if S < K else 0.0

    _, d2 = d1_d2(S, K, T, r, sigma)
    if option_type == "call":
        return float(np.exp(-r * T) * normal_cdf(d2))
    return float(np.exp(-r * T) * normal_cdf(-d2))


def knock_out_terminal(
    S: float,
    K: float,
    B: float,
    T: float,
    r: float,
    sigma: float,
    option_type: Literal["call", "put"] = "call",
) -> float:
    """
    Closed form for a knock-out option whose barrier is only checked at maturity.

    K > B is a down-and-out contract, K <= B an up-and-out contract. The
    up-and-out call and the down-and-out put are replicated by a vanilla
    spread minus a digital on the barrier; in the two remaining cases the
    knocked-out region is already out of the money, leaving the vanilla price.
    """
    if B <= 0:
        raise InvalidArgumentError(f"Barrier must be positive, got {B}")

    vanilla = black_scholes(S, K, T, r, sigma, option_type)
    if option_type == "call":
        if K > B:
            return vanilla
        spread = vanilla - black_scholes(S, B, T, r, sigma, "call")
        return max(spread - (B - K) * digital_cash_or_nothing(S, B, T, r, sigma, "call"), 0.0)

    if K <= B:
        return vanilla
    spread = vanilla - black_scholes(S, B, T, r, sigma, "put")
    return max(spread - (K - B) * digital_cash_or_nothing(S, B, T, r, sigma, "put"), 0.0)
