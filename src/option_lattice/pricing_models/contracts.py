# src/option_lattice/pricing_models/contracts.py
"""
Option contracts priced by the lattice engine.

Every contract is an immutable value object carrying strike K, maturity T,
volatility sigma and risk-free rate r, and supplies:

- ``exercise_value(s, t)``: payoff if exercised at time t with spot s,
- ``analytic_value(s)``: Black-Scholes style value, or
  ``UnsupportedOperationError`` when no closed form exists,
- ``lattice_value(s, n_steps, dividend_yield)``: binomial tree value.

Compound, reloadable and extendible calls build a nested contract inside
``exercise_value`` and price it on the spot; the nested contract never
outlives that call.

Usage:
    from option_lattice.pricing_models.contracts import AmericanPut

    put = AmericanPut(K=63.75, T=1.0, sigma=0.2, r=0.04)
    price = put.lattice_value(75.0, n_steps=250)
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Dict, Optional, Type

from option_lattice.common.config import (
    COMPOUND_UNDERLYING_EXPIRY,
    COMPOUND_UNDERLYING_STEPS,
    COMPOUND_UNDERLYING_STRIKE,
    DEFAULT_LATTICE_STEPS,
    RELOAD_STEPS,
)
from option_lattice.exceptions.pricing_exceptions import (
    InvalidArgumentError,
    UnknownContractTypeError,
    UnsupportedOperationError,
)
from option_lattice.pricing_models.binomial_tree import (
    ExerciseStyle,
    OptionType,
    VanillaTerms,
    lattice_value,
)
from option_lattice.pricing_models.black_scholes import black_scholes, knock_out_terminal

logger = logging.getLogger(__name__)


def _check_finite(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}")


def _check_steps(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")


def _check_spot(s: float) -> None:
    if isinstance(s, bool) or not isinstance(s, Real) or not s > 0 or not math.isfinite(s):
        raise InvalidArgumentError(f"Spot must be positive and finite, got {s}")


@dataclass(frozen=True)
class Contract(ABC):
    """Base class for option contracts."""

    K: float  # Strike price
    T: float  # Time to maturity (years)
    sigma: float  # Volatility
    r: float  # Risk-free rate

    def __post_init__(self):
        for name in ("K", "T", "sigma", "r"):
            _check_finite(name, getattr(self, name))
        if self.K <= 0:
            raise InvalidArgumentError(f"Strike must be positive, got {self.K}")
        if self.T < 0:
            raise InvalidArgumentError(f"Time to maturity must be non-negative, got {self.T}")
        if self.sigma <= 0:
            raise InvalidArgumentError(f"Volatility must be positive, got {self.sigma}")

    @abstractmethod
    def exercise_value(self, s: float, t: float) -> float:
        """Payoff if the option is exercised at time t with spot s."""
        pass

    def analytic_value(self, s: float) -> float:
        raise UnsupportedOperationError("Black-Scholes valuation", type(self).__name__)

    def lattice_terms(self) -> Optional[VanillaTerms]:
        """Kernel description of the payoff, None when it needs Python callbacks."""
        return None

    def lattice_value(
        self,
        s: float,
        n_steps: int = DEFAULT_LATTICE_STEPS,
        dividend_yield: Optional[float] = None,
    ) -> float:
        return lattice_value(self, s, n_steps, dividend_yield)

    def value(self, s: float) -> float:
        """Preferred value: closed form where the contract is European, else the lattice."""
        return self.lattice_value(s)


@dataclass(frozen=True)
class EuropeanCall(Contract):
    """Right to buy at K, exercisable at T only."""

    def exercise_value(self, s: float, t: float) -> float:
        if t != self.T:
            return 0.0
        return max(0.0, s - self.K)

    def analytic_value(self, s: float) -> float:
        _check_spot(s)
        return black_scholes(s, self.K, self.T, self.r, self.sigma, "call")

    def lattice_terms(self) -> Optional[VanillaTerms]:
        return VanillaTerms(OptionType.CALL, ExerciseStyle.EUROPEAN)

    def value(self, s: float) -> float:
        return self.analytic_value(s)


@dataclass(frozen=True)
class EuropeanPut(Contract):
    """Right to sell at K, exercisable at T only."""

    def exercise_value(self, s: float, t: float) -> float:
        if t != self.T:
            return 0.0
        return max(0.0, self.K - s)

    def analytic_value(self, s: float) -> float:
        _check_spot(s)
        return black_scholes(s, self.K, self.T, self.r, self.sigma, "put")

    def lattice_terms(self) -> Optional[VanillaTerms]:
        return VanillaTerms(OptionType.PUT, ExerciseStyle.EUROPEAN)

    def value(self, s: float) -> float:
        return self.analytic_value(s)


@dataclass(frozen=True)
class AmericanCall(Contract):
    """
    Call exercisable at any time up to T.

    ``analytic_value`` returns the Black-Scholes call price, which is exact
    without dividends since early exercise of a call is then never optimal.
    """

    def exercise_value(self, s: float, t: float) -> float:
        return max(0.0, s - self.K)

    def analytic_value(self, s: float) -> float:
        _check_spot(s)
        return black_scholes(s, self.K, self.T, self.r, self.sigma, "call")

    def lattice_terms(self) -> Optional[VanillaTerms]:
        return VanillaTerms(OptionType.CALL, ExerciseStyle.AMERICAN)


@dataclass(frozen=True)
class AmericanPut(Contract):
    """
    Put exercisable at any time up to T.

    ``analytic_value`` ignores the early exercise premium and returns the
    European Black-Scholes put; use ``lattice_value`` for the American price.
    """

    def exercise_value(self, s: float, t: float) -> float:
        return max(0.0, self.K - s)

    def analytic_value(self, s: float) -> float:
        _check_spot(s)
        return black_scholes(s, self.K, self.T, self.r, self.sigma, "put")

    def lattice_terms(self) -> Optional[VanillaTerms]:
        return VanillaTerms(OptionType.PUT, ExerciseStyle.AMERICAN)


@dataclass(frozen=True)
class _KnockOut(Contract):
    B: float  # Barrier level

    def __post_init__(self):
        super().__post_init__()
        _check_finite("B", self.B)
        if self.B <= 0:
            raise InvalidArgumentError(f"Barrier must be positive, got {self.B}")

    @property
    def is_down_and_out(self) -> bool:
        return self.K > self.B

    def is_across_barrier(self, s: float) -> bool:
        # down-and-out when strike sits above the barrier, up-and-out otherwise
        if self.is_down_and_out:
            return s < self.B
        return s > self.B


@dataclass(frozen=True)
class KnockOutCall(_KnockOut):
    """European call that pays nothing if spot at maturity is across the barrier."""

    def exercise_value(self, s: float, t: float) -> float:
        if t != self.T:
            return 0.0
        if self.is_across_barrier(s):
            return 0.0
        return max(0.0, s - self.K)

    def analytic_value(self, s: float) -> float:
        _check_spot(s)
        return knock_out_terminal(s, self.K, self.B, self.T, self.r, self.sigma, "call")

    def lattice_terms(self) -> Optional[VanillaTerms]:
        return VanillaTerms(OptionType.CALL, ExerciseStyle.EUROPEAN, float(self.B))


@dataclass(frozen=True)
class KnockOutPut(_KnockOut):
    """European put that pays nothing if spot at maturity is across the barrier."""

    def exercise_value(self, s: float, t: float) -> float:
        if t != self.T:
            return 0.0
        if self.is_across_barrier(s):
            return 0.0
        return max(0.0, self.K - s)

    def analytic_value(self, s: float) -> float:
        _check_spot(s)
        return knock_out_terminal(s, self.K, self.B, self.T, self.r, self.sigma, "put")

    def lattice_terms(self) -> Optional[VanillaTerms]:
        return VanillaTerms(OptionType.PUT, ExerciseStyle.EUROPEAN, float(self.B))


@dataclass(frozen=True)
class CompoundCall(Contract):
    """
    Call on a European call.

    Gives the right at T to buy, for K, a European call with strike
    ``underlying_strike`` expiring ``underlying_expiry`` years from today.
    The underlying call is valued at T with an ``underlying_steps`` tree.
    """

    underlying_strike: float = COMPOUND_UNDERLYING_STRIKE
    underlying_expiry: float = COMPOUND_UNDERLYING_EXPIRY
    underlying_steps: int = COMPOUND_UNDERLYING_STEPS

    def __post_init__(self):
        super().__post_init__()
        _check_finite("underlying_strike", self.underlying_strike)
        _check_finite("underlying_expiry", self.underlying_expiry)
        _check_steps("underlying_steps", self.underlying_steps)
        if self.underlying_strike <= 0:
            raise InvalidArgumentError(
                f"Underlying strike must be positive, got {self.underlying_strike}"
            )
        if self.underlying_expiry <= self.T:
            raise InvalidArgumentError(
                f"Underlying expiry {self.underlying_expiry} must be after T={self.T}"
            )

    def underlying(self) -> EuropeanCall:
        underlying = EuropeanCall(
            self.underlying_strike, self.underlying_expiry - self.T, self.sigma, self.r
        )
        logger.debug("Compound underlying: %s", underlying)
        return underlying

    def exercise_value(self, s: float, t: float) -> float:
        if t != self.T:
            return 0.0
        underlying_value = self.underlying().lattice_value(s, self.underlying_steps)
        return max(0.0, underlying_value - self.K)


@dataclass(frozen=True)
class ReloadableCall(Contract):
    """
    American call that hands back new calls on exercise.

    Exercising before T pays the call payoff plus K / s fresh European calls
    with the same strike and the remaining maturity, i.e. as many options as
    shares it takes to pay the strike.
    """

    reload_steps: int = RELOAD_STEPS

    def __post_init__(self):
        super().__post_init__()
        _check_steps("reload_steps", self.reload_steps)

    def exercise_value(self, s: float, t: float) -> float:
        call_part = max(0.0, s - self.K)
        if t == self.T:
            return call_part
        new_call = EuropeanCall(self.K, self.T - t, self.sigma, self.r)
        logger.debug("Reload at t=%.6f s=%.6f: %s", t, s, new_call)
        return call_part + (self.K / s) * new_call.lattice_value(s, self.reload_steps)


@dataclass(frozen=True)
class ExtendibleCall(Contract):
    """
    American call that may be extended instead of exercised.

    The holder takes the better of exercising now and holding a call with
    strike K + 1 over the same maturity, valued with Black-Scholes.
    """

    def extended(self) -> AmericanCall:
        extended = AmericanCall(self.K + 1, self.T, self.sigma, self.r)
        logger.debug("Extension: %s", extended)
        return extended

    def exercise_value(self, s: float, t: float) -> float:
        return max(s - self.K, self.extended().analytic_value(s))


CONTRACT_TYPES: Dict[str, Type[Contract]] = {
    "european_call": EuropeanCall,
    "european_put": EuropeanPut,
    "american_call": AmericanCall,
    "american_put": AmericanPut,
    "knock_out_call": KnockOutCall,
    "knock_out_put": KnockOutPut,
    "compound_call": CompoundCall,
    "reloadable_call": ReloadableCall,
    "extendible_call": ExtendibleCall,
}


def create_contract(
    kind: str,
    K: float,
    T: float,
    sigma: float,
    r: float,
    B: Optional[float] = None,
    **extra,
) -> Contract:
    """
    Build a contract by name.

    Args:
        kind: One of ``CONTRACT_TYPES``.
        K, T, sigma, r: Strike, maturity, volatility, risk-free rate.
        B: Barrier, required for knock-out kinds only.
        **extra: Variant-specific fields (e.g. ``underlying_strike``).

    Raises:
        UnknownContractTypeError: If ``kind`` is not registered.
        InvalidArgumentError: On invalid parameters.
    """
    try:
        cls = CONTRACT_TYPES[kind]
    except KeyError:
        raise UnknownContractTypeError(kind, list(CONTRACT_TYPES)) from None

    if issubclass(cls, _KnockOut):
        if B is None:
            raise InvalidArgumentError(f"Contract type '{kind}' requires a barrier B")
        args = (K, T, sigma, r, B)
    elif B is not None:
        raise InvalidArgumentError(f"Contract type '{kind}' does not take a barrier")
    else:
        args = (K, T, sigma, r)
    try:
        return cls(*args, **extra)
    except TypeError as e:
        raise InvalidArgumentError(f"Invalid parameters for '{kind}': {e}") from e
