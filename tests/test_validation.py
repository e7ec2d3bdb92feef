import logging

import pytest

from option_lattice.exceptions import InvalidArgumentError, UnsupportedOperationError
from option_lattice.pricing_models.black_scholes import black_scholes
from option_lattice.pricing_models.contracts import (
    AmericanPut,
    CompoundCall,
    EuropeanCall,
    EuropeanPut,
)
from option_lattice.pricing_models.validation import (
    lattice_convergence_table,
    validate_arbitrage_bounds,
    validate_put_call_parity,
)
from option_lattice.utils.decorators.timing import timeit


def test_convergence_table_columns_and_shrinking_error():
    table = lattice_convergence_table(EuropeanCall(100, 1.0, 0.2, 0.05), 100.0)

    assert list(table.columns) == ["n_steps", "lattice", "analytic", "abs_error", "scaled_error"]
    assert list(table["n_steps"]) == [50, 200, 1000]
    assert table["abs_error"].is_monotonic_decreasing
    # error shrinks roughly like 1/N
    assert table["scaled_error"].max() < 5 * table["scaled_error"].min()


def test_convergence_table_with_dividend_yield():
    table = lattice_convergence_table(EuropeanCall(100, 1.0, 0.2, 0.05), 100.0, dividend_yield=0.03)
    expected = black_scholes(100.0, 100.0, 1.0, 0.05, 0.2, "call", q=0.03)

    assert table["analytic"].iloc[0] == pytest.approx(expected)
    assert table["analytic"].iloc[0] == pytest.approx(8.6525, abs=1e-3)
    assert table["abs_error"].iloc[-1] < 0.01
    assert table["abs_error"].iloc[-1] < table["abs_error"].iloc[0]


def test_convergence_table_with_dividend_yield_needs_european_payoff():
    with pytest.raises(InvalidArgumentError, match="dividend yield"):
        lattice_convergence_table(AmericanPut(100, 1.0, 0.2, 0.05), 100.0, steps=(10,), dividend_yield=0.03)


def test_convergence_table_needs_closed_form():
    with pytest.raises(UnsupportedOperationError):
        lattice_convergence_table(CompoundCall(2.5, 0.25, 0.25, 0.01), 80.0, steps=(10,))


@pytest.mark.parametrize("spot", [60.0, 100.0, 140.0])
def test_lattice_prices_respect_arbitrage_bounds(spot):
    call = EuropeanCall(100, 1.0, 0.2, 0.05).lattice_value(spot, 300)
    put = EuropeanPut(100, 1.0, 0.2, 0.05).lattice_value(spot, 300)

    assert validate_arbitrage_bounds(call, spot, 100, 1.0, 0.05, "call")[0]
    assert validate_arbitrage_bounds(put, spot, 100, 1.0, 0.05, "put")[0]


def test_arbitrage_bounds_flag_violation():
    is_valid, message = validate_arbitrage_bounds(150.0, 100, 100, 1.0, 0.05, "call")
    assert not is_valid
    assert "above upper bound" in message


def test_put_call_parity_detects_mismatch():
    is_valid, error = validate_put_call_parity(10.45, 1.0, 100, 100, 1.0, 0.05)
    assert not is_valid
    assert error > 4


def test_american_put_not_below_intrinsic():
    for spot in (50.0, 80.0, 99.0):
        assert AmericanPut(100, 1.0, 0.2, 0.05).lattice_value(spot, 200) >= 100 - spot


def test_timeit_logs_duration(caplog):
    @timeit
    def price():
        return EuropeanCall(100, 1.0, 0.2, 0.05).lattice_value(100.0, 50)

    with caplog.at_level(logging.INFO, logger="option_lattice.utils.decorators.timing"):
        value = price()

    assert value > 0
    assert "[timing] price" in caplog.text
