import numpy as np
import pytest

from option_lattice.exceptions import InvalidArgumentError
from option_lattice.pricing_models.black_scholes import (
    black_scholes,
    digital_cash_or_nothing,
    knock_out_terminal,
    normal_cdf,
)


def test_call_price_matches_known_value():
    # Known analytical case
    price = black_scholes(S=100, K=100, T=1, r=0.05, sigma=0.2, option_type="call")
    assert pytest.approx(price, 0.01) == 10.45


def test_put_price_matches_known_value():
    price = black_scholes(S=100, K=100, T=1, r=0.05, sigma=0.2, option_type="put")
    assert pytest.approx(price, 0.01) == 5.57


def test_normal_cdf_reference_points():
    assert normal_cdf(0.0) == pytest.approx(0.5)
    assert normal_cdf(1.96) == pytest.approx(0.9750021, abs=1e-7)
    assert normal_cdf(-1.96) == pytest.approx(1 - 0.9750021, abs=1e-7)


def test_normal_cdf_keeps_precision_in_lower_tail():
    # 1 - N(10) would round to zero; erfc keeps the tail
    assert normal_cdf(-10.0) == pytest.approx(7.6198530e-24, rel=1e-6)


def test_expired_option_returns_intrinsic():
    assert black_scholes(110, 100, 0.0, 0.05, 0.2, "call") == 10.0
    assert black_scholes(110, 100, 0.0, 0.05, 0.2, "put") == 0.0
    assert black_scholes(90, 100, 0.0, 0.05, 0.2, "put") == 10.0


@pytest.mark.parametrize(
    "S, K, T, sigma",
    [
        (0.0, 100, 1.0, 0.2),
        (100, 0.0, 1.0, 0.2),
        (100, 100, -1.0, 0.2),
        (100, 100, 1.0, 0.0),
    ],
)
def test_invalid_inputs_raise(S, K, T, sigma):
    with pytest.raises(InvalidArgumentError):
        black_scholes(S, K, T, 0.05, sigma, "call")


def test_invalid_option_type_raises():
    with pytest.raises(InvalidArgumentError, match="option_type"):
        black_scholes(100, 100, 1.0, 0.05, 0.2, "straddle")


def test_call_increasing_and_put_decreasing_in_spot():
    spots = np.linspace(40, 200, 33)
    calls = np.array([black_scholes(s, 100, 1.0, 0.05, 0.2, "call") for s in spots])
    puts = np.array([black_scholes(s, 100, 1.0, 0.05, 0.2, "put") for s in spots])

    assert np.all(np.diff(calls) > 0)
    assert np.all(np.diff(puts) < 0)


def test_dividend_yield_lowers_call_value():
    no_div = black_scholes(100, 100, 1.0, 0.05, 0.2, "call")
    with_div = black_scholes(100, 100, 1.0, 0.05, 0.2, "call", q=0.03)
    assert with_div < no_div


class TestKnockOutTerminal:
    S, T, r, sigma = 100.0, 1.0, 0.05, 0.2

    def test_down_and_out_call_is_vanilla(self):
        # strike above barrier: knocked-out region is already out of the money
        price = knock_out_terminal(self.S, 100, 3, self.T, self.r, self.sigma, "call")
        assert price == black_scholes(self.S, 100, self.T, self.r, self.sigma, "call")

    def test_up_and_out_put_is_vanilla(self):
        price = knock_out_terminal(self.S, 100, 130, self.T, self.r, self.sigma, "put")
        assert price == black_scholes(self.S, 100, self.T, self.r, self.sigma, "put")

    def test_up_and_out_call_matches_replication(self):
        K, B = 100.0, 120.0
        expected = (
            black_scholes(self.S, K, self.T, self.r, self.sigma, "call")
            - black_scholes(self.S, B, self.T, self.r, self.sigma, "call")
            - (B - K) * digital_cash_or_nothing(self.S, B, self.T, self.r, self.sigma, "call")
        )
        price = knock_out_terminal(self.S, K, B, self.T, self.r, self.sigma, "call")

        assert price == pytest.approx(expected)
        assert 0 < price < black_scholes(self.S, K, self.T, self.r, self.sigma, "call")

    def test_down_and_out_put_below_vanilla(self):
        price = knock_out_terminal(self.S, 100, 80, self.T, self.r, self.sigma, "put")
        vanilla = black_scholes(self.S, 100, self.T, self.r, self.sigma, "put")
        assert 0 < price < vanilla

    def test_expired_up_and_out_call(self):
        assert knock_out_terminal(110, 100, 120, 0.0, self.r, self.sigma, "call") == pytest.approx(10.0)
        assert knock_out_terminal(125, 100, 120, 0.0, self.r, self.sigma, "call") == pytest.approx(0.0)

    def test_non_positive_barrier_raises(self):
        with pytest.raises(InvalidArgumentError, match="Barrier"):
            knock_out_terminal(self.S, 100, 0.0, self.T, self.r, self.sigma, "call")
