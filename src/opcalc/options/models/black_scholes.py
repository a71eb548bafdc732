"""Closed-form Black-Scholes-Merton value and delta for European options.

Rates are supplied as simple annual decimals and converted to continuous
compounding before use. Inputs are evaluated as `numpy.float64` with
divide/invalid warnings silenced, so degenerate contracts (zero strike,
volatility or time to maturity) produce IEEE-754 special values instead of
raising.
"""

from __future__ import annotations

import numpy as np
from scipy.stats import norm

from opcalc.options.types import OptionResults


def continuous_rate(rate: float) -> float:
    """Convert a simple annual rate to its continuously-compounded equivalent."""
    return float(np.log1p(rate))


def normcdf(x: float) -> float:
    """Standard normal cumulative distribution function."""
    return float(norm.cdf(x))


def bs_d1_d2(
    S: float,
    K: float,
    T: float,
    sigma: float,
    r: float = 0.0,
    q: float = 0.0,
) -> tuple[float, float]:
    """Compute d1 and d2 with continuously-compounded `r` and yield `q`."""
    S, K, T, sigma = (np.float64(x) for x in (S, K, T, sigma))
    with np.errstate(divide="ignore", invalid="ignore"):
        vol_sqrt_t = sigma * np.sqrt(T)
        d1 = (np.log(S / K) + (r - q + 0.5 * sigma**2) * T) / vol_sqrt_t
        d2 = d1 - vol_sqrt_t
    return float(d1), float(d2)


def bs_values(
    S: float,
    K: float,
    T: float,
    sigma: float,
    interest: float = 0.0,
    payout_rate: float = 0.0,
) -> OptionResults:
    """Call and put values; the put follows from put-call parity."""
    r = continuous_rate(interest)
    q = continuous_rate(payout_rate)
    d1, d2 = bs_d1_d2(S, K, T, sigma, r, q)

    S, K, T = np.float64(S), np.float64(K), np.float64(T)
    with np.errstate(divide="ignore", invalid="ignore"):
        discounted_spot = S * np.exp(-q * T)
        discounted_strike = K * np.exp(-r * T)
        call = discounted_spot * normcdf(d1) - discounted_strike * normcdf(d2)
        put = call - discounted_spot + discounted_strike
    return OptionResults(call=float(call), put=float(put))


def bs_deltas(
    S: float,
    K: float,
    T: float,
    sigma: float,
    interest: float = 0.0,
    payout_rate: float = 0.0,
) -> OptionResults:
    """Call and put deltas; put delta = call delta - e^(-qT)."""
    r = continuous_rate(interest)
    q = continuous_rate(payout_rate)
    d1, _ = bs_d1_d2(S, K, T, sigma, r, q)

    with np.errstate(invalid="ignore"):
        payout_discount = np.exp(-q * np.float64(T))
        call = payout_discount * normcdf(d1)
        put = call - payout_discount
    return OptionResults(call=float(call), put=float(put))
