"""Analytical option-pricing models."""

from .black_scholes import (
    bs_d1_d2,
    bs_deltas,
    bs_values,
    continuous_rate,
    normcdf,
)

__all__ = [
    "bs_d1_d2",
    "bs_values",
    "bs_deltas",
    "continuous_rate",
    "normcdf",
]
