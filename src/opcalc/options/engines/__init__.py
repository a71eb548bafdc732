"""Pricing engines over `BSOption` records."""

from .base import GreeksModel, PriceModel
from .bs_pricer import (
    PRICE_BUMP,
    THETA_STEP_SECONDS,
    VEGA_UNIT,
    VOLATILITY_BUMP,
    BlackScholesPricer,
)

__all__ = [
    "PriceModel",
    "GreeksModel",
    "BlackScholesPricer",
    "PRICE_BUMP",
    "VOLATILITY_BUMP",
    "VEGA_UNIT",
    "THETA_STEP_SECONDS",
]
