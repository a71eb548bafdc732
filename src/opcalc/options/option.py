"""Black-Scholes option record.

`BSOption` stores contract and market inputs plus one derived field,
`time_to_maturity`, which is kept in sync with the two timestamps on every
assignment. Pricing queries are delegated to a stateless
`BlackScholesPricer`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from opcalc.config.constants import SECONDS_PER_YEAR
from opcalc.options.engines.bs_pricer import BlackScholesPricer
from opcalc.options.types import PricingReport

_TIME_FIELDS = frozenset({"time_curr", "time_maturity"})
_DEFAULT_PRICER = BlackScholesPricer()


def calc_time_to_maturity(time_curr: int, time_maturity: int) -> float:
    """Years between two epoch-second timestamps on a 365-day year."""
    return (time_maturity - time_curr) / SECONDS_PER_YEAR


@dataclass(slots=True)
class BSOption:
    """European option priced under Black-Scholes-Merton.

    Args:
        time_curr: Valuation time, epoch seconds.
        time_maturity: Expiry time, epoch seconds. Not checked against
            `time_curr`.
        asset_price: Underlying spot price.
        strike: Strike price.
        interest: Simple annual risk-free rate in decimals (0.006 = 0.6%).
        volatility: Annualized implied volatility in decimals (0.2398 = 23.98%).
        payout_rate: Simple annual payout (dividend) yield, defaults to 0.0.

    No range validation is performed. Instances are plain mutable values with
    no internal locking: callers sharing one record across threads must
    synchronize the setters themselves.
    """

    time_curr: int
    time_maturity: int
    asset_price: float
    strike: float
    interest: float
    volatility: float
    payout_rate: float = 0.0
    _time_to_maturity: float = field(init=False, repr=False, compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "time_to_maturity":
            raise AttributeError(
                "time_to_maturity is derived; set time_curr or time_maturity instead"
            )
        object.__setattr__(self, name, value)
        if name in _TIME_FIELDS:
            self._sync_time_to_maturity()

    def _sync_time_to_maturity(self) -> None:
        time_curr = getattr(self, "time_curr", None)
        time_maturity = getattr(self, "time_maturity", None)
        # During __init__ the second timestamp is not assigned yet.
        if time_curr is None or time_maturity is None:
            return
        object.__setattr__(
            self,
            "_time_to_maturity",
            calc_time_to_maturity(time_curr, time_maturity),
        )

    @property
    def time_to_maturity(self) -> float:
        """Years to expiry, derived from `time_curr` and `time_maturity`."""
        return self._time_to_maturity

    # --- Mutators ---

    def set_time_curr(self, new_time_curr: int) -> None:
        self.time_curr = new_time_curr

    def set_time_maturity(self, new_time_maturity: int) -> None:
        self.time_maturity = new_time_maturity

    def set_asset_price(self, new_asset_price: float) -> None:
        self.asset_price = new_asset_price

    def set_strike(self, new_strike: float) -> None:
        self.strike = new_strike

    def set_interest(self, new_interest: float) -> None:
        self.interest = new_interest

    def set_volatility(self, new_volatility: float) -> None:
        self.volatility = new_volatility

    def set_payout_rate(self, new_payout_rate: float) -> None:
        self.payout_rate = new_payout_rate

    # --- Derived quantities ---

    def call_value(self) -> float:
        return _DEFAULT_PRICER.values(self).call

    def put_value(self) -> float:
        return _DEFAULT_PRICER.values(self).put

    def call_delta(self) -> float:
        return _DEFAULT_PRICER.deltas(self).call

    def put_delta(self) -> float:
        return _DEFAULT_PRICER.deltas(self).put

    def call_gamma(self) -> float:
        return _DEFAULT_PRICER.gammas(self).call

    def put_gamma(self) -> float:
        return _DEFAULT_PRICER.gammas(self).put

    def call_vega(self) -> float:
        return _DEFAULT_PRICER.vegas(self).call

    def put_vega(self) -> float:
        return _DEFAULT_PRICER.vegas(self).put

    def call_theta(self) -> float:
        return _DEFAULT_PRICER.thetas(self).call

    def put_theta(self) -> float:
        return _DEFAULT_PRICER.thetas(self).put

    def price_and_greeks(self) -> PricingReport:
        """Return value and all Greeks for both sides."""
        return _DEFAULT_PRICER.price_and_greeks(self)
