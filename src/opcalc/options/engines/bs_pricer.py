"""Black-Scholes pricing engine.

Value and delta come from the closed-form formulas. Gamma, vega and theta are
obtained by bumping one input on a private copy of the record, revaluing the
closed-form primitive and taking a divided difference, so every sensitivity
stays consistent with the value formula it is derived from.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from opcalc.config.constants import SECONDS_PER_DAY
from opcalc.options.models.black_scholes import bs_deltas, bs_values
from opcalc.options.types import OptionResults, PricingReport

if TYPE_CHECKING:
    from opcalc.options.option import BSOption

# Minimum price movement unit used for gamma.
PRICE_BUMP = 0.001
VOLATILITY_BUMP = 0.0001
# Vega is reported per 1 vol point.
VEGA_UNIT = 0.01
THETA_STEP_SECONDS = SECONDS_PER_DAY


@dataclass(frozen=True)
class BlackScholesPricer:
    """Stateless Black-Scholes pricer over `BSOption` records.

    Sign conventions:
    - gamma: `(delta(S + price_bump) - delta(S)) / price_bump`
    - vega: `(call(vol + volatility_bump) - call(vol)) / volatility_bump`
      scaled to `vega_unit` (one vol point), shared by call and put
    - theta: `value(time_curr + one day) - value(time_curr)`, i.e. the value
      change per day forward (negative for a decaying option)
    """

    price_bump: float = PRICE_BUMP
    volatility_bump: float = VOLATILITY_BUMP
    vega_unit: float = VEGA_UNIT
    theta_step_seconds: int = THETA_STEP_SECONDS

    def __post_init__(self) -> None:
        if self.price_bump <= 0:
            raise ValueError("price_bump must be > 0")
        if self.volatility_bump <= 0:
            raise ValueError("volatility_bump must be > 0")
        if self.vega_unit <= 0:
            raise ValueError("vega_unit must be > 0")
        if self.theta_step_seconds <= 0:
            raise ValueError("theta_step_seconds must be > 0")

    def values(self, option: BSOption) -> OptionResults:
        return bs_values(
            S=option.asset_price,
            K=option.strike,
            T=option.time_to_maturity,
            sigma=option.volatility,
            interest=option.interest,
            payout_rate=option.payout_rate,
        )

    def deltas(self, option: BSOption) -> OptionResults:
        return bs_deltas(
            S=option.asset_price,
            K=option.strike,
            T=option.time_to_maturity,
            sigma=option.volatility,
            interest=option.interest,
            payout_rate=option.payout_rate,
        )

    def gammas(self, option: BSOption) -> OptionResults:
        bumped = replace(option, asset_price=option.asset_price + self.price_bump)
        base = self.deltas(option)
        shifted = self.deltas(bumped)
        return OptionResults(
            call=(shifted.call - base.call) / self.price_bump,
            put=(shifted.put - base.put) / self.price_bump,
        )

    def vegas(self, option: BSOption) -> OptionResults:
        bumped = replace(option, volatility=option.volatility + self.volatility_bump)
        # Vega is identical for calls and puts; both use the call difference.
        diff = self.values(bumped).call - self.values(option).call
        vega = diff / self.volatility_bump * self.vega_unit
        return OptionResults(call=vega, put=vega)

    def thetas(self, option: BSOption) -> OptionResults:
        # replace() rebuilds the record, so time_to_maturity is re-derived.
        bumped = replace(option, time_curr=option.time_curr + self.theta_step_seconds)
        base = self.values(option)
        shifted = self.values(bumped)
        return OptionResults(
            call=shifted.call - base.call,
            put=shifted.put - base.put,
        )

    def price_and_greeks(self, option: BSOption) -> PricingReport:
        return PricingReport.from_results(
            values=self.values(option),
            deltas=self.deltas(option),
            gammas=self.gammas(option),
            vegas=self.vegas(option),
            thetas=self.thetas(option),
        )
