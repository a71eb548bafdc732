"""Step-by-step construction of `BSOption` records.

The builder accumulates inputs in any order and checks at `finalize()` that
every required step was taken. Only the payout rate is optional.

Example:
    >>> option = (
    ...     create_option()
    ...     .with_asset_price(100.0)
    ...     .with_strike(105.0)
    ...     .with_interest(0.008)
    ...     .with_volatility(0.23)
    ...     .with_current_time(1_606_780_800)  # 2020-12-01 00:00:00 UTC
    ...     .with_maturity_time(1_610_668_800)  # 2021-01-15 00:00:00 UTC
    ...     .finalize()
    ... )
    >>> round(option.time_to_maturity, 4)
    0.1233
"""

from __future__ import annotations

import logging

from opcalc.options.option import BSOption

logger = logging.getLogger(__name__)

# Checked in this order; the first missing step is reported.
REQUIRED_STEPS: tuple[tuple[str, str], ...] = (
    ("time_curr", "with_current_time"),
    ("time_maturity", "with_maturity_time"),
    ("asset_price", "with_asset_price"),
    ("strike", "with_strike"),
    ("interest", "with_interest"),
    ("volatility", "with_volatility"),
)


class OptionMissingBuildStepError(ValueError):
    """Raised by `BSOptionBuilder.finalize()` when a required step was skipped."""

    def __init__(self, missing_step_name: str) -> None:
        self.missing_step_name = missing_step_name
        super().__init__(f"Did not call {missing_step_name} before creating BSOption.")


class BSOptionBuilder:
    """Mutable, chainable configuration for one `BSOption`.

    Each `with_*` step stores its input and returns the builder itself.
    """

    def __init__(self) -> None:
        self.time_curr: int | None = None
        self.time_maturity: int | None = None
        self.asset_price: float | None = None
        self.strike: float | None = None
        self.interest: float | None = None
        self.volatility: float | None = None
        self.payout_rate: float = 0.0

    def with_current_time(self, time_curr: int) -> BSOptionBuilder:
        """Set the valuation time, a timestamp in seconds."""
        self.time_curr = time_curr
        return self

    def with_maturity_time(self, time_maturity: int) -> BSOptionBuilder:
        """Set the maturity time, a timestamp in seconds."""
        self.time_maturity = time_maturity
        return self

    def with_asset_price(self, asset_price: float) -> BSOptionBuilder:
        self.asset_price = asset_price
        return self

    def with_strike(self, strike: float) -> BSOptionBuilder:
        self.strike = strike
        return self

    def with_interest(self, interest: float) -> BSOptionBuilder:
        self.interest = interest
        return self

    def with_volatility(self, volatility: float) -> BSOptionBuilder:
        self.volatility = volatility
        return self

    def with_payout_rate(self, payout_rate: float) -> BSOptionBuilder:
        """Set the payout rate. Optional, defaults to 0.0."""
        self.payout_rate = payout_rate
        return self

    def missing_steps(self) -> list[str]:
        """Return every required step not yet taken, in check order."""
        return [step for attr, step in REQUIRED_STEPS if getattr(self, attr) is None]

    def finalize(self) -> BSOption:
        """Create the option, or raise `OptionMissingBuildStepError`.

        Raises:
            OptionMissingBuildStepError: naming the first missing required step.
        """
        missing = self.missing_steps()
        if missing:
            logger.debug("Cannot finalize BSOption, missing steps: %s", missing)
            raise OptionMissingBuildStepError(missing[0])

        return BSOption(
            time_curr=self.time_curr,
            time_maturity=self.time_maturity,
            asset_price=self.asset_price,
            strike=self.strike,
            interest=self.interest,
            volatility=self.volatility,
            payout_rate=self.payout_rate,
        )


def create_option() -> BSOptionBuilder:
    """Start building a `BSOption`; the order of `with_*` calls does not matter."""
    return BSOptionBuilder()
