"""Interface for option-pricing engines."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from opcalc.options.types import OptionResults, PricingReport

if TYPE_CHECKING:
    from opcalc.options.option import BSOption


@runtime_checkable
class PriceModel(Protocol):
    """Minimum pricing capability: call and put values for one record."""

    def values(self, option: BSOption) -> OptionResults:
        """Return call and put values."""


@runtime_checkable
class GreeksModel(Protocol):
    """Extension for engines that also provide sensitivities."""

    def price_and_greeks(self, option: BSOption) -> PricingReport:
        """Return values and sensitivities for both sides."""
