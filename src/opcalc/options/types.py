"""Shared option-pricing dataclasses and aliases."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum


class OptionType(StrEnum):
    """Canonical option side labels used across pricing code."""

    CALL = "call"
    PUT = "put"


@dataclass(frozen=True, slots=True)
class OptionResults:
    """One quantity evaluated for both sides of the same contract."""

    call: float
    put: float

    def side(self, option_type: OptionType | str) -> float:
        """Return the value for `option_type` ('call' or 'put')."""
        return self.call if OptionType(option_type) == OptionType.CALL else self.put


@dataclass(frozen=True, slots=True)
class OptionOutputs:
    """Value and sensitivities for one option side."""

    value: float
    delta: float
    gamma: float
    vega: float
    theta: float

    def to_dict(self) -> dict[str, float]:
        return {
            "value": self.value,
            "delta": self.delta,
            "gamma": self.gamma,
            "vega": self.vega,
            "theta": self.theta,
        }


@dataclass(frozen=True, slots=True)
class PricingReport:
    """Call and put outputs for one option record.

    Units:
    - `vega`: value change for a 1 vol-point (0.01) move
    - `theta`: value change when valuation time moves one day forward
    """

    call: OptionOutputs
    put: OptionOutputs

    @classmethod
    def from_results(
        cls,
        *,
        values: OptionResults,
        deltas: OptionResults,
        gammas: OptionResults,
        vegas: OptionResults,
        thetas: OptionResults,
    ) -> PricingReport:
        """Assemble a report from per-quantity call/put pairs."""
        return cls(
            call=OptionOutputs(
                value=values.call,
                delta=deltas.call,
                gamma=gammas.call,
                vega=vegas.call,
                theta=thetas.call,
            ),
            put=OptionOutputs(
                value=values.put,
                delta=deltas.put,
                gamma=gammas.put,
                vega=vegas.put,
                theta=thetas.put,
            ),
        )

    @classmethod
    def from_flat(cls, data: Mapping[str, float]) -> PricingReport:
        """Build a report from flat keys such as `call_value` or `put_theta`."""
        sides = {}
        for side in OptionType:
            sides[side.value] = OptionOutputs(
                value=float(data[f"{side}_value"]),
                delta=float(data[f"{side}_delta"]),
                gamma=float(data[f"{side}_gamma"]),
                vega=float(data[f"{side}_vega"]),
                theta=float(data[f"{side}_theta"]),
            )
        return cls(**sides)

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {"call": self.call.to_dict(), "put": self.put.to_dict()}
