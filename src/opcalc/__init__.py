"""Black-Scholes option calculator: values and Greeks for European options."""

from opcalc.options import (
    BlackScholesPricer,
    BSOption,
    BSOptionBuilder,
    OptionMissingBuildStepError,
    PricingReport,
    create_option,
)

__version__ = "0.2.1"

__all__ = [
    "BSOption",
    "BSOptionBuilder",
    "BlackScholesPricer",
    "OptionMissingBuildStepError",
    "PricingReport",
    "create_option",
]
