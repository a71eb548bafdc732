"""Black-Scholes option record, builder, models and pricing engines."""

from .builder import BSOptionBuilder, OptionMissingBuildStepError, create_option
from .engines import BlackScholesPricer, GreeksModel, PriceModel
from .models import bs_d1_d2, bs_deltas, bs_values, continuous_rate, normcdf
from .option import BSOption, calc_time_to_maturity
from .types import OptionOutputs, OptionResults, OptionType, PricingReport

__all__ = [
    "BSOption",
    "BSOptionBuilder",
    "OptionMissingBuildStepError",
    "create_option",
    "calc_time_to_maturity",
    "OptionType",
    "OptionResults",
    "OptionOutputs",
    "PricingReport",
    "PriceModel",
    "GreeksModel",
    "BlackScholesPricer",
    "bs_d1_d2",
    "bs_values",
    "bs_deltas",
    "continuous_rate",
    "normcdf",
]
