#!/usr/bin/env python
"""Price one European option and print its value and Greeks as JSON."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from typing import Any

from opcalc.apps._cli import add_print_config_arg, dump_json, print_config
from opcalc.cli import (
    DEFAULT_LOGGING,
    add_config_arg,
    add_logging_args,
    build_config,
    collect_logging_overrides,
    setup_logging_from_config,
)
from opcalc.options import (
    BlackScholesPricer,
    BSOption,
    OptionMissingBuildStepError,
    PricingReport,
    create_option,
)
from opcalc.options.engines import (
    PRICE_BUMP,
    THETA_STEP_SECONDS,
    VEGA_UNIT,
    VOLATILITY_BUMP,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": DEFAULT_LOGGING,
    "option": {
        "time_curr": None,
        "time_maturity": None,
        "asset_price": None,
        "strike": None,
        "interest": None,
        "volatility": None,
        "payout_rate": 0.0,
    },
    "pricer": {
        "price_bump": PRICE_BUMP,
        "volatility_bump": VOLATILITY_BUMP,
        "vega_unit": VEGA_UNIT,
        "theta_step_seconds": THETA_STEP_SECONDS,
    },
    "output": {
        "indent": 2,
    },
}

_OPTION_KEYS: tuple[str, ...] = tuple(DEFAULT_CONFIG["option"])


def to_timestamp(value: Any) -> int:
    """Convert epoch seconds, a date/datetime, or an ISO-8601 string to seconds.

    Naive datetimes and plain dates are read as UTC.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)

    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
        try:
            value = datetime.fromisoformat(text)
        except ValueError as exc:
            raise ValueError(f"Invalid timestamp: {value!r}") from exc

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    if isinstance(value, date):
        return int(datetime.combine(value, time(), tzinfo=timezone.utc).timestamp())

    raise ValueError(f"Invalid timestamp: {value!r}")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Black-Scholes value and Greeks for a European option."
    )
    add_config_arg(parser)
    add_logging_args(parser)
    add_print_config_arg(parser)

    parser.add_argument(
        "--time-curr",
        type=str,
        default=None,
        help="Valuation time: epoch seconds or ISO-8601 (UTC if naive).",
    )
    parser.add_argument(
        "--time-maturity",
        type=str,
        default=None,
        help="Maturity time: epoch seconds or ISO-8601 (UTC if naive).",
    )
    parser.add_argument("--asset-price", type=float, default=None)
    parser.add_argument("--strike", type=float, default=None)
    parser.add_argument(
        "--interest",
        type=float,
        default=None,
        help="Simple annual risk-free rate in decimals (0.005 = 0.5%%).",
    )
    parser.add_argument(
        "--volatility",
        type=float,
        default=None,
        help="Annualized implied volatility in decimals (0.23 = 23%%).",
    )
    parser.add_argument("--payout-rate", type=float, default=None)
    parser.add_argument("--indent", type=int, default=None)
    return parser.parse_args(argv)


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}

    option_cfg = {
        key: getattr(args, key)
        for key in _OPTION_KEYS
        if getattr(args, key) is not None
    }
    if option_cfg:
        overrides["option"] = option_cfg

    if args.indent is not None:
        overrides["output"] = {"indent": args.indent}

    logging_overrides = collect_logging_overrides(args)
    if logging_overrides:
        overrides["logging"] = logging_overrides

    return overrides


def build_option(option_cfg: Mapping[str, Any]) -> BSOption:
    """Run the builder over an `option` config section.

    Raises:
        OptionMissingBuildStepError: if a required input is missing.
        ValueError: if a timestamp cannot be parsed.
    """
    builder = create_option()
    if option_cfg.get("time_curr") is not None:
        builder.with_current_time(to_timestamp(option_cfg["time_curr"]))
    if option_cfg.get("time_maturity") is not None:
        builder.with_maturity_time(to_timestamp(option_cfg["time_maturity"]))
    if option_cfg.get("asset_price") is not None:
        builder.with_asset_price(float(option_cfg["asset_price"]))
    if option_cfg.get("strike") is not None:
        builder.with_strike(float(option_cfg["strike"]))
    if option_cfg.get("interest") is not None:
        builder.with_interest(float(option_cfg["interest"]))
    if option_cfg.get("volatility") is not None:
        builder.with_volatility(float(option_cfg["volatility"]))
    if option_cfg.get("payout_rate") is not None:
        builder.with_payout_rate(float(option_cfg["payout_rate"]))
    return builder.finalize()


def build_pricer(pricer_cfg: Mapping[str, Any] | None) -> BlackScholesPricer:
    pricer_cfg = pricer_cfg or {}
    return BlackScholesPricer(
        price_bump=float(pricer_cfg.get("price_bump", PRICE_BUMP)),
        volatility_bump=float(pricer_cfg.get("volatility_bump", VOLATILITY_BUMP)),
        vega_unit=float(pricer_cfg.get("vega_unit", VEGA_UNIT)),
        theta_step_seconds=int(
            pricer_cfg.get("theta_step_seconds", THETA_STEP_SECONDS)
        ),
    )


def price_from_config(config: Mapping[str, Any]) -> tuple[BSOption, PricingReport]:
    option = build_option(config.get("option", {}))
    pricer = build_pricer(config.get("pricer"))
    return option, pricer.price_and_greeks(option)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    config = build_config(DEFAULT_CONFIG, args.config, _build_overrides(args))
    if args.print_config:
        print_config(config)
        return

    setup_logging_from_config(config.get("logging"))
    logger = logging.getLogger(__name__)

    try:
        option, report = price_from_config(config)
    except OptionMissingBuildStepError as exc:
        logger.error("Incomplete option definition: %s", exc)
        raise SystemExit(2) from exc

    logger.info("Valuation time: %s", option.time_curr)
    logger.info("Maturity time:  %s", option.time_maturity)
    logger.info("Years to expiry: %.6f", option.time_to_maturity)

    payload = {
        "option": {
            "time_curr": option.time_curr,
            "time_maturity": option.time_maturity,
            "time_to_maturity": option.time_to_maturity,
            "asset_price": option.asset_price,
            "strike": option.strike,
            "interest": option.interest,
            "volatility": option.volatility,
            "payout_rate": option.payout_rate,
        },
        **report.to_dict(),
    }
    print(dump_json(payload, indent=config.get("output", {}).get("indent", 2)))


if __name__ == "__main__":
    main()
