from __future__ import annotations

import pytest

from opcalc.options import BSOption

# 2020-12-01 00:00:00 UTC -> 2021-01-15 00:00:00 UTC
REFERENCE_TIME_CURR = 1_606_780_800
REFERENCE_TIME_MATURITY = 1_610_668_800


@pytest.fixture
def reference_option() -> BSOption:
    return BSOption(
        time_curr=REFERENCE_TIME_CURR,
        time_maturity=REFERENCE_TIME_MATURITY,
        asset_price=100.0,
        strike=105.0,
        interest=0.005,
        volatility=0.23,
        payout_rate=0.0,
    )


@pytest.fixture
def payout_option() -> BSOption:
    return BSOption(
        time_curr=REFERENCE_TIME_CURR,
        time_maturity=REFERENCE_TIME_MATURITY + 90 * 86_400,
        asset_price=102.0,
        strike=100.0,
        interest=0.03,
        volatility=0.25,
        payout_rate=0.015,
    )
