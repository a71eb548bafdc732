import math
from dataclasses import replace

import numpy as np
import pytest
from scipy.stats import norm

from opcalc.options import (
    BlackScholesPricer,
    BSOption,
    GreeksModel,
    OptionResults,
    OptionType,
    PriceModel,
    PricingReport,
    bs_d1_d2,
    continuous_rate,
)


def _discount_factors(option: BSOption) -> tuple[float, float]:
    T = option.time_to_maturity
    spot_factor = math.exp(-continuous_rate(option.payout_rate) * T)
    strike_factor = math.exp(-continuous_rate(option.interest) * T)
    return spot_factor, strike_factor


def test_reference_scenario_values_and_deltas(reference_option: BSOption):
    assert reference_option.call_value() == pytest.approx(1.402645442104692, rel=1e-9)
    assert reference_option.put_value() == pytest.approx(6.338100538847982, rel=1e-9)
    assert reference_option.call_delta() == pytest.approx(0.2890519431809007, rel=1e-9)
    assert reference_option.put_delta() == pytest.approx(-0.7109480568190993, rel=1e-9)


def test_reference_scenario_finite_difference_greeks(reference_option: BSOption):
    assert reference_option.call_gamma() == pytest.approx(0.04232231027889721, rel=1e-6)
    assert reference_option.put_gamma() == pytest.approx(0.042322310279008235, rel=1e-6)
    assert reference_option.call_vega() == pytest.approx(0.12001554434952766, rel=1e-7)
    assert reference_option.put_vega() == pytest.approx(0.12001554434952766, rel=1e-7)
    assert reference_option.call_theta() == pytest.approx(-0.03115177341956965, rel=1e-7)
    assert reference_option.put_theta() == pytest.approx(-0.029717873380988635, rel=1e-7)


@pytest.mark.parametrize("option_fixture", ["reference_option", "payout_option"])
def test_put_call_parity(request, option_fixture: str):
    option: BSOption = request.getfixturevalue(option_fixture)
    spot_factor, strike_factor = _discount_factors(option)

    lhs = option.call_value() - option.put_value()
    rhs = option.asset_price * spot_factor - option.strike * strike_factor

    assert lhs == pytest.approx(rhs, abs=1e-12)


@pytest.mark.parametrize("option_fixture", ["reference_option", "payout_option"])
def test_put_delta_is_call_delta_minus_payout_discount(request, option_fixture: str):
    option: BSOption = request.getfixturevalue(option_fixture)
    spot_factor, _ = _discount_factors(option)

    assert option.put_delta() == option.call_delta() - np.exp(
        -continuous_rate(option.payout_rate) * np.float64(option.time_to_maturity)
    )
    assert option.put_delta() == pytest.approx(option.call_delta() - spot_factor)


@pytest.mark.parametrize("option_fixture", ["reference_option", "payout_option"])
def test_call_and_put_gamma_coincide(request, option_fixture: str):
    option: BSOption = request.getfixturevalue(option_fixture)
    assert option.call_gamma() == pytest.approx(option.put_gamma(), abs=1e-9)


@pytest.mark.parametrize("option_fixture", ["reference_option", "payout_option"])
def test_call_and_put_vega_are_identical(request, option_fixture: str):
    option: BSOption = request.getfixturevalue(option_fixture)
    assert option.call_vega() == option.put_vega()


@pytest.mark.parametrize("option_fixture", ["reference_option", "payout_option"])
def test_finite_difference_greeks_match_analytical(request, option_fixture: str):
    option: BSOption = request.getfixturevalue(option_fixture)
    r = continuous_rate(option.interest)
    q = continuous_rate(option.payout_rate)
    S, T, sigma = option.asset_price, option.time_to_maturity, option.volatility
    d1, _ = bs_d1_d2(S, option.strike, T, sigma, r, q)
    spot_factor, _ = _discount_factors(option)

    analytic_gamma = spot_factor * norm.pdf(d1) / (S * sigma * math.sqrt(T))
    analytic_vega = S * spot_factor * norm.pdf(d1) * math.sqrt(T) * 0.01

    assert option.call_gamma() == pytest.approx(analytic_gamma, rel=1e-3)
    assert option.call_vega() == pytest.approx(analytic_vega, rel=1e-3)


def test_theta_is_value_change_one_day_forward(reference_option: BSOption):
    tomorrow = replace(reference_option, time_curr=reference_option.time_curr + 86_400)

    assert reference_option.call_theta() == (
        tomorrow.call_value() - reference_option.call_value()
    )
    assert reference_option.put_theta() == (
        tomorrow.put_value() - reference_option.put_value()
    )
    # Long options lose value as valuation time moves forward.
    assert reference_option.call_theta() < 0
    assert reference_option.put_theta() < 0


def test_theta_bump_rederives_time_to_maturity(reference_option: BSOption):
    pricer = BlackScholesPricer()
    option = replace(reference_option, time_maturity=reference_option.time_curr + 86_400)

    # One day to expiry: the bumped record sits exactly at expiry.
    thetas = pricer.thetas(option)
    assert thetas.call == pytest.approx(-option.call_value())


def test_pricer_rejects_non_positive_bumps():
    with pytest.raises(ValueError, match="price_bump must be > 0"):
        BlackScholesPricer(price_bump=0.0)
    with pytest.raises(ValueError, match="volatility_bump must be > 0"):
        BlackScholesPricer(volatility_bump=-1e-4)
    with pytest.raises(ValueError, match="vega_unit must be > 0"):
        BlackScholesPricer(vega_unit=0.0)
    with pytest.raises(ValueError, match="theta_step_seconds must be > 0"):
        BlackScholesPricer(theta_step_seconds=0)


def test_pricer_satisfies_price_and_greeks_protocols():
    class ValueOnlyPricer:
        def values(self, option: BSOption) -> OptionResults:
            return OptionResults(call=0.0, put=0.0)

    bs = BlackScholesPricer()
    value_only = ValueOnlyPricer()

    assert isinstance(bs, PriceModel)
    assert isinstance(bs, GreeksModel)
    assert isinstance(value_only, PriceModel)
    assert not isinstance(value_only, GreeksModel)


def test_price_and_greeks_matches_record_queries(payout_option: BSOption):
    report = payout_option.price_and_greeks()

    assert isinstance(report, PricingReport)
    assert report.call.value == payout_option.call_value()
    assert report.put.value == payout_option.put_value()
    assert report.call.delta == payout_option.call_delta()
    assert report.put.delta == payout_option.put_delta()
    assert report.call.gamma == payout_option.call_gamma()
    assert report.put.gamma == payout_option.put_gamma()
    assert report.call.vega == payout_option.call_vega()
    assert report.put.vega == payout_option.put_vega()
    assert report.call.theta == payout_option.call_theta()
    assert report.put.theta == payout_option.put_theta()


def test_report_flat_keys_and_dict(reference_option: BSOption):
    report = reference_option.price_and_greeks()
    flat = {
        f"{side}_{name}": value
        for side, outputs in report.to_dict().items()
        for name, value in outputs.items()
    }

    assert set(report.to_dict()) == {"call", "put"}
    assert PricingReport.from_flat(flat) == report


def test_option_results_side_lookup():
    results = OptionResults(call=1.0, put=-2.0)
    assert results.side(OptionType.CALL) == 1.0
    assert results.side("put") == -2.0
    with pytest.raises(ValueError):
        results.side("straddle")


def test_zero_strike_does_not_raise(reference_option: BSOption):
    reference_option.set_strike(0.0)

    call = reference_option.call_value()
    put = reference_option.put_value()

    # d1 = d2 = +inf: the call collapses to the discounted spot, the put to 0.
    assert call == pytest.approx(reference_option.asset_price)
    assert put == pytest.approx(0.0, abs=1e-12)
    assert reference_option.call_delta() == 1.0


@pytest.mark.parametrize(
    "mutate",
    [
        lambda o: o.set_volatility(0.0),
        lambda o: o.set_time_maturity(o.time_curr),
    ],
    ids=["zero_volatility", "zero_time_to_maturity"],
)
def test_degenerate_zero_over_zero_propagates_nan(mutate):
    # At the money with no carry: ln(S/K) + drift*T == 0 over a zero denominator.
    option = BSOption(0, 31_536_000, 100.0, 100.0, 0.0, 0.2)
    mutate(option)

    report = option.price_and_greeks()

    assert math.isnan(report.call.value)
    assert math.isnan(report.put.value)
    assert math.isnan(report.call.delta)
    assert math.isnan(report.put.delta)
    assert not math.isfinite(report.call.gamma)


def test_zero_volatility_out_of_the_money_is_not_clamped():
    option = BSOption(0, 31_536_000, 100.0, 105.0, 0.0, 0.0)

    d1, d2 = bs_d1_d2(option.asset_price, option.strike, 1.0, 0.0)

    assert d1 == -math.inf
    assert d2 == -math.inf
    assert option.call_value() == 0.0
    assert option.call_delta() == 0.0
