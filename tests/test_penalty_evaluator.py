"""
Unit tests for the late delivery penalty evaluator.
"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from models.clause import ClauseParameters, EvaluationRequest, TimeUnit
from services.penalty import evaluate, timedelta_to_hours

from conftest import FIXED_NOW, make_request


# Worked scenarios

def test_penalty_below_cap(basic_params, fixed_clock):
    """4 days late at 10.5% per 2 days: 2 periods, 21% of $100."""
    decision = evaluate(basic_params, make_request(100, 4), clock=fixed_clock)

    assert decision.periods == 2
    assert decision.raw_percent == Decimal("21")
    assert decision.applied_percent == Decimal("21")
    assert decision.cap_reached is False
    assert decision.penalty_amount == Decimal("21.00")
    assert decision.buyer_may_terminate is False
    assert decision.evaluated_at == FIXED_NOW


def test_penalty_capped_and_termination(basic_params, fixed_clock):
    """20 days late: 10 periods, 105% capped to 55%, termination allowed."""
    decision = evaluate(basic_params, make_request(100, 20), clock=fixed_clock)

    assert decision.periods == 10
    assert decision.raw_percent == Decimal("105")
    assert decision.applied_percent == Decimal("55")
    assert decision.cap_reached is True
    assert decision.penalty_amount == Decimal("55.00")
    assert decision.buyer_may_terminate is True


@pytest.mark.parametrize("goods_value,days", [(100, 4), (1000, 20), (0, 365), (50, 0)])
def test_force_majeure_waives_everything(force_majeure_params, fixed_clock, goods_value, days):
    decision = evaluate(force_majeure_params, make_request(goods_value, days), clock=fixed_clock)

    assert decision.penalty_amount == 0
    assert decision.buyer_may_terminate is False
    assert decision.applied_percent == 0
    assert decision.force_majeure_applied is True
    assert decision.delay_hours is None


def test_zero_goods_value_still_computes_capped_percent(basic_params):
    decision = evaluate(basic_params, make_request(0, 40))

    assert decision.penalty_amount == 0
    assert decision.applied_percent == basic_params.cap_percent
    assert decision.cap_reached is True
    assert decision.buyer_may_terminate is True


# Edge cases

@pytest.mark.parametrize("amount", [0, -1, Decimal("-0.5")])
def test_on_time_or_early_delivery_has_no_penalty(basic_params, amount):
    decision = evaluate(basic_params, make_request(100, amount))

    assert decision.penalty_amount == 0
    assert decision.applied_percent == 0
    assert decision.periods == 0
    assert decision.buyer_may_terminate is False
    assert decision.force_majeure_applied is False


def test_partial_period_is_not_charged(basic_params):
    """5 days late at 2-day periods: 2 periods charged, 1 day left over."""
    decision = evaluate(basic_params, make_request(100, 5))

    assert decision.periods == 2
    assert decision.penalty_amount == Decimal("21")
    assert decision.fractional_remainder == Decimal("1")
    assert decision.fractional_unit == TimeUnit.DAYS


def test_less_than_one_period_late(basic_params):
    decision = evaluate(basic_params, make_request(100, 36, unit="hours"))

    assert decision.periods == 0
    assert decision.penalty_amount == 0
    assert decision.fractional_remainder == Decimal("1.5")


def test_fractional_remainder_in_hours(basic_template_data):
    basic_template_data["fractionalPart"] = "hours"
    params = ClauseParameters.from_payload(basic_template_data)

    decision = evaluate(params, make_request(100, 5))

    assert decision.fractional_remainder == Decimal("24")


def test_termination_threshold_is_strict(basic_params):
    at_threshold = evaluate(basic_params, make_request(100, 15))
    one_day_over = evaluate(basic_params, make_request(100, 16))
    one_hour_over = evaluate(basic_params, make_request(100, 361, unit="hours"))

    assert at_threshold.buyer_may_terminate is False
    assert one_day_over.buyer_may_terminate is True
    assert one_hour_over.buyer_may_terminate is True


def test_mixed_units_are_compared_in_hours(basic_template_data):
    """Termination after 2 weeks, delay expressed in days."""
    basic_template_data["termination"] = {"amount": 2, "unit": "weeks"}
    params = ClauseParameters.from_payload(basic_template_data)

    assert evaluate(params, make_request(100, 14)).buyer_may_terminate is False
    assert evaluate(params, make_request(100, 15)).buyer_may_terminate is True


def test_months_are_thirty_days(basic_template_data):
    basic_template_data["penaltyDuration"] = {"amount": 1, "unit": "months"}
    basic_template_data["termination"] = {"amount": 3, "unit": "months"}
    params = ClauseParameters.from_payload(basic_template_data)

    decision = evaluate(params, make_request(100, 61))

    assert decision.periods == 2
    assert decision.buyer_may_terminate is False


def test_penalty_is_not_rounded(basic_params):
    decision = evaluate(basic_params, make_request(Decimal("33.33"), 4))

    assert decision.penalty_amount == Decimal("6.9993")


# Properties

def test_applied_percent_is_monotonic_and_capped(basic_params):
    previous = Decimal("-1")
    for days in range(0, 60):
        decision = evaluate(basic_params, make_request(100, days))
        assert decision.applied_percent >= previous
        assert decision.applied_percent <= basic_params.cap_percent
        assert decision.penalty_amount == 100 * decision.applied_percent / 100
        previous = decision.applied_percent


def test_penalty_scales_with_goods_value(basic_params):
    single = evaluate(basic_params, make_request(250, 6))
    double = evaluate(basic_params, make_request(500, 6))

    assert single.applied_percent == double.applied_percent
    assert double.penalty_amount == 2 * single.penalty_amount


def test_each_call_returns_a_fresh_decision(basic_params):
    request = make_request(100, 4)

    first = evaluate(basic_params, request)
    second = evaluate(basic_params, request)

    assert first is not second
    assert first.penalty_amount == second.penalty_amount


# Timestamp delays

def test_delay_from_delivery_dates(basic_params):
    request = EvaluationRequest.from_payload({
        "goodsValue": 100,
        "agreedDelivery": "2025-01-01T00:00:00Z",
        "deliveredAt": "2025-01-07T06:00:00Z",
    })

    decision = evaluate(basic_params, request)

    assert decision.delay_hours == Decimal("150")
    assert decision.periods == 3
    assert decision.applied_percent == Decimal("31.5")
    assert decision.fractional_remainder == Decimal("0.25")


def test_undelivered_goods_use_the_clock(basic_params, fixed_clock):
    """Agreed 4 days before the clock, not yet delivered."""
    request = EvaluationRequest.from_payload({
        "goodsValue": 100,
        "agreedDelivery": (FIXED_NOW - timedelta(days=4)).isoformat(),
    })

    decision = evaluate(basic_params, request, clock=fixed_clock)

    assert decision.delay_hours == Decimal("96")
    assert decision.penalty_amount == Decimal("21")


def test_early_delivery_dates_have_no_penalty(basic_params):
    request = EvaluationRequest.from_payload({
        "goodsValue": 100,
        "agreedDelivery": "2025-01-10T00:00:00Z",
        "deliveredAt": "2025-01-08T00:00:00Z",
    })

    decision = evaluate(basic_params, request)

    assert decision.delay_hours == Decimal("-48")
    assert decision.penalty_amount == 0


def test_timedelta_to_hours_is_exact():
    assert timedelta_to_hours(timedelta(days=1, minutes=30)) == Decimal("24.5")
    assert timedelta_to_hours(timedelta(seconds=-3600)) == Decimal("-1")


def test_default_clock_is_utc(basic_params):
    decision = evaluate(basic_params, make_request(100, 1))

    assert decision.evaluated_at.tzinfo is not None
    assert decision.evaluated_at.utcoffset() == timezone.utc.utcoffset(None)
    assert decision.evaluated_at <= datetime.now(timezone.utc)


def test_longest_delay_is_evaluated(fixed_clock):
    """The largest accepted delay against a one-hour period."""
    params = ClauseParameters.from_payload({
        "forceMajeure": False,
        "penaltyDuration": {"amount": 1, "unit": "hours"},
        "penaltyPercentage": 0.5,
        "capPercentage": 100,
        "termination": {"amount": 1, "unit": "days"},
        "fractionalPart": "hours",
    })
    request = make_request(100, 1_000_000_000, unit="months")

    decision = evaluate(params, request, clock=fixed_clock)

    assert decision.periods == 720_000_000_000
    assert decision.applied_percent == Decimal("100")
    assert decision.penalty_amount == Decimal("100")
    assert decision.buyer_may_terminate is True


def test_long_precise_delay_keeps_whole_periods_exact(basic_params, fixed_clock):
    """Just under 1e9 days: rounding to 28 digits would add a period."""
    request = EvaluationRequest.from_payload({
        "goodsValue": 100,
        "delay": {"amount": "999999999.999999999999999999999", "unit": "days"},
    })

    decision = evaluate(basic_params, request, clock=fixed_clock)

    assert decision.delay_hours == Decimal("23999999999.999999999999999999976")
    assert decision.periods == 499_999_999
    assert decision.fractional_remainder == Decimal("1.999999999999999999999999")
    assert decision.penalty_amount == Decimal("55")


def test_huge_goods_value_does_not_overflow(basic_params, fixed_clock):
    request = EvaluationRequest.from_payload({
        "goodsValue": "9e999999",
        "delay": {"amount": 4, "unit": "days"},
    })

    decision = evaluate(basic_params, request, clock=fixed_clock)

    assert decision.penalty_amount == Decimal("1.89e999999")
