"""
Late delivery penalty evaluator.

Formula:
    periods        = floor(delay / penalty_duration)
    raw_percent    = periods x penalty_rate_percent
    applied_percent = MIN(raw_percent, cap_percent)
    penalty        = goods_value x applied_percent / 100
    terminate      = delay > termination_threshold

Force majeure overrides everything: no penalty, no termination right.
All durations are compared in hours. Amounts are returned at full Decimal
precision; rounding to currency is left to the caller.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal, MAX_EMAX, MIN_EMIN, localcontext
from typing import Callable, Optional
import logging

from models.clause import (
    ClauseParameters,
    EvaluationRequest,
    Decision,
    HOURS_PER_UNIT,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

ZERO = Decimal("0")
HUNDRED = Decimal("100")
SECONDS_PER_HOUR = Decimal("3600")

# Working precision for the period arithmetic. Duration amounts are bounded
# (MAX_DURATION_AMOUNT), so whole-period quotients fit with room to spare.
EVALUATION_PRECISION = 60


def utc_now() -> datetime:
    """Default clock: current time, timezone-aware UTC."""
    return datetime.now(timezone.utc)


def timedelta_to_hours(delta: timedelta) -> Decimal:
    """Convert a timedelta to hours without going through float."""
    seconds = Decimal(delta.days * 86400 + delta.seconds)
    seconds += Decimal(delta.microseconds) / Decimal(1_000_000)
    return seconds / SECONDS_PER_HOUR


def resolve_delay_hours(request: EvaluationRequest, now: datetime) -> Decimal:
    """
    Express the request's delay fact in hours.

    Args:
        request: Validated request carrying either a delay duration or
                 agreed/actual delivery dates
        now: Evaluation time, used when the goods have not been delivered

    Returns:
        Delay in hours; zero or negative means on time or early
    """
    if request.delay is not None:
        return request.delay.to_hours()

    delivered = request.delivered_at or now
    return timedelta_to_hours(delivered - request.agreed_delivery)


def _no_penalty(
    params: ClauseParameters,
    evaluated_at: datetime,
    delay_hours: Optional[Decimal],
    force_majeure: bool,
) -> Decision:
    return Decision(
        penalty_amount=ZERO,
        buyer_may_terminate=False,
        applied_percent=ZERO,
        evaluated_at=evaluated_at,
        raw_percent=ZERO,
        periods=0,
        cap_reached=False,
        delay_hours=delay_hours,
        fractional_remainder=ZERO,
        fractional_unit=params.fractional_unit,
        force_majeure_applied=force_majeure,
        clause_id=params.clause_id,
    )


def evaluate(
    params: ClauseParameters,
    request: EvaluationRequest,
    clock: Optional[Clock] = None,
) -> Decision:
    """
    Evaluate the late delivery and penalty clause for one request.

    Args:
        params: Validated clause parameters
        request: Validated request facts
        clock: Optional zero-argument callable returning the current UTC time

    Returns:
        A fresh Decision. Never raises for validated inputs.

    Example:
        - Penalty: 10.5% per 2 days, cap 55%, termination after 15 days
        - Delay: 4 days, goods value: $100
        - Periods: 2, raw percent: 21%, penalty: $21.00, terminate: no
    """
    evaluated_at = (clock or utc_now)()

    if params.force_majeure_active:
        logger.info(
            f"Clause {params.clause_id or '-'}: force majeure active, "
            "penalty and termination waived"
        )
        return _no_penalty(params, evaluated_at, None, force_majeure=True)

    with localcontext() as ctx:
        ctx.prec = EVALUATION_PRECISION
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return _penalty_decision(params, request, evaluated_at)


def _penalty_decision(
    params: ClauseParameters,
    request: EvaluationRequest,
    evaluated_at: datetime,
) -> Decision:
    delay_hours = resolve_delay_hours(request, evaluated_at)
    logger.debug(
        f"Clause {params.clause_id or '-'}: delay={delay_hours}h, "
        f"penalty_duration={params.penalty_duration_hours}h, "
        f"termination={params.termination_hours}h"
    )

    if delay_hours <= 0:
        logger.info(
            f"Clause {params.clause_id or '-'}: delivered on time "
            f"(delay {delay_hours}h), no penalty"
        )
        return _no_penalty(params, evaluated_at, delay_hours, force_majeure=False)

    duration_hours = params.penalty_duration_hours
    periods = int(delay_hours // duration_hours)
    remainder_hours = delay_hours - periods * duration_hours

    raw_percent = periods * params.penalty_rate_percent
    cap_reached = raw_percent > params.cap_percent
    applied_percent = params.cap_percent if cap_reached else raw_percent
    if cap_reached:
        logger.info(
            f"Penalty {raw_percent}% exceeds cap {params.cap_percent}% "
            f"(clause {params.clause_id or '-'}). Applying cap."
        )

    penalty_amount = request.goods_value * applied_percent / HUNDRED
    buyer_may_terminate = delay_hours > params.termination_hours

    decision = Decision(
        penalty_amount=penalty_amount,
        buyer_may_terminate=buyer_may_terminate,
        applied_percent=applied_percent,
        evaluated_at=evaluated_at,
        raw_percent=raw_percent,
        periods=periods,
        cap_reached=cap_reached,
        delay_hours=delay_hours,
        fractional_remainder=remainder_hours / HOURS_PER_UNIT[params.fractional_unit],
        fractional_unit=params.fractional_unit,
        force_majeure_applied=False,
        clause_id=params.clause_id,
    )

    logger.info(
        f"Late delivery evaluation: delay={delay_hours}h, periods={periods}, "
        f"applied={applied_percent}% of {request.goods_value}, "
        f"penalty={penalty_amount}, "
        f"terminate={'YES' if buyer_may_terminate else 'no'}"
    )

    return decision
