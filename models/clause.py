"""
Pydantic models for the late delivery and penalty clause.

Defines the clause parameters fixed for a contract instance, the runtime
request evaluated against them, and the decision produced by the penalty
evaluator. Input is accepted in the camelCase shape used by the template
data files (forceMajeure, penaltyDuration, capPercentage, ...).
"""

from enum import Enum
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError as PydanticValidationError,
    field_validator,
    model_validator,
)


class PenaltyClauseError(Exception):
    """Base class for late delivery clause errors."""
    pass


class ValidationError(PenaltyClauseError):
    """
    Raised when raw clause or request data violates the data model.

    Permanent input problem; retrying with the same data will fail again.
    """

    def __init__(self, errors: List[str], source: Optional[str] = None):
        self.errors = errors
        self.source = source
        prefix = f"Invalid {source}" if source else "Invalid input"
        super().__init__(f"{prefix}: {'; '.join(errors)}")


# =============================================================================
# TIME UNITS
# =============================================================================

class TimeUnit(str, Enum):
    """Time units accepted by clause durations, ordered by length."""
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"


# Hours per unit. A month is a nominal 30 days.
HOURS_PER_UNIT: Dict[TimeUnit, Decimal] = {
    TimeUnit.HOURS: Decimal("1"),
    TimeUnit.DAYS: Decimal("24"),
    TimeUnit.WEEKS: Decimal("168"),
    TimeUnit.MONTHS: Decimal("720"),
}

# Largest accepted duration amount, in any unit. Keeps every delay within
# the precision the evaluator computes whole periods at.
MAX_DURATION_AMOUNT = Decimal("1000000000")


def _to_decimal(value: Any) -> Any:
    """Convert floats through str so 10.5 stays Decimal('10.5')."""
    if isinstance(value, bool):
        raise ValueError("expected a number, got a boolean")
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def _format_errors(exc: PydanticValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return messages


class _PayloadModel(BaseModel):
    """Shared construction from raw (JSON-decoded) payloads."""

    @classmethod
    def from_payload(cls, payload: Any, source: Optional[str] = None):
        """
        Validate a raw payload and build the model.

        Args:
            payload: Dict decoded from JSON
            source: Optional label (file name, request part) for error messages

        Returns:
            Validated, immutable model instance

        Raises:
            ValidationError: If the payload violates the data model
        """
        if not isinstance(payload, dict):
            raise ValidationError(
                [f"expected a JSON object, got {type(payload).__name__}"],
                source=source,
            )
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(_format_errors(e), source=source) from e


# =============================================================================
# DURATIONS
# =============================================================================

class Duration(_PayloadModel):
    """An amount of time in one of the recognised units."""

    amount: Decimal = Field(
        ..., ge=-MAX_DURATION_AMOUNT, le=MAX_DURATION_AMOUNT,
        description="Number of units (may be zero or negative for delays)"
    )
    unit: TimeUnit = Field(..., description="Time unit (hours, days, weeks, months)")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Any:
        return _to_decimal(value)

    def to_hours(self) -> Decimal:
        """Express this duration in hours, the common base unit."""
        return Decimal(self.amount) * HOURS_PER_UNIT[self.unit]

    def __str__(self) -> str:
        return f"{self.amount} {self.unit.value}"


class ClauseDuration(Duration):
    """A duration fixed by the clause; the amount must be a positive integer."""

    amount: int = Field(
        ..., gt=0, le=int(MAX_DURATION_AMOUNT), description="Positive whole number of units"
    )

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, value: Any) -> Any:
        # Whole-number floats (2.0) are accepted, fractional ones rejected.
        if isinstance(value, bool):
            raise ValueError("expected a whole number, got a boolean")
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


# =============================================================================
# CLAUSE PARAMETERS
# =============================================================================

class ClauseParameters(_PayloadModel):
    """
    Fixed parameters of a late delivery and penalty clause.

    Set once per contract instance and never mutated. The $class and
    $identifier keys of the template data files are ignored.
    """

    force_majeure_active: bool = Field(
        ..., alias="forceMajeure",
        description="Whether the force majeure exception is in effect"
    )
    penalty_duration: ClauseDuration = Field(
        ..., alias="penaltyDuration",
        description="Proration period: one penalty increment per this much delay"
    )
    penalty_rate_percent: Decimal = Field(
        ..., alias="penaltyPercentage", ge=0,
        description="Percentage of goods value charged per proration period"
    )
    cap_percent: Decimal = Field(
        ..., alias="capPercentage", ge=0, le=100,
        description="Maximum total penalty percentage"
    )
    termination_threshold: ClauseDuration = Field(
        ..., alias="termination",
        description="Delay beyond which the buyer may terminate"
    )
    fractional_unit: TimeUnit = Field(
        ..., alias="fractionalPart",
        description="Unit used to report the partial-period remainder"
    )
    clause_id: str = Field("", alias="clauseId", description="Opaque clause identifier")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "$class": "io.clause.latedeliveryandpenalty@0.1.0.TemplateModel",
                "forceMajeure": False,
                "penaltyDuration": {"amount": 2, "unit": "days"},
                "penaltyPercentage": 10.5,
                "capPercentage": 55,
                "termination": {"amount": 15, "unit": "days"},
                "fractionalPart": "days",
                "clauseId": "c88e5ed7-c3e0-4249-a99c-ce9278684ac8",
            }
        },
    )

    @field_validator("penalty_rate_percent", "cap_percent", mode="before")
    @classmethod
    def coerce_percentages(cls, value: Any) -> Any:
        return _to_decimal(value)

    @property
    def penalty_duration_hours(self) -> Decimal:
        return self.penalty_duration.to_hours()

    @property
    def termination_hours(self) -> Decimal:
        return self.termination_threshold.to_hours()


# =============================================================================
# EVALUATION REQUEST
# =============================================================================

class EvaluationRequest(_PayloadModel):
    """
    Runtime facts evaluated against the clause.

    The delay is given either directly as a duration, or as the agreed
    delivery date plus the actual delivery date. A missing deliveredAt means
    the goods have not arrived yet; the evaluator resolves it against its
    clock.
    """

    goods_value: Decimal = Field(
        ..., alias="goodsValue", ge=0,
        description="Value of the late goods, in contract currency"
    )
    delay: Optional[Duration] = Field(
        None, description="How late delivery is, relative to the agreed date"
    )
    agreed_delivery: Optional[datetime] = Field(
        None, alias="agreedDelivery", description="Agreed delivery date (ISO 8601)"
    )
    delivered_at: Optional[datetime] = Field(
        None, alias="deliveredAt", description="Actual delivery date (ISO 8601)"
    )

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "goodsValue": 100,
                "delay": {"amount": 4, "unit": "days"},
            }
        },
    )

    @field_validator("goods_value", mode="before")
    @classmethod
    def coerce_goods_value(cls, value: Any) -> Any:
        return _to_decimal(value)

    @field_validator("agreed_delivery", "delivered_at")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Naive timestamps are read as UTC so they compare with the clock.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def check_delay_fact(self) -> "EvaluationRequest":
        has_dates = self.agreed_delivery is not None
        if self.delay is not None and has_dates:
            raise ValueError("give either delay or agreedDelivery/deliveredAt, not both")
        if self.delivered_at is not None and not has_dates:
            raise ValueError("deliveredAt requires agreedDelivery")
        if self.delay is None and not has_dates:
            raise ValueError("a delay or an agreedDelivery date is required")
        return self


# =============================================================================
# DECISION
# =============================================================================

class Decision(BaseModel):
    """
    Result of evaluating the clause for one request.

    Amounts are full precision; currency rounding is left to presentation.
    """

    penalty_amount: Decimal = Field(
        ..., alias="penaltyAmount", description="Penalty owed, in goods value currency"
    )
    buyer_may_terminate: bool = Field(
        ..., alias="buyerMayTerminate", description="Whether the buyer may terminate"
    )
    applied_percent: Decimal = Field(
        ..., alias="appliedPercent", description="Penalty percentage after the cap"
    )
    evaluated_at: datetime = Field(..., alias="evaluatedAt")

    raw_percent: Decimal = Field(
        Decimal("0"), alias="rawPercent", description="Penalty percentage before the cap"
    )
    periods: int = Field(0, ge=0, description="Complete proration periods elapsed")
    cap_reached: bool = Field(False, alias="capReached")
    delay_hours: Optional[Decimal] = Field(
        None, alias="delayHours", description="Delay in hours (None under force majeure)"
    )
    fractional_remainder: Decimal = Field(
        Decimal("0"), alias="fractionalRemainder",
        description="Uncharged partial period, expressed in fractional_unit"
    )
    fractional_unit: Optional[TimeUnit] = Field(None, alias="fractionalUnit")
    force_majeure_applied: bool = Field(False, alias="forceMajeureApplied")
    clause_id: str = Field("", alias="clauseId")

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "penaltyAmount": "21.0",
                "buyerMayTerminate": False,
                "appliedPercent": "21.0",
                "evaluatedAt": "2025-01-15T12:00:00Z",
                "rawPercent": "21.0",
                "periods": 2,
                "capReached": False,
                "delayHours": "96",
                "fractionalRemainder": "0",
                "fractionalUnit": "days",
                "forceMajeureApplied": False,
                "clauseId": "c88e5ed7-c3e0-4249-a99c-ce9278684ac8",
            }
        },
    )

    def to_response(self) -> Dict[str, Any]:
        """JSON-compatible dict in the camelCase response shape."""
        return self.model_dump(mode="json", by_alias=True)
