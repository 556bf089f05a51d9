"""Request schema and normalisation for the loan analysis pipeline.

This is the only validation gate: downstream stages trust whatever
``validate_and_normalize`` returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

RETIREMENT_AGE = 60
MAX_TENURE_CAP_YEARS = 30


class _RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        allow_inf_nan=False,
    )


class FinancialProfile(_RequestModel):
    monthly_income: float = Field(ge=0)
    other_obligations: float = Field(default=0.0, ge=0)
    age: int = Field(ge=18, le=70)
    credit_score: int = Field(ge=300, le=900)
    employment_stability_score: float = Field(ge=0, le=1)
    down_payment_available: float = Field(default=0.0, ge=0)


class LoanPreferences(_RequestModel):
    desired_tenure_years: float | None = Field(default=None, ge=1, le=40)
    loan_amount_requested: float = Field(ge=0)
    base_interest_rate: float = Field(ge=0, le=30)
    ltv_ratio: float = Field(ge=0, le=1)


class PropertyDetails(_RequestModel):
    include_plot: bool
    plot_price: float = Field(default=0.0, ge=0)
    plot_size_sqft: float = Field(ge=0)
    floors: int = Field(ge=1)
    base_cost_per_sqft: float = Field(ge=0)
    luxury_level: float = Field(ge=0, le=1)
    location_score: float = Field(ge=0, le=1)


class LoanAnalysisRequest(_RequestModel):
    financial_profile: FinancialProfile
    loan_preferences: LoanPreferences
    property_details: PropertyDetails


@dataclass(frozen=True)
class SystemDerived:
    max_tenure_years: int


@dataclass(frozen=True)
class NormalizedLoanInput:
    financial_profile: FinancialProfile
    loan_preferences: LoanPreferences
    property_details: PropertyDetails
    system_derived: SystemDerived


@dataclass(frozen=True)
class Violation:
    message: str
    path: list[str | int]

    def to_dict(self) -> dict[str, object]:
        return {"message": self.message, "path": list(self.path)}


class LoanValidationError(ValueError):
    error_type = "VALIDATION_ERROR"

    def __init__(self, details: list[Violation]) -> None:
        self.details = details
        summary = "; ".join(item.message for item in details) or "invalid input"
        super().__init__(summary)

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.error_type,
            "details": [item.to_dict() for item in self.details],
        }


def derive_max_tenure_from_age(age: int) -> int:
    years_to_retirement = max(RETIREMENT_AGE - age, 0)
    return min(years_to_retirement, MAX_TENURE_CAP_YEARS)


def _violation_message(path: list[str | int], error_type: str, message: str) -> str:
    label = ".".join(str(part) for part in path) or "value"
    if error_type == "missing":
        return f'"{label}" is required'
    if message.startswith("Input should"):
        message = "must" + message[len("Input should") :]
    return f'"{label}" {message}'


def _violations_from(exc: ValidationError) -> list[Violation]:
    violations: list[Violation] = []
    for error in exc.errors(include_url=False):
        path = list(error["loc"])
        violations.append(
            Violation(
                message=_violation_message(path, error["type"], error["msg"]),
                path=path,
            )
        )
    return violations


def validate_and_normalize(payload: Any) -> NormalizedLoanInput:
    try:
        request = LoanAnalysisRequest.model_validate(payload)
    except ValidationError as exc:
        raise LoanValidationError(_violations_from(exc)) from exc

    max_tenure = derive_max_tenure_from_age(request.financial_profile.age)

    preferences = request.loan_preferences
    if not preferences.desired_tenure_years:
        tenure = max_tenure
    else:
        tenure = min(preferences.desired_tenure_years, max_tenure)
    preferences = preferences.model_copy(update={"desired_tenure_years": tenure})

    property_details = request.property_details
    if not property_details.include_plot:
        property_details = property_details.model_copy(update={"plot_price": 0.0})

    return NormalizedLoanInput(
        financial_profile=request.financial_profile,
        loan_preferences=preferences,
        property_details=property_details,
        system_derived=SystemDerived(max_tenure_years=max_tenure),
    )
