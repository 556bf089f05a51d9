from __future__ import annotations

from dataclasses import dataclass

from homeloan.domain.loan.emi import (
    compute_emi,
    compute_principal_from_emi,
    compute_totals,
)
from homeloan.domain.loan.inputs import FinancialProfile
from homeloan.domain.loan.profile import InterpretedProfile
from homeloan.domain.loan.property_costs import PropertyCosts

LIMITED_BY_INCOME = "INCOME"
LIMITED_BY_LTV = "LTV"


@dataclass(frozen=True)
class IncomeCapacity:
    max_allowed_total_emi: float
    available_surplus: float
    max_emi: float
    income_based_loan: float


@dataclass(frozen=True)
class EligibilityResult:
    income_based_limit: float
    ltv_based_limit: float
    limiting_factor: str
    eligible_loan: float
    emi: float
    available_surplus: float
    tenure_years: float
    interest_rate_adjusted: float
    total_interest: float
    total_repayment: float


def compute_income_based_capacity(
    profile: FinancialProfile, interpreted: InterpretedProfile
) -> IncomeCapacity:
    max_allowed_total_emi = profile.monthly_income * interpreted.foir
    available_surplus = max(max_allowed_total_emi - profile.other_obligations, 0.0)
    max_emi = available_surplus * interpreted.risk_factor

    return IncomeCapacity(
        max_allowed_total_emi=max_allowed_total_emi,
        available_surplus=available_surplus,
        max_emi=max_emi,
        income_based_loan=compute_principal_from_emi(
            max_emi,
            interpreted.adjusted_interest_rate,
            interpreted.requested_tenure_years,
        ),
    )


def compute_ltv_based_capacity(property_value: float, ltv_ratio: float) -> float:
    return property_value * ltv_ratio


def resolve_eligibility(
    profile: FinancialProfile,
    interpreted: InterpretedProfile,
    property_costs: PropertyCosts,
) -> EligibilityResult:
    income_side = compute_income_based_capacity(profile, interpreted)
    income_based_limit = income_side.income_based_loan
    ltv_based_limit = compute_ltv_based_capacity(
        property_costs.property_value, interpreted.ltv_ratio
    )

    eligible_loan = min(income_based_limit, ltv_based_limit)
    # Ties report INCOME.
    limiting_factor = (
        LIMITED_BY_INCOME if eligible_loan == income_based_limit else LIMITED_BY_LTV
    )

    rate = interpreted.adjusted_interest_rate
    tenure = interpreted.requested_tenure_years
    emi = compute_emi(eligible_loan, rate, tenure)
    totals = compute_totals(eligible_loan, emi, rate, tenure)

    return EligibilityResult(
        income_based_limit=income_based_limit,
        ltv_based_limit=ltv_based_limit,
        limiting_factor=limiting_factor,
        eligible_loan=eligible_loan,
        emi=emi,
        available_surplus=income_side.available_surplus,
        tenure_years=tenure,
        interest_rate_adjusted=rate,
        total_interest=totals.total_interest,
        total_repayment=totals.total_repayment,
    )
