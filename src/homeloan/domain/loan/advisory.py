"""Plain-language guidance attached to a loan analysis.

Advisory text is derived from the already-resolved numbers and never feeds
back into the decision.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from homeloan.domain.loan.eligibility import (
    LIMITED_BY_INCOME,
    LIMITED_BY_LTV,
    EligibilityResult,
)
from homeloan.domain.loan.inputs import FinancialProfile
from homeloan.domain.numbers import (
    INDIAN_GROUPING,
    format_amount,
    format_number,
    round_half_up,
)

EMI_BURDEN_WARNING_RATIO = 0.7
REDUCE_LOAN_SUGGESTION_RATIO = 0.6


@dataclass(frozen=True)
class Advisory:
    insights: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "insights": list(self.insights),
            "warnings": list(self.warnings),
            "suggestions": list(self.suggestions),
        }


def generate_rule_based_advisory(
    core_results: EligibilityResult,
    profile: FinancialProfile,
    *,
    currency_symbol: str = "₹",
    grouping: str = INDIAN_GROUPING,
) -> Advisory:
    insights: list[str] = []
    warnings: list[str] = []
    suggestions: list[str] = []

    free_cash = max(profile.monthly_income - profile.other_obligations, 0.0)
    emi_ratio = core_results.emi / free_cash if free_cash > 0 else 1

    insights.append(
        f"Loan eligibility capped by {core_results.limiting_factor.lower()} constraints"
    )
    insights.append(
        f"Tenure of {format_number(core_results.tenure_years)} years maximizes "
        "eligibility under retirement rules"
    )

    if emi_ratio > EMI_BURDEN_WARNING_RATIO:
        burden = format_number(round_half_up(emi_ratio * 100))
        warnings.append(f"EMI consumes {burden}% of free cash")

    if core_results.limiting_factor == LIMITED_BY_LTV:
        warnings.append("Property value limits loan despite income capacity")

    if core_results.limiting_factor == LIMITED_BY_INCOME:
        gap = round_half_up(
            core_results.ltv_based_limit - core_results.income_based_limit
        )
        if gap > 0:
            suggestions.append(
                "Increase income or reduce obligations to unlock "
                f"{currency_symbol}{format_amount(gap, grouping)}"
            )

    if emi_ratio > REDUCE_LOAN_SUGGESTION_RATIO:
        suggestions.append(
            "Consider reducing loan amount to improve monthly cash flow"
        )

    return Advisory(insights=insights, warnings=warnings, suggestions=suggestions)
