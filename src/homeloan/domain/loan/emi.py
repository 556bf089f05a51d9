"""Amortisation helpers shared by the eligibility resolver.

The operation order below is deliberate and must not be simplified: results
are compared bit-for-bit against the reference calculator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from homeloan.domain.numbers import round_half_up


@dataclass(frozen=True)
class RepaymentTotals:
    total_repayment: float
    total_interest: float


def annual_rate_to_monthly(rate_annual_percent: float) -> float:
    r = rate_annual_percent / 100
    return r / 12


def tenure_to_installments(tenure_years: float) -> int:
    return round_half_up(tenure_years * 12)


def compute_emi(
    principal: float, rate_annual_percent: float, tenure_years: float
) -> float:
    if principal <= 0:
        return 0.0

    r = annual_rate_to_monthly(rate_annual_percent)
    n = tenure_to_installments(tenure_years)

    if r == 0 or n == 0:
        return principal / max(n, 1)

    growth = math.pow(1 + r, n)
    return (principal * r * growth) / (growth - 1)


def compute_principal_from_emi(
    max_emi: float, rate_annual_percent: float, tenure_years: float
) -> float:
    r = annual_rate_to_monthly(rate_annual_percent)
    n = tenure_to_installments(tenure_years)

    if r == 0 or n == 0:
        return max_emi * n

    growth = math.pow(1 + r, n)
    return max_emi * ((growth - 1) / (r * growth))


def compute_totals(
    principal: float,
    emi: float,
    rate_annual_percent: float,
    tenure_years: float,
) -> RepaymentTotals:
    n = tenure_to_installments(tenure_years)
    total_repayment = emi * n
    return RepaymentTotals(
        total_repayment=total_repayment,
        total_interest=total_repayment - principal,
    )
