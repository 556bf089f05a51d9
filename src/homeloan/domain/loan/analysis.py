from __future__ import annotations

import logging
from typing import Any

from homeloan.domain.loan.advisory import generate_rule_based_advisory
from homeloan.domain.loan.approval import ApprovalDecision, resolve_approval
from homeloan.domain.loan.eligibility import EligibilityResult, resolve_eligibility
from homeloan.domain.loan.inputs import LoanValidationError, validate_and_normalize
from homeloan.domain.loan.profile import (
    InterpretedProfile,
    ProfileRejection,
    interpret_profile,
)
from homeloan.domain.loan.property_costs import (
    CostMultipliers,
    PropertyCosts,
    estimate_property_costs,
)
from homeloan.domain.numbers import INDIAN_GROUPING, json_number, round_half_up

INTERNAL_ERROR = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "Something went wrong while analyzing the loan request."

_module_logger = logging.getLogger(__name__)


def _figure(value: float) -> int | float | None:
    return json_number(round_half_up(value))


def _decision_payload(decision: ApprovalDecision) -> dict[str, Any]:
    payload: dict[str, Any] = {"status": decision.status}
    if decision.approved_loan is not None:
        payload["approvedLoan"] = _figure(decision.approved_loan)
    return payload


def _shape_response(
    *,
    eligibility: EligibilityResult,
    costs: PropertyCosts,
    interpreted: InterpretedProfile,
    decision: ApprovalDecision,
    advisory: dict[str, list[str]],
) -> dict[str, Any]:
    down_payment_required = max(costs.property_value - eligibility.eligible_loan, 0)

    return {
        "coreResults": {
            "eligibleLoan": _figure(eligibility.eligible_loan),
            "emi": _figure(eligibility.emi),
            "tenureYears": eligibility.tenure_years,
            "interestRateAdjusted": eligibility.interest_rate_adjusted,
            "totalInterest": _figure(eligibility.total_interest),
            "totalRepayment": _figure(eligibility.total_repayment),
        },
        "costBreakdown": {
            "plotCost": _figure(costs.plot_cost),
            "constructionCost": _figure(costs.construction_cost),
            "totalProjectCost": _figure(costs.property_value),
            "downPaymentRequired": _figure(down_payment_required),
        },
        "constraints": {
            "incomeBasedLimit": _figure(eligibility.income_based_limit),
            "ltvBasedLimit": _figure(eligibility.ltv_based_limit),
            "limitingFactor": eligibility.limiting_factor,
        },
        "decision": _decision_payload(decision),
        "advisory": advisory,
        "debug": {
            "foir": interpreted.foir,
            "riskFactor": interpreted.risk_factor,
            "luxuryMultiplier": interpreted.luxury_multiplier,
            "locationMultiplier": interpreted.location_multiplier,
            "maxTenureYears": interpreted.max_tenure_years,
            "requestedTenureYears": interpreted.requested_tenure_years,
        },
    }


def _run_pipeline(
    payload: Any, *, currency_symbol: str, grouping: str
) -> dict[str, Any]:
    normalized = validate_and_normalize(payload)

    interpreted = interpret_profile(normalized)
    if isinstance(interpreted, ProfileRejection):
        return {
            "success": True,
            "data": {
                "decision": {
                    "status": "REJECTED",
                    "reason": interpreted.rejection_reason,
                }
            },
        }

    costs = estimate_property_costs(
        normalized.property_details,
        CostMultipliers(
            luxury_multiplier=interpreted.luxury_multiplier,
            location_multiplier=interpreted.location_multiplier,
        ),
    )
    eligibility = resolve_eligibility(
        normalized.financial_profile, interpreted, costs
    )
    decision = resolve_approval(
        requested_loan=normalized.loan_preferences.loan_amount_requested,
        eligible_loan=eligibility.eligible_loan,
        emi=eligibility.emi,
        available_surplus=eligibility.available_surplus,
    )
    advisory = generate_rule_based_advisory(
        eligibility,
        normalized.financial_profile,
        currency_symbol=currency_symbol,
        grouping=grouping,
    )

    return {
        "success": True,
        "data": _shape_response(
            eligibility=eligibility,
            costs=costs,
            interpreted=interpreted,
            decision=decision,
            advisory=advisory.to_dict(),
        ),
    }


def analyze_loan(
    payload: Any,
    *,
    logger: logging.Logger | None = None,
    currency_symbol: str = "₹",
    grouping: str = INDIAN_GROUPING,
) -> dict[str, Any]:
    diagnostics = logger or _module_logger

    try:
        return _run_pipeline(
            payload, currency_symbol=currency_symbol, grouping=grouping
        )
    except LoanValidationError as exc:
        return {"success": False, "error": exc.to_dict()}
    except Exception as exc:
        diagnostics.error(
            "loan_analysis_failed",
            exc_info=True,
            extra={
                "event": "loan_analysis_failed",
                "error_type": exc.__class__.__name__,
                "error_message": str(exc),
            },
        )
        return {
            "success": False,
            "error": {"type": INTERNAL_ERROR, "message": INTERNAL_ERROR_MESSAGE},
        }
