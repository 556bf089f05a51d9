from __future__ import annotations

from dataclasses import dataclass

APPROVED = "APPROVED"
MODIFIED = "MODIFIED"
REJECTED = "REJECTED"


@dataclass(frozen=True)
class ApprovalDecision:
    status: str
    approved_loan: float | None = None


def resolve_approval(
    *,
    requested_loan: float,
    eligible_loan: float,
    emi: float,
    available_surplus: float,
) -> ApprovalDecision:
    if eligible_loan <= 0:
        return ApprovalDecision(status=REJECTED)

    # emi is priced at eligible_loan, not requested_loan.
    if requested_loan <= eligible_loan and emi <= available_surplus:
        return ApprovalDecision(status=APPROVED)

    return ApprovalDecision(status=MODIFIED, approved_loan=eligible_loan)
