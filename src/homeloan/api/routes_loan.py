from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse

from homeloan.core.metrics import increment_metric
from homeloan.core.request_id import request_id_from
from homeloan.core.settings import get_settings
from homeloan.domain.loan.analysis import INTERNAL_ERROR, analyze_loan
from homeloan.domain.loan.inputs import LoanValidationError

router = APIRouter()
logger = logging.getLogger(__name__)

_ERROR_STATUS_CODES = {
    LoanValidationError.error_type: 400,
    INTERNAL_ERROR: 500,
}


@router.post("/api/loan/analyze")
async def analyze_loan_endpoint(request: Request) -> JSONResponse:
    try:
        payload = await request.json()
    except Exception as exc:
        raise HTTPException(status_code=400, detail="Invalid JSON body") from exc

    settings = get_settings()
    request_id = request_id_from(request)
    increment_metric("loan_analysis_total")

    result = analyze_loan(
        payload,
        logger=logger,
        currency_symbol=settings.currency_symbol,
        grouping=settings.amount_grouping,
    )

    if not result["success"]:
        error = result["error"]
        if error["type"] == LoanValidationError.error_type:
            increment_metric("loan_validation_error_total")
            logger.info(
                "loan_analysis_invalid",
                extra={
                    "event": "loan_analysis_invalid",
                    "request_id": request_id,
                    "violation_count": len(error["details"]),
                },
            )
        else:
            increment_metric("loan_internal_error_total")
        return JSONResponse(
            status_code=_ERROR_STATUS_CODES.get(error["type"], 500),
            content=result,
        )

    data = result["data"]
    status = data["decision"]["status"]
    increment_metric(f"loan_decision_{status.lower()}_total")

    if "coreResults" not in data:
        logger.info(
            "loan_analysis_rejected",
            extra={
                "event": "loan_analysis_rejected",
                "request_id": request_id,
                "decision": status,
            },
        )
    else:
        logger.info(
            "loan_analysis_completed",
            extra={
                "event": "loan_analysis_completed",
                "request_id": request_id,
                "decision": status,
                "limiting_factor": data["constraints"]["limitingFactor"],
                "eligible_loan": data["coreResults"]["eligibleLoan"],
            },
        )

    return JSONResponse(status_code=200, content=result)
