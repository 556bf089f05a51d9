from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError

from homeloan.core.request_id import request_id_from
from homeloan.domain.construction.estimator import (
    EstimatorRequest,
    estimate_construction_budget,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/estimator/calculate")
async def calculate_estimation_endpoint(request: Request) -> dict[str, Any]:
    try:
        payload = await request.json()
    except Exception as exc:
        raise HTTPException(status_code=400, detail="Invalid JSON body") from exc

    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=400, detail="Request body must be a JSON object"
        )

    try:
        estimator_request = EstimatorRequest.model_validate(payload)
    except ValidationError as exc:
        fields = sorted(
            {".".join(str(part) for part in err["loc"]) for err in exc.errors()}
        )
        raise HTTPException(
            status_code=400,
            detail="Invalid estimator fields: " + ", ".join(fields),
        ) from exc

    budget = estimate_construction_budget(estimator_request)
    logger.info(
        "construction_estimate_made",
        extra={
            "event": "construction_estimate_made",
            "request_id": request_id_from(request),
        },
    )
    return {"success": True, "data": budget.to_dict()}
