from __future__ import annotations

from fastapi import APIRouter, HTTPException, Response

from homeloan.core.metrics import render_metrics_text
from homeloan.core.settings import get_settings

router = APIRouter()


@router.get("/metrics")
def metrics_endpoint() -> Response:
    if not get_settings().metrics_enabled:
        raise HTTPException(status_code=404, detail="Metrics are disabled")
    return Response(
        content=render_metrics_text(),
        media_type="text/plain; version=0.0.4",
    )
