from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from homeloan.core.request_id import REQUEST_ID_HEADER, request_id_from

logger = logging.getLogger(__name__)


def error_response(
    *,
    status_code: int,
    error: dict[str, object],
    request_id: str,
) -> JSONResponse:
    response = JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        request_id = request_id_from(request)
        logger.info(
            "http_exception",
            extra={
                "event": "http_exception",
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": exc.status_code,
            },
        )
        return error_response(
            status_code=exc.status_code,
            error={
                "type": "HTTP_ERROR",
                "message": str(exc.detail),
                "status": exc.status_code,
                "request_id": request_id,
            },
            request_id=request_id,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        request_id = request_id_from(request)
        logger.error(
            "unhandled_exception",
            exc_info=True,
            extra={
                "event": "unhandled_exception",
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "error_type": exc.__class__.__name__,
            },
        )
        return error_response(
            status_code=500,
            error={
                "type": "INTERNAL_ERROR",
                "message": "Internal Server Error",
                "status": 500,
                "request_id": request_id,
            },
            request_id=request_id,
        )
