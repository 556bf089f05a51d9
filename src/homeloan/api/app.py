import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from homeloan.api.routes_estimator import router as estimator_router
from homeloan.api.routes_loan import router as loan_router
from homeloan.api.routes_metrics import router as metrics_router
from homeloan.api.routes_version import router as version_router
from homeloan.core.errors import install_error_handlers
from homeloan.core.logging import configure_logging
from homeloan.core.metrics import clear_metrics, install_metrics_middleware
from homeloan.core.request_id import install_request_id_middleware
from homeloan.core.settings import get_settings

configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    clear_metrics()
    logger.info(
        "startup_complete",
        extra={"event": "startup_complete"},
    )

    try:
        yield
    finally:
        clear_metrics()


app = FastAPI(title="homeloan-eligibility-engine API", lifespan=lifespan)
install_request_id_middleware(app)
install_metrics_middleware(app)
install_error_handlers(app)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(version_router)
app.include_router(metrics_router)
app.include_router(loan_router)
app.include_router(estimator_router)
