# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health and metrics.
Pure HTTP layer — no business logic.
"""

from fastapi import APIRouter
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from wygc.core.logging import get_logger
from wygc.schemas import Health, StatusResponse

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/status", response_model=StatusResponse)
def health_check():
    """Liveness probe for Docker and orchestration."""
    logger.debug("Responding healthy to healthcheck")
    return StatusResponse(health=Health.HEALTHY)


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
