"""Health check endpoints for monitoring application status."""

import time

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from urlshortener.api import schemas
from urlshortener.api.dependencies import get_code_store, get_settings
from urlshortener.core.config import Settings
from urlshortener.store.base import CodeStore

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=schemas.HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Get system health status",
    response_description="Health status of all system components"
)
async def health_check(
    store: CodeStore = Depends(get_code_store),
    app_settings: Settings = Depends(get_settings),
):
    """Check health of all system components."""
    health_status = {
        "status": "healthy",
        "version": app_settings.APP_VERSION,
        "environment": app_settings.ENVIRONMENT.value,
        "timestamp": time.time(),
        "components": {}
    }

    start_time = time.perf_counter()
    try:
        reachable = await store.ping()
    except Exception as e:
        reachable = False
        health_status["components"]["store"] = {"status": "unhealthy", "error": str(e)}
    else:
        health_status["components"]["store"] = {
            "status": "healthy" if reachable else "unhealthy",
            "latency_ms": round((time.perf_counter() - start_time) * 1000, 2),
        }
    if not reachable:
        health_status["status"] = "degraded"

    return health_status


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness probe",
    response_description="Application readiness status"
)
async def readiness_probe(store: CodeStore = Depends(get_code_store)):
    """Check if application is ready to handle requests."""
    components_status = {"api": True, "store": False}

    try:
        components_status["store"] = await store.ping()
    except Exception:
        components_status["store"] = False

    is_ready = all(components_status.values())
    return JSONResponse(
        status_code=status.HTTP_200_OK if is_ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"ready": is_ready, "components": components_status},
    )


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    response_description="Application liveness status"
)
async def liveness_probe():
    """Simple check that application is running."""
    return {"alive": True}
