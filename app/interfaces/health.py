"""
Health check, metrics and service info routers.

Provides a health endpoint for liveness/readiness probes, a metrics
endpoint with ledger activity counters, and a root endpoint that lists
the API surface. None of these routes is rate limited.
"""

import time

from fastapi import APIRouter, Depends, Request

from app.application.allocation.get_platform_metrics import (
    GetPlatformMetricsUseCase,
)
from app.core.config import Settings
from app.interfaces.allocation.dependencies import (
    get_platform_metrics_use_case,
    get_settings,
)
from app.interfaces.allocation.schemas import (
    HealthResponse,
    MetricsResponse,
    ServiceInfoResponse,
    SystemMetrics,
    TradingMetrics,
)

router = APIRouter(tags=["health"])

ENDPOINTS = {
    "health": "/health",
    "metrics": "/metrics",
    "strategies": "/api/strategies",
    "market": "/api/market",
    "deposit": "/api/strategy/deposit",
    "accounts": "/api/strategy/accounts/{investor}",
    "fees": "/api/strategy/fees",
}


def _uptime_seconds(request: Request) -> float:
    return round(time.monotonic() - request.app.state.started_at, 3)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and uptime.",
)
def health_check(
    request: Request, settings: Settings = Depends(get_settings)
) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="healthy",
        version=settings.version,
        uptime_seconds=_uptime_seconds(request),
    )


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Service metrics",
    description="Returns deposit, switch and fee counters plus uptime.",
)
def metrics(
    request: Request,
    use_case: GetPlatformMetricsUseCase = Depends(get_platform_metrics_use_case),
) -> MetricsResponse:
    result = use_case.execute()
    return MetricsResponse(
        trading=TradingMetrics(
            deposits=result.deposits,
            switches=result.switches,
            failed_deposits=result.failed_deposits,
            accounts=result.accounts,
            total_fees=float(result.platform_total_fees),
            fee_rate=float(result.fee_rate),
        ),
        system=SystemMetrics(uptime_seconds=_uptime_seconds(request)),
    )


@router.get("/", response_model=ServiceInfoResponse, summary="Service info")
def service_info(settings: Settings = Depends(get_settings)) -> ServiceInfoResponse:
    return ServiceInfoResponse(
        name=settings.project_name,
        version=settings.version,
        description="AI-assisted allocation and fee accounting on Stellar (simulated)",
        endpoints=ENDPOINTS,
    )
