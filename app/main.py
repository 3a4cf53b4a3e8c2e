"""
Application entry point.

Creates the FastAPI application and wires together:
- The allocation ledger and its infrastructure adapters
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, CORS, compression, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi.errors import RateLimitExceeded

from app.core.config import Settings, settings as default_settings
from app.domain.allocation.ledger import AllocationLedger
from app.domain.allocation.ports import (
    AllocationDecisionPort,
    MarketDataPort,
    StrategyCatalogPort,
)
from app.infrastructure.allocation.decision_adapters import build_decision_adapter
from app.infrastructure.allocation.simulated_market_data_adapter import (
    SimulatedMarketDataAdapter,
)
from app.infrastructure.allocation.strategy_catalog_adapter import (
    StaticStrategyCatalogAdapter,
)
from app.interfaces.allocation.router import (
    deposit_router,
    market_router,
    strategies_router,
)
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    PrefixRateLimitMiddleware,
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown. Ledger state is not persisted."""
    cfg: Settings = app.state.settings
    ledger: AllocationLedger = app.state.ledger
    logger.info(
        "%s %s started (decision_mode=%s, fee_rate=%s, native_asset=%s)",
        cfg.project_name,
        cfg.version,
        cfg.decision_mode,
        ledger.fee_rate,
        ledger.native_asset,
    )

    yield

    stats = ledger.stats()
    logger.info(
        "Shutting down; discarding %d in-memory accounts after %d deposits, "
        "platform fees=%s",
        stats.accounts,
        stats.deposits,
        stats.platform_total_fees,
    )


def create_app(
    settings: Optional[Settings] = None,
    decision_port: Optional[AllocationDecisionPort] = None,
    market_port: Optional[MarketDataPort] = None,
    strategy_catalog: Optional[StrategyCatalogPort] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Builds one AllocationLedger per application instance, then registers
    routers, error handlers and middleware. This is the composition root.

    Args:
        settings: Settings to use instead of the environment-loaded ones.
        decision_port: Decision engine override (tests inject stubs here).
        market_port: Market data override.
        strategy_catalog: Strategy catalog override.
        clock: Time source for the ledger.

    Returns:
        A fully configured FastAPI application instance.
    """
    cfg = settings or default_settings
    configure_logging(level=cfg.log_level, debug=cfg.debug)

    if decision_port is None:
        decision_port = build_decision_adapter(
            cfg.decision_mode,
            signal_range=cfg.decision_signal_range,
            seed=cfg.decision_seed,
        )
    ledger_kwargs = {"clock": clock} if clock is not None else {}
    ledger = AllocationLedger(
        decision_port=decision_port,
        fee_rate=cfg.fee_rate,
        native_asset=cfg.native_asset,
        **ledger_kwargs,
    )

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.version,
        docs_url="/docs" if cfg.debug else None,
        redoc_url="/redoc" if cfg.debug else None,
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.ledger = ledger
    app.state.market_port = market_port or SimulatedMarketDataAdapter(
        seed=cfg.decision_seed
    )
    app.state.strategy_catalog = strategy_catalog or StaticStrategyCatalogAdapter()
    app.state.started_at = time.monotonic()

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(
        cfg.rate_limit_default, enabled=cfg.rate_limit_enabled
    )
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(PrefixRateLimitMiddleware, prefix=API_PREFIX)

    # --- Security Middleware ---
    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(deposit_router, prefix=API_PREFIX)
    app.include_router(strategies_router, prefix=API_PREFIX)
    app.include_router(market_router, prefix=API_PREFIX)

    return app


app = create_app()
