"""
Dependency injection for the allocation bounded context.

Provides FastAPI dependency functions that wire the per-application
ledger and infrastructure adapters into use cases via constructor
injection. The ledger and adapters are created once in ``create_app``
and kept on ``app.state``; use cases are cheap and built per request.
"""

from fastapi import Depends, Request

from app.application.allocation.control_strategy import (
    GetStrategyStatusUseCase,
    PauseStrategyUseCase,
    ResumeStrategyUseCase,
)
from app.application.allocation.deposit import DepositUseCase
from app.application.allocation.get_investor_account import (
    GetInvestorAccountUseCase,
)
from app.application.allocation.get_market_prices import GetMarketPricesUseCase
from app.application.allocation.get_platform_fees import GetPlatformFeesUseCase
from app.application.allocation.get_platform_metrics import (
    GetPlatformMetricsUseCase,
)
from app.application.allocation.list_strategies import ListStrategiesUseCase
from app.core.config import Settings
from app.domain.allocation.ledger import AllocationLedger
from app.domain.allocation.ports import MarketDataPort, StrategyCatalogPort


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_ledger(request: Request) -> AllocationLedger:
    """Return the application's single AllocationLedger."""
    return request.app.state.ledger


def get_market_port(request: Request) -> MarketDataPort:
    return request.app.state.market_port


def get_strategy_catalog(request: Request) -> StrategyCatalogPort:
    return request.app.state.strategy_catalog


def get_deposit_use_case(
    ledger: AllocationLedger = Depends(get_ledger),
    market_port: MarketDataPort = Depends(get_market_port),
    settings: Settings = Depends(get_settings),
) -> DepositUseCase:
    """Build DepositUseCase with its dependencies."""
    return DepositUseCase(
        ledger=ledger,
        market_port=market_port,
        pair=settings.default_pair,
    )


def get_pause_strategy_use_case(
    ledger: AllocationLedger = Depends(get_ledger),
) -> PauseStrategyUseCase:
    return PauseStrategyUseCase(ledger=ledger)


def get_resume_strategy_use_case(
    ledger: AllocationLedger = Depends(get_ledger),
) -> ResumeStrategyUseCase:
    return ResumeStrategyUseCase(ledger=ledger)


def get_strategy_status_use_case(
    ledger: AllocationLedger = Depends(get_ledger),
) -> GetStrategyStatusUseCase:
    return GetStrategyStatusUseCase(ledger=ledger)


def get_list_strategies_use_case(
    ledger: AllocationLedger = Depends(get_ledger),
    catalog: StrategyCatalogPort = Depends(get_strategy_catalog),
) -> ListStrategiesUseCase:
    """Build ListStrategiesUseCase with the ledger and strategy catalog."""
    return ListStrategiesUseCase(ledger=ledger, catalog=catalog)


def get_investor_account_use_case(
    ledger: AllocationLedger = Depends(get_ledger),
) -> GetInvestorAccountUseCase:
    return GetInvestorAccountUseCase(ledger=ledger)


def get_platform_fees_use_case(
    ledger: AllocationLedger = Depends(get_ledger),
) -> GetPlatformFeesUseCase:
    return GetPlatformFeesUseCase(ledger=ledger)


def get_platform_metrics_use_case(
    ledger: AllocationLedger = Depends(get_ledger),
) -> GetPlatformMetricsUseCase:
    return GetPlatformMetricsUseCase(ledger=ledger)


def get_market_prices_use_case(
    market_port: MarketDataPort = Depends(get_market_port),
    settings: Settings = Depends(get_settings),
) -> GetMarketPricesUseCase:
    return GetMarketPricesUseCase(
        market_port=market_port, pairs=[settings.default_pair]
    )
