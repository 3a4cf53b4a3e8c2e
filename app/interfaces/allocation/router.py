"""
FastAPI routers for the allocation bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends

from app.application.allocation.control_strategy import (
    GetStrategyStatusUseCase,
    PauseStrategyUseCase,
    ResumeStrategyUseCase,
)
from app.application.allocation.deposit import DepositUseCase
from app.application.allocation.dtos import (
    DepositCommand,
    GetInvestorAccountQuery,
    GetStrategyStatusQuery,
    StrategyControlCommand,
)
from app.application.allocation.get_investor_account import (
    GetInvestorAccountUseCase,
)
from app.application.allocation.get_market_prices import GetMarketPricesUseCase
from app.application.allocation.get_platform_fees import GetPlatformFeesUseCase
from app.application.allocation.list_strategies import ListStrategiesUseCase
from app.interfaces.allocation.dependencies import (
    get_deposit_use_case,
    get_investor_account_use_case,
    get_list_strategies_use_case,
    get_market_prices_use_case,
    get_pause_strategy_use_case,
    get_platform_fees_use_case,
    get_resume_strategy_use_case,
    get_strategy_status_use_case,
)
from app.interfaces.allocation.schemas import (
    DepositRequest,
    DepositResponse,
    ErrorResponse,
    InvestorAccountResponse,
    MarketPriceItem,
    MarketPricesResponse,
    PlatformFeesResponse,
    StrategyControlRequest,
    StrategyControlResponse,
    StrategyItem,
    StrategyListResponse,
    StrategyStatusResponse,
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

deposit_router = APIRouter(prefix="/strategy", tags=["allocation"])
strategies_router = APIRouter(prefix="/strategies", tags=["strategies"])
market_router = APIRouter(prefix="/market", tags=["market"])


@deposit_router.post(
    "/deposit",
    response_model=DepositResponse,
    responses=ERROR_RESPONSES,
    summary="Deposit into a strategy",
    description=(
        "Credit a deposit, run the allocation decision and charge a 0.5% "
        "fee if the allocation switches. Simulated; nothing is sent on-chain."
    ),
)
def deposit(
    request: DepositRequest,
    use_case: DepositUseCase = Depends(get_deposit_use_case),
) -> DepositResponse:
    """Apply a deposit to an investor account."""
    command = DepositCommand(
        investor=request.investor,
        strategy_id=request.strategy_id,
        amount=request.amount,
        asset=request.asset,
    )
    result = use_case.execute(command)
    return DepositResponse(
        investor=result.investor,
        strategy_id=result.strategy_id,
        asset=result.asset,
        new_balance=float(result.new_balance),
        allocation=result.allocation,
        fee_charged=float(result.fee_charged),
        platform_total_fees=float(result.platform_total_fees),
        simulated=result.simulated,
        decided_at=result.decided_at,
    )


@deposit_router.get(
    "/accounts/{investor}",
    response_model=InvestorAccountResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get investor account",
)
def get_investor_account(
    investor: str,
    use_case: GetInvestorAccountUseCase = Depends(get_investor_account_use_case),
) -> InvestorAccountResponse:
    """Return the balance and allocation of one investor."""
    result = use_case.execute(GetInvestorAccountQuery(investor=investor))
    return InvestorAccountResponse(
        investor=result.investor,
        strategy_id=result.strategy_id,
        balance=float(result.balance),
        allocation=result.allocation,
        last_decision_at=result.last_decision_at,
    )


@deposit_router.get(
    "/fees",
    response_model=PlatformFeesResponse,
    summary="Get platform fee total",
)
def get_platform_fees(
    use_case: GetPlatformFeesUseCase = Depends(get_platform_fees_use_case),
) -> PlatformFeesResponse:
    """Return the sum of all allocation-switch fees charged so far."""
    result = use_case.execute()
    return PlatformFeesResponse(platform_total_fees=float(result.platform_total_fees))


@strategies_router.get(
    "",
    response_model=StrategyListResponse,
    summary="List strategies",
)
def list_strategies(
    use_case: ListStrategiesUseCase = Depends(get_list_strategies_use_case),
) -> StrategyListResponse:
    """List catalog strategies with their current status."""
    return StrategyListResponse(
        strategies=[
            StrategyItem(
                id=s.id,
                name=s.name,
                type=s.type,
                status=s.status,
                pair=s.pair,
                amount=float(s.amount),
                parameters=s.parameters,
                description=s.description,
            )
            for s in use_case.execute()
        ]
    )


@strategies_router.post(
    "/pause",
    response_model=StrategyControlResponse,
    responses=ERROR_RESPONSES,
    summary="Pause a strategy",
)
def pause_strategy(
    request: StrategyControlRequest,
    use_case: PauseStrategyUseCase = Depends(get_pause_strategy_use_case),
) -> StrategyControlResponse:
    """Mark a strategy PAUSED."""
    result = use_case.execute(StrategyControlCommand(strategy_id=request.id))
    return StrategyControlResponse(message=result.message, status=result.status)


@strategies_router.post(
    "/resume",
    response_model=StrategyControlResponse,
    responses=ERROR_RESPONSES,
    summary="Resume a strategy",
)
def resume_strategy(
    request: StrategyControlRequest,
    use_case: ResumeStrategyUseCase = Depends(get_resume_strategy_use_case),
) -> StrategyControlResponse:
    """Mark a strategy ACTIVE."""
    result = use_case.execute(StrategyControlCommand(strategy_id=request.id))
    return StrategyControlResponse(message=result.message, status=result.status)


@strategies_router.get(
    "/{strategy_id}/status",
    response_model=StrategyStatusResponse,
    summary="Get strategy status",
)
def get_strategy_status(
    strategy_id: str,
    use_case: GetStrategyStatusUseCase = Depends(get_strategy_status_use_case),
) -> StrategyStatusResponse:
    """Return ACTIVE or PAUSED for any strategy ID."""
    result = use_case.execute(GetStrategyStatusQuery(strategy_id=strategy_id))
    return StrategyStatusResponse(id=result.strategy_id, status=result.status)


@market_router.get(
    "/prices",
    response_model=MarketPricesResponse,
    summary="Get market prices",
    description="Simulated prices for the configured trading pair.",
)
def get_market_prices(
    use_case: GetMarketPricesUseCase = Depends(get_market_prices_use_case),
) -> MarketPricesResponse:
    """Return the latest simulated market observation per pair."""
    return MarketPricesResponse(
        prices=[
            MarketPriceItem(
                symbol=p.symbol,
                price=float(p.price),
                volume=float(p.volume),
                change_24h=float(p.change_24h),
                change_percent_24h=float(p.change_percent_24h),
                high_24h=float(p.high_24h),
                low_24h=float(p.low_24h),
                timestamp=p.timestamp,
            )
            for p in use_case.execute()
        ]
    )
