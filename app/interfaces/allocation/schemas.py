"""
Pydantic schemas for allocation API request/response validation.

These schemas define the API contract. JSON field names are camelCase.
Type coercion happens here; business constraints (non-empty IDs,
positive amounts) are enforced by the domain so that every entry
point reports the same message.
No business logic belongs here.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DepositRequest(CamelModel):
    """Request schema for the strategy deposit endpoint.

    Attributes:
        investor: Investor identifier.
        strategy_id: Strategy the deposit is made under.
        amount: Deposit amount, strictly positive.
        asset: Optional asset label (defaults to the native asset).
    """

    investor: Optional[str] = Field(default=None, description="Investor identifier")
    strategy_id: Optional[str] = Field(default=None, description="Strategy identifier")
    amount: Optional[Decimal] = Field(default=None, description="Deposit amount (> 0)")
    asset: Optional[str] = Field(default=None, description="Asset label, e.g. XLM")


class DepositResponse(CamelModel):
    """Response schema for the strategy deposit endpoint."""

    investor: str
    strategy_id: str
    asset: str
    new_balance: float
    allocation: str
    fee_charged: float
    platform_total_fees: float
    simulated: bool = True
    decided_at: datetime


class StrategyControlRequest(CamelModel):
    """Request schema for pause/resume. ``id`` is the strategy ID."""

    id: Optional[str] = Field(default=None, description="Strategy identifier")


class StrategyControlResponse(CamelModel):
    """Response schema for pause/resume."""

    success: bool = True
    message: str
    status: str


class StrategyStatusResponse(CamelModel):
    id: str
    status: str


class StrategyItem(CamelModel):
    """A single catalog strategy in the response."""

    id: str
    name: str
    type: str
    status: str
    pair: str
    amount: float
    parameters: dict[str, Any]
    description: Optional[str] = None


class StrategyListResponse(CamelModel):
    strategies: list[StrategyItem]


class InvestorAccountResponse(CamelModel):
    """Response schema for an investor account view."""

    investor: str
    strategy_id: str
    balance: float
    allocation: str
    last_decision_at: datetime


class PlatformFeesResponse(CamelModel):
    platform_total_fees: float


class MarketPriceItem(CamelModel):
    """A single simulated market price."""

    symbol: str
    price: float
    volume: float
    # to_camel would render these as "change24H"; keep the lowercase form.
    change_24h: float = Field(alias="change24h")
    change_percent_24h: float = Field(alias="changePercent24h")
    high_24h: float = Field(alias="high24h")
    low_24h: float = Field(alias="low24h")
    timestamp: datetime


class MarketPricesResponse(CamelModel):
    prices: list[MarketPriceItem]


class HealthResponse(CamelModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    uptime_seconds: float


class ServiceInfoResponse(CamelModel):
    """Response schema for the root endpoint."""

    name: str
    version: str
    description: str
    endpoints: dict[str, str]


class TradingMetrics(CamelModel):
    """Ledger activity since startup."""

    deposits: int
    switches: int
    failed_deposits: int
    accounts: int
    total_fees: float
    fee_rate: float


class SystemMetrics(CamelModel):
    uptime_seconds: float


class MetricsResponse(CamelModel):
    """Response schema for the metrics endpoint."""

    trading: TradingMetrics
    system: SystemMetrics


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    message: str | None = None
