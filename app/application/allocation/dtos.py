"""
Data Transfer Objects for the allocation application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional


@dataclass(frozen=True)
class DepositCommand:
    """Input DTO for a strategy deposit.

    Attributes:
        investor: Investor identifier.
        strategy_id: Strategy the deposit is made under.
        amount: Deposit amount as received from the caller.
        asset: Optional asset label; the native asset when omitted.
    """

    investor: Optional[str]
    strategy_id: Optional[str]
    amount: Any
    asset: Optional[str] = None


@dataclass(frozen=True)
class DepositResult:
    """Output DTO for a completed deposit.

    Attributes:
        investor: Investor identifier.
        strategy_id: Strategy now associated with the account.
        asset: Asset label (defaulted).
        new_balance: Balance after deposit and any switch fee.
        allocation: Allocation after the decision step.
        fee_charged: Fee taken by this deposit (0 when no switch).
        platform_total_fees: Platform-wide fee total after this deposit.
        decided_at: Time of the allocation decision.
        simulated: Always True; no on-chain transaction is sent.
    """

    investor: str
    strategy_id: str
    asset: str
    new_balance: Decimal
    allocation: str
    fee_charged: Decimal
    platform_total_fees: Decimal
    decided_at: datetime
    simulated: bool = True


@dataclass(frozen=True)
class StrategyControlCommand:
    """Input DTO for pausing or resuming a strategy."""

    strategy_id: Optional[str]


@dataclass(frozen=True)
class StrategyControlResult:
    """Output DTO for a pause/resume call."""

    strategy_id: str
    status: str
    message: str


@dataclass(frozen=True)
class GetInvestorAccountQuery:
    """Input DTO for reading an investor account."""

    investor: str


@dataclass(frozen=True)
class InvestorAccountResult:
    """Output DTO for an investor account view."""

    investor: str
    strategy_id: str
    balance: Decimal
    allocation: str
    last_decision_at: datetime


@dataclass(frozen=True)
class GetStrategyStatusQuery:
    """Input DTO for reading a single strategy status."""

    strategy_id: str


@dataclass(frozen=True)
class StrategyStatusResult:
    """Output DTO for a single strategy status."""

    strategy_id: str
    status: str


@dataclass(frozen=True)
class StrategyResult:
    """Output DTO for a catalog strategy with its live status."""

    id: str
    name: str
    type: str
    status: str
    pair: str
    amount: Decimal
    parameters: dict[str, Any] = field(default_factory=dict)
    description: Optional[str] = None


@dataclass(frozen=True)
class PlatformFeesResult:
    """Output DTO for the platform fee total."""

    platform_total_fees: Decimal


@dataclass(frozen=True)
class PlatformMetricsResult:
    """Output DTO for ledger activity counters."""

    deposits: int
    switches: int
    failed_deposits: int
    accounts: int
    platform_total_fees: Decimal
    fee_rate: Decimal


@dataclass(frozen=True)
class MarketPriceResult:
    """Output DTO for one simulated market price."""

    symbol: str
    price: Decimal
    volume: Decimal
    change_24h: Decimal
    change_percent_24h: Decimal
    high_24h: Decimal
    low_24h: Decimal
    timestamp: datetime
