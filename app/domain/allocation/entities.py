"""
Domain entities for the allocation bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Allocation(Enum):
    """Placement state of an investor account."""

    STABLE = "STABLE"
    INVESTED = "INVESTED"


class StrategyStatus(Enum):
    """Run status of a trading strategy."""

    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"


class StrategyType(Enum):
    """Kind of demo strategy in the catalog."""

    GRID = "GRID"
    DCA = "DCA"
    MOMENTUM = "MOMENTUM"


@dataclass
class InvestorAccount:
    """Mutable ledger record for one investor.

    Only AllocationLedger mutates these. Everything outside the
    ledger sees AccountSnapshot instead.
    """

    investor: str
    strategy_id: str
    balance: Decimal = Decimal("0")
    allocation: Allocation = Allocation.STABLE
    last_decision_at: datetime = EPOCH

    def snapshot(self) -> "AccountSnapshot":
        """Return an immutable view of the current state."""
        return AccountSnapshot(
            investor=self.investor,
            strategy_id=self.strategy_id,
            balance=self.balance,
            allocation=self.allocation,
            last_decision_at=self.last_decision_at,
        )


@dataclass(frozen=True)
class AccountSnapshot:
    """Read-only view of an investor account."""

    investor: str
    strategy_id: str
    balance: Decimal
    allocation: Allocation
    last_decision_at: datetime


@dataclass(frozen=True)
class MarketContext:
    """A single market observation for a trading pair."""

    symbol: str
    price: Decimal
    change_24h: Decimal
    change_percent_24h: Decimal
    volume: Decimal
    high_24h: Decimal
    low_24h: Decimal
    observed_at: datetime


@dataclass(frozen=True)
class DepositReceipt:
    """Outcome of one deposit operation."""

    investor: str
    strategy_id: str
    asset: str
    new_balance: Decimal
    allocation: Allocation
    fee_charged: Decimal
    platform_total_fees: Decimal
    decided_at: datetime
    switched: bool = False
    simulated: bool = True


@dataclass(frozen=True)
class StrategyDescriptor:
    """Catalog entry describing a demo trading strategy."""

    id: str
    name: str
    type: StrategyType
    pair: str
    amount: Decimal
    parameters: dict[str, Any] = field(default_factory=dict)
    description: Optional[str] = None


@dataclass(frozen=True)
class LedgerStats:
    """Activity counters for the ledger since it was created.

    Failed deposits are ones that reached the decision step and were
    rolled back; rejected input is not counted.
    """

    deposits: int
    switches: int
    failed_deposits: int
    accounts: int
    platform_total_fees: Decimal
    fee_rate: Decimal
