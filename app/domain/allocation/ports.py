"""
Port interfaces (ABCs) for the allocation bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.allocation.entities import (
    AccountSnapshot,
    Allocation,
    MarketContext,
    StrategyDescriptor,
)


class AllocationDecisionPort(ABC):
    """Port for deciding where an investor's balance should sit."""

    @abstractmethod
    def decide(
        self, account: AccountSnapshot, market: Optional[MarketContext] = None
    ) -> Allocation:
        """Return the allocation the account should move to.

        Called exactly once per deposit, with the post-deposit balance
        already reflected in ``account``. Must not mutate anything.

        Args:
            account: Snapshot of the account after the deposit is added.
            market: Latest market observation, if one is available.

        Returns:
            Allocation.INVESTED or Allocation.STABLE.
        """
        raise NotImplementedError


class MarketDataPort(ABC):
    """Port for obtaining current market observations."""

    @abstractmethod
    def get_context(self, symbol: str) -> MarketContext:
        """Return the latest observation for a trading pair."""
        raise NotImplementedError


class StrategyCatalogPort(ABC):
    """Port for listing the strategies the platform offers."""

    @abstractmethod
    def list_strategies(self) -> list[StrategyDescriptor]:
        """Return every known strategy descriptor."""
        raise NotImplementedError
