"""
Use case: List catalog strategies with their live status.

Input: none
Output: list[StrategyResult]
Side effects: None.
"""

import logging

from app.application.allocation.dtos import StrategyResult
from app.domain.allocation.entities import StrategyStatus
from app.domain.allocation.ledger import AllocationLedger
from app.domain.allocation.ports import StrategyCatalogPort

logger = logging.getLogger(__name__)


class ListStrategiesUseCase:
    """Merges the static strategy catalog with ledger status.

    Strategies paused or resumed outside the catalog are not listed;
    their status is still readable one by one.
    """

    def __init__(
        self, ledger: AllocationLedger, catalog: StrategyCatalogPort
    ) -> None:
        self._ledger = ledger
        self._catalog = catalog

    def execute(self) -> list[StrategyResult]:
        """Return every catalog strategy, ACTIVE unless paused."""
        statuses = self._ledger.strategy_statuses()
        strategies = self._catalog.list_strategies()
        logger.debug("Listing %d strategies", len(strategies))

        return [
            StrategyResult(
                id=s.id,
                name=s.name,
                type=s.type.value,
                status=statuses.get(s.id, StrategyStatus.ACTIVE).value,
                pair=s.pair,
                amount=s.amount,
                parameters=dict(s.parameters),
                description=s.description,
            )
            for s in strategies
        ]
