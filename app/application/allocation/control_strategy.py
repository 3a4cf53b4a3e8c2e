"""
Use cases: Pause, resume and inspect a strategy.

Input: StrategyControlCommand / GetStrategyStatusQuery
Output: StrategyControlResult / StrategyStatusResult
Side effects: Pause and resume update the strategy status map.
Failure cases: ValidationError when the strategy ID is missing.
"""

import logging

from app.application.allocation.dtos import (
    GetStrategyStatusQuery,
    StrategyControlCommand,
    StrategyControlResult,
    StrategyStatusResult,
)
from app.domain.allocation.ledger import AllocationLedger

logger = logging.getLogger(__name__)


class PauseStrategyUseCase:
    """Marks a strategy PAUSED."""

    def __init__(self, ledger: AllocationLedger) -> None:
        self._ledger = ledger

    def execute(self, command: StrategyControlCommand) -> StrategyControlResult:
        """Pause the strategy named in the command.

        Raises:
            ValidationError: If the strategy ID is missing.
        """
        status = self._ledger.pause_strategy(command.strategy_id)
        return StrategyControlResult(
            strategy_id=command.strategy_id,
            status=status.value,
            message=f"Strategy {command.strategy_id} paused successfully",
        )


class ResumeStrategyUseCase:
    """Marks a strategy ACTIVE."""

    def __init__(self, ledger: AllocationLedger) -> None:
        self._ledger = ledger

    def execute(self, command: StrategyControlCommand) -> StrategyControlResult:
        """Resume the strategy named in the command.

        Raises:
            ValidationError: If the strategy ID is missing.
        """
        status = self._ledger.resume_strategy(command.strategy_id)
        return StrategyControlResult(
            strategy_id=command.strategy_id,
            status=status.value,
            message=f"Strategy {command.strategy_id} resumed successfully",
        )


class GetStrategyStatusUseCase:
    def __init__(self, ledger: AllocationLedger) -> None:
        self._ledger = ledger

    def execute(self, query: GetStrategyStatusQuery) -> StrategyStatusResult:
        status = self._ledger.strategy_status(query.strategy_id)
        return StrategyStatusResult(
            strategy_id=query.strategy_id, status=status.value
        )
