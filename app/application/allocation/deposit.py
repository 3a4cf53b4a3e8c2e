"""
Use case: Deposit funds into a strategy and rebalance the allocation.

Input: DepositCommand (investor, strategy_id, amount, asset)
Output: DepositResult
Side effects: Updates the investor account and the platform fee total.
Failure cases: ValidationError, InternalError.
"""

import logging
from typing import Optional

from app.application.allocation.dtos import DepositCommand, DepositResult
from app.domain.allocation.entities import MarketContext
from app.domain.allocation.ledger import AllocationLedger
from app.domain.allocation.ports import MarketDataPort

logger = logging.getLogger(__name__)


class DepositUseCase:
    """Orchestrates a strategy deposit.

    Reads the latest market observation first, then hands the deposit
    to the ledger. No IO happens once the ledger has the request.
    """

    def __init__(
        self,
        ledger: AllocationLedger,
        market_port: Optional[MarketDataPort] = None,
        pair: str = "XLM/USDC",
    ) -> None:
        self._ledger = ledger
        self._market_port = market_port
        self._pair = pair

    def execute(self, command: DepositCommand) -> DepositResult:
        """Run the deposit use case.

        Args:
            command: The deposit request.

        Returns:
            The deposit outcome, including any switch fee.

        Raises:
            ValidationError: If investor, strategy or amount is invalid.
            InternalError: If the ledger fails unexpectedly.
        """
        logger.info(
            "Deposit requested for investor=%s, strategy=%s",
            command.investor,
            command.strategy_id,
        )

        receipt = self._ledger.deposit(
            investor=command.investor,
            strategy_id=command.strategy_id,
            amount=command.amount,
            asset=command.asset,
            market=self._market_context(),
        )

        return DepositResult(
            investor=receipt.investor,
            strategy_id=receipt.strategy_id,
            asset=receipt.asset,
            new_balance=receipt.new_balance,
            allocation=receipt.allocation.value,
            fee_charged=receipt.fee_charged,
            platform_total_fees=receipt.platform_total_fees,
            decided_at=receipt.decided_at,
            simulated=receipt.simulated,
        )

    def _market_context(self) -> Optional[MarketContext]:
        if self._market_port is None:
            return None
        try:
            return self._market_port.get_context(self._pair)
        except Exception:
            logger.warning(
                "Market data unavailable for %s; deciding without it",
                self._pair,
                exc_info=True,
            )
            return None
