"""
Use case: Read an investor's allocation account.

Input: GetInvestorAccountQuery (investor)
Output: InvestorAccountResult
Side effects: None.
Failure cases: ValidationError, AccountNotFoundError.
"""

import logging

from app.application.allocation.dtos import (
    GetInvestorAccountQuery,
    InvestorAccountResult,
)
from app.domain.allocation.ledger import AllocationLedger

logger = logging.getLogger(__name__)


class GetInvestorAccountUseCase:
    """Returns the current state of one investor account."""

    def __init__(self, ledger: AllocationLedger) -> None:
        self._ledger = ledger

    def execute(self, query: GetInvestorAccountQuery) -> InvestorAccountResult:
        """Run the account lookup.

        Raises:
            AccountNotFoundError: If the investor never deposited.
        """
        logger.debug("Reading account for investor=%s", query.investor)
        account = self._ledger.get_account(query.investor)
        return InvestorAccountResult(
            investor=account.investor,
            strategy_id=account.strategy_id,
            balance=account.balance,
            allocation=account.allocation.value,
            last_decision_at=account.last_decision_at,
        )
