"""
Use case: Report ledger activity for the metrics endpoint.

Input: none
Output: PlatformMetricsResult
Side effects: None.
"""

from app.application.allocation.dtos import PlatformMetricsResult
from app.domain.allocation.ledger import AllocationLedger


class GetPlatformMetricsUseCase:
    """Summarises deposits, switches and fees recorded by the ledger."""

    def __init__(self, ledger: AllocationLedger) -> None:
        self._ledger = ledger

    def execute(self) -> PlatformMetricsResult:
        stats = self._ledger.stats()
        return PlatformMetricsResult(
            deposits=stats.deposits,
            switches=stats.switches,
            failed_deposits=stats.failed_deposits,
            accounts=stats.accounts,
            platform_total_fees=stats.platform_total_fees,
            fee_rate=stats.fee_rate,
        )
