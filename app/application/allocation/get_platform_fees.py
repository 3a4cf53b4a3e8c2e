"""
Use case: Read the platform-wide fee total.

Input: none
Output: PlatformFeesResult
Side effects: None.
"""

from app.application.allocation.dtos import PlatformFeesResult
from app.domain.allocation.ledger import AllocationLedger


class GetPlatformFeesUseCase:
    """Returns the sum of every switch fee charged so far."""

    def __init__(self, ledger: AllocationLedger) -> None:
        self._ledger = ledger

    def execute(self) -> PlatformFeesResult:
        return PlatformFeesResult(
            platform_total_fees=self._ledger.platform_total_fees
        )
