"""
Allocation ledger.

Owns every piece of mutable allocation state for one process:
investor accounts, strategy statuses, the platform fee total and
activity counters.
All state lives behind a single lock. Deposits are staged on local
values and committed in one step, so a failure half way through
leaves nothing behind.
"""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional

from app.domain.allocation.entities import (
    AccountSnapshot,
    Allocation,
    DepositReceipt,
    InvestorAccount,
    LedgerStats,
    MarketContext,
    StrategyStatus,
)
from app.domain.allocation.errors import (
    AccountNotFoundError,
    InternalError,
    ValidationError,
)
from app.domain.allocation.money import ZERO, parse_number, quantize, to_amount
from app.domain.allocation.ports import AllocationDecisionPort

logger = logging.getLogger(__name__)

DEFAULT_FEE_RATE = Decimal("0.005")
DEFAULT_NATIVE_ASSET = "XLM"

DEPOSIT_VALIDATION_MESSAGE = (
    "Fields investor, strategyId and positive amount are required"
)
STRATEGY_ID_REQUIRED_MESSAGE = "Strategy ID is required"
INVESTOR_REQUIRED_MESSAGE = "Investor is required"
AMOUNT_BELOW_PRECISION_MESSAGE = "Amount must be at least 0.00000001"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


@dataclass(frozen=True)
class _DepositRequest:
    investor: str
    strategy_id: str
    amount: Decimal
    asset: str


class AllocationLedger:
    """In-memory ledger of investor allocations and switch fees.

    Args:
        decision_port: Decides the target allocation on each deposit.
        fee_rate: Fraction of the post-deposit balance charged on a switch.
        native_asset: Asset label used when a deposit names none.
        clock: Returns the current time. Injected for tests.
    """

    def __init__(
        self,
        decision_port: AllocationDecisionPort,
        fee_rate: Decimal = DEFAULT_FEE_RATE,
        native_asset: str = DEFAULT_NATIVE_ASSET,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        fee_rate = Decimal(str(fee_rate))
        if not (ZERO <= fee_rate < 1):
            raise ValueError(f"fee_rate must be in [0, 1), got {fee_rate}")

        self._decision_port = decision_port
        self._fee_rate = fee_rate
        self._native_asset = native_asset
        self._clock = clock

        self._lock = threading.Lock()
        self._accounts: dict[str, InvestorAccount] = {}
        self._strategy_status: dict[str, StrategyStatus] = {}
        self._platform_total_fees = ZERO
        self._deposit_count = 0
        self._switch_count = 0
        self._failed_deposit_count = 0

    @property
    def fee_rate(self) -> Decimal:
        return self._fee_rate

    @property
    def native_asset(self) -> str:
        return self._native_asset

    @property
    def platform_total_fees(self) -> Decimal:
        """Sum of every fee charged since the ledger was created."""
        with self._lock:
            return self._platform_total_fees

    # ── Deposits ─────────────────────────────────────────────────────

    def deposit(
        self,
        investor: str,
        strategy_id: str,
        amount: object,
        asset: Optional[str] = None,
        market: Optional[MarketContext] = None,
    ) -> DepositReceipt:
        """Credit a deposit, run the allocation decision, charge switch fees.

        Args:
            investor: Investor identifier. Must be non-empty.
            strategy_id: Strategy the deposit is made under. Must be non-empty.
            amount: Finite number strictly greater than zero.
            asset: Asset label echoed back in the receipt.
            market: Market observation forwarded to the decision port.

        Returns:
            The resulting DepositReceipt.

        Raises:
            ValidationError: On malformed input. Nothing is changed.
            InternalError: On any unexpected failure. Nothing is changed.
        """
        request = self._validate_deposit(investor, strategy_id, amount, asset)

        with self._lock:
            try:
                receipt = self._apply_deposit(request, market)
            except Exception as exc:
                self._failed_deposit_count += 1
                logger.exception(
                    "Deposit failed for investor=%s; state left unchanged",
                    request.investor,
                )
                raise InternalError(type(exc).__name__) from exc

        logger.info(
            "Deposit investor=%s strategy=%s amount=%s allocation=%s fee=%s",
            receipt.investor,
            receipt.strategy_id,
            request.amount,
            receipt.allocation.value,
            receipt.fee_charged,
        )
        return receipt

    def _validate_deposit(
        self,
        investor: object,
        strategy_id: object,
        amount: object,
        asset: Optional[str],
    ) -> _DepositRequest:
        if _is_blank(investor) or _is_blank(strategy_id):
            raise ValidationError(DEPOSIT_VALIDATION_MESSAGE)

        raw = parse_number(amount)
        if raw is None or raw <= ZERO:
            raise ValidationError(DEPOSIT_VALIDATION_MESSAGE)
        value = to_amount(raw)
        if value is None:
            raise ValidationError(DEPOSIT_VALIDATION_MESSAGE)
        if value == ZERO:
            raise ValidationError(AMOUNT_BELOW_PRECISION_MESSAGE)

        return _DepositRequest(
            investor=investor,
            strategy_id=strategy_id,
            amount=value,
            asset=asset if not _is_blank(asset) else self._native_asset,
        )

    def _apply_deposit(
        self, request: _DepositRequest, market: Optional[MarketContext]
    ) -> DepositReceipt:
        """Stage every change locally and commit only at the end.

        Caller holds the lock.
        """
        current = self._accounts.get(request.investor)
        if current is None:
            current = InvestorAccount(
                investor=request.investor, strategy_id=request.strategy_id
            )

        balance = quantize(current.balance + request.amount)
        staged = AccountSnapshot(
            investor=current.investor,
            strategy_id=current.strategy_id,
            balance=balance,
            allocation=current.allocation,
            last_decision_at=current.last_decision_at,
        )

        decision = self._decision_port.decide(staged, market)
        if not isinstance(decision, Allocation):
            raise TypeError(f"decision port returned {decision!r}")

        fee = ZERO
        total_fees = self._platform_total_fees
        switched = decision is not current.allocation
        if switched:
            fee = quantize(balance * self._fee_rate)
            balance = quantize(balance - fee)
            total_fees = quantize(total_fees + fee)

        decided_at = max(self._clock(), current.last_decision_at)

        # Commit.
        self._accounts[request.investor] = InvestorAccount(
            investor=request.investor,
            strategy_id=request.strategy_id,
            balance=balance,
            allocation=decision,
            last_decision_at=decided_at,
        )
        self._platform_total_fees = total_fees
        self._deposit_count += 1
        if switched:
            self._switch_count += 1

        return DepositReceipt(
            investor=request.investor,
            strategy_id=request.strategy_id,
            asset=request.asset,
            new_balance=balance,
            allocation=decision,
            fee_charged=fee,
            platform_total_fees=total_fees,
            decided_at=decided_at,
            switched=switched,
        )

    # ── Accounts ─────────────────────────────────────────────────────

    def get_account(self, investor: str) -> AccountSnapshot:
        """Return a snapshot of an investor's account.

        Raises:
            ValidationError: If investor is empty.
            AccountNotFoundError: If the investor never deposited.
        """
        if _is_blank(investor):
            raise ValidationError(INVESTOR_REQUIRED_MESSAGE)
        with self._lock:
            account = self._accounts.get(investor)
            if account is None:
                raise AccountNotFoundError(investor)
            return account.snapshot()

    def stats(self) -> LedgerStats:
        """Return activity counters taken under one lock."""
        with self._lock:
            return LedgerStats(
                deposits=self._deposit_count,
                switches=self._switch_count,
                failed_deposits=self._failed_deposit_count,
                accounts=len(self._accounts),
                platform_total_fees=self._platform_total_fees,
                fee_rate=self._fee_rate,
            )

    # ── Strategy status ──────────────────────────────────────────────

    def pause_strategy(self, strategy_id: str) -> StrategyStatus:
        """Mark a strategy PAUSED. Idempotent."""
        return self._set_status(strategy_id, StrategyStatus.PAUSED)

    def resume_strategy(self, strategy_id: str) -> StrategyStatus:
        """Mark a strategy ACTIVE. Idempotent, works on unknown IDs."""
        return self._set_status(strategy_id, StrategyStatus.ACTIVE)

    def strategy_status(self, strategy_id: str) -> StrategyStatus:
        """Return a strategy's status; ACTIVE when never set."""
        if _is_blank(strategy_id):
            raise ValidationError(STRATEGY_ID_REQUIRED_MESSAGE)
        with self._lock:
            return self._strategy_status.get(strategy_id, StrategyStatus.ACTIVE)

    def strategy_statuses(self) -> dict[str, StrategyStatus]:
        """Return a copy of every explicitly set strategy status."""
        with self._lock:
            return dict(self._strategy_status)

    def _set_status(
        self, strategy_id: str, status: StrategyStatus
    ) -> StrategyStatus:
        if _is_blank(strategy_id):
            raise ValidationError(STRATEGY_ID_REQUIRED_MESSAGE)
        with self._lock:
            self._strategy_status[strategy_id] = status
        logger.info("Strategy %s set to %s", strategy_id, status.value)
        return status
