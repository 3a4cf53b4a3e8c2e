"""
Tests for the allocation application layer (use cases).

Tests use cases with a real in-memory ledger and stubbed ports.
Each test verifies orchestration logic and DTO mapping.
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from app.application.allocation.control_strategy import (
    GetStrategyStatusUseCase,
    PauseStrategyUseCase,
    ResumeStrategyUseCase,
)
from app.application.allocation.deposit import DepositUseCase
from app.application.allocation.dtos import (
    DepositCommand,
    GetInvestorAccountQuery,
    GetStrategyStatusQuery,
    StrategyControlCommand,
)
from app.application.allocation.get_investor_account import (
    GetInvestorAccountUseCase,
)
from app.application.allocation.get_market_prices import GetMarketPricesUseCase
from app.application.allocation.get_platform_fees import GetPlatformFeesUseCase
from app.application.allocation.get_platform_metrics import (
    GetPlatformMetricsUseCase,
)
from app.application.allocation.list_strategies import ListStrategiesUseCase
from app.domain.allocation.entities import Allocation, MarketContext
from app.domain.allocation.errors import AccountNotFoundError, ValidationError
from app.domain.allocation.ports import MarketDataPort
from app.infrastructure.allocation.strategy_catalog_adapter import (
    StaticStrategyCatalogAdapter,
)


def _market(change: str = "0.01") -> MarketContext:
    return MarketContext(
        symbol="XLM/USDC",
        price=Decimal("0.125"),
        change_24h=Decimal(change),
        change_percent_24h=Decimal("1.5"),
        volume=Decimal("1200000"),
        high_24h=Decimal("0.13"),
        low_24h=Decimal("0.11"),
        observed_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestDepositUseCase:
    """Tests for the DepositUseCase."""

    def test_maps_receipt_to_result(self, ledger, decision) -> None:
        """The ledger receipt is mapped onto a DepositResult."""
        decision.push(Allocation.INVESTED)
        use_case = DepositUseCase(ledger=ledger)

        result = use_case.execute(
            DepositCommand(investor="inv1", strategy_id="grid-1", amount=1000)
        )

        assert result.allocation == "INVESTED"
        assert result.new_balance == Decimal("995")
        assert result.fee_charged == Decimal("5")
        assert result.platform_total_fees == Decimal("5")
        assert result.asset == "XLM"
        assert result.simulated is True

    def test_market_context_reaches_decision_port(self, ledger, decision) -> None:
        """Market data for the configured pair is handed to the decision port."""
        market_port = MagicMock(spec=MarketDataPort)
        market_port.get_context.return_value = _market()
        use_case = DepositUseCase(ledger=ledger, market_port=market_port, pair="XLM/USDC")

        use_case.execute(DepositCommand(investor="inv1", strategy_id="s1", amount=5))

        market_port.get_context.assert_called_once_with("XLM/USDC")
        _, market = decision.calls[0]
        assert market == _market()

    def test_market_failure_does_not_block_deposit(self, ledger, decision) -> None:
        """A failing market feed means the decision runs without context."""
        market_port = MagicMock(spec=MarketDataPort)
        market_port.get_context.side_effect = ConnectionError("feed down")
        use_case = DepositUseCase(ledger=ledger, market_port=market_port)

        result = use_case.execute(
            DepositCommand(investor="inv1", strategy_id="s1", amount=5)
        )

        assert result.new_balance == Decimal("5")
        _, market = decision.calls[0]
        assert market is None

    def test_validation_error_propagates(self, ledger) -> None:
        use_case = DepositUseCase(ledger=ledger)
        with pytest.raises(ValidationError):
            use_case.execute(DepositCommand(investor="", strategy_id="s1", amount=100))
        assert ledger.platform_total_fees == 0


class TestStrategyControlUseCases:
    """Tests for pause, resume and status lookups."""

    def test_pause_message(self, ledger) -> None:
        """Pausing reports PAUSED with a confirmation message."""
        result = PauseStrategyUseCase(ledger).execute(
            StrategyControlCommand(strategy_id="grid-strategy-1")
        )
        assert result.status == "PAUSED"
        assert result.message == "Strategy grid-strategy-1 paused successfully"

    def test_resume_message(self, ledger) -> None:
        """Resuming reports ACTIVE with a confirmation message."""
        result = ResumeStrategyUseCase(ledger).execute(
            StrategyControlCommand(strategy_id="grid-strategy-1")
        )
        assert result.status == "ACTIVE"
        assert result.message == "Strategy grid-strategy-1 resumed successfully"

    def test_missing_id(self, ledger) -> None:
        with pytest.raises(ValidationError):
            PauseStrategyUseCase(ledger).execute(StrategyControlCommand(strategy_id=None))

    def test_status_lookup(self, ledger) -> None:
        ledger.pause_strategy("s1")
        result = GetStrategyStatusUseCase(ledger).execute(
            GetStrategyStatusQuery(strategy_id="s1")
        )
        assert result.status == "PAUSED"


class TestReadUseCases:
    """Tests for account, fee, metrics, strategy and market read models."""

    def test_get_account(self, ledger, clock) -> None:
        """The account result mirrors the ledger snapshot."""
        ledger.deposit("inv1", "s1", 12)
        result = GetInvestorAccountUseCase(ledger).execute(
            GetInvestorAccountQuery(investor="inv1")
        )
        assert result.balance == Decimal("12")
        assert result.allocation == "STABLE"
        assert result.last_decision_at == clock.now

    def test_get_account_missing(self, ledger) -> None:
        with pytest.raises(AccountNotFoundError):
            GetInvestorAccountUseCase(ledger).execute(
                GetInvestorAccountQuery(investor="nobody")
            )

    def test_platform_fees(self, ledger, decision) -> None:
        decision.push(Allocation.INVESTED)
        ledger.deposit("inv1", "s1", 200)
        assert GetPlatformFeesUseCase(ledger).execute().platform_total_fees == Decimal("1")

    def test_platform_metrics(self, ledger, decision) -> None:
        """Metrics report deposits, switches, accounts, fees and the fee rate."""
        decision.push(Allocation.INVESTED, Allocation.INVESTED)
        ledger.deposit("inv1", "s1", 200)
        ledger.deposit("inv2", "s1", 100)

        result = GetPlatformMetricsUseCase(ledger).execute()

        assert result.deposits == 2
        assert result.switches == 2
        assert result.failed_deposits == 0
        assert result.accounts == 2
        assert result.platform_total_fees == Decimal("1.5")
        assert result.fee_rate == Decimal("0.005")

    def test_list_strategies_merges_status(self, ledger) -> None:
        """Catalog entries carry live status; unknown IDs are not listed."""
        ledger.pause_strategy("dca-strategy-1")
        ledger.pause_strategy("not-in-catalog")
        results = ListStrategiesUseCase(ledger, StaticStrategyCatalogAdapter()).execute()

        statuses = {r.id: r.status for r in results}
        assert statuses == {
            "grid-strategy-1": "ACTIVE",
            "dca-strategy-1": "PAUSED",
            "momentum-strategy-1": "ACTIVE",
        }

    def test_market_prices_one_per_pair(self) -> None:
        market_port = MagicMock(spec=MarketDataPort)
        market_port.get_context.return_value = _market()
        results = GetMarketPricesUseCase(market_port, ["XLM/USDC"]).execute()

        assert len(results) == 1
        assert results[0].price == Decimal("0.125")
        assert results[0].timestamp == datetime(2024, 1, 1, tzinfo=timezone.utc)
