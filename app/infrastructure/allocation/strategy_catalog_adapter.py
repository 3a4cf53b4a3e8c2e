"""
Adapter: Static strategy catalog.

Implements StrategyCatalogPort with the demo strategies the platform
ships with. In production this would be loaded from a database.
"""

from decimal import Decimal

from app.domain.allocation.entities import StrategyDescriptor, StrategyType
from app.domain.allocation.ports import StrategyCatalogPort

DEFAULT_STRATEGIES: tuple[StrategyDescriptor, ...] = (
    StrategyDescriptor(
        id="grid-strategy-1",
        name="XLM/USDC Grid Strategy",
        type=StrategyType.GRID,
        pair="XLM/USDC",
        amount=Decimal("1000"),
        parameters={
            "gridSize": 10,
            "gridSpacing": 0.01,
            "priceRange": {"min": 0.10, "max": 0.15},
            "rebalanceThreshold": 0.05,
        },
        description="Places buy and sell orders on a fixed price grid.",
    ),
    StrategyDescriptor(
        id="dca-strategy-1",
        name="XLM DCA Strategy",
        type=StrategyType.DCA,
        pair="XLM/USDC",
        amount=Decimal("100"),
        parameters={
            "interval": 60,
            "amount": 100,
            "maxInvestments": 24,
            "priceThreshold": 0.12,
        },
        description="Buys a fixed amount every interval (minutes).",
    ),
    StrategyDescriptor(
        id="momentum-strategy-1",
        name="XLM Momentum Strategy",
        type=StrategyType.MOMENTUM,
        pair="XLM/USDC",
        amount=Decimal("500"),
        parameters={
            "lookbackPeriod": 20,
            "momentumThreshold": 0.05,
            "volumeThreshold": 1_000_000,
            "indicators": ["RSI", "MACD", "BB"],
        },
        description="Follows short-term price momentum.",
    ),
)


class StaticStrategyCatalogAdapter(StrategyCatalogPort):
    """Serves a fixed, in-memory list of strategy descriptors."""

    def __init__(
        self, strategies: tuple[StrategyDescriptor, ...] = DEFAULT_STRATEGIES
    ) -> None:
        self._strategies = {s.id: s for s in strategies}

    def list_strategies(self) -> list[StrategyDescriptor]:
        return list(self._strategies.values())
