"""
Use case: Read current (simulated) market prices.

Input: list of trading pairs
Output: list[MarketPriceResult]
Side effects: None.
"""

import logging

from app.application.allocation.dtos import MarketPriceResult
from app.domain.allocation.ports import MarketDataPort

logger = logging.getLogger(__name__)


class GetMarketPricesUseCase:
    """Fetches one observation per configured pair."""

    def __init__(self, market_port: MarketDataPort, pairs: list[str]) -> None:
        self._market_port = market_port
        self._pairs = list(pairs)

    def execute(self) -> list[MarketPriceResult]:
        results = []
        for pair in self._pairs:
            ctx = self._market_port.get_context(pair)
            results.append(
                MarketPriceResult(
                    symbol=ctx.symbol,
                    price=ctx.price,
                    volume=ctx.volume,
                    change_24h=ctx.change_24h,
                    change_percent_24h=ctx.change_percent_24h,
                    high_24h=ctx.high_24h,
                    low_24h=ctx.low_24h,
                    timestamp=ctx.observed_at,
                )
            )
        return results
