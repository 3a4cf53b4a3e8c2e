"""
Adapter: Simulated market data.

Implements MarketDataPort with randomized prices around the
XLM/USDC demo level. No network access.
"""

import random
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional

from app.domain.allocation.entities import MarketContext
from app.domain.allocation.ports import MarketDataPort

BASE_PRICE = 0.12
PRICE_SPREAD = 0.02
BASE_VOLUME = 1_000_000
VOLUME_SPREAD = 500_000
HIGH_24H = Decimal("0.13")
LOW_24H = Decimal("0.11")

# Prices are reported with 7 decimals, the Stellar amount precision.
_PRICE_PLACES = Decimal("0.0000001")


def _dec(value: float) -> Decimal:
    return Decimal(str(value)).quantize(_PRICE_PLACES)


class SimulatedMarketDataAdapter(MarketDataPort):
    """Random-walk-free price simulator.

    Every call draws fresh numbers; observations are independent.

    Args:
        rng: Random source. A fresh ``random.Random(seed)`` when omitted.
        seed: Seed for the default random source.
        clock: Returns the observation time.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._rng = rng if rng is not None else random.Random(seed)
        self._clock = clock

    def get_context(self, symbol: str) -> MarketContext:
        """Return a simulated observation for ``symbol``."""
        rng = self._rng
        return MarketContext(
            symbol=symbol,
            price=_dec(BASE_PRICE + rng.random() * PRICE_SPREAD),
            volume=_dec(BASE_VOLUME + rng.random() * VOLUME_SPREAD),
            change_24h=_dec((rng.random() - 0.5) * 0.1),
            change_percent_24h=_dec((rng.random() - 0.5) * 10),
            high_24h=HIGH_24H,
            low_24h=LOW_24H,
            observed_at=self._clock(),
        )
