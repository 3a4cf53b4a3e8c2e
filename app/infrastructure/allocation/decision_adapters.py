"""
Adapters: Allocation decision engines.

Implement AllocationDecisionPort.
RandomSignalDecisionAdapter stands in for a predictive model or an
on-chain contract call. MomentumDecisionAdapter is a deterministic
alternative that follows the 24h price change.
"""

import logging
import random
from typing import Optional

from app.domain.allocation.entities import AccountSnapshot, Allocation, MarketContext
from app.domain.allocation.ports import AllocationDecisionPort

logger = logging.getLogger(__name__)

DECISION_MODE_RANDOM = "random"
DECISION_MODE_MOMENTUM = "momentum"
DECISION_MODES = (DECISION_MODE_RANDOM, DECISION_MODE_MOMENTUM)


class RandomSignalDecisionAdapter(AllocationDecisionPort):
    """Draws a uniform signal in [-signal_range, +signal_range].

    A positive signal means INVESTED, anything else STABLE.

    Args:
        signal_range: Half-width of the signal interval.
        rng: Random source. A fresh ``random.Random(seed)`` when omitted.
        seed: Seed for the default random source.
    """

    def __init__(
        self,
        signal_range: float = 0.5,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        if signal_range <= 0:
            raise ValueError("signal_range must be positive")
        self._signal_range = signal_range
        self._rng = rng if rng is not None else random.Random(seed)

    def decide(
        self, account: AccountSnapshot, market: Optional[MarketContext] = None
    ) -> Allocation:
        signal = self._rng.uniform(-self._signal_range, self._signal_range)
        decision = Allocation.INVESTED if signal > 0 else Allocation.STABLE
        logger.debug(
            "Signal %.4f for investor=%s -> %s",
            signal,
            account.investor,
            decision.value,
        )
        return decision


class MomentumDecisionAdapter(AllocationDecisionPort):
    """Invests while the pair is up over 24h; stays stable otherwise.

    Without market context there is nothing to follow, so it stays
    STABLE.
    """

    def decide(
        self, account: AccountSnapshot, market: Optional[MarketContext] = None
    ) -> Allocation:
        if market is None:
            return Allocation.STABLE
        if market.change_24h > 0:
            return Allocation.INVESTED
        return Allocation.STABLE


def build_decision_adapter(
    mode: str, signal_range: float = 0.5, seed: Optional[int] = None
) -> AllocationDecisionPort:
    """Return the decision adapter configured by ``mode``.

    Raises:
        ValueError: If ``mode`` is not one of DECISION_MODES.
    """
    mode = mode.strip().lower()
    if mode == DECISION_MODE_RANDOM:
        return RandomSignalDecisionAdapter(signal_range=signal_range, seed=seed)
    if mode == DECISION_MODE_MOMENTUM:
        return MomentumDecisionAdapter()
    raise ValueError(
        f"Unknown decision mode {mode!r}; expected one of {DECISION_MODES}"
    )
