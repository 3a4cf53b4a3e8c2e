"""
Shared fixtures for the allocation test suite.

Provides deterministic decision stubs, a controllable clock and
fresh ledgers/apps so that no state leaks between tests.
"""

import threading
from datetime import datetime, timezone
from typing import Iterable, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.allocation.entities import AccountSnapshot, Allocation, MarketContext
from app.domain.allocation.ledger import AllocationLedger
from app.domain.allocation.ports import AllocationDecisionPort
from app.main import create_app


class ScriptedDecision(AllocationDecisionPort):
    """Returns decisions from a script; falls back to ``default``."""

    def __init__(
        self,
        decisions: Iterable[Allocation] = (),
        default: Allocation = Allocation.STABLE,
    ) -> None:
        self._decisions = list(decisions)
        self.default = default
        self.calls: list[tuple[AccountSnapshot, Optional[MarketContext]]] = []
        self._lock = threading.Lock()

    def push(self, *decisions: Allocation) -> None:
        with self._lock:
            self._decisions.extend(decisions)

    def decide(self, account, market=None):
        with self._lock:
            self.calls.append((account, market))
            if self._decisions:
                return self._decisions.pop(0)
            return self.default


class AlwaysSwitch(AllocationDecisionPort):
    """Always picks the opposite of the current allocation."""

    def decide(self, account, market=None):
        if account.allocation is Allocation.STABLE:
            return Allocation.INVESTED
        return Allocation.STABLE


class ExplodingDecision(AllocationDecisionPort):
    """Fails every decision, as a broken engine would."""

    def decide(self, account, market=None):
        raise RuntimeError("decision engine offline")


class ManualClock:
    """A clock the test moves by hand."""

    def __init__(self, start: Optional[datetime] = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def decision() -> ScriptedDecision:
    """A decision stub that answers STABLE unless scripted."""
    return ScriptedDecision()


@pytest.fixture
def clock() -> ManualClock:
    """A clock fixed at 2024-01-01 12:00 UTC."""
    return ManualClock()


@pytest.fixture
def ledger(decision: ScriptedDecision, clock: ManualClock) -> AllocationLedger:
    """A fresh ledger driven by the scripted decision stub."""
    return AllocationLedger(decision_port=decision, clock=clock)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with rate limiting off and a fixed seed, ignoring .env."""
    return Settings(
        _env_file=None,
        rate_limit_enabled=False,
        decision_seed=7,
        log_level="WARNING",
    )


@pytest.fixture
def client(test_settings: Settings, decision: ScriptedDecision, clock: ManualClock) -> TestClient:
    """A TestClient over a brand-new app (and therefore a brand-new ledger)."""
    app = create_app(settings=test_settings, decision_port=decision, clock=clock)
    return TestClient(app)
