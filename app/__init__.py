"""
Stellar AI Trading Automation: allocation and fee-accounting backend.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - allocation: Investor deposits, allocation decisions, switch fees,
      strategy pause/resume.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors, ledger.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (decision engines, simulated market data,
      strategy catalog) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
