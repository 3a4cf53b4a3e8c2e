"""
Infrastructure layer package.

Concrete implementations (adapters) of the domain ports: decision
engines, simulated market data and the strategy catalog.
"""
