"""
Allocation bounded context: infrastructure adapters.

Decision engines, simulated market data and the strategy catalog.
"""
