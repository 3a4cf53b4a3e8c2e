"""
Allocation bounded context: domain layer.

This module contains all domain logic for the allocation context:
- Investor accounts and the allocation ledger
- Allocation-switch fee accounting
- Strategy pause/resume status
"""
