"""
Application layer package.

Contains use cases that orchestrate the allocation ledger and ports.
Each use case is a single class with one public method.
This layer depends on domain ports, never on infrastructure.
"""
