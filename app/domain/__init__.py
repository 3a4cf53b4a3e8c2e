"""
Domain layer package.

Contains pure business logic: entities, the allocation ledger, money
rounding and port interfaces. No framework imports, no IO.
"""
