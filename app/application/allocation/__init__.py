"""
Allocation bounded context: application layer.

Use cases for deposits, strategy control and read-only views.
"""
