"""
Allocation bounded context: interface layer.

FastAPI router, Pydantic schemas and dependency wiring.
"""
