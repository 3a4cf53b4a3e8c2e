"""
Interfaces layer package.

FastAPI routers and Pydantic request/response schemas.
No business logic belongs here; routes call use cases.
"""
