"""
Domain-specific errors for the allocation bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class AllocationDomainError(Exception):
    """Base error for all allocation domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(AllocationDomainError):
    """Raised when a required field is missing or malformed.

    Caller-correctable. Raised before any state is touched.
    """


class InternalError(AllocationDomainError):
    """Raised when an operation fails for an unexpected reason.

    The ledger guarantees that no partial update survives this error.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Internal ledger failure: {reason}")
        self.reason = reason


class AccountNotFoundError(AllocationDomainError):
    """Raised when no account exists for the requested investor."""

    def __init__(self, investor: str) -> None:
        super().__init__(f"Investor account not found: {investor}")
        self.investor = investor
