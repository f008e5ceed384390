"""
Domain-specific errors for the sets bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class SetDomainError(Exception):
    """Base error for all sets domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidRequestError(SetDomainError):
    """Raised when a request to the set is malformed.

    The message is diagnostic only. It is logged, never returned
    to the caller.
    """
