"""
Result types returned by the set request handler.

A handler call either succeeds with a value or fails with an
InvalidRequestError. The transport layer checks ``ok`` to choose
the response path instead of catching exceptions.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar

from setservice.domain.sets.errors import InvalidRequestError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A completed handler call.

    Attributes:
        value: The payload to encode in the response body.
    """

    value: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    """A handler call rejected as a malformed request.

    Attributes:
        error: The validation failure, kept for logging only.
    """

    error: InvalidRequestError
    ok: ClassVar[bool] = False


HandlerResult = Success[T] | Failure
