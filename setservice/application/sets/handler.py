"""
Request handler: adapt HTTP-shaped calls to the SetStore port.

Input: a single value, a collection of values, or nothing (read).
Output: HandlerResult wrapping the store's answer.
Side effects: Mutates the injected store on the add operations.
Failure cases: InvalidRequestError, returned as Failure.
"""

import logging
from collections.abc import Iterable

from setservice.application.sets.results import Failure, HandlerResult, Success
from setservice.domain.sets.errors import InvalidRequestError
from setservice.domain.sets.ports import SetStore

logger = logging.getLogger(__name__)


class SetRequestHandler:
    """Stateless façade over a SetStore.

    The store is passed in at construction so the HTTP layer can be
    wired with a real store in production and a double in tests.
    """

    def __init__(self, store: SetStore) -> None:
        self._store = store

    def add_single(self, value: str) -> HandlerResult[bool]:
        """Add one value.

        Returns:
            Success carrying True if the value was new, False if it
            was already stored.
        """
        try:
            added = self._store.add_one(value)
        except InvalidRequestError as exc:
            return self._reject("add_single", exc)
        return Success(added)

    def add_multiple(self, values: Iterable[str]) -> HandlerResult[None]:
        """Add every value in ``values``. The result carries no payload."""
        try:
            self._store.add_many(values)
        except InvalidRequestError as exc:
            return self._reject("add_multiple", exc)
        return Success(None)

    def get_all(self) -> HandlerResult[frozenset[str]]:
        """Return a snapshot of everything stored so far."""
        try:
            values = self._store.snapshot()
        except InvalidRequestError as exc:
            return self._reject("get_all", exc)
        return Success(values)

    @staticmethod
    def _reject(operation: str, exc: InvalidRequestError) -> Failure:
        logger.info("Rejected %s request: %s", operation, exc.message)
        return Failure(error=exc)
