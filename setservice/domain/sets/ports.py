"""
Port interfaces (ABCs) for the sets bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class SetStore(ABC):
    """Port for a mutable collection of unique strings.

    Implementations must make every operation safe to call from
    concurrent requests.
    """

    @abstractmethod
    def add_one(self, value: str) -> bool:
        """Insert a single value.

        Args:
            value: Any string.

        Returns:
            True if the value was not present before, False otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    def add_many(self, values: Iterable[str]) -> None:
        """Insert every value, ignoring those already present."""
        raise NotImplementedError

    @abstractmethod
    def snapshot(self) -> frozenset[str]:
        """Return an independent copy of the current contents."""
        raise NotImplementedError
