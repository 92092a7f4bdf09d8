"""Key/value pairs — the entries a store keeps in its backing list."""

import copy as _copy
from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Pair(Generic[K, V]):
    """One key/value entry.

    Pairs are mutable: the store overwrites ``value`` in place when a
    key is set a second time.
    """

    key: K
    value: V

    def copy(self, *, deep: bool = False) -> "Pair[K, V]":
        """Return a new pair holding the same key and value.

        Args:
            deep: When True, the key and value are copied with
                ``copy.deepcopy`` so the new pair shares no mutable
                state with this one.  Otherwise both objects are shared.

        """
        if deep:
            return Pair(_copy.deepcopy(self.key), _copy.deepcopy(self.value))
        return Pair(self.key, self.value)

    def __str__(self) -> str:
        """Format as ``key:value``."""
        return f"{self.key}:{self.value}"
