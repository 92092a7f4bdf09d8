"""Key/value store — an associative array without hashing.

The store keeps its entries in a plain list of ``Pair`` slots and finds
keys by scanning that list from the front.  Every public operation
except ``size()`` is therefore O(n) in the number of live entries.

Layout of the backing list::

    index:   0      1      2      3      ...   capacity-1
           [a:1]  [c:3]  [b:2]  None   ...   None
           |--- live (size) ---|--- spare slots -----|

Design choices:
    - **Capacity doubles on overflow** — appends are amortised O(1).
      A store built with zero capacity grows to one slot first.  The
      list never shrinks.
    - **Swap-with-last removal** — the last live entry is moved into the
      vacated slot, so removal never shifts the tail.  The price is that
      insertion order is lost after the first removal.
    - **Lookups return an index or None** — callers branch on the result
      rather than catching a "not found" exception.
    - **Errors only where a value is owed** — ``set`` rejects a ``None``
      key and ``get`` rejects a missing one.  ``has_key`` and ``remove``
      treat absence as an ordinary answer (``False`` / no-op).
"""

import contextlib
from typing import Generic, TypeVar

from py_kvstore.logging import Logger, StoreEvent
from py_kvstore.pair import Pair

DEFAULT_CAPACITY = 16

K = TypeVar("K")
V = TypeVar("V")


class StoreError(Exception):
    """Base class for key/value store errors."""


class NullKeyError(StoreError):
    """Raise when ``set`` is called with a ``None`` key."""


class KeyNotFoundError(StoreError, KeyError):
    """Raise when ``get`` cannot find the requested key."""

    def __str__(self) -> str:
        """Return the message without ``KeyError``'s repr quoting."""
        return str(self.args[0]) if self.args else ""


class KeyValueStore(Generic[K, V]):
    """A mutable associative array backed by a growable list.

    A stored key matches a query when it is the same object or compares
    equal with ``==``.  The identity check lets a key that is unequal to
    itself, such as ``float("nan")``, find its own entry.  Values are
    opaque: the store only returns or copies them.
    """

    def __init__(self, *, capacity: int = DEFAULT_CAPACITY, logger: Logger | None = None) -> None:
        """Create an empty store.

        Args:
            capacity: Initial number of slots in the backing list.
            logger: Optional audit log that receives store events.

        Raises:
            ValueError: If *capacity* is negative.

        """
        if capacity < 0:
            msg = f"Capacity must be non-negative, got {capacity}"
            raise ValueError(msg)
        self._pairs: list[Pair[K, V] | None] = [None] * capacity
        self._size = 0
        self._logger = logger

    @property
    def capacity(self) -> int:
        """Return the number of allocated slots."""
        return len(self._pairs)

    @property
    def logger(self) -> Logger | None:
        """Return the attached audit log, if any."""
        return self._logger

    # -- Public operations ------------------------------------------------

    def set(self, key: K | None, value: V) -> None:
        """Associate *value* with *key*.

        An existing entry with an equal key is overwritten in place.
        Otherwise a new entry is appended, growing the backing list
        first if every slot is in use.

        Raises:
            NullKeyError: If *key* is None.  The store is not modified.

        """
        if key is None:
            self._log(StoreEvent.NULL_KEY)
            msg = "Cannot set a value for a null key"
            raise NullKeyError(msg)

        index = self._find(key)
        if index is not None:
            self._live(index).value = value
            self._log(StoreEvent.OVERWRITE, key=key, slot=index)
            return

        if self._size == len(self._pairs):
            self._expand()
        self._pairs[self._size] = Pair(key, value)
        self._log(StoreEvent.INSERT, key=key, slot=self._size)
        self._size += 1

    def get(self, key: K | None) -> V:
        """Return the value associated with *key*.

        Raises:
            KeyNotFoundError: If *key* is None or not in the store.

        """
        index = None if key is None else self._find(key)
        if index is None:
            self._log(StoreEvent.MISS, key=key)
            msg = f"Key not found: {key!r}"
            raise KeyNotFoundError(msg)
        return self._live(index).value

    def has_key(self, key: K | None) -> bool:
        """Return True if a live entry has a key equal to *key*."""
        if key is None:
            return False
        return self._find(key) is not None

    def remove(self, key: K | None) -> None:
        """Remove the entry for *key*, if there is one.

        The last live entry is moved into the vacated slot, so the
        relative order of the remaining entries may change.
        """
        if key is None:
            return
        index = self._find(key)
        if index is None:
            return
        last = self._size - 1
        self._pairs[index] = self._pairs[last]
        self._pairs[last] = None
        self._size = last
        self._log(StoreEvent.REMOVE, key=key, slot=index)

    def size(self) -> int:
        """Return the number of live entries."""
        return self._size

    def clone(self) -> "KeyValueStore[K, V]":
        """Return an independent copy of this store.

        Each live pair is deep-copied and replayed through ``set`` on a
        fresh store, so the two stores share neither the backing list
        nor any mutable key or value.  The replay is not logged; the
        original's logger records a single ``clone`` event and is then
        shared with the copy.
        """
        copy: KeyValueStore[K, V] = KeyValueStore()
        for index in range(self._size):
            pair = self._live(index).copy(deep=True)
            # Live keys are never None, so the replay cannot be rejected.
            with contextlib.suppress(NullKeyError):
                copy.set(pair.key, pair.value)
        copy._logger = self._logger
        self._log(StoreEvent.CLONE, detail=f"{self._size} entries")
        return copy

    # -- Python protocols -------------------------------------------------

    def __len__(self) -> int:
        """Return the number of live entries."""
        return self._size

    def __contains__(self, key: object) -> bool:
        """Return True if *key* is in the store (same as ``has_key``)."""
        return self.has_key(key)  # pyright: ignore[reportArgumentType]

    def __str__(self) -> str:
        """Format as ``{k0:v0, k1:v1, ...}`` in backing-list order."""
        if self._size == 0:
            return "{}"
        body = ", ".join(str(self._live(i)) for i in range(self._size))
        return "{" + body + "}"

    def __repr__(self) -> str:
        """Return ``KeyValueStore({...})``."""
        return f"KeyValueStore({self})"

    # -- Internals --------------------------------------------------------

    def _find(self, key: K) -> int | None:
        """Return the slot index of the first live entry matching *key*."""
        for index in range(self._size):
            stored = self._live(index).key
            if stored is key or stored == key:
                return index
        return None

    def _expand(self) -> None:
        """Double the backing list (an empty list grows to one slot)."""
        old = len(self._pairs)
        new = old * 2 if old else 1
        self._pairs.extend([None] * (new - old))
        self._log(StoreEvent.GROW, detail=f"{old} -> {new}")

    def _live(self, index: int) -> Pair[K, V]:
        """Return the pair in a slot known to be below ``size``."""
        pair = self._pairs[index]
        assert pair is not None  # noqa: S101
        return pair

    def _log(
        self,
        event: StoreEvent,
        *,
        key: object = None,
        slot: int | None = None,
        detail: str = "",
    ) -> None:
        if self._logger is not None:
            self._logger.record(event, key=key, slot=slot, detail=detail)
