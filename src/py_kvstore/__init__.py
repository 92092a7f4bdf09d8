"""py-kvstore — an associative array built on a growable list.

Re-exports public symbols so callers can write::

    from py_kvstore import KeyValueStore, KeyNotFoundError
"""

from py_kvstore.logging import LogEntry, Logger, LogLevel, StoreEvent
from py_kvstore.pair import Pair
from py_kvstore.store import (
    DEFAULT_CAPACITY,
    KeyNotFoundError,
    KeyValueStore,
    NullKeyError,
    StoreError,
)

__all__ = [
    "DEFAULT_CAPACITY",
    "KeyNotFoundError",
    "KeyValueStore",
    "LogEntry",
    "LogLevel",
    "Logger",
    "NullKeyError",
    "Pair",
    "StoreError",
    "StoreEvent",
]
