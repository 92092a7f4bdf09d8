"""Store audit log — structured events describing what a store did.

A ``KeyValueStore`` with an attached ``Logger`` records one event per
visible change: an insert, an overwrite, a removal, a growth of the
backing list, or a clone.  Rejected calls (a null key passed to ``set``,
a miss in ``get``) are recorded too, just before the error is raised.

Each event carries the fields the store knows at that point (the key,
the slot index, a short detail such as ``16 -> 32``), so callers can
query the log by kind instead of parsing message text.

Design choices:
    - **The event kind decides the level.**  Inserts are DEBUG noise,
      growth and clones are INFO, rejected calls are WARNING.
    - **Threshold at record time.**  A logger created with
      ``min_level=LogLevel.INFO`` never stores DEBUG events.
"""

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class LogLevel(IntEnum):
    """Severity levels, ordered so thresholds compare with ``<``."""

    DEBUG = 0
    INFO = 1
    WARNING = 2


class StoreEvent(StrEnum):
    """Kinds of event a store can record."""

    INSERT = "insert"
    OVERWRITE = "overwrite"
    REMOVE = "remove"
    GROW = "grow"
    CLONE = "clone"
    NULL_KEY = "null-key"
    MISS = "miss"


_EVENT_LEVELS: dict[StoreEvent, LogLevel] = {
    StoreEvent.INSERT: LogLevel.DEBUG,
    StoreEvent.OVERWRITE: LogLevel.DEBUG,
    StoreEvent.REMOVE: LogLevel.DEBUG,
    StoreEvent.GROW: LogLevel.INFO,
    StoreEvent.CLONE: LogLevel.INFO,
    StoreEvent.NULL_KEY: LogLevel.WARNING,
    StoreEvent.MISS: LogLevel.WARNING,
}


@dataclass(frozen=True)
class LogEntry:
    """One recorded store event.

    Attributes:
        event: What happened.
        key: The key involved, if any.
        slot: The backing-list slot involved, if any.
        detail: Extra context (``"16 -> 32"`` for growth).

    """

    event: StoreEvent
    key: object = None
    slot: int | None = None
    detail: str = ""

    @property
    def level(self) -> LogLevel:
        """Return the severity implied by the event kind."""
        return _EVENT_LEVELS[self.event]

    def __str__(self) -> str:
        """Format as ``[LEVEL] event 'key' at slot N detail``."""
        parts = [f"[{self.level.name}]", str(self.event)]
        if self.key is not None:
            parts.append(repr(self.key))
        if self.slot is not None:
            parts.append(f"at slot {self.slot}")
        if self.detail:
            parts.append(self.detail)
        return " ".join(parts)


class Logger:
    """In-memory event log shared by a store and its clones."""

    def __init__(self, *, min_level: LogLevel = LogLevel.DEBUG) -> None:
        """Create an empty log.

        Args:
            min_level: Events below this level are dropped.

        """
        self._min_level = min_level
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return a copy of the recorded events, oldest first."""
        return list(self._entries)

    def record(
        self,
        event: StoreEvent,
        *,
        key: object = None,
        slot: int | None = None,
        detail: str = "",
    ) -> None:
        """Append an event unless its level is below the threshold."""
        entry = LogEntry(event=event, key=key, slot=slot, detail=detail)
        if entry.level >= self._min_level:
            self._entries.append(entry)

    def events(self, kind: StoreEvent) -> list[LogEntry]:
        """Return every recorded event of one kind."""
        return [e for e in self._entries if e.event is kind]

    def at_least(self, level: LogLevel) -> list[LogEntry]:
        """Return every recorded event at or above *level*."""
        return [e for e in self._entries if e.level >= level]

    def clear(self) -> None:
        """Forget all recorded events."""
        self._entries.clear()

    def __len__(self) -> int:
        """Return the number of recorded events."""
        return len(self._entries)
