"""The shell — a command interpreter for one key/value store.

The shell reads a command string, splits it into a command name and
arguments, dispatches to the matching handler, and returns a string
result.  It is the caller the store's error contract is written for:
``NullKeyError`` and ``KeyNotFoundError`` are caught here and turned
into ``Error: ...`` lines.

Design choices:
    - **Returns strings, not prints.**  This keeps the shell fully
      testable and lets the REPL or the web UI decide how to display
      output.
    - **Command dispatch via a dict.**  Adding a new command means
      writing a method and adding one dict entry.
    - **``null`` names the null key.**  Shell words are always strings,
      so the literal word ``null`` is passed to the store as ``None``.
"""

from collections.abc import Callable

from py_kvstore.logging import Logger
from py_kvstore.store import KeyValueStore, StoreError

# Type alias for a command handler: takes a list of args, returns output.
_Handler = Callable[[list[str]], str]

NULL_WORD = "null"


def parse_key(word: str) -> str | None:
    """Map a shell word to a store key (``null`` becomes ``None``)."""
    return None if word == NULL_WORD else word


class Shell:
    """Command interpreter bound to a single store."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, store: KeyValueStore[str, str] | None = None) -> None:
        """Create a shell.

        Args:
            store: The store to operate on.  When omitted, a new store
                with an attached ``Logger`` is created.

        """
        self._store: KeyValueStore[str, str] = (
            store if store is not None else KeyValueStore(logger=Logger())
        )

        # Command dispatch table: maps command names to handler methods.
        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "set": self._cmd_set,
            "get": self._cmd_get,
            "has": self._cmd_has,
            "remove": self._cmd_remove,
            "size": self._cmd_size,
            "show": self._cmd_show,
            "clone": self._cmd_clone,
            "stats": self._cmd_stats,
            "log": self._cmd_log,
            "exit": self._cmd_exit,
        }

    @property
    def store(self) -> KeyValueStore[str, str]:
        """Return the store this shell operates on."""
        return self._store

    @property
    def command_names(self) -> list[str]:
        """Return the sorted list of command names."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute a command string.

        Args:
            command: The raw command line (e.g. ``"set colour blue"``).

        Returns:
            The command output, an error line, or ``EXIT_SENTINEL``.

        """
        parts = command.strip().split()
        if not parts:
            return ""

        name = parts[0]
        args = parts[1:]

        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}"

        try:
            return handler(args)
        except StoreError as e:
            return f"Error: {e}"

    # -- Command handlers ------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.command_names)

    def _cmd_set(self, args: list[str]) -> str:
        """Associate a value with a key (``set KEY VALUE...``)."""
        if len(args) < 2:  # noqa: PLR2004
            return "Usage: set KEY VALUE"
        self._store.set(parse_key(args[0]), " ".join(args[1:]))
        return ""

    def _cmd_get(self, args: list[str]) -> str:
        """Print the value for a key."""
        if not args:
            return "Usage: get KEY"
        return self._store.get(parse_key(args[0]))

    def _cmd_has(self, args: list[str]) -> str:
        """Print ``true`` or ``false`` for a key."""
        if not args:
            return "Usage: has KEY"
        return "true" if self._store.has_key(parse_key(args[0])) else "false"

    def _cmd_remove(self, args: list[str]) -> str:
        """Remove a key (silently ignores missing keys)."""
        if not args:
            return "Usage: remove KEY"
        self._store.remove(parse_key(args[0]))
        return ""

    def _cmd_size(self, _args: list[str]) -> str:
        """Print the number of entries."""
        return str(self._store.size())

    def _cmd_show(self, _args: list[str]) -> str:
        """Print the whole store as ``{k:v, ...}``."""
        return str(self._store)

    def _cmd_clone(self, _args: list[str]) -> str:
        """Clone the store and print the copy."""
        copy = self._store.clone()
        return f"{copy} (size {copy.size()})"

    def _cmd_stats(self, _args: list[str]) -> str:
        """Show size, capacity, and log usage."""
        logger = self._store.logger
        log_count = len(logger) if logger is not None else 0
        lines = [
            "=== Store Status ===",
            f"Size:        {self._store.size()}",
            f"Capacity:    {self._store.capacity}",
            f"Log entries: {log_count}",
        ]
        return "\n".join(lines)

    def _cmd_log(self, _args: list[str]) -> str:
        """Show the store's audit log."""
        logger = self._store.logger
        if logger is None or not logger.entries:
            return "No log entries."
        return "\n".join(str(entry) for entry in logger.entries)

    def _cmd_exit(self, _args: list[str]) -> str:
        """Signal the REPL to stop."""
        return self.EXIT_SENTINEL
