"""Interactive terminal session over one store.

``read_commands`` yields prompted input lines until Ctrl+D.  ``run``
feeds each line to a ``Shell``, prints non-empty output, and stops on
``exit``.  ``build_prompt`` and ``format_banner`` are pure helpers so
they can be tested without a terminal.
"""

import readline
from collections.abc import Iterator

from py_kvstore.completer import Completer
from py_kvstore.shell import Shell
from py_kvstore.store import KeyValueStore

_BANNER_WIDTH = 38


def format_banner(store: KeyValueStore[str, str]) -> str:
    """Format the start-up banner.

    Args:
        store: The store the session will operate on.

    Returns:
        A formatted string suitable for printing to the console.

    """
    border = "=" * _BANNER_WIDTH
    header = f"\n  {border}\n          py-kvstore v0.1.0\n    An associative array shell\n  {border}\n"
    body = f"  Capacity {store.capacity}, {store.size()} entries.\n"
    footer = "Type 'help' for commands, 'exit' to quit.\n"
    return header + body + footer


def build_prompt(store: KeyValueStore[str, str]) -> str:
    """Build the prompt string showing the current entry count.

    Returns:
        A prompt string like ``kv[3] $ ``.

    """
    return f"kv[{store.size()}] $ "


def read_commands(shell: Shell) -> Iterator[str]:
    """Yield input lines until end of input (Ctrl+D)."""
    while True:
        try:
            yield input(build_prompt(shell.store))
        except EOFError:
            print()  # noqa: T201
            return


def run() -> None:
    """Run the interactive REPL.

    This is the ``kvstore`` console entry point.  A session ends on
    ``exit``, Ctrl+D, or Ctrl+C.
    """
    shell = Shell()

    completer = Completer(shell)
    readline.set_completer(completer.complete)
    readline.set_completer_delims(" \t")
    readline.parse_and_bind("tab: complete")

    print(format_banner(shell.store))  # noqa: T201
    try:
        for command in read_commands(shell):
            output = shell.execute(command)
            if output == Shell.EXIT_SENTINEL:
                break
            if output:
                print(output)  # noqa: T201
    except KeyboardInterrupt:
        print("\nInterrupted.")  # noqa: T201
    print("Bye.")  # noqa: T201
