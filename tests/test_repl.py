"""Tests for the REPL (Read-Eval-Print Loop).

The REPL is the interactive terminal interface.  The helper functions
are tested in isolation and the loop is driven with patched ``input``.
"""

from unittest.mock import patch

import pytest

from py_kvstore.repl import build_prompt, format_banner, read_commands, run
from py_kvstore.shell import Shell
from py_kvstore.store import KeyValueStore


class TestREPLHelpers:
    """Verify REPL helper functions."""

    def test_prompt_shows_size(self) -> None:
        """The prompt shows the number of entries."""
        store: KeyValueStore[str, str] = KeyValueStore()
        assert build_prompt(store) == "kv[0] $ "
        store.set("a", "1")
        assert build_prompt(store) == "kv[1] $ "

    def test_banner_mentions_project_and_capacity(self) -> None:
        """The banner names the project and the initial capacity."""
        banner = format_banner(KeyValueStore(capacity=8))
        assert "py-kvstore" in banner
        assert "Capacity 8" in banner
        assert "exit" in banner


class TestReadCommands:
    """Verify the input generator."""

    def test_yields_until_eof(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Lines are yielded in order and Ctrl+D ends the stream."""
        with patch("builtins.input", side_effect=["set a 1", "show", EOFError]):
            assert list(read_commands(Shell())) == ["set a 1", "show"]
        assert capsys.readouterr().out == "\n"

    def test_prompt_tracks_store(self) -> None:
        """Each prompt reflects the store size at that moment."""
        shell = Shell()
        prompts: list[str] = []

        def fake_input(prompt: str) -> str:
            prompts.append(prompt)
            if len(prompts) > 1:
                raise EOFError
            return "set a 1"

        with patch("builtins.input", side_effect=fake_input):
            for command in read_commands(shell):
                shell.execute(command)
        assert prompts == ["kv[0] $ ", "kv[1] $ "]


class TestREPLLoop:
    """Drive the loop with scripted input."""

    def test_commands_are_printed(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Command results are printed until exit."""
        with patch("builtins.input", side_effect=["set a 1", "show", "exit"]):
            run()
        out = capsys.readouterr().out
        assert "{a:1}" in out
        assert out.rstrip().endswith("Bye.")

    def test_eof_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ctrl+D ends the session cleanly."""
        with patch("builtins.input", side_effect=EOFError):
            run()
        assert "Bye." in capsys.readouterr().out

    def test_interrupt_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ctrl+C ends the session cleanly."""
        with patch("builtins.input", side_effect=KeyboardInterrupt):
            run()
        out = capsys.readouterr().out
        assert "Interrupted." in out
        assert "Bye." in out
