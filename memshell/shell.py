"""Interactive command shell over the in-memory file system."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from memshell.filesystem import FileSystem

_WHITESPACE = frozenset(" \t\n\v\f\r")

GREETING = "Type 'exit' to quit."
EXIT_COMMAND = "exit"
UNKNOWN_COMMAND = "Unknown command or invalid arguments"


def tokenize(line: str) -> list[str]:
    """Split ``line`` on whitespace, keeping double-quoted runs together.

    Quote characters toggle quoting and are dropped; empty tokens are
    never produced.
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char in _WHITESPACE and not in_quotes:
            if current:
                tokens.append("".join(current))
                current.clear()
        else:
            current.append(char)
    if current:
        tokens.append("".join(current))
    return tokens


@dataclass(frozen=True)
class _Command:
    min_args: int
    handler: Callable[[list[str]], list[str]]


class Shell:
    """Reads commands, applies them to a file system and reports results."""

    def __init__(self, fs: FileSystem | None = None) -> None:
        self.fs = fs if fs is not None else FileSystem()
        self._commands: dict[str, _Command] = {
            "mkdir": _Command(1, self._mkdir),
            "touch": _Command(1, self._touch),
            "ls": _Command(0, self._ls),
            "cat": _Command(1, self._cat),
            "empty": _Command(1, self._empty),
            "append": _Command(2, self._append),
            "rm": _Command(1, self._rm),
            "rmdir": _Command(1, self._rmdir),
            "meta": _Command(1, self._meta),
            "cd": _Command(1, self._cd),
        }

    @property
    def prompt(self) -> str:
        return f"{self.fs.current_path()}> "

    def execute(self, line: str) -> list[str]:
        """Run one command line and return the lines it prints."""
        tokens = tokenize(line)
        if not tokens:
            return []
        name, args = tokens[0], tokens[1:]
        command = self._commands.get(name)
        if command is None or len(args) < command.min_args:
            return [UNKNOWN_COMMAND]
        try:
            return command.handler(args)
        except Exception as exc:  # report anything unexpected and keep going
            return [f"Error: {exc}"]

    def run(self, input_stream: TextIO, output_stream: TextIO) -> None:
        """Read commands from ``input_stream`` until 'exit' or end of input."""
        output_stream.write(GREETING + "\n")
        while True:
            output_stream.write(self.prompt)
            output_stream.flush()
            line = input_stream.readline()
            if not line:
                break
            if line.endswith("\n"):
                line = line[:-1]
            if not line:
                continue
            if line == EXIT_COMMAND:
                break
            for out in self.execute(line):
                output_stream.write(out + "\n")

    @staticmethod
    def _attempt(action: Callable[[], None], failure: str) -> list[str]:
        try:
            action()
        except (OSError, ValueError):
            return [failure]
        return []

    def _mkdir(self, args: list[str]) -> list[str]:
        return self._attempt(lambda: self.fs.mkdir(args[0]), "Error creating directory")

    def _touch(self, args: list[str]) -> list[str]:
        return self._attempt(lambda: self.fs.touch(args[0]), "Error creating file")

    def _ls(self, args: list[str]) -> list[str]:
        return self.fs.ls(args[0] if args else "")

    def _cat(self, args: list[str]) -> list[str]:
        return [self.fs.cat(args[0])]

    def _empty(self, args: list[str]) -> list[str]:
        return self._attempt(lambda: self.fs.empty(args[0]), "Error emptying file")

    def _append(self, args: list[str]) -> list[str]:
        return self._attempt(
            lambda: self.fs.append(args[0], args[1]), "Error appending to file"
        )

    def _rm(self, args: list[str]) -> list[str]:
        return self._attempt(lambda: self.fs.rm(args[0]), "Error removing file")

    def _rmdir(self, args: list[str]) -> list[str]:
        return self._attempt(lambda: self.fs.rmdir(args[0]), "Error removing directory")

    def _meta(self, args: list[str]) -> list[str]:
        try:
            return self.fs.metadata_report(args[0]).splitlines()
        except FileNotFoundError as exc:
            return [str(exc)]

    def _cd(self, args: list[str]) -> list[str]:
        try:
            self.fs.cd(args[0])
        except OSError:
            pass
        return []


def main(argv: list[str] | None = None) -> int:
    """Start an interactive shell on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="memshell", description="Shell over an in-memory file system."
    )
    parser.parse_args(argv)
    Shell().run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())