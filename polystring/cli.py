"""Interactive menu for working with byte strings."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Iterable, Optional, TextIO

from polystring.mystring import ByteString

_MENU = (
    "\n"
    "+--------------------------------------+\n"
    "|     LAB WORK #1 - VARIANT 25        |\n"
    "|     Polymorphic Collection - String |\n"
    "+--------------------------------------+\n"
    "| 1. Set main string                  |\n"
    "| 2. Set second string                |\n"
    "| 3. Show main string                 |\n"
    "| 4. Show second string               |\n"
    "| 5. Concatenate strings              |\n"
    "| 6. Get substring                    |\n"
    "| 7. Split into words                 |\n"
    "| 8. Clear all strings                |\n"
    "| 0. Exit                             |\n"
    "+--------------------------------------+\n"
    "Choice: "
)

_INTEGER = re.compile(r"[+-]?\d+")
_LINE_LIMIT = 1023


class _Input:
    """Line-buffered reader giving number and line reads over one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _fill(self) -> bool:
        if not self._pending:
            self._pending = self._stream.readline()
        return bool(self._pending)

    def read_int(self) -> Optional[int]:
        """Skip whitespace, then read an integer; None if none is there.

        Raises EOFError when the input ends before anything but whitespace.
        """
        while True:
            if not self._fill():
                raise EOFError
            stripped = self._pending.lstrip()
            if stripped:
                self._pending = stripped
                break
            self._pending = ""
        match = _INTEGER.match(self._pending)
        if match is None:
            return None
        self._pending = self._pending[match.end():]
        return int(match.group())

    def discard_line(self) -> None:
        """Drop everything up to and including the next newline."""
        while self._fill():
            newline = self._pending.find("\n")
            if newline >= 0:
                self._pending = self._pending[newline + 1:]
                return
            self._pending = ""

    def read_line(self) -> Optional[str]:
        """Return the rest of the current line without its newline, or None at EOF."""
        if not self._fill():
            return None
        line = self._pending[:_LINE_LIMIT]
        self._pending = self._pending[_LINE_LIMIT:]
        if line.endswith("\n"):
            line = line[:-1]
        return line


def format_string_collection(words: Optional[Iterable[Optional[ByteString]]]) -> str:
    """Render a collection of strings as ``[a, b, c]``."""
    if words is None:
        return "NULL"
    parts = ("NULL" if word is None else str(word) for word in words)
    return "[" + ", ".join(parts) + "]"


class _Session:
    def __init__(self, reader: _Input, out: TextIO) -> None:
        self.reader = reader
        self.out = out
        self.first: Optional[ByteString] = None
        self.second: Optional[ByteString] = None

    def write(self, text: str) -> None:
        self.out.write(text)

    def _prompt_line(self, prompt: str) -> Optional[str]:
        self.write(prompt)
        return self.reader.read_line()

    def _set_string(self, prompt: str, label: str) -> Optional[ByteString]:
        text = self._prompt_line(prompt)
        if text is None:
            self.write("Error: Failed to create string\n")
            return None
        value = ByteString(text)
        self.write(f"{label} string saved: {value} (length: {len(value)})\n")
        return value

    def _show(self, label: str, value: Optional[ByteString]) -> None:
        self.write(f"{label} string: ")
        if value is not None:
            self.write(f"{value}(length: {len(value)})")
        else:
            self.write("String not set")

    def _concatenate(self) -> None:
        if self.first is None or self.second is None:
            self.write("Error: Both strings must be specified\n")
            return
        result = self.first.concat(self.second)
        self.write(f"The result of concatenation: {result}\n")

    def _substring(self) -> None:
        if self.first is None:
            self.write("Error: string not set\n")
            return
        indexes = []
        for prompt in ("Enter starting index: ", "Enter ending index (not including): "):
            self.write(prompt)
            try:
                value = self.reader.read_int()
            except EOFError:
                value = None
            if value is None:
                self.write("Input error\n")
                self.reader.discard_line()
                return
            indexes.append(value)
        self.reader.discard_line()
        start, end = indexes
        try:
            sub = self.first.substring(start, end)
        except ValueError:
            self.write(f"Error: Invalid indexes (string length: {len(self.first)})\n")
            return
        self.write(f"Substring [{start}, {end}]: {sub}\n")

    def _split(self) -> None:
        if self.first is None:
            self.write("Error: string not set\n")
            return
        delimiters = self._prompt_line("Enter delimiters (e.g. ' ,.!?;:'): ")
        if delimiters is None:
            return
        words = self.first.split(delimiters)
        self.write(f"Split result: {format_string_collection(words)}\n")

    def run(self) -> None:
        while True:
            self.write(_MENU)
            try:
                choice = self.reader.read_int()
            except EOFError:
                return
            if choice is None:
                self.write("Input error\n")
                self.reader.discard_line()
                continue
            self.reader.discard_line()

            if choice == 1:
                self.first = self._set_string("Enter the first string: ", "First")
            elif choice == 2:
                self.second = self._set_string("Enter the second string: ", "Second")
            elif choice == 3:
                self._show("Main", self.first)
            elif choice == 4:
                self._show("Second", self.second)
            elif choice == 5:
                self._concatenate()
            elif choice == 6:
                self._substring()
            elif choice == 7:
                self._split()
            elif choice == 8:
                self.first = None
                self.second = None
                self.write("All strings cleared\n")
            elif choice == 0:
                self.write("Exit the program\n")
                return


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive string menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="polystring",
        description="Interactive menu for creating, joining, slicing and splitting strings.",
    )
    parser.parse_args(argv)
    _Session(_Input(sys.stdin), sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())