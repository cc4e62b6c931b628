"""Prompted, token-based reading of user input over text streams."""

from __future__ import annotations

import sys
from typing import TextIO


class Console:
    """Writes prompts and reads whitespace-separated values from a text stream.

    Values are consumed token by token, so several numbers may be typed on
    one line or spread across lines. End of input raises ``EOFError`` and a
    token that does not parse raises ``ValueError``.
    """

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self._reader = reader if reader is not None else sys.stdin
        self._writer = writer if writer is not None else sys.stdout
        self._pending = ""

    def write(self, text: str) -> None:
        """Write text to the output stream."""
        self._writer.write(text)
        flush = getattr(self._writer, "flush", None)
        if flush is not None:
            flush()

    def _fill(self) -> None:
        while not self._pending.strip():
            line = self._reader.readline()
            if line == "":
                raise EOFError("no more input")
            self._pending = line

    def _next_token(self, prompt: str) -> str:
        if prompt:
            self.write(prompt)
        self._fill()
        text = self._pending.lstrip()
        parts = text.split(maxsplit=1)
        token = parts[0]
        self._pending = text[len(token):]
        return token

    def read_int(self, prompt: str = "") -> int:
        """Read the next token as an integer."""
        token = self._next_token(prompt)
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def read_float(self, prompt: str = "") -> float:
        """Read the next token as a floating-point number."""
        token = self._next_token(prompt)
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def read_word(self, prompt: str = "") -> str:
        """Read the next whitespace-separated word."""
        return self._next_token(prompt)

    def read_char(self, prompt: str = "") -> str:
        """Skip whitespace and read a single character."""
        if prompt:
            self.write(prompt)
        self._fill()
        text = self._pending.lstrip()
        self._pending = text[1:]
        return text[0]

    def read_line(self, prompt: str = "") -> str:
        """Read the rest of the current line, or the next line if nothing is left."""
        if prompt:
            self.write(prompt)
        if self._pending.strip():
            text = self._pending.lstrip()
        else:
            text = self._reader.readline()
            if text == "":
                raise EOFError("no more input")
        self._pending = ""
        return text.rstrip("\r\n")