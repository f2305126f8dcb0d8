"""Single-line and multi-line text values that know their display width."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import TextIO, Union

_STYLE_SEQUENCE = re.compile(r"\033\[[;0-9]*m")


def display_length(text: str) -> int:
    """Count the characters of ``text`` that are not part of an SGR escape."""
    return len(_STYLE_SEQUENCE.sub("", text))


@dataclass(frozen=True)
class TextLine:
    """A single line of text."""

    value: str

    @property
    def width(self) -> int:
        return len(self.value)

    @property
    def display_width(self) -> int:
        return display_length(self.value)

    @property
    def height(self) -> int:
        return 1

    def row(self, index: int) -> TextLine:
        """Return the only row of a line as a new line value.

        A line has a single row, so ``index`` does not select anything.
        """
        return TextLine(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TextBlock:
    """Several non-empty lines of text."""

    rows: tuple[TextLine, ...]

    @property
    def width(self) -> int:
        return max((line.width for line in self.rows), default=0)

    @property
    def display_width(self) -> int:
        return max((line.display_width for line in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    def row(self, index: int) -> TextLine:
        """Return the row at ``index``; negative or too large indices raise."""
        if not 0 <= index < len(self.rows):
            raise IndexError(f"row index {index} out of bounds")
        return self.rows[index]

    def __str__(self) -> str:
        return "\n".join(line.value for line in self.rows)


Text = Union[TextLine, TextBlock]


def from_text(text: str) -> Text:
    """Build a text value, splitting on newlines and dropping empty lines.

    A string with no non-empty line stays a single :class:`TextLine` holding
    the string unchanged; anything else becomes a :class:`TextBlock`.
    """
    parts = [part for part in text.split("\n") if part]
    if not parts:
        return TextLine(text)
    return TextBlock(tuple(TextLine(part) for part in parts))


def concat(first: Text, second: Text) -> TextLine:
    """Join two single lines into one."""
    if type(first) is not type(second):
        raise TypeError("cannot concatenate text values of different kinds")
    if isinstance(first, TextBlock):
        raise TypeError("concatenation of text blocks is not supported")
    return TextLine(first.value + second.value)


def write(value: Text, file: TextIO | None = None) -> None:
    """Write ``value`` with its rows separated by newlines, no final newline."""
    (file or sys.stdout).write(str(value))


def write_line(value: Text, file: TextIO | None = None) -> None:
    """Write every row of ``value`` followed by a newline."""
    out = file or sys.stdout
    if isinstance(value, TextBlock):
        out.writelines(f"{line.value}\n" for line in value.rows)
    else:
        out.write(f"{value.value}\n")