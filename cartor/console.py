"""Terminal setup and box-drawing helpers built on styled text values."""

from __future__ import annotations

import os
import sys
from types import TracebackType
from typing import TextIO, Union

from cartor import palette
from cartor.text import Text, from_text, write, write_line

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None  # type: ignore[assignment]

DEFAULT_WIDTH = 64
DEFAULT_HEIGHT = 128

_CLEAR_SCREEN = "\033[H\033[J"


def _leading_int(value: str) -> int:
    """Parse a leading decimal integer the lenient way; garbage gives 0."""
    text = value.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for char in text:
        if not char.isdigit():
            break
        digits += char
    return sign * int(digits) if digits else 0


def get_terminal_size() -> tuple[int, int]:
    """Return ``(width, height)`` of the terminal on standard output.

    Falls back to the ``COLUMNS`` and ``LINES`` environment variables when
    the size cannot be queried; raises :class:`OSError` if neither works.
    """
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        columns = os.environ.get("COLUMNS")
        lines = os.environ.get("LINES")
        if columns is not None and lines is not None:
            return _leading_int(columns), _leading_int(lines)
        raise OSError("cannot determine terminal size") from None
    return size.columns, size.lines


def _encoded_length(cap: str | None) -> int:
    return len(cap.encode("utf-8")) if cap else 0


def horizontal_line(
    length: int,
    offset: int = 0,
    start: str | None = None,
    end: str | None = None,
    line: str = palette.LINE_H,
) -> str:
    """Build a horizontal line of ``length`` cells with optional caps.

    The caps' sizes are subtracted from the body length in encoded bytes,
    so wide glyphs shorten the body by more than one cell each.
    """
    if length <= 0:
        return ""
    body = max(length - _encoded_length(start) - _encoded_length(end), 0)
    return " " * offset + (start or "") + line * body + (end or "")


def repeat(length: int, line: str) -> str:
    """Repeat ``line`` ``length`` times; nothing for non-positive lengths."""
    return horizontal_line(length, 0, None, None, line)


def _as_text(value: Union[Text, str]) -> Text:
    return from_text(value) if isinstance(value, str) else value


def open_bubble(
    border_color: str,
    title_color: str,
    title: Union[Text, str],
    content_color: str,
    content: Union[Text, str],
) -> str:
    """Render an open speech bubble whose right edge fades out row by row."""
    title = _as_text(title)
    content = _as_text(content)
    reset = palette.RESET
    fade = palette.FADE_END
    bubble_width = content.display_width + content.height + 4

    parts = [
        f"{border_color}╭{{{reset}{title_color}{title}{border_color}}}",
        horizontal_line(bubble_width - title.display_width),
        f"{fade}{reset}\n",
    ]
    for index in range(content.height):
        row = content.row(index)
        parts.append(
            f"{border_color}│{reset}{content_color}  {row.value}{border_color}"
        )
        parts.append(repeat(bubble_width - row.display_width - index * 2 - 2, " "))
        parts.append(f"{fade}{reset}\n")
    parts.append(f"{border_color}╰")
    parts.append(horizontal_line(bubble_width - content.height * 2))
    parts.append(f"{fade}{reset}\n")
    return "".join(parts)


class TerminalSession:
    """Put the terminal into non-canonical, no-echo mode for a ``with`` block.

    On entry the terminal size is read (raising :class:`OSError` when it is
    unknown) and the screen is cleared; on exit the input mode is restored
    and styles are reset.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.width = DEFAULT_WIDTH
        self.height = DEFAULT_HEIGHT
        self._saved_mode: list | None = None

    def _input_fd(self) -> int | None:
        if termios is None:
            return None
        try:
            return self.stdin.fileno()
        except (OSError, ValueError, AttributeError):
            return None

    def __enter__(self) -> TerminalSession:
        self.width, self.height = get_terminal_size()
        fd = self._input_fd()
        if fd is not None:
            try:
                saved = termios.tcgetattr(fd)
                mode = termios.tcgetattr(fd)
                mode[3] &= ~(termios.ICANON | termios.ECHO)
                termios.tcsetattr(fd, termios.TCSANOW, mode)
                self._saved_mode = saved
            except termios.error:
                self._saved_mode = None
        self.stdout.write(_CLEAR_SCREEN)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        fd = self._input_fd()
        if fd is not None and self._saved_mode is not None:
            try:
                termios.tcsetattr(fd, termios.TCSANOW, self._saved_mode)
            except termios.error:
                pass
        self._saved_mode = None
        self.stdout.write(palette.RESET)
        self.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Draw a demonstration of lines, bubbles and text values."""
    del argv
    out = sys.stdout
    try:
        session = TerminalSession(stdout=out)
        session.__enter__()
    except OSError:
        print("Error getting terminal size", file=sys.stderr)
        return 1
    try:
        out.write(f"Terminal size: {session.width} x {session.height}\n")
        out.write(
            horizontal_line(
                session.width,
                0,
                palette.FADE_START,
                palette.BRACKET_END,
                palette.LINE_H,
            )
        )
        out.write("\n\n")
        out.write(
            open_bubble(
                palette.WHITE,
                palette.RED,
                from_text("Title"),
                palette.LIGHT_RED,
                from_text(
                    f"This is a {palette.VARIABLE}{palette.UNDERLINE}test"
                    f"{palette.RESET}{palette.LIGHT_RED} of the open bubble\n"
                    f"It should be able to handle {palette.ITALIC}multiple"
                    f"{palette.RESET}{palette.LIGHT_RED} lines\n"
                    "And it should look nice\n"
                ),
            )
        )
        write(from_text("This is a test"), out)
        write_line(from_text("}-- This is a SECOND test"), out)
        write(
            from_text(
                "HELLO\n"
                "WORLD\n"
                "THIS IS A TEST\n"
                "OF THE CARTOR CONSOLE\n"
                "AND THE STRING LIBRARY\n"
            ),
            out,
        )
        write_line(from_text(""), out)
        write_line(
            from_text(
                f"There are {palette.NUMBER}4{palette.RESET} lines here\n"
                f"And this is a {palette.VARIABLE}test{palette.RESET}\n"
                f"Of the {palette.ITALIC}cartor{palette.RESET} console\n"
                f"And the {palette.UNDERLINE}string{palette.RESET} library\n"
            ),
            out,
        )
    finally:
        session.__exit__(None, None, None)
    return 0


if __name__ == "__main__":
    sys.exit(main())