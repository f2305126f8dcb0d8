# cartor

Small helpers for drawing in a terminal. It provides:

- ANSI colour and style codes
- box-drawing characters
- horizontal lines with decorated ends
- "open bubbles" around multi-line text
- a text type that reports its display width without counting escape sequences

## Install

    pip install .

## Palette

`cartor.palette` holds plain string constants.

- Styles: `RESET`, `BOLD`, `ITALIC`, `UNDERLINE`, `REVERSE`.
- Foreground colours: `RED`, `GREEN`, `PINK`, `LIGHT_BLUE` and others.
- Background colours: `BG_RED`, `BG_TEAL` and others.
- Box-drawing glyphs: `HORIZONTAL`, `VERTICAL`, `ROUND_CORNER_DOWN_RIGHT`, `CROSS` and others.
- Line caps: `FADE_START`, `FADE_END`, `BRACKET_END`, `ARROW_START` and others.
- Line bodies: `LINE_H`, `LINE_H_PIPE`, `LINE_H_DOTTED_3` and others.

## Text

`cartor.text.from_text` splits a string on newlines and drops the empty lines.

- If at least one line is left, the result is a `TextBlock` with one `TextLine` row per line. This includes a string with no newline at all.
- If no line is left, for example with `""`, the result is a single `TextLine` that holds the string unchanged.

Both types have these properties:

- `width`: the number of characters.
- `display_width`: the number of characters without SGR escape sequences.
- `height`.

Both types have a `row(index)` method. `TextBlock.row` raises `IndexError` when the index is out of range.

`str()` of a block joins its rows with newlines.

```python
from cartor import palette
from cartor.text import display_length, from_text, write, write_line

block = from_text("HELLO\n" + palette.GREEN + "WORLD" + palette.RESET + "\n")
block.height                            # 2
block.row(1).display_width              # 5
display_length(palette.RED + "hi")      # 2
write(block)        # rows separated by newlines, no final newline
write_line(block)   # every row followed by a newline
```

`write` and `write_line` take an optional file and write to standard output by default.

`concat(first, second)` joins two `TextLine` values into one. It raises `TypeError` in two cases:

- when the two values are of different kinds;
- when both values are blocks.

## Drawing

The drawing helpers in `cartor.console` return strings and print nothing.

- `horizontal_line(length, offset=0, start=None, end=None, line=LINE_H)` builds a line as follows:
  - It indents the line by `offset` spaces.
  - It places the optional `start` and `end` caps at the two ends.
  - It repeats `line` for the body.
  - The body length is `length` minus the UTF-8 byte size of the caps.
  - A `length` of zero or less gives an empty string.
- `repeat(length, line)` repeats `line` `length` times.
- `open_bubble(border_color, title_color, title, content_color, content)` renders an open bubble around `content`. The bubble has a `╭{title}` top edge, and its right edge fades out row by row. `title` and `content` may be text values or plain strings.

`TerminalSession` is a context manager. On entry it does three things:

- It reads the terminal size into `width` and `height`. It raises `OSError` when the size cannot be found.
- On POSIX, it turns off canonical input and echo on standard input.
- It clears the screen.

On exit it restores the input mode and writes a style reset.

```python
import sys
from cartor import palette
from cartor.console import TerminalSession, horizontal_line, open_bubble

with TerminalSession() as session:
    sys.stdout.write(horizontal_line(session.width, 0, palette.FADE_START,
                                     palette.BRACKET_END, palette.LINE_H) + "\n")
    sys.stdout.write(open_bubble(palette.WHITE, palette.RED, "Title",
                                 palette.LIGHT_RED, "first line\nsecond line\n"))
```

`get_terminal_size()` returns `(width, height)` for standard output. When that fails, it falls back to the `COLUMNS` and `LINES` environment variables.

## Demo

    cartor-demo

This draws the following:

- a sample line across the terminal
- a bubble
- a few text values

If the terminal size cannot be found, it prints `Error getting terminal size` and exits with status 1.

## Not included

There are no table-drawing helpers. Colour loops and gradients are not included either.