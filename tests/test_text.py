import io

import pytest

from cartor import palette
from cartor.text import (
    TextBlock,
    TextLine,
    concat,
    display_length,
    from_text,
    write,
    write_line,
)


def test_display_length_plain_text_counts_every_character():
    assert display_length("This is a test") == len("This is a test")


def test_display_length_ignores_style_sequences():
    styled = "This is a " + palette.VARIABLE + palette.UNDERLINE + "test" + palette.RESET
    assert display_length(styled) == len("This is a test")


def test_display_length_ignores_extended_colour_sequences():
    styled = palette.NUMBER + "4" + palette.RESET + palette.BG_ORANGE + "x"
    assert display_length(styled) == len("4x")


def test_display_length_keeps_incomplete_escape():
    text = "\033[31"
    assert display_length(text) == len(text)


def test_display_length_of_empty_string_is_zero():
    assert display_length("") == 0


def test_from_text_empty_string_is_line():
    result = from_text("")
    assert result == TextLine("")
    assert result.height == 1


def test_from_text_only_newlines_stays_unchanged_line():
    result = from_text("\n\n")
    assert isinstance(result, TextLine)
    assert result.value == "\n\n"


def test_from_text_single_line_becomes_block_of_one_row():
    result = from_text("This is a test")
    assert isinstance(result, TextBlock)
    assert result.height == 1
    assert str(result) == "This is a test"


def test_from_text_drops_empty_lines():
    result = from_text("HELLO\n\nWORLD\n")
    assert [line.value for line in result.rows] == ["HELLO", "WORLD"]


def test_block_widths_are_maximum_of_rows():
    first = "There are " + palette.NUMBER + "4" + palette.RESET + " lines here"
    second = "And this is a test"
    block = from_text(first + "\n" + second + "\n")
    assert block.width == max(len(first), len(second))
    assert block.display_width == max(display_length(first), display_length(second))
    assert block.width > block.display_width


def test_block_row_returns_line():
    block = from_text("HELLO\nWORLD\nTHIS IS A TEST\n")
    assert block.row(2) == TextLine("THIS IS A TEST")
    assert block.row(0).width == len("HELLO")


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_block_row_out_of_bounds_raises(index):
    block = from_text("a\nb\nc")
    with pytest.raises(IndexError):
        block.row(index)


def test_str_round_trip_without_empty_lines():
    text = "HELLO\nWORLD\nOF THE CARTOR CONSOLE"
    assert str(from_text(text)) == text


def test_concat_lines():
    result = concat(TextLine("}-- "), TextLine("SECOND"))
    assert result == TextLine("}-- SECOND")
    assert result.width == len("}-- ") + len("SECOND")


def test_concat_different_kinds_raises():
    with pytest.raises(TypeError):
        concat(TextLine("a"), from_text("a\nb"))


def test_concat_blocks_raises():
    with pytest.raises(TypeError):
        concat(from_text("a\nb"), from_text("c\nd"))


def test_write_block_has_no_trailing_newline():
    out = io.StringIO()
    write(from_text("HELLO\nWORLD\n"), out)
    assert out.getvalue() == "HELLO\nWORLD"


def test_write_line_block_ends_every_row():
    out = io.StringIO()
    write_line(from_text("HELLO\nWORLD\n"), out)
    assert out.getvalue() == "HELLO\nWORLD\n"


def test_write_line_for_empty_line():
    out = io.StringIO()
    write_line(from_text(""), out)
    assert out.getvalue() == "\n"


def test_write_line_plain_line():
    out = io.StringIO()
    write(TextLine("This is a test"), out)
    write_line(TextLine("}-- This is a SECOND test"), out)
    assert out.getvalue() == "This is a test}-- This is a SECOND test\n"


def test_write_defaults_to_stdout(capsys):
    write(TextLine("This is a test"))
    assert capsys.readouterr().out == "This is a test"