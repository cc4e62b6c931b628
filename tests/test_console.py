import io

import pytest

from pocketcalc.console import Console


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_read_int_writes_prompt_and_parses():
    console, out = make("42\n")
    assert console.read_int("Number: ") == 42
    assert out.getvalue() == "Number: "


def test_tokens_on_one_line_are_read_in_order():
    console, _ = make("7 -3 12\n")
    assert [console.read_int() for _ in range(3)] == [7, -3, 12]


def test_tokens_across_blank_lines():
    console, _ = make("\n\n  5\n\n6\n")
    assert console.read_int() == 5
    assert console.read_int() == 6


def test_read_float():
    console, _ = make("2.5\n")
    assert console.read_float() == pytest.approx(2.5)


def test_read_float_accepts_integer_text():
    console, _ = make("3\n")
    assert console.read_float() == pytest.approx(3.0)


def test_read_int_rejects_garbage():
    console, _ = make("abc\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_read_float_rejects_garbage():
    console, _ = make("x1\n")
    with pytest.raises(ValueError):
        console.read_float()


def test_end_of_input_raises_eoferror():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_int()


def test_read_word():
    console, _ = make("  rectangle triangular\n")
    assert console.read_word() == "rectangle"
    assert console.read_word() == "triangular"


def test_read_char_skips_whitespace():
    console, _ = make("\n   ab\n")
    assert console.read_char() == "a"
    assert console.read_char() == "b"


def test_read_line_reads_whole_line():
    console, _ = make("Hello World\nnext\n")
    assert console.read_line("Name: ") == "Hello World"
    assert console.read_line() == "next"


def test_read_line_returns_rest_after_token():
    console, _ = make("12 Jane Doe\n")
    assert console.read_int() == 12
    assert console.read_line() == "Jane Doe"


def test_read_line_at_end_raises_eoferror():
    console, _ = make("")
    with pytest.raises(EOFError):
        console.read_line()


def test_write_goes_to_writer():
    console, out = make("")
    console.write("abc")
    console.write("def")
    assert out.getvalue() == "abcdef"