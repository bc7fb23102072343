import io

import pytest

from tclib import stdio


def _compress(data):
    out = io.BytesIO()
    stdio.compress(io.BytesIO(data), out)
    return out.getvalue()


def _decompress(data):
    out = io.BytesIO()
    stdio.decompress(io.BytesIO(data), out)
    return out.getvalue()


def test_getln_splits_lines():
    stream = io.BytesIO(b"one\n\ntwo")
    assert stdio.getln(stream) == b"one"
    assert stdio.getln(stream) == b""
    assert stdio.getln(stream) == b"two"
    assert stdio.getln(stream) is None


def test_getln_empty_stream():
    assert stdio.getln(io.BytesIO(b"")) is None


def test_puterr_and_puterrln(capsys):
    stdio.puterr("hello")
    stdio.puterrln("world")
    assert capsys.readouterr().err == "hello" + "world\n"


def test_puts_and_putln():
    out = io.BytesIO()
    stdio.puts(out, "abc")
    stdio.putln(out, b"def")
    assert out.getvalue() == b"abc" + b"def\n"


def test_copy_byte():
    src = io.BytesIO(b"q")
    dst = io.BytesIO()
    assert stdio.copy_byte(src, dst) is True
    assert stdio.copy_byte(src, dst) is False
    assert dst.getvalue() == b"q"


def test_copy_bytes_partial_and_full():
    src = io.BytesIO(b"abcdef")
    dst = io.BytesIO()
    assert stdio.copy_bytes(src, dst, 4) is True
    assert dst.getvalue() == b"abcd"
    assert stdio.copy_bytes(src, dst, 5) is False
    assert dst.getvalue() == b"abcdef"


def test_copy_line_includes_newline():
    src = io.BytesIO(b"first\nsecond")
    dst = io.BytesIO()
    assert stdio.copy_line(src, dst) is True
    assert dst.getvalue() == b"first\n"
    assert stdio.copy_line(src, dst) is False
    assert dst.getvalue() == b"first\nsecond"


def test_copy_lines_count():
    data = b"a\nb\nc\n"
    src = io.BytesIO(data)
    dst = io.BytesIO()
    assert stdio.copy_lines(src, dst, 2) is True
    assert dst.getvalue() == b"a\nb\n"


def test_copy_lines_negative_copies_everything():
    data = b"a\nb\nc\n"
    dst = io.BytesIO()
    assert stdio.copy_lines(io.BytesIO(data), dst, -1) is False
    assert dst.getvalue() == data


def test_compress_leaves_distinct_bytes_alone():
    assert _compress(b"abc") == b"abc"


def test_compress_short_run_is_literal():
    assert _compress(b"aaa") == b"aaa"


def test_compress_run_of_four():
    assert _compress(b"aaaa") == b"~Da"


def test_compress_escapes_tilde():
    assert _compress(b"~") == b"~A~"


def test_compress_shrinks_long_runs():
    data = b"x" * 100
    assert len(_compress(data)) < len(data)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"hello world",
        b"aaaabbbbbbbbcccd",
        b"~~~~~~~~",
        b"z" * 26,
        b"z" * 27,
        b"q" * 53 + b"~" + b"r" * 5,
        bytes(range(200)),
    ],
)
def test_compress_decompress_round_trip(data):
    assert _decompress(_compress(data)) == data


def test_decompress_lone_tilde_passes_through():
    assert _decompress(b"~") == b"~"


def test_decompress_truncated_escape_kept():
    assert _decompress(b"~Z") == b"~Z"


def test_decompress_tilde_before_lowercase_kept():
    assert _decompress(b"~x") == b"~x"


@pytest.mark.parametrize("n,width", [(42, 5), (-7, 4), (12345, 2), (0, 1)])
def test_putdec_right_aligns(n, width):
    out = io.BytesIO()
    stdio.putdec(out, n, width)
    text = out.getvalue()
    digits = str(n).encode()
    assert text.endswith(digits)
    assert len(text) == max(width, len(digits))
    assert text[: len(text) - len(digits)].strip() == b""