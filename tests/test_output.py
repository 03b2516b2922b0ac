import io

import pytest

from solong.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    buf = io.StringIO()
    put_char("Z", buf)
    assert buf.getvalue() == "Z"


def test_put_char_accepts_integer_code():
    buf = io.StringIO()
    put_char(65, buf)
    assert buf.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str("", buf)
    assert buf.getvalue() == "hello"


def test_put_str_rejects_non_string():
    with pytest.raises(TypeError):
        put_str(None, io.StringIO())


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, -1000])
def test_put_nbr_round_trips(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("out", None)
    put_char("!")
    assert capsys.readouterr().out == "out!"