import io

import pytest

from solong.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buf = io.StringIO()
    put_char("A", buf)
    assert buf.getvalue() == "A"


def test_put_char_accepts_code():
    buf = io.StringIO()
    put_char(ord("C"), buf)
    put_char(ord("\n"), buf)
    assert buf.getvalue() == "C\n"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("AB", io.StringIO())


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("Olá", buf)
    put_str("", buf)
    assert buf.getvalue() == "Olá"


def test_put_str_defaults_to_stdout(capsys):
    put_str("Moves: 3")
    assert capsys.readouterr().out == "Moves: 3"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("Bye", buf)
    assert buf.getvalue() == "Bye\n"


def test_put_nbr_negative():
    buf = io.StringIO()
    put_nbr(-42, buf)
    assert buf.getvalue() == "-42"


@pytest.mark.parametrize("value", [0, 9, 10, -1, 2147483647, -2147483648])
def test_put_nbr_round_trip(value):
    buf = io.StringIO()
    put_nbr(value, buf)
    assert int(buf.getvalue()) == value


def test_put_nbr_defaults_to_stdout(capsys):
    put_nbr(1300)
    assert capsys.readouterr().out == "1300"