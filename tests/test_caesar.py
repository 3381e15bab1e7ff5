import io
import sys

import pytest
from rich.console import Console

import caesar
from caesar import UI, session


def run_session(script: str) -> str:
    out = io.StringIO()
    ui = UI(console=Console(file=out, width=120), stream=io.StringIO(script))
    session(ui)
    return out.getvalue()


def test_cipher_english():
    out = run_session("1\n1\n2\nabc\n2\n1\n2\n")
    assert "Original abc -> Ciphered bcd" in out


def test_decipher_english():
    out = run_session("1\n2\n2\nbcd\n2\n1\n2\n")
    assert "Ciphered bcd -> Deciphered abc" in out


def test_cipher_turkish_wraps():
    out = run_session("1\n1\n1\nz\n2\n1\n2\n")
    assert "Original z -> Ciphered a" in out


def test_quit_immediately():
    out = run_session("2\n")
    assert "Ciphered" not in out
    assert out.count("1.) Continue") == 1


def test_several_rounds():
    out = run_session("1\n1\n2\nz\n2\n1\n1\n1\n2\nabc\n1\n1\n2\n")
    assert "Original z -> Ciphered a" in out
    assert "Original abc -> Ciphered zab" in out


def test_uppercase_word_accepted():
    out = run_session("1\n1\n2\nABC\n2\n1\n2\n")
    assert "Original abc -> Ciphered bcd" in out


def test_negative_shift():
    out = run_session("1\n1\n2\nabc\n1\n-1\n2\n")
    assert "Original abc -> Ciphered bcd" in out


def test_invalid_menu_inputs_reprompt():
    out = run_session("x\n3\n1\n0\n1\n9\n2\nabc\n5\n2\nfoo\n1\n2\n")
    assert caesar.INT_ERROR in out
    assert caesar.CONTINUE_ERROR in out
    assert caesar.OPERATION_ERROR in out
    assert caesar.LANGUAGE_ERROR in out
    assert caesar.DIRECTION_ERROR in out
    assert "Original abc -> Ciphered bcd" in out


def test_invalid_words_reprompt():
    out = run_session("1\n1\n2\n\nab cd\nçay\nok\n2\n1\n2\n")
    assert caesar.WORD_ERRORS['empty'] in out
    assert caesar.WORD_ERRORS['alphabet'] in out
    assert "Original ok -> Ciphered pl" in out


def test_turkish_word_rejected_in_english():
    out = run_session("1\n1\n2\nşeker\nseker\n2\n0\n2\n")
    assert caesar.WORD_ERRORS['alphabet'] in out
    assert "Original seker -> Ciphered seker" in out


def test_end_of_input_is_fatal():
    with pytest.raises(EOFError):
        run_session("1\n1\n")


def test_one_shot_default(capsys):
    assert caesar.main(['abc', '--raw']) == 0
    assert capsys.readouterr().out == "def\n"


def test_one_shot_options(capsys):
    assert caesar.main(['BCD', '-D', '-s', '1', '-r']) == 0
    assert capsys.readouterr().out == "abc\n"

    assert caesar.main(['z', '-l', 'tr', '-s', '1', '-r']) == 0
    assert capsys.readouterr().out == "a\n"

    assert caesar.main(['abc', '-d', 'left', '-s', '-2', '-r']) == 0
    assert capsys.readouterr().out == "cde\n"


def test_one_shot_describes_result(capsys):
    assert caesar.main(['abc', '-s', '1']) == 0
    assert "Original abc -> Ciphered bcd" in capsys.readouterr().out


def test_one_shot_invalid_word():
    with pytest.raises(SystemExit) as exc:
        caesar.main(['çay'])
    assert exc.value.code == 2


def test_cli_exits_on_closed_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'argv', ['caesar'])
    monkeypatch.setattr(sys, 'stdin', io.StringIO("1\n"))
    with pytest.raises(SystemExit) as exc:
        caesar.cli()
    assert exc.value.code == 1
    assert "Failed to read input" in capsys.readouterr().err
