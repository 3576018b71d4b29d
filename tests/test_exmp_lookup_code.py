import pytest

from minidrone.example.exmp_lookup_code import main


def test_lookup_by_code(capsys):
    assert main(['--code', '-18']) == 0
    assert capsys.readouterr().out == 'ERROR_TIMEOUT = -18\n'


def test_lookup_by_name(capsys):
    assert main(['--name', 'OK']) == 0
    assert capsys.readouterr().out == 'OK = 0\n'


def test_unknown_code_reports_error(capsys):
    assert main(['--code', '0x10', '-C', 'handshake']) == 1
    assert capsys.readouterr().err == "Can't find discovery error with the value 10 (handshake)\n"


def test_unknown_name_reports_error(capsys):
    assert main(['-n', 'NOPE']) == 1
    assert capsys.readouterr().err == 'Can\'t find discovery error called "NOPE"\n'


def test_code_or_name_is_required():
    with pytest.raises(SystemExit):
        main([])


def test_unknown_negative_code_reports_error(capsys):
    assert main(['--code', '-99']) == 1
    assert capsys.readouterr().err == 'Can\'t find discovery error called "-99"\n'
