import pytest

from exercisekit.cli import main


def test_hello_world(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello World!\n"


def test_echo_integer(capsys):
    assert main(["42"]) == 0
    assert capsys.readouterr().out == "Entered integer number is 42\n"


def test_echo_negative_integer(capsys):
    assert main(["--", "-7"]) == 0
    assert capsys.readouterr().out == "Entered integer number is -7\n"


def test_rejects_non_integer():
    with pytest.raises(SystemExit) as excinfo:
        main(["abc"])
    assert excinfo.value.code == 2