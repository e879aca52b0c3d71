import logging
from unittest.mock import patch

import pytest

from modprime.__main__ import configure_logging, main


def test_prime_command(capsys):
    """Test the prime command prints a prime of the requested size."""
    assert main(["prime", "32", "--sequential"]) == 0
    out = capsys.readouterr().out
    dec_line = [line for line in out.splitlines() if line.startswith("dec = ")][0]
    assert int(dec_line[len("dec = "):]).bit_length() == 32


def test_test_command(capsys):
    """Test the test command exit status reflects the verdict."""
    assert main(["test", "0x7fffffff"]) == 0
    assert "probably prime" in capsys.readouterr().out
    assert main(["test", "561", "--iterations", "4"]) == 1
    assert "composite" in capsys.readouterr().out


def test_rsa_command(capsys):
    """Test the rsa command prints every parameter."""
    assert main(["rsa", "64", "--sequential"]) == 0
    out = capsys.readouterr().out
    for name in ("p", "q", "N", "phi", "e", "d"):
        assert f"{name} = 0x" in out
    assert "e = 0x10001" in out


@pytest.mark.parametrize("argv", [["test", "abc"], ["prime", "0"], ["test", "7", "--iterations", "0"]])
def test_invalid_arguments_exit_with_usage_error(argv):
    """Test invalid input is reported as a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2


def test_unknown_log_level_falls_back_to_warning(monkeypatch, caplog):
    """Test an unknown LOG_LEVEL is reported and replaced by the default."""
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    with patch.object(logging, "basicConfig") as mock_basic_config:
        configure_logging()
    assert mock_basic_config.call_args.kwargs["level"] == "WARNING"
    assert "Ignoring unknown LOG_LEVEL='VERBOSE'" in caplog.text


def test_known_log_level_is_applied(monkeypatch):
    """Test LOG_LEVEL names are accepted case-insensitively."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    with patch.object(logging, "basicConfig") as mock_basic_config:
        configure_logging()
    assert mock_basic_config.call_args.kwargs["level"] == "DEBUG"


def test_main_with_unknown_log_level(monkeypatch, capsys):
    """Test the CLI still runs when LOG_LEVEL is not a level name."""
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    assert main(["test", "97"]) == 0
    assert "probably prime" in capsys.readouterr().out
