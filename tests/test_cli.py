"""Tests for the command-line interface."""

import pytest

from otpgen.cli import main


def test_hotp_command(capsys):
    """Test generating an HOTP code."""
    assert main(["hotp", "secretkey", "--counter", "0"]) == 0
    assert capsys.readouterr().out == "049381\n"


def test_hotp_command_digits(capsys):
    """Test generating an 8-digit HOTP code."""
    assert main(["hotp", "secretkey", "-c", "0", "-d", "8"]) == 0
    assert capsys.readouterr().out == "74049381\n"


def test_hotp_command_hex_secret(capsys):
    """Test that --hex decodes the secret."""
    assert main(["hotp", "7365637265746b6579", "--hex", "--counter", "1"]) == 0
    assert capsys.readouterr().out == "534807\n"


def test_hotp_command_invalid_hex(capsys):
    """Test that an invalid hex secret fails cleanly."""
    assert main(["hotp", "zz", "--hex"]) == 1
    assert "not valid hex" in capsys.readouterr().err


def test_hotp_command_out_of_bounds(capsys):
    """Test that invalid digit counts fail with exit code 1."""
    assert main(["hotp", "secretkey", "--digits", "9"]) == 1
    assert "between 6 and 8" in capsys.readouterr().err


def test_totp_command(capsys):
    """Test generating a TOTP code for a fixed timestamp."""
    assert main(["totp", "secretkey", "--timestamp", "1587915766"]) == 0
    assert capsys.readouterr().out == "623043\n"


def test_totp_command_sha256(capsys):
    """Test TOTP with SHA256 against RFC 6238."""
    argv = [
        "totp",
        "12345678901234567890123456789012",
        "--timestamp",
        "59",
        "--digits",
        "8",
        "--algorithm",
        "sha256",
    ]
    assert main(argv) == 0
    assert capsys.readouterr().out == "46119246\n"


@pytest.mark.parametrize("name", ["sha-256", "SHA256", "Sha256"])
def test_totp_command_algorithm_names(capsys, name):
    """Test that the algorithm flag accepts the same names as Algorithm.from_name."""
    argv = [
        "totp",
        "12345678901234567890123456789012",
        "--timestamp",
        "59",
        "--digits",
        "8",
        "--algorithm",
        name,
    ]
    assert main(argv) == 0
    assert capsys.readouterr().out == "46119246\n"


def test_totp_command_negative_timestamp(capsys):
    """Test that pre-epoch timestamps are rejected."""
    assert main(["totp", "secretkey", "--timestamp=-5"]) == 1
    assert "before the Unix epoch" in capsys.readouterr().err


def test_totp_command_invalid_time_step(capsys):
    """Test that a zero time step is rejected."""
    assert main(["totp", "secretkey", "--time-step", "0"]) == 1
    assert "Time step" in capsys.readouterr().err


def test_totp_command_unknown_algorithm():
    """Test that argparse rejects unknown algorithms."""
    with pytest.raises(SystemExit):
        main(["totp", "secretkey", "--algorithm", "md5"])


def test_no_command(capsys):
    """Test that running without a command prints help."""
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
