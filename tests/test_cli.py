"""Tests for the otp-code command line (main.py)."""

import base64

import pytest
from click.testing import CliRunner

from main import main

# base32 of the RFC 4226 key "12345678901234567890"
RFC_SECRET_B32 = base64.b32encode(b"12345678901234567890").decode("ascii")


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def test_prints_code(runner: CliRunner) -> None:
    result = runner.invoke(main, [RFC_SECRET_B32, "--time", "59000"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "287082"


def test_prints_grouped_eight_digit_code(runner: CliRunner) -> None:
    result = runner.invoke(main, [RFC_SECRET_B32, "-t", "59000", "-d", "8", "--group"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "942 870 82"


def test_prints_window(runner: CliRunner) -> None:
    result = runner.invoke(main, [RFC_SECRET_B32, "-t", "59000", "-w", "1"])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines == ["  -1 755224", "* +0 287082", "  +1 359152"]


def test_verify_valid(runner: CliRunner) -> None:
    result = runner.invoke(main, [RFC_SECRET_B32, "-t", "59000", "--verify", "287082"])
    assert result.exit_code == 0
    assert result.output.strip() == "valid"


def test_verify_invalid(runner: CliRunner) -> None:
    result = runner.invoke(main, [RFC_SECRET_B32, "-t", "59000", "--verify", "359152"])
    assert result.exit_code == 1
    assert result.output.strip() == "invalid"


def test_verify_within_window(runner: CliRunner) -> None:
    result = runner.invoke(
        main, [RFC_SECRET_B32, "-t", "59000", "-w", "1", "--verify", "359152"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == "valid"


def test_sha256_algorithm_option(runner: CliRunner) -> None:
    secret = base64.b32encode(b"12345678901234567890123456789012").decode("ascii")
    result = runner.invoke(main, [secret, "-t", "59000", "-d", "8", "-a", "sha-256"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "46119246"


@pytest.mark.parametrize(
    "args",
    [
        ["!!!", "-t", "0"],
        [RFC_SECRET_B32, "--digits", "0"],
        [RFC_SECRET_B32, "--period=-30"],
        [RFC_SECRET_B32, "--algorithm", "md5"],
        [RFC_SECRET_B32, "--window=-1"],
    ],
)
def test_bad_arguments_are_usage_errors(runner: CliRunner, args: list) -> None:
    result = runner.invoke(main, args)
    assert result.exit_code == 2
