"""
otp-code – command-line entry point.

Usage
-----
    python main.py JBSWY3DPEHPK3PXP
    python main.py JBSWY3DPEHPK3PXP --window 1
    python main.py JBSWY3DPEHPK3PXP --verify 492039

Or, if installed as a package:
    otp-code JBSWY3DPEHPK3PXP
"""

import logging
import sys
from typing import Optional

import click

from otp.algorithm import Algorithm
from otp.secret import OTPSecretKey
from otp.totp import DEFAULT_DIGITS, DEFAULT_PERIOD, TOTP, ConfigurationError
from otp.utils import format_otp

logger = logging.getLogger("otp")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    # Keep secret handling quiet even in verbose mode
    logging.getLogger("otp.secret").setLevel(logging.WARNING)


def _parse_algorithm(ctx: click.Context, param: click.Parameter, value: str) -> Algorithm:
    try:
        return Algorithm.parse(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.command()
@click.argument("secret")
@click.option(
    "--algorithm", "-a", default="SHA1", show_default=True,
    callback=_parse_algorithm, help="HMAC algorithm (SHA1, SHA256, SHA512).",
)
@click.option("--digits", "-d", type=int, default=DEFAULT_DIGITS, show_default=True)
@click.option("--period", "-p", type=int, default=DEFAULT_PERIOD, show_default=True,
              help="Time step in seconds.")
@click.option("--time", "-t", "base_time_millis", type=int, default=None,
              help="Time in milliseconds since the epoch (default: now).")
@click.option("--window", "-w", type=click.IntRange(min=0), default=None,
              help="Print or accept codes this many steps either side.")
@click.option("--verify", "pin", default=None, help="Check PIN instead of printing codes.")
@click.option("--group/--no-group", default=False, help="Space digits in groups of three.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(
    secret: str,
    algorithm: Algorithm,
    digits: int,
    period: int,
    base_time_millis: Optional[int],
    window: Optional[int],
    pin: Optional[str],
    group: bool,
    verbose: bool,
) -> None:
    """Print the TOTP code for a base32 SECRET, or verify one with --verify."""
    _setup_logging(verbose)

    try:
        key = OTPSecretKey.from_base32(secret)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="SECRET") from exc

    try:
        totp = TOTP(algorithm, digits=digits, period=period)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc

    if pin is not None:
        offset = totp.match_offset(pin, key, window or 0, base_time_millis)
        if offset is None:
            click.echo("invalid")
            sys.exit(1)
        logger.debug("Code matched at offset %+d", offset)
        click.echo("valid")
        return

    show = format_otp if group else (lambda code: code)
    if window is None:
        click.echo(show(totp.generate(key, base_time_millis)))
        return

    codes = totp.generate_window(key, window, base_time_millis)
    for w, code in zip(range(-window, window + 1), codes):
        marker = "*" if w == 0 else " "
        click.echo(f"{marker} {w:+d} {show(code)}")


if __name__ == "__main__":
    main()
