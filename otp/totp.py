"""
TOTP (Time-based One-Time Password) implementation following RFC 6238.

Produces codes identical to Google Authenticator. Time is quantised into a
counter of ``period``-second steps and handed to :func:`otp.hotp.hotp`.

Example::

    secret = OTPSecretKey.generate()
    totp = TOTP(Algorithm.SHA1, digits=6, period=30)

    totp.generate(secret)                       # "492039"
    totp.generate_window(secret, 1)             # ["...", "492039", "..."]
    totp.validate(pin, secret)                  # exact time step only
    totp.validate(pin, secret, window=1)        # tolerate ±1 step of drift
"""

import logging
import time as _time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from otp.algorithm import Algorithm
from otp.hotp import hotp
from otp.secret import OTPSecretKey
from otp.utils import constant_time_compare

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = Algorithm.SHA1
DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30

Clock = Callable[[], int]
Secret = Union[OTPSecretKey, bytes]


def system_clock() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return _time.time_ns() // 1_000_000


def time_counter(period: int, base_time_millis: int) -> int:
    """Number of whole ``period``-second steps elapsed at ``base_time_millis``."""
    return int(base_time_millis) // (period * 1000)


class ConfigurationError(ValueError):
    """Raised when a TOTP is constructed with an invalid parameter."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(f"{name} must be greater than 0, but it is ({value})")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class TOTP:
    """
    Immutable TOTP generator / validator.

    Args:
        algorithm: HMAC algorithm forwarded to HOTP.
        digits:    Length of every generated code.
        period:    Time step in seconds.
        clock:     Zero-argument callable returning the current time in
                   milliseconds. Defaults to the system clock.

    Raises:
        ConfigurationError: If ``digits`` or ``period`` is not positive.
    """

    algorithm: Algorithm = DEFAULT_ALGORITHM
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD
    clock: Clock = field(default=system_clock, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.digits <= 0:
            raise ConfigurationError("digits", self.digits)
        if self.period <= 0:
            raise ConfigurationError("period", self.period)
        if self.clock is None:
            object.__setattr__(self, "clock", system_clock)
        logger.debug(
            "TOTP configured: algorithm=%s digits=%d period=%ds",
            getattr(self.algorithm, "value", self.algorithm), self.digits, self.period,
        )

    # ── Time quantisation ────────────────────────────────────────────────

    def time(self, period: int, base_time_millis: Optional[int] = None) -> int:
        """
        Quantise time into a counter.

        Args:
            period:           Time step in seconds.
            base_time_millis: Time in milliseconds; ``clock()`` if None.
        """
        t = base_time_millis if base_time_millis is not None else self.clock()
        return time_counter(period, t)

    def remaining_seconds(self, base_time_millis: Optional[int] = None) -> int:
        """Return seconds until the current time step expires."""
        t = base_time_millis if base_time_millis is not None else self.clock()
        return self.period - (int(t) // 1000) % self.period

    # ── Generation ───────────────────────────────────────────────────────

    def generate(self, secret: Secret, base_time_millis: Optional[int] = None) -> str:
        """
        Generate the code for a single time step.

        Args:
            secret:           Shared secret.
            base_time_millis: Time in milliseconds; current time if None.

        Returns:
            OTP string, zero-padded to ``digits`` characters.
        """
        counter = self.time(self.period, base_time_millis)
        return hotp(self.algorithm, self.digits, secret, counter)

    def generate_window(
        self,
        secret: Secret,
        window: int,
        base_time_millis: Optional[int] = None,
    ) -> List[str]:
        """
        Generate the codes for the counters ``c - window`` .. ``c + window``.

        Args:
            secret:           Shared secret.
            window:           Number of steps either side of the current one.
            base_time_millis: Time in milliseconds; current time if None.

        Returns:
            ``2 * window + 1`` codes in ascending counter order; the middle one
            equals :meth:`generate` for the same time.

        Raises:
            ValueError: If ``window`` is negative.
        """
        if window < 0:
            raise ValueError(f"window must not be negative, but it is ({window})")
        counter = self.time(self.period, base_time_millis)
        return [
            hotp(self.algorithm, self.digits, secret, counter + w)
            for w in range(-window, window + 1)
        ]

    # ── Validation ───────────────────────────────────────────────────────

    def validate(
        self,
        pin: str,
        secret: Secret,
        *,
        window: Optional[int] = None,
        base_time_millis: Optional[int] = None,
    ) -> bool:
        """
        Check a user-supplied code.

        Without ``window`` only the current time step is accepted; with it, any
        step in ``[-window, +window]``. Each candidate is compared in constant
        time and all candidates are always compared.

        Args:
            pin:              Code entered by the user.
            secret:           Shared secret.
            window:           Allowed drift in steps, or None for exact match.
            base_time_millis: Time in milliseconds; current time if None.

        Returns:
            True if the code is valid.
        """
        if window is None:
            expected = self.generate(secret, base_time_millis)
            return isinstance(pin, str) and constant_time_compare(pin, expected)
        return self.match_offset(pin, secret, window, base_time_millis) is not None

    def match_offset(
        self,
        pin: str,
        secret: Secret,
        window: int,
        base_time_millis: Optional[int] = None,
    ) -> Optional[int]:
        """
        Return the step offset at which ``pin`` matches, or None.

        A result of ``-1`` means the code belongs to the previous time step,
        i.e. the generator's clock runs roughly one period behind.
        """
        codes = self.generate_window(secret, window, base_time_millis)
        if not isinstance(pin, str):
            return None
        found: Optional[int] = None
        for w, code in zip(range(-window, window + 1), codes):
            if constant_time_compare(pin, code) and found is None:
                found = w
        return found
