"""
HOTP (HMAC-based One-Time Password) implementation following RFC 4226.
"""

import hmac
import struct
from typing import Union

from otp.algorithm import Algorithm
from otp.secret import OTPSecretKey

_COUNTER_MIN = -(2**63)
_COUNTER_MAX = 2**64 - 1


def hotp(
    algorithm: Algorithm,
    digits: int,
    secret: Union[OTPSecretKey, bytes],
    counter: int,
) -> str:
    """
    Generate an HOTP code (RFC 4226 §5).

    Args:
        algorithm: HMAC algorithm.
        digits:    Number of OTP digits.
        secret:    Shared secret, as a key object or raw bytes.
        counter:   Moving factor. Encoded as a 64-bit big-endian integer;
                   negative values use two's complement.

    Returns:
        Zero-padded OTP string of exactly ``digits`` characters.

    Raises:
        ValueError: If ``digits`` is not positive, ``algorithm`` is unknown or
            ``counter`` does not fit in 64 bits.
    """
    if digits <= 0:
        raise ValueError(f"digits must be greater than 0, but it is ({digits})")
    if not _COUNTER_MIN <= counter <= _COUNTER_MAX:
        raise ValueError(f"Counter {counter} does not fit in 64 bits")

    alg_name = Algorithm(algorithm).hashlib_name
    key = bytes(secret)
    msg = struct.pack(">Q", counter & 0xFFFFFFFFFFFFFFFF)
    digest = hmac.new(key, msg, alg_name).digest()

    # Dynamic truncation
    offset = digest[-1] & 0x0F
    code = (
        (digest[offset] & 0x7F) << 24
        | (digest[offset + 1] & 0xFF) << 16
        | (digest[offset + 2] & 0xFF) << 8
        | (digest[offset + 3] & 0xFF)
    )
    otp = code % (10**digits)
    return str(otp).zfill(digits)
