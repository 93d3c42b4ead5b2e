"""
Utility helpers for the otp package.
"""

import base64
import binascii
import hmac
import re


# ── Base32 ────────────────────────────────────────────────────────────────────

def normalize_secret(secret: str) -> str:
    """
    Normalise a base32 secret: strip spaces, uppercase, add padding.

    Args:
        secret: Raw user-supplied secret string.

    Returns:
        Uppercase base32 string with correct padding.

    Raises:
        ValueError: If the string contains invalid base32 characters.
    """
    secret = secret.strip().upper().replace(" ", "").replace("-", "")
    # Base32 alphabet: A-Z and 2-7
    if not re.fullmatch(r"[A-Z2-7]+=*", secret):
        raise ValueError("Secret contains invalid base32 characters.")
    pad = (8 - len(secret) % 8) % 8
    return secret + "=" * pad


def decode_secret(secret: str) -> bytes:
    """
    Decode a base32-encoded secret string to raw bytes.

    Args:
        secret: Base32 secret (spaces and dashes are stripped).

    Returns:
        Raw bytes.

    Raises:
        ValueError: On invalid base32 input.
    """
    try:
        return base64.b32decode(normalize_secret(secret), casefold=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base32 secret: {exc}") from exc


def encode_secret(raw: bytes) -> str:
    """Encode raw bytes as a base32 string (no padding)."""
    return base64.b32encode(raw).decode("ascii").rstrip("=")


# ── Hex ───────────────────────────────────────────────────────────────────────

def decode_hex_secret(secret: str) -> bytes:
    """
    Decode a hex secret, tolerating whitespace and an optional ``0x`` prefix.

    Raises:
        ValueError: On invalid hex input.
    """
    cleaned = "".join(secret.split()).lower()
    if cleaned.startswith("0x"):
        cleaned = cleaned[2:]
    try:
        return bytes.fromhex(cleaned)
    except ValueError as exc:
        raise ValueError(f"Invalid hex secret: {exc}") from exc


# ── Display ───────────────────────────────────────────────────────────────────

def format_otp(code: str, group: int = 3) -> str:
    """
    Format an OTP code with spaces for readability.

    Example::

        >>> format_otp("123456")
        "123 456"

    Args:
        code:  Digit string.
        group: Digit grouping size.

    Returns:
        Spaced OTP string.
    """
    return " ".join(code[i : i + group] for i in range(0, len(code), group))


# ── Comparison ────────────────────────────────────────────────────────────────

def constant_time_compare(a: str, b: str) -> bool:
    """Return True if *a* == *b* in constant time (timing-safe)."""
    return hmac.compare_digest(
        a.encode("utf-8", "surrogatepass"), b.encode("utf-8", "surrogatepass")
    )
