"""
Shared-secret key type for HOTP / TOTP.

The raw bytes are kept in memory only; this module never logs or prints them.
"""

import hmac
import secrets
from typing import Optional

from otp.algorithm import Algorithm
from otp.utils import decode_hex_secret, decode_secret, encode_secret


class OTPSecretKey:
    """Immutable holder of the secret shared between generator and verifier."""

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes) -> None:
        """
        Args:
            raw: Secret bytes. Must not be empty.
        """
        if not isinstance(raw, (bytes, bytearray)):
            raise TypeError(f"Secret must be bytes, got {type(raw).__name__}")
        if not raw:
            raise ValueError("Secret must not be empty.")
        object.__setattr__(self, "_raw", bytes(raw))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("OTPSecretKey is immutable")

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def generate(
        cls,
        length: Optional[int] = None,
        algorithm: Algorithm = Algorithm.SHA1,
    ) -> "OTPSecretKey":
        """
        Return a cryptographically random key.

        Args:
            length:    Key length in bytes. Defaults to the recommended size
                       for ``algorithm``.
            algorithm: HMAC algorithm the key will be used with.
        """
        size = algorithm.key_size if length is None else length
        if size <= 0:
            raise ValueError(f"Key length must be positive, got {size}")
        return cls(secrets.token_bytes(size))

    @classmethod
    def from_base32(cls, text: str) -> "OTPSecretKey":
        """Build a key from a base32 string (as shown by authenticator apps)."""
        return cls(decode_secret(text))

    @classmethod
    def from_hex(cls, text: str) -> "OTPSecretKey":
        return cls(decode_hex_secret(text))

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def raw(self) -> bytes:
        return self._raw

    def to_base32(self) -> str:
        return encode_secret(self._raw)

    def to_hex(self) -> str:
        return self._raw.hex()

    def __len__(self) -> int:
        return len(self._raw)

    def __bytes__(self) -> bytes:
        return self._raw

    # ── Comparison ───────────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OTPSecretKey):
            return NotImplemented
        return hmac.compare_digest(self._raw, other._raw)

    def __hash__(self) -> int:
        return hash((OTPSecretKey, self._raw))

    def __repr__(self) -> str:
        return f"OTPSecretKey(<{len(self._raw)} bytes>)"
