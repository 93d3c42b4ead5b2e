"""
Hash algorithms accepted by the HOTP / TOTP generators.
"""

from enum import Enum


class Algorithm(str, Enum):
    """Supported HMAC algorithms."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def hashlib_name(self) -> str:
        """Name understood by :func:`hmac.new` / :mod:`hashlib`."""
        return _HASHLIB_NAMES[self]

    @property
    def key_size(self) -> int:
        """Recommended secret length in bytes (RFC 6238 §5.1)."""
        return _KEY_SIZES[self]

    @classmethod
    def parse(cls, name: str) -> "Algorithm":
        """
        Look up an algorithm by name, ignoring case and dashes.

        Example::

            >>> Algorithm.parse("sha-256")
            <Algorithm.SHA256: 'SHA256'>

        Raises:
            ValueError: If the name is not a supported algorithm.
        """
        key = name.strip().upper().replace("-", "")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unsupported algorithm '{name}'. Supported: SHA1, SHA256, SHA512."
            ) from None


_HASHLIB_NAMES: dict[Algorithm, str] = {
    Algorithm.SHA1: "sha1",
    Algorithm.SHA256: "sha256",
    Algorithm.SHA512: "sha512",
}

_KEY_SIZES: dict[Algorithm, int] = {
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA512: 64,
}
