"""Exception hierarchy for Crypto-PAn.

Every error raised by the library derives from :class:`CryptoPAnError`, so
callers can catch one base class. Length and address errors also derive from
``ValueError`` because they describe a bad argument value.
"""


class CryptoPAnError(Exception):
    """Base exception for all Crypto-PAn errors."""


class InvalidKeyLength(CryptoPAnError, ValueError):
    """Raised when the secret key is not exactly 64 bytes."""

    def __init__(self, length: int, expected: int = 64):
        self.length = length
        self.expected = expected
        super().__init__(
            f"invalid key length {length}, it should be {expected} bytes"
        )


class KeyDerivationFailed(CryptoPAnError):
    """Raised when the block cipher rejects the derived cipher key."""


class InvalidAddress(CryptoPAnError, ValueError):
    """Raised when an address is neither a 4-byte nor a 16-byte value."""

    def __init__(self, address: object, reason: str):
        self.address = address
        super().__init__(f"invalid address {address!r}: {reason}")
