"""Key derivation for the anonymization engine.

A 64-byte secret is split into a 32-byte AES-256 key and a 32-byte pad seed.
The first cipher block of the pad seed is encrypted once; the leading four
bytes of that ciphertext (``pad_prefix``) seed every per-bit round of both
the IPv4 and the IPv6 loop.
"""

import logging
from dataclasses import dataclass, field

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from cryptopan.core.bits import BLOCK_SIZE, be_uint
from cryptopan.exceptions import InvalidKeyLength, KeyDerivationFailed

KEY_SIZE = 64
CIPHER_KEY_SIZE = 32

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineContext:
    """Immutable key material shared by every anonymization call.

    Attributes:
        cipher: AES-256 in ECB mode, keyed with ``key[0:32]``. Used only as a
            16-byte block oracle; callers create a fresh encryptor per call.
        pad: 32 bytes; ``pad[0:16]`` is AES(``key[32:48]``), ``pad[16:32]``
            is ``key[48:64]`` verbatim.
        pad_prefix: Big-endian uint32 of ``pad[0:4]``
    """

    cipher: Cipher = field(repr=False)
    pad: bytes = field(repr=False)
    pad_prefix: int

    def __post_init__(self) -> None:
        """Validate parameters."""
        if len(self.pad) != 2 * BLOCK_SIZE:
            raise ValueError(f"pad must be {2 * BLOCK_SIZE} bytes")
        if not (0 <= self.pad_prefix < 2**32):
            raise ValueError("pad_prefix must be uint32")

    def encryptor(self):
        """Return a fresh ECB encryptor owned by a single call."""
        return self.cipher.encryptor()


def derive_context(key) -> EngineContext:
    """Derive the engine context from a 64-byte secret.

    Args:
        key: Bytes-like secret (``bytes``, ``bytearray`` or ``memoryview``)
            of exactly 64 bytes. It is copied and never modified.

    Returns:
        EngineContext holding the keyed cipher, pad and pad prefix

    Raises:
        TypeError: If key is not bytes-like
        InvalidKeyLength: If key is not exactly 64 bytes
        KeyDerivationFailed: If the cipher rejects ``key[0:32]``
    """
    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise TypeError(f"key must be bytes-like, got {type(key).__name__}")

    key = bytes(key)
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key), KEY_SIZE)

    cipher_key = key[:CIPHER_KEY_SIZE]
    pad_seed = key[CIPHER_KEY_SIZE:]

    try:
        cipher = Cipher(algorithms.AES(cipher_key), modes.ECB())  # noqa: S305
    except ValueError as exc:
        raise KeyDerivationFailed(f"block cipher rejected key: {exc}") from exc

    # Only the first block is encrypted; the tail of the seed stays as-is
    encryptor = cipher.encryptor()
    head = encryptor.update(pad_seed[:BLOCK_SIZE]) + encryptor.finalize()
    pad = head + pad_seed[BLOCK_SIZE:]

    context = EngineContext(cipher=cipher, pad=pad, pad_prefix=be_uint(pad[:4]))
    logger.debug("Derived engine context (AES-%d)", 8 * CIPHER_KEY_SIZE)
    return context
