"""Crypto-PAn prefix-preserving address anonymization.

Each output bit at position ``p`` (most significant first) is the top bit of
one AES encryption whose input depends on the address register and on the
key-derived ``pad_prefix``. The register starts as the input address and is
updated in place, so later rounds see the bits committed by earlier ones.

The two loops reproduce existing anonymized datasets bit for bit:

* IPv4 ORs each computed bit into the register without clearing it first.
* IPv6 replaces each bit, feeds only the low 64 bits of the register into the
  block, and returns the register's minimal big-endian encoding left-aligned
  in 16 bytes.
"""

import logging
from typing import Mapping, Union

from cryptopan.address import IPV4_LEN, IPV6_LEN, V4, V6, AddressLike, classify
from cryptopan.config import EngineConfig
from cryptopan.core.bits import (
    BLOCK_SIZE,
    be_bytes,
    be_uint,
    left_aligned_bytes,
    u32,
    u64,
)
from cryptopan.core.context import EngineContext, derive_context
from cryptopan.exceptions import InvalidAddress


def _as_packed(addr, width: int) -> bytes:
    """Return addr as bytes, checking that it is exactly ``width`` long."""
    if not isinstance(addr, (bytes, bytearray, memoryview)):
        raise InvalidAddress(addr, f"unsupported type {type(addr).__name__}")
    packed = bytes(addr)
    if len(packed) != width:
        raise InvalidAddress(addr, f"expected {width} bytes, got {len(packed)}")
    return packed


class CryptoPAn:
    """Crypto-PAn anonymization engine.

    The engine is built once from a 64-byte secret and holds only immutable
    key material, so a single instance can be shared between threads.

    Example:
        >>> cp = CryptoPAn(b"a" * 64)
        >>> cp.anonymize_v4(bytes([3, 168, 10, 154]))
        b'\\xcb\\xae\\xbf\\xbf'
    """

    def __init__(self, key: Union[bytes, bytearray, memoryview]):
        """
        Derive the engine context from a secret key.

        Args:
            key: Exactly 64 bytes of secret material

        Raises:
            InvalidKeyLength: If key is not 64 bytes long
            KeyDerivationFailed: If the block cipher cannot be keyed
        """
        self._context = derive_context(key)

    @classmethod
    def from_config(cls, config: Union[EngineConfig, Mapping]) -> "CryptoPAn":
        """Build an engine from an EngineConfig or a loaded config mapping."""
        if not isinstance(config, EngineConfig):
            config = EngineConfig.from_dict(config)
        logging.getLogger("cryptopan").setLevel(config.level_name())
        return cls(config.key_bytes())

    @property
    def context(self) -> EngineContext:
        """Immutable key material used by every call."""
        return self._context

    def anonymize_v4(self, addr: Union[bytes, bytearray, memoryview]) -> bytes:
        """Anonymize a 4-byte big-endian IPv4 address.

        Args:
            addr: Exactly 4 address bytes

        Returns:
            4 anonymized bytes

        Raises:
            InvalidAddress: If addr is not exactly 4 bytes
        """
        register = be_uint(_as_packed(addr, IPV4_LEN))
        pad_prefix = self._context.pad_prefix
        head = be_bytes(pad_prefix >> 24, 1)
        tail = bytes(BLOCK_SIZE - 5)
        encryptor = self._context.encryptor()

        for position in range(32):
            # pad_prefix >> 32 is 0 at position 0
            window = u32(register << position) | (pad_prefix >> (32 - position))
            block = head + be_bytes(window, 4) + tail
            bit = encryptor.update(block)[0] >> 7
            register |= bit << (31 - position)

        encryptor.finalize()
        return be_bytes(register, IPV4_LEN)

    def anonymize_v6(self, addr: Union[bytes, bytearray, memoryview]) -> bytes:
        """Anonymize a 16-byte big-endian IPv6 address.

        Args:
            addr: Exactly 16 address bytes

        Returns:
            16 anonymized bytes

        Raises:
            InvalidAddress: If addr is not exactly 16 bytes
        """
        register = be_uint(_as_packed(addr, IPV6_LEN))
        pad_prefix = self._context.pad_prefix
        head = be_bytes(pad_prefix >> 24, 1) + bytes(7)
        encryptor = self._context.encryptor()

        for position in range(128):
            window = u64(register | (pad_prefix >> (128 - position)))
            block = head + be_bytes(window, 8)
            bit = encryptor.update(block)[0] >> 7
            shift = 127 - position
            register = (register & ~(1 << shift)) | (bit << shift)

        encryptor.finalize()
        return left_aligned_bytes(register, IPV6_LEN)

    def anonymize(self, addr: AddressLike):
        """Anonymize an IPv4 or IPv6 address of either width.

        IPv4-mapped IPv6 addresses are anonymized as IPv4 and re-wrapped in
        the mapped prefix. The result has the same type and width as addr.

        Args:
            addr: 4 or 16 bytes, or an ``ipaddress.IPv4Address`` /
                ``ipaddress.IPv6Address``

        Returns:
            Anonymized address in the representation addr came in

        Raises:
            InvalidAddress: If addr is neither an IPv4 nor an IPv6 address
        """
        address = classify(addr)
        if isinstance(address, V4):
            return address.wrap(self.anonymize_v4(address.packed))
        if isinstance(address, V6):
            return address.wrap(self.anonymize_v6(address.packed))
        raise InvalidAddress(addr, "unclassifiable address")
