"""Two-variant address type used by dispatch.

An address is classified once at the boundary into either :class:`V4` (four
bytes) or :class:`V6` (sixteen bytes). The variant remembers how the caller
represented the address so the anonymized result can be returned in the same
form and width.
"""

import ipaddress
from dataclasses import dataclass
from typing import Optional, Union

from cryptopan.exceptions import InvalidAddress

IPV4_LEN = 4
IPV6_LEN = 16

# ::ffff:0:0/96
IPV4_MAPPED_PREFIX = b"\x00" * 10 + b"\xff\xff"

AddressLike = Union[
    bytes, bytearray, memoryview, ipaddress.IPv4Address, ipaddress.IPv6Address
]


def _ipv6_object(packed: bytes, scope_id: Optional[str]) -> ipaddress.IPv6Address:
    """Build an IPv6Address, re-attaching a zone index when there is one."""
    address = ipaddress.IPv6Address(packed)
    if scope_id:
        return ipaddress.IPv6Address(f"{address}%{scope_id}")
    return address


@dataclass(frozen=True)
class V4:
    """A 32-bit address.

    Attributes:
        packed: The 4 address bytes
        mapped: True if the caller passed the IPv4-mapped IPv6 form
        as_object: True if the caller passed an ``ipaddress`` object
        scope_id: Zone index of a scoped mapped IPv6Address, kept on output
    """

    packed: bytes
    mapped: bool = False
    as_object: bool = False
    scope_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate parameters."""
        if len(self.packed) != IPV4_LEN:
            raise InvalidAddress(self.packed, "V4 requires exactly 4 bytes")

    def wrap(self, packed: bytes):
        """Return ``packed`` in the representation this address came in."""
        if self.mapped:
            packed = IPV4_MAPPED_PREFIX + packed
            return _ipv6_object(packed, self.scope_id) if self.as_object else packed
        return ipaddress.IPv4Address(packed) if self.as_object else packed


@dataclass(frozen=True)
class V6:
    """A 128-bit address.

    The zone index of a scoped ``IPv6Address`` (``fe80::1%eth0``) is not part
    of the anonymized bits; it is carried over to the result unchanged.
    """

    packed: bytes
    as_object: bool = False
    scope_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate parameters."""
        if len(self.packed) != IPV6_LEN:
            raise InvalidAddress(self.packed, "V6 requires exactly 16 bytes")

    def wrap(self, packed: bytes):
        """Return ``packed`` in the representation this address came in."""
        return _ipv6_object(packed, self.scope_id) if self.as_object else packed


Address = Union[V4, V6]


def classify(addr: AddressLike) -> Address:
    """Classify an address into its V4 or V6 variant.

    Four bytes and ``IPv4Address`` objects are V4. Sixteen bytes are V4 when
    they carry the IPv4-mapped prefix (``::ffff:a.b.c.d``) and V6 otherwise;
    ``IPv6Address`` objects follow the same rule.

    Args:
        addr: Bytes-like value or ``ipaddress`` object

    Returns:
        V4 or V6 variant

    Raises:
        InvalidAddress: If addr fits neither variant
    """
    if isinstance(addr, ipaddress.IPv4Address):
        return V4(addr.packed, as_object=True)
    if isinstance(addr, ipaddress.IPv6Address):
        if addr.ipv4_mapped is not None:
            return V4(
                addr.ipv4_mapped.packed,
                mapped=True,
                as_object=True,
                scope_id=addr.scope_id,
            )
        return V6(addr.packed, as_object=True, scope_id=addr.scope_id)
    if not isinstance(addr, (bytes, bytearray, memoryview)):
        raise InvalidAddress(addr, f"unsupported type {type(addr).__name__}")

    packed = bytes(addr)
    if len(packed) == IPV4_LEN:
        return V4(packed)
    if len(packed) == IPV6_LEN:
        if packed.startswith(IPV4_MAPPED_PREFIX):
            return V4(packed[len(IPV4_MAPPED_PREFIX):], mapped=True)
        return V6(packed)
    raise InvalidAddress(addr, f"expected 4 or 16 bytes, got {len(packed)}")
