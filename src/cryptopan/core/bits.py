"""Fixed-width integer helpers.

Python ints are unbounded, so every shift that must behave like a fixed-width
unsigned register is masked explicitly. All helpers are pure functions on
Python ints and bytes.
"""

# Masks for unsigned wrap semantics
MASK32 = (1 << 32) - 1  # 0xFFFFFFFF
MASK64 = (1 << 64) - 1  # 0xFFFFFFFFFFFFFFFF

# Cipher block size in bytes
BLOCK_SIZE = 16


def u32(x: int) -> int:
    """Force integer into unsigned 32-bit domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Unsigned 32-bit integer (value modulo 2^32)
    """
    return x & MASK32


def u64(x: int) -> int:
    """Force integer into unsigned 64-bit domain."""
    return x & MASK64


def be_uint(data: bytes) -> int:
    """Interpret bytes as a big-endian unsigned integer."""
    return int.from_bytes(data, "big")


def be_bytes(x: int, width: int) -> bytes:
    """Encode x as exactly ``width`` big-endian bytes.

    Args:
        x: Non-negative integer that fits in ``width`` bytes
        width: Output length in bytes

    Returns:
        Big-endian encoding of x, left-padded with zeros
    """
    return x.to_bytes(width, "big")


def left_aligned_bytes(x: int, width: int) -> bytes:
    """Encode x in its minimal big-endian form, left-aligned in ``width`` bytes.

    The minimal encoding has no leading zero bytes (zero encodes to nothing),
    and the result is padded with zeros on the right. This differs from
    :func:`be_bytes` whenever the top byte of x is zero.

    Example:
        >>> left_aligned_bytes(0x0102, 4)
        b'\\x01\\x02\\x00\\x00'
    """
    minimal = x.to_bytes((x.bit_length() + 7) // 8, "big")
    return minimal.ljust(width, b"\x00")
