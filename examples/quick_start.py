"""Quick start guide for Crypto-PAn.

Demonstrates:
1. Anonymizing IPv4 and IPv6 addresses with a fixed key
2. IPv4 input bits surviving into the output
3. Building an engine from a YAML config
4. Error handling for bad keys and addresses
"""

import ipaddress
import tempfile
from pathlib import Path

from cryptopan import CryptoPAn, InvalidAddress, InvalidKeyLength, load_config

KEY = b"a" * 64


def example_1_basic_usage():
    """Example 1: anonymize one address of each family."""
    print("=" * 60)
    print("Example 1: Basic Usage")
    print("=" * 60)

    cp = CryptoPAn(KEY)
    for text in ["3.168.10.154", "2001:db8::5555:6666:7777:8888"]:
        original = ipaddress.ip_address(text)
        print(f"{original} -> {cp.anonymize(original)}")
    print()


def example_2_kept_bits():
    """Example 2: every bit set in an IPv4 input is still set in the output.

    Hosts of one /24 are not guaranteed a common anonymized prefix.
    """
    print("=" * 60)
    print("Example 2: Kept Input Bits")
    print("=" * 60)

    cp = CryptoPAn(KEY)
    for host in (1, 2, 200):
        original = ipaddress.IPv4Address(f"192.0.2.{host}")
        anonymized = cp.anonymize(original)
        kept = int(anonymized) & int(original) == int(original)
        print(f"{original} -> {anonymized} (input bits kept: {kept})")
    print()


def example_3_config():
    """Example 3: engine built from a YAML config file."""
    print("=" * 60)
    print("Example 3: YAML Config")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "cryptopan.yaml"
        path.write_text(f'key_hex: "{KEY.hex()}"\nlog_level: INFO\n')
        cp = CryptoPAn.from_config(load_config(path))

    print(f"10.0.0.1 -> {cp.anonymize(ipaddress.IPv4Address('10.0.0.1'))}")
    print()


def example_4_errors():
    """Example 4: invalid inputs raise typed errors."""
    print("=" * 60)
    print("Example 4: Error Handling")
    print("=" * 60)

    try:
        CryptoPAn(b"short")
    except InvalidKeyLength as e:
        print(f"InvalidKeyLength: {e}")

    try:
        CryptoPAn(KEY).anonymize(b"\x01\x02\x03")
    except InvalidAddress as e:
        print(f"InvalidAddress: {e}")
    print()


if __name__ == "__main__":
    example_1_basic_usage()
    example_2_kept_bits()
    example_3_config()
    example_4_errors()
