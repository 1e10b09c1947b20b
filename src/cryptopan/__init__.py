"""Crypto-PAn: prefix-preserving IP address anonymization library."""

from .address import V4, V6, classify
from .config import EngineConfig, load_config
from .core import CryptoPAn, EngineContext, derive_context
from .exceptions import (
    CryptoPAnError,
    InvalidAddress,
    InvalidKeyLength,
    KeyDerivationFailed,
)
from .utils import Timer, get_logger

__version__ = "0.1.0"

__all__ = [
    # Engine
    "CryptoPAn",
    "EngineContext",
    "derive_context",
    # Addresses
    "V4",
    "V6",
    "classify",
    # Errors
    "CryptoPAnError",
    "InvalidKeyLength",
    "KeyDerivationFailed",
    "InvalidAddress",
    # Config
    "EngineConfig",
    "load_config",
    # Utils
    "get_logger",
    "Timer",
]
