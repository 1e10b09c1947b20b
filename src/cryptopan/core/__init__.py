"""Crypto-PAn engine modules."""

from .anonymizer import CryptoPAn
from .context import EngineContext, derive_context

__all__ = [
    "CryptoPAn",
    "EngineContext",
    "derive_context",
]
