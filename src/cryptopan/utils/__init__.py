"""Utilities module for Crypto-PAn."""

from cryptopan.utils.logger import get_logger
from cryptopan.utils.timing import Timer

__all__ = [
    "get_logger",
    "Timer",
]
