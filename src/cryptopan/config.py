"""Configuration loading utilities."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml

from cryptopan.exceptions import InvalidKeyLength

KEY_SIZE = 64
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML parsing fails
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}

    return config


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the anonymization engine.

    Attributes:
        key_hex: The 64-byte secret as 128 hexadecimal characters
        log_level: Level name or number for the ``cryptopan`` logger
    """

    key_hex: str = field(repr=False)
    log_level: Union[str, int] = "WARNING"

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not isinstance(self.key_hex, str):
            raise ValueError("key_hex must be a string")
        try:
            key = bytes.fromhex(self.key_hex)
        except ValueError as exc:
            raise ValueError("key_hex must contain only hex digits") from exc
        if len(key) != KEY_SIZE:
            raise InvalidKeyLength(len(key), KEY_SIZE)
        if self.level_name() not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {LOG_LEVELS}, got {self.log_level}"
            )

    def level_name(self) -> str:
        """Return log_level as an upper-case level name."""
        if isinstance(self.log_level, bool):
            return ""
        if isinstance(self.log_level, int):
            return logging.getLevelName(self.log_level)
        if isinstance(self.log_level, str):
            return self.log_level.upper()
        return ""

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "EngineConfig":
        """
        Build a config from a mapping such as the result of :func:`load_config`.

        The key is read from ``key_hex`` or, failing that, from ``key``: a
        64-character text secret whose characters are taken as latin-1 bytes.

        Raises:
            ValueError: If neither key field is present or a field is invalid
        """
        options = {}
        if "log_level" in config:
            options["log_level"] = config["log_level"]

        if "key_hex" in config:
            key_hex = config["key_hex"]
            if not isinstance(key_hex, str):
                raise ValueError(
                    "key_hex must be a string; quote it in YAML "
                    f"(key_hex: \"...\"), got {type(key_hex).__name__}"
                )
            return cls(key_hex=key_hex, **options)
        if "key" in config:
            if not isinstance(config["key"], str):
                raise ValueError(
                    f"key must be a string, got {type(config['key']).__name__}"
                )
            try:
                raw = config["key"].encode("latin-1")
            except UnicodeEncodeError as exc:
                raise ValueError("key must contain only latin-1 characters") from exc
            if len(raw) != KEY_SIZE:
                raise InvalidKeyLength(len(raw), KEY_SIZE)
            return cls(key_hex=raw.hex(), **options)
        raise ValueError("config must define 'key_hex' or 'key'")

    def key_bytes(self) -> bytes:
        """Return the decoded 64-byte secret."""
        return bytes.fromhex(self.key_hex)
