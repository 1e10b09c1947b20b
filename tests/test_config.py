"""Tests for configuration loading."""

import ipaddress
import logging

import pytest

from cryptopan import CryptoPAn, EngineConfig, InvalidKeyLength, load_config


def test_load_config(tmp_path, key):
    """Test that a YAML file loads into a dict."""
    path = tmp_path / "cryptopan.yaml"
    path.write_text(f'key_hex: "{key.hex()}"\nlog_level: DEBUG\n')

    config = load_config(path)

    assert config == {"key_hex": key.hex(), "log_level": "DEBUG"}


def test_load_config_empty(tmp_path):
    """Test that an empty file loads as an empty dict."""
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(path) == {}


def test_load_config_missing(tmp_path):
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_engine_from_config_file(tmp_path, key, engine):
    """Test that a config-built engine matches a directly built one."""
    path = tmp_path / "cryptopan.yaml"
    path.write_text(f'key_hex: "{key.hex()}"\n')

    cp = CryptoPAn.from_config(load_config(path))
    addr = ipaddress.IPv4Address("3.168.10.154")

    assert cp.anonymize(addr) == engine.anonymize(addr)


def test_engine_from_text_key(key):
    """Test that a 64-character text key decodes to the same bytes."""
    config = EngineConfig.from_dict({"key": "a" * 64, "log_level": "info"})

    assert config.key_bytes() == key
    assert CryptoPAn.from_config(config).context.pad_prefix == CryptoPAn(key).context.pad_prefix


def test_config_requires_key():
    """Test that a config without a key is rejected."""
    with pytest.raises(ValueError, match="key_hex"):
        EngineConfig.from_dict({"log_level": "INFO"})


def test_config_key_length():
    """Test that a short key is reported as InvalidKeyLength."""
    with pytest.raises(InvalidKeyLength):
        EngineConfig.from_dict({"key": "a" * 63})
    with pytest.raises(InvalidKeyLength):
        EngineConfig(key_hex="00" * 32)


def test_config_validation(key):
    """Test that malformed fields are rejected."""
    with pytest.raises(ValueError, match="hex"):
        EngineConfig(key_hex="zz" * 64)
    with pytest.raises(ValueError, match="log_level"):
        EngineConfig(key_hex=key.hex(), log_level="LOUD")


def test_config_repr_hides_key(key):
    """Test that the key does not appear in the config repr."""
    assert key.hex() not in repr(EngineConfig(key_hex=key.hex()))


def test_unquoted_numeric_key_rejected(tmp_path):
    """Test that an all-digit key YAML parsed as an int asks for quoting."""
    path = tmp_path / "cryptopan.yaml"
    path.write_text(f"key_hex: {'12' * 64}\n")

    config = load_config(path)

    assert isinstance(config["key_hex"], int)
    with pytest.raises(ValueError, match="quote"):
        CryptoPAn.from_config(config)


def test_quoted_numeric_key_accepted(tmp_path):
    """Test that the same all-digit key loads once quoted."""
    path = tmp_path / "cryptopan.yaml"
    path.write_text(f'key_hex: "{"01" * 64}"\n')

    config = EngineConfig.from_dict(load_config(path))

    assert config.key_bytes() == b"\x01" * 64


def test_non_string_text_key_rejected():
    """Test that a non-string 'key' field is rejected."""
    with pytest.raises(ValueError, match="string"):
        EngineConfig.from_dict({"key": 12345})


def test_key_hex_whitespace_length(key):
    """Test that the decoded key length is checked, not the text length."""
    padded = "61" * 63 + "  "

    with pytest.raises(InvalidKeyLength) as excinfo:
        EngineConfig(key_hex=padded)

    assert excinfo.value.length == 63


def test_numeric_log_level(key):
    """Test that numeric log levels are accepted like level names."""
    config = EngineConfig(key_hex=key.hex(), log_level=logging.INFO)

    assert config.level_name() == "INFO"
    with pytest.raises(ValueError, match="log_level"):
        EngineConfig(key_hex=key.hex(), log_level=25)
    with pytest.raises(ValueError, match="log_level"):
        EngineConfig(key_hex=key.hex(), log_level=None)


def test_from_config_sets_package_level(key):
    """Test that from_config applies log_level to the package logger."""
    package_logger = logging.getLogger("cryptopan")
    previous = package_logger.level
    try:
        CryptoPAn.from_config({"key_hex": key.hex(), "log_level": logging.ERROR})
        assert package_logger.level == logging.ERROR
    finally:
        package_logger.setLevel(previous)
