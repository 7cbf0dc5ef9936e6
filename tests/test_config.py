"""Tests for pbecrypt.config."""

import pytest
from pydantic import ValidationError

from pbecrypt.config import CryptoConfig


def test_defaults():
    c = CryptoConfig()
    assert c.algorithm == "aes-256-cbc"
    assert c.key_length == 32
    assert c.material_size == 16
    assert (c.scrypt_n, c.scrypt_r, c.scrypt_p) == (16384, 8, 1)
    assert c.max_memory == 32 * 1024 * 1024
    assert c.input_encoding == "utf-8"
    assert c.output_encoding == "hex"


def test_config_is_frozen():
    c = CryptoConfig()
    with pytest.raises(ValidationError):
        c.scrypt_n = 2


@pytest.mark.parametrize("field, value", [("key_length", 16), ("material_size", 8), ("algorithm", "aes-128-gcm")])
def test_fixed_constants_are_validated(field, value):
    with pytest.raises(ValidationError):
        CryptoConfig(**{field: value})


def test_from_env_overrides_scrypt_settings():
    env = {
        "PBECRYPT_SCRYPT_N": "1024",
        "PBECRYPT_SCRYPT_R": "4",
        "PBECRYPT_SCRYPT_P": "2",
        "PBECRYPT_MAX_MEMORY": "1048576",
    }
    c = CryptoConfig.from_env(env)
    assert (c.scrypt_n, c.scrypt_r, c.scrypt_p, c.max_memory) == (1024, 4, 2, 1048576)


def test_from_env_ignores_unset_and_empty(monkeypatch):
    monkeypatch.delenv("PBECRYPT_SCRYPT_N", raising=False)
    monkeypatch.setenv("PBECRYPT_SCRYPT_R", "")
    c = CryptoConfig.from_env()
    assert c == CryptoConfig()


def test_from_env_rejects_non_integer():
    with pytest.raises(ValueError):
        CryptoConfig.from_env({"PBECRYPT_SCRYPT_N": "lots"})
