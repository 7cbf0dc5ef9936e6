"""Immutable configuration for the encryption pipeline.

Fixed constants
---------------
algorithm        aes-256-cbc (PKCS#7 padding)
key_length       32 bytes
material_size    16 bytes (password, salt and IV)
input_encoding   utf-8
output_encoding  hex

The scrypt cost parameters and the memory ceiling may be tuned, either by
constructing :class:`CryptoConfig` directly or through ``PBECRYPT_*``
environment variables (see :meth:`CryptoConfig.from_env`).
"""

from __future__ import annotations

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

SCRYPT_N = 2**14
SCRYPT_R = 8
SCRYPT_P = 1
MAX_MEMORY = 32 * 1024 * 1024

_ENV_PREFIX = "PBECRYPT_"
_ENV_FIELDS = {
    "SCRYPT_N": "scrypt_n",
    "SCRYPT_R": "scrypt_r",
    "SCRYPT_P": "scrypt_p",
    "MAX_MEMORY": "max_memory",
}


class CryptoConfig(BaseModel):
    """Cipher, KDF and encoding settings shared by every pipeline component."""

    model_config = ConfigDict(frozen=True)

    algorithm: Literal["aes-256-cbc"] = "aes-256-cbc"
    key_length: int = 32
    material_size: int = 16
    scrypt_n: int = SCRYPT_N
    scrypt_r: int = SCRYPT_R
    scrypt_p: int = SCRYPT_P
    max_memory: int = MAX_MEMORY
    input_encoding: Literal["utf-8"] = "utf-8"
    output_encoding: Literal["hex"] = "hex"

    @field_validator("key_length")
    @classmethod
    def _aes_256_key(cls, v: int) -> int:
        if v != 32:
            raise ValueError("aes-256-cbc requires a 32-byte key")
        return v

    @field_validator("material_size")
    @classmethod
    def _material_size(cls, v: int) -> int:
        if v != 16:
            raise ValueError("password, salt and IV are 16 bytes each")
        return v

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CryptoConfig":
        """Build a config, overriding scrypt settings from ``PBECRYPT_*`` variables."""
        env = os.environ if environ is None else environ
        overrides = {}
        for suffix, field in _ENV_FIELDS.items():
            raw = env.get(_ENV_PREFIX + suffix)
            if raw:
                overrides[field] = int(raw)
        return cls(**overrides)
