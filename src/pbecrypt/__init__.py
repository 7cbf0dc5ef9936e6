"""pbecrypt — password-based symmetric encryption with scrypt and AES-256-CBC."""

__version__ = "0.1.0"

from .cipher import CipherEngine
from .config import CryptoConfig
from .entropy import RandomSource, SecureRandomSource
from .errors import (
    CipherConfigurationError,
    DecryptionIntegrityError,
    InvalidMaterialError,
    KeyDerivationError,
    PbecryptError,
    PlaintextEncodingError,
    RandomGenerationError,
)
from .kdf import KeyDerivationFunction
from .models import CommonKey, InitializationVector, Material, Password, Salt
from .pipeline import Pipeline, PipelineResult


def encrypt_roundtrip(plaintext: str) -> PipelineResult:
    """Run the full pipeline on *plaintext* with fresh random material.

    Returns:
        ``(ciphertext, plaintext)``: the hex ciphertext and the decrypted text,
        which equals the input.

    Example::

        from pbecrypt import encrypt_roundtrip

        ciphertext, recovered = encrypt_roundtrip("test")
    """
    return Pipeline().run(plaintext)


__all__ = [
    "CipherConfigurationError",
    "CipherEngine",
    "CommonKey",
    "CryptoConfig",
    "DecryptionIntegrityError",
    "InitializationVector",
    "InvalidMaterialError",
    "KeyDerivationError",
    "KeyDerivationFunction",
    "Material",
    "Password",
    "PbecryptError",
    "PlaintextEncodingError",
    "Pipeline",
    "PipelineResult",
    "RandomGenerationError",
    "RandomSource",
    "Salt",
    "SecureRandomSource",
    "encrypt_roundtrip",
]
