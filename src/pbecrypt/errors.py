"""Exception hierarchy for pbecrypt.

Each failure category gets its own type so callers can tell a configuration
bug (fix the code) from an integrity failure (fix the data or the key
material).  None of them is retried internally.
"""

from __future__ import annotations


class PbecryptError(Exception):
    """Base class for every error raised by pbecrypt."""


class RandomGenerationError(PbecryptError):
    """Raised when the operating system entropy source is unavailable."""


class InvalidMaterialError(PbecryptError, ValueError):
    """Raised when bytes do not satisfy a value object's length invariant."""


class KeyDerivationError(PbecryptError, ValueError):
    """Raised for invalid scrypt parameters or an exceeded memory ceiling."""


class CipherConfigurationError(PbecryptError, ValueError):
    """Raised when the key or IV length does not fit the cipher."""


class DecryptionIntegrityError(PbecryptError, ValueError):
    """Raised when decryption fails; the ciphertext must not be trusted."""


class PlaintextEncodingError(PbecryptError, ValueError):
    """Raised when plaintext text cannot be encoded before encryption."""
