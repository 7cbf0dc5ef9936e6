"""Password-based key derivation with scrypt.

scrypt is deliberately slow and memory hard, which makes brute-forcing the
password expensive even on dedicated hardware.  Its output is deterministic
for a fixed (password, salt, n, r, p, length), which is what lets the
decrypting side rebuild the same key.
"""

from __future__ import annotations

import logging
from typing import Optional

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from .config import CryptoConfig
from .errors import KeyDerivationError
from .models import CommonKey, Password, Salt

logger = logging.getLogger(__name__)

MAX_OUTPUT_LENGTH = (2**32 - 1) * 32


def scrypt_memory(n: int, r: int, p: int) -> int:
    """Estimated working memory in bytes for the given scrypt parameters."""
    return 128 * r * (n + p + 2)


class KeyDerivationFunction:
    """Derives a :class:`CommonKey` from a :class:`Password` and :class:`Salt`."""

    def __init__(self, config: Optional[CryptoConfig] = None) -> None:
        self.config = config or CryptoConfig()

    def derive(
        self,
        password: Password,
        salt: Salt,
        output_length: Optional[int] = None,
    ) -> CommonKey:
        """Derive the symmetric key; length defaults to ``config.key_length``."""
        if output_length is None:
            output_length = self.config.key_length
        return CommonKey.of(self.derive_bytes(password, salt, output_length))

    def derive_bytes(self, password: Password, salt: Salt, output_length: int) -> bytes:
        """Run scrypt and return the raw derived bytes."""
        cfg = self.config
        n, r, p = cfg.scrypt_n, cfg.scrypt_r, cfg.scrypt_p
        self._check_parameters(n, r, p, output_length)

        logger.debug("Deriving %d-byte key with scrypt (n=%d, r=%d, p=%d)", output_length, n, r, p)
        try:
            kdf = Scrypt(salt=bytes(salt), length=output_length, n=n, r=r, p=p)
            return kdf.derive(bytes(password))
        except (ValueError, MemoryError) as exc:
            raise KeyDerivationError(f"scrypt failed: {exc}") from exc

    def _check_parameters(self, n: int, r: int, p: int, output_length: int) -> None:
        if n < 2 or n & (n - 1):
            raise KeyDerivationError(f"scrypt cost n must be a power of two greater than 1, got {n}")
        if r < 1 or p < 1:
            raise KeyDerivationError(f"scrypt r and p must be positive, got r={r}, p={p}")
        if not 0 < output_length <= MAX_OUTPUT_LENGTH:
            raise KeyDerivationError(
                f"Output length must be between 1 and {MAX_OUTPUT_LENGTH} bytes, got {output_length}"
            )
        needed = scrypt_memory(n, r, p)
        if needed > self.config.max_memory:
            raise KeyDerivationError(
                f"scrypt needs {needed} bytes of memory, above the {self.config.max_memory} byte limit"
            )
