"""End-to-end pipeline: random material -> scrypt key -> encrypt -> decrypt.

Encrypting and decrypting in one call only makes sense as a demonstration.
Decryption needs the same key and IV that encryption used, so a real program
has to store them somewhere; keeping them in the same place as the ciphertext
would defeat the encryption.  This module does not store anything.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from .cipher import CipherEngine
from .config import CryptoConfig
from .entropy import RandomSource, SecureRandomSource
from .kdf import KeyDerivationFunction
from .models import InitializationVector, Material, Password, Salt

logger = logging.getLogger(__name__)


class PipelineResult(NamedTuple):
    ciphertext: str
    plaintext: str


class Pipeline:
    """Runs one encrypt/decrypt round trip per call with fresh material."""

    def __init__(
        self,
        config: Optional[CryptoConfig] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or CryptoConfig()
        self.random_source = random_source or SecureRandomSource()
        self.kdf = KeyDerivationFunction(self.config)
        self.engine = CipherEngine(self.config)

    def generate_material(self) -> Material:
        """Draw a new password, salt and IV from the random source."""
        size = self.config.material_size
        return Material(
            password=Password.of(self.random_source.generate(size)),
            salt=Salt.of(self.random_source.generate(size)),
            iv=InitializationVector.of(self.random_source.generate(size)),
        )

    def run(self, plaintext: str, material: Optional[Material] = None) -> PipelineResult:
        """Encrypt *plaintext*, decrypt it again and return both results.

        Pass *material* to reproduce a run with known inputs; otherwise it is
        generated.  Errors from any step propagate unchanged.
        """
        if material is None:
            material = self.generate_material()

        key = self.kdf.derive(material.password, material.salt)
        ciphertext = self.engine.encrypt(key, material.iv, plaintext)
        recovered = self.engine.decrypt(key, material.iv, ciphertext)

        logger.debug("Round trip complete: %d hex chars of ciphertext", len(ciphertext))
        return PipelineResult(ciphertext=ciphertext, plaintext=recovered)
