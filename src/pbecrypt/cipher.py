"""AES-256-CBC encryption with PKCS#7 padding.

Every call builds its own cipher context from (key, IV), runs one
update/finalize sequence and drops it.  Contexts are never kept on the
engine, so CBC chaining state cannot carry over between messages.

There is no authentication tag.  A padding failure on decrypt is the only
integrity signal and only catches corruption that breaks the padding shape.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .config import CryptoConfig
from .errors import CipherConfigurationError, DecryptionIntegrityError, PlaintextEncodingError
from .models import CommonKey, InitializationVector

logger = logging.getLogger(__name__)

BLOCK_SIZE = algorithms.AES.block_size // 8

KeyLike = Union[CommonKey, bytes]
IVLike = Union[InitializationVector, bytes]

_INTEGRITY_MSG = "Decryption failed: ciphertext or key/IV material invalid."


class CipherEngine:
    """Encrypts and decrypts text under a derived key and IV."""

    def __init__(self, config: Optional[CryptoConfig] = None) -> None:
        self.config = config or CryptoConfig()

    # ------------------------------------------------------------------
    # Text API
    # ------------------------------------------------------------------

    def encrypt(self, key: KeyLike, iv: IVLike, plaintext: Union[bytes, str]) -> str:
        """Encrypt *plaintext* and return the ciphertext as lowercase hex."""
        if isinstance(plaintext, str):
            try:
                plaintext = plaintext.encode(self.config.input_encoding)
            except UnicodeEncodeError as exc:
                raise PlaintextEncodingError(
                    f"Plaintext is not encodable as {self.config.input_encoding}"
                ) from exc
        return self.encrypt_bytes(key, iv, plaintext).hex()

    def decrypt(self, key: KeyLike, iv: IVLike, ciphertext: Union[str, bytes]) -> str:
        """Decrypt hex (or raw) *ciphertext* and return the UTF-8 plaintext."""
        if isinstance(ciphertext, str):
            try:
                ciphertext = bytes.fromhex(ciphertext)
            except ValueError as exc:
                raise DecryptionIntegrityError(_INTEGRITY_MSG) from exc
        data = self.decrypt_bytes(key, iv, ciphertext)
        try:
            return data.decode(self.config.input_encoding)
        except UnicodeDecodeError as exc:
            raise DecryptionIntegrityError(_INTEGRITY_MSG) from exc

    # ------------------------------------------------------------------
    # Bytes API
    # ------------------------------------------------------------------

    def encrypt_bytes(self, key: KeyLike, iv: IVLike, plaintext: bytes) -> bytes:
        cipher = self._new_cipher(key, iv)
        padder = padding.PKCS7(algorithms.AES.block_size).padder()
        padded = padder.update(plaintext) + padder.finalize()

        encryptor = cipher.encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()
        logger.debug("Encrypted %d bytes into %d bytes", len(plaintext), len(ciphertext))
        return ciphertext

    def decrypt_bytes(self, key: KeyLike, iv: IVLike, ciphertext: bytes) -> bytes:
        cipher = self._new_cipher(key, iv)
        if not ciphertext or len(ciphertext) % BLOCK_SIZE:
            raise DecryptionIntegrityError(_INTEGRITY_MSG)

        decryptor = cipher.decryptor()
        padded = decryptor.update(ciphertext) + decryptor.finalize()
        unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
        try:
            plaintext = unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise DecryptionIntegrityError(_INTEGRITY_MSG) from exc
        logger.debug("Decrypted %d bytes", len(ciphertext))
        return plaintext

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_cipher(self, key: KeyLike, iv: IVLike) -> Cipher:
        raw_key, raw_iv = bytes(key), bytes(iv)
        if len(raw_key) != self.config.key_length:
            raise CipherConfigurationError(
                f"{self.config.algorithm} needs a {self.config.key_length}-byte key, got {len(raw_key)}"
            )
        if len(raw_iv) != BLOCK_SIZE:
            raise CipherConfigurationError(
                f"{self.config.algorithm} needs a {BLOCK_SIZE}-byte IV, got {len(raw_iv)}"
            )
        return Cipher(algorithms.AES(raw_key), modes.CBC(raw_iv))
