"""Value objects holding the secret material of one pipeline run."""

from __future__ import annotations

from typing import ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidMaterialError

PASSWORD_SIZE = 16
SALT_MIN_SIZE = 16
IV_SIZE = 16
KEY_SIZE = 32

BytesLike = Union[bytes, bytearray, str]


class _ByteMaterial(BaseModel):
    """Immutable wrapper around a byte string with a length invariant."""

    model_config = ConfigDict(frozen=True)

    LABEL: ClassVar[str] = "material"
    MIN_SIZE: ClassVar[int] = 1
    MAX_SIZE: ClassVar[Optional[int]] = None

    value: bytes = Field(repr=False)

    @field_validator("value")
    @classmethod
    def _check_length(cls, v: bytes) -> bytes:
        size = len(v)
        if cls.MAX_SIZE == cls.MIN_SIZE and size != cls.MIN_SIZE:
            raise ValueError(f"{cls.LABEL} must be exactly {cls.MIN_SIZE} bytes, got {size}")
        if size < cls.MIN_SIZE:
            raise ValueError(f"{cls.LABEL} must be at least {cls.MIN_SIZE} bytes, got {size}")
        if cls.MAX_SIZE is not None and size > cls.MAX_SIZE:
            raise ValueError(f"{cls.LABEL} must be at most {cls.MAX_SIZE} bytes, got {size}")
        return v

    @classmethod
    def of(cls, value: BytesLike):
        """Build from *value*, UTF-8 encoding text; raises :class:`InvalidMaterialError`."""
        if isinstance(value, str):
            try:
                value = value.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise InvalidMaterialError(f"{cls.LABEL} is not valid UTF-8 text") from exc
        elif not isinstance(value, (bytes, bytearray)):
            raise InvalidMaterialError(
                f"{cls.LABEL} must be bytes or text, got {type(value).__name__}"
            )
        try:
            return cls(value=bytes(value))
        except ValidationError as exc:
            msg = exc.errors()[0]["msg"].removeprefix("Value error, ")
            raise InvalidMaterialError(msg) from exc

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)


class Password(_ByteMaterial):
    """Password fed to the KDF. Random bytes in this design, never logged."""

    LABEL = "password"
    MIN_SIZE = PASSWORD_SIZE
    MAX_SIZE = PASSWORD_SIZE


class Salt(_ByteMaterial):
    """KDF salt; must be fresh for every encryption."""

    LABEL = "salt"
    MIN_SIZE = SALT_MIN_SIZE


class InitializationVector(_ByteMaterial):
    """CBC initialization vector, one AES block long.

    Reusing an IV with the same key for different plaintexts leaks
    information about their common prefix.
    """

    LABEL = "initialization vector"
    MIN_SIZE = IV_SIZE
    MAX_SIZE = IV_SIZE


class CommonKey(_ByteMaterial):
    """The derived AES-256 key. The most sensitive value in the pipeline.

    Holds the raw scrypt output.  It is not base64-encoded and cut down to 32
    printable characters, so ciphertexts differ from programs that key AES
    with such a text form of the same derivation.
    """

    LABEL = "common key"
    MIN_SIZE = KEY_SIZE
    MAX_SIZE = KEY_SIZE


class Material(BaseModel):
    """Password, salt and IV generated together for a single run.

    Decryption needs the same three values again.  Nothing here is persisted:
    a real deployment must keep them apart from the ciphertext, under
    different access controls.
    """

    model_config = ConfigDict(frozen=True)

    password: Password
    salt: Salt
    iv: InitializationVector
