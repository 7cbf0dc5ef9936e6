"""Tests for pbecrypt.models."""

import pytest
from pydantic import ValidationError

from pbecrypt.errors import InvalidMaterialError
from pbecrypt.models import CommonKey, InitializationVector, Material, Password, Salt


def test_password_from_text_is_utf8_encoded():
    pw = Password.of("0123456789abcdef")
    assert pw.value == b"0123456789abcdef"
    assert len(pw) == 16
    assert bytes(pw) == b"0123456789abcdef"


@pytest.mark.parametrize(
    "cls, size",
    [(Password, 15), (Password, 17), (InitializationVector, 8), (CommonKey, 16), (Salt, 15)],
)
def test_factory_rejects_wrong_length(cls, size):
    with pytest.raises(InvalidMaterialError, match=f"got {size}"):
        cls.of(bytes(size))


def test_salt_accepts_more_than_minimum():
    assert len(Salt.of(bytes(32))) == 32


def test_direct_construction_also_validates():
    with pytest.raises(ValidationError):
        CommonKey(value=b"short")


def test_value_objects_are_immutable():
    iv = InitializationVector.of(bytes(16))
    with pytest.raises(ValidationError):
        iv.value = bytes(16)


def test_secret_bytes_stay_out_of_repr():
    key = CommonKey.of(b"K" * 32)
    pw = Password.of(b"P" * 16)
    assert "KKKK" not in repr(key)
    assert "PPPP" not in repr(pw)


def test_invalid_material_error_is_value_error():
    with pytest.raises(ValueError):
        Password.of("short")


def test_material_bundles_three_values():
    material = Material(
        password=Password.of(b"p" * 16),
        salt=Salt.of(b"s" * 16),
        iv=InitializationVector.of(b"i" * 16),
    )
    assert bytes(material.password) == b"p" * 16
    assert bytes(material.salt) == b"s" * 16
    assert bytes(material.iv) == b"i" * 16


@pytest.mark.parametrize("value", [16, 32, None, [0] * 16, memoryview(bytes(16))])
def test_factory_rejects_non_bytes_input(value):
    with pytest.raises(InvalidMaterialError, match="must be bytes or text"):
        Password.of(value)


def test_factory_rejects_unencodable_text():
    with pytest.raises(InvalidMaterialError, match="not valid UTF-8"):
        Salt.of("\ud800" * 16)


def test_bytearray_is_accepted():
    assert bytes(InitializationVector.of(bytearray(16))) == bytes(16)
