"""pytest configuration — add src/ to sys.path and share test doubles."""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent / "src"))

from pbecrypt.config import CryptoConfig  # noqa: E402


class FixedRandomSource:
    """Replays a fixed sequence of byte strings instead of drawing entropy."""

    def __init__(self, *chunks: bytes) -> None:
        self.chunks = list(chunks)
        self.requests = []

    def generate(self, size: int) -> bytes:
        self.requests.append(size)
        chunk = self.chunks.pop(0)
        assert len(chunk) == size
        return chunk


@pytest.fixture
def fast_config() -> CryptoConfig:
    """Cheap scrypt settings so tests do not pay the production cost."""
    return CryptoConfig(scrypt_n=2**10, scrypt_r=8, scrypt_p=1)


@pytest.fixture
def fixed_source():
    return FixedRandomSource(
        b"0123456789abcdef",
        b"fedcba9876543210",
        bytes(16),
    )
