"""Cryptographically secure random bytes."""

from __future__ import annotations

import logging
import os
from typing import Protocol

from .errors import RandomGenerationError

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def generate(self, size: int) -> bytes: ...


class SecureRandomSource:
    """Random bytes from the operating system CSPRNG. Never seeded."""

    def generate(self, size: int) -> bytes:
        """Return *size* random bytes; raises :class:`RandomGenerationError` if entropy is unavailable."""
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"size must be a positive integer, got {size!r}")
        try:
            data = os.urandom(size)
        except (OSError, NotImplementedError) as exc:
            raise RandomGenerationError(f"Entropy source unavailable: {exc}") from exc
        logger.debug("Generated %d random bytes", size)
        return data
