"""Shared pytest fixtures for fakerng tests.

Provides entropy-source test doubles and a fixture that restores the
process-wide default faker after each test that replaces it.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fakerng import global_registry
from fakerng.entropy.base import EntropySource
from fakerng.exceptions import EntropyUnavailableError
from fakerng.faker import Faker

# First three PCG64 draws for seed 42 (SplitMix64-expanded state).
GOLDEN_SEED_42 = (
    12224675290135233790,
    9860423973401327721,
    4778247438621736158,
)


class FixedBytesSource(EntropySource):
    """Test double: returns bytes from a fixed queue, then a repeating pattern."""

    def __init__(self, *chunks: bytes, pattern: int = 0xAA) -> None:
        self._chunks = list(chunks)
        self._pattern = pattern
        self.call_count = 0

    @property
    def name(self) -> str:
        return "fixed"

    @property
    def is_available(self) -> bool:
        return True

    def get_random_bytes(self, n: int) -> bytes:
        self.call_count += 1
        if self._chunks:
            return self._chunks.pop(0)
        return bytes([self._pattern] * n)

    def close(self) -> None:
        pass


class AlwaysFailSource(EntropySource):
    """Test double: always raises EntropyUnavailableError."""

    @property
    def name(self) -> str:
        return "always_fail"

    @property
    def is_available(self) -> bool:
        return False

    def get_random_bytes(self, n: int) -> bytes:
        raise EntropyUnavailableError("always fails")

    def close(self) -> None:
        pass


@pytest.fixture
def fixed_entropy() -> FixedBytesSource:
    """Entropy that yields 0xAA bytes on every call."""
    return FixedBytesSource()


@pytest.fixture
def failing_entropy() -> AlwaysFailSource:
    """Entropy that never delivers."""
    return AlwaysFailSource()


@pytest.fixture
def restore_global_faker() -> Iterator[Faker]:
    """Yield the current default faker and reinstall it, with its entropy, afterwards."""
    original = global_registry.global_faker()
    entropy = global_registry._registry.entropy
    yield original
    global_registry._registry.set(original, entropy)
