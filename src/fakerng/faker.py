"""The Faker handle and its constructors.

A :class:`Faker` owns exactly one :class:`~fakerng.sources.base.RandomSource`
and is the only surface data-generation functions draw through. It holds
no state of its own: ``next_uint64()`` and ``reseed()`` delegate straight
to the source, and the uniform helpers are derived from ``next_uint64()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from fakerng.diagnostics import RecordingSource
from fakerng.entropy import entropy_source_registry
from fakerng.exceptions import ConfigValidationError
from fakerng.sources import (
    CryptoSource,
    LockedPRNGSource,
    UnlockedPRNGSource,
    random_source_registry,
)

if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from fakerng.config import FakeRNGConfig
    from fakerng.entropy.base import EntropySource
    from fakerng.sources.base import RandomSource

logger = logging.getLogger("fakerng")

_UINT64_RANGE = 1 << 64
_INT64_SIGN = 1 << 63
_FLOAT64_SCALE = 2.0**-53


class Faker:
    """Handle wrapping one random source.

    The source is owned by the faker; mutate it only through the faker.

    Args:
        source: Any object implementing ``next_uint64()`` and ``reseed()``.

    Raises:
        TypeError: If *source* lacks either method.
    """

    __slots__ = ("_source",)

    def __init__(self, source: RandomSource) -> None:
        for method in ("next_uint64", "reseed"):
            if not callable(getattr(source, method, None)):
                raise TypeError(
                    f"{type(source).__name__} is not a random source: missing {method}()"
                )
        self._source = source

    @property
    def source(self) -> RandomSource:
        """The owned random source."""
        return self._source

    def __repr__(self) -> str:
        return f"Faker(source={type(self._source).__name__})"

    def next_uint64(self) -> int:
        """Return one draw in ``[0, 2**64)`` from the source."""
        return self._source.next_uint64()

    def reseed(self, seed: int) -> None:
        """Reseed the source. See the source class for the meaning of ``0``."""
        self._source.reseed(seed)

    # --- Derived uniform helpers ---

    def uint32(self) -> int:
        """Return a uniform value in ``[0, 2**32)`` from the high bits."""
        return self.next_uint64() >> 32

    def int63(self) -> int:
        """Return a non-negative value in ``[0, 2**63)``."""
        return self.next_uint64() >> 1

    def int64(self) -> int:
        """Return the draw reinterpreted as a signed 64-bit integer."""
        value = self.next_uint64()
        return value - _UINT64_RANGE if value >= _INT64_SIGN else value

    def int_n(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``.

        Draws above the largest multiple of *n* are rejected, so there is
        no modulo bias.

        Args:
            n: Exclusive upper bound, ``0 < n <= 2**64``.

        Raises:
            ValueError: If *n* is out of range.
        """
        if n <= 0 or n > _UINT64_RANGE:
            raise ValueError(f"int_n bound must be in (0, 2**64], got {n}")
        limit = _UINT64_RANGE - (_UINT64_RANGE % n)
        while True:
            value = self.next_uint64()
            if value < limit:
                return value % n

    def float64(self) -> float:
        """Return a uniform float in ``[0.0, 1.0)`` built from the top 53 bits."""
        return (self.next_uint64() >> 11) * _FLOAT64_SCALE

    def shuffle(self, seq: MutableSequence[Any]) -> None:
        """Shuffle *seq* in place (Fisher-Yates)."""
        for i in range(len(seq) - 1, 0, -1):
            j = self.int_n(i + 1)
            seq[i], seq[j] = seq[j], seq[i]

    def random_float64(
        self,
        shape: tuple[int, ...],
        out: np.ndarray | None = None,
    ) -> np.ndarray:
        """Return an array of uniform float64 values in ``[0, 1)``.

        One draw is consumed per element, in C order, so a seeded faker
        fills arrays reproducibly.

        Args:
            shape: Desired output shape.
            out: Optional pre-allocated array to write into.

        Returns:
            *out* if given, otherwise a new array of *shape*.
        """
        total = 1
        for dim in shape:
            total *= dim
        raw = np.fromiter(
            (self.next_uint64() >> 11 for _ in range(total)),
            dtype=np.uint64,
            count=total,
        )
        values = raw.astype(np.float64) * _FLOAT64_SCALE
        if out is not None:
            np.copyto(out, values.reshape(shape))
            return out
        return values.reshape(shape)


def new(seed: int = 0) -> Faker:
    """Create a thread-safe faker on a locked PCG64 source.

    Args:
        seed: Signed 64-bit seed; ``0`` seeds from OS entropy.

    Raises:
        InvalidSeedError: If *seed* is not a signed 64-bit int.
        EntropyUnavailableError: If auto-seeding cannot read entropy.
    """
    return Faker(LockedPRNGSource(seed))


def new_unlocked(seed: int = 0) -> Faker:
    """Create a faker on an unlocked PCG64 source.

    Faster than :func:`new`, but the faker must stay on one thread or be
    synchronised externally.

    Args:
        seed: Signed 64-bit seed; ``0`` seeds from OS entropy.
    """
    return Faker(UnlockedPRNGSource(seed))


def new_crypto() -> Faker:
    """Create a faker whose draws come straight from the OS CSPRNG.

    The faker is safe to share between threads and cannot be seeded.
    """
    return Faker(CryptoSource())


def new_custom(source: RandomSource) -> Faker:
    """Wrap a caller-supplied random source in a faker."""
    return Faker(source)


def resolve_entropy(config: FakeRNGConfig) -> EntropySource:
    """Instantiate the entropy source named by ``config.entropy_source_type``.

    Raises:
        ConfigValidationError: If the entropy source type is unknown.
    """
    try:
        return entropy_source_registry.build(config.entropy_source_type)
    except KeyError as exc:
        raise ConfigValidationError(exc.args[0]) from exc


def build_faker(config: FakeRNGConfig, entropy: EntropySource | None = None) -> Faker:
    """Build a faker from configuration.

    Resolves ``source_type`` through the random source registry, seeds
    with ``config.seed`` and wraps the source in a
    :class:`~fakerng.diagnostics.RecordingSource` when diagnostics or
    per-draw logging are enabled.

    Args:
        config: The fakerng configuration.
        entropy: Entropy source for auto-seeding and crypto draws. Resolved
            from ``config.entropy_source_type`` when omitted.

    Returns:
        A new Faker.

    Raises:
        ConfigValidationError: If either source type is unknown.
        EntropyUnavailableError: If auto-seeding cannot read entropy.
    """
    if entropy is None:
        entropy = resolve_entropy(config)
    try:
        random_source_registry.get(config.source_type)
    except KeyError as exc:
        raise ConfigValidationError(exc.args[0]) from exc

    source = random_source_registry.build(config.source_type, seed=config.seed, entropy=entropy)
    if config.diagnostic_mode or config.log_level != "none":
        source = RecordingSource(
            source,
            log_level=config.log_level,
            diagnostic_mode=config.diagnostic_mode,
        )
    logger.debug(
        "Built faker: source=%s entropy=%s seed=%s",
        config.source_type,
        entropy.name,
        "auto" if config.seed == 0 else config.seed,
    )
    return Faker(source)
