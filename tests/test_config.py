"""Tests for fakerng.config and build_faker.

Covers:
- Default values
- Environment variable loading (monkeypatch)
- Seed range and log level validation
- build_faker resolution of source and entropy types
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from fakerng.config import INT64_MAX, INT64_MIN, FakeRNGConfig
from fakerng.diagnostics import RecordingSource
from fakerng.entropy.registry import entropy_source_registry
from fakerng.exceptions import ConfigValidationError
from fakerng.faker import build_faker
from fakerng.sources.crypto import CryptoSource
from fakerng.sources.locked import LockedPRNGSource
from fakerng.sources.unlocked import UnlockedPRNGSource
from tests.conftest import GOLDEN_SEED_42, FixedBytesSource


def _config(**overrides: object) -> FakeRNGConfig:
    return FakeRNGConfig(_env_file=None, **overrides)  # type: ignore[arg-type]


class TestFakeRNGConfigDefaults:
    """Defaults build a locked, auto-seeded faker from OS entropy."""

    def test_defaults(self) -> None:
        cfg = _config()
        assert cfg.source_type == "locked"
        assert cfg.seed == 0
        assert cfg.entropy_source_type == "system"
        assert cfg.log_level == "none"
        assert cfg.diagnostic_mode is False


class TestFakeRNGConfigEnvironment:
    """FAKERNG_* environment variables override defaults."""

    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAKERNG_SOURCE_TYPE", "crypto")
        monkeypatch.setenv("FAKERNG_SEED", "-17")
        monkeypatch.setenv("FAKERNG_DIAGNOSTIC_MODE", "true")
        cfg = _config()
        assert cfg.source_type == "crypto"
        assert cfg.seed == -17
        assert cfg.diagnostic_mode is True

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FAKERNG_SEED", "5")
        assert _config(seed=6).seed == 6


class TestFakeRNGConfigValidation:
    """Field constraints are enforced by pydantic."""

    def test_seed_bounds_accepted(self) -> None:
        assert _config(seed=INT64_MIN).seed == INT64_MIN
        assert _config(seed=INT64_MAX).seed == INT64_MAX

    @pytest.mark.parametrize("seed", [INT64_MAX + 1, INT64_MIN - 1])
    def test_seed_out_of_range(self, seed: int) -> None:
        with pytest.raises(ValidationError):
            _config(seed=seed)

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError):
            _config(log_level="verbose")

    @pytest.mark.parametrize("field", ["log_level", "diagnostic_mode"])
    def test_diagnostic_fields_document_serialisation(self, field: str) -> None:
        description = FakeRNGConfig.model_fields[field].description
        assert description is not None
        assert "draws through a lock" in description


class TestBuildFaker:
    """build_faker resolves names through the registries."""

    def test_default_build(self) -> None:
        faker = build_faker(_config())
        assert isinstance(faker.source, LockedPRNGSource)

    def test_seeded_build(self) -> None:
        faker = build_faker(_config(seed=42))
        assert tuple(faker.next_uint64() for _ in range(3)) == GOLDEN_SEED_42

    def test_crypto_build(self) -> None:
        assert isinstance(build_faker(_config(source_type="crypto")).source, CryptoSource)

    def test_unknown_source_type(self) -> None:
        with pytest.raises(ConfigValidationError, match="no_such_source"):
            build_faker(_config(source_type="no_such_source"))

    def test_unknown_entropy_type(self) -> None:
        with pytest.raises(ConfigValidationError, match="no_such_entropy"):
            build_faker(_config(entropy_source_type="no_such_entropy"))

    def test_custom_entropy_feeds_auto_seed(self) -> None:
        class SeedFortyTwo(FixedBytesSource):
            def __init__(self) -> None:
                super().__init__((42).to_bytes(8, "big"))

        saved = dict(entropy_source_registry._registry)
        try:
            entropy_source_registry.register("forty_two")(SeedFortyTwo)
            faker = build_faker(_config(entropy_source_type="forty_two"))
        finally:
            entropy_source_registry._registry = saved
        assert tuple(faker.next_uint64() for _ in range(3)) == GOLDEN_SEED_42

    def test_diagnostic_mode_wraps_source(self) -> None:
        faker = build_faker(_config(seed=42, diagnostic_mode=True))
        assert isinstance(faker.source, RecordingSource)
        assert isinstance(faker.source.inner, LockedPRNGSource)
        faker.next_uint64()
        assert [r.value for r in faker.source.get_records()] == [GOLDEN_SEED_42[0]]

    def test_diagnostics_serialise_unlocked_source(self) -> None:
        faker = build_faker(_config(source_type="unlocked", seed=42, diagnostic_mode=True))
        assert isinstance(faker.source, RecordingSource)
        assert isinstance(faker.source.inner, UnlockedPRNGSource)
        assert tuple(faker.next_uint64() for _ in range(3)) == GOLDEN_SEED_42
        assert faker.source.draw_count == 3

    def test_log_level_alone_wraps_without_records(self) -> None:
        faker = build_faker(_config(seed=42, log_level="summary"))
        assert isinstance(faker.source, RecordingSource)
        faker.next_uint64()
        assert faker.source.get_records() == []
