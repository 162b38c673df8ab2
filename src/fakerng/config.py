"""Configuration system for fakerng.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (FAKERNG_*) -> .env file -> field defaults.

The configuration is only applied when a faker is built from it with
:func:`fakerng.faker.build_faker` or installed as the process-wide default
with :func:`fakerng.global_registry.initialize_default`. Fakers created
explicitly with :func:`fakerng.new` and friends ignore it.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


class FakeRNGConfig(BaseSettings):
    """Configuration for fakerng.

    Resolution order: init kwargs -> env vars (FAKERNG_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="FAKERNG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Random source ---

    source_type: str = Field(
        default="locked",
        description="Random source for the default faker: 'locked', 'unlocked', 'crypto'",
    )
    seed: int = Field(
        default=0,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Seed for the default faker (0 = auto-seed from entropy)",
    )
    entropy_source_type: str = Field(
        default="system",
        description="Entropy source used for auto-seeding and crypto draws",
    )

    # --- Diagnostics ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="none",
        description=(
            "Per-draw logging verbosity: 'none', 'summary', 'full'. "
            "Any level other than 'none' serialises draws through a lock"
        ),
    )
    diagnostic_mode: bool = Field(
        default=False,
        description=(
            "Record every draw of the default faker in memory. Diagnostics "
            "serialise draws through a lock, including for the unlocked source"
        ),
    )
