"""Exception hierarchy for fakerng.

All exceptions derive from FakeRNGError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.

Using an unlocked source from several threads and reseeding a crypto
source are deliberately absent: the first is a caller precondition, the
second a documented no-op.
"""


class FakeRNGError(Exception):
    """Base exception for all fakerng errors."""


class EntropyUnavailableError(FakeRNGError):
    """The entropy source cannot provide bytes.

    Raised when auto-seeding or a crypto-backed draw cannot read from the
    operating system's CSPRNG. No weaker seed is ever substituted.
    """


class InvalidSeedError(FakeRNGError, ValueError):
    """A seed is not an integer in the signed 64-bit range."""


class ConfigValidationError(FakeRNGError):
    """Configuration field validation failed.

    Raised when the configuration names an unknown random source or
    entropy source.
    """
