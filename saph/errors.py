# Copyright (c) 2026 Signer — MIT License

"""Exception hierarchy for the Saph hasher.

Every error derives from ``SaphError`` and from the built-in exception a
caller would naturally catch (``ValueError``, ``RuntimeError``,
``MemoryError``), so both styles work.
"""


class SaphError(Exception):
    """Base class for all Saph errors."""


class InvalidArgumentError(SaphError, ValueError):
    """Raised when memory size or iteration count is out of range."""


class InvalidStateError(SaphError, RuntimeError):
    """Raised on an operation not allowed in the hasher's current state."""


class ResourceExhaustionError(SaphError, MemoryError):
    """Raised when the mixing buffer cannot be allocated."""


class InternalError(SaphError, RuntimeError):
    """Raised when the hash or cipher primitive fails on well-formed input."""
