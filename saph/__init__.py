# Copyright (c) 2026 Signer — MIT License

"""Saph — simple memory-hard password hashing.

Hasher:
    Saph      — incremental builder: add parts, then hash() once.
    saph_hash — one-shot helper over the same algorithm.

Building blocks:
    expand    — SHA-256 + AES-128-CBC memory-hard expansion of a digest.

Errors:
    SaphError and its subclasses InvalidArgumentError, InvalidStateError,
    ResourceExhaustionError, InternalError.
"""

from .hasher import (
    Saph, saph_hash,
    DEFAULT_MEMORY_SIZE, DEFAULT_ITERATIONS, BLOCK_SIZE, HASH_SIZE,
)
from .expand import expand
from .errors import (
    SaphError,
    InvalidArgumentError,
    InvalidStateError,
    ResourceExhaustionError,
    InternalError,
)

__version__ = "1.0.0"

__all__ = [
    # Hasher
    "Saph", "saph_hash",
    "DEFAULT_MEMORY_SIZE", "DEFAULT_ITERATIONS", "BLOCK_SIZE", "HASH_SIZE",
    # Expansion
    "expand",
    # Errors
    "SaphError", "InvalidArgumentError", "InvalidStateError",
    "ResourceExhaustionError", "InternalError",
]
