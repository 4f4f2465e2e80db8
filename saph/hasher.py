# Copyright (c) 2026 Signer — MIT License

"""Saph hasher — incremental part accumulation + memory-hard finalization.

Parts (pepper, username, password, ...) are added one at a time. Each part
is hashed on its own and the 32-byte part digest is fed into a running
SHA-256 context, so part boundaries matter:

    Saph().add("ab").add("c")  !=  Saph().add("a").add("bc")

Calling ``hash()`` digests the running context and expands it through
``saph.expand``. The result is cached; afterwards no parts may be added.

Example (test vector 1):

    >>> Saph(4, 2).add("just").add("a").add("test").hexdigest()
    '8a6d4f4a170929f264dae967748bf9f8f63ac732093ed439c444b044730109ff'
"""

import hashlib

from .errors import InvalidStateError
from .expand import (
    BLOCK_SIZE,
    HASH_SIZE,
    check_parameters,
    expand,
)
from .memory import secure_zero

# ── Defaults ─────────────────────────────────────────────────────

DEFAULT_MEMORY_SIZE = 16384   # 64-byte blocks (1 MiB)
DEFAULT_ITERATIONS = 8

__all__ = [
    "Saph",
    "saph_hash",
    "DEFAULT_MEMORY_SIZE",
    "DEFAULT_ITERATIONS",
    "BLOCK_SIZE",
    "HASH_SIZE",
]


def _part_bytes(part):
    """Normalize a part to a bytes-like object (str is UTF-8 encoded)."""
    if isinstance(part, str):
        return part.encode("utf-8")
    if isinstance(part, (bytes, bytearray, memoryview)):
        return part
    raise TypeError(
        f"part must be str or bytes-like, got {type(part).__name__}")


# ── Lifecycle states ─────────────────────────────────────────────

class _Accumulating:
    """Live running digest over the part digests added so far."""

    __slots__ = ("running",)

    def __init__(self):
        self.running = hashlib.sha256()


class _Finalized:
    """Cached output; nothing else survives finalization."""

    __slots__ = ("digest",)

    def __init__(self, digest):
        self.digest = digest


class Saph:
    """Configurable Saph hasher.

    Args:
        memory_size: Working memory, in 64-byte blocks (>= 1).
        iterations: Number of mixing passes (>= 1).

    Raises:
        InvalidArgumentError: if either parameter is below one.
        TypeError: if either parameter is not an int.

    Instances are single-use and not thread-safe; use one per hash.
    """

    def __init__(self, memory_size=DEFAULT_MEMORY_SIZE,
                 iterations=DEFAULT_ITERATIONS):
        check_parameters(memory_size, iterations)
        self._memory_size = memory_size
        self._iterations = iterations
        self._state = _Accumulating()

    @property
    def memory_size(self):
        """Configured memory size, in 64-byte blocks."""
        return self._memory_size

    @property
    def iterations(self):
        """Configured number of iterations."""
        return self._iterations

    @property
    def is_finalized(self):
        """True once ``hash()`` has been computed."""
        return isinstance(self._state, _Finalized)

    def add(self, part):
        """Add a part (str is encoded as UTF-8). Returns self for chaining.

        Raises:
            InvalidStateError: if the hash has already been calculated.
            TypeError: if part is not str or bytes-like.
        """
        state = self._state
        if not isinstance(state, _Accumulating):
            raise InvalidStateError("parts can not be added to a calculated hash")

        part_digest = bytearray(hashlib.sha256(_part_bytes(part)).digest())
        try:
            state.running.update(part_digest)
        finally:
            secure_zero(part_digest)
        return self

    def add_all(self, parts):
        """Add every part of an iterable, in order."""
        for part in parts:
            self.add(part)
        return self

    def hash(self):
        """Calculate (once) and return the 32-byte hash.

        Later calls return the cached value. If the expansion fails the
        hasher is left unfinalized.
        """
        state = self._state
        if isinstance(state, _Finalized):
            return state.digest

        seed = bytearray(state.running.digest())
        try:
            digest = expand(seed, self._memory_size, self._iterations)
        finally:
            secure_zero(seed)

        self._state = _Finalized(digest)
        return digest

    def hexdigest(self):
        """Hex form of ``hash()``."""
        return self.hash().hex()

    def get_hash(self):
        """Return the calculated hash.

        Raises:
            InvalidStateError: if ``hash()`` has not been called yet.
        """
        state = self._state
        if not isinstance(state, _Finalized):
            raise InvalidStateError("the hash has not been calculated yet")
        return state.digest

    def __repr__(self):
        status = "finalized" if self.is_finalized else "accumulating"
        return (f"Saph(memory_size={self._memory_size}, "
                f"iterations={self._iterations}, {status})")


def saph_hash(*parts, memory_size=DEFAULT_MEMORY_SIZE,
              iterations=DEFAULT_ITERATIONS):
    """One-shot Saph hash of the given parts.

    Args:
        *parts: Parts to add, in order (str or bytes-like).
        memory_size: Working memory, in 64-byte blocks.
        iterations: Number of mixing passes.

    Returns:
        32-byte hash.
    """
    return Saph(memory_size, iterations).add_all(parts).hash()
