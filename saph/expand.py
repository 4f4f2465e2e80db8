# Copyright (c) 2026 Signer — MIT License

"""Saph memory-hard expansion.

Turns the 32-byte accumulator digest into the final hash by repeatedly
mixing a buffer of ``memory_size`` 64-byte blocks:

    M = 0^(64 * memory_size)
    for each iteration:
        M     = AES-128-CBC(key=S[0:16], iv=S[16:32], M)     # no padding
        order = block_order(M)
        S     = SHA-256(M[order[0]] || M[order[1]] || ...)

The buffer is never reset, so every pass re-encrypts the previous one.

Block order: start from the identity permutation and, for every block i,
swap order[i] with order[j], where j is the first four bytes of block i
read as an unsigned little-endian integer, reduced modulo memory_size.
"""

import hashlib
import struct

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import InternalError, InvalidArgumentError, ResourceExhaustionError
from .memory import mlock, munlock, secure_zero

# ── Constants ────────────────────────────────────────────────────

BLOCK_SIZE = 64       # SHA-256 chunk length
HASH_SIZE = 32        # SHA-256 digest length
KEY_SIZE = 16         # AES-128
_AES_BLOCK = 16

_LE32 = struct.Struct("<I")


def check_parameters(memory_size, iterations):
    """Validate the two cost parameters, raising on bad values."""
    for name, value in (("memory_size", memory_size), ("iterations", iterations)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if memory_size < 1:
        raise InvalidArgumentError(
            f"memory_size must be at least one block, got {memory_size}")
    if iterations < 1:
        raise InvalidArgumentError(
            f"iterations must be at least one, got {iterations}")


# ── Mixing ───────────────────────────────────────────────────────

def mix(memory, state, scratch=None):
    """Encrypt ``memory`` in place with AES-128-CBC keyed by ``state``.

    The first half of the state is the key, the second half the IV.
    ``scratch`` must hold at least ``len(memory) + 15`` bytes; one is
    allocated (and wiped) when not supplied.
    """
    own_scratch = scratch is None
    if own_scratch:
        scratch = bytearray(len(memory) + _AES_BLOCK - 1)

    try:
        try:
            encryptor = Cipher(
                algorithms.AES(bytes(state[:KEY_SIZE])),
                modes.CBC(bytes(state[KEY_SIZE:HASH_SIZE])),
            ).encryptor()
            written = encryptor.update_into(memory, scratch)
            tail = encryptor.finalize()
        except (UnsupportedAlgorithm, ValueError, TypeError) as exc:
            raise InternalError(f"AES-128-CBC failed: {exc}") from exc

        if written != len(memory) or tail:
            raise InternalError(
                f"AES-128-CBC produced {written + len(tail)} bytes "
                f"for a {len(memory)}-byte buffer")

        with memoryview(scratch) as view:
            memory[:] = view[:written]
    finally:
        if own_scratch:
            secure_zero(scratch)


# ── Ordering ─────────────────────────────────────────────────────

def swap_target(memory, block, memory_size):
    """Index the order entry of ``block`` is swapped with."""
    return _LE32.unpack_from(memory, block * BLOCK_SIZE)[0] % memory_size


def block_order(memory, memory_size):
    """Derive the order in which blocks are fed back into SHA-256."""
    order = list(range(memory_size))
    for i in range(memory_size):
        j = swap_target(memory, i, memory_size)
        order[i], order[j] = order[j], order[i]
    return order


def _digest_in_order(memory, order):
    h = hashlib.sha256()
    with memoryview(memory) as view:
        for idx in order:
            pos = idx * BLOCK_SIZE
            h.update(view[pos:pos + BLOCK_SIZE])
    return bytearray(h.digest())


# ── Main expansion ───────────────────────────────────────────────

def expand(seed, memory_size, iterations):
    """Run the memory-hard loop over a 32-byte seed.

    Args:
        seed: Accumulator digest (32 bytes).
        memory_size: Buffer size in 64-byte blocks (>= 1).
        iterations: Number of mixing passes (>= 1).

    Returns:
        The 32-byte Saph hash.
    """
    check_parameters(memory_size, iterations)
    if len(seed) != HASH_SIZE:
        raise InvalidArgumentError(
            f"seed must be {HASH_SIZE} bytes, got {len(seed)}")

    try:
        memory = bytearray(memory_size * BLOCK_SIZE)
        scratch = bytearray(len(memory) + _AES_BLOCK - 1)
    except (MemoryError, OverflowError) as exc:
        raise ResourceExhaustionError(
            f"cannot allocate {memory_size} blocks of {BLOCK_SIZE} bytes") from exc

    state = bytearray(seed)
    mlock(memory)
    try:
        for _ in range(iterations):
            mix(memory, state, scratch)
            order = block_order(memory, memory_size)
            secure_zero(state)
            state = _digest_in_order(memory, order)
        return bytes(state)
    finally:
        munlock(memory)
        secure_zero(memory)
        secure_zero(scratch)
        secure_zero(state)
