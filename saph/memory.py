# Copyright (c) 2026 Signer — MIT License

"""Secure memory utilities (libsodium-backed).

The mixing buffer and intermediate digests are wiped with
``sodium_memzero`` once the computation is done, and the buffer is locked
in RAM while in use so it is not paged out to disk.
"""

from nacl._sodium import ffi as _ffi, lib as _lib


def _is_wipeable(buf):
    if isinstance(buf, memoryview):
        return not buf.readonly and len(buf) > 0
    return isinstance(buf, bytearray) and len(buf) > 0


def secure_zero(buf):
    """Securely wipe a mutable buffer (bytearray / memoryview)."""
    if _is_wipeable(buf):
        _lib.sodium_memzero(_ffi.from_buffer(buf), len(buf))


def mlock(buf):
    """Lock memory pages to prevent swapping to disk.

    Best effort: returns False when the OS refuses (e.g. RLIMIT_MEMLOCK).
    """
    if not _is_wipeable(buf):
        return False
    return _lib.sodium_mlock(_ffi.from_buffer(buf), len(buf)) == 0


def munlock(buf):
    """Unlock memory pages (also zeros the region)."""
    if _is_wipeable(buf):
        _lib.sodium_munlock(_ffi.from_buffer(buf), len(buf))
