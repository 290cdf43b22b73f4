"""File integrity checks by digest comparison."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable

from .streebog import Streebog

log = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "streebog256"
_CHUNK_SIZE = 1 << 16

_ALGORITHMS: dict[str, Callable[[], object]] = {
    "streebog256": lambda: Streebog(32),
    "streebog512": lambda: Streebog(64),
    "md5": hashlib.md5,
}


class IntegrityError(Exception):
    """Raised when a file's digest differs from the expected one."""


def _new_hash(algorithm: str):
    try:
        factory = _ALGORITHMS[algorithm]
    except KeyError:
        known = ", ".join(sorted(_ALGORITHMS))
        raise ValueError(f"unknown algorithm {algorithm!r}; expected one of {known}") from None
    return factory()


def file_digest(path, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Return the digest of the file at ``path``."""
    h = _new_hash(algorithm)
    with open(path, "rb") as stream:
        for chunk in iter(lambda: stream.read(_CHUNK_SIZE), b""):
            h.update(chunk)
    return h.digest()


def validate_file(path, expected=None, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Hash the file at ``path`` and return the digest.

    With ``expected`` given, raise IntegrityError unless the digest matches it.
    """
    digest = file_digest(path, algorithm)
    if expected is None:
        log.info("Program gets the hash in the buffer.")
        return digest
    if bytes(expected) != digest:
        raise IntegrityError("The integrity of the file has been violated!")
    log.info("File is correct.")
    return digest