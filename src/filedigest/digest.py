"""SHA-2 file digests in blocking and suspending forms.

Every entry point runs the same sequence: validate the path, read the
whole file into memory, hash it once, and return the lowercase hex digest.
The blocking form does this on the calling thread; the suspending form
moves the filesystem work onto a worker thread via :func:`asyncio.to_thread`
and hashes the buffer once the read has completed.
"""

from __future__ import annotations

import asyncio
import errno
import hashlib
import logging
from enum import Enum
from pathlib import Path
from typing import Protocol

from filedigest.util.paths import PathLike, as_path

logger = logging.getLogger(__name__)

INVALID_PATH_MESSAGE = "Invalid path: must be an existing and accessible file"


class NotAFileError(OSError):
    """Raised when a path exists but is not a regular file."""


class HashAccumulator(Protocol):
    """Incremental hash object as returned by :func:`hashlib.new`."""

    def update(self, data: bytes, /) -> None: ...

    def hexdigest(self) -> str: ...


class Algorithm(str, Enum):
    """Supported SHA-2 variants."""

    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return _DIGEST_SIZES[self]

    def new(self) -> HashAccumulator:
        """Return a fresh hash accumulator."""
        return hashlib.new(self.value)

    @classmethod
    def parse(cls, value: "Algorithm | str") -> "Algorithm":
        """Accept a member or a name such as ``"SHA-256"`` / ``"sha256"``."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "").replace("_", "")
        try:
            return cls(normalized)
        except ValueError:
            supported = ", ".join(member.value for member in cls)
            raise ValueError(f"Unsupported algorithm {value!r}; expected one of: {supported}") from None


_DIGEST_SIZES = {
    Algorithm.SHA224: 28,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
}


def _validate(path: Path) -> None:
    # Checked before any read; a file removed afterwards surfaces from the read.
    if path.is_file():
        return
    if path.exists():
        raise NotAFileError(errno.EINVAL, INVALID_PATH_MESSAGE, str(path))
    raise FileNotFoundError(errno.ENOENT, INVALID_PATH_MESSAGE, str(path))


def _hexdigest(algorithm: Algorithm, data: bytes) -> str:
    hasher = algorithm.new()
    hasher.update(data)
    return hasher.hexdigest()


def hash_file(path: PathLike, algorithm: Algorithm | str = Algorithm.SHA256) -> str:
    """Return the lowercase hex digest of the file at `path`.

    Raises ``FileNotFoundError`` when nothing exists at `path` and
    :class:`NotAFileError` when it exists but is not a regular file. Errors
    raised by the read itself propagate unchanged.

    Only a missing entry is reported as ``FileNotFoundError`` by the check.
    Other failures of the check itself, such as ``PermissionError`` for an
    unsearchable parent directory or ``OSError`` with ``ENAMETOOLONG``,
    propagate as raised by :meth:`Path.is_file`.
    """
    algo = Algorithm.parse(algorithm)
    resolved = as_path(path)
    _validate(resolved)
    digest = _hexdigest(algo, resolved.read_bytes())
    logger.debug("Hashed %s with %s", resolved, algo.value)
    return digest


async def hash_file_async(path: PathLike, algorithm: Algorithm | str = Algorithm.SHA256) -> str:
    """Suspending counterpart of :func:`hash_file` with identical outcomes."""
    algo = Algorithm.parse(algorithm)
    resolved = as_path(path)
    await asyncio.to_thread(_validate, resolved)
    data = await asyncio.to_thread(resolved.read_bytes)
    digest = _hexdigest(algo, data)
    logger.debug("Hashed %s with %s", resolved, algo.value)
    return digest


def sha224(path: PathLike) -> str:
    """Hash with the SHA-224 algorithm."""
    return hash_file(path, Algorithm.SHA224)


def sha256(path: PathLike) -> str:
    """Hash with the SHA-256 algorithm."""
    return hash_file(path, Algorithm.SHA256)


def sha384(path: PathLike) -> str:
    """Hash with the SHA-384 algorithm."""
    return hash_file(path, Algorithm.SHA384)


def sha512(path: PathLike) -> str:
    """Hash with the SHA-512 algorithm."""
    return hash_file(path, Algorithm.SHA512)


async def sha224_async(path: PathLike) -> str:
    return await hash_file_async(path, Algorithm.SHA224)


async def sha256_async(path: PathLike) -> str:
    return await hash_file_async(path, Algorithm.SHA256)


async def sha384_async(path: PathLike) -> str:
    return await hash_file_async(path, Algorithm.SHA384)


async def sha512_async(path: PathLike) -> str:
    return await hash_file_async(path, Algorithm.SHA512)


__all__ = [
    "Algorithm",
    "HashAccumulator",
    "INVALID_PATH_MESSAGE",
    "NotAFileError",
    "hash_file",
    "hash_file_async",
    "sha224",
    "sha224_async",
    "sha256",
    "sha256_async",
    "sha384",
    "sha384_async",
    "sha512",
    "sha512_async",
]
