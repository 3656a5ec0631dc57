"""SHA-2 digests of files, in blocking and asyncio forms."""

from .digest import (
    Algorithm,
    NotAFileError,
    hash_file,
    hash_file_async,
    sha224,
    sha224_async,
    sha256,
    sha256_async,
    sha384,
    sha384_async,
    sha512,
    sha512_async,
)

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
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
