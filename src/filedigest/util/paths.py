"""Path utilities shared by the digest entry points."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def as_path(value: PathLike) -> Path:
    """Return `value` as a :class:`Path` without touching the filesystem."""
    if isinstance(value, Path):
        return value
    if isinstance(value, (str, bytes, os.PathLike)):
        return Path(os.fsdecode(value))
    raise TypeError(f"Expected a path-like value, got {type(value).__name__}")


__all__ = ["PathLike", "as_path"]
