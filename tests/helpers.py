from __future__ import annotations

import logging
import os
import unittest
from pathlib import Path

from filedigest.digest import Algorithm

FIXTURE_CONTENT = b"/target\n"

FIXTURE_DIGESTS: dict[Algorithm, str] = {
    Algorithm.SHA224: "e7f68a0e088b02bded91142bb43538b0338ead063a1bdf1d158ef174",
    Algorithm.SHA256: "44c92e3a70ad3307b7056871c2bdb096d8bfa9373f5bf06a79bb6324a20ff2fb",
    Algorithm.SHA384: (
        "16c6a6c5fb77fb778b0739b93005a54bf4d5d011ecfc151d1d28680df65829fb"
        "25e4f639d12ea5bd0d95fb15a02a9d46"
    ),
    Algorithm.SHA512: (
        "cce95db66253cee0b4543434b0a93382fdd876996f0783709144d7317cc1686b"
        "97f907a4f18da2bdf95461b140129eb93242a842b3eee0878973ac139482db54"
    ),
}

EMPTY_DIGESTS: dict[Algorithm, str] = {
    Algorithm.SHA224: "d14a028c2a3a2bc9476102bb288234c415a2b01f828ea62ac5b3e42f",
    Algorithm.SHA256: "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
    Algorithm.SHA384: (
        "38b060a751ac96384cd9327eb1b1e36a21fdb71114be07434c0cc7bf63f6e1da"
        "274edebfe76f65fbd51ad2f14898b95b"
    ),
    Algorithm.SHA512: (
        "cf83e1357eefb8bdf1542850d66d8007d620e4050b5715dc83f4a921d36ce9ce"
        "47d0d13c5d85f2b0ff8318d2877eec2f63b931bd47417a81a538327af927da3e"
    ),
}

HEX_CHARS = set("0123456789abcdef")


def write_fixture(root: Path, name: str = "fixture.txt", content: bytes = FIXTURE_CONTENT) -> Path:
    """Write `content` under `root` and return the file path."""

    dest = root / name
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(content)
    return dest


def reset_filedigest_logger() -> None:
    """Drop handlers so each test starts from an unconfigured logger."""

    logger = logging.getLogger("filedigest")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def symlink_or_skip(testcase: unittest.TestCase, link: Path, target: Path) -> Path:
    """Create `link` pointing at `target`, skipping where symlinks are unavailable."""

    try:
        os.symlink(target, link, target_is_directory=target.is_dir())
    except (OSError, NotImplementedError) as exc:
        testcase.skipTest(f"symlinks unavailable: {exc}")
    return link
