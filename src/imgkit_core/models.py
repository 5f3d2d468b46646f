"""Shared value types used across imgkit-core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TextEncoding(str, Enum):
    """How fingerprint functions turn text into bytes."""

    LEGACY = "legacy"
    UTF8 = "utf-8"


class PathPlatform(str, Enum):
    """Which file-name rules decide the illegal character set."""

    AUTO = "auto"
    WINDOWS = "windows"
    POSIX = "posix"


@dataclass(frozen=True, slots=True)
class FingerprintAlgorithm:
    name: str
    hex_length: int
    legacy_encoding: str

    @property
    def digest_size(self) -> int:
        return self.hex_length // 2


__all__ = ["TextEncoding", "PathPlatform", "FingerprintAlgorithm"]
