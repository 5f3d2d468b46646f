"""Path name validation helpers."""
from __future__ import annotations

import sys
from typing import FrozenSet, Iterable

import regex

from ..config import get_config
from ..exceptions import InvalidArgument, require_text
from ..models import PathPlatform

VIRTUAL_PATH_PREFIX = "~/"

_CONTROL_CHARS = frozenset(chr(code) for code in range(0x20))

WINDOWS_INVALID_FILE_NAME_CHARS: FrozenSet[str] = frozenset('"<>|:*?\\/') | _CONTROL_CHARS
POSIX_INVALID_FILE_NAME_CHARS: FrozenSet[str] = frozenset("\x00/")


def invalid_file_name_chars(platform: PathPlatform | str = PathPlatform.AUTO) -> FrozenSet[str]:
    """Return the characters ``platform`` forbids in a file name.

    ``AUTO`` picks the Windows rules on ``win32`` and the POSIX rules elsewhere.
    """

    try:
        selected = PathPlatform(platform)
    except ValueError:
        raise InvalidArgument(f"Unknown path platform '{platform}'") from None
    if selected is PathPlatform.AUTO:
        selected = PathPlatform.WINDOWS if sys.platform == "win32" else PathPlatform.POSIX
    if selected is PathPlatform.WINDOWS:
        return WINDOWS_INVALID_FILE_NAME_CHARS
    return POSIX_INVALID_FILE_NAME_CHARS


def configured_invalid_chars() -> FrozenSet[str]:
    """Illegal characters from the active configuration.

    An explicit ``paths.invalid_chars`` wins over ``paths.platform``.
    """
    settings = get_config().paths
    if settings.invalid_chars is not None:
        return frozenset(settings.invalid_chars)
    return invalid_file_name_chars(settings.platform)


def _invalid_char_pattern(chars: Iterable[str]) -> regex.Pattern[str] | None:
    ordered = "".join(sorted(set(chars)))
    if not ordered:
        return None
    return regex.compile("[" + regex.escape(ordered) + "]")


def is_valid_path_name(expression: str, *, invalid_chars: Iterable[str] | None = None) -> bool:
    """Return ``True`` if ``expression`` contains no character illegal in a file name.

    ``invalid_chars`` replaces the configured set for this call. Every character of
    a multi-character string counts individually.
    """

    text = require_text(expression)
    chars = configured_invalid_chars() if invalid_chars is None else invalid_chars
    pattern = _invalid_char_pattern(chars)
    if pattern is None:
        return True
    return pattern.search(text) is None


def is_valid_virtual_path_name(expression: str, *, invalid_chars: Iterable[str] | None = None) -> bool:
    """Return ``True`` if ``expression`` is ``~/`` followed by a valid path name.

    Anything without the prefix is simply invalid; it is never an error.
    """

    text = require_text(expression)
    if not text.startswith(VIRTUAL_PATH_PREFIX):
        return False
    return is_valid_path_name(text[len(VIRTUAL_PATH_PREFIX):], invalid_chars=invalid_chars)


__all__ = [
    "VIRTUAL_PATH_PREFIX",
    "WINDOWS_INVALID_FILE_NAME_CHARS",
    "POSIX_INVALID_FILE_NAME_CHARS",
    "invalid_file_name_chars",
    "configured_invalid_chars",
    "is_valid_path_name",
    "is_valid_virtual_path_name",
]
