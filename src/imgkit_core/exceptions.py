"""Central exception hierarchy for imgkit-core."""
from __future__ import annotations


class ImgkitError(Exception):
    """Base exception for all imgkit-core failures"""


class InvalidArgument(ImgkitError, ValueError):
    """Raised when an argument is missing or of the wrong kind"""


class PreconditionViolation(InvalidArgument):
    """Raised when text that must not be blank is blank"""


class IntegerOverflow(ImgkitError, OverflowError):
    """Raised when a digit run does not fit the integer range"""


class ConfigError(ImgkitError, ValueError):
    """Raised when a configuration file cannot be validated"""


def require_text(value: object, name: str = "expression") -> str:
    """Return ``value`` unchanged if it is a ``str``, otherwise raise ``InvalidArgument``."""
    if value is None:
        raise InvalidArgument(f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidArgument(f"{name} must be str, not {type(value).__name__}")
    return value


__all__ = [
    "ImgkitError",
    "InvalidArgument",
    "PreconditionViolation",
    "IntegerOverflow",
    "ConfigError",
    "require_text",
]
