"""String helpers for the image processing pipeline: fingerprints, integer scraping and path checks."""
from .exceptions import ConfigError, ImgkitError, IntegerOverflow, InvalidArgument, PreconditionViolation
from .models import FingerprintAlgorithm, PathPlatform, TextEncoding
from .utils import (
    fingerprint,
    invalid_file_name_chars,
    is_valid_path_name,
    is_valid_virtual_path_name,
    iter_positive_integers,
    to_md5_fingerprint,
    to_positive_integer_array,
    to_sha1_fingerprint,
    to_sha256_fingerprint,
    to_sha512_fingerprint,
)
from .version import __version__

__all__ = [
    "ConfigError",
    "ImgkitError",
    "IntegerOverflow",
    "InvalidArgument",
    "PreconditionViolation",
    "FingerprintAlgorithm",
    "PathPlatform",
    "TextEncoding",
    "fingerprint",
    "invalid_file_name_chars",
    "is_valid_path_name",
    "is_valid_virtual_path_name",
    "iter_positive_integers",
    "to_md5_fingerprint",
    "to_positive_integer_array",
    "to_sha1_fingerprint",
    "to_sha256_fingerprint",
    "to_sha512_fingerprint",
    "__version__",
]
