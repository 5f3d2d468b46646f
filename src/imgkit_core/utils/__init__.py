"""Utility exports."""
from .fingerprint import (
    fingerprint,
    to_md5_fingerprint,
    to_sha1_fingerprint,
    to_sha256_fingerprint,
    to_sha512_fingerprint,
)
from .numbers import iter_positive_integers, to_positive_integer_array
from .validation import invalid_file_name_chars, is_valid_path_name, is_valid_virtual_path_name

__all__ = [
    "fingerprint",
    "to_md5_fingerprint",
    "to_sha1_fingerprint",
    "to_sha256_fingerprint",
    "to_sha512_fingerprint",
    "iter_positive_integers",
    "to_positive_integer_array",
    "invalid_file_name_chars",
    "is_valid_path_name",
    "is_valid_virtual_path_name",
]
