"""Content fingerprints of text.

The legacy encoding keeps byte parity with fingerprints produced by earlier
releases: MD5 hashes UTF-16LE code units, the SHA family hashes 7-bit ASCII in
which every code unit above 127 becomes ``?``. ``TextEncoding.UTF8`` hashes the
UTF-8 bytes for every algorithm instead.
"""
from __future__ import annotations

import hashlib
from typing import Dict

import regex

from ..config import get_config
from ..exceptions import InvalidArgument, require_text
from ..models import FingerprintAlgorithm, TextEncoding

_ASCII_REPLACEMENT = ord("?")

_LONE_SURROGATE = regex.compile(r"[\ud800-\udbff](?![\udc00-\udfff])|(?<![\ud800-\udbff])[\udc00-\udfff]")

MD5 = FingerprintAlgorithm(name="md5", hex_length=32, legacy_encoding="utf-16-le")
SHA1 = FingerprintAlgorithm(name="sha1", hex_length=40, legacy_encoding="ascii")
SHA256 = FingerprintAlgorithm(name="sha256", hex_length=64, legacy_encoding="ascii")
SHA512 = FingerprintAlgorithm(name="sha512", hex_length=128, legacy_encoding="ascii")

ALGORITHMS: Dict[str, FingerprintAlgorithm] = {algo.name: algo for algo in (MD5, SHA1, SHA256, SHA512)}


def to_ascii_bytes(text: str) -> bytes:
    """Encode ``text`` as ASCII, one ``?`` per UTF-16 code unit above 127."""
    buffer = bytearray()
    for char in text:
        point = ord(char)
        if point < 0x80:
            buffer.append(point)
        elif point > 0xFFFF:
            # surrogate pair
            buffer += bytes((_ASCII_REPLACEMENT, _ASCII_REPLACEMENT))
        else:
            buffer.append(_ASCII_REPLACEMENT)
    return bytes(buffer)


def well_formed(text: str) -> str:
    """Replace unpaired surrogates with U+FFFD and join surrogate pairs into one character."""
    scrubbed = _LONE_SURROGATE.sub("\ufffd", text)
    return scrubbed.encode("utf-16-le", errors="surrogatepass").decode("utf-16-le")


def to_utf16_bytes(text: str) -> bytes:
    """Encode ``text`` as little-endian UTF-16 without a byte-order mark.

    An unpaired surrogate becomes U+FFFD (``FD FF``).
    """
    return well_formed(text).encode("utf-16-le")


def _encode(text: str, algorithm: FingerprintAlgorithm, encoding: TextEncoding) -> bytes:
    if encoding is TextEncoding.UTF8:
        return well_formed(text).encode("utf-8")
    if algorithm.legacy_encoding == "utf-16-le":
        return to_utf16_bytes(text)
    return to_ascii_bytes(text)


def _resolve_algorithm(algorithm: str | FingerprintAlgorithm) -> FingerprintAlgorithm:
    if isinstance(algorithm, FingerprintAlgorithm):
        return algorithm
    if not isinstance(algorithm, str):
        raise InvalidArgument(f"algorithm must be a name or FingerprintAlgorithm, not {type(algorithm).__name__}")
    try:
        return ALGORITHMS[algorithm.lower()]
    except KeyError:
        supported = ", ".join(sorted(ALGORITHMS))
        raise InvalidArgument(f"Unknown fingerprint algorithm '{algorithm}' (supported: {supported})") from None


def _resolve_encoding(encoding: TextEncoding | str | None) -> TextEncoding:
    if encoding is None:
        return get_config().fingerprint.encoding
    try:
        return TextEncoding(encoding)
    except ValueError:
        raise InvalidArgument(f"Unknown text encoding '{encoding}'") from None


def fingerprint(
    expression: str,
    algorithm: str | FingerprintAlgorithm,
    *,
    encoding: TextEncoding | str | None = None,
) -> str:
    """Return the lowercase hex digest of ``expression`` under ``algorithm``.

    Parameters
    ----------
    expression:
        Text to fingerprint. Empty text is allowed.
    algorithm:
        ``"md5"``, ``"sha1"``, ``"sha256"``, ``"sha512"`` or a
        :class:`FingerprintAlgorithm` from :data:`ALGORITHMS`.
    encoding:
        Overrides ``fingerprint.encoding`` from the active configuration.

    Raises
    ------
    InvalidArgument
        If ``expression`` is not text, or the algorithm is unknown or does not
        match its declared length.
    """

    text = require_text(expression)
    algo = _resolve_algorithm(algorithm)
    selected = _resolve_encoding(encoding)
    try:
        digest = hashlib.new(algo.name, _encode(text, algo, selected), usedforsecurity=False)
    except ValueError:
        raise InvalidArgument(f"Unsupported hash algorithm '{algo.name}'") from None
    if digest.digest_size != algo.digest_size:
        raise InvalidArgument(
            f"{algo.name} produces {digest.digest_size}-byte digests, not {algo.digest_size}"
        )
    return digest.hexdigest()


def to_md5_fingerprint(expression: str, *, encoding: TextEncoding | str | None = None) -> str:
    """128-bit fingerprint; 32 hex characters."""
    return fingerprint(expression, MD5, encoding=encoding)


def to_sha1_fingerprint(expression: str, *, encoding: TextEncoding | str | None = None) -> str:
    """160-bit fingerprint; 40 hex characters."""
    return fingerprint(expression, SHA1, encoding=encoding)


def to_sha256_fingerprint(expression: str, *, encoding: TextEncoding | str | None = None) -> str:
    """256-bit fingerprint; 64 hex characters."""
    return fingerprint(expression, SHA256, encoding=encoding)


def to_sha512_fingerprint(expression: str, *, encoding: TextEncoding | str | None = None) -> str:
    """512-bit fingerprint; 128 hex characters."""
    return fingerprint(expression, SHA512, encoding=encoding)


__all__ = [
    "ALGORITHMS",
    "MD5",
    "SHA1",
    "SHA256",
    "SHA512",
    "fingerprint",
    "to_ascii_bytes",
    "well_formed",
    "to_utf16_bytes",
    "to_md5_fingerprint",
    "to_sha1_fingerprint",
    "to_sha256_fingerprint",
    "to_sha512_fingerprint",
]
