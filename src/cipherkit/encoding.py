"""Base-64 and text codecs shared by the cryptographic operations."""

from __future__ import annotations

import base64
import binascii

from .errors import InvalidEncoding

TEXT_ENCODING = "utf-8"


def b64encode(data: bytes) -> str:
    """Return the standard, padded base-64 representation of ``data``."""
    return base64.b64encode(data).decode("ascii")


def b64decode(text: str) -> bytes:
    """Decode standard base-64 ``text``.

    Decoding is strict: characters outside the standard alphabet, bad
    padding and non-zero padding bits raise :class:`InvalidEncoding` instead
    of being skipped, so every accepted value re-encodes to itself.
    """
    try:
        data = base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError, AttributeError) as exc:
        raise InvalidEncoding(f"Invalid base-64 value: {exc}") from exc
    if b64encode(data) != text:
        raise InvalidEncoding("Invalid base-64 value: non-canonical padding bits")
    return data


def encode_text(text: str) -> bytes:
    return text.encode(TEXT_ENCODING)


def encode_text_lenient(text: str) -> bytes:
    """Encode ``text`` as UTF-8, replacing lone surrogates with U+FFFD.

    Surrogate pairs stored as two code points are joined first.
    """
    units = text.encode("utf-16-le", "surrogatepass")
    return units.decode("utf-16-le", "replace").encode(TEXT_ENCODING)


def decode_text(data: bytes) -> str:
    try:
        return data.decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(f"Decrypted data is not valid {TEXT_ENCODING}") from exc
