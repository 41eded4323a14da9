"""Hashing, salting and symmetric encryption helpers.

The algorithms are fixed:

* ``hash`` derives 512 bits with PBKDF2-HMAC-SHA512 over 1000 iterations.
  Note: 512 bits = 64 bytes = 88 base-64 characters.
* ``salt`` returns 64 random bytes.
* ``encrypt``/``decrypt`` use AES-256-GCM keyed with the SHA-256 digest of the
  secret and a random 64-byte IV.  Note: 256 bits = 32 bytes = 44 base-64
  characters.

All byte values are exchanged as standard base-64 strings.
"""

from __future__ import annotations

import asyncio
import logging
import os

from cryptography.exceptions import InvalidTag, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from .encoding import (
    b64decode,
    b64encode,
    decode_text,
    encode_text,
    encode_text_lenient,
)
from .errors import (
    AuthenticationFailure,
    CryptoEnvironmentError,
    InvalidKeyMaterial,
)
from .result import Encryption

__all__ = [
    "SALT_BYTES",
    "IV_BYTES",
    "HASH_BYTES",
    "HASH_ITERATIONS",
    "salt",
    "hash",
    "encrypt",
    "decrypt",
    "hash_async",
    "encrypt_async",
    "decrypt_async",
]

SALT_BYTES = 64
IV_BYTES = 64
HASH_BYTES = 64
# Kept low for compatibility with hashes stored by earlier releases.
HASH_ITERATIONS = 1000
# IV lengths AESGCM accepts.
_MIN_IV_BYTES = 8
_MAX_IV_BYTES = 128


def _random_bytes(size: int, operation: str) -> bytes:
    try:
        return os.urandom(size)
    except (NotImplementedError, OSError) as exc:
        logging.error("Secure random source unavailable during %s", operation)
        raise CryptoEnvironmentError(
            f"Secure random source unavailable: {exc}", operation=operation
        ) from exc


def _secret_key(secret: str) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(encode_text_lenient(secret))
    return digest.finalize()


def _aead(secret: str, operation: str) -> AESGCM:
    try:
        return AESGCM(_secret_key(secret))
    except UnsupportedAlgorithm as exc:
        raise CryptoEnvironmentError(str(exc), operation=operation) from exc


def salt() -> str:
    """Generate a random cryptographic salt as a base-64 string."""
    return b64encode(_random_bytes(SALT_BYTES, "salt"))


def hash(text: str, salt: str) -> str:
    """Calculate the PBKDF2-HMAC-SHA512 hash of ``text`` with ``salt``.

    Parameters
    ----------
    text:
        The text to hash.  Must be non-empty.
    salt:
        Base-64 encoded salt, usually produced by :func:`salt`.

    Returns
    -------
    str
        The 64-byte derived value as a base-64 string.

    Raises
    ------
    InvalidKeyMaterial
        If ``text`` is empty or cannot be encoded.
    InvalidEncoding
        If ``salt`` is not valid base-64.
    """

    if not isinstance(text, str) or not text:
        raise InvalidKeyMaterial("Text to hash must be a non-empty string", operation="hash")
    try:
        key_material = encode_text(text)
    except UnicodeEncodeError as exc:
        raise InvalidKeyMaterial(
            "Text to hash cannot be encoded", operation="hash"
        ) from exc

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA512(),
        length=HASH_BYTES,
        salt=b64decode(salt),
        iterations=HASH_ITERATIONS,
    )
    try:
        derived = kdf.derive(key_material)
    except UnsupportedAlgorithm as exc:
        raise CryptoEnvironmentError(str(exc), operation="hash") from exc
    return b64encode(derived)


def encrypt(plaintext: str, secret: str) -> Encryption:
    """Encrypt ``plaintext`` with a key derived from ``secret``.

    A fresh IV is generated on every call, so encrypting the same plaintext
    twice gives different results.  Lone surrogates in either argument are
    encoded as U+FFFD, so any ``str`` is accepted.
    """

    iv = _random_bytes(IV_BYTES, "encrypt")
    aead = _aead(secret, "encrypt")
    ciphertext = aead.encrypt(iv, encode_text_lenient(plaintext), None)
    return Encryption(iv=b64encode(iv), ciphertext=b64encode(ciphertext))


def decrypt(ciphertext: str, iv: str, secret: str) -> str:
    """Decrypt ``ciphertext`` produced by :func:`encrypt`.

    Raises :class:`AuthenticationFailure` when the secret, the IV or the
    ciphertext do not match what was encrypted.
    """

    data = b64decode(ciphertext)
    nonce = b64decode(iv)
    aead = _aead(secret, "decrypt")
    if not _MIN_IV_BYTES <= len(nonce) <= _MAX_IV_BYTES:
        logging.warning("Rejected IV of %d bytes during decrypt", len(nonce))
        raise AuthenticationFailure(
            "Ciphertext could not be authenticated: unusable IV length",
            operation="decrypt",
        )
    try:
        plaintext = aead.decrypt(nonce, data, None)
    except InvalidTag as exc:
        logging.warning("Authentication tag did not verify during decrypt")
        raise AuthenticationFailure(
            "Ciphertext could not be authenticated", operation="decrypt"
        ) from exc
    return decode_text(plaintext)


async def hash_async(text: str, salt: str) -> str:
    """Asynchronously compute :func:`hash` without blocking the event loop."""

    return await asyncio.to_thread(hash, text, salt)


async def encrypt_async(plaintext: str, secret: str) -> Encryption:
    """Asynchronously run :func:`encrypt` in a worker thread."""

    return await asyncio.to_thread(encrypt, plaintext, secret)


async def decrypt_async(ciphertext: str, iv: str, secret: str) -> str:
    """Asynchronously run :func:`decrypt` in a worker thread."""

    return await asyncio.to_thread(decrypt, ciphertext, iv, secret)
