"""Top-level package for ``cipherkit``.

Typical use::

    import cipherkit

    salt = cipherkit.salt()
    digest = cipherkit.hash("plaintext", salt)

    key = cipherkit.salt()
    encryption = cipherkit.encrypt("plaintext", key)
    plaintext = cipherkit.decrypt(encryption.ciphertext, encryption.iv, key)

Store the salt next to the hash; it is needed to recompute the hash later.
"""

from importlib import import_module
from typing import TYPE_CHECKING

from .errors import (
    AuthenticationFailure,
    CipherkitError,
    CryptoEnvironmentError,
    InvalidEncoding,
    InvalidKeyMaterial,
)

if TYPE_CHECKING:  # pragma: no cover
    from .crypto import decrypt, decrypt_async, encrypt, encrypt_async, hash, hash_async, salt
    from .result import Encryption

__all__ = [
    "__version__",
    "salt",
    "hash",
    "encrypt",
    "decrypt",
    "hash_async",
    "encrypt_async",
    "decrypt_async",
    "Encryption",
    "CipherkitError",
    "InvalidEncoding",
    "InvalidKeyMaterial",
    "AuthenticationFailure",
    "CryptoEnvironmentError",
]

__version__ = "1.0.0"

_ATTR_MAP = {
    "salt": ("cipherkit.crypto", "salt"),
    "hash": ("cipherkit.crypto", "hash"),
    "encrypt": ("cipherkit.crypto", "encrypt"),
    "decrypt": ("cipherkit.crypto", "decrypt"),
    "hash_async": ("cipherkit.crypto", "hash_async"),
    "encrypt_async": ("cipherkit.crypto", "encrypt_async"),
    "decrypt_async": ("cipherkit.crypto", "decrypt_async"),
    "Encryption": ("cipherkit.result", "Encryption"),
}


def __getattr__(name: str):
    if name in _ATTR_MAP:
        module_name, attr = _ATTR_MAP[name]
        module = import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
