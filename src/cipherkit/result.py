from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Encryption:
    """IV and ciphertext produced by :func:`cipherkit.crypto.encrypt`.

    Both fields are standard base-64 strings and must be passed back together
    to :func:`cipherkit.crypto.decrypt`.
    """

    iv: str
    ciphertext: str

    def to_dict(self) -> Dict[str, str]:
        return {"iv": self.iv, "ciphertext": self.ciphertext}


def as_encryption(data: Mapping[str, Any]) -> Encryption:
    """Convert a mapping with ``iv`` and ``ciphertext`` keys to ``Encryption``."""

    return Encryption(iv=str(data["iv"]), ciphertext=str(data["ciphertext"]))
