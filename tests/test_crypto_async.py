import asyncio

import pytest

from cipherkit import crypto
from cipherkit.errors import AuthenticationFailure


def test_hash_async_matches_sync():
    salt = crypto.salt()
    result = asyncio.run(crypto.hash_async("hello", salt))
    assert result == crypto.hash("hello", salt)


def test_encrypt_decrypt_async_round_trip():
    async def run():
        encryption = await crypto.encrypt_async("secret message", "key123")
        return await crypto.decrypt_async(encryption.ciphertext, encryption.iv, "key123")

    assert asyncio.run(run()) == "secret message"


def test_concurrent_calls_are_independent():
    async def run():
        encryptions = await asyncio.gather(
            *(crypto.encrypt_async(f"message {i}", f"key {i}") for i in range(10))
        )
        return await asyncio.gather(
            *(
                crypto.decrypt_async(e.ciphertext, e.iv, f"key {i}")
                for i, e in enumerate(encryptions)
            )
        )

    assert asyncio.run(run()) == [f"message {i}" for i in range(10)]


def test_decrypt_async_propagates_authentication_failure():
    encryption = crypto.encrypt("secret message", "key123")
    with pytest.raises(AuthenticationFailure):
        asyncio.run(crypto.decrypt_async(encryption.ciphertext, encryption.iv, "wrongkey"))
