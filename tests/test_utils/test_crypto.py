"""Tests for hashing and AES-CBC encryption."""

from __future__ import annotations

import hashlib

import pytest

from ar_wallet.config.settings import CryptoConfig
from ar_wallet.utils.crypto import CryptoDriver, sha256

_KEY = b"\x01" * 32


@pytest.fixture
def crypto() -> CryptoDriver:
    return CryptoDriver(CryptoConfig(pbkdf2_iterations=1000))


class TestHashing:
    def test_sha256(self) -> None:
        assert sha256(b"abc") == hashlib.sha256(b"abc").digest()

    def test_driver_hash(self, crypto: CryptoDriver) -> None:
        assert crypto.hash(b"abc") == sha256(b"abc")


class TestDeriveKey:
    def test_matches_pbkdf2(self, crypto: CryptoDriver) -> None:
        expected = hashlib.pbkdf2_hmac("sha256", _KEY, b"salt", 1000, dklen=32)
        assert crypto.derive_key(_KEY) == expected

    def test_string_key_is_utf8(self, crypto: CryptoDriver) -> None:
        assert crypto.derive_key("secret") == crypto.derive_key(b"secret")

    def test_salt_from_config(self) -> None:
        plain = CryptoDriver(CryptoConfig(pbkdf2_iterations=1000))
        salted = CryptoDriver(CryptoConfig(pbkdf2_iterations=1000, pbkdf2_salt="pepper"))
        assert plain.derive_key(_KEY) != salted.derive_key(_KEY)


class TestEncryption:
    async def test_round_trip(self, crypto: CryptoDriver) -> None:
        encrypted = await crypto.encrypt(b"top secret", _KEY)
        assert await crypto.decrypt(encrypted, _KEY) == b"top secret"

    async def test_layout(self, crypto: CryptoDriver) -> None:
        encrypted = await crypto.encrypt(b"x" * 16, _KEY)
        # 16-byte IV + 16 bytes of data + one full block of padding
        assert len(encrypted) == 48

    async def test_empty_payload(self, crypto: CryptoDriver) -> None:
        encrypted = await crypto.encrypt(b"", _KEY)
        assert len(encrypted) == 32
        assert await crypto.decrypt(encrypted, _KEY) == b""

    async def test_random_iv(self, crypto: CryptoDriver) -> None:
        first = await crypto.encrypt(b"same", _KEY)
        second = await crypto.encrypt(b"same", _KEY)
        assert first != second

    def test_sync_variants(self, crypto: CryptoDriver) -> None:
        encrypted = crypto.encrypt_sync(b"data", "passphrase")
        assert crypto.decrypt_sync(encrypted, "passphrase") == b"data"

    def test_decrypt_too_short(self, crypto: CryptoDriver) -> None:
        with pytest.raises(ValueError, match="too short"):
            crypto.decrypt_sync(b"\x00" * 16, _KEY)
