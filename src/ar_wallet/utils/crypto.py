"""Cryptographic helpers — hashing and symmetric encryption.

Encryption matches the Arweave client drivers: a 256-bit AES key is derived
from the supplied key material with PBKDF2-HMAC-SHA256, the payload is
PKCS7-padded and encrypted with AES-CBC, and the random 16-byte IV is
prepended to the ciphertext.
"""

from __future__ import annotations

import asyncio
import hashlib
import os

from cryptography.hazmat.primitives import hashes, padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from ar_wallet.config.settings import CryptoConfig

_IV_SIZE = 16
_KEY_SIZE = 32
_BLOCK_BITS = 128


def sha256(data: bytes) -> bytes:
    """Single SHA-256 hash."""
    return hashlib.sha256(data).digest()


def _as_bytes(key: bytes | str) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


class CryptoDriver:
    """Hashing and AES-256-CBC encryption backed by ``cryptography``."""

    def __init__(self, config: CryptoConfig | None = None) -> None:
        self._config = config or CryptoConfig()

    def hash(self, data: bytes) -> bytes:
        """SHA-256 digest of *data*."""
        return sha256(data)

    def derive_key(self, key: bytes | str) -> bytes:
        """Stretch *key* into a 256-bit AES key with PBKDF2."""
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=_KEY_SIZE,
            salt=self._config.pbkdf2_salt.encode("utf-8"),
            iterations=self._config.pbkdf2_iterations,
        )
        return kdf.derive(_as_bytes(key))

    async def encrypt(self, data: bytes, key: bytes | str) -> bytes:
        """Encrypt *data* under *key*, returning ``iv || ciphertext``.

        Key derivation is CPU-bound, so it runs in a worker thread.
        """
        return await asyncio.to_thread(self.encrypt_sync, data, key)

    async def decrypt(self, encrypted: bytes, key: bytes | str) -> bytes:
        """Reverse :meth:`encrypt`."""
        return await asyncio.to_thread(self.decrypt_sync, encrypted, key)

    def encrypt_sync(self, data: bytes, key: bytes | str) -> bytes:
        """Blocking variant of :meth:`encrypt`."""
        iv = os.urandom(_IV_SIZE)
        padder = padding.PKCS7(_BLOCK_BITS).padder()
        padded = padder.update(data) + padder.finalize()
        encryptor = Cipher(algorithms.AES(self.derive_key(key)), modes.CBC(iv)).encryptor()
        return iv + encryptor.update(padded) + encryptor.finalize()

    def decrypt_sync(self, encrypted: bytes, key: bytes | str) -> bytes:
        """Blocking variant of :meth:`decrypt`.

        Raises:
            ValueError: If the buffer is too short or the padding is invalid
                (wrong key or corrupted ciphertext).
        """
        if len(encrypted) < 2 * _IV_SIZE:
            msg = "encrypted buffer is too short"
            raise ValueError(msg)
        iv, body = encrypted[:_IV_SIZE], encrypted[_IV_SIZE:]
        decryptor = Cipher(algorithms.AES(self.derive_key(key)), modes.CBC(iv)).decryptor()
        padded = decryptor.update(body) + decryptor.finalize()
        unpadder = padding.PKCS7(_BLOCK_BITS).unpadder()
        return unpadder.update(padded) + unpadder.finalize()
