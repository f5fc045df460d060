"""Silo URI resolution.

A silo URI has the form ``<name>.<exponent>``, e.g. ``bubble.7``. The name is
hashed ``2 ** exponent`` times with SHA-256; the first 15 bytes of the final
digest form the access key and the SHA-256 of bytes 16..30 is the encryption
key. Higher exponents make the name more expensive to brute force.
"""

from __future__ import annotations

import asyncio
import re
from typing import TYPE_CHECKING

from ar_wallet.errors.definitions import ErrInvalidSiloURI
from ar_wallet.silo.resource import SiloResource
from ar_wallet.utils.encoding import b64_encode, string_to_buffer

if TYPE_CHECKING:
    from ar_wallet.utils.crypto import CryptoDriver

_SILO_URI = re.compile(r"^([a-z0-9_-]+)\.([0-9]+)", re.IGNORECASE)


class SiloService:
    """Resolves silo URIs into :class:`SiloResource` objects."""

    def __init__(self, crypto: CryptoDriver) -> None:
        self._crypto = crypto

    async def parse_uri(self, silo_uri: str) -> SiloResource:
        """Derive the access and encryption keys for *silo_uri*.

        Raises:
            SiloError: If the URI is not ``<name>.<exponent>``.
        """
        match = _SILO_URI.match(silo_uri)
        if match is None:
            raise ErrInvalidSiloURI
        name, exponent = match.group(1), int(match.group(2))
        return await asyncio.to_thread(self._derive, silo_uri, name, 2**exponent)

    def _derive(self, silo_uri: str, name: str, iterations: int) -> SiloResource:
        digest = self._hash(string_to_buffer(name), iterations)
        access_key = b64_encode(digest[0:15])
        encryption_key = self._hash(digest[16:31], 1)
        return SiloResource(uri=silo_uri, access_key=access_key, encryption_key=encryption_key)

    def _hash(self, data: bytes, iterations: int) -> bytes:
        digest = self._crypto.hash(data)
        for _ in range(iterations - 1):
            digest = self._crypto.hash(digest)
        return digest
