"""Collaborator contracts consumed by the draft finalizer.

Each protocol is satisfied by a default implementation in this package and
by the deterministic fakes used in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ar_wallet.wallet.keys import JWK


class AddressResolver(Protocol):
    """Maps keys to addresses and addresses to their anchor transaction."""

    async def jwk_to_address(self, jwk: JWK) -> str: ...
    async def get_last_transaction_id(self, address: str) -> str: ...


class FeeOracle(Protocol):
    """Quotes the minimum reward for a payload size and optional recipient."""

    async def get_price(self, byte_length: int, target: str | None = None) -> str: ...


class PayloadCodec(Protocol):
    """Encodes payload fields into their on-chain representation."""

    def encode_text(self, text: str) -> str: ...
    def encode_bytes(self, data: bytes) -> str: ...


class Encryptor(Protocol):
    """Symmetric encryption under a resource key."""

    async def encrypt(self, data: bytes, key: bytes) -> bytes: ...


class SiloResourceHandle(Protocol):
    """A resolved private-storage resource."""

    def get_encryption_key(self) -> bytes: ...


class SiloLocator(Protocol):
    """Resolves a silo URI into a resource handle."""

    async def parse_uri(self, silo_uri: str) -> SiloResourceHandle: ...
