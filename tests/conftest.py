"""Shared test fixtures for py-ar test suite."""

from __future__ import annotations

from typing import Any

import pytest

from ar_wallet.engine.services.draft_service import DraftFinalizer
from ar_wallet.silo.resource import SiloResource
from ar_wallet.utils.encoding import b64url_encode
from ar_wallet.wallet.keys import JWK, owner_to_address

# Deterministic 4096-bit-sized modulus; never used for real signing.
_MODULUS = b64url_encode(bytes(range(256)) * 2)
_ANCHOR = "anchor-tx-id"


# ---------------------------------------------------------------------------
# Collaborator fakes
# ---------------------------------------------------------------------------


class FakeWallets:
    def __init__(self, log: list[tuple[Any, ...]], anchor: str = _ANCHOR) -> None:
        self._log = log
        self._anchor = anchor
        self.error: Exception | None = None

    async def jwk_to_address(self, jwk: JWK) -> str:
        self._log.append(("jwk_to_address", jwk.n))
        return owner_to_address(jwk.n)

    async def get_last_transaction_id(self, address: str) -> str:
        self._log.append(("get_last_transaction_id", address))
        if self.error is not None:
            raise self.error
        return self._anchor


class FakeFees:
    """Reward = 1000 + 10 per byte, plus 500 when sending to a target."""

    def __init__(self, log: list[tuple[Any, ...]]) -> None:
        self._log = log
        self.error: Exception | None = None

    async def get_price(self, byte_length: int, target: str | None = None) -> str:
        self._log.append(("get_price", byte_length, target))
        if self.error is not None:
            raise self.error
        return str(1000 + 10 * byte_length + (500 if target else 0))


class FakeCrypto:
    """Reversible XOR 'cipher' tagged with a prefix."""

    def __init__(self, log: list[tuple[Any, ...]]) -> None:
        self._log = log

    async def encrypt(self, data: bytes, key: bytes) -> bytes:
        self._log.append(("encrypt", data, key))
        return b"enc:" + bytes(b ^ key[0] for b in data)

    @staticmethod
    def decrypt(data: bytes, key: bytes) -> bytes:
        assert data.startswith(b"enc:")
        return bytes(b ^ key[0] for b in data[4:])


class FakeSilo:
    KEY = b"\x5a" * 32

    def __init__(self, log: list[tuple[Any, ...]]) -> None:
        self._log = log
        self.error: Exception | None = None

    async def parse_uri(self, silo_uri: str) -> SiloResource:
        self._log.append(("parse_uri", silo_uri))
        if self.error is not None:
            raise self.error
        return SiloResource(uri=silo_uri, access_key="access", encryption_key=self.KEY)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def app_config():
    """Provide a test AppConfig with safe defaults."""
    from ar_wallet.config.settings import AppConfig, CryptoConfig, GatewayConfig

    return AppConfig(
        gateway=GatewayConfig(url="https://gateway.test", timeout=5.0),
        crypto=CryptoConfig(pbkdf2_iterations=1000),
    )


@pytest.fixture
def jwk() -> JWK:
    return JWK(n=_MODULUS)


@pytest.fixture
def address(jwk: JWK) -> str:
    """Wallet address of the test key."""
    return owner_to_address(jwk.n)


@pytest.fixture
def anchor() -> str:
    """Anchor returned by the fake wallet lookups."""
    return _ANCHOR


@pytest.fixture
def silo_key() -> bytes:
    """Encryption key of every resource the fake silo resolves."""
    return FakeSilo.KEY


@pytest.fixture
def call_log() -> list[tuple[Any, ...]]:
    """Ordered record of every collaborator call made during a test."""
    return []


@pytest.fixture
def fakes(call_log: list[tuple[Any, ...]]) -> dict[str, Any]:
    return {
        "wallets": FakeWallets(call_log),
        "fees": FakeFees(call_log),
        "crypto": FakeCrypto(call_log),
        "silo": FakeSilo(call_log),
    }


@pytest.fixture
def finalizer(fakes: dict[str, Any]) -> DraftFinalizer:
    return DraftFinalizer(**fakes)
