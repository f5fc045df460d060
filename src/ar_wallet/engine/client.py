"""ARWalletEngine — central client owning the gateway, services and finalizer."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ar_wallet.chain.gateway.client import GatewayClient
    from ar_wallet.chain.gateway.models import NetworkInfo
    from ar_wallet.config.settings import AppConfig
    from ar_wallet.engine.models.draft import TransactionDraft
    from ar_wallet.engine.models.transaction import Transaction
    from ar_wallet.engine.services.draft_service import DraftFinalizer
    from ar_wallet.engine.services.transaction_service import TransactionService
    from ar_wallet.engine.services.wallet_service import WalletService
    from ar_wallet.metrics.collector import DraftMetrics
    from ar_wallet.silo.service import SiloService
    from ar_wallet.utils.crypto import CryptoDriver
    from ar_wallet.wallet.keys import JWK

logger = logging.getLogger(__name__)

# Error messages
_ERR_NOT_INITIALIZED = "Engine not initialized. Call initialize() first."


class ARWalletEngine:
    """Central engine that owns the gateway connection and all services.

    Usage::

        engine = ARWalletEngine(AppConfig())
        await engine.initialize()
        try:
            tx = await engine.create_transaction({"data": "hello"}, jwk)
        finally:
            await engine.close()
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize engine with configuration.

        Args:
            config: Application configuration with gateway and crypto settings.
        """
        self._config = config
        self._initialized = False

        self._gateway: GatewayClient | None = None
        self._crypto: CryptoDriver | None = None
        self._wallet_service: WalletService | None = None
        self._transaction_service: TransactionService | None = None
        self._silo_service: SiloService | None = None
        self._finalizer: DraftFinalizer | None = None
        self._metrics: DraftMetrics | None = None

    async def initialize(self) -> None:
        """Connect the gateway client and build the services.

        Raises:
            RuntimeError: If already initialized.
        """
        if self._initialized:
            msg = "Engine already initialized"
            raise RuntimeError(msg)

        from ar_wallet.chain.gateway.client import GatewayClient
        from ar_wallet.engine.services.draft_service import DraftFinalizer
        from ar_wallet.engine.services.transaction_service import TransactionService
        from ar_wallet.engine.services.wallet_service import WalletService
        from ar_wallet.silo.service import SiloService
        from ar_wallet.utils.crypto import CryptoDriver
        from ar_wallet.utils.encoding import B64UrlCodec

        self._gateway = GatewayClient(self._config.gateway)
        await self._gateway.connect()

        self._crypto = CryptoDriver(self._config.crypto)
        self._wallet_service = WalletService(self._gateway)
        self._transaction_service = TransactionService(self._gateway)
        self._silo_service = SiloService(self._crypto)

        if self._config.metrics.enabled:
            from ar_wallet.metrics.collector import DraftMetrics

            self._metrics = DraftMetrics()

        self._finalizer = DraftFinalizer(
            wallets=self._wallet_service,
            fees=self._transaction_service,
            crypto=self._crypto,
            silo=self._silo_service,
            codec=B64UrlCodec(),
            metrics=self._metrics,
        )

        self._initialized = True
        logger.info("Arweave engine initialized (gateway=%s)", self._config.gateway.url)

    async def close(self) -> None:
        """Close the gateway connection and drop the services.

        Can be called multiple times (idempotent).
        """
        if not self._initialized:
            return

        if self._gateway is not None:
            await self._gateway.close()
            self._gateway = None

        self._finalizer = None
        self._silo_service = None
        self._transaction_service = None
        self._wallet_service = None
        self._crypto = None
        self._metrics = None
        self._initialized = False
        logger.info("Arweave engine shut down")

    # ------------------------------------------------------------------
    # Draft creation
    # ------------------------------------------------------------------

    async def create_transaction(
        self,
        attributes: Mapping[str, Any] | TransactionDraft,
        jwk: JWK | Mapping[str, Any],
    ) -> Transaction:
        """Finalize a plain draft; see :meth:`DraftFinalizer.finalize`."""
        return await self.finalizer.finalize(attributes, jwk)

    async def create_silo_transaction(
        self,
        attributes: Mapping[str, Any] | TransactionDraft,
        jwk: JWK | Mapping[str, Any],
        silo_uri: str,
    ) -> Transaction:
        """Finalize a silo draft; see :meth:`DraftFinalizer.finalize_private`."""
        return await self.finalizer.finalize_private(attributes, jwk, silo_uri)

    # ------------------------------------------------------------------
    # Wallets
    # ------------------------------------------------------------------

    async def generate_key(self) -> JWK:
        """Generate a new RSA wallet key of the configured size."""
        from ar_wallet.wallet.keys import generate_jwk

        return await asyncio.to_thread(generate_jwk, self._config.crypto.key_size)

    async def get_balance(self, address: str) -> str:
        """Balance of *address* in winston."""
        return await self.wallet_service.get_balance(address)

    async def get_network_info(self) -> NetworkInfo:
        """Node and network status from the gateway."""
        return await self.gateway.get_info()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        """Whether :meth:`initialize` has completed."""
        return self._initialized

    @property
    def config(self) -> AppConfig:
        """The engine configuration."""
        return self._config

    @property
    def gateway(self) -> GatewayClient:
        """Get the gateway HTTP client.

        Raises:
            RuntimeError: If engine not initialized.
        """
        if self._gateway is None:
            raise RuntimeError(_ERR_NOT_INITIALIZED)
        return self._gateway

    @property
    def crypto(self) -> CryptoDriver:
        """Get the hashing and encryption driver."""
        if self._crypto is None:
            raise RuntimeError(_ERR_NOT_INITIALIZED)
        return self._crypto

    @property
    def wallet_service(self) -> WalletService:
        """Get the wallet service."""
        if self._wallet_service is None:
            raise RuntimeError(_ERR_NOT_INITIALIZED)
        return self._wallet_service

    @property
    def transaction_service(self) -> TransactionService:
        """Get the transaction service."""
        if self._transaction_service is None:
            raise RuntimeError(_ERR_NOT_INITIALIZED)
        return self._transaction_service

    @property
    def silo_service(self) -> SiloService:
        """Get the silo service."""
        if self._silo_service is None:
            raise RuntimeError(_ERR_NOT_INITIALIZED)
        return self._silo_service

    @property
    def finalizer(self) -> DraftFinalizer:
        """Get the draft finalizer."""
        if self._finalizer is None:
            raise RuntimeError(_ERR_NOT_INITIALIZED)
        return self._finalizer

    @property
    def metrics(self) -> DraftMetrics | None:
        """Get the draft metrics (None when metrics are disabled)."""
        return self._metrics
