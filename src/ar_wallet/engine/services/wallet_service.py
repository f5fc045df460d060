"""Wallet service — address derivation and per-address gateway lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ar_wallet.wallet.keys import owner_to_address

if TYPE_CHECKING:
    from ar_wallet.chain.gateway.client import GatewayClient
    from ar_wallet.wallet.keys import JWK


class WalletService:
    """Resolves wallet addresses, anchors and balances."""

    def __init__(self, gateway: GatewayClient) -> None:
        self._gateway = gateway

    async def jwk_to_address(self, jwk: JWK) -> str:
        """Derive the wallet address of *jwk* (no network access)."""
        return owner_to_address(jwk.n)

    async def get_last_transaction_id(self, address: str) -> str:
        """Anchor reference for the next transaction sent from *address*."""
        return await self._gateway.get_last_tx(address)

    async def get_balance(self, address: str) -> str:
        """Balance of *address* in winston."""
        return await self._gateway.get_balance(address)
