"""Transaction service — reward quotes from the gateway."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ar_wallet.chain.gateway.client import GatewayClient


class TransactionService:
    """Quotes transaction rewards."""

    def __init__(self, gateway: GatewayClient) -> None:
        self._gateway = gateway

    async def get_price(self, byte_length: int, target: str | None = None) -> str:
        """Minimum reward in winston for *byte_length* bytes sent to *target*.

        Args:
            byte_length: Payload size in bytes.
            target: Recipient address, if the transaction moves AR.

        Returns:
            Reward in winston as a decimal string.
        """
        return await self._gateway.get_price(byte_length, target)
