"""Chain — Arweave gateway integration."""

from ar_wallet.chain.gateway.client import GatewayClient
from ar_wallet.chain.gateway.models import NetworkInfo

__all__ = ["GatewayClient", "NetworkInfo"]
