"""Gateway — HTTP client for an Arweave node or gateway."""

from ar_wallet.chain.gateway.client import GatewayClient
from ar_wallet.chain.gateway.models import NetworkInfo

__all__ = ["GatewayClient", "NetworkInfo"]
