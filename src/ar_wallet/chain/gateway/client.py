"""Arweave gateway HTTP client — prices, anchors, balances, node info.

Async HTTP client for the Arweave node API:
- GET /price/<bytes>[/<target>]      — minimum reward in winston
- GET /wallet/<address>/last_tx      — last transaction id (anchor)
- GET /wallet/<address>/balance     — balance in winston
- GET /info                          — node and network status
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ar_wallet.chain.gateway.models import NetworkInfo
from ar_wallet.errors.ar_errors import GatewayError

if TYPE_CHECKING:
    from ar_wallet.config.settings import GatewayConfig

logger = logging.getLogger(__name__)


class GatewayClient:
    """Async HTTP client for an Arweave gateway.

    Usage::

        gateway = GatewayClient(config)
        await gateway.connect()
        try:
            reward = await gateway.get_price(1024)
            anchor = await gateway.get_last_tx("addr...")
        finally:
            await gateway.close()
    """

    def __init__(self, config: GatewayConfig) -> None:
        """Initialize the gateway client.

        Args:
            config: Gateway configuration (url, timeout).
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def connect(self) -> None:
        """Create the underlying HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self._config.url.rstrip("/"),
            timeout=self._config.timeout,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def is_connected(self) -> bool:
        """Check if the HTTP client is active."""
        return self._client is not None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get_price(self, byte_length: int, target: str | None = None) -> str:
        """Get the minimum reward for storing *byte_length* bytes.

        Args:
            byte_length: Payload size in bytes.
            target: Recipient address; sending to a new wallet costs more.

        Returns:
            Reward in winston, as a decimal string.

        Raises:
            GatewayError: On HTTP or API errors.
        """
        path = f"/price/{byte_length}/{target}" if target else f"/price/{byte_length}"
        return await self._get_text(path, "get_price")

    async def get_last_tx(self, address: str) -> str:
        """Get the id of the last transaction sent from *address*.

        Returns an empty string for wallets that have never sent one.
        """
        return await self._get_text(f"/wallet/{address}/last_tx", "get_last_tx")

    async def get_balance(self, address: str) -> str:
        """Get the balance of *address* in winston."""
        return await self._get_text(f"/wallet/{address}/balance", "get_balance")

    async def get_info(self) -> NetworkInfo:
        """Get node and network status.

        Raises:
            GatewayError: On HTTP or API errors.
        """
        response = await self._request("/info", "get_info")
        data: dict[str, Any] = response.json()
        return NetworkInfo.from_dict(data)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ensure_connected(self) -> httpx.AsyncClient:
        """Return the HTTP client, raising if not connected."""
        if self._client is None:
            msg = "Gateway client not connected. Call connect() first."
            raise GatewayError(msg, status_code=500)
        return self._client

    async def _get_text(self, path: str, operation: str) -> str:
        response = await self._request(path, operation)
        return response.text.strip()

    async def _request(self, path: str, operation: str) -> httpx.Response:
        client = self._ensure_connected()
        try:
            response = await client.get(path)
        except httpx.HTTPError as exc:
            raise GatewayError(f"Gateway {operation} failed: {exc}") from exc

        if response.status_code != 200:
            self._raise_for_status(response, operation)
        logger.debug("Gateway %s %s -> %d", operation, path, response.status_code)
        return response

    def _raise_for_status(self, response: httpx.Response, operation: str) -> None:
        """Raise a GatewayError from a non-200 response."""
        status = response.status_code
        detail = response.text.strip() or response.reason_phrase
        error_map = {
            400: "Gateway rejected the request as malformed",
            404: "Gateway resource not found",
            429: "Gateway rate limit exceeded",
        }
        message = error_map.get(status, f"Gateway {operation} failed ({status})")
        raise GatewayError(f"{message}: {detail}", status_code=status)
