"""Gateway data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NetworkInfo:
    """Node status returned by ``GET /info``.

    Attributes:
        network: Network name (e.g. ``arweave.N.1``).
        version: Protocol version.
        release: Node software release number.
        height: Current block height.
        current: Hash of the current block.
        blocks: Number of blocks the node has stored.
        peers: Number of connected peers.
        queue_length: Length of the node's processing queue.
        node_state_latency: Node state latency in milliseconds.
    """

    network: str = ""
    version: int = 0
    release: int = 0
    height: int = 0
    current: str = ""
    blocks: int = 0
    peers: int = 0
    queue_length: int = 0
    node_state_latency: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NetworkInfo:
        """Create NetworkInfo from the gateway JSON response."""
        return cls(
            network=data.get("network", ""),
            version=data.get("version", 0),
            release=data.get("release", 0),
            height=data.get("height", 0),
            current=data.get("current", ""),
            blocks=data.get("blocks", 0),
            peers=data.get("peers", 0),
            queue_length=data.get("queue_length", 0),
            node_state_latency=data.get("node_state_latency", 0),
        )
