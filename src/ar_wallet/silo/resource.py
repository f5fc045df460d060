"""SiloResource — key material derived from a silo URI."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SiloResource:
    """A private-storage resource.

    Attributes:
        uri: The silo URI the resource was derived from.
        access_key: Public lookup key for the resource.
        encryption_key: Symmetric key that protects the payload.
    """

    uri: str
    access_key: str
    encryption_key: bytes = field(repr=False)

    def get_uri(self) -> str:
        return self.uri

    def get_access_key(self) -> str:
        return self.access_key

    def get_encryption_key(self) -> bytes:
        return self.encryption_key
