"""Base64url helpers and the on-chain payload codec.

Arweave stores binary fields (``data``, ``owner``, tag names and values) as
URL-safe base64 with the trailing ``=`` padding stripped.
"""

from __future__ import annotations

import base64


def b64url_encode(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(value: str) -> bytes:
    """Decode unpadded (or padded) URL-safe base64 to bytes.

    Raises:
        ValueError: If *value* is not valid base64url.
    """
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)


def b64_encode(data: bytes) -> str:
    """Encode bytes as standard (padded) base64."""
    return base64.b64encode(data).decode("ascii")


def string_to_buffer(text: str) -> bytes:
    """UTF-8 encode *text*."""
    return text.encode("utf-8")


def buffer_to_string(data: bytes) -> str:
    """UTF-8 decode *data*."""
    return data.decode("utf-8")


def string_to_b64url(text: str) -> str:
    """UTF-8 encode *text* and base64url it."""
    return b64url_encode(string_to_buffer(text))


def b64url_to_string(value: str) -> str:
    """Decode a base64url field back to text."""
    return buffer_to_string(b64url_decode(value))


class B64UrlCodec:
    """Payload codec used for on-chain binary fields."""

    def encode_text(self, text: str) -> str:
        return string_to_b64url(text)

    def encode_bytes(self, data: bytes) -> str:
        return b64url_encode(data)

    def decode_text(self, value: str) -> str:
        return b64url_to_string(value)

    def decode_bytes(self, value: str) -> bytes:
        return b64url_decode(value)
