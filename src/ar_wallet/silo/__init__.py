"""Silo — private-storage resources resolved from silo URIs."""

from ar_wallet.silo.resource import SiloResource
from ar_wallet.silo.service import SiloService

__all__ = ["SiloResource", "SiloService"]
