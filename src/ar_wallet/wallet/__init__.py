"""Wallet — RSA JSON Web Keys and address derivation."""

from ar_wallet.wallet.keys import JWK, generate_jwk, owner_to_address

__all__ = ["JWK", "generate_jwk", "owner_to_address"]
