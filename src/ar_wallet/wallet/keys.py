"""RSA JSON Web Keys — parsing, generation, and address derivation.

An Arweave wallet is an RSA-PSS key pair serialised as a JWK. The public
modulus ``n`` (base64url) is the transaction ``owner``; the wallet address
is the base64url SHA-256 digest of the raw modulus bytes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Self

from cryptography.hazmat.primitives.asymmetric import rsa

from ar_wallet.errors.definitions import ErrInvalidJWK
from ar_wallet.utils.crypto import sha256
from ar_wallet.utils.encoding import b64url_decode, b64url_encode

_PUBLIC_EXPONENT = 65537

_PRIVATE_FIELDS = ("d", "p", "q", "dp", "dq", "qi")


def _int_to_b64url(value: int) -> str:
    return b64url_encode(value.to_bytes((value.bit_length() + 7) // 8, "big"))


@dataclass(frozen=True)
class JWK:
    """An RSA JSON Web Key.

    Only ``n`` is needed to build a draft; the private members are carried
    through untouched for a downstream signer.
    """

    n: str
    e: str = "AQAB"
    kty: str = "RSA"
    d: str | None = None
    p: str | None = None
    q: str | None = None
    dp: str | None = None
    dq: str | None = None
    qi: str | None = None

    @property
    def is_private(self) -> bool:
        """Whether the key carries the private exponent."""
        return self.d is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a JWK from its JSON object form.

        Raises:
            ValidationError: If the key is not RSA or has no modulus.
        """
        n = data.get("n")
        if data.get("kty", "RSA") != "RSA" or not isinstance(n, str) or not n:
            raise ErrInvalidJWK
        return cls(
            n=n,
            e=data.get("e", "AQAB"),
            **{name: data.get(name) for name in _PRIVATE_FIELDS},
        )

    def to_dict(self) -> dict[str, str]:
        """Serialise to the JSON object form, omitting absent members."""
        return {k: v for k, v in asdict(self).items() if v is not None}

    def public(self) -> Self:
        """Return the public half of this key."""
        return type(self)(n=self.n, e=self.e)


def owner_to_address(owner: str) -> str:
    """Derive the wallet address for a base64url public modulus."""
    return b64url_encode(sha256(b64url_decode(owner)))


def generate_jwk(key_size: int = 4096) -> JWK:
    """Generate a fresh RSA key pair as a JWK."""
    key = rsa.generate_private_key(public_exponent=_PUBLIC_EXPONENT, key_size=key_size)
    priv = key.private_numbers()
    pub = priv.public_numbers
    return JWK(
        n=_int_to_b64url(pub.n),
        e=_int_to_b64url(pub.e),
        d=_int_to_b64url(priv.d),
        p=_int_to_b64url(priv.p),
        q=_int_to_b64url(priv.q),
        dp=_int_to_b64url(priv.dmp1),
        dq=_int_to_b64url(priv.dmq1),
        qi=_int_to_b64url(priv.iqmp),
    )
