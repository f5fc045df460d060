"""Pre-defined error instances raised across the library."""

from __future__ import annotations

from ar_wallet.errors.ar_errors import SiloError, ValidationError

# -- Draft validation --------------------------------------------------------

ErrDraftEmpty = ValidationError(
    "A new Arweave transaction must have a 'data' value, or 'target' and 'quantity' values.",
    code="draft-empty",
)


# -- Silo draft validation ---------------------------------------------------

ErrSiloDataRequired = ValidationError(
    "Silo transactions must have a 'data' value", code="silo-data-required"
)
ErrSiloURIRequired = ValidationError("No Silo URI specified.", code="silo-uri-required")
ErrSiloValueTransfer = ValidationError(
    "Silo transactions can only be used for storing data, "
    "sending AR to other wallets isn't supported.",
    code="silo-value-transfer",
)

# -- Key material ------------------------------------------------------------

ErrInvalidJWK = ValidationError(
    "invalid JWK: an RSA key with a public modulus 'n' is required", code="invalid-jwk"
)

# -- Silo resolution ---------------------------------------------------------

ErrInvalidSiloURI = SiloError(
    "Invalid Silo name, must be a name in the format of [a-z0-9]+.[0-9]+, e.g. 'bubble.7'"
)
