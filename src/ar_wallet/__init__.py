"""py-ar — build unsigned Arweave transaction drafts."""

from ar_wallet.engine.client import ARWalletEngine
from ar_wallet.engine.models.draft import Tag, TransactionDraft
from ar_wallet.engine.models.transaction import Transaction
from ar_wallet.engine.services.draft_service import DraftFinalizer
from ar_wallet.errors.ar_errors import ARError, GatewayError, SiloError, ValidationError
from ar_wallet.wallet.keys import JWK

__version__ = "0.1.0"

__all__ = [
    "ARError",
    "ARWalletEngine",
    "DraftFinalizer",
    "GatewayError",
    "JWK",
    "SiloError",
    "Tag",
    "Transaction",
    "TransactionDraft",
    "ValidationError",
]
