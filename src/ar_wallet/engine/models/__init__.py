"""Engine models — drafts and finalized transactions."""

from ar_wallet.engine.models.draft import Tag, TransactionDraft
from ar_wallet.engine.models.transaction import Transaction

__all__ = ["Tag", "Transaction", "TransactionDraft"]
