"""Draft finalizer — turns caller attributes into a ready-to-sign transaction.

Two variants share one defaulting routine:

1. ``finalize`` — plain drafts carrying a payload, a value transfer, or both.
2. ``finalize_private`` — payload-only drafts whose data is encrypted under a
   silo resource key before encoding.

Local validation always runs before any collaborator is called, so malformed
input never costs a network round trip. Collaborator failures propagate to
the caller unchanged.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ar_wallet.engine.models.draft import Tag, TransactionDraft
from ar_wallet.engine.models.transaction import Transaction
from ar_wallet.errors.ar_errors import ValidationError
from ar_wallet.errors.definitions import (
    ErrDraftEmpty,
    ErrSiloDataRequired,
    ErrSiloURIRequired,
    ErrSiloValueTransfer,
)
from ar_wallet.utils.encoding import B64UrlCodec
from ar_wallet.wallet.keys import JWK

if TYPE_CHECKING:
    from collections.abc import Callable
    from contextlib import AbstractContextManager

    from ar_wallet.engine.interfaces import (
        AddressResolver,
        Encryptor,
        FeeOracle,
        PayloadCodec,
        SiloLocator,
    )
    from ar_wallet.metrics.collector import DraftMetrics

logger = logging.getLogger(__name__)

PLAIN = "plain"
SILO = "silo"

Attributes = Mapping[str, Any] | TransactionDraft | None


class DraftFinalizer:
    """Validates drafts, fills derived fields and builds transactions.

    The finalizer keeps no per-call state; concurrent calls on one instance
    are independent.
    """

    def __init__(
        self,
        *,
        wallets: AddressResolver,
        fees: FeeOracle,
        crypto: Encryptor,
        silo: SiloLocator,
        codec: PayloadCodec | None = None,
        metrics: DraftMetrics | None = None,
    ) -> None:
        """Wire the finalizer to its collaborators.

        Args:
            wallets: Resolves the sender address and its anchor transaction.
            fees: Quotes the reward for a payload size.
            crypto: Encrypts silo payloads.
            silo: Resolves silo URIs to resources.
            codec: Payload codec; base64url when omitted.
            metrics: Optional Prometheus draft metrics.
        """
        self._wallets = wallets
        self._fees = fees
        self._crypto = crypto
        self._silo = silo
        self._codec = codec or B64UrlCodec()
        self._metrics = metrics

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def finalize(self, attributes: Attributes, jwk: JWK | Mapping[str, Any]) -> Transaction:
        """Finalize a plain draft.

        Args:
            attributes: Draft attributes (mapping or ``TransactionDraft``).
                Never mutated.
            jwk: Sender key; only its public modulus is used.

        Returns:
            The finalized, unsigned transaction.

        Raises:
            ValidationError: If the draft has no data and lacks a target or
                quantity, names an unknown attribute, or the key is invalid.
        """
        draft, key = self._validated(PLAIN, attributes, jwk, self._check_plain)

        with self._track(PLAIN):
            await self._fill_defaults(draft, key, target=draft.target or None)
            data = self._encode_payload(draft.data) if draft.has_data else ""
            tx = Transaction.from_draft(draft, data=data, tags=self._encode_tags(draft.tags))

        logger.debug(
            "Finalized draft: %d payload bytes, target=%s, reward=%s",
            draft.byte_length(),
            tx.target or "-",
            tx.reward,
        )
        return tx

    async def finalize_private(
        self,
        attributes: Attributes,
        jwk: JWK | Mapping[str, Any],
        silo_uri: str,
    ) -> Transaction:
        """Finalize a silo draft, encrypting its payload.

        Args:
            attributes: Draft attributes; must carry data and no value transfer.
            jwk: Sender key.
            silo_uri: Locator of the silo resource whose key encrypts the data.

        Returns:
            The finalized transaction carrying only the encoded ciphertext.

        Raises:
            ValidationError: If data or the silo URI is missing, or a target
                or quantity is present.
        """

        def check(draft: TransactionDraft) -> None:
            self._check_silo(draft, silo_uri)

        draft, key = self._validated(SILO, attributes, jwk, check)

        with self._track(SILO):
            await self._fill_defaults(draft, key, target=None)
            resource = await self._silo.parse_uri(silo_uri)
            encrypted = await self._crypto.encrypt(draft.raw_data(), resource.get_encryption_key())
            data = self._codec.encode_bytes(encrypted)
            tx = Transaction.from_draft(draft, data=data, tags=self._encode_tags(draft.tags))

        logger.debug(
            "Finalized silo draft: %d plaintext bytes, %d encrypted bytes, reward=%s",
            draft.byte_length(),
            len(encrypted),
            tx.reward,
        )
        return tx

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _check_plain(draft: TransactionDraft) -> None:
        if not draft.has_data and not (draft.has_target and draft.has_quantity):
            raise ErrDraftEmpty

    @staticmethod
    def _check_silo(draft: TransactionDraft, silo_uri: str) -> None:
        if not draft.has_data:
            raise ErrSiloDataRequired
        if not silo_uri:
            raise ErrSiloURIRequired
        if draft.has_target or draft.has_quantity:
            raise ErrSiloValueTransfer

    def _validated(
        self,
        variant: str,
        attributes: Attributes,
        jwk: JWK | Mapping[str, Any],
        check: Callable[[TransactionDraft], None],
    ) -> tuple[TransactionDraft, JWK]:
        """Copy the attributes into a draft and run the local checks."""
        try:
            draft = TransactionDraft.from_attributes(attributes)
            check(draft)
            key = jwk if isinstance(jwk, JWK) else JWK.from_dict(dict(jwk))
        except ValidationError as exc:
            logger.debug("Rejected %s draft: %s", variant, exc.code)
            if self._metrics is not None:
                self._metrics.record_rejected(variant)
            raise
        return draft, key

    # ------------------------------------------------------------------
    # Defaulting
    # ------------------------------------------------------------------

    async def _fill_defaults(
        self, draft: TransactionDraft, jwk: JWK, *, target: str | None
    ) -> None:
        """Fill owner, anchor and reward where the caller left them unset.

        The anchor chain (address, then last_tx) and the reward quote are
        independent and run concurrently. If either fails, the other is
        cancelled before the original error propagates.
        """
        if draft.owner is None:
            draft.owner = jwk.n
        if draft.is_resolved:
            return

        tasks = (
            asyncio.ensure_future(self._resolve_anchor(draft, jwk)),
            asyncio.ensure_future(self._resolve_reward(draft, target)),
        )
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _resolve_anchor(self, draft: TransactionDraft, jwk: JWK) -> None:
        if draft.last_tx is not None:
            return
        address = await self._wallets.jwk_to_address(jwk)
        draft.last_tx = await self._wallets.get_last_transaction_id(address)

    async def _resolve_reward(self, draft: TransactionDraft, target: str | None) -> None:
        if draft.reward is not None:
            return
        draft.reward = await self._fees.get_price(draft.byte_length(), target)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def _encode_payload(self, data: str | bytes | None) -> str:
        if isinstance(data, str):
            return self._codec.encode_text(data)
        return self._codec.encode_bytes(bytes(data or b""))

    def _encode_tags(self, tags: list[Tag]) -> tuple[Tag, ...]:
        return tuple(
            Tag(self._codec.encode_text(t.name), self._codec.encode_text(t.value)) for t in tags
        )

    def _track(self, variant: str) -> AbstractContextManager[None]:
        if self._metrics is None:
            return contextlib.nullcontext()
        return self._metrics.track_finalize(variant)
