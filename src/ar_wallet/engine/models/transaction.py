"""Transaction — an immutable, finalized (unsigned) transaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ar_wallet.engine.models.draft import Tag
from ar_wallet.utils.encoding import b64url_decode, buffer_to_string

if TYPE_CHECKING:
    from ar_wallet.engine.models.draft import TransactionDraft

# Fields stored as base64url on the wire
_B64URL_FIELDS = frozenset({"id", "last_tx", "owner", "target", "data", "signature"})


@dataclass(frozen=True)
class Transaction:
    """A fully populated transaction ready for a signer.

    ``data`` and tag names/values hold their encoded on-chain form. ``id``
    and ``signature`` stay empty until the transaction is signed.
    """

    last_tx: str
    owner: str
    reward: str
    target: str = ""
    quantity: str = "0"
    data: str = ""
    tags: tuple[Tag, ...] = ()
    format: int = 1
    id: str = ""
    signature: str = ""

    @classmethod
    def from_draft(
        cls,
        draft: TransactionDraft,
        *,
        data: str = "",
        tags: tuple[Tag, ...] = (),
    ) -> Transaction:
        """Build a transaction from a resolved draft and its encoded payload.

        Raises:
            ValueError: If ``owner``, ``last_tx`` or ``reward`` is unresolved.
        """
        if draft.owner is None or draft.last_tx is None or draft.reward is None:
            msg = "draft has unresolved owner, last_tx or reward"
            raise ValueError(msg)
        return cls(
            last_tx=draft.last_tx,
            owner=draft.owner,
            reward=draft.reward,
            target=draft.target or "",
            quantity=draft.quantity or "0",
            data=data,
            tags=tags,
        )

    def get(self, name: str, *, decode: bool = False, as_string: bool = False) -> Any:
        """Return a field, optionally decoded from base64url.

        Args:
            name: Field name.
            decode: Decode a base64url field to bytes.
            as_string: With ``decode``, return UTF-8 text instead of bytes.

        Raises:
            ValueError: If *decode* is requested for a non-base64url field.
        """
        value = getattr(self, name)
        if not decode:
            return value
        if name not in _B64URL_FIELDS:
            msg = f"field {name!r} is not base64url encoded"
            raise ValueError(msg)
        raw = b64url_decode(value)
        return buffer_to_string(raw) if as_string else raw

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the gateway JSON format."""
        return {
            "format": self.format,
            "id": self.id,
            "last_tx": self.last_tx,
            "owner": self.owner,
            "tags": [{"name": t.name, "value": t.value} for t in self.tags],
            "target": self.target,
            "quantity": self.quantity,
            "data": self.data,
            "reward": self.reward,
            "signature": self.signature,
        }
