"""TransactionDraft — caller-supplied attributes before finalization."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, NamedTuple, Self

from ar_wallet.errors.ar_errors import ValidationError


class Tag(NamedTuple):
    """A transaction tag (name/value pair)."""

    name: str
    value: str


_TEXT_TYPES = (str, bytes, bytearray)


def _invalid_tag(item: Any) -> ValidationError:
    msg = f"invalid tag {item!r}: expected a (name, value) pair or a name/value mapping"
    return ValidationError(msg, code="invalid-tag")


def _normalize_tags(raw: Any) -> list[Tag]:
    if isinstance(raw, (*_TEXT_TYPES, Mapping)) or not isinstance(raw, Iterable):
        msg = f"tags must be a list of tags, got {type(raw).__name__}"
        raise ValidationError(msg, code="invalid-tag")
    tags: list[Tag] = []
    for item in raw:
        if isinstance(item, _TEXT_TYPES):
            raise _invalid_tag(item)
        try:
            name, value = (item["name"], item["value"]) if isinstance(item, Mapping) else item
        except (KeyError, TypeError, ValueError) as exc:
            raise _invalid_tag(item) from exc
        tags.append(Tag(str(name), str(value)))
    return tags


def _check_amount(name: str, value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    msg = f"{name} must be a winston amount as str or int, got {type(value).__name__}"
    raise ValidationError(msg, code="invalid-attribute")


@dataclass
class TransactionDraft:
    """A partially filled transaction.

    Every optional field uses ``None`` to mean "not supplied"; the finalizer
    derives ``owner``, ``last_tx`` and ``reward`` when they are ``None`` and
    leaves caller-supplied values alone. ``quantity`` and ``reward`` are
    winston amounts kept as decimal strings.
    """

    data: str | bytes | None = None
    target: str | None = None
    quantity: str | None = None
    owner: str | None = None
    last_tx: str | None = None
    reward: str | None = None
    tags: list[Tag] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.data is not None and not isinstance(self.data, _TEXT_TYPES):
            msg = f"data must be str or bytes, got {type(self.data).__name__}"
            raise ValidationError(msg, code="invalid-data")
        self.quantity = _check_amount("quantity", self.quantity)
        self.reward = _check_amount("reward", self.reward)
        self.tags = _normalize_tags(self.tags)

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, Any] | TransactionDraft | None) -> Self:
        """Build a fresh draft from a mapping of attributes (or copy a draft).

        Raises:
            ValidationError: If *attributes* names a field drafts do not have.
        """
        if attributes is None:
            return cls()
        if isinstance(attributes, TransactionDraft):
            return replace(attributes, tags=list(attributes.tags))
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(attributes) - known)
        if unknown:
            msg = f"unknown transaction attribute(s): {', '.join(unknown)}"
            raise ValidationError(msg, code="unknown-attribute")
        return cls(**attributes)

    @property
    def has_data(self) -> bool:
        return bool(self.data)

    @property
    def has_target(self) -> bool:
        return bool(self.target)

    @property
    def has_quantity(self) -> bool:
        return self.quantity is not None and self.quantity != ""

    @property
    def is_resolved(self) -> bool:
        """True once owner, anchor and reward are all present."""
        return self.owner is not None and self.last_tx is not None and self.reward is not None

    def raw_data(self) -> bytes:
        """Payload as bytes; text is UTF-8 encoded."""
        if self.data is None:
            return b""
        if isinstance(self.data, str):
            return self.data.encode("utf-8")
        return bytes(self.data)

    def byte_length(self) -> int:
        """Payload size in bytes (0 when there is no payload)."""
        return len(self.raw_data())
