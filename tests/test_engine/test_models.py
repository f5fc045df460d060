"""Tests for TransactionDraft and Transaction models."""

from __future__ import annotations

import dataclasses

import pytest

from ar_wallet.engine.models.draft import Tag, TransactionDraft
from ar_wallet.engine.models.transaction import Transaction
from ar_wallet.errors.ar_errors import ValidationError
from ar_wallet.utils.encoding import string_to_b64url

# ---------------------------------------------------------------------------
# TransactionDraft
# ---------------------------------------------------------------------------


class TestTransactionDraft:
    def test_defaults_are_unset(self) -> None:
        draft = TransactionDraft()
        assert draft.data is None
        assert draft.target is None
        assert draft.quantity is None
        assert draft.owner is None
        assert draft.last_tx is None
        assert draft.reward is None
        assert draft.tags == []
        assert draft.is_resolved is False

    def test_from_attributes(self) -> None:
        draft = TransactionDraft.from_attributes(
            {"data": "hi", "target": "addr", "quantity": 10, "reward": 5}
        )
        assert draft.data == "hi"
        assert draft.target == "addr"
        assert draft.quantity == "10"
        assert draft.reward == "5"

    def test_from_attributes_none(self) -> None:
        assert TransactionDraft.from_attributes(None) == TransactionDraft()

    def test_from_attributes_unknown(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TransactionDraft.from_attributes({"data": "x", "fee": "1", "amount": "2"})
        assert exc_info.value.code == "unknown-attribute"
        assert "amount, fee" in exc_info.value.message

    def test_from_attributes_copies_draft(self) -> None:
        original = TransactionDraft(data="x", tags=[Tag("a", "b")])
        copy = TransactionDraft.from_attributes(original)
        assert copy == original
        assert copy is not original
        copy.tags.append(Tag("c", "d"))
        copy.owner = "o"
        assert original.tags == [Tag("a", "b")]
        assert original.owner is None

    def test_tags_normalized(self) -> None:
        draft = TransactionDraft(tags=[("a", 1), {"name": "b", "value": "2"}, Tag("c", "3")])
        assert draft.tags == [Tag("a", "1"), Tag("b", "2"), Tag("c", "3")]

    @pytest.mark.parametrize(
        "tags",
        [None, "Content-Type", {"name": "a", "value": "b"}, [{"name": "a"}], [("a",)], [b"ab"]],
    )
    def test_invalid_tags(self, tags: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TransactionDraft(data="x", tags=tags)  # type: ignore[arg-type]
        assert exc_info.value.code == "invalid-tag"

    @pytest.mark.parametrize("data", [5, 1.5, ["a"], {"a": 1}])
    def test_invalid_data(self, data: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            TransactionDraft(data=data)  # type: ignore[arg-type]
        assert exc_info.value.code == "invalid-data"

    @pytest.mark.parametrize(
        ("field_name", "value"), [("quantity", 1.5), ("quantity", False), ("reward", b"10")]
    )
    def test_invalid_amount(self, field_name: str, value: object) -> None:
        with pytest.raises(ValidationError, match=field_name) as exc_info:
            TransactionDraft.from_attributes({"target": "a", field_name: value})
        assert exc_info.value.code == "invalid-attribute"

    def test_bytearray_data_accepted(self) -> None:
        assert TransactionDraft(data=bytearray(b"hi")).byte_length() == 2

    def test_presence_flags(self) -> None:
        draft = TransactionDraft(data="", target="", quantity="0")
        assert draft.has_data is False
        assert draft.has_target is False
        assert draft.has_quantity is True

    def test_is_resolved(self) -> None:
        draft = TransactionDraft(owner="o", last_tx="", reward="0")
        assert draft.is_resolved is True

    def test_byte_length(self) -> None:
        assert TransactionDraft().byte_length() == 0
        assert TransactionDraft(data="héllo").byte_length() == 6
        assert TransactionDraft(data=b"\x00\x01").byte_length() == 2

    def test_raw_data(self) -> None:
        assert TransactionDraft(data="hi").raw_data() == b"hi"
        assert TransactionDraft(data=bytearray(b"hi")).raw_data() == b"hi"
        assert TransactionDraft().raw_data() == b""


# ---------------------------------------------------------------------------
# Transaction
# ---------------------------------------------------------------------------


def _tx(**overrides) -> Transaction:
    defaults = {"last_tx": "anchor", "owner": string_to_b64url("owner"), "reward": "100"}
    defaults.update(overrides)
    return Transaction(**defaults)


class TestTransaction:
    def test_defaults(self) -> None:
        tx = _tx()
        assert tx.target == ""
        assert tx.quantity == "0"
        assert tx.data == ""
        assert tx.tags == ()
        assert tx.format == 1
        assert tx.id == ""
        assert tx.signature == ""

    def test_frozen(self) -> None:
        tx = _tx()
        with pytest.raises(dataclasses.FrozenInstanceError):
            tx.reward = "0"  # type: ignore[misc]

    def test_from_draft(self) -> None:
        draft = TransactionDraft(
            data="ignored", target="addr", quantity="7", owner="o", last_tx="a", reward="1"
        )
        tx = Transaction.from_draft(draft, data="ZW5j", tags=(Tag("bg", "dg"),))
        assert tx.data == "ZW5j"
        assert tx.target == "addr"
        assert tx.quantity == "7"
        assert (tx.owner, tx.last_tx, tx.reward) == ("o", "a", "1")
        assert tx.tags == (Tag("bg", "dg"),)

    def test_from_unresolved_draft(self) -> None:
        with pytest.raises(ValueError, match="unresolved"):
            Transaction.from_draft(TransactionDraft(owner="o", last_tx="a"))

    def test_get_plain(self) -> None:
        assert _tx().get("reward") == "100"

    def test_get_decoded(self) -> None:
        tx = _tx(data=string_to_b64url("hello"))
        assert tx.get("data", decode=True) == b"hello"
        assert tx.get("data", decode=True, as_string=True) == "hello"
        assert tx.get("owner", decode=True, as_string=True) == "owner"

    def test_get_decode_non_b64_field(self) -> None:
        with pytest.raises(ValueError, match="not base64url"):
            _tx().get("quantity", decode=True)

    def test_to_dict(self) -> None:
        tx = _tx(target="addr", quantity="5", data="ZGF0YQ", tags=(Tag("bg", "dg"),))
        assert tx.to_dict() == {
            "format": 1,
            "id": "",
            "last_tx": "anchor",
            "owner": string_to_b64url("owner"),
            "tags": [{"name": "bg", "value": "dg"}],
            "target": "addr",
            "quantity": "5",
            "data": "ZGF0YQ",
            "reward": "100",
            "signature": "",
        }
