"""Tests for the structured-text (JSON) codec."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from structlog.testing import capture_logs

from nearid.codecs.json import from_json, to_json
from nearid.domain.account_id import ValidAccountId


class Transfer(BaseModel):
    receiver_id: ValidAccountId
    amount: int


@pytest.mark.unit
class TestFromJson:
    """Tests for from_json."""

    def test_deserializes_valid(self) -> None:
        account = from_json('"alice.near"')
        assert account.value == "alice.near"

    def test_accepts_bytes(self) -> None:
        assert from_json(b'"bob.near"') == ValidAccountId("bob.near")

    def test_rejects_invalid_identifier(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            from_json('"Alice.near"')
        (error,) = exc_info.value.errors()
        assert error["type"] == "account_id_invalid"
        assert error["msg"] == "the account ID is invalid"

    def test_rejects_unquoted(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            from_json("Alice.near")
        assert exc_info.value.errors()[0]["type"] == "json_invalid"

    def test_rejects_unquoted_valid_text(self) -> None:
        with pytest.raises(PydanticValidationError):
            from_json("alice.near")

    @pytest.mark.parametrize("data", ["42", "null", '["alice.near"]', '{"v": "alice.near"}'])
    def test_rejects_non_string_scalar(self, data: str) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            from_json(data)
        assert exc_info.value.errors()[0]["type"] == "string_type"


@pytest.mark.unit
class TestToJson:
    """Tests for to_json."""

    def test_exact_form(self, alice: ValidAccountId) -> None:
        assert to_json(alice) == '"alice.near"'

    @pytest.mark.parametrize("text", ["alice.near", "b-o_w_e-n", "0o", "a" * 64])
    def test_round_trip(self, text: str) -> None:
        account = ValidAccountId.parse(text)
        assert from_json(to_json(account)) == account


@pytest.mark.unit
class TestModelField:
    """ValidAccountId as a field on a pydantic model."""

    def test_validate_json(self) -> None:
        transfer = Transfer.model_validate_json('{"receiver_id": "bob.near", "amount": 5}')
        assert transfer.receiver_id == ValidAccountId("bob.near")

    def test_dump_json(self) -> None:
        transfer = Transfer(receiver_id=ValidAccountId("bob.near"), amount=5)
        assert transfer.model_dump_json() == '{"receiver_id":"bob.near","amount":5}'

    def test_dump_python_gives_raw_string(self) -> None:
        transfer = Transfer(receiver_id=ValidAccountId("bob.near"), amount=5)
        assert transfer.model_dump() == {"receiver_id": "bob.near", "amount": 5}

    def test_python_input_accepts_str(self) -> None:
        transfer = Transfer(receiver_id="bob.near", amount=5)  # type: ignore[arg-type]
        assert isinstance(transfer.receiver_id, ValidAccountId)

    def test_python_input_passes_instance_through(self, alice: ValidAccountId) -> None:
        transfer = Transfer(receiver_id=alice, amount=1)
        assert transfer.receiver_id is alice

    def test_invalid_field_reports_message(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            Transfer.model_validate_json('{"receiver_id": "Bob.near", "amount": 5}')
        assert "the account ID is invalid" in str(exc_info.value)
        assert exc_info.value.errors()[0]["loc"] == ("receiver_id",)

    def test_python_invalid_str_reports_one_error(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            Transfer(receiver_id="Bob.near", amount=5)  # type: ignore[arg-type]
        (error,) = exc_info.value.errors()
        assert error["type"] == "account_id_invalid"
        assert error["msg"] == "the account ID is invalid"
        assert error["loc"] == ("receiver_id",)

    def test_python_non_string_reports_string_type(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            Transfer(receiver_id=42, amount=5)  # type: ignore[arg-type]
        (error,) = exc_info.value.errors()
        assert error["type"] == "string_type"

    def test_json_schema_is_string(self) -> None:
        schema = TypeAdapter(ValidAccountId).json_schema()
        assert schema == {"type": "string"}


@pytest.mark.unit
class TestRejectionLogging:
    """from_json logs rejections without the rejected text."""

    def test_logs_error_types(self) -> None:
        with capture_logs() as logs, pytest.raises(PydanticValidationError):
            from_json('"Mallory.near"')
        (entry,) = logs
        assert entry["event"] == "account_id_rejected"
        assert entry["log_level"] == "debug"
        assert entry["source"] == "json"
        assert entry["error_types"] == ["account_id_invalid"]
        assert "Mallory" not in repr(entry)

    def test_unconfigured_rejection_writes_nothing(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(PydanticValidationError):
            from_json('"Mallory.near"')
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
