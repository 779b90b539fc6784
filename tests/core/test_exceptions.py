"""Unit tests for domain exceptions."""

from datetime import date

import pytest
from pydantic import ValidationError as PydanticValidationError

from edufin.core.entities.charge import InvoiceMetadata
from edufin.core.exceptions import (
    ConfigurationError,
    DraftClosedError,
    DraftError,
    DraftNotFoundError,
    EduFinError,
    EmptyDraftError,
    GatewayError,
    GatewayRejectedError,
    GatewayUnavailableError,
    LineItemNotFoundError,
    NotFoundError,
    ValidationError,
)


class TestEduFinError:
    """Tests for base EduFinError exception."""

    def test_basic_initialization(self):
        error = EduFinError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "EduFinError"
        assert error.details == {}

    def test_to_dict(self):
        error = EduFinError("Test error", code="TEST_CODE", details={"extra": "info"})
        assert error.to_dict() == {
            "error": "TEST_CODE",
            "message": "Test error",
            "details": {"extra": "info"},
        }


class TestValidationError:
    def test_fields(self):
        error = ValidationError("quantity", "must be at least 1", 0)

        assert error.code == "VALIDATION_ERROR"
        assert error.field == "quantity"
        assert "quantity" in error.message
        assert error.details["value"] == "0"

    def test_none_value(self):
        assert ValidationError("description", "must not be empty").details["value"] is None

    def test_long_value_truncated(self):
        error = ValidationError("notes", "too long", "x" * 500)
        assert len(error.details["value"]) == 100

    def test_from_pydantic_field_error(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            InvoiceMetadata(client_id="", invoice_number="A", due_date=date.today())

        error = ValidationError.from_pydantic(exc_info.value)

        assert error.field == "client_id"

    def test_from_pydantic_model_error(self):
        with pytest.raises(PydanticValidationError) as exc_info:
            InvoiceMetadata(
                client_id="1",
                invoice_number="A",
                issue_date=date(2026, 2, 2),
                due_date=date(2026, 2, 1),
            )

        error = ValidationError.from_pydantic(exc_info.value)

        assert error.field == "__root__"
        assert error.details["message"] == "due_date must not be before issue_date"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error,base,code",
        [
            (LineItemNotFoundError("i1"), NotFoundError, "LINE_ITEM_NOT_FOUND"),
            (DraftNotFoundError("d1"), NotFoundError, "DRAFT_NOT_FOUND"),
            (DraftClosedError("d1", "submitted"), DraftError, "DRAFT_CLOSED"),
            (EmptyDraftError("d1"), DraftError, "EMPTY_DRAFT"),
            (GatewayUnavailableError("/api/finance/charges"), GatewayError, "GATEWAY_UNAVAILABLE"),
            (
                GatewayRejectedError("/api/finance/charges", 422, "bad"),
                GatewayError,
                "GATEWAY_REJECTED",
            ),
            (ConfigurationError("x"), EduFinError, "ConfigurationError"),
        ],
    )
    def test_codes_and_bases(self, error, base, code):
        assert isinstance(error, base)
        assert isinstance(error, EduFinError)
        assert error.code == code

    def test_gateway_rejected_keeps_status(self):
        error = GatewayRejectedError("/x", 400, "cliente inválido")
        assert error.status_code == 400
        assert "HTTP 400" in error.message
        assert error.details["response_preview"] == "cliente inválido"

    def test_gateway_unavailable_reason(self):
        error = GatewayUnavailableError("/x", "ConnectError")
        assert error.message.endswith("- ConnectError")
