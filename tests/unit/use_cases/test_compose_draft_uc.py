"""Tests for ComposeDraftUseCase."""

from decimal import Decimal

import pytest

from edufin.application.dto.requests import AddLineItemRequest
from edufin.application.use_cases.compose_draft import ComposeDraftUseCase
from edufin.core.exceptions import (
    DraftClosedError,
    DraftNotFoundError,
    LineItemNotFoundError,
    ValidationError,
)
from edufin.core.services.invoice_draft import DraftStatus
from edufin.infrastructure.storage.memory_drafts import InMemoryDraftRepository


@pytest.fixture
def drafts():
    return InMemoryDraftRepository()


@pytest.fixture
def use_case(drafts):
    return ComposeDraftUseCase(draft_repository=drafts)


class TestComposeDraftUseCase:
    def test_create_registers_draft(self, use_case, drafts):
        draft = use_case.create()

        assert drafts.get(draft.id) is draft
        assert draft.status is DraftStatus.OPEN

    def test_add_item_returns_validated_item(self, use_case):
        draft = use_case.create()

        item = use_case.add_item(
            draft.id,
            AddLineItemRequest(
                description="  MBA em Gestão  ",
                quantity=2,
                unit_price=Decimal("100.00"),
            ),
        )

        assert item.description == "MBA em Gestão"
        assert draft.total == Decimal("200.00")

    def test_invalid_item_leaves_draft_unchanged(self, use_case):
        draft = use_case.create()
        use_case.add_item(draft.id, AddLineItemRequest(description="A", unit_price=Decimal("5")))

        with pytest.raises(ValidationError) as exc_info:
            use_case.add_item(draft.id, AddLineItemRequest(description="B", quantity=0))

        assert exc_info.value.field == "quantity"
        assert len(draft.items) == 1
        assert draft.total == Decimal("5")

    def test_unknown_draft(self, use_case):
        with pytest.raises(DraftNotFoundError):
            use_case.add_item("nope", AddLineItemRequest(description="A"))

    def test_remove_item(self, use_case):
        draft = use_case.create()
        item = use_case.add_item(draft.id, AddLineItemRequest(description="A"))

        use_case.remove_item(draft.id, item.id)

        assert draft.items == ()

    def test_remove_unknown_item(self, use_case):
        draft = use_case.create()

        with pytest.raises(LineItemNotFoundError):
            use_case.remove_item(draft.id, "missing")

        use_case.remove_item(draft.id, "missing", missing_ok=True)

    def test_discard_forgets_draft(self, use_case, drafts):
        draft = use_case.create()

        use_case.discard(draft.id)

        assert draft.status is DraftStatus.DISCARDED
        assert drafts.count() == 0
        with pytest.raises(DraftNotFoundError):
            use_case.get(draft.id)

    def test_discard_in_flight_draft_rejected(self, use_case, drafts):
        draft = use_case.create()
        use_case.add_item(draft.id, AddLineItemRequest(description="A", unit_price=Decimal("1")))
        draft.begin_submission()

        with pytest.raises(DraftClosedError):
            use_case.discard(draft.id)

        assert drafts.count() == 1


class TestDraftResponse:
    def test_amounts_rounded_for_display(self, use_case):
        draft = use_case.create()
        use_case.add_item(
            draft.id,
            AddLineItemRequest(
                description="Curso livre",
                quantity=3,
                unit_price=Decimal("33.333"),
                tax_rate=Decimal("10"),
            ),
        )

        response = use_case.to_response(draft)

        assert response.item_count == 1
        assert response.currency == "BRL"
        assert response.status == "open"
        assert response.items[0].subtotal == 100.0
        assert response.items[0].tax_amount == 10.0
        assert response.total == 110.0

    def test_item_response(self, use_case):
        draft = use_case.create()
        item = use_case.add_item(
            draft.id,
            AddLineItemRequest(
                description="Consultoria",
                unit_price=Decimal("50"),
                discount=Decimal("10"),
                tax_rate=Decimal("10"),
            ),
        )

        response = use_case.item_response(draft, item.id)

        assert response.id == item.id
        assert response.subtotal == 40.0
        assert response.tax_amount == 4.0
        assert response.total == 44.0
