"""Tests for SubmitSubscriptionUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from edufin.application.dto.requests import (
    EarlyPaymentDiscountRequest,
    PenaltyRequest,
    SubmitSubscriptionRequest,
)
from edufin.application.use_cases.submit_subscription import (
    SubmitSubscriptionUseCase,
    build_terms,
)
from edufin.core.entities.charge import BillingCycle
from edufin.core.entities.line_item import LineItemCandidate
from edufin.core.exceptions import GatewayUnavailableError, ValidationError
from edufin.core.interfaces import GatewayReceipt
from edufin.core.services.invoice_draft import DraftStatus
from edufin.infrastructure.storage.memory_drafts import InMemoryDraftRepository


@pytest.fixture
def mock_gateway():
    gateway = AsyncMock()
    gateway.create_subscription.return_value = GatewayReceipt(
        reference="sub_VXJBYgP2u0eO", status="ACTIVE"
    )
    return gateway


@pytest.fixture
def use_case(draft, mock_gateway):
    drafts = InMemoryDraftRepository()
    drafts.add(draft)
    return SubmitSubscriptionUseCase(draft_repository=drafts, gateway=mock_gateway)


@pytest.fixture
def subscription_request():
    return SubmitSubscriptionRequest(
        customer="cus_000005219613",
        next_due_date=date(2026, 11, 5),
        description="Mensalidade MBA",
    )


class TestSubmitSubscriptionUseCase:
    async def test_value_is_draft_total(
        self,
        use_case,
        draft,
        mock_gateway,
        subscription_request,
        tuition_candidate,
        service_candidate,
    ):
        draft.add_item(tuition_candidate)
        draft.add_item(service_candidate)

        result = await use_case.execute("draft-1", subscription_request)

        payload = mock_gateway.create_subscription.call_args.args[0]
        assert payload["value"] == 244.0
        assert payload["externalReference"] == "draft-1"
        assert payload["cycle"] == "MONTHLY"
        assert result.kind == "subscription"
        assert draft.status is DraftStatus.SUBMITTED
        assert use_case.to_response(result).total == 244.0

    async def test_failure_reopens_draft(
        self, use_case, draft, mock_gateway, subscription_request, tuition_candidate
    ):
        draft.add_item(tuition_candidate)
        mock_gateway.create_subscription.side_effect = GatewayUnavailableError("/x")

        with pytest.raises(GatewayUnavailableError):
            await use_case.execute("draft-1", subscription_request)

        assert draft.is_open

    async def test_zero_total_rejected(
        self, use_case, draft, mock_gateway, subscription_request
    ):
        draft.add_item(LineItemCandidate(description="Bolsa integral", unit_price=0))

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute("draft-1", subscription_request)

        assert exc_info.value.field == "value"
        mock_gateway.create_subscription.assert_not_awaited()
        assert draft.is_open


class TestBuildTerms:
    def test_optional_terms(self, draft, tuition_candidate):
        draft.add_item(tuition_candidate)
        request = SubmitSubscriptionRequest(
            customer="cus_1",
            next_due_date=date(2026, 11, 5),
            description="Plano anual",
            cycle=BillingCycle.YEARLY,
            discount=EarlyPaymentDiscountRequest(value=Decimal("10"), due_date_limit_days=5),
            fine=PenaltyRequest(value=Decimal("2")),
            interest=PenaltyRequest(value=Decimal("1")),
            max_installments=6,
        )

        terms = build_terms(draft, request)

        assert terms.value == Decimal("200.00")
        assert terms.cycle is BillingCycle.YEARLY
        assert terms.discount.due_date_limit_days == 5
        assert terms.fine.value == Decimal("2")
        assert terms.max_installments == 6

    def test_end_date_before_first_due_rejected(self, draft, tuition_candidate):
        draft.add_item(tuition_candidate)
        request = SubmitSubscriptionRequest(
            customer="cus_1",
            next_due_date=date(2026, 11, 5),
            description="Plano",
            end_date=date(2026, 10, 5),
        )

        with pytest.raises(ValidationError, match="end_date"):
            build_terms(draft, request)

    def test_negative_fine_rejected(self, draft, tuition_candidate):
        draft.add_item(tuition_candidate)
        request = SubmitSubscriptionRequest(
            customer="cus_1",
            next_due_date=date(2026, 11, 5),
            description="Plano",
            fine=PenaltyRequest(value=Decimal("-1")),
        )

        with pytest.raises(ValidationError) as exc_info:
            build_terms(draft, request)

        assert exc_info.value.field == "value"
