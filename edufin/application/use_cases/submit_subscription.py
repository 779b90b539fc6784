"""Submit Subscription Use Case: turn a draft total into a recurring charge."""

from pydantic import ValidationError as PydanticValidationError

from edufin.application.dto.payloads import build_subscription_payload
from edufin.application.dto.requests import SubmitSubscriptionRequest
from edufin.application.dto.responses import SubmissionResponse
from edufin.application.use_cases.submit_invoice import (
    SubmissionResult,
    submission_to_response,
    submit_draft,
)
from edufin.config import bound_draft, get_logger, get_settings
from edufin.core.entities.charge import EarlyPaymentDiscount, Penalty, SubscriptionTerms
from edufin.core.exceptions import ValidationError
from edufin.core.interfaces import IChargeGateway, IDraftRepository
from edufin.core.services.invoice_draft import InvoiceDraft
from edufin.core.services.pricing_engine import round_money

logger = get_logger(__name__)


def build_terms(draft: InvoiceDraft, request: SubmitSubscriptionRequest) -> SubscriptionTerms:
    """
    Subscription terms whose value is the draft's rounded grand total.

    Raises:
        ValidationError: zero total, blank customer or description,
            negative penalties, or an end date before the first due date.
    """
    value = round_money(draft.total, get_settings().billing.money_places)
    try:
        return SubscriptionTerms(
            customer=request.customer.strip(),
            billing_type=request.billing_type,
            value=value,
            next_due_date=request.next_due_date,
            description=request.description.strip(),
            cycle=request.cycle,
            discount=(
                EarlyPaymentDiscount(**request.discount.model_dump())
                if request.discount
                else None
            ),
            fine=Penalty(value=request.fine.value) if request.fine else None,
            interest=Penalty(value=request.interest.value) if request.interest else None,
            max_installments=request.max_installments,
            end_date=request.end_date,
            send_email=request.send_email,
            status=request.status,
        )
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


class SubmitSubscriptionUseCase:
    """Create a recurring charge from a composed draft."""

    def __init__(
        self,
        draft_repository: IDraftRepository | None = None,
        gateway: IChargeGateway | None = None,
    ):
        self._drafts = draft_repository
        self._gateway = gateway

    def _get_drafts(self) -> IDraftRepository:
        if self._drafts is None:
            from edufin.infrastructure.storage import get_draft_repository

            self._drafts = get_draft_repository()
        return self._drafts

    def _get_gateway(self) -> IChargeGateway:
        if self._gateway is None:
            from edufin.infrastructure.gateway import get_charge_gateway

            self._gateway = get_charge_gateway()
        return self._gateway

    async def execute(
        self, draft_id: str, request: SubmitSubscriptionRequest
    ) -> SubmissionResult:
        """Submit the draft as a subscription; raises like SubmitInvoiceUseCase."""
        draft = self._get_drafts().get(draft_id)
        gateway = self._get_gateway()

        with bound_draft(draft.id):
            draft.ensure_submittable()
            terms = build_terms(draft, request)
            payload = build_subscription_payload(terms, external_reference=draft.id)
            receipt = await submit_draft(
                draft, "subscription", payload, gateway.create_subscription
            )

            logger.info(
                "subscription_submitted",
                cycle=terms.cycle.value,
                value=payload["value"],
                reference=receipt.reference,
            )

        return SubmissionResult(
            draft=draft, kind="subscription", payload=payload, receipt=receipt
        )

    def to_response(self, result: SubmissionResult) -> SubmissionResponse:
        return submission_to_response(result)
