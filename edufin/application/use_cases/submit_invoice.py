"""Submit Invoice Use Case: forward a composed draft as a one-off charge."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from edufin.application.dto.payloads import build_charge_payload
from edufin.application.dto.requests import SubmitInvoiceRequest
from edufin.application.dto.responses import SubmissionResponse
from edufin.config import bound_draft, get_logger, get_settings
from edufin.core.entities.charge import InvoiceMetadata, InvoiceStatus
from edufin.core.exceptions import ValidationError
from edufin.core.interfaces import GatewayReceipt, IChargeGateway, IDraftRepository
from edufin.core.services.charge_numbers import generate_charge_number
from edufin.core.services.invoice_draft import InvoiceDraft

logger = get_logger(__name__)


@dataclass
class SubmissionResult:
    """Result of a draft submission."""

    draft: InvoiceDraft
    kind: str
    payload: dict[str, Any]
    receipt: GatewayReceipt


def build_metadata(request: SubmitInvoiceRequest, today: date | None = None) -> InvoiceMetadata:
    """
    Fill defaults and validate charge metadata.

    Raises:
        ValidationError: on an empty client, empty number, or inverted dates.
    """
    billing = get_settings().billing
    issue_date = request.issue_date or today or date.today()
    due_date = request.due_date or InvoiceMetadata.default_due_date(
        issue_date, billing.default_due_days
    )
    invoice_number = request.invoice_number
    if invoice_number is None:
        invoice_number = generate_charge_number(billing.charge_number_prefix, issue_date)

    try:
        return InvoiceMetadata(
            client_id=request.client_id.strip(),
            invoice_number=invoice_number.strip(),
            issue_date=issue_date,
            due_date=due_date,
            status=request.status or InvoiceStatus(billing.default_invoice_status),
            notes=request.notes,
        )
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e) from e


async def submit_draft(
    draft: InvoiceDraft,
    kind: str,
    payload: dict[str, Any],
    send: Callable[..., Awaitable[GatewayReceipt]],
) -> GatewayReceipt:
    """
    Send ``payload`` once, keeping the draft locked while the call is in flight.

    ``send`` is the gateway coroutine function. On failure, cancellation
    included, the draft is reopened and the error propagates; nothing is
    resent from here.
    """
    gateway_settings = get_settings().gateway
    idempotency_key = draft.id if gateway_settings.idempotency_enabled else None

    draft.begin_submission()
    logger.info("draft_submission_started", kind=kind, items=len(draft.store))
    try:
        receipt = await send(payload, idempotency_key=idempotency_key)
    except BaseException as e:
        draft.abort_submission()
        logger.error(
            "draft_submission_failed",
            kind=kind,
            error_type=e.__class__.__name__,
            error=str(e),
        )
        raise

    draft.complete_submission(receipt.reference)
    return receipt


class SubmitInvoiceUseCase:
    """Validate metadata, package items and total, and post the charge."""

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

    async def execute(self, draft_id: str, request: SubmitInvoiceRequest) -> SubmissionResult:
        """
        Submit the draft as a charge.

        Raises:
            DraftNotFoundError: unknown draft.
            DraftClosedError: draft already submitting, submitted, or discarded.
            EmptyDraftError: draft has no items.
            ValidationError: metadata is invalid.
            GatewayError: the backend refused or could not be reached.
        """
        draft = self._get_drafts().get(draft_id)
        gateway = self._get_gateway()

        with bound_draft(draft.id):
            draft.ensure_submittable()
            metadata = build_metadata(request)
            payload = build_charge_payload(
                draft.items, metadata, get_settings().billing.money_places
            )
            receipt = await submit_draft(draft, "charge", payload, gateway.create_charge)

            logger.info(
                "charge_submitted",
                invoice_number=metadata.invoice_number,
                reference=receipt.reference,
                total=payload["total"],
            )

        return SubmissionResult(draft=draft, kind="charge", payload=payload, receipt=receipt)

    def to_response(self, result: SubmissionResult) -> SubmissionResponse:
        return submission_to_response(result)


def submission_to_response(result: SubmissionResult) -> SubmissionResponse:
    total = result.payload.get("total", result.payload.get("value", 0.0))
    return SubmissionResponse(
        draft_id=result.draft.id,
        kind=result.kind,
        reference=result.receipt.reference,
        status=result.receipt.status,
        total=total,
        payload=result.payload,
    )
