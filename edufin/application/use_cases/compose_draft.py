"""Compose Draft Use Case: create, edit, and discard draft charges."""

from edufin.application.dto.requests import AddLineItemRequest
from edufin.application.dto.responses import DraftResponse, LineItemResponse
from edufin.config import get_logger, get_settings
from edufin.core.entities.line_item import LineItem
from edufin.core.exceptions import LineItemNotFoundError
from edufin.core.interfaces import IDraftRepository
from edufin.core.services.invoice_draft import InvoiceDraft
from edufin.core.services.pricing_engine import PricedLineItem, price_item, round_money

logger = get_logger(__name__)


def priced_item_to_response(priced: PricedLineItem, places: int = 2) -> LineItemResponse:
    item = priced.item
    return LineItemResponse(
        id=item.id,
        description=item.description,
        quantity=item.quantity,
        unit_price=float(item.unit_price),
        discount=float(item.discount),
        tax_rate=float(item.tax_rate),
        subtotal=float(round_money(priced.subtotal, places)),
        tax_amount=float(round_money(priced.tax_amount, places)),
        total=float(round_money(priced.total, places)),
    )


def draft_to_response(draft: InvoiceDraft) -> DraftResponse:
    """Convert a draft to its API representation."""
    billing = get_settings().billing
    priced = draft.priced_items()
    return DraftResponse(
        id=draft.id,
        status=draft.status.value,
        currency=billing.currency,
        items=[priced_item_to_response(p, billing.money_places) for p in priced],
        item_count=len(priced),
        total=float(round_money(draft.total, billing.money_places)),
        created_at=draft.created_at,
        submitted_reference=draft.submitted_reference,
    )


class ComposeDraftUseCase:
    """Owns the add/remove commands of drafts held in a repository."""

    def __init__(self, draft_repository: IDraftRepository | None = None):
        self._drafts = draft_repository

    def _get_drafts(self) -> IDraftRepository:
        if self._drafts is None:
            from edufin.infrastructure.storage import get_draft_repository

            self._drafts = get_draft_repository()
        return self._drafts

    def create(self) -> InvoiceDraft:
        draft = self._get_drafts().add(InvoiceDraft())
        logger.info("draft_created", draft_id=draft.id)
        return draft

    def get(self, draft_id: str) -> InvoiceDraft:
        return self._get_drafts().get(draft_id)

    def add_item(self, draft_id: str, request: AddLineItemRequest) -> LineItem:
        """
        Validate and append a line item.

        Raises:
            DraftNotFoundError: unknown draft.
            DraftClosedError: draft no longer open.
            ValidationError: a field is out of range; the draft is unchanged.
        """
        draft = self.get(draft_id)
        item_id = draft.add_item(request.to_candidate())
        logger.info(
            "line_item_added",
            draft_id=draft_id,
            item_id=item_id,
            items=len(draft.store),
            total=str(draft.total),
        )
        return draft.store.get_item(item_id)

    def remove_item(self, draft_id: str, item_id: str, missing_ok: bool = False) -> None:
        """
        Remove a line item.

        With ``missing_ok`` an unknown item id is ignored, which makes the
        delete idempotent for callers that retry.
        """
        draft = self.get(draft_id)
        try:
            draft.remove_item(item_id)
        except LineItemNotFoundError:
            if not missing_ok:
                raise
            logger.debug("line_item_already_removed", draft_id=draft_id, item_id=item_id)
            return
        logger.info("line_item_removed", draft_id=draft_id, item_id=item_id)

    def discard(self, draft_id: str) -> None:
        draft = self.get(draft_id)
        draft.discard()
        self._get_drafts().remove(draft_id)

    def item_response(self, draft: InvoiceDraft, item_id: str) -> LineItemResponse:
        places = get_settings().billing.money_places
        return priced_item_to_response(price_item(draft.store.get_item(item_id)), places)

    def to_response(self, draft: InvoiceDraft) -> DraftResponse:
        return draft_to_response(draft)
