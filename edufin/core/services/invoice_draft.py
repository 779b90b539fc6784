"""Invoice draft: one line item store plus its client-side lifecycle."""

from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import uuid4

from edufin.config import get_logger
from edufin.core.entities.line_item import LineItem, LineItemCandidate
from edufin.core.exceptions import DraftClosedError, EmptyDraftError
from edufin.core.services.line_item_store import LineItemStore
from edufin.core.services.pricing_engine import PricedLineItem, price_items

logger = get_logger(__name__)


class DraftStatus(str, Enum):
    """Lifecycle of a draft."""

    OPEN = "open"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    DISCARDED = "discarded"


class InvoiceDraft:
    """
    A not-yet-submitted charge.

    Only an open draft accepts new items, removals, or submission. While a
    submission is in flight the draft is ``submitting`` and rejects further
    changes. Once the backend has accepted it, the draft is ``submitted`` and
    the server owns the persisted record.
    """

    def __init__(
        self,
        draft_id: str | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        self.id = draft_id or str(uuid4())
        self.created_at = datetime.now(timezone.utc)
        self.status = DraftStatus.OPEN
        self.submitted_reference: str | None = None
        self.submitted_at: datetime | None = None
        self.store = LineItemStore(id_factory=id_factory)

    @property
    def is_open(self) -> bool:
        return self.status is DraftStatus.OPEN

    @property
    def items(self) -> tuple[LineItem, ...]:
        return self.store.list_items()

    @property
    def total(self) -> Decimal:
        return self.store.total

    def priced_items(self) -> list[PricedLineItem]:
        return price_items(self.store.list_items())

    def add_item(self, candidate: LineItemCandidate) -> str:
        self._ensure_open()
        return self.store.add_item(candidate)

    def remove_item(self, item_id: str) -> None:
        self._ensure_open()
        self.store.remove_item(item_id)

    def ensure_submittable(self) -> None:
        """
        Raises:
            DraftClosedError: if the draft is not open (already submitting,
                submitted, or discarded).
            EmptyDraftError: if it has no items.
        """
        self._ensure_open()
        if len(self.store) == 0:
            raise EmptyDraftError(self.id)

    def begin_submission(self) -> None:
        """Lock the draft while its submission is in flight."""
        self.ensure_submittable()
        self.status = DraftStatus.SUBMITTING

    def complete_submission(self, reference: str | None = None) -> None:
        self._ensure_status(DraftStatus.SUBMITTING)
        self.status = DraftStatus.SUBMITTED
        self.submitted_reference = reference
        self.submitted_at = datetime.now(timezone.utc)
        logger.info("draft_submitted", draft_id=self.id, reference=reference)

    def abort_submission(self) -> None:
        """Reopen the draft after a failed submission so the user can retry."""
        self._ensure_status(DraftStatus.SUBMITTING)
        self.status = DraftStatus.OPEN
        logger.warning("draft_submission_aborted", draft_id=self.id)

    def discard(self) -> None:
        self._ensure_open()
        self.status = DraftStatus.DISCARDED
        logger.info("draft_discarded", draft_id=self.id, items=len(self.store))

    def _ensure_open(self) -> None:
        self._ensure_status(DraftStatus.OPEN)

    def _ensure_status(self, expected: DraftStatus) -> None:
        if self.status is not expected:
            raise DraftClosedError(self.id, self.status.value)
