"""In-process draft repository.

Drafts live only as long as the API process; a draft is owned by the
session that created it and is dropped on discard. Submitted drafts stay
readable for ``DRAFTS_SUBMITTED_RETENTION_SECONDS`` and are evicted after.
"""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from edufin.config import get_logger, get_settings
from edufin.core.exceptions import DraftNotFoundError
from edufin.core.interfaces import IDraftRepository
from edufin.core.services.invoice_draft import DraftStatus, InvoiceDraft

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryDraftRepository(IDraftRepository):
    """Dict-backed draft lookup with eviction of submitted drafts."""

    def __init__(
        self,
        retention_seconds: float | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if retention_seconds is None:
            retention_seconds = get_settings().drafts.submitted_retention_seconds
        self._retention = timedelta(seconds=retention_seconds)
        self._clock = clock or _utcnow
        self._drafts: dict[str, InvoiceDraft] = {}

    def add(self, draft: InvoiceDraft) -> InvoiceDraft:
        self.evict_submitted()
        self._drafts[draft.id] = draft
        return draft

    def get(self, draft_id: str) -> InvoiceDraft:
        draft = self._drafts.get(draft_id)
        if draft is None:
            raise DraftNotFoundError(draft_id)
        return draft

    def remove(self, draft_id: str) -> None:
        if self._drafts.pop(draft_id, None) is None:
            raise DraftNotFoundError(draft_id)
        logger.debug("draft_forgotten", draft_id=draft_id)

    def count(self) -> int:
        self.evict_submitted()
        return len(self._drafts)

    def evict_submitted(self) -> int:
        """Drop submitted drafts older than the retention window."""
        cutoff = self._clock() - self._retention
        expired = [
            draft_id
            for draft_id, draft in self._drafts.items()
            if draft.status is DraftStatus.SUBMITTED
            and draft.submitted_at is not None
            and draft.submitted_at <= cutoff
        ]
        for draft_id in expired:
            del self._drafts[draft_id]
        if expired:
            logger.info("submitted_drafts_evicted", count=len(expired))
        return len(expired)


# Singleton
_repository: InMemoryDraftRepository | None = None


def get_draft_repository() -> InMemoryDraftRepository:
    """Get or create the process-wide draft repository."""
    global _repository
    if _repository is None:
        _repository = InMemoryDraftRepository()
    return _repository


def reset_draft_repository() -> None:
    """Drop all drafts (for testing)."""
    global _repository
    _repository = None
