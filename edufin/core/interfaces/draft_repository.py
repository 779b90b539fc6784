"""Abstract interface for holding open drafts between requests."""

from abc import ABC, abstractmethod

from edufin.core.services.invoice_draft import InvoiceDraft


class IDraftRepository(ABC):
    """Interface for draft lookup by id."""

    @abstractmethod
    def add(self, draft: InvoiceDraft) -> InvoiceDraft:
        """Register a new draft."""
        pass

    @abstractmethod
    def get(self, draft_id: str) -> InvoiceDraft:
        """Get a draft by id; raises DraftNotFoundError when unknown."""
        pass

    @abstractmethod
    def remove(self, draft_id: str) -> None:
        """Forget a draft; raises DraftNotFoundError when unknown."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of drafts held."""
        pass
