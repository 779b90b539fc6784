"""Draft storage implementations."""

from edufin.infrastructure.storage.memory_drafts import (
    InMemoryDraftRepository,
    get_draft_repository,
    reset_draft_repository,
)

__all__ = [
    "InMemoryDraftRepository",
    "get_draft_repository",
    "reset_draft_repository",
]
