"""Application use cases."""

from edufin.application.use_cases.compose_draft import (
    ComposeDraftUseCase,
    draft_to_response,
    priced_item_to_response,
)
from edufin.application.use_cases.submit_invoice import (
    SubmissionResult,
    SubmitInvoiceUseCase,
    build_metadata,
)
from edufin.application.use_cases.submit_subscription import (
    SubmitSubscriptionUseCase,
    build_terms,
)

__all__ = [
    "ComposeDraftUseCase",
    "draft_to_response",
    "priced_item_to_response",
    "SubmitInvoiceUseCase",
    "SubmitSubscriptionUseCase",
    "SubmissionResult",
    "build_metadata",
    "build_terms",
]
