"""Data transfer objects for API requests, responses, and backend payloads."""

from edufin.application.dto.payloads import (
    build_charge_payload,
    build_subscription_payload,
    line_item_payload,
)
from edufin.application.dto.requests import (
    AddLineItemRequest,
    EarlyPaymentDiscountRequest,
    PenaltyRequest,
    SubmitInvoiceRequest,
    SubmitSubscriptionRequest,
)
from edufin.application.dto.responses import (
    DraftResponse,
    ErrorResponse,
    HealthResponse,
    LineItemResponse,
    SubmissionResponse,
)

__all__ = [
    # Requests
    "AddLineItemRequest",
    "SubmitInvoiceRequest",
    "SubmitSubscriptionRequest",
    "EarlyPaymentDiscountRequest",
    "PenaltyRequest",
    # Responses
    "LineItemResponse",
    "DraftResponse",
    "SubmissionResponse",
    "HealthResponse",
    "ErrorResponse",
    # Payloads
    "build_charge_payload",
    "build_subscription_payload",
    "line_item_payload",
]
