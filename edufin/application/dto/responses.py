"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization. Money fields are rounded
to currency precision and rendered as JSON numbers.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class LineItemResponse(BaseModel):
    """Line item with its computed amounts."""

    id: str = Field(..., description="Line item ID")
    description: str = Field(..., description="Item label")
    quantity: int = Field(..., description="Units")
    unit_price: float = Field(..., description="Price per unit")
    discount: float = Field(..., description="Flat discount")
    tax_rate: float = Field(..., description="Tax percentage")
    subtotal: float = Field(..., description="After discount, before tax")
    tax_amount: float = Field(..., description="Tax on the subtotal")
    total: float = Field(..., description="Subtotal plus tax")


class DraftResponse(BaseModel):
    """Draft charge with priced items and grand total."""

    id: str = Field(..., description="Draft ID")
    status: str = Field(..., description="open, submitting, submitted or discarded")
    currency: str = Field(default="BRL", description="Currency code")
    items: list[LineItemResponse] = Field(default_factory=list)
    item_count: int = Field(default=0)
    total: float = Field(default=0.0, description="Grand total")
    created_at: datetime
    submitted_reference: str | None = Field(
        default=None, description="Backend record ID once submitted"
    )


class SubmissionResponse(BaseModel):
    """Result of forwarding a draft to the finance backend."""

    draft_id: str
    kind: str = Field(..., description="charge or subscription")
    reference: str | None = Field(default=None, description="Backend record ID")
    status: str | None = Field(default=None, description="Status reported by the backend")
    total: float = Field(..., description="Amount submitted")
    payload: dict = Field(default_factory=dict, description="Body sent to the backend")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    open_drafts: int = 0


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. LINE_ITEM_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
