"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation. Line item fields are only
type-checked here; range checks belong to the Line Item Store so that API
and in-process callers get the same ValidationError.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from edufin.core.entities.charge import (
    BillingCycle,
    BillingType,
    InvoiceStatus,
    SubscriptionStatus,
)
from edufin.core.entities.line_item import LineItemCandidate


class AddLineItemRequest(BaseModel):
    """A line item typed into the "add item" form."""

    description: str = Field(default="", description="Item label", examples=["MBA em Gestão"])
    quantity: Decimal = Field(
        default=Decimal("1"), description="Units, a whole number of at least 1"
    )
    unit_price: Decimal = Field(default=Decimal("0"), description="Price per unit")
    discount: Decimal = Field(default=Decimal("0"), description="Flat discount amount")
    tax_rate: Decimal = Field(default=Decimal("0"), description="Tax percentage (0-100)")

    def to_candidate(self) -> LineItemCandidate:
        return LineItemCandidate(
            description=self.description,
            quantity=self.quantity,
            unit_price=self.unit_price,
            discount=self.discount,
            tax_rate=self.tax_rate,
        )


class SubmitInvoiceRequest(BaseModel):
    """Charge metadata sent along with the composed items."""

    client_id: str = Field(..., description="Client being charged")
    invoice_number: str | None = Field(
        default=None,
        description="Charge number (generated when omitted)",
        examples=["COB-2610-0042"],
    )
    issue_date: date | None = Field(default=None, description="Defaults to today")
    due_date: date | None = Field(
        default=None,
        description="Defaults to issue date plus the configured number of days",
    )
    status: InvoiceStatus | None = Field(default=None, description="Initial charge status")
    notes: str | None = Field(default=None, description="Free-text notes")


class EarlyPaymentDiscountRequest(BaseModel):
    value: Decimal = Field(..., description="Discount amount")
    due_date_limit_days: int = Field(
        default=0, description="Days before due date the discount still applies"
    )


class PenaltyRequest(BaseModel):
    value: Decimal = Field(..., description="Penalty amount or percentage")


class SubmitSubscriptionRequest(BaseModel):
    """Recurring charge terms; the amount comes from the draft total."""

    customer: str = Field(..., description="Gateway customer ID", examples=["cus_000005219613"])
    billing_type: BillingType = Field(default=BillingType.CREDIT_CARD)
    next_due_date: date = Field(..., description="First due date")
    description: str = Field(..., description="Subscription description")
    cycle: BillingCycle = Field(default=BillingCycle.MONTHLY)
    discount: EarlyPaymentDiscountRequest | None = None
    fine: PenaltyRequest | None = None
    interest: PenaltyRequest | None = None
    max_installments: int | None = Field(default=None, description="Stop after N charges")
    end_date: date | None = Field(default=None, description="Last possible due date")
    send_email: bool = Field(default=True, description="Notify the customer by email")
    status: SubscriptionStatus = Field(default=SubscriptionStatus.ACTIVE)
