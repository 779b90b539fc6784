"""
Charge and subscription metadata entities.

These carry the non-pricing fields of a submission: who is billed, when,
and under which recurring terms.
"""

from datetime import date, timedelta
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class InvoiceStatus(str, Enum):
    """Status a charge is created with on the backend."""

    DRAFT = "draft"
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"


class BillingType(str, Enum):
    """Payment method accepted for a charge."""

    BOLETO = "BOLETO"
    CREDIT_CARD = "CREDIT_CARD"
    PIX = "PIX"
    UNDEFINED = "UNDEFINED"


class BillingCycle(str, Enum):
    """Recurrence of a subscription charge."""

    WEEKLY = "WEEKLY"
    BIWEEKLY = "BIWEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMIANNUALLY = "SEMIANNUALLY"
    YEARLY = "YEARLY"


class SubscriptionStatus(str, Enum):
    """Whether the gateway should start charging right away."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class InvoiceMetadata(BaseModel):
    """Top-level fields of a one-off charge."""

    client_id: str = Field(..., min_length=1)
    invoice_number: str = Field(..., min_length=1)
    issue_date: date = Field(default_factory=date.today)
    due_date: date
    status: InvoiceStatus = InvoiceStatus.PENDING
    notes: str | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "InvoiceMetadata":
        """Due date may not precede the issue date."""
        if self.due_date < self.issue_date:
            raise ValueError("due_date must not be before issue_date")
        return self

    @staticmethod
    def default_due_date(issue_date: date, days: int) -> date:
        return issue_date + timedelta(days=days)


class EarlyPaymentDiscount(BaseModel):
    """Discount granted when paying up to N days before the due date."""

    value: Decimal = Field(..., ge=0)
    due_date_limit_days: int = Field(default=0, ge=0)


class Penalty(BaseModel):
    """Fine or interest applied to late payments."""

    value: Decimal = Field(..., ge=0)


class SubscriptionTerms(BaseModel):
    """Recurring charge definition sent to the gateway."""

    customer: str = Field(..., min_length=1)
    billing_type: BillingType = BillingType.CREDIT_CARD
    value: Decimal = Field(..., gt=0)
    next_due_date: date
    description: str = Field(..., min_length=1)
    cycle: BillingCycle = BillingCycle.MONTHLY
    discount: EarlyPaymentDiscount | None = None
    fine: Penalty | None = None
    interest: Penalty | None = None
    max_installments: int | None = Field(default=None, ge=1)
    end_date: date | None = None
    send_email: bool = True
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE

    @model_validator(mode="after")
    def check_end_date(self) -> "SubscriptionTerms":
        if self.end_date is not None and self.end_date < self.next_due_date:
            raise ValueError("end_date must not be before next_due_date")
        return self
