"""Core domain entities."""

from edufin.core.entities.charge import (
    BillingCycle,
    BillingType,
    EarlyPaymentDiscount,
    InvoiceMetadata,
    InvoiceStatus,
    Penalty,
    SubscriptionStatus,
    SubscriptionTerms,
)
from edufin.core.entities.line_item import (
    CatalogProduct,
    LineItem,
    LineItemCandidate,
)

__all__ = [
    # Line item entities
    "LineItem",
    "LineItemCandidate",
    "CatalogProduct",
    # Charge entities
    "InvoiceMetadata",
    "InvoiceStatus",
    "BillingType",
    "BillingCycle",
    "SubscriptionStatus",
    "SubscriptionTerms",
    "EarlyPaymentDiscount",
    "Penalty",
]
