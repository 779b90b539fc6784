"""Core domain services."""

from edufin.core.services.charge_numbers import generate_charge_number
from edufin.core.services.invoice_draft import DraftStatus, InvoiceDraft
from edufin.core.services.line_item_store import LineItemStore, validate_candidate
from edufin.core.services.pricing_engine import (
    PricedLineItem,
    compute_grand_total,
    compute_item_subtotal,
    compute_item_tax,
    compute_item_total,
    price_item,
    price_items,
    round_money,
)

__all__ = [
    "LineItemStore",
    "validate_candidate",
    "InvoiceDraft",
    "DraftStatus",
    "PricedLineItem",
    "compute_item_subtotal",
    "compute_item_tax",
    "compute_item_total",
    "compute_grand_total",
    "price_item",
    "price_items",
    "round_money",
    "generate_charge_number",
]
