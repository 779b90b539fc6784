"""
Pricing engine for draft charges.

Pure functions over validated line items. Tax is applied per item after its
flat discount, so items with different tax rates compose correctly. Values
are exact ``Decimal``; rounding to currency precision is left to the
presentation and submission boundaries (``round_money``).
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from edufin.core.entities.line_item import LineItem

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class PricedLineItem:
    """A line item together with its computed amounts."""

    item: LineItem
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal


def compute_item_subtotal(item: LineItem) -> Decimal:
    """Quantity times unit price minus discount, floored at zero."""
    return max(ZERO, item.quantity * item.unit_price - item.discount)


def compute_item_tax(item: LineItem) -> Decimal:
    """Tax on the post-discount subtotal."""
    return item.tax_rate / HUNDRED * compute_item_subtotal(item)


def compute_item_total(item: LineItem) -> Decimal:
    return compute_item_subtotal(item) + compute_item_tax(item)


def compute_grand_total(items: Iterable[LineItem]) -> Decimal:
    """Sum of item totals; zero for no items."""
    return sum((compute_item_total(item) for item in items), ZERO)


def price_item(item: LineItem) -> PricedLineItem:
    subtotal = compute_item_subtotal(item)
    tax_amount = compute_item_tax(item)
    return PricedLineItem(
        item=item,
        subtotal=subtotal,
        tax_amount=tax_amount,
        total=subtotal + tax_amount,
    )


def price_items(items: Iterable[LineItem]) -> list[PricedLineItem]:
    return [price_item(item) for item in items]


def round_money(value: Decimal, places: int = 2) -> Decimal:
    """Round half-up to ``places`` decimal places."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
