"""
Line item domain entities.

A ``LineItem`` only exists once the Line Item Store has validated it, so its
fields are always in range. A ``LineItemCandidate`` is the raw, unchecked
input typed into the "add item" form.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Upper bounds keep every derived amount within Decimal context precision
MAX_QUANTITY = 1_000_000
MAX_AMOUNT = Decimal("1000000000000")


class LineItem(BaseModel):
    """One billable row of a draft charge."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)
    unit_price: Decimal = Field(..., ge=0, le=MAX_AMOUNT)
    # flat amount, not a percentage
    discount: Decimal = Field(default=Decimal("0"), ge=0, le=MAX_AMOUNT)
    tax_rate: Decimal = Field(default=Decimal("0"), ge=0, le=100)  # percent


class CatalogProduct(BaseModel):
    """Sellable course or service that can prefill a line item."""

    id: str
    name: str
    price: Decimal = Field(..., ge=0)


@dataclass(frozen=True)
class LineItemCandidate:
    """Unvalidated line item fields as entered by the user."""

    description: Any = ""
    quantity: Any = 1
    unit_price: Any = 0
    discount: Any = 0
    tax_rate: Any = 0

    @classmethod
    def from_product(
        cls,
        product: CatalogProduct,
        quantity: Any = 1,
        discount: Any = 0,
        tax_rate: Any = 0,
    ) -> "LineItemCandidate":
        """Prefill description and unit price from a catalog product."""
        return cls(
            description=product.name,
            quantity=quantity,
            unit_price=product.price,
            discount=discount,
            tax_rate=tax_rate,
        )

    def with_product(self, product: CatalogProduct) -> "LineItemCandidate":
        """Keep quantity, discount and tax; take name and price from ``product``."""
        return replace(self, description=product.name, unit_price=product.price)
