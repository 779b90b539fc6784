"""
Line Item Store.

Holds the ordered line items of one draft and rejects invalid input before
it reaches the pricing engine. Listeners subscribed to the store are called
after every successful mutation so they can re-read totals.
"""

from collections.abc import Callable, Iterator
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import uuid4

from edufin.config import get_logger
from edufin.core.entities.line_item import (
    MAX_AMOUNT,
    MAX_QUANTITY,
    LineItem,
    LineItemCandidate,
)
from edufin.core.exceptions import LineItemNotFoundError, ValidationError
from edufin.core.services.pricing_engine import HUNDRED, ZERO, compute_grand_total

logger = get_logger(__name__)

ChangeListener = Callable[["LineItemStore"], None]


def _parse_decimal(field: str, value: Any) -> Decimal:
    """Convert user input to a finite Decimal, going through ``str`` for floats."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(field, "must be a number", value)
    if isinstance(value, Decimal):
        parsed = value
    else:
        try:
            parsed = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(field, "must be a number", value) from None
    if not parsed.is_finite():
        raise ValidationError(field, "must be a finite number", value)
    return parsed


def _parse_quantity(value: Any) -> int:
    parsed = _parse_decimal("quantity", value)
    if parsed != parsed.to_integral_value():
        raise ValidationError("quantity", "must be a whole number", value)
    if parsed < 1:
        raise ValidationError("quantity", "must be at least 1", value)
    if parsed > MAX_QUANTITY:
        raise ValidationError("quantity", f"must not exceed {MAX_QUANTITY}", value)
    return int(parsed)


def _parse_non_negative(field: str, value: Any) -> Decimal:
    parsed = _parse_decimal(field, value)
    if parsed < ZERO:
        raise ValidationError(field, "must not be negative", value)
    return parsed


def _parse_amount(field: str, value: Any) -> Decimal:
    parsed = _parse_non_negative(field, value)
    if parsed > MAX_AMOUNT:
        raise ValidationError(field, f"must not exceed {MAX_AMOUNT}", value)
    return parsed


def validate_candidate(candidate: LineItemCandidate, item_id: str) -> LineItem:
    """
    Check every field of ``candidate`` and build the validated item.

    Raises:
        ValidationError: on the first field that is out of range.
    """
    description = candidate.description
    if not isinstance(description, str) or not description.strip():
        raise ValidationError("description", "must not be empty", description)

    quantity = _parse_quantity(candidate.quantity)
    unit_price = _parse_amount("unit_price", candidate.unit_price)
    discount = _parse_amount("discount", candidate.discount)
    tax_rate = _parse_non_negative("tax_rate", candidate.tax_rate)
    if tax_rate > HUNDRED:
        raise ValidationError("tax_rate", "must not exceed 100", candidate.tax_rate)

    return LineItem(
        id=item_id,
        description=description.strip(),
        quantity=quantity,
        unit_price=unit_price,
        discount=discount,
        tax_rate=tax_rate,
    )


class LineItemStore:
    """Ordered, validated collection of line items for a single draft."""

    def __init__(self, id_factory: Callable[[], str] | None = None):
        self._items: dict[str, LineItem] = {}
        self._id_factory = id_factory or (lambda: str(uuid4()))
        self._listeners: list[ChangeListener] = []

    def add_item(self, candidate: LineItemCandidate) -> str:
        """
        Validate ``candidate`` and append it.

        Returns:
            The id assigned to the new item.

        Raises:
            ValidationError: if any field is invalid; the store is unchanged.
        """
        item_id = self._id_factory()
        while item_id in self._items:
            item_id = self._id_factory()

        item = validate_candidate(candidate, item_id)
        self._items[item_id] = item

        logger.debug("store_item_appended", item_id=item_id, count=len(self._items))
        self._notify()
        return item_id

    def remove_item(self, item_id: str) -> None:
        """
        Remove the item with ``item_id``.

        Raises:
            LineItemNotFoundError: if no such item exists; the store is unchanged.
        """
        if item_id not in self._items:
            raise LineItemNotFoundError(item_id)
        del self._items[item_id]

        logger.debug("store_item_removed", item_id=item_id, count=len(self._items))
        self._notify()

    def list_items(self) -> tuple[LineItem, ...]:
        """Snapshot of the items in insertion order."""
        return tuple(self._items.values())

    def get_item(self, item_id: str) -> LineItem:
        try:
            return self._items[item_id]
        except KeyError:
            raise LineItemNotFoundError(item_id) from None

    @property
    def total(self) -> Decimal:
        """Grand total of the current items."""
        return compute_grand_total(self._items.values())

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """
        Call ``listener(store)`` after each add or remove.

        Returns:
            A function that unsubscribes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.list_items())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
