"""
Wire payloads for the finance backend.

Keys are camelCase, matching what the web client posts. Amounts are JSON
numbers; computed totals are rounded to currency precision.
"""

from decimal import Decimal
from typing import Any

from edufin.core.entities.charge import InvoiceMetadata, SubscriptionTerms
from edufin.core.entities.line_item import LineItem
from edufin.core.services.pricing_engine import compute_grand_total, round_money


def _number(value: Decimal) -> float | int:
    return int(value) if value == value.to_integral_value() else float(value)


def line_item_payload(item: LineItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "description": item.description,
        "quantity": item.quantity,
        "unitPrice": _number(item.unit_price),
        "discount": _number(item.discount),
        "tax": _number(item.tax_rate),
    }


def build_charge_payload(
    items: tuple[LineItem, ...],
    metadata: InvoiceMetadata,
    places: int = 2,
) -> dict[str, Any]:
    """``{...metadata, items, total}`` for a one-off charge."""
    payload: dict[str, Any] = {
        "clientId": metadata.client_id,
        "invoiceNumber": metadata.invoice_number,
        "issueDate": metadata.issue_date.isoformat(),
        "dueDate": metadata.due_date.isoformat(),
        "status": metadata.status.value,
        "notes": metadata.notes or "",
        "items": [line_item_payload(item) for item in items],
        "total": float(round_money(compute_grand_total(items), places)),
    }
    return payload


def build_subscription_payload(
    terms: SubscriptionTerms,
    external_reference: str | None = None,
) -> dict[str, Any]:
    """Recurring charge body; optional terms left unset are omitted."""
    payload: dict[str, Any] = {
        "customer": terms.customer,
        "billingType": terms.billing_type.value,
        "value": float(terms.value),
        "nextDueDate": terms.next_due_date.isoformat(),
        "description": terms.description,
        "cycle": terms.cycle.value,
        "sendEmail": terms.send_email,
        "status": terms.status.value,
    }
    if terms.discount is not None:
        payload["discount"] = {
            "value": _number(terms.discount.value),
            "dueDateLimitDays": terms.discount.due_date_limit_days,
        }
    if terms.fine is not None:
        payload["fine"] = {"value": _number(terms.fine.value)}
    if terms.interest is not None:
        payload["interest"] = {"value": _number(terms.interest.value)}
    if terms.max_installments is not None:
        payload["maxInstallments"] = terms.max_installments
    if terms.end_date is not None:
        payload["endDate"] = terms.end_date.isoformat()
    if external_reference:
        payload["externalReference"] = external_reference
    return payload
