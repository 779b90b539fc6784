"""
Abstract interface for the finance backend.

The backend owns the payment-gateway integration (Asaas/Lytex); from here it
is an opaque endpoint that accepts a JSON charge and answers with a record.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class GatewayReceipt:
    """What the backend returned for an accepted submission."""

    reference: str | None
    status: str | None = None
    status_code: int = 201
    body: dict[str, Any] = field(default_factory=dict)


class IChargeGateway(ABC):
    """Interface for submitting charges and subscriptions."""

    @abstractmethod
    async def create_charge(
        self,
        payload: dict[str, Any],
        idempotency_key: str | None = None,
    ) -> GatewayReceipt:
        """Create a one-off charge from a composed draft."""
        pass

    @abstractmethod
    async def create_subscription(
        self,
        payload: dict[str, Any],
        idempotency_key: str | None = None,
    ) -> GatewayReceipt:
        """Create a recurring charge."""
        pass
