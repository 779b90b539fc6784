"""Core interfaces (ports) for dependency injection."""

from edufin.core.interfaces.draft_repository import IDraftRepository
from edufin.core.interfaces.gateway import GatewayReceipt, IChargeGateway

__all__ = [
    "IChargeGateway",
    "GatewayReceipt",
    "IDraftRepository",
]
