"""Finance backend adapters."""

from edufin.infrastructure.gateway.rest_gateway import (
    RestChargeGateway,
    get_charge_gateway,
    reset_charge_gateway,
)

__all__ = [
    "RestChargeGateway",
    "get_charge_gateway",
    "reset_charge_gateway",
]
