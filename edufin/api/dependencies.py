"""
FastAPI dependency providers.

Routes depend on these functions so tests can swap implementations with
``app.dependency_overrides``.
"""

from fastapi import Depends

from edufin.application.use_cases import (
    ComposeDraftUseCase,
    SubmitInvoiceUseCase,
    SubmitSubscriptionUseCase,
)
from edufin.core.interfaces import IChargeGateway, IDraftRepository
from edufin.infrastructure.gateway import get_charge_gateway
from edufin.infrastructure.storage import get_draft_repository


def get_drafts() -> IDraftRepository:
    """Get draft repository."""
    return get_draft_repository()


def get_gateway() -> IChargeGateway:
    """Get finance backend gateway."""
    return get_charge_gateway()


def get_compose_draft_use_case(
    drafts: IDraftRepository = Depends(get_drafts),
) -> ComposeDraftUseCase:
    """Get compose draft use case."""
    return ComposeDraftUseCase(draft_repository=drafts)


def get_submit_invoice_use_case(
    drafts: IDraftRepository = Depends(get_drafts),
    gateway: IChargeGateway = Depends(get_gateway),
) -> SubmitInvoiceUseCase:
    """Get submit invoice use case."""
    return SubmitInvoiceUseCase(draft_repository=drafts, gateway=gateway)


def get_submit_subscription_use_case(
    drafts: IDraftRepository = Depends(get_drafts),
    gateway: IChargeGateway = Depends(get_gateway),
) -> SubmitSubscriptionUseCase:
    """Get submit subscription use case."""
    return SubmitSubscriptionUseCase(draft_repository=drafts, gateway=gateway)
