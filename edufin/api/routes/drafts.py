"""Draft charge composition and submission endpoints."""

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from edufin.api.dependencies import (
    get_compose_draft_use_case,
    get_submit_invoice_use_case,
    get_submit_subscription_use_case,
)
from edufin.application.dto.requests import (
    AddLineItemRequest,
    SubmitInvoiceRequest,
    SubmitSubscriptionRequest,
)
from edufin.application.dto.responses import (
    DraftResponse,
    ErrorResponse,
    LineItemResponse,
    SubmissionResponse,
)
from edufin.application.use_cases import (
    ComposeDraftUseCase,
    SubmitInvoiceUseCase,
    SubmitSubscriptionUseCase,
)

router = APIRouter(prefix="/api/drafts", tags=["drafts"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_SUBMIT_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


@router.post("", response_model=DraftResponse, status_code=status.HTTP_201_CREATED)
async def create_draft(
    use_case: ComposeDraftUseCase = Depends(get_compose_draft_use_case),
) -> DraftResponse:
    """Start an empty draft charge."""
    return use_case.to_response(use_case.create())


@router.get("/{draft_id}", response_model=DraftResponse, responses=_NOT_FOUND)
async def get_draft(
    draft_id: str,
    use_case: ComposeDraftUseCase = Depends(get_compose_draft_use_case),
) -> DraftResponse:
    """Draft with priced line items and grand total."""
    return use_case.to_response(use_case.get(draft_id))


@router.delete(
    "/{draft_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**_NOT_FOUND, 409: {"model": ErrorResponse}},
)
async def discard_draft(
    draft_id: str,
    use_case: ComposeDraftUseCase = Depends(get_compose_draft_use_case),
) -> Response:
    """Throw away an open draft."""
    use_case.discard(draft_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{draft_id}/items",
    response_model=LineItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def add_line_item(
    draft_id: str,
    request: AddLineItemRequest,
    use_case: ComposeDraftUseCase = Depends(get_compose_draft_use_case),
) -> LineItemResponse:
    """Validate and append a line item; returns it with computed amounts."""
    item = use_case.add_item(draft_id, request)
    return use_case.item_response(use_case.get(draft_id), item.id)


@router.delete(
    "/{draft_id}/items/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**_NOT_FOUND, 409: {"model": ErrorResponse}},
)
async def remove_line_item(
    draft_id: str,
    item_id: str,
    missing_ok: bool = Query(default=False, description="Ignore unknown item ids"),
    use_case: ComposeDraftUseCase = Depends(get_compose_draft_use_case),
) -> Response:
    """Remove a line item by id."""
    use_case.remove_item(draft_id, item_id, missing_ok=missing_ok)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{draft_id}/submit",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_SUBMIT_ERRORS,
)
async def submit_invoice(
    draft_id: str,
    request: SubmitInvoiceRequest,
    use_case: SubmitInvoiceUseCase = Depends(get_submit_invoice_use_case),
) -> SubmissionResponse:
    """Forward the draft to the finance backend as a one-off charge."""
    result = await use_case.execute(draft_id, request)
    return use_case.to_response(result)


@router.post(
    "/{draft_id}/subscription",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_SUBMIT_ERRORS,
)
async def submit_subscription(
    draft_id: str,
    request: SubmitSubscriptionRequest,
    use_case: SubmitSubscriptionUseCase = Depends(get_submit_subscription_use_case),
) -> SubmissionResponse:
    """Forward the draft total as a recurring charge."""
    result = await use_case.execute(draft_id, request)
    return use_case.to_response(result)
