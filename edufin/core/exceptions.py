"""
Domain exceptions for the charge composer.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class EduFinError(Exception):
    """Base exception for all edufin errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(EduFinError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )
        self.field = field

    @classmethod
    def from_pydantic(cls, exc: Any) -> "ValidationError":
        """Build from the first error of a ``pydantic.ValidationError``."""
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "__root__"
        message = first["msg"].removeprefix("Value error, ")
        return cls(field, message, first.get("input"))


# Lookup Exceptions
class NotFoundError(EduFinError):
    """Base exception for unknown identifiers."""

    pass


class LineItemNotFoundError(NotFoundError):
    """Line item not present in the draft."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Line item not found: {item_id}",
            code="LINE_ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class DraftNotFoundError(NotFoundError):
    """Draft not present in the repository."""

    def __init__(self, draft_id: str):
        super().__init__(
            f"Draft not found: {draft_id}",
            code="DRAFT_NOT_FOUND",
            details={"draft_id": draft_id},
        )


# Draft lifecycle Exceptions
class DraftError(EduFinError):
    """Base exception for draft lifecycle violations."""

    pass


class DraftClosedError(DraftError):
    """Draft was already submitted or discarded."""

    def __init__(self, draft_id: str, status: str):
        super().__init__(
            f"Draft {draft_id} is {status} and can no longer be changed",
            code="DRAFT_CLOSED",
            details={"draft_id": draft_id, "status": status},
        )


class EmptyDraftError(DraftError):
    """Draft has no line items to submit."""

    def __init__(self, draft_id: str):
        super().__init__(
            f"Draft {draft_id} has no line items",
            code="EMPTY_DRAFT",
            details={"draft_id": draft_id},
        )


# Gateway Exceptions
class GatewayError(EduFinError):
    """Base exception for finance backend calls."""

    pass


class GatewayUnavailableError(GatewayError):
    """Finance backend could not be reached."""

    def __init__(self, endpoint: str, reason: str | None = None):
        super().__init__(
            f"Finance backend unavailable: {endpoint}" + (f" - {reason}" if reason else ""),
            code="GATEWAY_UNAVAILABLE",
            details={"endpoint": endpoint, "reason": reason},
        )


class GatewayRejectedError(GatewayError):
    """Finance backend answered with a non-success status."""

    def __init__(self, endpoint: str, status_code: int, message: str):
        super().__init__(
            f"Finance backend rejected request to {endpoint} "
            f"(HTTP {status_code}): {message}",
            code="GATEWAY_REJECTED",
            details={
                "endpoint": endpoint,
                "status_code": status_code,
                "response_preview": message[:200],
            },
        )
        self.status_code = status_code


class ConfigurationError(EduFinError):
    """Configuration error."""

    pass
