"""Standardized response builder for ConsultationResponse."""

from typing import Any

from src.api.models import ConsultationResponse, ErrorResponse


def build_response(
    response: str,
    is_off_topic: bool = False,
    **overrides: Any,
) -> dict[str, Any]:
    """Build a ConsultationResponse-compatible dict with Pydantic validation.

    Keys are camelCase and unset optional fields are omitted.
    """
    fields: dict[str, Any] = {
        "response": response,
        "usage": None,
        "is_off_topic": is_off_topic,
        "validation_reason": None,
    }
    fields.update(overrides)
    return ConsultationResponse(**fields).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def build_error(error: str, details: str | None = None) -> dict[str, Any]:
    """Build an ErrorResponse body; ``details`` is omitted when not given."""
    return ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
