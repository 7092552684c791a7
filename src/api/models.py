"""Request/Response models for API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.config.constants import RelevanceReason


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConsultContext(CamelModel):
    """Optional site context for a consultation question."""

    location: str | None = None
    soil_type: str | None = None
    space_size: str | None = None
    current_date: str | None = None
    season: str | None = None


class ConsultRequest(CamelModel):
    """Request model for the ask endpoint."""

    question: str = Field(..., min_length=1, description="User's gardening question")
    context: ConsultContext | None = Field(None, description="Optional site context")


class PlanRequest(CamelModel):
    """Request model for the design plan endpoint."""

    space_size: str = Field(..., description="Size of the site")
    soil_type: str = Field(..., description="Soil description")
    goals: str = Field(..., description="Design goals in free text")
    location: str = Field(..., description="Site location")


class DiagnoseRequest(CamelModel):
    """Request model for the plant diagnosis endpoint."""

    plant: str = Field(..., description="Affected plant")
    problem: str = Field(..., description="Observed symptoms")
    timeframe: str = Field(..., description="When the symptoms appeared")
    location: str = Field(..., description="Site location")


class GridPlanRequest(CamelModel):
    """Request model for the grid plan endpoint."""

    width: float = Field(..., gt=0, description="Plot width in feet")
    length: float = Field(..., gt=0, description="Plot length in feet")
    plants: str = Field(..., min_length=1, description="Plants to include")
    location: str | None = Field(None, description="Site location")
    zone: str | None = Field(None, description="USDA hardiness zone")
    soil_type: str | None = Field(None, description="Soil description")


class ConsultationResponse(CamelModel):
    """Response for every dispatched operation, answered or refused."""

    response: str = Field(..., description="Generated answer or refusal text")
    usage: dict[str, Any] | None = Field(None, description="Upstream token usage")
    is_off_topic: bool = Field(..., description="True when the request was refused")
    validation_reason: RelevanceReason | None = Field(
        None, description="Classifier reason for a refusal"
    )


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    timestamp: str = Field(..., description="Server time (ISO 8601, UTC)")


class ErrorResponse(BaseModel):
    """Body of 4xx/5xx JSON responses."""

    error: str
    details: str | None = None
