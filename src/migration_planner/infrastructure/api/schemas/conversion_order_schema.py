"""
Pydantic schemas for conversion order API endpoints.

These schemas define the API request/response contracts and provide validation.
They are separate from application layer DTOs (which use dataclasses).
"""

from pydantic import BaseModel, Field

from migration_planner.infrastructure.api.schemas.dependency_schema import (
    ComponentAnalysisApiModel,
)


class ConversionWaveApiModel(BaseModel):
    """A set of components that can be converted together."""

    wave: int = Field(..., ge=1, description="1-based wave number")
    components: list[str] = Field(..., description="Component ids in this wave")
    blocked_by: list[str] = Field(
        default_factory=list,
        description="Components from earlier waves this wave depends on",
    )
    estimated_hours: float = Field(..., ge=0.0)
    component_count: int = Field(..., ge=1)
    requires_coordination: bool = Field(
        False, description="Wave contains circular dependencies"
    )


class ConversionOrderApiResponse(BaseModel):
    """Recommended conversion order."""

    waves: list[ConversionWaveApiModel]
    circular_dependencies: list[list[str]]
    recommendations: list[str]
    total_components: int
    estimated_waves: int
    ordered_components: list[str] = Field(
        ..., description="All components flattened in wave order"
    )
    estimated_hours: float
    warnings: list[str] = Field(default_factory=list)


class ConversionReadinessApiRequest(BaseModel):
    """Request to check whether a component can be converted now."""

    components: list[ComponentAnalysisApiModel] = Field(default_factory=list)
    component_id: str = Field(
        ..., min_length=1, description="Component id or bare name to check"
    )
    already_converted: list[str] = Field(
        default_factory=list, description="Ids of components already converted"
    )
    include_base_components: bool | None = None


class ConversionReadinessApiResponse(BaseModel):
    """Conversion readiness of one component."""

    component_id: str
    can_convert: bool
    blocked_by: list[str] = Field(
        default_factory=list,
        description="Unconverted Aura/Visualforce dependencies",
    )
