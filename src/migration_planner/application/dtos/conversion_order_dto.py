"""Conversion order DTOs."""

from dataclasses import dataclass, field

from migration_planner.application.dtos.dependency_analysis_dto import (
    ComponentAnalysisDTO,
)


@dataclass
class ConversionWaveDTO:
    """One conversion wave.

    Attributes:
        wave: 1-based wave number
        components: Component ids in conversion order
        blocked_by: Already-converted ids this wave waited for
        estimated_hours: Effort estimate in hours
        component_count: Number of components in the wave
        requires_coordination: Wave contains circular dependencies
    """

    wave: int
    components: list[str]
    blocked_by: list[str]
    estimated_hours: float
    component_count: int
    requires_coordination: bool = False


@dataclass
class ConversionOrderResponse:
    """Recommended conversion order."""

    waves: list[ConversionWaveDTO]
    circular_dependencies: list[list[str]]
    recommendations: list[str]
    total_components: int
    estimated_waves: int
    ordered_components: list[str] = field(default_factory=list)
    estimated_hours: float = 0.0
    warnings: list[str] = field(default_factory=list)


@dataclass
class ConversionReadinessRequest:
    """Request to check whether one component can be converted now.

    Attributes:
        components: Analysis results, one per component
        component_id: Component to check
        already_converted: Ids of components already converted
        include_base_components: Keep edges to base/platform components
    """

    components: list[ComponentAnalysisDTO]
    component_id: str
    already_converted: list[str] = field(default_factory=list)
    include_base_components: bool = False


@dataclass
class ConversionReadinessResponse:
    """Readiness of one component."""

    component_id: str
    found: bool
    can_convert: bool
    blocked_by: list[str] = field(default_factory=list)
