"""Application layer DTOs.

This package contains data transfer objects (DTOs) for the application layer.
Uses dataclasses (not Pydantic) per Clean Architecture principles.
"""

from migration_planner.application.dtos.common import GraphStatisticsDTO
from migration_planner.application.dtos.conversion_order_dto import (
    ConversionOrderResponse,
    ConversionReadinessRequest,
    ConversionReadinessResponse,
    ConversionWaveDTO,
)
from migration_planner.application.dtos.dependency_analysis_dto import (
    ComponentAnalysisDTO,
    DependencyAnalysisRequest,
    RawDependencyDTO,
)
from migration_planner.application.dtos.dependency_graph_dto import (
    DependencyEdgeDTO,
    DependencyGraphResponse,
    DependencyNodeDTO,
)

__all__ = [
    # Common
    "GraphStatisticsDTO",
    # Analysis input
    "RawDependencyDTO",
    "ComponentAnalysisDTO",
    "DependencyAnalysisRequest",
    # Graph view
    "DependencyNodeDTO",
    "DependencyEdgeDTO",
    "DependencyGraphResponse",
    # Conversion order
    "ConversionWaveDTO",
    "ConversionOrderResponse",
    "ConversionReadinessRequest",
    "ConversionReadinessResponse",
]
