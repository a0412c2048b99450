"""Domain services - Business logic that doesn't fit in entities."""

from migration_planner.domain.services.circular_dependency_detector import (
    CircularDependencyDetector,
)
from migration_planner.domain.services.conversion_order_calculator import (
    ConversionOrderCalculator,
)
from migration_planner.domain.services.graph_builder import GraphBuilder
from migration_planner.domain.services.graph_filter_service import GraphFilterService
from migration_planner.domain.services.graph_traversal_service import (
    GraphTraversalService,
    TraversalDirection,
)

__all__ = [
    "CircularDependencyDetector",
    "GraphBuilder",
    "GraphFilterService",
    "GraphTraversalService",
    "TraversalDirection",
    "ConversionOrderCalculator",
]
