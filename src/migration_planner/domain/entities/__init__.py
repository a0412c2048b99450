"""Domain entities - Core business objects."""

from migration_planner.domain.entities.component import (
    CONVERTIBLE_KINDS,
    ComponentAnalysis,
    ComponentKind,
    DependencyKind,
    RawDependency,
    extract_component_name,
    infer_component_kind,
    parse_dependency_kind,
)
from migration_planner.domain.entities.conversion_order import (
    ConversionOrderResult,
    ConversionReadiness,
    ConversionWave,
    WaveEffort,
)
from migration_planner.domain.entities.dependency_graph import (
    DependencyEdge,
    DependencyGraph,
    DependencyNode,
    EdgeMetadata,
    GraphStats,
    SkippedDependency,
)

__all__ = [
    # Component input model
    "ComponentAnalysis",
    "ComponentKind",
    "DependencyKind",
    "RawDependency",
    "CONVERTIBLE_KINDS",
    "infer_component_kind",
    "extract_component_name",
    "parse_dependency_kind",
    # Graph
    "DependencyGraph",
    "DependencyNode",
    "DependencyEdge",
    "EdgeMetadata",
    "GraphStats",
    "SkippedDependency",
    # Conversion order
    "ConversionOrderResult",
    "ConversionWave",
    "ConversionReadiness",
    "WaveEffort",
]
